# Concurrency/relation.py
from __future__ import annotations

from typing import Iterable, Optional, Set, Tuple

from .relabeler import Relabeler


class ConcurrencyRelation:
    """
    Directed concurrency relation over event labels.

    The relation is not assumed to be symmetric: ``is_concurrent(a, b)`` and
    ``is_concurrent(b, a)`` are answered independently. Discovering the
    relation from a log is out of scope; it is filled with
    :meth:`set_concurrent` or :meth:`from_pairs`.

    A label the relation has never seen is resolved through :attr:`relabeler`
    to its original label before lookup, so a relation stated over original
    labels keeps answering for relabeled repeated occurrences.

    :param relabeler: Relabeler shared with the synthesis pipeline. A fresh
        one is created when omitted.
    :type relabeler: Optional[Relabeler]

    Examples
    --------
    .. code-block:: python

        rel = ConcurrencyRelation.from_pairs([("b", "c")], symmetric=True)
        rel.is_concurrent("c", "b")  # True
    """

    def __init__(self, relabeler: Optional[Relabeler] = None) -> None:
        self._relabeler = relabeler if relabeler is not None else Relabeler()
        self._pairs: Set[Tuple[str, str]] = set()
        self._labels: Set[str] = set()

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[Tuple[str, str]],
        *,
        symmetric: bool = False,
        relabeler: Optional[Relabeler] = None,
    ) -> ConcurrencyRelation:
        """
        Build a relation from ``(a, b)`` pairs meaning "a is concurrent to b".

        :param pairs: Directed label pairs.
        :param symmetric: Also add ``(b, a)`` for every pair.
        :param relabeler: Optional shared relabeler.
        :returns: The relation.
        :rtype: ConcurrencyRelation
        """
        rel = cls(relabeler)
        for a, b in pairs:
            rel.set_concurrent(a, b)
            if symmetric:
                rel.set_concurrent(b, a)
        return rel

    @property
    def relabeler(self) -> Relabeler:
        return self._relabeler

    def set_concurrent(self, label_a: str, label_b: str) -> None:
        self._pairs.add((label_a, label_b))
        self._labels.update((label_a, label_b))

    def is_concurrent(self, label_a: str, label_b: str) -> bool:
        """
        Whether ``label_a`` may occur concurrently to ``label_b``.

        Two distinct occurrence identities of the same original label are
        never concurrent, even if the relation declares the label concurrent
        to itself.
        """
        resolved_a = self._resolve(label_a)
        resolved_b = self._resolve(label_b)
        if label_a != label_b and resolved_a == resolved_b:
            return False
        return (resolved_a, resolved_b) in self._pairs

    def concurrent_pairs(self) -> Set[Tuple[str, str]]:
        return set(self._pairs)

    def _resolve(self, label: str) -> str:
        if label in self._labels:
            return label
        return self._relabeler.original_label(label)

    def __len__(self) -> int:
        return len(self._pairs)

    def __repr__(self) -> str:
        return f"ConcurrencyRelation(pairs={len(self._pairs)})"
