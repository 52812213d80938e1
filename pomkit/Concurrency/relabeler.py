# Concurrency/relabeler.py
from __future__ import annotations

import threading
from collections import Counter
from typing import Any, Dict, Iterable, List, Set


class Relabeler:
    """
    Give repeated labels within a sequence distinct, invertible identities.

    Labels may legitimately repeat inside one trace (loops, rework). Algorithms
    keyed on labels would then treat two occurrences as the same activity, so
    before synthesis every repeated occurrence is renamed:

    * the first occurrence of a label in a sequence keeps the label,
    * the k-th occurrence (``k >= 2``) becomes ``label + "#" + k``; extra ``#``
      are appended if that name is already in use.

    The k-th occurrence receives the same identity in every sequence, so
    identities that were equal across traces stay equal. The relabeler keeps
    the identity -> original table needed to undo the renaming later.

    Items are any objects exposing a writable ``label`` attribute, e.g.
    :class:`~pomkit.Log.eventlog.EventlogEvent` or
    :class:`~pomkit.Net.node.Transition`.
    """

    SEPARATOR = "#"

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._known_labels: Set[str] = set()
        self._label_mapping: Dict[str, str] = {}
        self._occurrence_labels: Dict[str, List[str]] = {}

    @property
    def label_mapping(self) -> Dict[str, str]:
        """Copy of the identity -> original label table."""
        with self._lock:
            return dict(self._label_mapping)

    def original_label(self, label: str) -> str:
        """Original label of ``label``; unknown labels map to themselves."""
        with self._lock:
            return self._label_mapping.get(label, label)

    def relabel_sequences_preserve_non_unique_identities(
        self, sequences: Iterable[Iterable[Any]]
    ) -> None:
        """
        Rename repeated occurrences in place.

        :param sequences: Sequences of items with a writable ``label``.
        :type sequences: Iterable[Iterable[Any]]
        """
        materialized = [list(seq) for seq in sequences]
        with self._lock:
            for seq in materialized:
                self._known_labels.update(item.label for item in seq)
            for seq in materialized:
                seen: Counter = Counter()
                for item in seq:
                    original = item.label
                    occurrence = seen[original]
                    seen[original] += 1
                    if occurrence == 0:
                        continue
                    identities = self._occurrence_labels.setdefault(
                        original, [original]
                    )
                    while len(identities) <= occurrence:
                        identities.append(
                            self._new_label(original, len(identities) + 1)
                        )
                    item.label = identities[occurrence]

    def undo_sequences_labeling(self, sequences: Iterable[Iterable[Any]]) -> None:
        """
        Restore original labels in place; labels the relabeler never produced
        are left untouched.

        :param sequences: Sequences of items with a writable ``label``.
        :type sequences: Iterable[Iterable[Any]]
        """
        for seq in sequences:
            for item in seq:
                item.label = self.original_label(item.label)

    def _new_label(self, original: str, occurrence: int) -> str:
        candidate = f"{original}{self.SEPARATOR}{occurrence}"
        while candidate in self._known_labels:
            candidate += self.SEPARATOR
        self._known_labels.add(candidate)
        self._label_mapping[candidate] = original
        return candidate
