# Isomorphism/mapping_manager.py
from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Mapping


class _MappingCounter:
    """One digit of the odometer: a source id and its candidate targets."""

    __slots__ = ("source", "candidates", "index")

    def __init__(self, source: str, candidates: List[str]) -> None:
        self.source = source
        self.candidates = candidates
        self.index = 0

    @property
    def current(self) -> str:
        return self.candidates[self.index]

    def next(self) -> bool:
        """Advance by one; return ``True`` on overflow (reset to zero)."""
        self.index += 1
        if self.index >= len(self.candidates):
            self.index = 0
            return True
        return False


class MappingManager:
    """
    Mixed-radix enumerator over per-source candidate sets.

    Every source id owns one digit whose radix is the size of its candidate
    set. :meth:`move_to_next_mapping` advances the last digit and propagates
    carries to the left, so all combinations are visited exactly once in a
    deterministic order before the counter wraps back to the first one.

    :param possible_mappings: Source id -> viable target ids. Every candidate
        collection must be non-empty. Sets are sorted to fix the order.
    :type possible_mappings: Mapping[str, Iterable[str]]
    :raises ValueError: If a source has no candidate.

    Examples
    --------
    .. code-block:: python

        mm = MappingManager({"x": ["1", "2"], "y": ["3"]})
        [m for m in mm]
        # [{'x': '1', 'y': '3'}, {'x': '2', 'y': '3'}]
    """

    def __init__(self, possible_mappings: Mapping[str, Iterable[str]]) -> None:
        self._counters: List[_MappingCounter] = []
        for source, targets in possible_mappings.items():
            candidates = (
                sorted(targets) if isinstance(targets, (set, frozenset)) else list(targets)
            )
            if not candidates:
                raise ValueError(f"Source {source!r} has no candidate target")
            self._counters.append(_MappingCounter(source, candidates))

    def get_current_mapping(self) -> Dict[str, str]:
        return {c.source: c.current for c in self._counters}

    def move_to_next_mapping(self) -> bool:
        """
        Advance to the next combination.

        :returns: ``True`` if every digit overflowed, i.e. the enumeration is
            exhausted and the counter is back at the first combination.
        :rtype: bool
        """
        carry = True
        index = len(self._counters) - 1
        while carry and index >= 0:
            carry = self._counters[index].next()
            index -= 1
        return carry

    def reset(self) -> None:
        for c in self._counters:
            c.index = 0

    def combination_count(self) -> int:
        total = 1
        for c in self._counters:
            total *= len(c.candidates)
        return total

    def __iter__(self) -> Iterator[Dict[str, str]]:
        self.reset()
        done = False
        while not done:
            yield self.get_current_mapping()
            done = self.move_to_next_mapping()

    def __len__(self) -> int:
        return len(self._counters)
