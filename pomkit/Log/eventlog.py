# Log/eventlog.py
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence

LIFECYCLE_KEY = "lifecycle:transition"


@dataclass
class EventlogEvent:
    """
    A single event of a trace.

    :param label: Activity label.
    :type label: str
    :param attributes: Free-form event attributes (XES keys such as
        ``lifecycle:transition`` or ``time:timestamp``).
    :type attributes: Dict[str, Any]
    """

    label: str
    attributes: Dict[str, Any] = field(default_factory=dict)

    @property
    def lifecycle(self) -> Optional[str]:
        value = self.attributes.get(LIFECYCLE_KEY)
        return None if value is None else str(value)

    def clone(self) -> EventlogEvent:
        return EventlogEvent(self.label, copy.deepcopy(self.attributes))


@dataclass
class EventlogTrace:
    """
    Ordered sequence of events representing one process execution.

    :param events: Events in execution order.
    :type events: List[EventlogEvent]
    :param attributes: Trace-level attributes.
    :type attributes: Dict[str, Any]
    :param case_id: Optional case identifier.
    :type case_id: Optional[Any]
    """

    events: List[EventlogEvent] = field(default_factory=list)
    attributes: Dict[str, Any] = field(default_factory=dict)
    case_id: Optional[Any] = None

    @classmethod
    def from_labels(
        cls, labels: Iterable[str], case_id: Optional[Any] = None
    ) -> EventlogTrace:
        return cls([EventlogEvent(str(label)) for label in labels], case_id=case_id)

    def labels(self) -> List[str]:
        return [e.label for e in self.events]

    def clone(self) -> EventlogTrace:
        return EventlogTrace(
            [e.clone() for e in self.events],
            copy.deepcopy(self.attributes),
            self.case_id,
        )

    def __iter__(self) -> Iterator[EventlogEvent]:
        return iter(self.events)

    def __len__(self) -> int:
        return len(self.events)

    def __repr__(self) -> str:
        return f"EventlogTrace(case_id={self.case_id!r}, labels={self.labels()})"


@dataclass
class Eventlog:
    """
    An event log: ordered collection of traces.

    Typical usage::

        log = Eventlog.from_sequences([["a", "b", "c"], ["a", "c", "b"]])
        len(log)  # 2
    """

    traces: List[EventlogTrace] = field(default_factory=list)
    attributes: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_sequences(cls, sequences: Iterable[Sequence[str]]) -> Eventlog:
        """
        Build a log from label sequences; case ids are the sequence indices.

        :param sequences: One label sequence per trace.
        :type sequences: Iterable[Sequence[str]]
        :returns: The event log.
        :rtype: Eventlog
        """
        return cls(
            [
                EventlogTrace.from_labels(seq, case_id=i)
                for i, seq in enumerate(sequences)
            ]
        )

    def __iter__(self) -> Iterator[EventlogTrace]:
        return iter(self.traces)

    def __len__(self) -> int:
        return len(self.traces)
