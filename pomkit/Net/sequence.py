# Net/sequence.py
from __future__ import annotations

from typing import List, Optional

from ..Log.eventlog import EventlogEvent, EventlogTrace
from .node import Place
from .petri_net import PetriNet


class PetriNetSequence:
    """
    A strictly sequential net paired with the trace it encodes.

    The cursor :attr:`last_place` always points at the terminal place of the
    chain; appending a transition extends the chain behind it.

    :attr:`contained_traces` collects the log traces whose label sequence
    ends at this sequence. It is filled while merging a log. Neither it nor
    the net frequency is carried over by :meth:`clone`, because a clone
    represents a different trace.
    """

    def __init__(self) -> None:
        self._net = PetriNet()
        self._last_place: Place = self._net.add_place()
        self._trace = EventlogTrace()
        self.contained_traces: List[EventlogTrace] = []

    @property
    def net(self) -> PetriNet:
        return self._net

    @property
    def trace(self) -> EventlogTrace:
        return self._trace

    @property
    def last_place(self) -> Place:
        return self._last_place

    @property
    def frequency(self) -> Optional[int]:
        return self._net.frequency

    def clone(self) -> PetriNetSequence:
        """
        Independent deep copy; the cursor of the copy is looked up by id in the
        copied net. The copy starts without a frequency.

        :returns: The copy.
        :rtype: PetriNetSequence
        """
        result = PetriNetSequence()
        result._net = self._net.clone()
        result._net.frequency = None
        result._last_place = result._net.get_place(self._last_place.id)
        result._trace = self._trace.clone()
        return result

    def append_event(self, label: str) -> None:
        self._trace.events.append(EventlogEvent(label))
        self.append_transition(label)

    def append_transition(self, label: str) -> None:
        t = self._net.add_transition(label)
        self._net.add_arc(self._last_place, t)
        self._last_place = self._net.add_place()
        self._net.add_arc(t, self._last_place)

    def __repr__(self) -> str:
        return (
            f"PetriNetSequence(labels={self._trace.labels()}, "
            f"frequency={self._net.frequency})"
        )
