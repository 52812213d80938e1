# Net/partial_order_net.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..Log.eventlog import EventlogTrace
from .petri_net import PetriNet


@dataclass
class PartialOrderNetWithContainedTraces:
    """
    A partial-order net together with the traces it represents.

    Places encode precedence between transitions; fan-in and fan-out are
    allowed. When isomorphic duplicates are merged, the traces of the
    duplicate are appended to :attr:`contained_traces` and its frequency is
    added to ``net.frequency``.

    :param net: The partial-order net.
    :type net: PetriNet
    :param contained_traces: Traces represented by ``net``.
    :type contained_traces: List[EventlogTrace]
    """

    net: PetriNet
    contained_traces: List[EventlogTrace] = field(default_factory=list)

    @property
    def frequency(self) -> Optional[int]:
        return self.net.frequency

    def absorb(self, other: PartialOrderNetWithContainedTraces) -> None:
        """Merge ``other``, assumed isomorphic to this net, into this one."""
        self.net.frequency = (self.net.frequency or 0) + (other.net.frequency or 0)
        self.contained_traces.extend(other.contained_traces)

    def __repr__(self) -> str:
        return (
            f"PartialOrderNetWithContainedTraces(net={self.net!r}, "
            f"traces={len(self.contained_traces)})"
        )
