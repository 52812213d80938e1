"""
pomkit: synthesis of partial-order Petri nets from event logs.

Re-exported classes
-------------------
- :class:`~pomkit.Log.eventlog.Eventlog`
- :class:`~pomkit.Net.petri_net.PetriNet`
- :class:`~pomkit.Concurrency.relation.ConcurrencyRelation`
- :class:`~pomkit.Isomorphism.petri_net_isomorphism.PetriNetIsomorphismTester`
- :class:`~pomkit.Synthesis.log_to_partial_order.LogToPartialOrderTransformer`
"""

from __future__ import annotations
from typing import List

from .version import __version__
from .exceptions import (
    PomkitError,
    IllegalStateError,
    NotAPartialOrderError,
    UnreachableError,
)
from .Log import Eventlog, EventlogTrace, EventlogEvent
from .Net import (
    Place,
    Transition,
    Arc,
    PetriNet,
    PetriNetSequence,
    PartialOrderNetWithContainedTraces,
)
from .Concurrency import ConcurrencyRelation, Relabeler
from .Isomorphism import MappingManager, PetriNetIsomorphismTester
from .Synthesis import LogToPartialOrderConfig, LogToPartialOrderTransformer
from .api import log_to_partial_orders

__all__: List[str] = [
    "__version__",
    "PomkitError",
    "IllegalStateError",
    "NotAPartialOrderError",
    "UnreachableError",
    "Eventlog",
    "EventlogTrace",
    "EventlogEvent",
    "Place",
    "Transition",
    "Arc",
    "PetriNet",
    "PetriNetSequence",
    "PartialOrderNetWithContainedTraces",
    "ConcurrencyRelation",
    "Relabeler",
    "MappingManager",
    "PetriNetIsomorphismTester",
    "LogToPartialOrderConfig",
    "LogToPartialOrderTransformer",
    "log_to_partial_orders",
]
