"""
Graph model shared by every algorithm in :mod:`pomkit`.

Re-exported classes
-------------------
- :class:`~pomkit.Net.node.Place`
- :class:`~pomkit.Net.node.Transition`
- :class:`~pomkit.Net.arc.Arc`
- :class:`~pomkit.Net.petri_net.PetriNet`
- :class:`~pomkit.Net.sequence.PetriNetSequence`
- :class:`~pomkit.Net.partial_order_net.PartialOrderNetWithContainedTraces`
"""

from __future__ import annotations
from typing import List

from .node import Place, Transition
from .arc import Arc, ArcKind
from .petri_net import PetriNet
from .sequence import PetriNetSequence
from .partial_order_net import PartialOrderNetWithContainedTraces

__all__: List[str] = [
    "Place",
    "Transition",
    "Arc",
    "ArcKind",
    "PetriNet",
    "PetriNetSequence",
    "PartialOrderNetWithContainedTraces",
]
