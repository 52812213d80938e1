"""
Canonical partial-order view of Petri nets and its isomorphism oracle.

Re-exported classes
-------------------
- :class:`~pomkit.PartialOrder.partial_order.PartialOrder`
- :class:`~pomkit.PartialOrder.transformer.PetriNetToPartialOrderTransformer`
- :class:`~pomkit.PartialOrder.isomorphism.PartialOrderIsomorphismTester`
"""

from __future__ import annotations
from typing import List

from .partial_order import Event, PartialOrder
from .transformer import PetriNetToPartialOrderTransformer
from .isomorphism import PartialOrderIsomorphismTester

__all__: List[str] = [
    "Event",
    "PartialOrder",
    "PetriNetToPartialOrderTransformer",
    "PartialOrderIsomorphismTester",
]
