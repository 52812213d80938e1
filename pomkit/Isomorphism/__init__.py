"""
Isomorphism testing for Petri nets.

Re-exported classes
-------------------
- :class:`~pomkit.Isomorphism.mapping_manager.MappingManager`
- :class:`~pomkit.Isomorphism.petri_net_isomorphism.PetriNetIsomorphismTester`
"""

from __future__ import annotations
from typing import List

from .mapping_manager import MappingManager
from .petri_net_isomorphism import PetriNetIsomorphismTester

__all__: List[str] = ["MappingManager", "PetriNetIsomorphismTester"]
