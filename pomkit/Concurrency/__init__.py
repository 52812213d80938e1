"""
Concurrency relation consumed by the synthesis pipeline.

Re-exported classes
-------------------
- :class:`~pomkit.Concurrency.relation.ConcurrencyRelation`
- :class:`~pomkit.Concurrency.relabeler.Relabeler`
"""

from __future__ import annotations
from typing import List

from .relabeler import Relabeler
from .relation import ConcurrencyRelation

__all__: List[str] = ["Relabeler", "ConcurrencyRelation"]
