"""
Event-log model and the log-side helpers used before synthesis.

Re-exported classes
-------------------
- :class:`~pomkit.Log.eventlog.Eventlog`
- :class:`~pomkit.Log.eventlog.EventlogTrace`
- :class:`~pomkit.Log.eventlog.EventlogEvent`
- :class:`~pomkit.Log.cleaner.LogCleaner`
- :class:`~pomkit.Log.prefix_tree.PrefixTree`
"""

from __future__ import annotations
from typing import List

from .eventlog import Eventlog, EventlogTrace, EventlogEvent, LIFECYCLE_KEY
from .cleaner import LogCleaner
from .prefix_tree import PrefixTree, PrefixTreeNode

__all__: List[str] = [
    "Eventlog",
    "EventlogTrace",
    "EventlogEvent",
    "LIFECYCLE_KEY",
    "LogCleaner",
    "PrefixTree",
    "PrefixTreeNode",
]
