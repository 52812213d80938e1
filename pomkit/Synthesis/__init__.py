"""
Log-to-partial-order synthesis pipeline.

Re-exported classes
-------------------
- :class:`~pomkit.Synthesis.log_to_partial_order.LogToPartialOrderTransformer`
- :class:`~pomkit.Synthesis.log_to_partial_order.LogToPartialOrderConfig`
- :class:`~pomkit.Synthesis.sequence_merger.TraceMerger`
"""

from __future__ import annotations
from typing import List

from .boundary import (
    START_SYMBOL,
    STOP_SYMBOL,
    add_start_and_stop_event,
    remove_start_and_stop_event,
)
from .sequence_merger import TraceMerger, convert_log_to_petri_net_sequences
from .relaxation import convert_sequence_to_partial_order
from .transitive_reduction import (
    compute_necessary_successors,
    perform_transitive_reduction,
    reverse_topological_transition_ordering,
)
from .log_to_partial_order import (
    LogToPartialOrderConfig,
    LogToPartialOrderTransformer,
    filter_and_combine_partial_order_nets,
)

__all__: List[str] = [
    "START_SYMBOL",
    "STOP_SYMBOL",
    "add_start_and_stop_event",
    "remove_start_and_stop_event",
    "TraceMerger",
    "convert_log_to_petri_net_sequences",
    "convert_sequence_to_partial_order",
    "compute_necessary_successors",
    "perform_transitive_reduction",
    "reverse_topological_transition_ordering",
    "LogToPartialOrderConfig",
    "LogToPartialOrderTransformer",
    "filter_and_combine_partial_order_nets",
]
