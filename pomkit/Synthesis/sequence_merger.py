# Synthesis/sequence_merger.py
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from ..exceptions import UnreachableError
from ..Log.eventlog import EventlogTrace
from ..Log.prefix_tree import PrefixTree, PrefixTreeNode
from ..Net.sequence import PetriNetSequence

logger = logging.getLogger(__name__)


class TraceMerger:
    """
    Deduplicate traces into sequential nets by sharing prefixes.

    Every node of a :class:`~pomkit.Log.prefix_tree.PrefixTree` carries the
    :class:`PetriNetSequence` of its prefix; a new branch clones its parent's
    sequence and appends one event. A trace ending at a node increments that
    sequence's frequency and is recorded in its ``contained_traces``.

    :param discard_prefixes: Drop traces that are strict prefixes of other
        traces instead of keeping them as separate sequences.
    :type discard_prefixes: bool
    """

    def __init__(self, discard_prefixes: bool = False) -> None:
        self.discard_prefixes = bool(discard_prefixes)
        self._live: Dict[PetriNetSequence, None] = {}
        self._current: Optional[EventlogTrace] = None

    def merge(self, log: Iterable[EventlogTrace]) -> List[PetriNetSequence]:
        """
        :param log: Traces to merge; their labels drive the prefix tree.
        :type log: Iterable[EventlogTrace]
        :returns: One sequence per distinct (maximal) trace, first-seen order.
        :rtype: List[PetriNetSequence]
        """
        self._live = {}
        tree: PrefixTree[PetriNetSequence] = PrefixTree(PetriNetSequence())
        for trace in log:
            self._current = trace
            tree.insert(
                trace.labels(),
                self._new_end_node,
                self._update_end_node,
                self._discard_passed_node if self.discard_prefixes else None,
                self._new_step_node,
            )
        self._current = None
        logger.debug("Merged log into %d sequences", len(self._live))
        return list(self._live)

    # ------------------------------------------------------------------
    # Prefix-tree callbacks
    # ------------------------------------------------------------------
    def _new_end_node(self, tree_node: PrefixTreeNode[PetriNetSequence]) -> PetriNetSequence:
        raise UnreachableError(
            "Every prefix-tree node receives a sequence while its path is built"
        )

    def _update_end_node(
        self, node: PetriNetSequence, tree_node: PrefixTreeNode[PetriNetSequence]
    ) -> None:
        if self.discard_prefixes and tree_node.has_children():
            self._drop(node)
            return
        node.net.frequency = 1 if node.net.frequency is None else node.net.frequency + 1
        node.contained_traces.append(self._current)
        self._live[node] = None

    def _discard_passed_node(
        self,
        step: str,
        node: Optional[PetriNetSequence],
        tree_node: PrefixTreeNode[PetriNetSequence],
    ) -> None:
        if tree_node.has_children() and node is not None:
            self._drop(node)

    @staticmethod
    def _new_step_node(
        step: str, prefix: List[str], previous: Optional[PetriNetSequence]
    ) -> PetriNetSequence:
        result = previous.clone()
        result.append_event(step)
        return result

    def _drop(self, node: PetriNetSequence) -> None:
        node.net.frequency = 0
        node.contained_traces.clear()
        self._live.pop(node, None)


def convert_log_to_petri_net_sequences(
    log: Iterable[EventlogTrace], discard_prefixes: bool = False
) -> List[PetriNetSequence]:
    """Functional wrapper around :meth:`TraceMerger.merge`."""
    return TraceMerger(discard_prefixes).merge(log)
