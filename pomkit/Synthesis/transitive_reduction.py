"""
Transitive reduction of partial-order nets.

Implements "Algorithm A" from K. Simon, "An improved algorithm for transitive
closure on acyclic digraphs", TCS 58 (1988). Transitions are processed in
reverse topological order while their descendant sets are built
incrementally; a direct successor that is already a descendant through a
closer successor is redundant. Places encode
the edges, so removing a redundant edge means removing its place.

The reverse topological order is a depth-first postorder over the transition
successor graph, computed with networkx so that long traces do not run into
the recursion limit.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Set

import networkx as nx

from ..Net.analysis import transition_graph
from ..Net.node import Transition
from ..Net.petri_net import PetriNet
from .boundary import STOP_SYMBOL

logger = logging.getLogger(__name__)

__all__ = [
    "reverse_topological_transition_ordering",
    "compute_necessary_successors",
    "perform_transitive_reduction",
]


def _child_ids(transition: Transition) -> List[str]:
    return [
        b.destination_id
        for a in transition.outgoing_arcs
        for b in a.destination.outgoing_arcs
    ]


def reverse_topological_transition_ordering(net: PetriNet) -> List[Transition]:
    """
    Transitions of ``net`` in reverse topological order: transitions at the
    front of the list appear later in the net.

    :param net: Acyclic partial-order net.
    :type net: PetriNet
    :returns: Transitions in depth-first postorder; start nodes and
        successors are visited in net insertion order.
    :rtype: List[Transition]
    """
    G = transition_graph(net)
    return [net.get_transition(tid) for tid in nx.dfs_postorder_nodes(G)]


def compute_necessary_successors(net: PetriNet) -> Dict[str, Set[str]]:
    """
    Direct successors of every transition that are not implied by a longer
    path.

    Children are processed by descending reverse-order index, i.e. closest
    first, so a farther child already reached through a closer one is never
    recorded.

    :param net: Acyclic partial-order net.
    :type net: PetriNet
    :returns: Transition id -> ids of its non-redundant direct successors.
    :rtype: Dict[str, Set[str]]
    """
    order = reverse_topological_transition_ordering(net)
    reverse_index = {t.id: i for i, t in enumerate(order)}
    descendants: Dict[str, Set[str]] = defaultdict(set)
    necessary: Dict[str, Set[str]] = defaultdict(set)

    for t in order:
        reached = descendants[t.id]
        reached.add(t.id)
        children = sorted(
            _child_ids(t), key=lambda cid: reverse_index[cid], reverse=True
        )
        for child_id in children:
            if child_id not in reached:
                reached |= descendants[child_id]
                necessary[t.id].add(child_id)
    return necessary


def perform_transitive_reduction(
    net: PetriNet, stop_label: Optional[str] = STOP_SYMBOL
) -> int:
    """
    Remove every place that encodes a transitively implied precedence, and
    every parallel duplicate of a kept one.

    :param net: Acyclic partial-order net whose internal places have exactly
        one ingoing and one outgoing arc.
    :type net: PetriNet
    :param stop_label: Label of the designated stop transition, whose
        outgoing side is never inspected.
    :type stop_label: Optional[str]
    :returns: Number of removed places.
    :rtype: int
    """
    necessary = compute_necessary_successors(net)

    removed = 0
    for t in net.get_transitions():
        if stop_label is not None and t.label == stop_label:
            continue
        kept: Set[str] = set()
        for arc in list(t.outgoing_arcs):
            place = arc.destination
            if not place.outgoing_arcs:
                continue
            successor_id = place.outgoing_arcs[0].destination_id
            # a second place towards the same successor is a duplicate edge
            if successor_id not in necessary[t.id] or successor_id in kept:
                net.remove_place(place)
                removed += 1
            else:
                kept.add(successor_id)

    logger.debug("Transitive reduction removed %d places from %r", removed, net)
    return removed
