"""
Read-only structural views of a :class:`~pomkit.Net.petri_net.PetriNet`.

In a partial-order net places encode precedence edges between transitions.
The helpers here collapse the place layer into a plain successor graph over
transitions and derive properties from it:

* :func:`transition_graph`: networkx ``DiGraph`` of direct successors,
* :func:`reachability_matrix`: numpy boolean transitive closure,
* :func:`is_transitively_reduced`: no precedence edge implied by a longer path,
* :func:`has_redundant_concurrent_place`: an ordering place between two
  mutually concurrent transitions survived.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Iterable, List, Tuple

import networkx as nx
import numpy as np

from .petri_net import PetriNet

__all__ = [
    "transition_graph",
    "precedence_pairs",
    "reachability_matrix",
    "is_transitively_reduced",
    "has_redundant_concurrent_place",
]


def precedence_pairs(net: PetriNet) -> List[Tuple[str, str]]:
    """
    List ``(pre_id, post_id)`` for every place path ``pre -> place -> post``.

    Parallel places produce repeated pairs.

    :param net: Net to inspect.
    :type net: PetriNet
    :returns: Transition id pairs in net insertion order.
    :rtype: List[Tuple[str, str]]
    """
    pairs: List[Tuple[str, str]] = []
    for t in net.get_transitions():
        for a in t.outgoing_arcs:
            for b in a.destination.outgoing_arcs:
                pairs.append((t.id, b.destination_id))
    return pairs


def transition_graph(net: PetriNet) -> nx.DiGraph:
    """
    Collapse the place layer of ``net`` into a successor graph over transitions.

    Nodes are transition ids (insertion order) with a ``label`` attribute;
    edges connect every transition to the transitions reachable through one
    place.

    :param net: Net to convert.
    :type net: PetriNet
    :returns: Directed successor graph.
    :rtype: networkx.DiGraph
    """
    G = nx.DiGraph()
    for t in net.get_transitions():
        G.add_node(t.id, label=t.label)
    G.add_edges_from(precedence_pairs(net))
    return G


def reachability_matrix(net: PetriNet) -> Tuple[List[str], np.ndarray]:
    """
    Strict transitive closure of the transition successor relation.

    Entry ``[i, j]`` is ``True`` iff transition ``ids[j]`` is reachable from
    ``ids[i]`` through at least one place. Computed with Warshall's algorithm
    on a boolean matrix.

    :param net: Net to analyse.
    :type net: PetriNet
    :returns: Ordered transition ids and the ``(n, n)`` boolean matrix.
    :rtype: Tuple[List[str], numpy.ndarray]
    """
    ids = [t.id for t in net.get_transitions()]
    index = {tid: i for i, tid in enumerate(ids)}
    R = np.zeros((len(ids), len(ids)), dtype=bool)
    for pre, post in precedence_pairs(net):
        R[index[pre], index[post]] = True
    for k in range(len(ids)):
        R |= np.outer(R[:, k], R[k, :])
    return ids, R


def is_transitively_reduced(net: PetriNet) -> bool:
    """
    Check that no precedence place is implied by a longer path and that no two
    places encode the same precedence pair.

    :param net: Acyclic partial-order net.
    :type net: PetriNet
    :returns: ``True`` if the net is transitively reduced.
    :rtype: bool
    """
    pairs = precedence_pairs(net)
    if any(count > 1 for count in Counter(pairs).values()):
        return False
    ids, R = reachability_matrix(net)
    index = {tid: i for i, tid in enumerate(ids)}
    A = np.zeros_like(R)
    for pre, post in pairs:
        A[index[pre], index[post]] = True
    implied = (A.astype(np.int64) @ R.astype(np.int64)) > 0
    return not bool(np.any(A & implied))


def has_redundant_concurrent_place(
    net: PetriNet, relation: Any, ignore_labels: Iterable[str] = ()
) -> bool:
    """
    Detect a place whose two adjacent transitions are mutually concurrent.

    :param net: Net to inspect.
    :type net: PetriNet
    :param relation: Object exposing ``is_concurrent(label_a, label_b)``.
    :type relation: Any
    :param ignore_labels: Labels (e.g. boundary symbols) whose places are not
        checked.
    :type ignore_labels: Iterable[str]
    :returns: ``True`` if such a place exists.
    :rtype: bool
    """
    ignored = set(ignore_labels)
    for p in net.get_places():
        if len(p.ingoing_arcs) != 1 or len(p.outgoing_arcs) != 1:
            continue
        pre = p.ingoing_arcs[0].source.label
        post = p.outgoing_arcs[0].destination.label
        if pre in ignored or post in ignored or pre == post:
            continue
        if relation.is_concurrent(pre, post) and relation.is_concurrent(post, pre):
            return True
    return False
