# PartialOrder/isomorphism.py
from __future__ import annotations

from collections import Counter

from networkx.algorithms.isomorphism import DiGraphMatcher, categorical_node_match

from .partial_order import PartialOrder


class PartialOrderIsomorphismTester:
    """
    Label-preserving isomorphism test for partial orders.

    Cheap invariants (event count, edge count, label multiset) are compared
    first; the remaining candidates are matched with networkx'
    :class:`~networkx.algorithms.isomorphism.DiGraphMatcher` using a
    categorical match on the ``label`` node attribute.
    """

    def __init__(self) -> None:
        self._node_match = categorical_node_match("label", None)

    def are_partial_orders_isomorphic(
        self, partial_order_a: PartialOrder, partial_order_b: PartialOrder
    ) -> bool:
        if len(partial_order_a) != len(partial_order_b):
            return False
        if partial_order_a.edge_count() != partial_order_b.edge_count():
            return False
        if Counter(e.label for e in partial_order_a) != Counter(
            e.label for e in partial_order_b
        ):
            return False

        matcher = DiGraphMatcher(
            partial_order_a.to_digraph(),
            partial_order_b.to_digraph(),
            node_match=self._node_match,
        )
        return matcher.is_isomorphic()
