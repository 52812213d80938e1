"""
Isomorphism tests for Petri nets.

Two entry points are provided by :class:`PetriNetIsomorphismTester`:

* :meth:`~PetriNetIsomorphismTester.are_partial_order_petri_nets_isomorphic`
  for acyclic single-source/sink partial-order nets. After a cheap filter on
  basic counts the nets are converted to :class:`~pomkit.PartialOrder.
  partial_order.PartialOrder` views and handed to the partial-order oracle.

* :meth:`~PetriNetIsomorphismTester.are_petri_nets_isomorphic` for arbitrary
  place/transition graphs. Candidate targets are pre-filtered by label,
  marking and degree; the remaining combinations are enumerated with two
  :class:`~pomkit.Isomorphism.mapping_manager.MappingManager` odometers and
  every bijective combination is verified arc by arc.

The general search is exponential in the worst case (product of the
candidate-set sizes); label and degree filtering keeps it small for process
models, where few transitions share a label.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ..Net.arc import ArcKind
from ..Net.petri_net import PetriNet
from ..PartialOrder.isomorphism import PartialOrderIsomorphismTester
from ..PartialOrder.transformer import PetriNetToPartialOrderTransformer
from .mapping_manager import MappingManager

logger = logging.getLogger(__name__)

__all__ = ["PetriNetIsomorphismTester"]


class PetriNetIsomorphismTester:
    """
    :param pn_to_po_transformer: Adapter from partial-order nets to
        :class:`PartialOrder` views. Defaults to
        :class:`PetriNetToPartialOrderTransformer`.
    :type pn_to_po_transformer: Optional[PetriNetToPartialOrderTransformer]
    :param po_isomorphism: Partial-order isomorphism oracle. Defaults to
        :class:`PartialOrderIsomorphismTester`.
    :type po_isomorphism: Optional[PartialOrderIsomorphismTester]
    """

    def __init__(
        self,
        pn_to_po_transformer: Optional[PetriNetToPartialOrderTransformer] = None,
        po_isomorphism: Optional[PartialOrderIsomorphismTester] = None,
    ) -> None:
        self._pn_to_po_transformer = (
            pn_to_po_transformer
            if pn_to_po_transformer is not None
            else PetriNetToPartialOrderTransformer()
        )
        self._po_isomorphism = (
            po_isomorphism
            if po_isomorphism is not None
            else PartialOrderIsomorphismTester()
        )

    # ------------------------------------------------------------------
    # Partial orders
    # ------------------------------------------------------------------
    def are_partial_order_petri_nets_isomorphic(
        self, partial_order_a: PetriNet, partial_order_b: PetriNet
    ) -> bool:
        """
        :param partial_order_a: Acyclic partial-order net.
        :param partial_order_b: Acyclic partial-order net.
        :returns: ``True`` if both nets encode isomorphic partial orders.
        :rtype: bool
        :raises NotAPartialOrderError: If a net has a branching place.
        """
        if not self.compare_basic_net_properties(partial_order_a, partial_order_b):
            return False
        return self._po_isomorphism.are_partial_orders_isomorphic(
            self._pn_to_po_transformer.transform(partial_order_a),
            self._pn_to_po_transformer.transform(partial_order_b),
        )

    # ------------------------------------------------------------------
    # General nets
    # ------------------------------------------------------------------
    def are_petri_nets_isomorphic(self, net_a: PetriNet, net_b: PetriNet) -> bool:
        """
        Exhaustive label-, marking- and weight-preserving isomorphism test.

        :param net_a: First net.
        :param net_b: Second net.
        :returns: ``True`` if a bijection between the nodes of both nets maps
            every arc of ``net_a`` onto a distinct arc of ``net_b``.
        :rtype: bool
        """
        if not self.compare_basic_net_properties(net_a, net_b):
            return False

        transition_candidates = self.determine_possible_transition_mappings(
            net_a, net_b
        )
        if transition_candidates is None:
            return False

        place_candidates = self.determine_possible_place_mappings(net_a, net_b)
        if place_candidates is None:
            return False

        transition_manager = MappingManager(transition_candidates)
        place_manager = MappingManager(place_candidates)
        logger.debug(
            "Searching %d transition x %d place mappings",
            transition_manager.combination_count(),
            place_manager.combination_count(),
        )

        done = False
        while not done:
            transition_mapping = transition_manager.get_current_mapping()
            if len(set(transition_mapping.values())) == len(transition_mapping):
                place_mapping = place_manager.get_current_mapping()
                if len(set(place_mapping.values())) == len(
                    place_mapping
                ) and self._is_mapping_a_petri_net_isomorphism(
                    net_a, net_b, transition_mapping, place_mapping
                ):
                    return True

            if transition_manager.move_to_next_mapping():
                done = place_manager.move_to_next_mapping()

        return False

    @staticmethod
    def compare_basic_net_properties(net_a: PetriNet, net_b: PetriNet) -> bool:
        return (
            net_a.get_transition_count() == net_b.get_transition_count()
            and net_a.get_place_count() == net_b.get_place_count()
            and net_a.get_arc_count() == net_b.get_arc_count()
            and len(net_a.input_places) == len(net_b.input_places)
            and len(net_a.output_places) == len(net_b.output_places)
        )

    @staticmethod
    def determine_possible_transition_mappings(
        net_a: PetriNet, net_b: PetriNet
    ) -> Optional[Dict[str, List[str]]]:
        """
        Candidate targets per transition of ``net_a``: same label, in-degree
        and out-degree. ``None`` if some transition has no candidate.
        """
        mapping: Dict[str, List[str]] = {}
        for t_a in net_a.get_transitions():
            candidates = [
                t_b.id
                for t_b in net_b.get_transitions()
                if t_a.label == t_b.label
                and len(t_a.ingoing_arcs) == len(t_b.ingoing_arcs)
                and len(t_a.outgoing_arcs) == len(t_b.outgoing_arcs)
            ]
            if not candidates:
                return None
            mapping[t_a.id] = candidates
        return mapping

    @staticmethod
    def determine_possible_place_mappings(
        net_a: PetriNet, net_b: PetriNet
    ) -> Optional[Dict[str, List[str]]]:
        """
        Candidate targets per place of ``net_a``: same marking, in-degree and
        out-degree. ``None`` if some place has no candidate.
        """
        mapping: Dict[str, List[str]] = {}
        for p_a in net_a.get_places():
            candidates = [
                p_b.id
                for p_b in net_b.get_places()
                if p_a.marking == p_b.marking
                and len(p_a.ingoing_arcs) == len(p_b.ingoing_arcs)
                and len(p_a.outgoing_arcs) == len(p_b.outgoing_arcs)
            ]
            if not candidates:
                return None
            mapping[p_a.id] = candidates
        return mapping

    @staticmethod
    def _is_mapping_a_petri_net_isomorphism(
        net_a: PetriNet,
        net_b: PetriNet,
        transition_mapping: Dict[str, str],
        place_mapping: Dict[str, str],
    ) -> bool:
        unmapped_arcs = net_b.get_arcs()

        for arc in net_a.get_arcs():
            if arc.kind is ArcKind.TRANSITION_TO_PLACE:
                source_id = transition_mapping[arc.source_id]
                destination_id = place_mapping[arc.destination_id]
            else:
                source_id = place_mapping[arc.source_id]
                destination_id = transition_mapping[arc.destination_id]

            fitting = next(
                (
                    i
                    for i, candidate in enumerate(unmapped_arcs)
                    if candidate.source_id == source_id
                    and candidate.destination_id == destination_id
                    and candidate.weight == arc.weight
                ),
                None,
            )
            if fitting is None:
                return False
            del unmapped_arcs[fitting]

        return True
