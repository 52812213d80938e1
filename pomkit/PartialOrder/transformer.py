# PartialOrder/transformer.py
from __future__ import annotations

import logging

from ..exceptions import NotAPartialOrderError
from ..Net.petri_net import PetriNet
from .partial_order import PartialOrder

logger = logging.getLogger(__name__)


class PetriNetToPartialOrderTransformer:
    """
    Convert a partial-order shaped Petri net into a :class:`PartialOrder`.

    Every transition becomes an event (same id and label) and every place with
    one ingoing and one outgoing arc becomes a precedence edge. Boundary
    places, which lack one side, carry no precedence and are skipped.
    """

    def transform(self, net: PetriNet) -> PartialOrder:
        """
        :param net: Net in which every place has at most one ingoing and one
            outgoing arc.
        :type net: PetriNet
        :returns: The partial order.
        :rtype: PartialOrder
        :raises NotAPartialOrderError: If a place branches.
        """
        po = PartialOrder()
        for t in net.get_transitions():
            po.add_event(t.id, t.label)
        for p in net.get_places():
            if len(p.ingoing_arcs) > 1 or len(p.outgoing_arcs) > 1:
                logger.debug("Branching place %r in %r", p, net)
                raise NotAPartialOrderError(
                    f"Place {p.id!r} has {len(p.ingoing_arcs)} ingoing and "
                    f"{len(p.outgoing_arcs)} outgoing arcs; the net is not a "
                    "partial order"
                )
            if p.ingoing_arcs and p.outgoing_arcs:
                po.add_edge(
                    p.ingoing_arcs[0].source_id, p.outgoing_arcs[0].destination_id
                )
        return po
