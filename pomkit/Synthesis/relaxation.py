"""
Relax a sequential net into a partial order.

A sequential net orders every pair of neighbouring events, including pairs
that the concurrency relation says may occur in either order. The rewrite in
:func:`convert_sequence_to_partial_order` removes such ordering places one at
a time and reconnects the neighbours so that every precedence that did not
go through the removed place is kept:

* the predecessors of ``pre`` become predecessors of ``post``,
* the successors of ``post`` become successors of ``pre``.

Places are processed from a FIFO worklist seeded with every place of the net;
places created by a rewrite are appended and tested against the same
condition. Edges only ever point forward in the original sequence and an
edge that is already present is never added again, which bounds the work.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Deque

from ..exceptions import NotAPartialOrderError
from ..Net.node import Place, Transition
from ..Net.partial_order_net import PartialOrderNetWithContainedTraces
from ..Net.petri_net import PetriNet
from ..Net.sequence import PetriNetSequence

logger = logging.getLogger(__name__)

__all__ = ["convert_sequence_to_partial_order"]


def _is_redundant(pre: Transition, post: Transition, relation: Any) -> bool:
    if pre.label == post.label:
        return False
    return relation.is_concurrent(pre.label, post.label) and relation.is_concurrent(
        post.label, pre.label
    )


def _reconnect_predecessors(
    net: PetriNet, pre: Transition, post: Transition, queue: Deque[Place]
) -> None:
    for arc in list(pre.ingoing_arcs):
        in_place = arc.source
        if not in_place.ingoing_arcs and any(
            not a.source.ingoing_arcs for a in post.ingoing_arcs
        ):
            continue
        if in_place.ingoing_arcs:
            in_transition_id = in_place.ingoing_arcs[0].source_id
            if any(
                a.source.ingoing_arcs
                and a.source.ingoing_arcs[0].source_id == in_transition_id
                for a in post.ingoing_arcs
            ):
                continue

        clone = net.add_place()
        queue.append(clone)
        if in_place.ingoing_arcs:
            net.add_arc(in_place.ingoing_arcs[0].source, clone)
        net.add_arc(clone, post)


def _reconnect_successors(
    net: PetriNet, pre: Transition, post: Transition, queue: Deque[Place]
) -> None:
    for arc in list(post.outgoing_arcs):
        out_place = arc.destination
        if not out_place.outgoing_arcs and any(
            not a.destination.outgoing_arcs for a in pre.outgoing_arcs
        ):
            continue
        if out_place.outgoing_arcs:
            out_transition_id = out_place.outgoing_arcs[0].destination_id
            if any(
                a.destination.outgoing_arcs
                and a.destination.outgoing_arcs[0].destination_id == out_transition_id
                for a in pre.outgoing_arcs
            ):
                continue

        clone = net.add_place()
        queue.append(clone)
        if out_place.outgoing_arcs:
            net.add_arc(clone, out_place.outgoing_arcs[0].destination)
        net.add_arc(pre, clone)


def convert_sequence_to_partial_order(
    sequence: PetriNetSequence, concurrency_relation: Any
) -> PartialOrderNetWithContainedTraces:
    """
    Relax ``sequence.net`` in place and wrap it as a partial order.

    :param sequence: Sequential net (typically with boundary events).
    :type sequence: PetriNetSequence
    :param concurrency_relation: Object exposing ``is_concurrent(a, b)``;
        both directions must hold for a place to be removed.
    :type concurrency_relation: Any
    :returns: The relaxed net with the sequence's contained traces (or its own
        trace when none were recorded).
    :rtype: PartialOrderNetWithContainedTraces
    :raises NotAPartialOrderError: If a processed place has more than one
        ingoing or outgoing arc.
    """
    net = sequence.net
    queue: Deque[Place] = deque(net.get_places())
    removed = 0

    while queue:
        place = queue.popleft()
        if not place.ingoing_arcs or not place.outgoing_arcs:
            continue
        if len(place.ingoing_arcs) > 1 or len(place.outgoing_arcs) > 1:
            logger.debug("Branching place %r in %r", place, sequence)
            raise NotAPartialOrderError(
                f"Place {place.id!r} has {len(place.ingoing_arcs)} ingoing and "
                f"{len(place.outgoing_arcs)} outgoing arcs; the processed net is "
                "not a partial order"
            )

        pre = place.ingoing_arcs[0].source
        post = place.outgoing_arcs[0].destination
        if not _is_redundant(pre, post, concurrency_relation):
            continue

        net.remove_place(place)
        removed += 1
        _reconnect_predecessors(net, pre, post, queue)
        _reconnect_successors(net, pre, post, queue)

    logger.debug("Relaxed %r: removed %d ordering places", sequence, removed)
    traces = list(sequence.contained_traces) or [sequence.trace]
    return PartialOrderNetWithContainedTraces(net, traces)
