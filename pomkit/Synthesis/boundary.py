# Synthesis/boundary.py
from __future__ import annotations

import logging
from typing import List

from ..exceptions import IllegalStateError
from ..Log.eventlog import EventlogEvent, EventlogTrace
from ..Net.partial_order_net import PartialOrderNetWithContainedTraces
from ..Net.sequence import PetriNetSequence

logger = logging.getLogger(__name__)

START_SYMBOL = "▶"
STOP_SYMBOL = "■"

__all__ = [
    "START_SYMBOL",
    "STOP_SYMBOL",
    "add_start_and_stop_event",
    "remove_start_and_stop_event",
]


def _traces_of(sequence: PetriNetSequence) -> List[EventlogTrace]:
    traces = [sequence.trace]
    for t in sequence.contained_traces:
        if all(t is not known for known in traces):
            traces.append(t)
    return traces


def add_start_and_stop_event(sequence: PetriNetSequence) -> None:
    """
    Wrap a sequence in synthetic start and stop transitions.

    A fresh source place feeds a transition labelled :data:`START_SYMBOL`
    that produces into the former source place; the former sink place feeds a
    transition labelled :data:`STOP_SYMBOL` that produces into a fresh sink
    place. Afterwards every original place is internal. The matching events
    are pushed to the front and back of the sequence's trace and of every
    contained trace.

    :param sequence: Sequence with exactly one source and one sink place
        (the single place of an empty sequence is both).
    :type sequence: PetriNetSequence
    :raises IllegalStateError: If the net has more than one source or sink.
    """
    net = sequence.net
    sources = [p for p in net.get_places() if not p.ingoing_arcs]
    sinks = [p for p in net.get_places() if not p.outgoing_arcs]
    if len(sources) != 1 or len(sinks) != 1:
        logger.debug("Malformed sequence net: %r places=%r", net, net.get_places())
        raise IllegalStateError(
            "A sequence must have one start and one end place, found "
            f"{len(sources)} source and {len(sinks)} sink places in {net!r}"
        )
    first, last = sources[0], sinks[0]

    pre_start = net.add_place()
    start = net.add_transition(START_SYMBOL)
    net.add_arc(pre_start, start)
    net.add_arc(start, first)

    stop = net.add_transition(STOP_SYMBOL)
    post_stop = net.add_place()
    net.add_arc(last, stop)
    net.add_arc(stop, post_stop)

    for trace in _traces_of(sequence):
        trace.events.insert(0, EventlogEvent(START_SYMBOL))
        trace.events.append(EventlogEvent(STOP_SYMBOL))


def remove_start_and_stop_event(
    partial_order: PartialOrderNetWithContainedTraces,
) -> None:
    """
    Strip the synthetic boundary transitions added by
    :func:`add_start_and_stop_event`, together with their outer places and the
    boundary events of every contained trace.

    All checks run before the net is touched, so a failing call leaves it
    unchanged.

    :param partial_order: Partial order with boundary events.
    :type partial_order: PartialOrderNetWithContainedTraces
    :raises IllegalStateError: If the net does not have exactly one input and
        one output place, or the adjacent transitions are not the boundary
        transitions.
    """
    net = partial_order.net
    if len(net.input_places) != 1 or len(net.output_places) != 1:
        logger.debug("Net without unique boundary places: %r", net)
        raise IllegalStateError(
            f"Expected one input and one output place, found "
            f"{len(net.input_places)} and {len(net.output_places)} in {net!r}"
        )

    in_place = net.get_place(next(iter(net.input_places)))
    out_place = net.get_place(next(iter(net.output_places)))
    start = (
        in_place.outgoing_arcs[0].destination
        if len(in_place.outgoing_arcs) == 1
        else None
    )
    stop = (
        out_place.ingoing_arcs[0].source if len(out_place.ingoing_arcs) == 1 else None
    )
    if start is None or start.label != START_SYMBOL:
        logger.debug("Input place %r is not followed by a start transition", in_place)
        raise IllegalStateError(
            f"Input place {in_place.id!r} does not lead to a {START_SYMBOL!r} transition"
        )
    if stop is None or stop.label != STOP_SYMBOL:
        logger.debug("Output place %r is not preceded by a stop transition", out_place)
        raise IllegalStateError(
            f"Output place {out_place.id!r} does not follow a {STOP_SYMBOL!r} transition"
        )

    net.remove_place(in_place)
    net.remove_transition(start)
    net.remove_place(out_place)
    net.remove_transition(stop)

    for trace in partial_order.contained_traces:
        if trace.events and trace.events[0].label == START_SYMBOL:
            trace.events.pop(0)
        if trace.events and trace.events[-1].label == STOP_SYMBOL:
            trace.events.pop()
