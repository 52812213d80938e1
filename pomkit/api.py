from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Union

from .Concurrency.relation import ConcurrencyRelation
from .Isomorphism.petri_net_isomorphism import PetriNetIsomorphismTester
from .Log.eventlog import Eventlog, EventlogTrace
from .Net.partial_order_net import PartialOrderNetWithContainedTraces
from .Synthesis.log_to_partial_order import (
    LogToPartialOrderConfig,
    LogToPartialOrderTransformer,
)

LogLike = Union[Eventlog, Iterable[EventlogTrace], Iterable[Sequence[str]]]


def _as_traces(log: LogLike) -> List[EventlogTrace]:
    if isinstance(log, Eventlog):
        return list(log.traces)
    traces: List[EventlogTrace] = []
    for i, item in enumerate(log):
        if isinstance(item, EventlogTrace):
            traces.append(item)
        elif isinstance(item, str):
            raise TypeError(
                "A trace must be a sequence of labels, not a single string "
                f"(got {item!r} at position {i})"
            )
        else:
            traces.append(EventlogTrace.from_labels(item, case_id=i))
    return traces


def log_to_partial_orders(
    log: LogLike,
    concurrency_relation: Optional[ConcurrencyRelation] = None,
    *,
    clean_log: bool = False,
    add_start_stop_event: bool = False,
    discard_prefixes: bool = False,
    isomorphism_tester: Optional[PetriNetIsomorphismTester] = None,
) -> List[PartialOrderNetWithContainedTraces]:
    """
    Synthesize the distinct partial orders of ``log`` in one call.

    Typical usage::

        from pomkit.api import log_to_partial_orders
        from pomkit import ConcurrencyRelation

        rel = ConcurrencyRelation.from_pairs([("b", "c")], symmetric=True)
        pos = log_to_partial_orders([["a", "b", "c"], ["a", "c", "b"]], rel)
        pos[0].frequency  # 2

    :param log: An :class:`Eventlog`, an iterable of :class:`EventlogTrace`
        or an iterable of label sequences.
    :type log: LogLike
    :param concurrency_relation: Relation over labels. An empty relation
        (every pair ordered) is used when omitted.
    :type concurrency_relation: Optional[ConcurrencyRelation]
    :param clean_log: Merge split start/complete events first.
    :type clean_log: bool
    :param add_start_stop_event: Keep the synthetic boundary transitions.
    :type add_start_stop_event: bool
    :param discard_prefixes: Drop traces that are strict prefixes of others.
    :type discard_prefixes: bool
    :param isomorphism_tester: Optional custom tester.
    :type isomorphism_tester: Optional[PetriNetIsomorphismTester]
    :returns: Distinct partial orders, first-seen order.
    :rtype: List[PartialOrderNetWithContainedTraces]
    :raises TypeError: If a trace is given as a bare string.
    """
    relation = (
        concurrency_relation
        if concurrency_relation is not None
        else ConcurrencyRelation()
    )
    config = LogToPartialOrderConfig(
        clean_log=clean_log,
        add_start_stop_event=add_start_stop_event,
        discard_prefixes=discard_prefixes,
    )
    transformer = LogToPartialOrderTransformer(isomorphism_tester, config)
    return transformer.transform_to_partial_orders(_as_traces(log), relation)
