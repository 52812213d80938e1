"""LogToPartialOrderTransformer: event log -> distinct partial-order nets.

Pipeline
--------
1. optional log cleaning (start/complete pairs merged), always on copies,
2. repeated labels relabeled through the relation's relabeler,
3. prefix-sharing merge into sequential nets with frequencies,
4. synthetic start/stop transitions added (the reduction needs internal
   places only),
5. concurrency relaxation of every sequence,
6. transitive reduction,
7. boundary transitions stripped unless configured otherwise,
8. isomorphic partial orders merged (frequencies and traces accumulated),
9. relabeling undone on the result nets and traces.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Union

from ..Log.cleaner import COMPLETE, LogCleaner
from ..Log.eventlog import Eventlog, EventlogTrace
from ..Net.partial_order_net import PartialOrderNetWithContainedTraces
from ..Isomorphism.petri_net_isomorphism import PetriNetIsomorphismTester
from .boundary import (
    START_SYMBOL,
    STOP_SYMBOL,
    add_start_and_stop_event,
    remove_start_and_stop_event,
)
from .relaxation import convert_sequence_to_partial_order
from .sequence_merger import convert_log_to_petri_net_sequences
from .transitive_reduction import perform_transitive_reduction

logger = logging.getLogger(__name__)

__all__ = [
    "LogToPartialOrderConfig",
    "LogToPartialOrderTransformer",
    "filter_and_combine_partial_order_nets",
]


@dataclass
class LogToPartialOrderConfig:
    """
    Switches of :class:`LogToPartialOrderTransformer`.

    :param clean_log: Merge split start/complete events before processing.
    :type clean_log: bool
    :param add_start_stop_event: Keep the synthetic start/stop transitions
        (and events) in the result.
    :type add_start_stop_event: bool
    :param discard_prefixes: Drop traces that are strict prefixes of other
        traces.
    :type discard_prefixes: bool
    """

    clean_log: bool = False
    add_start_stop_event: bool = False
    discard_prefixes: bool = False

    _ALIASES = {
        "cleanLog": "clean_log",
        "addStartStopEvent": "add_start_stop_event",
        "discardPrefixes": "discard_prefixes",
    }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LogToPartialOrderConfig:
        """
        Build a config from snake_case or camelCase keys.

        :raises KeyError: On an unknown key.
        """
        kwargs = {}
        for key, value in data.items():
            name = cls._ALIASES.get(key, key)
            if name not in ("clean_log", "add_start_stop_event", "discard_prefixes"):
                raise KeyError(f"Unknown configuration key {key!r}")
            kwargs[name] = bool(value)
        return cls(**kwargs)


def filter_and_combine_partial_order_nets(
    partial_orders: List[PartialOrderNetWithContainedTraces],
    isomorphism_tester: PetriNetIsomorphismTester,
) -> List[PartialOrderNetWithContainedTraces]:
    """
    Keep the first of every class of isomorphic partial orders and merge the
    others into it.

    :param partial_orders: Candidates, in output order.
    :param isomorphism_tester: Tester used for the partial-order check.
    :returns: Unique partial orders with accumulated frequencies and traces.
    """
    unique: List[PartialOrderNetWithContainedTraces] = []
    for unchecked in partial_orders:
        for known in unique:
            if isomorphism_tester.are_partial_order_petri_nets_isomorphic(
                unchecked.net, known.net
            ):
                known.absorb(unchecked)
                break
        else:
            unique.append(unchecked)
    logger.debug(
        "Combined %d partial orders into %d", len(partial_orders), len(unique)
    )
    return unique


class LogToPartialOrderTransformer(LogCleaner):
    """
    Synthesize the distinct partial orders of an event log.

    :param isomorphism_tester: Tester used to merge equivalent partial
        orders. Defaults to :class:`PetriNetIsomorphismTester`.
    :type isomorphism_tester: Optional[PetriNetIsomorphismTester]
    :param config: Pipeline switches. Defaults to
        :class:`LogToPartialOrderConfig` with every switch off.
    :type config: Optional[LogToPartialOrderConfig]

    Examples
    --------
    .. code-block:: python

        log = Eventlog.from_sequences([["a", "b", "c"], ["a", "c", "b"]])
        rel = ConcurrencyRelation.from_pairs([("b", "c")], symmetric=True)
        pos = LogToPartialOrderTransformer().transform_to_partial_orders(log, rel)
        len(pos), pos[0].frequency  # (1, 2)
    """

    START_SYMBOL = START_SYMBOL
    STOP_SYMBOL = STOP_SYMBOL

    def __init__(
        self,
        isomorphism_tester: Optional[PetriNetIsomorphismTester] = None,
        config: Optional[LogToPartialOrderConfig] = None,
    ) -> None:
        super().__init__()
        self._pn_isomorphism = (
            isomorphism_tester
            if isomorphism_tester is not None
            else PetriNetIsomorphismTester()
        )
        self._config = config if config is not None else LogToPartialOrderConfig()

    @property
    def config(self) -> LogToPartialOrderConfig:
        return self._config

    def transform_to_partial_orders(
        self,
        eventlog: Union[Eventlog, Iterable[EventlogTrace]],
        concurrency_relation: Any,
    ) -> List[PartialOrderNetWithContainedTraces]:
        """
        Run the whole pipeline. The given log is not modified; the returned
        partial orders hold processed copies of its traces.

        :param eventlog: Log or iterable of traces.
        :param concurrency_relation: Object exposing ``is_concurrent(a, b)``
            and a ``relabeler``.
        :returns: Distinct partial orders in first-seen order.
        :rtype: List[PartialOrderNetWithContainedTraces]
        :raises IllegalStateError: If a structural invariant breaks on the way.
        """
        traces = list(eventlog)
        if not traces:
            return []

        if self._config.clean_log:
            traces = self.clean_log(traces)
        else:
            if self._has_lifecycle_pairs(traces):
                logger.warning(
                    "relabeling a log with both 'start' and 'complete' events "
                    "will result in unexpected label associations!"
                )
            traces = [t.clone() for t in traces]

        relabeler = concurrency_relation.relabeler
        relabeler.relabel_sequences_preserve_non_unique_identities(traces)

        sequences = convert_log_to_petri_net_sequences(
            traces, self._config.discard_prefixes
        )

        for seq in sequences:
            add_start_and_stop_event(seq)
        partial_orders = [
            convert_sequence_to_partial_order(seq, concurrency_relation)
            for seq in sequences
        ]
        for po in partial_orders:
            perform_transitive_reduction(po.net)
        if not self._config.add_start_stop_event:
            for po in partial_orders:
                remove_start_and_stop_event(po)

        result = filter_and_combine_partial_order_nets(
            partial_orders, self._pn_isomorphism
        )

        relabeler.undo_sequences_labeling(po.net.get_transitions() for po in result)
        relabeler.undo_sequences_labeling(
            trace for po in result for trace in po.contained_traces
        )
        logger.debug(
            "Transformed %d traces into %d partial orders", len(traces), len(result)
        )
        return result

    @staticmethod
    def _has_lifecycle_pairs(traces: List[EventlogTrace]) -> bool:
        return any(
            e.lifecycle is not None and e.lifecycle.lower() != COMPLETE
            for t in traces
            for e in t.events
        )
