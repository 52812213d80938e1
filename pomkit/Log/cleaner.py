# Log/cleaner.py
from __future__ import annotations

from typing import Iterable, List

from .eventlog import EventlogTrace

COMPLETE = "complete"


class LogCleaner:
    """
    Merge split lifecycle events.

    Logs recorded with both ``start`` and ``complete`` events contain every
    activity twice. Cleaning keeps one event per activity instance: events
    without a ``lifecycle:transition`` attribute and events whose lifecycle is
    ``complete`` survive, everything else is dropped.
    """

    def clean_log(self, log: Iterable[EventlogTrace]) -> List[EventlogTrace]:
        """
        Return cleaned copies of the given traces; the input is not modified.

        :param log: Traces to clean.
        :type log: Iterable[EventlogTrace]
        :returns: New traces, one per input trace, in input order.
        :rtype: List[EventlogTrace]
        """
        return [self.clean_trace(t) for t in log]

    def clean_trace(self, trace: EventlogTrace) -> EventlogTrace:
        result = EventlogTrace([], dict(trace.attributes), trace.case_id)
        for e in trace.events:
            lifecycle = e.lifecycle
            if lifecycle is None or lifecycle.lower() == COMPLETE:
                result.events.append(e.clone())
        return result
