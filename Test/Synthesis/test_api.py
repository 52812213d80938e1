import unittest

import pomkit
from pomkit.api import log_to_partial_orders
from pomkit.Concurrency.relation import ConcurrencyRelation
from pomkit.Log.eventlog import Eventlog, EventlogTrace


class TestLogToPartialOrdersApi(unittest.TestCase):
    def test_accepts_label_sequences(self):
        rel = ConcurrencyRelation.from_pairs([("b", "c")], symmetric=True)
        result = log_to_partial_orders([["a", "b", "c"], ["a", "c", "b"]], rel)
        self.assertEqual(len(result), 1)
        self.assertEqual(result[0].frequency, 2)

    def test_accepts_eventlog_and_traces(self):
        log = Eventlog.from_sequences([["a", "b"], ["a", "b"]])
        self.assertEqual(log_to_partial_orders(log)[0].frequency, 2)
        traces = [EventlogTrace.from_labels("ab"), EventlogTrace.from_labels("ba")]
        self.assertEqual(len(log_to_partial_orders(traces)), 2)

    def test_default_relation_keeps_order(self):
        result = log_to_partial_orders([["a", "b"], ["b", "a"]])
        self.assertEqual(len(result), 2)

    def test_flags_are_forwarded(self):
        result = log_to_partial_orders(
            [["a"], ["a", "b"]], discard_prefixes=True, add_start_stop_event=True
        )
        self.assertEqual(len(result), 1)
        self.assertEqual(result[0].net.get_transition_count(), 4)

    def test_bare_string_trace_rejected(self):
        with self.assertRaises(TypeError):
            log_to_partial_orders(["ab"])

    def test_empty(self):
        self.assertEqual(log_to_partial_orders([]), [])

    def test_package_exports(self):
        self.assertIs(pomkit.log_to_partial_orders, log_to_partial_orders)
        self.assertIsInstance(pomkit.__version__, str)


if __name__ == "__main__":
    unittest.main()
