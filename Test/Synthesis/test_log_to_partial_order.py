import unittest

from pomkit.Concurrency.relation import ConcurrencyRelation
from pomkit.Isomorphism.petri_net_isomorphism import PetriNetIsomorphismTester
from pomkit.Log.eventlog import LIFECYCLE_KEY, Eventlog, EventlogEvent, EventlogTrace
from pomkit.Net.analysis import (
    has_redundant_concurrent_place,
    is_transitively_reduced,
    transition_graph,
)
from pomkit.Net.partial_order_net import PartialOrderNetWithContainedTraces
from pomkit.Net.sequence import PetriNetSequence
from pomkit.Synthesis.log_to_partial_order import (
    LogToPartialOrderConfig,
    LogToPartialOrderTransformer,
    filter_and_combine_partial_order_nets,
)


def _labels(po):
    return sorted(t.label for t in po.net.get_transitions())


def _edges(po):
    G = transition_graph(po.net)
    return {(G.nodes[u]["label"], G.nodes[v]["label"]) for u, v in G.edges}


class TestLogToPartialOrderTransformer(unittest.TestCase):
    def setUp(self) -> None:
        self.transformer = LogToPartialOrderTransformer()

    def test_empty_log(self):
        self.assertEqual(
            self.transformer.transform_to_partial_orders(
                Eventlog(), ConcurrencyRelation()
            ),
            [],
        )

    def test_identical_traces_merge(self):
        log = Eventlog.from_sequences([["a", "b", "c"], ["a", "b", "c"]])
        result = self.transformer.transform_to_partial_orders(
            log, ConcurrencyRelation()
        )
        self.assertEqual(len(result), 1)
        po = result[0]
        self.assertEqual(po.frequency, 2)
        self.assertEqual(len(po.contained_traces), 2)
        for trace in po.contained_traces:
            self.assertEqual(trace.labels(), ["a", "b", "c"])
        self.assertEqual(_edges(po), {("a", "b"), ("b", "c")})

    def test_distinct_traces_stay_apart(self):
        log = Eventlog.from_sequences([["a", "b"], ["a", "c"]])
        result = self.transformer.transform_to_partial_orders(
            log, ConcurrencyRelation()
        )
        self.assertEqual([_labels(po) for po in result], [["a", "b"], ["a", "c"]])
        self.assertEqual([po.frequency for po in result], [1, 1])

    def test_concurrent_pair_without_boundaries(self):
        rel = ConcurrencyRelation.from_pairs([("a", "b")], symmetric=True)
        result = self.transformer.transform_to_partial_orders(
            Eventlog.from_sequences([["a", "b"]]), rel
        )
        self.assertEqual(len(result), 1)
        net = result[0].net
        self.assertEqual(_labels(result[0]), ["a", "b"])
        self.assertEqual(_edges(result[0]), set())
        self.assertEqual(len(net.input_places), 2)
        self.assertEqual(len(net.output_places), 2)
        self.assertEqual(result[0].contained_traces[0].labels(), ["a", "b"])

    def test_concurrent_pair_with_boundaries(self):
        transformer = LogToPartialOrderTransformer(
            config=LogToPartialOrderConfig(add_start_stop_event=True)
        )
        start, stop = transformer.START_SYMBOL, transformer.STOP_SYMBOL
        rel = ConcurrencyRelation.from_pairs([("a", "b")], symmetric=True)
        result = transformer.transform_to_partial_orders(
            Eventlog.from_sequences([["a", "b"]]), rel
        )
        po = result[0]
        self.assertEqual(
            _edges(po), {(start, "a"), (start, "b"), ("a", stop), ("b", stop)}
        )
        self.assertEqual(po.contained_traces[0].labels(), [start, "a", "b", stop])

    def test_interleavings_merge_into_one_partial_order(self):
        rel = ConcurrencyRelation.from_pairs([("b", "c")], symmetric=True)
        log = Eventlog.from_sequences([["a", "b", "c"], ["a", "c", "b"]])
        result = self.transformer.transform_to_partial_orders(log, rel)
        self.assertEqual(len(result), 1)
        self.assertEqual(result[0].frequency, 2)
        self.assertEqual(
            [t.labels() for t in result[0].contained_traces],
            [["a", "b", "c"], ["a", "c", "b"]],
        )
        self.assertEqual(_edges(result[0]), {("a", "b"), ("a", "c")})

    def test_repeated_self_concurrent_label_stays_ordered(self):
        rel = ConcurrencyRelation.from_pairs([("a", "a")])
        result = self.transformer.transform_to_partial_orders(
            Eventlog.from_sequences([["a", "a"]]), rel
        )
        self.assertEqual(len(result), 1)
        G = transition_graph(result[0].net)
        self.assertEqual(G.number_of_edges(), 1)
        self.assertEqual(_labels(result[0]), ["a", "a"])
        self.assertEqual(_edges(result[0]), {("a", "a")})

    def test_discard_prefixes(self):
        transformer = LogToPartialOrderTransformer(
            config=LogToPartialOrderConfig(discard_prefixes=True)
        )
        result = transformer.transform_to_partial_orders(
            Eventlog.from_sequences([["a"], ["a", "b"]]), ConcurrencyRelation()
        )
        self.assertEqual(len(result), 1)
        self.assertEqual(_labels(result[0]), ["a", "b"])
        self.assertEqual(result[0].frequency, 1)

    def test_frequency_conservation_and_structural_properties(self):
        rel = ConcurrencyRelation.from_pairs(
            [("b", "c"), ("c", "d"), ("b", "d")], symmetric=True
        )
        sequences = [
            ["a", "b", "c", "d", "e"],
            ["a", "c", "b", "d", "e"],
            ["a", "d", "c", "b", "e"],
            ["a", "b", "e"],
            ["a", "b", "e"],
            ["e"],
            [],
        ]
        result = self.transformer.transform_to_partial_orders(
            Eventlog.from_sequences(sequences), rel
        )
        self.assertEqual(sum(po.frequency for po in result), len(sequences))
        self.assertEqual(
            sum(len(po.contained_traces) for po in result), len(sequences)
        )
        for po in result:
            self.assertTrue(is_transitively_reduced(po.net))
            self.assertFalse(has_redundant_concurrent_place(po.net, rel))
        self.assertEqual(result[0].frequency, 3)

    def test_repeated_labels_are_restored(self):
        log = Eventlog.from_sequences([["a", "b", "a"]])
        result = self.transformer.transform_to_partial_orders(
            log, ConcurrencyRelation()
        )
        self.assertEqual(_labels(result[0]), ["a", "a", "b"])
        self.assertEqual(result[0].contained_traces[0].labels(), ["a", "b", "a"])

    def test_input_log_is_not_modified(self):
        log = Eventlog.from_sequences([["a", "b", "a"], ["a", "b", "a"]])
        result = self.transformer.transform_to_partial_orders(
            log, ConcurrencyRelation()
        )
        for trace in log:
            self.assertEqual(trace.labels(), ["a", "b", "a"])
        for trace in result[0].contained_traces:
            self.assertFalse(any(trace is t for t in log.traces))

    def test_clean_log(self):
        trace = EventlogTrace(
            [
                EventlogEvent("a", {LIFECYCLE_KEY: "start"}),
                EventlogEvent("a", {LIFECYCLE_KEY: "complete"}),
                EventlogEvent("b", {LIFECYCLE_KEY: "start"}),
                EventlogEvent("b", {LIFECYCLE_KEY: "complete"}),
            ]
        )
        transformer = LogToPartialOrderTransformer(
            config=LogToPartialOrderConfig(clean_log=True)
        )
        result = transformer.transform_to_partial_orders(
            Eventlog([trace]), ConcurrencyRelation()
        )
        self.assertEqual(_labels(result[0]), ["a", "b"])
        self.assertEqual(len(trace), 4)

    def test_unclean_log_warns(self):
        trace = EventlogTrace(
            [
                EventlogEvent("a", {LIFECYCLE_KEY: "start"}),
                EventlogEvent("a", {LIFECYCLE_KEY: "complete"}),
            ]
        )
        with self.assertLogs(
            "pomkit.Synthesis.log_to_partial_order", level="WARNING"
        ):
            result = self.transformer.transform_to_partial_orders(
                Eventlog([trace]), ConcurrencyRelation()
            )
        self.assertEqual(_labels(result[0]), ["a", "a"])

    def test_custom_isomorphism_tester(self):
        class Counting(PetriNetIsomorphismTester):
            calls = 0

            def are_partial_order_petri_nets_isomorphic(self, a, b):
                Counting.calls += 1
                return super().are_partial_order_petri_nets_isomorphic(a, b)

        transformer = LogToPartialOrderTransformer(isomorphism_tester=Counting())
        transformer.transform_to_partial_orders(
            Eventlog.from_sequences([["a", "b"], ["a", "c"]]), ConcurrencyRelation()
        )
        self.assertEqual(Counting.calls, 1)


class TestFilterAndCombine(unittest.TestCase):
    @staticmethod
    def _po(*labels, traces=1):
        seq = PetriNetSequence()
        for label in labels:
            seq.append_event(label)
        seq.net.frequency = traces
        return PartialOrderNetWithContainedTraces(
            seq.net, [EventlogTrace.from_labels(labels) for _ in range(traces)]
        )

    def test_merges_isomorphic_and_keeps_order(self):
        pos = [self._po("a", "b"), self._po("a", "c", traces=2), self._po("a", "b")]
        result = filter_and_combine_partial_order_nets(
            pos, PetriNetIsomorphismTester()
        )
        self.assertEqual(len(pos), 3)
        self.assertEqual(len(result), 2)
        self.assertIs(result[0], pos[0])
        self.assertEqual([po.frequency for po in result], [2, 2])
        self.assertEqual(len(result[0].contained_traces), 2)

    def test_empty(self):
        self.assertEqual(
            filter_and_combine_partial_order_nets([], PetriNetIsomorphismTester()), []
        )


class TestLogToPartialOrderConfig(unittest.TestCase):
    def test_from_dict_accepts_both_spellings(self):
        config = LogToPartialOrderConfig.from_dict(
            {"cleanLog": True, "discard_prefixes": True}
        )
        self.assertTrue(config.clean_log)
        self.assertTrue(config.discard_prefixes)
        self.assertFalse(config.add_start_stop_event)

    def test_from_dict_rejects_unknown_key(self):
        with self.assertRaises(KeyError):
            LogToPartialOrderConfig.from_dict({"verbose": True})


if __name__ == "__main__":
    unittest.main()
