import unittest

from pomkit.Concurrency.relation import ConcurrencyRelation
from pomkit.Net.analysis import (
    has_redundant_concurrent_place,
    is_transitively_reduced,
    precedence_pairs,
    reachability_matrix,
    transition_graph,
)
from pomkit.Net.petri_net import PetriNet


def _link(net, pre, post):
    p = net.add_place()
    net.add_arc(pre, p)
    net.add_arc(p, post)
    return p


class TestNetAnalysis(unittest.TestCase):
    def setUp(self) -> None:
        # a -> b -> c plus the shortcut a -> c
        self.net = PetriNet()
        self.a = self.net.add_transition("a")
        self.b = self.net.add_transition("b")
        self.c = self.net.add_transition("c")
        _link(self.net, self.a, self.b)
        _link(self.net, self.b, self.c)
        self.shortcut = _link(self.net, self.a, self.c)

    def test_precedence_pairs(self):
        self.assertEqual(
            sorted(precedence_pairs(self.net)),
            sorted([("t_1", "t_2"), ("t_2", "t_3"), ("t_1", "t_3")]),
        )

    def test_transition_graph_carries_labels(self):
        G = transition_graph(self.net)
        self.assertEqual(set(G.nodes), {"t_1", "t_2", "t_3"})
        self.assertEqual(G.nodes["t_2"]["label"], "b")
        self.assertTrue(G.has_edge("t_1", "t_3"))

    def test_reachability_matrix(self):
        ids, R = reachability_matrix(self.net)
        i = {tid: k for k, tid in enumerate(ids)}
        self.assertTrue(R[i["t_1"], i["t_3"]])
        self.assertFalse(R[i["t_3"], i["t_1"]])
        self.assertFalse(R[i["t_2"], i["t_2"]])

    def test_shortcut_is_not_reduced(self):
        self.assertFalse(is_transitively_reduced(self.net))
        self.net.remove_place(self.shortcut)
        self.assertTrue(is_transitively_reduced(self.net))

    def test_parallel_places_are_not_reduced(self):
        net = PetriNet()
        a = net.add_transition("a")
        b = net.add_transition("b")
        _link(net, a, b)
        _link(net, a, b)
        self.assertFalse(is_transitively_reduced(net))

    def test_redundant_concurrent_place(self):
        rel = ConcurrencyRelation.from_pairs([("a", "b")], symmetric=True)
        self.assertTrue(has_redundant_concurrent_place(self.net, rel))
        self.assertFalse(
            has_redundant_concurrent_place(self.net, rel, ignore_labels={"a"})
        )
        one_way = ConcurrencyRelation.from_pairs([("a", "b")])
        self.assertFalse(has_redundant_concurrent_place(self.net, one_way))


if __name__ == "__main__":
    unittest.main()
