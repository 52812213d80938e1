import unittest

from pomkit.Isomorphism.petri_net_isomorphism import PetriNetIsomorphismTester
from pomkit.Net.petri_net import PetriNet
from pomkit.Net.sequence import PetriNetSequence


def _diamond(order=("b", "c"), prefix=""):
    """a forks into two concurrent branches that join into d."""
    net = PetriNet()
    start = net.add_place(prefix + "start")
    a = net.add_transition("a", prefix + "a")
    net.add_arc(start, a)
    branches = []
    for label in order:
        p_in = net.add_place()
        t = net.add_transition(label)
        p_out = net.add_place()
        net.add_arc(a, p_in)
        net.add_arc(p_in, t)
        net.add_arc(t, p_out)
        branches.append(p_out)
    d = net.add_transition("d")
    for p in branches:
        net.add_arc(p, d)
    end = net.add_place()
    net.add_arc(d, end)
    return net


def _sequence(*labels):
    seq = PetriNetSequence()
    for label in labels:
        seq.append_event(label)
    return seq.net


class TestPetriNetIsomorphism(unittest.TestCase):
    def setUp(self) -> None:
        self.tester = PetriNetIsomorphismTester()

    def test_reflexive(self):
        net = _diamond()
        self.assertTrue(self.tester.are_petri_nets_isomorphic(net, net))
        self.assertTrue(self.tester.are_partial_order_petri_nets_isomorphic(net, net))

    def test_insertion_order_does_not_matter(self):
        a = _diamond(("b", "c"))
        b = _diamond(("c", "b"), prefix="x_")
        self.assertTrue(self.tester.are_petri_nets_isomorphic(a, b))
        self.assertTrue(self.tester.are_petri_nets_isomorphic(b, a))
        self.assertTrue(self.tester.are_partial_order_petri_nets_isomorphic(a, b))
        self.assertTrue(self.tester.are_partial_order_petri_nets_isomorphic(b, a))

    def test_symmetric_on_non_isomorphic_pair(self):
        a = _diamond(("b", "c"))
        b = _sequence("a", "b", "c", "d")
        for f in (
            self.tester.are_petri_nets_isomorphic,
            self.tester.are_partial_order_petri_nets_isomorphic,
        ):
            self.assertFalse(f(a, b))
            self.assertEqual(f(a, b), f(b, a))

    def test_label_mismatch(self):
        a = _sequence("a", "b")
        b = _sequence("a", "c")
        self.assertFalse(self.tester.are_petri_nets_isomorphic(a, b))
        self.assertFalse(self.tester.are_partial_order_petri_nets_isomorphic(a, b))

    def test_order_mismatch(self):
        a = _sequence("a", "b")
        b = _sequence("b", "a")
        self.assertFalse(self.tester.are_petri_nets_isomorphic(a, b))
        self.assertFalse(self.tester.are_partial_order_petri_nets_isomorphic(a, b))

    def test_marking_mismatch(self):
        a = _sequence("a")
        b = _sequence("a")
        b.get_place("p_1").marking = 1
        self.assertFalse(self.tester.are_petri_nets_isomorphic(a, b))

    def test_weight_mismatch(self):
        a = PetriNet()
        b = PetriNet()
        for net, weight in ((a, 1), (b, 2)):
            p = net.add_place()
            t = net.add_transition("a")
            net.add_arc(p, t, weight)
        self.assertFalse(self.tester.are_petri_nets_isomorphic(a, b))

    def test_parallel_arcs(self):
        a = PetriNet()
        p = a.add_place()
        t = a.add_transition("a")
        a.add_arc(p, t)
        a.add_arc(p, t)

        b = PetriNet()
        p1 = b.add_place()
        t1 = b.add_transition("a")
        b.add_arc(p1, t1)
        b.add_arc(p1, t1)
        self.assertTrue(self.tester.are_petri_nets_isomorphic(a, b))

    def test_repeated_labels_need_consistent_mapping(self):
        # a -> a -> b versus a -> b -> a
        a = _sequence("a", "a", "b")
        b = PetriNet()
        p1, p2, p3, p4 = (b.add_place() for _ in range(4))
        x = b.add_transition("a")
        y = b.add_transition("a")
        z = b.add_transition("b")
        b.add_arc(p1, x)
        b.add_arc(x, p2)
        b.add_arc(p2, z)
        b.add_arc(z, p3)
        b.add_arc(p3, y)
        b.add_arc(y, p4)
        self.assertFalse(self.tester.are_petri_nets_isomorphic(a, b))

    def test_empty_nets(self):
        self.assertTrue(self.tester.are_petri_nets_isomorphic(PetriNet(), PetriNet()))

    def test_basic_properties_filter(self):
        self.assertFalse(
            self.tester.compare_basic_net_properties(_sequence("a"), _sequence("a", "b"))
        )


if __name__ == "__main__":
    unittest.main()
