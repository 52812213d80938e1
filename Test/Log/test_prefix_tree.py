import unittest

from pomkit.Log.prefix_tree import PrefixTree


class TestPrefixTree(unittest.TestCase):
    def setUp(self) -> None:
        self.tree = PrefixTree(0)
        self.created = []
        self.reduced = []

    def _insert(self, path):
        return self.tree.insert(
            path,
            lambda node: 1,
            lambda content, node: setattr(node, "content", content + 1),
            lambda step, content, node: self.reduced.append(step),
            self._new_step,
        )

    def _new_step(self, step, prefix, parent_content):
        self.created.append((step, prefix))
        return 0

    def test_shared_prefix_creates_nodes_once(self):
        self._insert(["a", "b"])
        self._insert(["a", "c"])
        self.assertEqual(
            self.created, [("a", []), ("b", ["a"]), ("c", ["a"])]
        )
        a = self.tree.root.get_child("a")
        self.assertEqual(set(a.children), {"b", "c"})

    def test_end_node_update_counts(self):
        self._insert(["a"])
        end = self._insert(["a"])
        self.assertEqual(end.content, 2)

    def test_empty_path_updates_root(self):
        end = self._insert([])
        self.assertIs(end, self.tree.root)
        self.assertEqual(self.tree.root.content, 1)

    def test_new_end_node_used_without_content(self):
        tree = PrefixTree()
        end = tree.insert(["x"], lambda node: "fresh", lambda c, n: None)
        self.assertEqual(end.content, "fresh")
        self.assertTrue(tree.root.has_children())

    def test_step_reducer_sees_every_step(self):
        self._insert(["a", "b", "c"])
        self.assertEqual(self.reduced, ["a", "b", "c"])


if __name__ == "__main__":
    unittest.main()
