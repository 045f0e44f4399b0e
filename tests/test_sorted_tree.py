"""Tests for SortedTree and SortedTreeNode sibling ordering."""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from treeizelib import OrphanPolicy, SortedNodeSet, SortedTree, Tree
from treeizelib.testing import department_node, make_department_nodes


def ids(nodes):
    return [node.identifier() for node in nodes]


class TestSiblingOrder(unittest.TestCase):

    def test_children_visited_in_compare_order(self):
        nodes = [
            department_node("root", order=0),
            department_node("three", "root", order=3),
            department_node("one", "root", order=1),
            department_node("two", "root", order=2),
        ]
        tree = SortedTree(nodes)
        self.assertEqual(ids(tree.flat()), ["root", "one", "two", "three"])
        self.assertIsInstance(tree.root.children, SortedNodeSet)

    def test_top_nodes_sorted_in_forest(self):
        nodes = [
            department_node("c", order=3),
            department_node("a", order=1),
            department_node("b", order=2),
        ]
        forest = SortedTree(nodes, forest=True)
        self.assertEqual(ids(forest.top_nodes), ["a", "b", "c"])
        self.assertIsInstance(forest.top_nodes, SortedNodeSet)

    def test_plain_tree_keeps_insertion_order_for_top_nodes(self):
        nodes = [
            department_node("c", order=3),
            department_node("a", order=1),
        ]
        forest = Tree(nodes, forest=True)
        self.assertEqual(ids(forest.top_nodes), ["c", "a"])

    def test_equal_order_siblings_both_kept(self):
        nodes = [
            department_node("root", order=0),
            department_node("x", "root", order=1),
            department_node("y", "root", order=1),
        ]
        tree = SortedTree(nodes)
        self.assertEqual(ids(tree.flat()), ["root", "x", "y"])
        self.assertEqual(tree.cached_size(), 3)

    def test_orphans_promoted_in_order(self):
        nodes = [
            department_node("top", order=5),
            department_node("late", "gone", order=9),
            department_node("early", "gone", order=1),
        ]
        forest = SortedTree(nodes, forest=True, orphan_policy=OrphanPolicy.TOP)
        self.assertEqual(ids(forest.top_nodes), ["early", "top", "late"])

    def test_added_child_takes_its_sorted_place(self):
        nodes = [
            department_node("root", order=0),
            department_node("a", "root", order=1),
            department_node("c", "root", order=3),
        ]
        tree = SortedTree(nodes)
        tree.root.add_child(department_node("b", "root", order=2))
        self.assertEqual(ids(tree.root.children), ["a", "b", "c"])


class TestSortedDepartments(unittest.TestCase):
    """Sorted rows reverse the table order among siblings."""

    EXPECTED_ORDER = [
        "boss", "sec",
        "admin", "hr", "salary", "job", "admin2",
        "opr", "opr-mw", "opr-act", "opr-sku",
        "tech", "develop", "tech-fe", "tech-mw", "tech-be", "product", "product-mw",
    ]

    def test_order_independent_of_input_shuffle(self):
        for seed in (None, 1, 2, 3):
            nodes = make_department_nodes(shuffle_seed=seed, sorted_nodes=True)
            forest = SortedTree(nodes, forest=True, orphan_policy=OrphanPolicy.TOP)
            self.assertEqual(ids(forest.flat()), self.EXPECTED_ORDER)

    def test_render_with_order_labels(self):
        nodes = make_department_nodes(sorted_nodes=True)
        forest = SortedTree(nodes, forest=True)
        lines = forest.print_tree(None, lambda n: f"{n.value.order}.{n.value.id}", "--", "+-")
        self.assertEqual(lines[:4], ["15.boss", "+-8.sec", "16.admin", "+-6.hr"])


if __name__ == "__main__":
    unittest.main()
