#!/usr/bin/env python3
"""Build an org chart from a shuffled department table and print it.

Shows the plain forest (table order among siblings) and the sorted
forest (siblings ordered by each department's display order).
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from treeizelib import OrphanPolicy, SortedTree, Tree, get_tree_stats
from treeizelib.testing import make_department_nodes


def demo_forest():
    print("\n=== Department Forest ===")
    nodes = make_department_nodes(shuffle_seed=42)
    tree = Tree(nodes, forest=True, orphan_policy=OrphanPolicy.TOP)
    tree.print_tree(sys.stdout, lambda n: n.value.name, "--", "+-")

    stats = get_tree_stats(tree)
    print(f"\n{stats['size']} departments, {stats['top_count']} centres, "
          f"{stats['leaf_count']} leaves, deepest layer {stats['max_layer']}")


def demo_sorted_forest():
    print("\n=== Sorted Department Forest ===")
    nodes = make_department_nodes(shuffle_seed=42, sorted_nodes=True)
    tree = SortedTree(nodes, forest=True, orphan_policy=OrphanPolicy.TOP)
    tree.print_tree(print, lambda n: f"{n.value.order}.{n.value.name}", "--", "+-")


def demo_paths():
    print("\n=== Department Paths ===")
    tree = Tree(make_department_nodes(), forest=True)
    for path in tree.paths(lambda n: n.value.id, " > "):
        print(path)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG if "-v" in sys.argv else logging.WARNING)
    demo_forest()
    demo_sorted_forest()
    demo_paths()
