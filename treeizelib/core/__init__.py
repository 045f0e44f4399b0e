"""Core abstractions for treeizelib.

This package contains the node contract, the node containers, the
traversal primitive with its collectors, and the Tree aggregate.
"""

from .containers import NodeSet, SortedNodeSet
from .node import TreeNode, SortedTreeNode
from .traverser import depth_first_walk, continue_traversing
from .collector import DataCollector
from .tree import Tree, SortedTree

__all__ = [
    "NodeSet",
    "SortedNodeSet",
    "TreeNode",
    "SortedTreeNode",
    "depth_first_walk",
    "continue_traversing",
    "DataCollector",
    "Tree",
    "SortedTree",
]
