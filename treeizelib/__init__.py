"""treeizelib - build trees and forests from flat parent-referencing records.

Wrap each record in a TreeNode subclass that knows its own identifier and
its parent's identifier, hand the nodes to Tree, then traverse:

    from treeizelib import Tree, TreeNode, OrphanPolicy

    tree = Tree(nodes, forest=True, orphan_policy=OrphanPolicy.TOP)
    tree.print_tree(print, lambda n: n.value.name, "--", "+-")

SortedTreeNode and SortedTree keep siblings in a caller-defined order.
"""

__version__ = "0.1.0"

from .config import (
    TreeKind,
    OrphanPolicy,
    TraversingAction,
    BuildConfig,
    RenderConfig,
)
from .errors import (
    TreeError,
    ConfigurationError,
    EmptyInputError,
    DuplicateRootError,
    MissingParentError,
    NoTopContainerError,
    CycleError,
)

# Core components
from .core.containers import NodeSet, SortedNodeSet
from .core.node import TreeNode, SortedTreeNode
from .core.traverser import depth_first_walk, continue_traversing
from .core.collector import (
    DataCollector,
    FlatCollector,
    FindCollector,
    MapCollector,
    CountCollector,
    PathCollector,
    LineRenderer,
)
from .core.tree import Tree, SortedTree
from .planning import TreeizePlan

# High-level API
from .api import (
    build_tree,
    build_forest,
    build_sorted_tree,
    flatten,
    find_node,
    find_by_identifier,
    count_nodes,
    get_tree_paths,
    get_leaf_nodes,
    get_tree_stats,
    render_tree,
)

__all__ = [
    "__version__",
    # Config
    "TreeKind",
    "OrphanPolicy",
    "TraversingAction",
    "BuildConfig",
    "RenderConfig",
    # Errors
    "TreeError",
    "ConfigurationError",
    "EmptyInputError",
    "DuplicateRootError",
    "MissingParentError",
    "NoTopContainerError",
    "CycleError",
    # Core
    "NodeSet",
    "SortedNodeSet",
    "TreeNode",
    "SortedTreeNode",
    "depth_first_walk",
    "continue_traversing",
    "DataCollector",
    "FlatCollector",
    "FindCollector",
    "MapCollector",
    "CountCollector",
    "PathCollector",
    "LineRenderer",
    "Tree",
    "SortedTree",
    "TreeizePlan",
    # API
    "build_tree",
    "build_forest",
    "build_sorted_tree",
    "flatten",
    "find_node",
    "find_by_identifier",
    "count_nodes",
    "get_tree_paths",
    "get_leaf_nodes",
    "get_tree_stats",
    "render_tree",
]
