"""High-level API for treeizelib.

This module provides simple, functional interfaces for common operations:
building a tree or forest from flat records and querying it. These
functions wrap the Tree class for ease of use in simple cases.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from .config import BuildConfig, OrphanPolicy, RenderConfig, TreeKind, parse_orphan_policy
from .core.node import TreeNode
from .core.tree import SortedTree, Tree

Predicate = Callable[[TreeNode], bool]


def build_tree(
    nodes: Iterable[TreeNode],
    orphan_policy: Union[OrphanPolicy, str, None] = None,
    forest: bool = False,
) -> Tree:
    """Build a single-rooted tree (or a forest with ``forest=True``).

    Args:
        nodes: Untreeized nodes
        orphan_policy: OrphanPolicy or its name ("discard", "top", "reject")
        forest: Build a forest instead

    Example:
        >>> tree = build_tree(nodes, orphan_policy="reject")
        >>> tree.root.is_top()
        True
    """
    config = BuildConfig(
        kind=TreeKind.FOREST if forest else TreeKind.TREE,
        orphan_policy=parse_orphan_policy(orphan_policy),
    )
    return Tree(nodes, config=config)


def build_forest(
    nodes: Iterable[TreeNode],
    orphan_policy: Union[OrphanPolicy, str, None] = None,
) -> Tree:
    """Build a forest: every top-level node becomes one of its roots."""
    return build_tree(nodes, orphan_policy=orphan_policy, forest=True)


def build_sorted_tree(
    nodes: Iterable[TreeNode],
    orphan_policy: Union[OrphanPolicy, str, None] = None,
    forest: bool = False,
) -> SortedTree:
    """Build a tree or forest whose siblings follow ``compare`` order.

    The nodes should be SortedTreeNode instances.
    """
    config = BuildConfig(
        kind=TreeKind.FOREST if forest else TreeKind.TREE,
        orphan_policy=parse_orphan_policy(orphan_policy),
    )
    return SortedTree(nodes, config=config)


def flatten(tree: Tree, predicate: Optional[Predicate] = None) -> List[TreeNode]:
    """All nodes (or those matching ``predicate``) in depth-first order."""
    return tree.flat(predicate)


def find_node(tree: Tree, predicate: Predicate) -> Optional[TreeNode]:
    """First node in depth-first order matching ``predicate``, or None."""
    return tree.dfs(predicate)


def find_by_identifier(tree: Tree, identifier: Any) -> Optional[TreeNode]:
    """Node whose ``identifier()`` equals ``identifier``, or None."""
    return tree.dfs(lambda node: node.identifier() == identifier)


def count_nodes(tree: Tree, predicate: Optional[Predicate] = None) -> int:
    """Count nodes currently reachable in the tree.

    Example:
        >>> count_nodes(tree, lambda n: n.is_leaf())
        11
    """
    if predicate is None:
        return tree.size()
    return len(tree.flat(predicate))


def get_tree_paths(
    tree: Tree,
    name_fn: Callable[[TreeNode], str],
    separator: str = "/",
) -> List[str]:
    """Path of every node from its top node, in depth-first order."""
    return tree.paths(name_fn, separator)


def get_leaf_nodes(tree: Tree) -> List[TreeNode]:
    """Nodes without children, in depth-first order."""
    return tree.leaves()


def get_tree_stats(tree: Tree) -> Dict[str, Any]:
    """Get statistics about a built tree.

    Returns:
        Dictionary with size, cached size, leaf and top node counts,
        the deepest layer and the node count per layer
    """
    stats = {
        'kind': tree.kind.name,
        'size': 0,
        'cached_size': tree.cached_size(),
        'leaf_count': 0,
        'top_count': len(tree.start_nodes()),
        'max_layer': -1,
        'layers': {},
    }

    def visit(node: TreeNode) -> None:
        layer = node.get_layer()
        stats['size'] += 1
        if node.is_leaf():
            stats['leaf_count'] += 1
        stats['max_layer'] = max(stats['max_layer'], layer)
        stats['layers'][layer] = stats['layers'].get(layer, 0) + 1

    tree.dft(visit)
    return stats


def render_tree(
    tree: Tree,
    formatter: Callable[[TreeNode], str] = str,
    prefix: str = "--",
    first_prefix: Optional[str] = None,
    emit: Any = None,
) -> str:
    """Render the tree as indented text.

    Args:
        tree: Built tree
        formatter: Node label function
        prefix: Indent unit
        first_prefix: Replacement for the first indent unit
        emit: Optional line sink (callable or writable stream) that also
            receives each line

    Returns:
        The rendered text, one node per line
    """
    config = RenderConfig(prefix=prefix, first_prefix=first_prefix, formatter=formatter)
    if emit is None:
        return tree.format_tree(config=config)
    return "\n".join(tree.print_tree(emit, config=config))
