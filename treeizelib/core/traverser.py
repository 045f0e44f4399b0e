"""Depth-first traversal for treeizelib.

A single primitive, ``depth_first_walk``, drives every read operation on a
built tree. It keeps an explicit worklist instead of recursing, so deep
hierarchies do not hit the interpreter's recursion limit.
"""

from collections import deque
from typing import Any, Callable, Deque, Iterable, List, Optional, Union

from ..config import TraversingAction
from .node import TreeNode

Visitor = Callable[[TreeNode], Optional[TraversingAction]]


def as_start_nodes(start: Union[TreeNode, Iterable[TreeNode], None]) -> List[TreeNode]:
    """Normalize a start argument to a list of nodes.

    Accepts a single node, any iterable of nodes, or None (no nodes).
    """
    if start is None:
        return []
    if isinstance(start, TreeNode):
        return [start]
    return list(start)


def depth_first_walk(start_nodes: Iterable[TreeNode], visitor: Visitor) -> None:
    """Walk nodes pre-order, depth first.

    Each visited node's children go to the front of the worklist in their
    container order, so a node's whole subtree is visited before its next
    sibling.

    Args:
        start_nodes: Nodes to start from, visited in the given order
        visitor: Called once per node. Returns a TraversingAction; None is
            treated as CONTINUE so plain consumers work unchanged.
    """
    worklist: Deque[TreeNode] = deque(start_nodes)

    while worklist:
        current = worklist.popleft()
        action = visitor(current)

        if action is TraversingAction.STOP:
            break
        if action is TraversingAction.SKIP:
            continue

        if not current.is_leaf():
            # extendleft reverses, so feed it the children backwards
            worklist.extendleft(reversed(list(current.children)))


def continue_traversing(consumer: Callable[[TreeNode], Any]) -> Visitor:
    """Wrap a consumer so it always asks the walk to continue."""
    def visitor(node: TreeNode) -> TraversingAction:
        consumer(node)
        return TraversingAction.CONTINUE
    return visitor
