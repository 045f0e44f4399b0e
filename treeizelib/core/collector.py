"""Visitors that derive results from a depth-first walk.

Every read operation on a Tree (flatten, find, map, count, render, paths)
is one of these collectors handed to ``depth_first_walk``. Each collector
is a callable visitor that accumulates its result on ``self.result``.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from ..config import TraversingAction
from .node import TreeNode

Predicate = Callable[[TreeNode], bool]


def _accept_all(node: TreeNode) -> bool:
    return True


class DataCollector(ABC):
    """Abstract base class for walk visitors with an accumulated result."""

    @abstractmethod
    def collect(self, node: TreeNode) -> Optional[TraversingAction]:
        """Handle one visited node.

        Returns:
            The traversal action, or None to continue
        """
        pass

    @property
    @abstractmethod
    def result(self) -> Any:
        pass

    def __call__(self, node: TreeNode) -> Optional[TraversingAction]:
        return self.collect(node)


class FlatCollector(DataCollector):
    """Collects nodes matching a predicate, in visiting order."""

    def __init__(self, predicate: Optional[Predicate] = None):
        self.predicate = predicate or _accept_all
        self._nodes: List[TreeNode] = []

    def collect(self, node: TreeNode) -> None:
        if self.predicate(node):
            self._nodes.append(node)

    @property
    def result(self) -> List[TreeNode]:
        return self._nodes


class FindCollector(DataCollector):
    """Finds the first node matching a predicate and stops the walk."""

    def __init__(self, predicate: Predicate):
        self.predicate = predicate
        self._found: Optional[TreeNode] = None

    def collect(self, node: TreeNode) -> TraversingAction:
        if self.predicate(node):
            self._found = node
            return TraversingAction.STOP
        return TraversingAction.CONTINUE

    @property
    def result(self) -> Optional[TreeNode]:
        return self._found


class MapCollector(DataCollector):
    """Maps ``key_fn(node)`` to node, in visiting order.

    A later node with the same key replaces the earlier one.
    """

    def __init__(self, key_fn: Callable[[TreeNode], Any],
                 predicate: Optional[Predicate] = None):
        self.key_fn = key_fn
        self.predicate = predicate or _accept_all
        self._mapping: Dict[Any, TreeNode] = {}

    def collect(self, node: TreeNode) -> None:
        if self.predicate(node):
            self._mapping[self.key_fn(node)] = node

    @property
    def result(self) -> Dict[Any, TreeNode]:
        return self._mapping


class CountCollector(DataCollector):
    """Counts visited nodes."""

    def __init__(self):
        self._count = 0

    def collect(self, node: TreeNode) -> None:
        self._count += 1

    @property
    def result(self) -> int:
        return self._count


class PathCollector(DataCollector):
    """Collects ``node.get_path(name_fn, separator)`` for each visited node."""

    def __init__(self, name_fn: Callable[[TreeNode], str], separator: str = "/"):
        self.name_fn = name_fn
        self.separator = separator
        self._paths: List[str] = []

    def collect(self, node: TreeNode) -> None:
        self._paths.append(node.get_path(self.name_fn, self.separator))

    @property
    def result(self) -> List[str]:
        return self._paths


class LineRenderer(DataCollector):
    """Renders each visited node as one indented line.

    The indent is ``layer`` prefix units; the first unit is ``first_prefix``
    when given. With ``first_prefix="+-"`` and ``prefix="--"`` a node at
    layer 3 is rendered as ``+-----name``.

    Args:
        emit: Receives each finished line. None keeps lines in ``result``
            only.
        formatter: Returns the label of a node
        prefix: Indent unit
        first_prefix: Replacement for the first indent unit
    """

    def __init__(self,
                 emit: Optional[Callable[[str], Any]],
                 formatter: Callable[[TreeNode], str],
                 prefix: str,
                 first_prefix: Optional[str] = None):
        self.emit = emit
        self.formatter = formatter
        self.prefix = prefix
        self.first_prefix = first_prefix
        self._lines: List[str] = []

    def format_line(self, node: TreeNode) -> str:
        layer = node.get_layer()
        indent = ""
        if layer > 0:
            head = self.first_prefix if self.first_prefix is not None else self.prefix
            indent = head + self.prefix * (layer - 1)
        return indent + str(self.formatter(node))

    def collect(self, node: TreeNode) -> None:
        line = self.format_line(node)
        self._lines.append(line)
        if self.emit is not None:
            self.emit(line)

    @property
    def result(self) -> List[str]:
        return self._lines
