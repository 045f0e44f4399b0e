"""Tree and forest aggregates for treeizelib.

A Tree is built once from a flat collection of untreeized nodes and then
read through depth-first traversal. It is not thread safe: read-only
traversals may run side by side, but nothing may mutate node links while
any traversal is in progress.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Union

from ..config import BuildConfig, OrphanPolicy, RenderConfig, TraversingAction, TreeKind
from ..errors import ConfigurationError
from ..planning import TreeizePlan
from .collector import (
    CountCollector,
    FindCollector,
    FlatCollector,
    LineRenderer,
    MapCollector,
    PathCollector,
)
from .containers import NodeSet, SortedNodeSet
from .node import TreeNode
from .traverser import as_start_nodes, depth_first_walk

Start = Union[TreeNode, Iterable[TreeNode], None]


class Tree:
    """A single-rooted tree or a forest built from flat node records.

    Args:
        nodes: Untreeized nodes; must not be empty
        forest: Build a forest (many top nodes) instead of a tree
        orphan_policy: What to do with nodes whose parent is missing.
            None behaves like OrphanPolicy.DISCARD.
        config: Full BuildConfig; overrides ``forest`` and ``orphan_policy``

    Raises:
        EmptyInputError, DuplicateRootError, MissingParentError,
        NoTopContainerError, ConfigurationError

    Example:
        >>> tree = Tree(nodes, forest=True, orphan_policy=OrphanPolicy.TOP)
        >>> tree.print_tree(print, lambda n: n.value.name, "--", "+-")
    """

    #: Container type for top nodes in forest mode
    top_container = NodeSet

    def __init__(self,
                 nodes: Iterable[TreeNode],
                 forest: bool = False,
                 orphan_policy: Union[OrphanPolicy, str, None] = None,
                 config: Optional[BuildConfig] = None):
        if config is None:
            config = BuildConfig(
                kind=TreeKind.FOREST if forest else TreeKind.TREE,
                orphan_policy=orphan_policy,
            )

        self.kind: TreeKind = config.kind
        self.root: Optional[TreeNode] = None
        self.top_nodes: Optional[NodeSet] = None

        plan = TreeizePlan(list(nodes) if nodes is not None else None, config)
        self._size = plan.apply(self)

    def init_top_nodes(self) -> NodeSet:
        """Create the container used for top nodes in forest mode."""
        return self.top_container()

    @property
    def is_forest(self) -> bool:
        return self.kind is TreeKind.FOREST

    def start_nodes(self) -> List[TreeNode]:
        """Default traversal start: the root, or every top node."""
        if self.kind is TreeKind.TREE:
            return [self.root] if self.root is not None else []
        return list(self.top_nodes) if self.top_nodes is not None else []

    def _resolve_start(self, start: Start) -> List[TreeNode]:
        if start is None:
            return self.start_nodes()
        return as_start_nodes(start)

    # Traversal

    def dft(self,
            visitor: Callable[[TreeNode], Optional[TraversingAction]],
            start: Start = None) -> None:
        """Depth-first traversal.

        Args:
            visitor: Called per node; returns a TraversingAction, or None
                to continue
            start: A node or nodes to start from (default: whole tree)
        """
        depth_first_walk(self._resolve_start(start), visitor)

    def flat(self,
             predicate: Optional[Callable[[TreeNode], bool]] = None,
             start: Start = None) -> List[TreeNode]:
        """Flatten to a list of nodes in depth-first order.

        Args:
            predicate: Keep only nodes it accepts (default: all)
            start: A node or nodes to start from (default: whole tree)
        """
        collector = FlatCollector(predicate)
        self.dft(collector, start)
        return collector.result

    def dfs(self,
            predicate: Callable[[TreeNode], bool],
            start: Start = None) -> Optional[TreeNode]:
        """Depth-first search for the first node matching ``predicate``."""
        collector = FindCollector(predicate)
        self.dft(collector, start)
        return collector.result

    def to_map(self,
               key_fn: Callable[[TreeNode], Any],
               predicate: Optional[Callable[[TreeNode], bool]] = None) -> Dict[Any, TreeNode]:
        """Map ``key_fn(node)`` to node over the whole tree.

        Keys keep depth-first order; later nodes win on key collisions.
        """
        collector = MapCollector(key_fn, predicate)
        self.dft(collector)
        return collector.result

    def paths(self, name_fn: Callable[[TreeNode], str], separator: str = "/",
              start: Start = None) -> List[str]:
        """Paths of every node, in depth-first order."""
        collector = PathCollector(name_fn, separator)
        self.dft(collector, start)
        return collector.result

    def leaves(self, start: Start = None) -> List[TreeNode]:
        return self.flat(lambda node: node.is_leaf(), start)

    # Size

    def cached_size(self) -> int:
        """Node count fixed at construction time."""
        return self._size

    def size(self) -> int:
        """Node count recomputed by a full traversal.

        Use this after mutating links with ``add_child`` or ``isolate``.
        """
        collector = CountCollector()
        self.dft(collector)
        return collector.result

    # Rendering

    def print_tree(self,
                   emit: Any = print,
                   formatter: Optional[Callable[[TreeNode], str]] = None,
                   prefix: Optional[str] = None,
                   first_prefix: Optional[str] = None,
                   config: Optional[RenderConfig] = None) -> List[str]:
        """Emit one line per node, indented by its layer.

        Args:
            emit: Line sink: a callable taking a string, or a writable
                stream (anything with ``write``)
            formatter: Node label function (default: ``str``)
            prefix: Indent unit (default: ``"--"``)
            first_prefix: Replacement for the first indent unit
            config: RenderConfig supplying the values not given explicitly

        Returns:
            The emitted lines
        """
        renderer = self._renderer(_as_line_sink(emit), formatter, prefix, first_prefix, config)
        self.dft(renderer)
        return renderer.result

    def format_tree(self,
                    formatter: Optional[Callable[[TreeNode], str]] = None,
                    prefix: Optional[str] = None,
                    first_prefix: Optional[str] = None,
                    config: Optional[RenderConfig] = None) -> str:
        """Render the tree to a single newline-joined string."""
        renderer = self._renderer(None, formatter, prefix, first_prefix, config)
        self.dft(renderer)
        return "\n".join(renderer.result)

    @staticmethod
    def _renderer(emit, formatter, prefix, first_prefix, config) -> LineRenderer:
        config = config or RenderConfig()
        problems = config.validate()
        if problems:
            raise ConfigurationError(problems)
        return LineRenderer(
            emit,
            formatter if formatter is not None else config.formatter,
            prefix if prefix is not None else config.prefix,
            first_prefix if first_prefix is not None else config.first_prefix,
        )

    # Python protocol

    def __iter__(self) -> Iterator[TreeNode]:
        return iter(self.flat())

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, node: object) -> bool:
        return self.dfs(lambda candidate: candidate == node) is not None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}[type={self.kind.name}, size={self.size()}]"


class SortedTree(Tree):
    """Tree whose top nodes are ordered by ``SortedTreeNode.compare``.

    Combined with SortedTreeNode children, every traversal visits siblings
    in that order. Nothing else differs from Tree.
    """

    top_container = SortedNodeSet


def _as_line_sink(emit: Any) -> Callable[[str], Any]:
    if emit is None or callable(emit):
        return emit
    if hasattr(emit, "write"):
        return lambda line: emit.write(line + "\n")
    raise TypeError(f"emit must be callable or a writable stream, got {type(emit).__name__}")
