"""TreeNode abstraction for treeizelib.

A TreeNode wraps one application record (a department row, a menu entry,
a category) and knows how to extract two things from it: its own
identifier and its parent's identifier. The builder uses those to link
nodes together; afterwards each node carries its parent and children links
and can answer layer and path questions on its own.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Hashable, List, Optional

from ..errors import CycleError
from .containers import NodeSet, SortedNodeSet


class TreeNode(ABC):
    """Abstract base class for nodes built from flat parent-referencing records.

    Subclasses implement the extraction contract:

    - ``is_top_node()``: whether the record is top level (e.g. its parent
      field is empty)
    - ``identifier()``: unique identifier across the whole input
    - ``parent_identifier()``: identifier of the parent record

    and may override ``is_valid()`` to keep malformed records out of
    treeization without raising.

    Node equality and hashing are defined by ``identifier()``, not by the
    wrapped value, so a node set never holds two nodes for the same record.

    Example:
        class DepartmentNode(TreeNode):
            def is_top_node(self):
                return self.value.parent_id is None

            def identifier(self):
                return self.value.id

            def parent_identifier(self):
                return self.value.parent_id
    """

    #: Container type created for ``children`` on the first ``add_child``
    children_container = NodeSet

    def __init__(self, value: Any):
        self._value = value
        self._parent: Optional['TreeNode'] = None
        self._children = None
        self._layer: Optional[int] = None

    # Extraction contract

    @abstractmethod
    def is_top_node(self) -> bool:
        """Return True if the wrapped record declares no parent."""
        pass

    @abstractmethod
    def identifier(self) -> Hashable:
        """Return the identifier of this node, unique across the input."""
        pass

    @abstractmethod
    def parent_identifier(self) -> Hashable:
        """Return the identifier of this node's parent.

        Only consulted when ``is_top_node()`` is False.
        """
        pass

    def is_valid(self) -> bool:
        """Return False to exclude this node from treeization."""
        return True

    # Links

    @property
    def value(self) -> Any:
        return self._value

    @property
    def parent(self) -> Optional['TreeNode']:
        return self._parent

    @property
    def children(self):
        """Child container, or None if no child was ever added."""
        return self._children

    def is_top(self) -> bool:
        """Whether this node has no parent link."""
        return self._parent is None

    def is_leaf(self) -> bool:
        return not self._children

    def init_children(self):
        """Create the container used for this node's children."""
        return self.children_container()

    def add_child(self, node: 'TreeNode') -> None:
        """Link ``node`` as a child of this node.

        If ``node`` is attached to another parent it is detached from it
        first, so a node is only ever owned by one children container.
        A different child with the same identifier is replaced by ``node``.
        """
        previous = node._parent
        if previous is not None and previous is not self:
            previous._discard_child(node)
        if self._children is None:
            self._children = self.init_children()

        existing = self._children.get(node)
        if existing is not None and existing is not node:
            self.remove_child(existing)
        self._children.add(node)
        node._parent = self
        node._reset_layers()

    def remove_child(self, node: 'TreeNode') -> None:
        """Unlink ``node`` from this node.

        Nodes that are not children of this node are ignored, including a
        different instance that merely shares a child's identifier.
        """
        if not self._discard_child(node):
            return
        if node._parent is self:
            node._parent = None
            node._reset_layers()

    def _discard_child(self, node: 'TreeNode') -> bool:
        """Drop ``node`` itself from the children container, if it is there."""
        if self._children is None or self._children.get(node) is not node:
            return False
        self._children.discard(node)
        return True

    def isolate(self) -> None:
        """Detach this node from its parent and from all of its children."""
        if self._parent is not None:
            self._parent._discard_child(self)
            self._parent = None
        if self._children is not None:
            for child in self._children:
                child._parent = None
                child._reset_layers()
            self._children.clear()
        self._layer = None

    def _reset_layers(self) -> None:
        """Forget the memoized layer of this node and its descendants.

        A node whose layer is not memoized has no memoized descendants
        (``get_layer`` fills whole parent chains), so the walk stops there.
        """
        stack = [self]
        while stack:
            node = stack.pop()
            if node._layer is None:
                continue
            node._layer = None
            if node._children:
                stack.extend(node._children)

    # Derived information

    def get_layer(self) -> int:
        """Get the distance from the nearest top node.

        Only meaningful after treeization.

        Returns:
            -1 for an invalid node, 0 for a top node, parent's layer + 1
            otherwise

        Raises:
            CycleError: If the parent chain loops back on itself
        """
        if self._layer is not None:
            return self._layer

        # Walk up until a memoized layer, an invalid node or a top node,
        # then fill downwards
        chain: List[TreeNode] = []
        seen = set()
        current = self
        while True:
            if current._layer is not None:
                base = current._layer
                break
            if not current.is_valid():
                current._layer = -1
                base = -1
                break
            if id(current) in seen:
                raise CycleError(current)
            seen.add(id(current))
            chain.append(current)
            if current._parent is None:
                base = -1
                break
            current = current._parent

        for node in reversed(chain):
            base += 1
            node._layer = base
        return self._layer

    @property
    def layer(self) -> int:
        return self.get_layer()

    def get_path(self, name_fn: Callable[['TreeNode'], str], separator: str = "/") -> str:
        """Join the names of all ancestors, top node first, ending with self.

        Args:
            name_fn: Returns the path segment for a node
            separator: Placed between segments

        Raises:
            CycleError: If the parent chain loops back on itself
        """
        names = []
        seen = set()
        current = self
        while current is not None:
            if id(current) in seen:
                raise CycleError(current)
            seen.add(id(current))
            names.append(str(name_fn(current)))
            current = current._parent
        return str(separator).join(reversed(names))

    def ancestors(self) -> List['TreeNode']:
        """Return the parent chain, nearest parent first."""
        result = []
        seen = {id(self)}
        current = self._parent
        while current is not None:
            if id(current) in seen:
                raise CycleError(current)
            seen.add(id(current))
            result.append(current)
            current = current._parent
        return result

    # Identity

    def __eq__(self, other: object) -> bool:
        """Nodes are equal if they are the same node class with the same identifier."""
        if self is other:
            return True
        if not isinstance(other, TreeNode):
            return NotImplemented
        return type(self) is type(other) and self.identifier() == other.identifier()

    def __hash__(self) -> int:
        return hash(self.identifier())

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}[value={self._value!r}, layer={self._layer}, "
            f"is_top={self.is_top()}, is_leaf={self.is_leaf()}]"
        )


class SortedTreeNode(TreeNode):
    """TreeNode whose siblings are kept in a total order.

    Subclasses implement ``compare(other)`` returning a negative number,
    zero or a positive number. The order only positions siblings; identity
    still comes from ``identifier()``, so two nodes that compare equal but
    have different identifiers are both kept.
    """

    children_container = SortedNodeSet

    @abstractmethod
    def compare(self, other: 'SortedTreeNode') -> int:
        """Compare this node with a sibling for ordering."""
        pass

    def __lt__(self, other: 'SortedTreeNode') -> bool:
        return self.compare(other) < 0

    def __le__(self, other: 'SortedTreeNode') -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: 'SortedTreeNode') -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: 'SortedTreeNode') -> bool:
        return self.compare(other) >= 0
