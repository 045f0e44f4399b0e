"""Node containers for children and top-level nodes.

Both containers are sets in the sense that matters for a hierarchy: a node
appears at most once, where "once" means by node identity (identifier
equality), not by object reference. They differ only in iteration order.
"""

import bisect
from functools import cmp_to_key
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional


class NodeSet:
    """Insertion-ordered set of nodes.

    Adding a node equal to one already present is a no-op: the first
    instance keeps its slot.
    """

    def __init__(self, nodes: Optional[Iterable[Any]] = None):
        self._items: Dict[Any, Any] = {}
        if nodes is not None:
            self.update(nodes)

    def add(self, node: Any) -> None:
        if node not in self._items:
            self._items[node] = node

    def update(self, nodes: Iterable[Any]) -> None:
        for node in nodes:
            self.add(node)

    def discard(self, node: Any) -> None:
        self._items.pop(node, None)

    def remove(self, node: Any) -> None:
        if node not in self._items:
            raise KeyError(node)
        self.discard(node)

    def clear(self) -> None:
        self._items.clear()

    def get(self, node: Any, default: Any = None) -> Any:
        """Return the stored instance equal to ``node``."""
        return self._items.get(node, default)

    def __contains__(self, node: object) -> bool:
        return node in self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self)!r})"


class SortedNodeSet(NodeSet):
    """Node set iterated in the order given by a sort key.

    Identity deduplicates and the key positions. Entries with equal keys
    but different identities are all kept, in insertion order.

    Args:
        nodes: Initial nodes
        key: Sort key function. Defaults to ``cmp_to_key(compare)`` so that
            any node exposing ``compare(other) -> int`` sorts naturally.
    """

    def __init__(self, nodes: Optional[Iterable[Any]] = None,
                 key: Optional[Callable[[Any], Any]] = None):
        self._key = key or _compare_key
        self._order: List[Any] = []
        self._keys: List[Any] = []
        super().__init__(nodes)

    def add(self, node: Any) -> None:
        if node in self._items:
            return
        node_key = self._key(node)
        index = bisect.bisect_right(self._keys, node_key)
        self._keys.insert(index, node_key)
        self._order.insert(index, node)
        self._items[node] = node

    def discard(self, node: Any) -> None:
        stored = self._items.pop(node, None)
        if stored is None:
            return
        # Equality is by identifier, so look the slot up by identity
        for index, candidate in enumerate(self._order):
            if candidate is stored:
                del self._order[index]
                del self._keys[index]
                return

    def clear(self) -> None:
        super().clear()
        self._order.clear()
        self._keys.clear()

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._order))


_compare_key = cmp_to_key(lambda left, right: left.compare(right))
