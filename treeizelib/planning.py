"""Treeization planning for treeizelib.

The TreeizePlan resolves every parent/child relationship of a flat node
collection before any link is made. All structural errors are raised while
planning, so a failed build leaves every input node exactly as it was.
Applying a plan then only performs the linking.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional, Sequence, Tuple

from .config import BuildConfig, OrphanPolicy, TreeKind
from .core.node import TreeNode
from .errors import (
    ConfigurationError,
    DuplicateRootError,
    EmptyInputError,
    MissingParentError,
    NoTopContainerError,
)

if TYPE_CHECKING:
    from .core.tree import Tree

logger = logging.getLogger(__name__)


class TreeizePlan:
    """Validated plan for linking a flat node collection.

    Planning follows the input order:

    1. Map every identifier to its node (a duplicate identifier replaces the
       earlier node in the map).
    2. Skip invalid nodes entirely.
    3. Top nodes become the root (tree) or join the top nodes (forest); a
       second top node in tree mode is a DuplicateRootError.
    4. Other nodes are linked to the node their parent identifier resolves
       to. Unresolved nodes are orphans and follow the orphan policy.

    Attributes:
        config: The validated build configuration
        nodes: Input nodes in their original order
        index: Identifier to node map
        top_nodes: Valid top nodes in input order
        links: (parent, child) pairs in input order
        orphans: Orphans promoted under OrphanPolicy.TOP
        discarded: Orphans dropped under OrphanPolicy.DISCARD
        invalid: Nodes skipped because ``is_valid()`` is False
    """

    def __init__(self, nodes: Optional[Sequence[TreeNode]], config: Optional[BuildConfig] = None):
        """Create and validate a treeization plan.

        Args:
            nodes: Untreeized nodes
            config: Build configuration (default: tree, discard orphans)

        Raises:
            ConfigurationError: If the configuration is inconsistent
            EmptyInputError: If there are no nodes
            DuplicateRootError: If tree mode finds a second top node
            MissingParentError: If REJECT meets an unresolvable parent
            NoTopContainerError: If TOP has orphans but nowhere to put them
        """
        self.config = config or BuildConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(config_errors)

        if not nodes:
            raise EmptyInputError()

        self.nodes: List[TreeNode] = list(nodes)
        self.index: Dict[Hashable, TreeNode] = self._index_nodes(self.nodes)
        self.top_nodes: List[TreeNode] = []
        self.links: List[Tuple[TreeNode, TreeNode]] = []
        self.orphans: List[TreeNode] = []
        self.discarded: List[TreeNode] = []
        self.invalid: List[TreeNode] = []

        self._resolve()

    @property
    def kind(self) -> TreeKind:
        return self.config.kind

    @property
    def root(self) -> Optional[TreeNode]:
        if self.kind is TreeKind.TREE and self.top_nodes:
            return self.top_nodes[0]
        return None

    @property
    def size(self) -> int:
        """Number of nodes that end up in the structure."""
        return len(self.top_nodes) + len(self.links) + len(self.orphans)

    @staticmethod
    def _index_nodes(nodes: List[TreeNode]) -> Dict[Hashable, TreeNode]:
        index: Dict[Hashable, TreeNode] = {}
        for node in nodes:
            identifier = node.identifier()
            if identifier in index:
                logger.debug("Duplicate identifier %r, keeping the later node", identifier)
            index[identifier] = node
        return index

    def _resolve(self) -> None:
        policy = self.config.resolved_policy()
        is_tree = self.kind is TreeKind.TREE

        for node in self.nodes:
            if not node.is_valid():
                self.invalid.append(node)
                continue

            if node.is_top_node():
                if is_tree and self.top_nodes:
                    raise DuplicateRootError(node, self.top_nodes[0])
                self.top_nodes.append(node)
                continue

            parent_identifier = node.parent_identifier()
            parent = self.index.get(parent_identifier)

            if parent is not None:
                self.links.append((parent, node))
            elif policy is OrphanPolicy.REJECT:
                raise MissingParentError(parent_identifier, node.identifier())
            elif policy is OrphanPolicy.TOP:
                self.orphans.append(node)
            else:
                logger.debug(
                    "Discarding node %r, parent %r not found",
                    node.identifier(), parent_identifier,
                )
                self.discarded.append(node)

        if self.orphans and not self.top_nodes:
            raise NoTopContainerError(self.kind)

    def apply(self, tree: 'Tree') -> int:
        """Link the planned structure into ``tree``.

        Returns:
            Number of nodes placed in the structure
        """
        if self.kind is TreeKind.TREE:
            tree.root = self.root
        else:
            tree.top_nodes = tree.init_top_nodes()
            tree.top_nodes.update(self.top_nodes)

        for parent, child in self.links:
            parent.add_child(child)

        if self.orphans:
            if self.kind is TreeKind.FOREST:
                tree.top_nodes.update(self.orphans)
            else:
                for orphan in self.orphans:
                    tree.root.add_child(orphan)

        logger.debug(
            "Treeized %d of %d nodes as %s (%d orphans promoted, %d discarded, %d invalid)",
            self.size, len(self.nodes), self.kind.name,
            len(self.orphans), len(self.discarded), len(self.invalid),
        )
        return self.size

    def describe(self) -> Dict[str, Any]:
        """Summary of the plan, for debugging and logging."""
        return {
            'kind': self.kind.name,
            'orphan_policy': self.config.resolved_policy().name,
            'input': len(self.nodes),
            'top_nodes': len(self.top_nodes),
            'links': len(self.links),
            'orphans': len(self.orphans),
            'discarded': len(self.discarded),
            'invalid': len(self.invalid),
            'size': self.size,
        }
