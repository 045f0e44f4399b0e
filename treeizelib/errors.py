"""Exception taxonomy for treeizelib.

Every failure is a caller-input problem surfaced synchronously. Nothing is
retried and nothing is swallowed, except orphans dropped under
``OrphanPolicy.DISCARD``, which is not an error path.
"""

from typing import Any, List


class TreeError(Exception):
    """Base class for all treeizelib errors."""
    pass


class ConfigurationError(TreeError, ValueError):
    """Raised when a BuildConfig or RenderConfig fails validation."""

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__(f"Invalid configuration: {'; '.join(self.problems)}")


class EmptyInputError(TreeError, ValueError):
    """Raised when a tree is built from no nodes at all."""

    def __init__(self, message: str = "Nodes can not be empty"):
        super().__init__(message)


class DuplicateRootError(TreeError):
    """Raised when tree mode finds a second top-level node."""

    def __init__(self, node: Any, root: Any = None):
        self.node = node
        self.root = root
        super().__init__(f"Found replicated root node {node!r}")


class MissingParentError(TreeError, LookupError):
    """Raised under OrphanPolicy.REJECT for a node whose parent is absent."""

    def __init__(self, parent_identifier: Any, identifier: Any):
        self.parent_identifier = parent_identifier
        self.identifier = identifier
        super().__init__(
            f"Cannot find parent node '{parent_identifier}' for node '{identifier}'"
        )


class NoTopContainerError(TreeError):
    """Raised when promoted orphans have nowhere to go.

    Forest mode needs at least one genuine top-level node, tree mode needs
    a root.
    """

    def __init__(self, kind: Any):
        self.kind = kind
        where = "no root" if getattr(kind, "name", kind) == "TREE" else "no top nodes"
        super().__init__(f"Cannot process orphan nodes because this tree has {where}")


class CycleError(TreeError):
    """Raised when walking parent links from a node returns to that chain."""

    def __init__(self, node: Any):
        self.node = node
        super().__init__(f"Parent cycle detected at node {node!r}")
