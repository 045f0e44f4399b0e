"""Configuration system for treeizelib.

This module defines how users describe the structure they want built from
a flat node collection (tree or forest, what to do with orphans) and how
a built structure is rendered as text.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Union


class TreeKind(Enum):
    """Shape of the linked structure produced by treeization."""
    TREE = "tree"       # Exactly one root
    FOREST = "forest"   # A set of top-level nodes


class OrphanPolicy(Enum):
    """What to do with a node whose parent identifier resolves to nothing."""
    DISCARD = "discard"  # Drop silently, never linked or counted
    TOP = "top"          # Promote to top level (or attach to the root)
    REJECT = "reject"    # Fail the build with MissingParentError


class TraversingAction(Enum):
    """Control signal returned by a visitor during depth-first traversal."""
    CONTINUE = "continue"  # Visit this node's children next
    STOP = "stop"          # Halt the whole traversal
    SKIP = "skip"          # Do not descend into this node's children


def _parse_enum(enum_cls, value, what: str):
    """Accept an enum member or its (case-insensitive) value/name."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        lowered = value.lower()
        for member in enum_cls:
            if member.value == lowered or member.name.lower() == lowered:
                return member
    raise ValueError(
        f"Unknown {what}: {value!r}. "
        f"Choose from: {', '.join(m.value for m in enum_cls)}"
    )


def parse_kind(kind: Union[TreeKind, str]) -> TreeKind:
    """Parse a tree kind from an enum member or a string like ``"forest"``."""
    return _parse_enum(TreeKind, kind, "tree kind")


def parse_orphan_policy(policy: Union[OrphanPolicy, str, None]) -> Optional[OrphanPolicy]:
    """Parse an orphan policy; ``None`` passes through unchanged."""
    if policy is None:
        return None
    return _parse_enum(OrphanPolicy, policy, "orphan policy")


@dataclass
class BuildConfig:
    """Complete configuration for treeization.

    ``orphan_policy`` of ``None`` behaves like ``OrphanPolicy.DISCARD``.
    """

    kind: TreeKind = TreeKind.TREE
    orphan_policy: Optional[OrphanPolicy] = None

    def __post_init__(self):
        # Let callers write BuildConfig(kind="forest", orphan_policy="top")
        if isinstance(self.kind, str):
            self.kind = parse_kind(self.kind)
        if isinstance(self.orphan_policy, str):
            self.orphan_policy = parse_orphan_policy(self.orphan_policy)

    @property
    def is_forest(self) -> bool:
        return self.kind is TreeKind.FOREST

    def resolved_policy(self) -> OrphanPolicy:
        """Return the effective orphan policy."""
        return self.orphan_policy or OrphanPolicy.DISCARD

    # Convenience constructors for common configurations

    @classmethod
    def tree(cls, orphan_policy: Optional[OrphanPolicy] = None) -> 'BuildConfig':
        return cls(kind=TreeKind.TREE, orphan_policy=orphan_policy)

    @classmethod
    def forest(cls, orphan_policy: Optional[OrphanPolicy] = None) -> 'BuildConfig':
        return cls(kind=TreeKind.FOREST, orphan_policy=orphan_policy)

    @classmethod
    def lenient(cls) -> 'BuildConfig':
        """Forest that keeps every valid node, promoting orphans to the top."""
        return cls(kind=TreeKind.FOREST, orphan_policy=OrphanPolicy.TOP)

    @classmethod
    def strict(cls) -> 'BuildConfig':
        """Single-rooted tree that refuses any unresolved parent."""
        return cls(kind=TreeKind.TREE, orphan_policy=OrphanPolicy.REJECT)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.kind, TreeKind):
            errors.append(f"kind must be a TreeKind, got {self.kind!r}")

        if self.orphan_policy is not None and not isinstance(self.orphan_policy, OrphanPolicy):
            errors.append(
                f"orphan_policy must be an OrphanPolicy or None, got {self.orphan_policy!r}"
            )

        return errors


@dataclass
class RenderConfig:
    """Configuration for the line-based tree renderer.

    Each node is emitted on one line, indented by ``layer`` prefix units.
    The first unit uses ``first_prefix`` when it is set.
    """

    prefix: str = "--"
    first_prefix: Optional[str] = None
    formatter: Callable[[Any], str] = str

    @classmethod
    def ascii(cls, formatter: Callable[[Any], str] = str) -> 'RenderConfig':
        """The ``+-`` / ``--`` style used by the org chart example."""
        return cls(prefix="--", first_prefix="+-", formatter=formatter)

    @classmethod
    def indented(cls, width: int = 2, formatter: Callable[[Any], str] = str) -> 'RenderConfig':
        return cls(prefix=" " * width, formatter=formatter)

    def validate(self) -> List[str]:
        errors = []
        if not isinstance(self.prefix, str):
            errors.append("prefix must be a string")
        if self.first_prefix is not None and not isinstance(self.first_prefix, str):
            errors.append("first_prefix must be a string or None")
        if not callable(self.formatter):
            errors.append("formatter must be callable")
        return errors
