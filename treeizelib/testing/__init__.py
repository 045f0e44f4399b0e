"""Sample node types and data for testing code built on treeizelib."""

from .fixtures import *  # noqa: F401,F403
