"""Tests for the functional API in treeizelib.api."""

import io
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from treeizelib import (
    DuplicateRootError,
    MissingParentError,
    SortedTree,
    TreeKind,
    build_forest,
    build_sorted_tree,
    build_tree,
    count_nodes,
    find_by_identifier,
    find_node,
    flatten,
    get_leaf_nodes,
    get_tree_paths,
    get_tree_stats,
    render_tree,
)
from treeizelib.testing import department_node, make_department_nodes


def ids(nodes):
    return [node.identifier() for node in nodes]


@pytest.fixture
def forest():
    return build_forest(make_department_nodes(), orphan_policy="top")


def test_build_tree_and_forest():
    nodes = [department_node("A"), department_node("B", "A")]
    assert build_tree(nodes).kind is TreeKind.TREE

    with pytest.raises(DuplicateRootError):
        build_tree(make_department_nodes())

    assert build_forest(make_department_nodes()).kind is TreeKind.FOREST


def test_build_tree_with_policy_name():
    nodes = [department_node("A"), department_node("B", "nowhere")]
    with pytest.raises(MissingParentError):
        build_tree(nodes, orphan_policy="reject")


def test_build_sorted_tree():
    tree = build_sorted_tree(make_department_nodes(sorted_nodes=True), forest=True)
    assert isinstance(tree, SortedTree)
    assert ids(tree.top_nodes) == ["boss", "admin", "opr", "tech"]


def test_flatten_and_find(forest):
    assert len(flatten(forest)) == 18
    assert ids(flatten(forest, lambda n: n.get_layer() == 0)) == ["tech", "opr", "admin", "boss"]
    assert find_node(forest, lambda n: n.value.name.startswith("Payroll")).identifier() == "salary"
    assert find_by_identifier(forest, "hr").parent.identifier() == "admin"
    assert find_by_identifier(forest, "nope") is None


def test_count_nodes(forest):
    assert count_nodes(forest) == 18
    assert count_nodes(forest, lambda n: n.is_leaf()) == 11


def test_paths_and_leaves(forest):
    paths = get_tree_paths(forest, lambda n: n.value.id)
    assert paths[:3] == ["tech", "tech/product", "tech/product/product-mw"]
    assert "admin/hr/salary" in paths
    assert ids(get_leaf_nodes(forest))[:2] == ["product-mw", "tech-be"]


def test_stats(forest):
    stats = get_tree_stats(forest)
    assert stats['kind'] == "FOREST"
    assert stats['size'] == stats['cached_size'] == 18
    assert stats['top_count'] == 4
    assert stats['leaf_count'] == 11
    assert stats['max_layer'] == 2
    assert stats['layers'] == {0: 4, 1: 8, 2: 6}


def test_render_tree(forest):
    text = render_tree(forest, lambda n: n.value.id, "--", "+-")
    lines = text.splitlines()
    assert lines[:3] == ["tech", "+-product", "+---product-mw"]
    assert len(lines) == 18


def test_render_tree_to_stream(forest):
    stream = io.StringIO()
    text = render_tree(forest, lambda n: n.value.id, emit=stream)
    assert stream.getvalue() == text + "\n"
