"""Test fixtures for treeizelib consumers.

Ready-made node types over a small department table, the kind of flat
"id / name / parent id" rows an org chart is usually built from.

Example:
    nodes = make_department_nodes(shuffle_seed=7)
    tree = Tree(nodes, forest=True, orphan_policy=OrphanPolicy.TOP)
    tree.print_tree(print, lambda n: n.value.name, "--", "+-")
"""

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..core.node import SortedTreeNode, TreeNode

__all__ = [
    "Department",
    "SortedDepartment",
    "DepartmentNode",
    "SortedDepartmentNode",
    "DEPARTMENTS",
    "department_records",
    "make_department_nodes",
    "department_node",
]


@dataclass(frozen=True)
class Department:
    """One row of a flat department table."""
    id: str
    name: str
    parent_id: Optional[str] = None
    active: bool = True


@dataclass(frozen=True)
class SortedDepartment(Department):
    """Department row with a display order among its siblings."""
    order: int = 0


class DepartmentNode(TreeNode):
    """Tree node over a Department row. Inactive rows are invalid."""

    def is_valid(self) -> bool:
        return self.value.active

    def is_top_node(self) -> bool:
        return self.value.parent_id is None

    def identifier(self) -> str:
        return self.value.id

    def parent_identifier(self) -> Optional[str]:
        return self.value.parent_id


class SortedDepartmentNode(DepartmentNode, SortedTreeNode):
    """Department node whose siblings sort by ``order``."""

    def compare(self, other: 'SortedDepartmentNode') -> int:
        return self.value.order - other.value.order


# (id, name, parent id): four top-level centres and their departments
DEPARTMENTS: Tuple[Tuple[str, str, Optional[str]], ...] = (
    ("tech", "Product R&D Center", None),
    ("opr", "Operations Center", None),
    ("admin", "Administration Center", None),
    ("boss", "President's Office", None),
    ("product", "Product Department", "tech"),
    ("develop", "Development Department", "tech"),
    ("product-mw", "Middleware Product Department", "product"),
    ("tech-be", "Backend Development Department", "develop"),
    ("tech-mw", "Middleware Development Department", "develop"),
    ("tech-fe", "Frontend Development Department", "develop"),
    ("sec", "Secretariat", "boss"),
    ("admin2", "Administrative Department", "admin"),
    ("hr", "Human Resources Department", "admin"),
    ("job", "Recruiting Group", "hr"),
    ("salary", "Payroll Group", "hr"),
    ("opr-sku", "Merchandise Operations Department", "opr"),
    ("opr-act", "Campaign Operations Department", "opr"),
    ("opr-mw", "Middleware Operations Department", "opr"),
)


def department_records(sorted_rows: bool = False) -> List[Department]:
    """The sample table as Department rows.

    With ``sorted_rows`` each row gets an ``order`` that reverses its
    position among siblings, so sorted output differs from input order.
    """
    if not sorted_rows:
        return [Department(*row) for row in DEPARTMENTS]

    rows = []
    for position, row in enumerate(DEPARTMENTS):
        rows.append(SortedDepartment(*row, order=len(DEPARTMENTS) - position))
    return rows


def make_department_nodes(shuffle_seed: Optional[int] = None,
                          sorted_nodes: bool = False,
                          records: Optional[Sequence[Department]] = None) -> List[DepartmentNode]:
    """Wrap department rows in nodes.

    Args:
        shuffle_seed: Shuffle the rows with this seed; None keeps table order
        sorted_nodes: Produce SortedDepartmentNode instances
        records: Rows to wrap (default: the sample table)
    """
    rows = list(records) if records is not None else department_records(sorted_rows=sorted_nodes)
    if shuffle_seed is not None:
        random.Random(shuffle_seed).shuffle(rows)
    node_type = SortedDepartmentNode if sorted_nodes else DepartmentNode
    return [node_type(row) for row in rows]


def department_node(identifier: str,
                    parent_id: Optional[str] = None,
                    name: Optional[str] = None,
                    active: bool = True,
                    order: Optional[int] = None) -> DepartmentNode:
    """Build one node quickly; passing ``order`` makes it sortable."""
    if order is not None:
        return SortedDepartmentNode(
            SortedDepartment(identifier, name or identifier, parent_id, active, order=order)
        )
    return DepartmentNode(Department(identifier, name or identifier, parent_id, active))
