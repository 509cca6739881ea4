from __future__ import annotations

from typing import Any, Dict

from models import CompanyNode
from services.errors import NotFoundError


def find_by_code(root: CompanyNode, code: str) -> CompanyNode:
    """Depth-first (pre-order) search for the node with the given code."""
    for node in root.iter_preorder():
        if node.code == code:
            return node
    raise NotFoundError(code)


def subtree_summary(node: CompanyNode) -> Dict[str, Any]:
    # Node itself is not counted as a descendant
    descendants = sum(1 for _ in node.iter_preorder()) - 1
    return {
        "code": node.code,
        "city": node.city,
        "founded_year": node.founded_year,
        "annual_revenue": node.annual_revenue,
        "employees": node.employees,
        "descendants": descendants,
    }
