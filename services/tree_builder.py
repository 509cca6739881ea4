from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Sequence, Set

from models import CompanyNode, CompanyRecord, RelationRecord
from services.errors import MalformedHierarchyError

logger = logging.getLogger(__name__)


def build_tree(
    companies: Mapping[str, CompanyRecord],
    relations: Sequence[RelationRecord],
) -> CompanyNode:
    """Link company records into a single rooted tree.

    Children keep the order of their relation records. Any relation set that
    is not exactly one connected tree raises MalformedHierarchyError.
    """
    nodes: Dict[str, CompanyNode] = {}
    for key, record in companies.items():
        if key != record.code:
            raise MalformedHierarchyError(
                f"company keyed as {key} carries code {record.code}", [key]
            )
        nodes[key] = CompanyNode(record=record)
    roots: List[str] = []
    seen: Set[str] = set()

    for rel in relations:
        if rel.code not in nodes:
            raise MalformedHierarchyError("relation references unknown company", [rel.code])
        if rel.code in seen:
            raise MalformedHierarchyError("company assigned more than one parent", [rel.code])
        seen.add(rel.code)

        if rel.parent_code is None:
            roots.append(rel.code)
            continue
        if rel.parent_code == rel.code:
            raise MalformedHierarchyError("company is its own parent", [rel.code])
        parent = nodes.get(rel.parent_code)
        if parent is None:
            raise MalformedHierarchyError(
                f"company {rel.code} references unknown parent", [rel.parent_code]
            )
        parent.children.append(nodes[rel.code])

    if len(roots) != 1:
        raise MalformedHierarchyError(f"expected exactly one root company, found {len(roots)}", roots)

    root = nodes[roots[0]]
    _check_reachable(root, nodes)
    return root


def _check_reachable(root: CompanyNode, nodes: Mapping[str, CompanyNode]) -> None:
    # Walk with depth; catches orphans and detached cycles, and compares the
    # stored level against tree depth.
    reached: Set[str] = set()
    level_mismatches: List[str] = []
    stack = [(root, 1)]
    while stack:
        node, depth = stack.pop()
        reached.add(node.code)
        if node.level != depth:
            level_mismatches.append(node.code)
        for child in node.children:
            stack.append((child, depth + 1))

    if len(reached) != len(nodes):
        unreachable = sorted(code for code in nodes if code not in reached)
        raise MalformedHierarchyError("companies not reachable from root", unreachable)

    if level_mismatches:
        logger.warning(
            "Stored level differs from tree depth for %d companies (stored level kept)",
            len(level_mismatches),
            extra={"step": "build_tree", "nodes": len(nodes)},
        )
