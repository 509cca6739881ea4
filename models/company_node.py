from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List

from .company_record import CompanyRecord


@dataclass(eq=False)
class CompanyNode:
    """A company record plus its ordered children.

    Nodes are created by the tree builder and never mutated afterwards; a
    changed source is handled by building a new tree.
    """

    record: CompanyRecord
    children: List["CompanyNode"] = field(default_factory=list)

    @property
    def code(self) -> str:
        return self.record.code

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def level(self) -> int:
        return self.record.level

    @property
    def country(self) -> str:
        return self.record.country

    @property
    def city(self) -> str:
        return self.record.city

    @property
    def founded_year(self) -> int:
        return self.record.founded_year

    @property
    def annual_revenue(self) -> float:
        return self.record.annual_revenue

    @property
    def employees(self) -> int:
        return self.record.employees

    def iter_preorder(self) -> Iterator["CompanyNode"]:
        """Yield this node, then each child subtree in stored order."""
        stack: List[CompanyNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def to_dict(self) -> Dict[str, Any]:
        """Nested plain-data form of the subtree rooted here."""
        out = self.record.model_dump()
        out["children"] = []
        stack = [(self, out)]
        while stack:
            node, data = stack.pop()
            for child in node.children:
                child_data = child.record.model_dump()
                child_data["children"] = []
                data["children"].append(child_data)
                stack.append((child, child_data))
        return out

    def __repr__(self) -> str:
        return f"CompanyNode(code={self.code!r}, children={len(self.children)})"
