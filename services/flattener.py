from __future__ import annotations

from typing import List

from models import CompanyNode, FlatCompanyView


def efficiency(annual_revenue: float, employees: int) -> float:
    """Revenue per employee in thousands; 0 when there are no employees."""
    if employees <= 0:
        return 0.0
    return annual_revenue / employees / 1000


def flatten(root: CompanyNode) -> List[FlatCompanyView]:
    """Pre-order list of views, one per node, root first."""
    views: List[FlatCompanyView] = []
    for node in root.iter_preorder():
        rec = node.record
        views.append(
            FlatCompanyView(
                code=rec.code,
                name=rec.name,
                level=rec.level,
                country=rec.country,
                city=rec.city,
                founded_year=rec.founded_year,
                annual_revenue=rec.annual_revenue,
                employees=rec.employees,
                efficiency=efficiency(rec.annual_revenue, rec.employees),
            )
        )
    return views
