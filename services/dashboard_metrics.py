from __future__ import annotations

from typing import Dict, Sequence

from models import DashboardMetrics, FlatCompanyView, TierShare


def compute_dashboard_metrics(views: Sequence[FlatCompanyView]) -> DashboardMetrics:
    """Totals for the metric cards plus the per-level tier distribution."""
    tier_counts: Dict[int, int] = {}
    for v in views:
        tier_counts[v.level] = tier_counts.get(v.level, 0) + 1

    total = len(views)
    tiers = [
        TierShare(level=level, count=count, percentage=f"{count / total * 100:.1f}%")
        for level, count in tier_counts.items()
    ]
    return DashboardMetrics(
        company_count=total,
        total_revenue=sum(v.annual_revenue for v in views),
        total_employees=sum(v.employees for v in views),
        country_count=len({v.country for v in views}),
        tier_distribution=tiers,
    )
