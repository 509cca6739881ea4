from __future__ import annotations

from typing import Optional

from models import DashboardMetrics


def print_summary(metrics: DashboardMetrics, source: Optional[str] = None) -> None:
    """Print the dashboard headline figures."""
    print("\n" + "="*60)
    print("COMPANY STRUCTURE - SUMMARY")
    print("="*60)
    if source:
        print(f"Source: {source}")
    print(f"Companies: {metrics.company_count}")
    print(f"Countries: {metrics.country_count}")
    print(f"Total Revenue: {metrics.total_revenue:,.0f}")
    print(f"Total Employees: {metrics.total_employees:,}")
    print()
    print("Tier Distribution:")
    if not metrics.tier_distribution:
        print("  (no companies)")
    for tier in metrics.tier_distribution:
        print(f"  Level {tier.level}: {tier.count} ({tier.percentage})")
    print("="*60)
