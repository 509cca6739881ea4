from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TierShare(BaseModel):
    level: int
    count: int
    percentage: str

    model_config = ConfigDict(frozen=True)


class DashboardMetrics(BaseModel):
    """Headline figures for the dashboard cards and the tier pie chart."""

    company_count: int
    total_revenue: float
    total_employees: int
    country_count: int
    tier_distribution: list[TierShare] = Field(default_factory=list)
