from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class FlatCompanyView(BaseModel):
    """One flattened hierarchy row as served to list/stats consumers."""

    code: str
    name: str
    level: int
    country: str
    city: str
    founded_year: int
    annual_revenue: float
    employees: int
    efficiency: float

    model_config = ConfigDict(frozen=True)
