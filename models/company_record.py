from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CompanyRecord(BaseModel):
    """One row of the company attributes table, keyed by its unique code."""

    code: str = Field(alias="company_code")
    name: str = Field(alias="company_name")
    level: int = Field(ge=1, le=5)
    country: str
    city: str
    founded_year: int
    annual_revenue: float = Field(ge=0)
    employees: int = Field(ge=0)

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)
