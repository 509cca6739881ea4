from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RelationRecord(BaseModel):
    """Declares the edge ``parent_code -> code``; no parent marks the root."""

    code: str = Field(alias="company_code")
    parent_code: str | None = Field(default=None, alias="parent_company")

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    @field_validator("parent_code", mode="before")
    @classmethod
    def _blank_parent_is_none(cls, value):
        if value is None:
            return None
        text = str(value).strip()
        return text or None
