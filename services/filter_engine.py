from __future__ import annotations

from typing import Iterable, List, Optional

from models import FilterSpec, FlatCompanyView


def _within(value: float, low: Optional[float], high: Optional[float]) -> bool:
    if low is not None and value < low:
        return False
    if high is not None and value > high:
        return False
    return True


def matches(view: FlatCompanyView, spec: FilterSpec) -> bool:
    """True when the view satisfies every constraint present in spec."""
    if spec.levels is not None and view.level not in spec.levels:
        return False
    if spec.countries is not None and view.country not in spec.countries:
        return False
    if spec.cities is not None and view.city not in spec.cities:
        return False
    if spec.name_contains is not None and spec.name_contains not in view.name:
        return False
    if spec.founded_year is not None and not _within(
        view.founded_year, spec.founded_year.start, spec.founded_year.end
    ):
        return False
    if spec.annual_revenue is not None and not _within(
        view.annual_revenue, spec.annual_revenue.min, spec.annual_revenue.max
    ):
        return False
    if spec.employees is not None and not _within(
        view.employees, spec.employees.min, spec.employees.max
    ):
        return False
    return True


def filter_views(views: Iterable[FlatCompanyView], spec: FilterSpec) -> List[FlatCompanyView]:
    """Keep views matching spec, preserving their order."""
    if spec.is_empty():
        return list(views)
    return [v for v in views if matches(v, spec)]
