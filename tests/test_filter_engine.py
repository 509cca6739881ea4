from __future__ import annotations

import pytest

from models import FilterSpec, ValueRange, YearRange
from services.filter_engine import filter_views, matches
from services.flattener import flatten


@pytest.fixture
def views(sample_store):
    return flatten(sample_store.get_root())


def _codes(views):
    return [v.code for v in views]


def test_empty_spec_is_identity(views):
    out = filter_views(views, FilterSpec())
    assert out == views
    assert out is not views


def test_levels_membership_preserves_order(views):
    out = filter_views(views, FilterSpec(levels={1, 2}))
    assert _codes(out) == ["A", "B", "C"]


def test_countries_exact_and_case_sensitive(views):
    assert _codes(filter_views(views, FilterSpec(countries={"China"}))) == ["B", "D"]
    assert filter_views(views, FilterSpec(countries={"china"})) == []


def test_cities_or_within_field(views):
    out = filter_views(views, FilterSpec(cities={"Austin", "Cupertino"}))
    assert _codes(out) == ["A", "C"]


def test_founded_year_bounds_inclusive(views):
    assert _codes(filter_views(views, FilterSpec(founded_year=YearRange(start=1995)))) == ["B", "D", "C"]
    assert _codes(filter_views(views, FilterSpec(founded_year=YearRange(end=1995)))) == ["A", "B"]
    assert _codes(filter_views(views, FilterSpec(founded_year=YearRange(start=1995, end=2005)))) == ["B", "C"]


def test_revenue_and_employee_bounds(views):
    assert _codes(filter_views(views, FilterSpec(annual_revenue=ValueRange(min=8000000)))) == ["A", "B", "C"]
    assert _codes(filter_views(views, FilterSpec(annual_revenue=ValueRange(max=8000000)))) == ["D", "C"]
    assert _codes(filter_views(views, FilterSpec(employees=ValueRange(min=0, max=40)))) == ["D", "C"]


def test_zero_bound_is_a_real_bound(views):
    # 0 is a present bound, not "absent"
    assert _codes(filter_views(views, FilterSpec(employees=ValueRange(max=0)))) == ["D"]


def test_constraints_are_anded(views):
    spec = FilterSpec(countries={"China"}, levels={2})
    assert _codes(filter_views(views, spec)) == ["B"]


def test_empty_set_means_no_restriction(views):
    assert filter_views(views, FilterSpec(levels=set(), countries=set())) == views


def test_name_contains(views):
    assert _codes(filter_views(views, FilterSpec(name_contains="Lab"))) == ["C"]


def test_filter_is_idempotent(views):
    spec = FilterSpec(levels={2, 3}, employees=ValueRange(min=10))
    once = filter_views(views, spec)
    assert filter_views(once, spec) == once


def test_matches_single_view(views):
    assert matches(views[0], FilterSpec(levels={1})) is True
    assert matches(views[0], FilterSpec(levels={2})) is False


def test_filter_spec_rejects_unknown_fields():
    with pytest.raises(ValueError):
        FilterSpec(region={"EU"})
