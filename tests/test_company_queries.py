from __future__ import annotations

import pytest

from models import Dimension, FilterSpec
from pipelines.company_queries import list_companies, run_company_stats
from pipelines.runner import Pipeline, RunContext
from pipelines.steps import FilterViews, FlattenHierarchy, GroupViews
from services.errors import NotInitializedError
from services.hierarchy_store import HierarchyStore
from sources.in_memory import InMemoryRecordSource


def test_stats_pipeline_records_meta(sample_store):
    ctx = RunContext(dimension=Dimension.COUNTRY, spec=FilterSpec(levels={2, 3}))
    ctx = Pipeline([FlattenHierarchy(sample_store), FilterViews(), GroupViews()]).run(ctx)
    assert ctx.meta["total_views"] == 4
    assert ctx.meta["matched_views"] == 3
    assert ctx.meta["generation"] == 1
    assert ctx.grouping == {"China": 2, "United States": 1}


def test_run_company_stats_series(sample_store):
    series = run_company_stats(sample_store, Dimension.LEVEL)
    assert series == {"labels": ["level1", "level2", "level3"], "values": [1, 2, 1]}


def test_run_company_stats_with_filter(sample_store):
    series = run_company_stats(sample_store, "city", FilterSpec(countries={"China"}))
    assert series == {"labels": ["Shenzhen"], "values": [2]}


def test_group_step_requires_dimension(sample_store):
    with pytest.raises(ValueError):
        Pipeline([FlattenHierarchy(sample_store), GroupViews()]).run(RunContext())


def test_list_companies(sample_store):
    assert [v.code for v in list_companies(sample_store)] == ["A", "B", "D", "C"]
    assert [v.code for v in list_companies(sample_store, FilterSpec(levels={3}))] == ["D"]


def test_queries_before_initialize(sample_companies, sample_relations):
    store = HierarchyStore(InMemoryRecordSource(sample_companies, sample_relations))
    with pytest.raises(NotInitializedError):
        list_companies(store)
