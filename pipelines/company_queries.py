from __future__ import annotations

from typing import Any, Dict, List, Optional

from models import Dimension, FilterSpec, FlatCompanyView
from pipelines.runner import Pipeline, RunContext
from pipelines.steps import FilterViews, FlattenHierarchy, GroupViews
from services.aggregator import to_label_value_series
from services.hierarchy_store import HierarchyStore


def list_companies(store: HierarchyStore, spec: Optional[FilterSpec] = None) -> List[FlatCompanyView]:
    """Flattened (and optionally filtered) company list."""
    ctx = Pipeline([FlattenHierarchy(store), FilterViews(spec)]).run(RunContext())
    return ctx.views


def run_company_stats(
    store: HierarchyStore,
    dimension: Dimension,
    spec: Optional[FilterSpec] = None,
) -> Dict[str, Any]:
    """Count companies per dimension value as a label/value series."""
    ctx = RunContext(dimension=Dimension(dimension))
    pipeline = Pipeline([
        FlattenHierarchy(store),
        FilterViews(spec),
        GroupViews(),
    ])
    ctx = pipeline.run(ctx)
    return to_label_value_series(ctx.grouping)
