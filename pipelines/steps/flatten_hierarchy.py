from __future__ import annotations

from pipelines.runner import RunContext
from services.flattener import flatten
from services.hierarchy_store import HierarchyStore


class FlattenHierarchy:
    def __init__(self, store: HierarchyStore) -> None:
        self.store = store

    def run(self, ctx: RunContext) -> RunContext:
        # One root reference per run so every later step sees the same tree
        ctx.root = self.store.get_root()
        ctx.views = flatten(ctx.root)
        ctx.meta["total_views"] = len(ctx.views)
        ctx.meta["generation"] = self.store.generation
        return ctx
