from __future__ import annotations

from typing import Optional

from models import FilterSpec
from pipelines.runner import RunContext
from services.filter_engine import filter_views


class FilterViews:
    def __init__(self, spec: Optional[FilterSpec] = None) -> None:
        self.spec = spec

    def run(self, ctx: RunContext) -> RunContext:
        if self.spec is not None:
            ctx.spec = self.spec
        ctx.views = filter_views(ctx.views, ctx.spec)
        ctx.meta["matched_views"] = len(ctx.views)
        return ctx
