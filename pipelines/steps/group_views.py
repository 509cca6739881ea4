from __future__ import annotations

from typing import Optional

from models import Dimension
from pipelines.runner import RunContext
from services.aggregator import group_by


class GroupViews:
    def __init__(self, dimension: Optional[Dimension] = None) -> None:
        self.dimension = dimension

    def run(self, ctx: RunContext) -> RunContext:
        if self.dimension is not None:
            ctx.dimension = self.dimension
        if ctx.dimension is None:
            raise ValueError("Dimension is required")
        ctx.grouping = group_by(ctx.views, ctx.dimension)
        return ctx
