"""View model of one compiled query, shared by all output writers."""

from __future__ import annotations

from dataclasses import dataclass

from KnowledgeQuery.backend.base import ExecutionContext
from KnowledgeQuery.core.nodes import QueryNode
from KnowledgeQuery.core.query import UNLIMITED, QuerySpec


@dataclass(frozen=True, slots=True)
class CompiledQueryView:
    """Everything an output writer shows about a compiled query."""

    description: str
    app_id: str | None
    tree: QueryNode
    sort_slot: int | None
    sort_descending: bool
    cutoff_percent: int | None
    offset: int
    limit: int | None


def map_compiled_query(spec: QuerySpec, tree: QueryNode, ctx: ExecutionContext) -> CompiledQueryView:
    """Build a view from a spec, its compiled tree and execution settings."""
    return CompiledQueryView(
        description=spec.describe(),
        app_id=spec.app_id,
        tree=tree,
        sort_slot=ctx.sort_slot,
        sort_descending=ctx.sort_descending,
        cutoff_percent=ctx.cutoff_percent,
        offset=ctx.offset,
        limit=None if ctx.limit == UNLIMITED else ctx.limit,
    )
