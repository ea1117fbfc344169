"""Map a spec's sort and order onto backend execution settings."""

from __future__ import annotations

from KnowledgeQuery.backend.base import ExecutionContext, SearchBackend
from KnowledgeQuery.compiler.schema import DEFAULT_SCHEMA, FieldSchema
from KnowledgeQuery.core.query import QueryMatch, QueryOrder, QuerySort, QuerySpec


def get_sort_value(spec: QuerySpec, schema: FieldSchema = DEFAULT_SCHEMA) -> int | None:
    """Return the value slot to sort by, or None to rank by relevance."""
    if spec.sort is QuerySort.SEQUENCE_NUMBER:
        return schema.sequence_number_slot
    if spec.sort is QuerySort.DATE:
        return schema.date_slot
    if spec.sort is QuerySort.ALPHABETICAL:
        return schema.alphabetical_slot
    return None


def get_cutoff(spec: QuerySpec, schema: FieldSchema = DEFAULT_SCHEMA) -> int:
    """Return the minimum relevance percentage for relevance-ranked queries.

    Matching body text is broader, so it needs a higher bar to keep noise out.
    """
    if spec.match is QueryMatch.TITLE_SYNOPSIS:
        return schema.title_synopsis_cutoff
    return schema.default_cutoff


def configure_execution(
    spec: QuerySpec,
    ctx: ExecutionContext,
    backend: SearchBackend,
    schema: FieldSchema = DEFAULT_SCHEMA,
) -> None:
    """Configure sorting (or a relevance cutoff) and paging on `ctx`.

    A value-slot sort bypasses relevance ranking entirely, so no cutoff is
    applied in that case.
    """
    sort_value = get_sort_value(spec, schema)
    if sort_value is not None:
        backend.configure_sort(ctx, sort_value, spec.order is QueryOrder.DESCENDING)
    else:
        backend.configure_cutoff(ctx, get_cutoff(spec, schema))
    ctx.offset = spec.offset
    ctx.limit = spec.limit
