"""Tag, id and content-type restrictions.

The positive filter narrows results without affecting their ranking; the
exclusion filter removes results that match it.
"""

from __future__ import annotations

from typing import Sequence

from KnowledgeQuery.backend.base import SearchBackend
from KnowledgeQuery.compiler.schema import FieldSchema
from KnowledgeQuery.core.nodes import QueryNode, QueryOp
from KnowledgeQuery.core.query import QuerySpec
from KnowledgeQuery.utils.ids import extract_content_hash
from KnowledgeQuery.utils.log import log


def get_tags_clause(
    backend: SearchBackend,
    tags: Sequence[str],
    join_op: QueryOp,
    schema: FieldSchema,
) -> QueryNode | None:
    """Join one prefixed term per tag, e.g. [foo, bar] -> `Kfoo OR Kbar`."""
    if not tags:
        return None
    return backend.combine(join_op, [backend.make_term(schema.tag_prefix + tag) for tag in tags])


def get_ids_clause(
    backend: SearchBackend,
    ids: Sequence[str],
    join_op: QueryOp,
    schema: FieldSchema,
) -> QueryNode | None:
    """Join one prefixed term per content hash.

    Ids whose hash cannot be extracted are logged and skipped. If none can be
    extracted the clause is an empty combination, which matches nothing.
    """
    if not ids:
        return None
    terms: list[QueryNode] = []
    for content_id in ids:
        content_hash = extract_content_hash(content_id)
        if content_hash is None:
            log.warning("Unexpected id structure in query: %s", content_id)
            continue
        terms.append(backend.make_term(schema.id_prefix + content_hash))
    return backend.combine(join_op, terms)


def get_content_type_clause(
    backend: SearchBackend,
    content_type: str | None,
    schema: FieldSchema,
) -> QueryNode | None:
    if content_type is None:
        return None
    return backend.make_wildcard(schema.content_type_prefix + content_type)


def _and_present(backend: SearchBackend, clauses: Sequence[QueryNode | None]) -> QueryNode | None:
    present = [clause for clause in clauses if clause is not None]
    if not present:
        return None
    return backend.combine(QueryOp.AND, present)


def get_filter_clause(spec: QuerySpec, backend: SearchBackend, schema: FieldSchema) -> QueryNode | None:
    """AND of every positive restriction present on the spec, or None."""
    return _and_present(
        backend,
        [
            get_tags_clause(backend, spec.tags_match_any, QueryOp.OR, schema),
            get_tags_clause(backend, spec.tags_match_all, QueryOp.AND, schema),
            get_ids_clause(backend, spec.ids, QueryOp.OR, schema),
            get_content_type_clause(backend, spec.content_type, schema),
        ],
    )


def get_exclusion_clause(spec: QuerySpec, backend: SearchBackend, schema: FieldSchema) -> QueryNode | None:
    """AND of every exclusion present on the spec, or None."""
    return _and_present(
        backend,
        [
            get_ids_clause(backend, spec.excluded_ids, QueryOp.OR, schema),
            get_tags_clause(backend, spec.excluded_tags, QueryOp.OR, schema),
            get_content_type_clause(backend, spec.excluded_content_type, schema),
        ],
    )
