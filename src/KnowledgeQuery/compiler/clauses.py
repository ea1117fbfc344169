"""Text clauses: exact-title, title and body matching of search terms.

Original terms and corrected terms (typo fixes supplied by the caller) are
blended with OR so that either spelling matches, while the exact-title clause
only ever uses what the user typed.
"""

from __future__ import annotations

from typing import Sequence

from KnowledgeQuery.backend.base import ParseFlags, SearchBackend
from KnowledgeQuery.compiler.schema import FieldSchema
from KnowledgeQuery.compiler.terms import get_terms
from KnowledgeQuery.core.errors import ParseError, QueryParserError, QueryStage
from KnowledgeQuery.core.nodes import QueryNode, QueryOp
from KnowledgeQuery.core.query import QueryMatch, QueryMode, QuerySpec

_PARTIAL = ParseFlags.DEFAULT | ParseFlags.PARTIAL


def parse_clause(
    backend: SearchBackend,
    text: str,
    flags: ParseFlags,
    prefix: str,
    stage: QueryStage,
) -> QueryNode:
    """Parse text with the backend, tagging failures with `stage`.

    Raises:
        ParseError: If the backend cannot parse the text.
    """
    try:
        return backend.parse_query(text, flags, prefix)
    except QueryParserError as e:
        raise ParseError(stage, str(e)) from e


def or_clauses(backend: SearchBackend, left: QueryNode | None, right: QueryNode | None) -> QueryNode | None:
    """OR two optional clauses, collapsing to whichever side is present."""
    if left is None:
        return right
    if right is None:
        return left
    return backend.combine(QueryOp.OR, (left, right))


def get_exact_title_clause(
    backend: SearchBackend,
    terms: Sequence[str],
    mode: QueryMode,
    schema: FieldSchema,
) -> QueryNode:
    """Match the whole query against the exact title, e.g. `cat dog` -> `cat_dog`."""
    flags = ParseFlags.DEFAULT
    if mode is QueryMode.INCREMENTAL:
        flags |= ParseFlags.PARTIAL
    return parse_clause(
        backend, "_".join(terms), flags, schema.exact_title_prefix, QueryStage.EXACT_TITLE
    )


def get_title_clause(
    backend: SearchBackend,
    terms: Sequence[str],
    corrected_terms: Sequence[str],
    schema: FieldSchema,
) -> QueryNode | None:
    base_clause = None
    if terms:
        base_clause = parse_clause(
            backend, " ".join(terms), _PARTIAL, schema.title_prefix, QueryStage.TITLE
        )
    corrected_clause = None
    if corrected_terms:
        corrected_clause = parse_clause(
            backend, " ".join(corrected_terms), _PARTIAL, schema.title_prefix, QueryStage.TITLE
        )
    return or_clauses(backend, base_clause, corrected_clause)


def get_body_clause(backend: SearchBackend, terms: Sequence[str]) -> QueryNode:
    """Match terms anywhere in the indexed text (no field prefix)."""
    return parse_clause(backend, " ".join(terms), _PARTIAL, "", QueryStage.BODY)


def get_text_clause(spec: QuerySpec, backend: SearchBackend, schema: FieldSchema) -> QueryNode | None:
    """Build the text clause for the search terms of a spec.

    Args:
        spec: Query spec with `search_terms` set.
        backend: Backend used to parse and combine clauses.
        schema: Field prefixes and term limits.

    Returns:
        The text clause, or None if the search terms sanitize to nothing.

    Raises:
        ParseError: If any clause fails to parse.
    """
    terms = get_terms(spec.search_terms, schema.max_term_length)
    if not terms:
        return None

    # A single character only looks for an exact match; wildcard expansion of
    # one character is too expensive.
    if len(terms) == 1 and len(terms[0]) == 1:
        return backend.make_term(schema.exact_title_prefix + terms[0])

    exact_title_clause = get_exact_title_clause(backend, terms, spec.mode, schema)

    corrected_terms: tuple[str, ...] = ()
    if spec.corrected_terms is not None:
        corrected_terms = get_terms(spec.corrected_terms, schema.max_term_length)

    title_clause = get_title_clause(backend, terms, corrected_terms, schema)
    clause = or_clauses(backend, exact_title_clause, title_clause)

    if spec.match is QueryMatch.TITLE_SYNOPSIS:
        clause = or_clauses(backend, clause, get_body_clause(backend, terms))
        if corrected_terms:
            clause = or_clauses(backend, clause, get_body_clause(backend, corrected_terms))

    return clause
