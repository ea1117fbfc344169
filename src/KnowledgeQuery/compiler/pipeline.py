"""Query compiler: turn a `QuerySpec` into one backend query tree.

Stages run strictly in order:

1. literal override (debug only; returns immediately)
2. text clause from the search terms (absent for match-all specs)
3. positive filter: `FILTER(text, filter)`, the filter alone, or `MatchAll`
4. exclusion: `AND_NOT(current, exclusion)`

Any failure aborts the whole compilation; no partial tree is returned.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from KnowledgeQuery.backend.base import ParseFlags, SearchBackend
from KnowledgeQuery.compiler.clauses import get_text_clause
from KnowledgeQuery.compiler.filters import get_exclusion_clause, get_filter_clause
from KnowledgeQuery.compiler.schema import DEFAULT_SCHEMA, FieldSchema
from KnowledgeQuery.core.errors import BadLiteralQuery, ParseError, QueryParserError, QueryStage
from KnowledgeQuery.core.nodes import QueryNode, QueryOp
from KnowledgeQuery.core.query import QuerySpec
from KnowledgeQuery.utils.log import log


@dataclass(frozen=True, slots=True)
class QueryCompiler:
    """Compile specs against one backend and field schema.

    Holds no mutable state, so one instance can serve many threads.
    """

    backend: SearchBackend
    schema: FieldSchema = DEFAULT_SCHEMA

    def compile(self, spec: QuerySpec) -> QueryNode:
        """Build the query tree for a spec.

        Args:
            spec: Query spec to compile.

        Returns:
            A freshly built query tree.

        Raises:
            BadLiteralQuery: If the literal query override fails to parse.
            ParseError: If any other stage fails.
        """
        log.debug("Compiling %s", spec.describe())

        if spec.literal_query is not None:
            return self._compile_literal(spec.literal_query)

        query = None
        if spec.search_terms is not None:
            query = get_text_clause(spec, self.backend, self.schema)

        filter_clause = self._guard(QueryStage.FILTER, get_filter_clause, spec)
        if filter_clause is not None:
            if query is None:
                query = filter_clause
            else:
                query = self.backend.combine(QueryOp.FILTER, (query, filter_clause))
        elif query is None:
            query = self.backend.make_match_all()

        exclusion_clause = self._guard(QueryStage.EXCLUSION, get_exclusion_clause, spec)
        if exclusion_clause is not None:
            query = self.backend.combine(QueryOp.AND_NOT, (query, exclusion_clause))

        return query

    def _compile_literal(self, literal_query: str) -> QueryNode:
        try:
            return self.backend.parse_query(literal_query, ParseFlags.DEFAULT, "")
        except QueryParserError as e:
            raise BadLiteralQuery(str(e)) from e

    def _guard(
        self,
        stage: QueryStage,
        build: Callable[[QuerySpec, SearchBackend, FieldSchema], QueryNode | None],
        spec: QuerySpec,
    ) -> QueryNode | None:
        try:
            return build(spec, self.backend, self.schema)
        except QueryParserError as e:
            raise ParseError(stage, str(e)) from e


def compile_query(
    spec: QuerySpec,
    backend: SearchBackend,
    schema: FieldSchema = DEFAULT_SCHEMA,
) -> QueryNode:
    """Compile a spec with a one-off `QueryCompiler`."""
    return QueryCompiler(backend, schema).compile(spec)
