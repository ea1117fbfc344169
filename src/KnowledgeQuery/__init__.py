"""KnowledgeQuery - compile structured content queries into backend query trees."""

from __future__ import annotations

from KnowledgeQuery.backend import ExecutionContext, ParseFlags, SearchBackend, TreeBackend
from KnowledgeQuery.compiler import (
    DEFAULT_SCHEMA,
    FieldSchema,
    QueryCompiler,
    compile_query,
    configure_execution,
)
from KnowledgeQuery.core.errors import BadLiteralQuery, ParseError, QueryError, QueryParserError, QueryStage
from KnowledgeQuery.core.nodes import Combine, MatchAll, QueryNode, QueryOp, Term, Wildcard
from KnowledgeQuery.core.query import (
    UNLIMITED,
    QueryMatch,
    QueryMode,
    QueryOrder,
    QuerySort,
    QuerySpec,
    debug_describe,
    get_limit,
    get_offset,
)

__all__ = [
    # Spec
    "QuerySpec",
    "QueryMode",
    "QueryMatch",
    "QuerySort",
    "QueryOrder",
    "UNLIMITED",
    "debug_describe",
    "get_limit",
    "get_offset",
    # Tree
    "QueryNode",
    "QueryOp",
    "Term",
    "Wildcard",
    "MatchAll",
    "Combine",
    # Compilation
    "QueryCompiler",
    "compile_query",
    "configure_execution",
    "FieldSchema",
    "DEFAULT_SCHEMA",
    # Backend
    "SearchBackend",
    "TreeBackend",
    "ParseFlags",
    "ExecutionContext",
    # Errors
    "QueryError",
    "ParseError",
    "BadLiteralQuery",
    "QueryParserError",
    "QueryStage",
]
