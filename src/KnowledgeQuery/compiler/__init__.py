"""Query compilation: spec -> query tree, spec -> execution settings."""

from __future__ import annotations

from KnowledgeQuery.compiler.pipeline import QueryCompiler, compile_query
from KnowledgeQuery.compiler.schema import DEFAULT_SCHEMA, FieldSchema
from KnowledgeQuery.compiler.sort import configure_execution, get_cutoff, get_sort_value
from KnowledgeQuery.compiler.terms import get_terms

__all__ = [
    "DEFAULT_SCHEMA",
    "FieldSchema",
    "QueryCompiler",
    "compile_query",
    "configure_execution",
    "get_cutoff",
    "get_sort_value",
    "get_terms",
]
