"""Search backend interface and the reference tree-building backend."""

from __future__ import annotations

from KnowledgeQuery.backend.base import ExecutionContext, ParseFlags, SearchBackend
from KnowledgeQuery.backend.tree import TreeBackend

__all__ = [
    "ExecutionContext",
    "ParseFlags",
    "SearchBackend",
    "TreeBackend",
]
