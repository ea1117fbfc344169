"""Search backend protocol consumed by the query compiler."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Flag
from typing import Protocol, Sequence

from KnowledgeQuery.core.nodes import QueryNode, QueryOp
from KnowledgeQuery.core.query import UNLIMITED


class ParseFlags(Flag):
    """Query parser features.

    `PARTIAL` treats the final term of the text as a prefix so that
    incomplete words match while the user is still typing.
    """

    DEFAULT = 0
    PARTIAL = 1


@dataclass(slots=True)
class ExecutionContext:
    """Mutable execution settings for one query run.

    Attributes:
        sort_slot: Value slot to sort by, or None for relevance ranking.
        sort_descending: Whether the value-slot sort is reversed.
        cutoff_percent: Minimum relevance percentage, or None for no cutoff.
        offset: Number of results to skip.
        limit: Maximum number of results.
    """

    sort_slot: int | None = None
    sort_descending: bool = False
    cutoff_percent: int | None = None
    offset: int = 0
    limit: int = UNLIMITED


class SearchBackend(Protocol):
    """Primitives a full-text backend exposes to the compiler.

    Implementations must be safe for concurrent read-only use of
    `parse_query`; the compiler holds no lock around it.
    """

    def parse_query(self, text: str, flags: ParseFlags, prefix: str) -> QueryNode:
        """Parse query text with every term scoped to `prefix`.

        Raises:
            QueryParserError: If the text is malformed.
        """
        raise NotImplementedError

    def make_term(self, term: str) -> QueryNode:
        raise NotImplementedError

    def make_wildcard(self, pattern: str) -> QueryNode:
        raise NotImplementedError

    def make_match_all(self) -> QueryNode:
        raise NotImplementedError

    def combine(self, op: QueryOp, children: Sequence[QueryNode]) -> QueryNode:
        raise NotImplementedError

    def configure_sort(self, ctx: ExecutionContext, slot: int, descending: bool) -> None:
        raise NotImplementedError

    def configure_cutoff(self, ctx: ExecutionContext, percent: int) -> None:
        raise NotImplementedError
