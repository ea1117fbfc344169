"""Errors raised while compiling a `QuerySpec` into a query tree."""

from __future__ import annotations

from enum import Enum


class QueryStage(Enum):
    """Compilation stage at which a failure happened."""

    LITERAL = "literal"
    EXACT_TITLE = "exact-title"
    TITLE = "title"
    BODY = "body"
    FILTER = "filter"
    EXCLUSION = "exclusion"


class QueryError(Exception):
    """Base class for query compilation failures."""


class ParseError(QueryError):
    """Text failed to parse at a named compilation stage.

    Attributes:
        stage: Stage that was being built.
        message: Backend parser message.
    """

    def __init__(self, stage: QueryStage, message: str) -> None:
        super().__init__(f"{stage.value}: {message}")
        self.stage = stage
        self.message = message


class BadLiteralQuery(ParseError):
    """The debug literal query override failed to parse."""

    def __init__(self, message: str) -> None:
        super().__init__(QueryStage.LITERAL, message)


class QueryParserError(ValueError):
    """Raised by a search backend when query text cannot be parsed."""
