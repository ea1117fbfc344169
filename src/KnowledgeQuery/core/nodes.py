"""Immutable query tree nodes built by search backends."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class QueryOp(Enum):
    """Boolean operators that combine query sub-trees.

    - `OR`: any child matches; relevance is summed
    - `AND`: all children match
    - `FILTER`: first child matches and is ranked, the rest only restrict
    - `AND_NOT`: first child matches and no other child does
    - `XOR`: an odd number of children match (literal queries only)
    """

    OR = "OR"
    AND = "AND"
    FILTER = "FILTER"
    AND_NOT = "AND_NOT"
    XOR = "XOR"


@dataclass(frozen=True, slots=True)
class QueryNode:
    """Base node of the immutable query tree handed to the execution layer."""


@dataclass(frozen=True, slots=True)
class Term(QueryNode):
    """Exact match of one field-prefixed term."""

    term: str


@dataclass(frozen=True, slots=True)
class Wildcard(QueryNode):
    """Match of every field-prefixed term starting with `pattern`."""

    pattern: str


@dataclass(frozen=True, slots=True)
class MatchAll(QueryNode):
    """Match every document."""


@dataclass(frozen=True, slots=True)
class Combine(QueryNode):
    """Boolean combination of child nodes, in order."""

    op: QueryOp
    children: tuple[QueryNode, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))
