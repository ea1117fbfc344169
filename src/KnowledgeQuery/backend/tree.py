"""In-process reference backend that builds `QueryNode` trees.

Terms are lower-cased and joined to their field prefix, so `parse_query("Cat",
DEFAULT, "S")` yields `Term("Scat")`. With `PARTIAL`, the final word of the
text also matches as a prefix: `Or(Term("Scat"), Wildcard("Scat"))`.
"""

from __future__ import annotations

from typing import Sequence

from KnowledgeQuery.backend import grammar
from KnowledgeQuery.backend.base import ExecutionContext, ParseFlags
from KnowledgeQuery.core.nodes import Combine, MatchAll, QueryNode, QueryOp, Term, Wildcard


class TreeBackend:
    """Search backend that produces immutable `QueryNode` trees."""

    name = "tree"

    def parse_query(self, text: str, flags: ParseFlags, prefix: str) -> QueryNode:
        syntax = grammar.parse(text)
        partial = None
        if ParseFlags.PARTIAL in flags and not text[-1:].isspace():
            partial = grammar.last_word(syntax)
        return self._to_node(syntax, prefix, partial)

    def make_term(self, term: str) -> QueryNode:
        return Term(term)

    def make_wildcard(self, pattern: str) -> QueryNode:
        return Wildcard(pattern)

    def make_match_all(self) -> QueryNode:
        return MatchAll()

    def combine(self, op: QueryOp, children: Sequence[QueryNode]) -> QueryNode:
        return Combine(op, tuple(children))

    def configure_sort(self, ctx: ExecutionContext, slot: int, descending: bool) -> None:
        ctx.sort_slot = slot
        ctx.sort_descending = descending
        ctx.cutoff_percent = None

    def configure_cutoff(self, ctx: ExecutionContext, percent: int) -> None:
        if not 0 <= percent <= 100:
            raise ValueError(f"cutoff must be a percentage, got {percent}")
        ctx.cutoff_percent = percent
        ctx.sort_slot = None
        ctx.sort_descending = False

    def _to_node(
        self,
        syntax: grammar.Word | grammar.Op,
        prefix: str,
        partial: grammar.Word | None,
    ) -> QueryNode:
        if isinstance(syntax, grammar.Op):
            return Combine(syntax.op, tuple(self._to_node(o, prefix, partial) for o in syntax.operands))
        term = prefix + syntax.text.lower()
        # Identity, not equality: only the final occurrence is partial.
        if syntax is partial:
            return Combine(QueryOp.OR, (Term(term), Wildcard(term)))
        return Term(term)
