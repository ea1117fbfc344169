"""Boolean query text grammar used by the reference backend.

Syntax (operators are case-sensitive, as in most full-text engines):

    word word ...           adjacent expressions are OR-ed
    a AND b                 both
    a NOT b, a AND NOT b    a without b
    a XOR b                 exactly one
    a OR b                  either
    ( ... )                 grouping

Precedence, tightest first: AND / NOT / AND NOT, XOR, OR, adjacency.
A bare leading NOT is a syntax error.
"""

from __future__ import annotations

from dataclasses import dataclass

import pyparsing as pp

from KnowledgeQuery.core.errors import QueryParserError
from KnowledgeQuery.core.nodes import QueryOp


@dataclass(frozen=True, slots=True)
class Word:
    text: str


@dataclass(frozen=True, slots=True)
class Op:
    op: QueryOp
    operands: tuple[Word | Op, ...]


def _keyword(name: str, op: QueryOp | None = None) -> pp.ParserElement:
    element = pp.Keyword(name)
    if op is not None:
        element = element.set_parse_action(lambda: op)
    return element


def _fold(tokens: pp.ParseResults) -> Word | Op:
    node = tokens[0]
    for idx in range(1, len(tokens), 2):
        node = Op(tokens[idx], (node, tokens[idx + 1]))
    return node


def _adjacent(tokens: pp.ParseResults) -> Word | Op:
    if len(tokens) == 1:
        return tokens[0]
    return Op(QueryOp.OR, tuple(tokens))


def _build_grammar() -> pp.ParserElement:
    reserved = _keyword("AND") | _keyword("OR") | _keyword("NOT") | _keyword("XOR")
    word = (~reserved + pp.Regex(r"[^\s()]+")).set_parse_action(lambda t: Word(t[0]))

    and_not = (pp.Keyword("AND") + pp.Keyword("NOT")).set_parse_action(lambda: QueryOp.AND_NOT)
    and_ops = and_not | _keyword("NOT", QueryOp.AND_NOT) | _keyword("AND", QueryOp.AND)
    xor_op = _keyword("XOR", QueryOp.XOR)
    or_op = _keyword("OR", QueryOp.OR)

    query = pp.Forward()
    atom = word | (pp.Suppress("(") + query + pp.Suppress(")"))
    and_level = (atom + (and_ops + atom)[...]).set_parse_action(_fold)
    xor_level = (and_level + (xor_op + and_level)[...]).set_parse_action(_fold)
    or_level = (xor_level + (or_op + xor_level)[...]).set_parse_action(_fold)
    query <<= or_level[1, ...].set_parse_action(_adjacent)
    return query + pp.StringEnd()


_GRAMMAR = _build_grammar()


def parse(text: str) -> Word | Op:
    """Parse query text into a small syntax tree.

    Raises:
        QueryParserError: If the text is empty or malformed.
    """
    if not text.strip():
        raise QueryParserError("Empty query text")
    try:
        result = _GRAMMAR.parse_string(text, parse_all=True)
    except pp.ParseBaseException as e:
        raise QueryParserError(f"Syntax error in {text!r}: {e.msg} (col {e.col})") from e
    return result[0]


def last_word(node: Word | Op) -> Word:
    """Return the right-most word of a syntax tree."""
    while isinstance(node, Op):
        node = node.operands[-1]
    return node
