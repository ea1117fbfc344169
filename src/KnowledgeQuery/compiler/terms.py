"""Sanitize and split user query text into backend-safe terms."""

from __future__ import annotations

import re


MAX_TERM_LENGTH = 245

# Characters with meaning to the backend query parser.
_RE_SYNTAX = re.compile(r"""[()+\-'"]""")
_RE_OPERATOR = re.compile(r"AND|OR|NOT|XOR|NEAR|ADJ")
_RE_DELIMITER = re.compile(r"[\s\-;]+")


def chomp_term(term: str, max_length: int = MAX_TERM_LENGTH) -> str:
    """Limit a term to `max_length` UTF-8 bytes without splitting a codepoint."""
    encoded = term.encode("utf-8")
    if len(encoded) <= max_length:
        return term
    return encoded[:max_length].decode("utf-8", errors="ignore")


def get_terms(query: str | None, max_length: int = MAX_TERM_LENGTH) -> tuple[str, ...]:
    """Sanitize and split a user query.

    Parser syntax characters are removed, reserved operator words are
    lower-cased so they are searched as plain words, and the text is split on
    whitespace, hyphens and semicolons.

    Args:
        query: Raw text as typed by the user.
        max_length: Maximum byte length of a single term.

    Returns:
        Non-empty terms in input order.
    """
    if not query:
        return ()
    without_syntax = _RE_SYNTAX.sub("", query)
    without_operators = _RE_OPERATOR.sub(lambda m: m.group(0).lower(), without_syntax)
    chomped = (chomp_term(term, max_length) for term in _RE_DELIMITER.split(without_operators))
    return tuple(term for term in chomped if term)
