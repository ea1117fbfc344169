"""Tests for exact-title, title and body text clauses."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from KnowledgeQuery.backend import TreeBackend
from KnowledgeQuery.compiler.clauses import get_text_clause
from KnowledgeQuery.compiler.schema import DEFAULT_SCHEMA
from KnowledgeQuery.core.nodes import Combine, QueryOp, Term, Wildcard
from KnowledgeQuery.core.query import QueryMatch, QueryMode, QuerySpec


def _or(*children):
    return Combine(QueryOp.OR, children)


def _partial(term: str):
    return _or(Term(term), Wildcard(term))


class RecordingBackend(TreeBackend):
    """TreeBackend that records every parse_query call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def parse_query(self, text, flags, prefix):
        self.calls.append((text, prefix))
        return super().parse_query(text, flags, prefix)


class TestTextClause(unittest.TestCase):
    def clause(self, backend=None, **kwargs):
        return get_text_clause(QuerySpec(**kwargs), backend or TreeBackend(), DEFAULT_SCHEMA)

    def test_incremental_two_terms(self) -> None:
        self.assertEqual(
            self.clause(search_terms="cat dog", mode=QueryMode.INCREMENTAL),
            _or(
                _partial("XEXACTScat_dog"),
                _or(Term("Scat"), _partial("Sdog")),
            ),
        )

    def test_delimited_exact_title_is_not_partial(self) -> None:
        self.assertEqual(
            self.clause(search_terms="cat dog", mode=QueryMode.DELIMITED),
            _or(
                Term("XEXACTScat_dog"),
                _or(Term("Scat"), _partial("Sdog")),
            ),
        )

    def test_single_codepoint_is_exact_term_only(self) -> None:
        backend = RecordingBackend()
        self.assertEqual(self.clause(backend, search_terms="x"), Term("XEXACTSx"))
        self.assertEqual(backend.calls, [])

    def test_single_multibyte_codepoint(self) -> None:
        backend = RecordingBackend()
        self.assertEqual(self.clause(backend, search_terms=" 猫 "), Term("XEXACTS猫"))
        self.assertEqual(backend.calls, [])

    def test_corrected_terms_are_ored_into_title(self) -> None:
        self.assertEqual(
            self.clause(search_terms="kat", corrected_terms="cat"),
            _or(
                _partial("XEXACTSkat"),
                _or(_partial("Skat"), _partial("Scat")),
            ),
        )

    def test_title_synopsis_adds_body_clauses(self) -> None:
        backend = RecordingBackend()
        clause = self.clause(
            backend,
            search_terms="kat",
            corrected_terms="cat",
            match=QueryMatch.TITLE_SYNOPSIS,
        )
        self.assertEqual(
            clause,
            _or(
                _or(
                    _or(_partial("XEXACTSkat"), _or(_partial("Skat"), _partial("Scat"))),
                    _partial("kat"),
                ),
                _partial("cat"),
            ),
        )
        self.assertEqual(
            backend.calls,
            [("kat", "XEXACTS"), ("kat", "S"), ("cat", "S"), ("kat", ""), ("cat", "")],
        )

    def test_sanitized_to_nothing(self) -> None:
        self.assertIsNone(self.clause(search_terms="( )"))

    def test_operators_in_terms_are_searched_as_words(self) -> None:
        self.assertEqual(
            self.clause(search_terms="cats AND dogs", mode=QueryMode.DELIMITED),
            _or(
                Term("XEXACTScats_and_dogs"),
                _or(Term("Scats"), Term("Sand"), _partial("Sdogs")),
            ),
        )


if __name__ == "__main__":
    unittest.main()
