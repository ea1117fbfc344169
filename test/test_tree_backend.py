"""Tests for the reference tree backend and its query grammar."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from KnowledgeQuery.backend import ExecutionContext, ParseFlags, TreeBackend
from KnowledgeQuery.core.errors import QueryParserError
from KnowledgeQuery.core.nodes import Combine, QueryOp, Term, Wildcard


def _or(*children):
    return Combine(QueryOp.OR, children)


class TestTreeBackendParse(unittest.TestCase):
    def setUp(self) -> None:
        self.backend = TreeBackend()

    def parse(self, text: str, flags: ParseFlags = ParseFlags.DEFAULT, prefix: str = ""):
        return self.backend.parse_query(text, flags, prefix)

    def test_single_word_is_prefixed_and_lowercased(self) -> None:
        self.assertEqual(self.parse("Cat", prefix="S"), Term("Scat"))

    def test_adjacent_words_are_ored(self) -> None:
        self.assertEqual(self.parse("cat dog", prefix="S"), _or(Term("Scat"), Term("Sdog")))

    def test_partial_expands_last_word(self) -> None:
        self.assertEqual(
            self.parse("cat dog", ParseFlags.PARTIAL, "S"),
            _or(Term("Scat"), _or(Term("Sdog"), Wildcard("Sdog"))),
        )

    def test_partial_ignored_after_trailing_space(self) -> None:
        self.assertEqual(
            self.parse("cat dog ", ParseFlags.PARTIAL, "S"),
            _or(Term("Scat"), Term("Sdog")),
        )

    def test_partial_only_expands_final_occurrence(self) -> None:
        self.assertEqual(
            self.parse("cat cat", ParseFlags.PARTIAL, "S"),
            _or(Term("Scat"), _or(Term("Scat"), Wildcard("Scat"))),
        )

    def test_boolean_operators(self) -> None:
        a, b, c = Term("a"), Term("b"), Term("c")
        self.assertEqual(self.parse("a AND b"), Combine(QueryOp.AND, (a, b)))
        self.assertEqual(self.parse("a NOT b"), Combine(QueryOp.AND_NOT, (a, b)))
        self.assertEqual(self.parse("a AND NOT b"), Combine(QueryOp.AND_NOT, (a, b)))
        self.assertEqual(self.parse("a XOR b"), Combine(QueryOp.XOR, (a, b)))
        self.assertEqual(self.parse("a OR b AND c"), _or(a, Combine(QueryOp.AND, (b, c))))
        self.assertEqual(self.parse("(a OR b) c"), _or(_or(a, b), c))

    def test_operator_lookalike_words_are_terms(self) -> None:
        self.assertEqual(self.parse("ANDROID"), Term("android"))
        self.assertEqual(self.parse("and or"), _or(Term("and"), Term("or")))

    def test_syntax_errors(self) -> None:
        for text in ["", "   ", "a AND", "(a", "a)", "NOT a", "OR"]:
            with self.subTest(text=text):
                with self.assertRaises(QueryParserError):
                    self.parse(text)


class TestTreeBackendExecution(unittest.TestCase):
    def test_sort_then_cutoff(self) -> None:
        backend = TreeBackend()
        ctx = ExecutionContext()

        backend.configure_sort(ctx, 1, True)
        self.assertEqual((ctx.sort_slot, ctx.sort_descending, ctx.cutoff_percent), (1, True, None))

        backend.configure_cutoff(ctx, 20)
        self.assertEqual((ctx.sort_slot, ctx.sort_descending, ctx.cutoff_percent), (None, False, 20))

    def test_cutoff_must_be_percentage(self) -> None:
        with self.assertRaises(ValueError):
            TreeBackend().configure_cutoff(ExecutionContext(), 101)


if __name__ == "__main__":
    unittest.main()
