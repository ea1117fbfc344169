"""Tests for search term sanitization and splitting."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from KnowledgeQuery.compiler.terms import MAX_TERM_LENGTH, chomp_term, get_terms


class TestGetTerms(unittest.TestCase):
    def test_splits_on_whitespace_and_semicolons(self) -> None:
        self.assertEqual(get_terms("cat dog"), ("cat", "dog"))
        self.assertEqual(get_terms("a;b  c\td"), ("a", "b", "c", "d"))

    def test_removes_parser_syntax(self) -> None:
        self.assertEqual(get_terms("(cat) +dog"), ("cat", "dog"))
        self.assertEqual(get_terms('It\'s "quoted"'), ("Its", "quoted"))

    def test_hyphen_is_removed_before_splitting(self) -> None:
        self.assertEqual(get_terms("rock-and-roll"), ("rockandroll",))

    def test_operator_words_are_lowercased(self) -> None:
        self.assertEqual(get_terms("cats AND dogs NOT birds"), ("cats", "and", "dogs", "not", "birds"))

    def test_empty_input(self) -> None:
        self.assertEqual(get_terms(None), ())
        self.assertEqual(get_terms(""), ())
        self.assertEqual(get_terms("   "), ())
        self.assertEqual(get_terms("() ''"), ())

    def test_no_term_contains_syntax_or_exceeds_limit(self) -> None:
        samples = [
            "a" * 1000,
            "(x)" * 300,
            "weird ++ -- '' \"\" ;; text",
            "日本語" * 200,
        ]
        for sample in samples:
            for term in get_terms(sample):
                self.assertLessEqual(len(term.encode("utf-8")), MAX_TERM_LENGTH)
                for ch in "()+-'\"":
                    self.assertNotIn(ch, term)

    def test_custom_max_length(self) -> None:
        self.assertEqual(get_terms("abcdef gh", max_length=4), ("abcd", "gh"))


class TestChompTerm(unittest.TestCase):
    def test_short_term_unchanged(self) -> None:
        self.assertEqual(chomp_term("cat"), "cat")

    def test_never_splits_codepoint(self) -> None:
        term = "é" * 200  # 400 bytes
        chomped = chomp_term(term)
        self.assertEqual(chomped, "é" * 122)
        self.assertEqual(len(chomped.encode("utf-8")), 244)

    def test_exact_limit_is_kept(self) -> None:
        term = "a" * MAX_TERM_LENGTH
        self.assertEqual(chomp_term(term), term)


if __name__ == "__main__":
    unittest.main()
