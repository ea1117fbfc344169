"""Tests for content id parsing."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from KnowledgeQuery.utils.ids import extract_content_hash, is_valid_id


class TestExtractContentHash(unittest.TestCase):
    def test_ekn_ids(self) -> None:
        self.assertEqual(extract_content_hash("ekn://app/abc123"), "abc123")
        self.assertEqual(extract_content_hash("ekn:///abc123"), "abc123")
        self.assertEqual(extract_content_hash("ekn://app/abc123/image.png"), "abc123")

    def test_zim_ids(self) -> None:
        self.assertEqual(extract_content_hash("ekn+zim://wiki/A/Rome"), "A/Rome")
        self.assertEqual(extract_content_hash("ekn+zim://wiki/A/Caf%C3%A9"), "A/Café")

    def test_malformed_ids(self) -> None:
        for content_id in ["", "abc123", "http://app/abc", "ekn://app", "ekn://app/", "ekn+zim://wiki"]:
            with self.subTest(content_id=content_id):
                self.assertIsNone(extract_content_hash(content_id))
                self.assertFalse(is_valid_id(content_id))

    def test_valid(self) -> None:
        self.assertTrue(is_valid_id("ekn://app/abc123"))


if __name__ == "__main__":
    unittest.main()
