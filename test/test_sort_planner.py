"""Tests for mapping sort and order onto execution settings."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from KnowledgeQuery.backend import ExecutionContext, TreeBackend
from KnowledgeQuery.compiler import FieldSchema, configure_execution, get_cutoff, get_sort_value
from KnowledgeQuery.core.query import UNLIMITED, QueryMatch, QueryOrder, QuerySort, QuerySpec


def _plan(spec: QuerySpec, schema: FieldSchema | None = None) -> ExecutionContext:
    ctx = ExecutionContext()
    if schema is None:
        configure_execution(spec, ctx, TreeBackend())
    else:
        configure_execution(spec, ctx, TreeBackend(), schema)
    return ctx


class TestSortPlanner(unittest.TestCase):
    def test_date_descending(self) -> None:
        ctx = _plan(QuerySpec(sort=QuerySort.DATE, order=QueryOrder.DESCENDING))
        self.assertEqual(ctx.sort_slot, 1)
        self.assertTrue(ctx.sort_descending)
        self.assertIsNone(ctx.cutoff_percent)

    def test_slots(self) -> None:
        self.assertEqual(get_sort_value(QuerySpec(sort=QuerySort.SEQUENCE_NUMBER)), 0)
        self.assertEqual(get_sort_value(QuerySpec(sort=QuerySort.DATE)), 1)
        self.assertEqual(get_sort_value(QuerySpec(sort=QuerySort.ALPHABETICAL)), 2)
        self.assertIsNone(get_sort_value(QuerySpec()))

    def test_ascending_sort(self) -> None:
        ctx = _plan(QuerySpec(sort=QuerySort.ALPHABETICAL))
        self.assertEqual((ctx.sort_slot, ctx.sort_descending), (2, False))

    def test_relevance_cutoffs(self) -> None:
        self.assertEqual(_plan(QuerySpec()).cutoff_percent, 10)
        self.assertEqual(_plan(QuerySpec(match=QueryMatch.TITLE_SYNOPSIS)).cutoff_percent, 20)
        self.assertIsNone(_plan(QuerySpec()).sort_slot)

    def test_order_ignored_for_relevance(self) -> None:
        ctx = _plan(QuerySpec(order=QueryOrder.DESCENDING))
        self.assertIsNone(ctx.sort_slot)
        self.assertFalse(ctx.sort_descending)
        self.assertEqual(ctx.cutoff_percent, 10)

    def test_paging(self) -> None:
        ctx = _plan(QuerySpec(offset=40, limit=20))
        self.assertEqual((ctx.offset, ctx.limit), (40, 20))
        self.assertEqual(_plan(QuerySpec()).limit, UNLIMITED)

    def test_custom_schema(self) -> None:
        schema = FieldSchema(date_slot=7, default_cutoff=5)
        self.assertEqual(_plan(QuerySpec(sort=QuerySort.DATE), schema).sort_slot, 7)
        self.assertEqual(get_cutoff(QuerySpec(), schema), 5)


if __name__ == "__main__":
    unittest.main()
