"""Configured queries: parse YAML mappings into `QuerySpec` objects.

Keys are the snake_case field names of `QuerySpec`. Enum values are given by
name, case-insensitively, e.g.::

    queries:
      - search_terms: cat dog
        match: title_synopsis
        sort: date
        order: descending
        tags_match_any: [animals]
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any, Callable, Mapping

from KnowledgeQuery.config.common import (
    expect_enum,
    expect_int,
    expect_optional_str,
    expect_str_list,
)
from KnowledgeQuery.core.query import QueryMatch, QueryMode, QueryOrder, QuerySort, QuerySpec

_STRING_FIELDS = (
    "app_id",
    "search_terms",
    "corrected_terms",
    "stopword_free_terms",
    "literal_query",
    "content_type",
    "excluded_content_type",
)
_LIST_FIELDS = ("tags_match_all", "tags_match_any", "ids", "excluded_ids", "excluded_tags")
_INT_FIELDS = ("limit", "offset")

_MODE_ALIASES = {"STANDARD": QueryMode.DELIMITED}
_MATCH_ALIASES = {
    "TITLE_ONLY": QueryMatch.ONLY_TITLE,
    "TITLE_AND_SYNOPSIS": QueryMatch.TITLE_SYNOPSIS,
}

_ENUM_PARSERS: dict[str, Callable[[Any, str], Any]] = {
    "mode": lambda v, k: expect_enum(v, QueryMode, k, _MODE_ALIASES),
    "match": lambda v, k: expect_enum(v, QueryMatch, k, _MATCH_ALIASES),
    "sort": lambda v, k: expect_enum(v, QuerySort, k),
    "order": lambda v, k: expect_enum(v, QueryOrder, k),
}

_KNOWN_FIELDS = frozenset(f.name for f in fields(QuerySpec))


def parse_queries(value: Any, config_key: str = "queries") -> tuple[QuerySpec, ...]:
    """Parse the list of configured queries.

    Raises:
        TypeError: If the value is not a list of mappings.
        ValueError: If a query has unknown keys or invalid values.
    """
    if value is None:
        return ()
    if not isinstance(value, list):
        raise TypeError(f"{config_key} must be a list")
    return tuple(parse_query_spec(item, f"{config_key}[{idx}]") for idx, item in enumerate(value))


def parse_query_spec(value: Any, config_key: str) -> QuerySpec:
    """Parse one query mapping into `QuerySpec`.

    Args:
        value: Query mapping value.
        config_key: Full key path used in error messages.

    Returns:
        Parsed query spec.

    Raises:
        TypeError: If query shape/types are invalid.
        ValueError: If query keys or values are invalid.
    """
    if not isinstance(value, Mapping):
        raise TypeError(f"{config_key} must be an object")

    unknown = {str(k) for k in value.keys()} - _KNOWN_FIELDS
    if unknown:
        raise ValueError(f"{config_key} has unknown field(s): {sorted(unknown)}")

    kwargs: dict[str, Any] = {}
    for key, raw in value.items():
        field_key = f"{config_key}.{key}"
        if key in _STRING_FIELDS:
            kwargs[key] = expect_optional_str(raw, field_key)
        elif key in _LIST_FIELDS:
            kwargs[key] = tuple(_as_terms(raw, field_key))
        elif key in _INT_FIELDS:
            kwargs[key] = expect_int(raw, field_key)
        else:
            kwargs[key] = _ENUM_PARSERS[key](raw, field_key)

    try:
        return QuerySpec(**kwargs)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{config_key}: {e}") from e


def _as_terms(value: Any, config_key: str) -> list[str]:
    """Normalize a string or list of strings into stripped, non-empty items."""
    if value is None:
        return []
    if isinstance(value, str):
        item = value.strip()
        return [item] if item else []
    return [item.strip() for item in expect_str_list(value, config_key) if item.strip()]
