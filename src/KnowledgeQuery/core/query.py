from __future__ import annotations

from dataclasses import dataclass, fields, replace as _dc_replace
from enum import Enum
from typing import Any, Iterable


UNLIMITED = 2**32 - 1
"""Sentinel limit meaning "no upper bound on the number of results"."""


class QueryMode(Enum):
    """How search terms are matched while the user types."""

    INCREMENTAL = "incremental"
    DELIMITED = "delimited"


class QueryMatch(Enum):
    """Which indexed text participates in term matching."""

    ONLY_TITLE = "only-title"
    TITLE_SYNOPSIS = "title-synopsis"


class QuerySort(Enum):
    RELEVANCE = "relevance"
    SEQUENCE_NUMBER = "sequence-number"
    DATE = "date"
    ALPHABETICAL = "alphabetical"


class QueryOrder(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


def _as_tuple(value: Iterable[str] | None, name: str, *, distinct: bool) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        raise TypeError(f"{name} must be a sequence of strings, not a string")
    out: list[str] = []
    seen: set[str] = set()
    for item in value:
        if not isinstance(item, str):
            raise TypeError(f"{name} must only contain strings")
        if distinct:
            if item in seen:
                continue
            seen.add(item)
        out.append(item)
    return tuple(out)


def _check_unsigned(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if value < 0 or value > UNLIMITED:
        raise ValueError(f"{name} must be between 0 and {UNLIMITED}")
    return value


@dataclass(frozen=True, slots=True)
class QuerySpec:
    """Immutable description of a query against an offline content database.

    A spec carries no behavior of its own; the compiler turns it into a query
    tree and the sort planner turns it into execution settings. All values are
    fixed at construction. Use `replace` to derive a spec with a few tweaked
    values.

    Attributes:
        app_id: App ID of the database to query. Routing metadata only.
        search_terms: Query string as typed by the user.
        corrected_terms: Corrected version of `search_terms` (e.g. typo fixes).
        stopword_free_terms: `search_terms` with stopwords removed. Carried
            for callers; the compiler does not read it.
        literal_query: Raw backend query, bypassing every other field.
        mode: Incremental (as-you-type, prefix matching) or delimited.
        match: Whether body text participates in matching.
        sort: Sort key; RELEVANCE uses the backend's ranking.
        order: Sort direction for non-relevance sorts.
        limit: Maximum number of results, `UNLIMITED` for no bound.
        offset: Number of results to skip.
        tags_match_all: Tags that must all be present.
        tags_match_any: Tags of which at least one must be present.
        ids: Content ids to restrict the search to.
        excluded_ids: Content ids to exclude.
        excluded_tags: Tags to exclude.
        content_type: Content type to restrict the search to.
        excluded_content_type: Content type to exclude.
    """

    app_id: str | None = None
    search_terms: str | None = None
    corrected_terms: str | None = None
    stopword_free_terms: str | None = None
    literal_query: str | None = None
    mode: QueryMode = QueryMode.INCREMENTAL
    match: QueryMatch = QueryMatch.ONLY_TITLE
    sort: QuerySort = QuerySort.RELEVANCE
    order: QueryOrder = QueryOrder.ASCENDING
    limit: int = UNLIMITED
    offset: int = 0
    tags_match_all: tuple[str, ...] = ()
    tags_match_any: tuple[str, ...] = ()
    ids: tuple[str, ...] = ()
    excluded_ids: tuple[str, ...] = ()
    excluded_tags: tuple[str, ...] = ()
    content_type: str | None = None
    excluded_content_type: str | None = None

    def __post_init__(self) -> None:
        # Frozen dataclass: normalize through object.__setattr__.
        for name in ("tags_match_all", "tags_match_any", "excluded_tags"):
            object.__setattr__(self, name, _as_tuple(getattr(self, name), name, distinct=True))
        for name in ("ids", "excluded_ids"):
            object.__setattr__(self, name, _as_tuple(getattr(self, name), name, distinct=False))

        _check_unsigned(self.limit, "limit")
        _check_unsigned(self.offset, "offset")

        for name, enum_type in (
            ("mode", QueryMode),
            ("match", QueryMatch),
            ("sort", QuerySort),
            ("order", QueryOrder),
        ):
            if not isinstance(getattr(self, name), enum_type):
                raise TypeError(f"{name} must be a {enum_type.__name__}")

    @property
    def is_match_all(self) -> bool:
        """Whether the spec has no search terms and so matches everything."""
        return self.search_terms is None

    def replace(self, **overrides: Any) -> QuerySpec:
        """Return a copy of this spec with the given fields replaced.

        Raises:
            TypeError: If an override names an unknown field.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise TypeError(f"Unknown QuerySpec field(s): {', '.join(unknown)}")
        return _dc_replace(self, **overrides)

    def describe(self) -> str:
        """Human-readable dump of non-default fields, for logs and tests only.

        The format is not stable and must not be parsed.
        """
        parts: list[str] = []
        for f in fields(self):
            value = getattr(self, f.name)
            if value == f.default:
                continue
            if isinstance(value, str):
                parts.append(f'{f.name}: "{value}"')
            elif isinstance(value, Enum):
                parts.append(f"{f.name}: {value.name}")
            elif isinstance(value, tuple):
                joined = '", "'.join(value)
                parts.append(f'{f.name}: ["{joined}"]')
            else:
                parts.append(f"{f.name}: {value}")
        return "QuerySpec({" + ", ".join(parts) + "})"


def debug_describe(spec: QuerySpec) -> str:
    """Return `spec.describe()`."""
    return spec.describe()


def get_offset(spec: QuerySpec) -> int:
    """Return how far into the result set returned results should start."""
    return spec.offset


def get_limit(spec: QuerySpec) -> int:
    """Return the maximum number of results, `UNLIMITED` when unbounded."""
    return spec.limit
