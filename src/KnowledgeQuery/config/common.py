"""Shared helpers for configuration loading and validation."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, TypeVar

E = TypeVar("E", bound=Enum)


def get_section(raw: Mapping[str, Any], key: str, *, required: bool, config_key: str | None = None) -> Mapping[str, Any]:
    """Return a mapping section from a parent mapping.

    Args:
        raw: Parent configuration mapping.
        key: Section name.
        required: Whether the section must exist.
        config_key: Full key path for error messages, defaults to `key`.

    Returns:
        Section mapping, or empty mapping for optional missing sections.

    Raises:
        ValueError: If section is required but missing.
        TypeError: If section is not a mapping.
    """
    config_key = config_key or key
    section = raw.get(key)
    if section is None:
        if required:
            raise ValueError(f"Missing required config: {config_key}")
        return {}
    if not isinstance(section, Mapping):
        raise TypeError(f"{config_key} must be an object")
    return section


def get_required_value(section: Mapping[str, Any], field: str, config_key: str) -> Any:
    """Return a required field value from a section.

    Raises:
        ValueError: If field is missing.
    """
    if field not in section:
        raise ValueError(f"Missing required config: {config_key}")
    return section[field]


def get_optional_value(section: Mapping[str, Any], field: str, default: Any) -> Any:
    """Return optional field value with default."""
    return section.get(field, default)


def expect_str(value: Any, config_key: str) -> str:
    """Validate and return string value."""
    if not isinstance(value, str):
        raise TypeError(f"{config_key} must be a string")
    return value


def expect_optional_str(value: Any, config_key: str) -> str | None:
    """Validate and return a string or None."""
    if value is None:
        return None
    return expect_str(value, config_key)


def expect_bool(value: Any, config_key: str) -> bool:
    """Validate and return boolean value."""
    if not isinstance(value, bool):
        raise TypeError(f"{config_key} must be a boolean")
    return value


def expect_int(value: Any, config_key: str) -> int:
    """Validate and return integer value (excluding bool)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{config_key} must be an integer")
    return value


def expect_str_list(value: Any, config_key: str) -> list[str]:
    """Validate a list of strings."""
    if not isinstance(value, list):
        raise TypeError(f"{config_key} must be a list")
    out: list[str] = []
    for idx, item in enumerate(value):
        if not isinstance(item, str):
            raise TypeError(f"{config_key}[{idx}] must be a string")
        out.append(item)
    return out


def expect_enum(value: Any, enum_type: type[E], config_key: str, aliases: Mapping[str, E] | None = None) -> E:
    """Validate an enum member given by name, case-insensitively.

    Dashes and underscores are interchangeable, so `title-synopsis` and
    `TITLE_SYNOPSIS` both name `QueryMatch.TITLE_SYNOPSIS`.

    Raises:
        TypeError: If value is not a string.
        ValueError: If value names no member or alias.
    """
    name = expect_str(value, config_key).strip().upper().replace("-", "_")
    if aliases and name in aliases:
        return aliases[name]
    try:
        return enum_type[name]
    except KeyError:
        allowed = sorted([m.name.lower() for m in enum_type] + [a.lower() for a in (aliases or {})])
        raise ValueError(f"{config_key} must be one of {allowed}") from None
