"""Compiler domain configuration: index field layout and relevance cutoffs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from KnowledgeQuery.compiler.schema import DEFAULT_SCHEMA, FieldSchema
from KnowledgeQuery.config.common import (
    expect_int,
    expect_str,
    get_optional_value,
    get_section,
)

# config key -> FieldSchema attribute
_PREFIX_KEYS = {
    "exact_title": "exact_title_prefix",
    "title": "title_prefix",
    "content_type": "content_type_prefix",
    "id": "id_prefix",
    "tag": "tag_prefix",
}
_SLOT_KEYS = {
    "sequence_number": "sequence_number_slot",
    "date": "date_slot",
    "alphabetical": "alphabetical_slot",
}
_CUTOFF_KEYS = {
    "default": "default_cutoff",
    "title_synopsis": "title_synopsis_cutoff",
}
# Longest UTF-8 encoded codepoint; a shorter limit could drop whole terms.
_MIN_TERM_LENGTH = 4


@dataclass(frozen=True, slots=True)
class CompilerConfig:
    """Store the validated field schema used to compile queries."""

    schema: FieldSchema


def load_compiler(raw: Mapping[str, Any]) -> CompilerConfig:
    """Load compiler configuration from raw mapping.

    Every key is optional; missing keys keep the default index layout.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If unknown keys are present.
    """
    section = get_section(raw, "compiler", required=False)
    values: dict[str, Any] = {}

    for group, keys, expect in (
        ("prefixes", _PREFIX_KEYS, expect_str),
        ("slots", _SLOT_KEYS, expect_int),
        ("cutoff", _CUTOFF_KEYS, expect_int),
    ):
        sub = get_section(section, group, required=False, config_key=f"compiler.{group}")
        unknown = {str(k) for k in sub.keys()} - set(keys)
        if unknown:
            raise ValueError(f"compiler.{group} has unknown keys: {sorted(unknown)}")
        for key, attr in keys.items():
            if key in sub:
                values[attr] = expect(sub[key], f"compiler.{group}.{key}")

    values["max_term_length"] = expect_int(
        get_optional_value(section, "max_term_length", DEFAULT_SCHEMA.max_term_length),
        "compiler.max_term_length",
    )
    return CompilerConfig(schema=FieldSchema(**values))


def check_compiler(config: CompilerConfig) -> None:
    """Validate compiler domain constraints.

    Raises:
        ValueError: If values violate compiler constraints.
    """
    schema = config.schema
    prefixes = [getattr(schema, attr) for attr in _PREFIX_KEYS.values()]
    for key, prefix in zip(_PREFIX_KEYS, prefixes):
        if not prefix:
            raise ValueError(f"compiler.prefixes.{key} must not be empty")
    if len(set(prefixes)) != len(prefixes):
        raise ValueError("compiler.prefixes must be distinct")

    slots = [getattr(schema, attr) for attr in _SLOT_KEYS.values()]
    if any(slot < 0 for slot in slots):
        raise ValueError("compiler.slots must be non-negative")
    if len(set(slots)) != len(slots):
        raise ValueError("compiler.slots must be distinct")

    for key, attr in _CUTOFF_KEYS.items():
        if not 0 <= getattr(schema, attr) <= 100:
            raise ValueError(f"compiler.cutoff.{key} must be between 0 and 100")

    if schema.max_term_length < _MIN_TERM_LENGTH:
        raise ValueError(f"compiler.max_term_length must be at least {_MIN_TERM_LENGTH}")
