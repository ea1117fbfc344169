"""Defaults applied to configured queries (default app id)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from KnowledgeQuery.config.common import (
    expect_optional_str,
    get_optional_value,
    get_section,
)


@dataclass(frozen=True, slots=True)
class DefaultsConfig:
    """Store query defaults.

    Attributes:
        app_id: App ID used when a query names none.
        app_id_env: Environment variable that overrides `app_id` when set.
    """

    app_id: str | None
    app_id_env: str | None

    def resolve_app_id(self) -> str | None:
        """Return the default app id, preferring the environment variable."""
        if self.app_id_env:
            from_env = os.getenv(self.app_id_env, "").strip()
            if from_env:
                return from_env
        return self.app_id


def load_defaults(raw: Mapping[str, Any]) -> DefaultsConfig:
    """Load query defaults from raw mapping."""
    section = get_section(raw, "defaults", required=False)
    return DefaultsConfig(
        app_id=expect_optional_str(get_optional_value(section, "app_id", None), "defaults.app_id"),
        app_id_env=expect_optional_str(get_optional_value(section, "app_id_env", None), "defaults.app_id_env"),
    )


def check_defaults(config: DefaultsConfig) -> None:
    """Validate defaults domain constraints."""
    if config.app_id is not None and not config.app_id.strip():
        raise ValueError("defaults.app_id must not be empty")
    if config.app_id_env is not None and not config.app_id_env.strip():
        raise ValueError("defaults.app_id_env must not be empty")
