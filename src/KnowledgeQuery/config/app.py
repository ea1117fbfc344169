"""Application config orchestration and YAML loading entrypoints."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from KnowledgeQuery.config.compiler import CompilerConfig, check_compiler, load_compiler
from KnowledgeQuery.config.defaults import DefaultsConfig, check_defaults, load_defaults
from KnowledgeQuery.config.output import OutputConfig, check_output, load_output
from KnowledgeQuery.config.queries import parse_queries
from KnowledgeQuery.config.runtime import RuntimeConfig, check_runtime, load_runtime
from KnowledgeQuery.core.query import QuerySpec


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    compiler: CompilerConfig
    defaults: DefaultsConfig
    output: OutputConfig
    queries: tuple[QuerySpec, ...]


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig.

    Configured queries without an app id receive the resolved default app id.
    """
    runtime = load_runtime(raw)
    compiler = load_compiler(raw)
    defaults = load_defaults(raw)
    output = load_output(raw)
    queries = parse_queries(raw.get("queries"))

    check_runtime(runtime)
    check_compiler(compiler)
    check_defaults(defaults)
    check_output(output)

    return AppConfig(
        runtime=runtime,
        compiler=compiler,
        defaults=defaults,
        output=output,
        queries=apply_default_app_id(queries, defaults),
    )


def apply_default_app_id(queries: tuple[QuerySpec, ...], defaults: DefaultsConfig) -> tuple[QuerySpec, ...]:
    """Fill in the default app id on queries that name none."""
    app_id = defaults.resolve_app_id()
    if app_id is None:
        return queries
    return tuple(q if q.app_id is not None else q.replace(app_id=app_id) for q in queries)


def load_config(path: Path) -> AppConfig:
    """Load YAML config file without default merge."""
    return load_config_with_defaults(path, default_path=path)


def load_config_with_defaults(
    config_path: Path,
    default_path: Path = Path("config/default.yml"),
    *,
    defaults_text: str | None = None,
) -> AppConfig:
    """Load config by merging defaults and optional override.

    Args:
        config_path: Override config file.
        default_path: Defaults file, ignored when `defaults_text` is given.
        defaults_text: Defaults as YAML text instead of a file.
    """
    if defaults_text is None:
        if config_path == default_path:
            return parse_config_dict(parse_yaml(default_path.read_text(encoding="utf-8")))
        defaults_text = default_path.read_text(encoding="utf-8")
    base = parse_yaml(defaults_text)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(base, override))


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings. Lists are replaced, not concatenated."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
