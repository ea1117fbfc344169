"""Public configuration API for KnowledgeQuery."""

from __future__ import annotations

from KnowledgeQuery.config.app import (
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from KnowledgeQuery.config.compiler import CompilerConfig
from KnowledgeQuery.config.defaults import DefaultsConfig
from KnowledgeQuery.config.output import OutputConfig
from KnowledgeQuery.config.queries import parse_query_spec
from KnowledgeQuery.config.runtime import RuntimeConfig

__all__ = [
    "AppConfig",
    "CompilerConfig",
    "DefaultsConfig",
    "OutputConfig",
    "RuntimeConfig",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
    "parse_query_spec",
]
