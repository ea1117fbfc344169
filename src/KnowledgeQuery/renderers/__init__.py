"""Output renderers for compiled queries.

Provides the OutputWriter abstraction and implementations for writing
compiled query trees to console or JSON, plus a factory that instantiates
writers based on configuration.
"""

from __future__ import annotations

from KnowledgeQuery.config import AppConfig
from KnowledgeQuery.renderers.base import MultiOutputWriter, OutputWriter
from KnowledgeQuery.renderers.console import ConsoleOutputWriter, render_execution, render_text
from KnowledgeQuery.renderers.json import JsonFileWriter, render_json
from KnowledgeQuery.renderers.view_models import CompiledQueryView, map_compiled_query


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.

    Returns:
        A MultiOutputWriter over every configured format.
    """
    writers: list[OutputWriter] = []
    if "console" in config.output.formats:
        writers.append(ConsoleOutputWriter())
    if "json" in config.output.formats:
        writers.append(JsonFileWriter(config.output.base_dir))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "CompiledQueryView",
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "MultiOutputWriter",
    "OutputWriter",
    "create_output_writer",
    "map_compiled_query",
    "render_execution",
    "render_json",
    "render_text",
]
