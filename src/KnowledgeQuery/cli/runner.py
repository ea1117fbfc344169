"""Command runner for coordinating CLI execution.

Manages logging configuration, component creation and error handling for
command execution.
"""

from __future__ import annotations

from typing import Sequence

import click

from KnowledgeQuery.backend import TreeBackend
from KnowledgeQuery.cli.commands import CompileCommand, DescribeCommand
from KnowledgeQuery.compiler import QueryCompiler
from KnowledgeQuery.config import AppConfig
from KnowledgeQuery.core.query import QuerySpec
from KnowledgeQuery.renderers import create_output_writer
from KnowledgeQuery.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution.

    Handles logging configuration, component creation and error handling
    for CLI commands.
    """

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def _configure_logging(self, action: str) -> None:
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )

    def run_compile(self, action: str, queries: Sequence[QuerySpec]) -> None:
        """Compile queries and write them through the configured writers.

        Args:
            action: The CLI command name (e.g., 'compile').
            queries: Queries to compile.

        Raises:
            click.Abort: When compilation fails.
        """
        self._configure_logging(action)
        try:
            if not queries:
                raise ValueError("No queries to compile: pass --terms or configure `queries`")
            output_writer = create_output_writer(self.config)
            command = CompileCommand(
                queries=queries,
                compiler=QueryCompiler(TreeBackend(), self.config.compiler.schema),
                output_writer=output_writer,
            )
            command.execute()
            output_writer.finalize(action)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Compile failed: %s", e)
            raise click.Abort from e

    def run_describe(self, action: str, queries: Sequence[QuerySpec]) -> None:
        """Log query descriptions.

        Raises:
            click.Abort: When no queries are available.
        """
        self._configure_logging(action)
        if not queries:
            log.error("Describe failed: no queries configured")
            raise click.Abort
        DescribeCommand(queries=queries).execute()
