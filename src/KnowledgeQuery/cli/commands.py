"""Command implementations for KnowledgeQuery CLI.

Encapsulates business logic for the compile and describe commands, separated
from CLI parameter handling and output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from KnowledgeQuery.backend import ExecutionContext, SearchBackend
from KnowledgeQuery.compiler import QueryCompiler, configure_execution
from KnowledgeQuery.core.query import QuerySpec
from KnowledgeQuery.renderers import OutputWriter, map_compiled_query
from KnowledgeQuery.utils.log import log


@dataclass(slots=True)
class CompileCommand:
    """Compile each query and hand the result to the output writer."""

    queries: Sequence[QuerySpec]
    compiler: QueryCompiler
    output_writer: OutputWriter

    @property
    def backend(self) -> SearchBackend:
        return self.compiler.backend

    def execute(self) -> None:
        """Compile every query, plan its execution and write the result.

        Raises:
            ParseError: When any clause of a query fails to parse.
        """
        multiple = len(self.queries) > 1
        for idx, spec in enumerate(self.queries, start=1):
            if multiple:
                log.info("=== Query %d/%d ===", idx, len(self.queries))
            tree = self.compiler.compile(spec)
            ctx = ExecutionContext()
            configure_execution(spec, ctx, self.backend, self.compiler.schema)
            self.output_writer.write_compiled(map_compiled_query(spec, tree, ctx))


@dataclass(slots=True)
class DescribeCommand:
    """Log the description of each query without compiling it."""

    queries: Sequence[QuerySpec]

    def execute(self) -> None:
        for spec in self.queries:
            log.info("%s", spec.describe())
