"""CLI package for KnowledgeQuery command orchestration.

Splits parameter handling (ui), lifecycle and error handling (runner) and
command logic (commands) into separate modules.
"""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from KnowledgeQuery.cli.runner import CommandRunner
from KnowledgeQuery.cli.ui import cli


def main() -> None:
    """Run KnowledgeQuery CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
