"""Base classes for output writers.

Separates command control flow from output logic for better testability.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from KnowledgeQuery.renderers.view_models import CompiledQueryView


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_compiled(self, view: CompiledQueryView) -> None:
        """Write one compiled query.

        Args:
            view: The compiled query to display.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated results to file).

        Args:
            action: The CLI command name (e.g., 'compile').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_compiled(self, view: CompiledQueryView) -> None:
        for writer in self.writers:
            writer.write_compiled(view)

    def finalize(self, action: str) -> None:
        for writer in self.writers:
            writer.finalize(action)
