"""JSON output renderers.

Renders query trees and compiled query views into JSON-serializable objects.
Provides JsonFileWriter implementation for command output.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from KnowledgeQuery.core.nodes import Combine, MatchAll, QueryNode, Term, Wildcard
from KnowledgeQuery.renderers.base import OutputWriter
from KnowledgeQuery.renderers.console import render_text
from KnowledgeQuery.renderers.view_models import CompiledQueryView
from KnowledgeQuery.utils.log import log


def render_json(node: QueryNode) -> dict:
    """Render a query tree into nested dicts.

    Args:
        node: Root of the query tree.

    Returns:
        ``{"term": ...}``, ``{"wildcard": ...}``, ``{"match_all": True}`` or
        ``{"op": ..., "children": [...]}``.
    """
    match node:
        case Term(term=t):
            return {"term": t}
        case Wildcard(pattern=p):
            return {"wildcard": p}
        case MatchAll():
            return {"match_all": True}
        case Combine(op=op, children=children):
            return {"op": op.value, "children": [render_json(child) for child in children]}
        case _:
            raise ValueError(f"Unsupported query node: {node!r}")


def render_view(view: CompiledQueryView) -> dict:
    return {
        "spec": view.description,
        "app_id": view.app_id,
        "query": render_text(view.tree),
        "tree": render_json(view.tree),
        "execution": {
            "sort_slot": view.sort_slot,
            "sort_descending": view.sort_descending,
            "cutoff_percent": view.cutoff_percent,
            "offset": view.offset,
            "limit": view.limit,
        },
    }


class JsonFileWriter(OutputWriter):
    """Accumulate compiled queries and write them to a JSON file on finalize."""

    def __init__(self, base_dir: str) -> None:
        """Initialize JSON writer.

        Args:
            base_dir: Base output directory.
        """
        self.output_dir = Path(base_dir) / "json"
        self.all_results: list[dict] = []
        self.output_path: Path | None = None

    def write_compiled(self, view: CompiledQueryView) -> None:
        self.all_results.append(render_view(view))

    def finalize(self, action: str) -> None:
        """Write accumulated results to a timestamped JSON file.

        Args:
            action: The CLI command name (used in filename).
        """
        payload = json.dumps(self.all_results, ensure_ascii=False, indent=2)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.output_path = self.output_dir / f"{action}_{timestamp}.json"
        self.output_path.write_text(payload, encoding="utf-8")
        log.info("JSON saved to %s", self.output_path)
