"""Console text output renderers.

Renders a query tree as an infix expression, e.g.
`((XEXACTScat_dog OR XEXACTScat_dog*) OR (Scat OR (Sdog OR Sdog*)))`.
Provides ConsoleOutputWriter implementation for command output.
"""

from __future__ import annotations

from KnowledgeQuery.core.nodes import Combine, MatchAll, QueryNode, Term, Wildcard
from KnowledgeQuery.renderers.base import OutputWriter
from KnowledgeQuery.renderers.view_models import CompiledQueryView
from KnowledgeQuery.utils.log import log


def render_text(node: QueryNode) -> str:
    """Render a query tree as a single-line infix expression.

    Args:
        node: Root of the query tree.

    Returns:
        A human-readable expression. Not meant to be parsed back.
    """
    match node:
        case Term(term=t):
            return t
        case Wildcard(pattern=p):
            return f"{p}*"
        case MatchAll():
            return "<alldocuments>"
        case Combine(op=op, children=children):
            if not children:
                return f"<empty {op.value}>"
            return "(" + f" {op.value} ".join(render_text(child) for child in children) + ")"
        case _:
            raise ValueError(f"Unsupported query node: {node!r}")


def render_execution(view: CompiledQueryView) -> str:
    """Render execution settings, e.g. `sort=slot 1 desc offset=0 limit=-`."""
    if view.sort_slot is not None:
        order = "desc" if view.sort_descending else "asc"
        ranking = f"sort=slot {view.sort_slot} {order}"
    else:
        ranking = f"cutoff={view.cutoff_percent}%"
    limit = "-" if view.limit is None else str(view.limit)
    return f"{ranking} offset={view.offset} limit={limit}"


class ConsoleOutputWriter(OutputWriter):
    """Write compiled queries to console via logging."""

    def write_compiled(self, view: CompiledQueryView) -> None:
        log.info("spec=%s", view.description)
        log.info("query=%s", render_text(view.tree))
        log.info("execution=%s", render_execution(view))

    def finalize(self, action: str) -> None:
        """No-op for console output."""
