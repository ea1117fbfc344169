"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from KnowledgeQuery.cli.runner import CommandRunner
from KnowledgeQuery.config import AppConfig, load_config
from KnowledgeQuery.core.query import QueryMatch, QueryMode, QueryOrder, QuerySort, QuerySpec


def _choice(enum_type) -> click.Choice:
    return click.Choice([member.name.lower() for member in enum_type], case_sensitive=False)


def _ad_hoc_query(
    cfg: AppConfig,
    terms: str | None,
    corrected: str | None,
    mode: str,
    match: str,
    sort: str,
    order: str,
    tags: tuple[str, ...],
) -> QuerySpec:
    return QuerySpec(
        app_id=cfg.defaults.resolve_app_id(),
        search_terms=terms,
        corrected_terms=corrected,
        mode=QueryMode[mode.upper()],
        match=QueryMatch[match.upper()],
        sort=QuerySort[sort.upper()],
        order=QueryOrder[order.upper()],
        tags_match_all=tags,
    )


@click.group(help="KnowledgeQuery: compile content queries and print them.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=Path("config/default.yml"),
    show_default=True,
    help="Path to YAML config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.

    Args:
        ctx: Click context.
        config_path: Path to YAML config file.
    """
    load_dotenv()

    cfg = load_config(config_path)
    ctx.obj = cfg


@cli.command("compile")
@click.option("--terms", default=None, help="Search terms of an ad-hoc query; overrides configured queries.")
@click.option("--corrected", default=None, help="Corrected search terms.")
@click.option("--mode", type=_choice(QueryMode), default="incremental", show_default=True)
@click.option("--match", type=_choice(QueryMatch), default="only_title", show_default=True)
@click.option("--sort", type=_choice(QuerySort), default="relevance", show_default=True)
@click.option("--order", type=_choice(QueryOrder), default="ascending", show_default=True)
@click.option("--tag", "tags", multiple=True, help="Tag every result must carry. Repeatable.")
@click.pass_context
def compile_cmd(
    ctx: click.Context,
    terms: str | None,
    corrected: str | None,
    mode: str,
    match: str,
    sort: str,
    order: str,
    tags: tuple[str, ...],
) -> None:
    """Compile queries and print the query tree and execution settings.

    Without --terms or --tag the queries from the YAML config are compiled.

    Raises:
        click.Abort: When compilation fails.
    """
    cfg: AppConfig = ctx.obj
    if terms is not None or corrected is not None or tags:
        queries: tuple[QuerySpec, ...] = (
            _ad_hoc_query(cfg, terms, corrected, mode, match, sort, order, tags),
        )
    else:
        queries = cfg.queries
    CommandRunner(cfg).run_compile(action=ctx.command.name, queries=queries)


@cli.command("describe")
@click.pass_context
def describe_cmd(ctx: click.Context) -> None:
    """Print the description of each configured query."""
    cfg: AppConfig = ctx.obj
    CommandRunner(cfg).run_describe(action=ctx.command.name, queries=cfg.queries)
