"""CLI entry point for the arXiv MCP server."""

from __future__ import annotations

import asyncio
import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from arxiv_mcp.models import DEFAULT_MAX_RESULTS, MAX_RESULTS, MIN_RESULTS

console = Console()
# stdout carries the MCP stdio protocol, so logs go to stderr
err_console = Console(stderr=True)


def _setup_logging(verbose: bool) -> None:
    from arxiv_mcp.config import get_log_level

    level = "DEBUG" if verbose else get_log_level()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


@click.group()
@click.version_option(package_name="arxiv-mcp")
def cli():
    """arxiv-mcp - Search recent arXiv papers by category, as an MCP tool."""
    pass


# ---------------------------------------------------------------------------
# arxiv-mcp serve
# ---------------------------------------------------------------------------


@cli.command()
@click.option(
    "--transport",
    "-t",
    default=None,
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    help="MCP transport (default: $MCP_TRANSPORT or stdio).",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
def serve(transport: str | None, verbose: bool):
    """Run the MCP server."""
    from arxiv_mcp.server import run

    try:
        _setup_logging(verbose)
        run(transport)
    except ValueError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# arxiv-mcp search
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("category")
@click.option(
    "--max-results",
    "-n",
    default=DEFAULT_MAX_RESULTS,
    show_default=True,
    type=click.IntRange(MIN_RESULTS, MAX_RESULTS),
    help="Number of papers to return.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
def search(category: str, max_results: int, verbose: bool):
    """Show the newest papers in an arXiv category.

    CATEGORY: arXiv category, e.g. cs.AI or math.CO
    """
    from arxiv_mcp.service import ERROR_PREFIX, search_arxiv

    _setup_logging(verbose)
    output = asyncio.run(search_arxiv(category, max_results))
    if output.startswith(ERROR_PREFIX):
        console.print(output, style="red", markup=False, highlight=False)
        raise SystemExit(1)
    console.print(output, markup=False, highlight=False)


# ---------------------------------------------------------------------------
# arxiv-mcp env
# ---------------------------------------------------------------------------


@cli.group(invoke_without_command=True)
@click.pass_context
def env(ctx):
    """Show or configure settings.

    Run without arguments to see current status.
    Use `arxiv-mcp env set KEY value` to save a setting to ~/.arxiv-mcp/.env.
    """
    if ctx.invoked_subcommand is not None:
        return

    from arxiv_mcp.config import PERSISTENT_ENV, check_env

    statuses = check_env()
    console.print("Settings:")
    console.print()
    for var, is_set, info in statuses:
        status = "[green]set[/green]" if is_set else f"[dim]default ({info['default']})[/dim]"
        console.print(f"  {var}: {status}")
        console.print(f"    {info['description']}")
        console.print()

    console.print(f"Config file: {PERSISTENT_ENV}", style="dim")


@env.command("set")
@click.argument("key")
@click.argument("value")
def env_set(key: str, value: str):
    """Save a setting to ~/.arxiv-mcp/.env.

    KEY: one of ARXIV_API_URL, ARXIV_TIMEOUT, ARXIV_MCP_LOG_LEVEL,
    MCP_TRANSPORT, MCP_HTTP_HOST, MCP_HTTP_PORT
    VALUE: the setting's value
    """
    from arxiv_mcp.config import VALID_KEYS, save_key

    key = key.upper()
    if key not in VALID_KEYS:
        console.print(f"[red]Unknown key: {key}[/red]")
        console.print(f"Valid keys: {', '.join(sorted(VALID_KEYS))}")
        raise SystemExit(1)

    path = save_key(key, value)
    console.print(f"Saved {key} to {path}")
