"""AliasCraft CLI — list and run registered aliases."""

from __future__ import annotations

import logging
import sys
from pprint import pformat
from typing import Any

import click

try:
    from rich.console import Console
    from rich.logging import RichHandler
    from rich.markup import escape
    from rich.table import Table

    _console = Console(highlight=False)
    _err_console = Console(stderr=True, highlight=False)
except ImportError:
    raise ImportError("The CLI requires click and rich. " "Install them with: pip install aliascraft")

from aliascraft import SETTINGS_ENV_VAR, AliasError, AliasRegistry, build_registry

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=_err_console, show_path=False)],
    )


def _format_result(result: Any) -> str:
    """Render a run result the way a person would want to read it."""
    if isinstance(result, str):
        return result
    return pformat(result)


def _registry(ctx: click.Context) -> AliasRegistry:
    return ctx.obj["registry"]


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group(invoke_without_command=True)
@click.option(
    "--config",
    "config_path",
    envvar=SETTINGS_ENV_VAR,
    default=None,
    type=click.Path(dir_okay=False),
    help=f"Settings file declaring aliases and hooks (env: {SETTINGS_ENV_VAR}).",
)
@click.option("--verbose", "-v", is_flag=True, help="Log registry activity to stderr.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """AliasCraft — named, hookable callables."""
    _configure_logging(verbose)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    ctx.ensure_object(dict)
    if "registry" in ctx.obj:
        return

    try:
        ctx.obj["registry"] = build_registry(config_path)
    except AliasError as e:
        _err_console.print(f"[red]Failed to load settings: {escape(str(e))}[/red]")
        sys.exit(1)


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


@cli.command()
def version() -> None:
    """Show the installed aliascraft version."""
    from aliascraft import __version__

    click.echo(f"aliascraft {__version__}")


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------


@cli.command(name="list")
@click.option("--group", default=None, help="Only show aliases in this group.")
@click.pass_context
def list_aliases(ctx: click.Context, group: str | None) -> None:
    """List all registered aliases."""
    registry = _registry(ctx)
    aliases = registry.get_aliases_by_group(group) if group is not None else registry.aliases()

    if not aliases:
        if group is not None:
            _console.print(f"No aliases registered in group '{escape(group)}'.")
        else:
            _console.print("No aliases registered.")
        sys.exit(0)

    table = Table(title="Registered aliases")
    table.add_column("Alias", style="bold", no_wrap=True)
    table.add_column("Group")
    table.add_column("Args")
    table.add_column("Action", style="dim")
    for name, definition in aliases.items():
        table.add_row(
            escape(name),
            escape(definition.group or "-"),
            escape(", ".join(definition.args) or "-"),
            escape(definition.action_name),
        )
    _console.print(table)
    sys.exit(0)


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------


@cli.command(name="run", context_settings={"ignore_unknown_options": True})
@click.argument("alias")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def run_alias(ctx: click.Context, alias: str, args: tuple[str, ...]) -> None:
    """Run a registered alias with optional arguments."""
    registry = _registry(ctx)

    try:
        result = registry.run(alias, *args)
    except Exception as e:
        _err_console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)

    _console.print(f"[green]Alias '{escape(alias)}' executed successfully.[/green]")
    if result is not None:
        _console.print(f"Result: {escape(_format_result(result))}")
    sys.exit(0)
