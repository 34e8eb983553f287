"""Catalog inspection commands for the AMC CLI."""

from typing import Optional

import click

from ...catalog import get_model_catalog, is_catalog_fresh
from ...schema import CatalogSource
from ..formatters import (
    create_console,
    format_catalog_summary_json,
    format_catalog_summary_table,
    format_env_vars_json,
    format_env_vars_table,
    format_json,
)
from ..utils import ExitCode, get_amc_env_vars, handle_error


@click.group()
def catalog() -> None:
    """Inspect the resolved model catalog."""
    pass


@catalog.command()
@click.pass_context
def show(ctx: click.Context) -> None:
    """Show where the catalog came from and how many models it holds."""
    try:
        resolved = get_model_catalog()
        fresh = is_catalog_fresh(resolved)

        if ctx.obj["format"] == "json":
            format_json(format_catalog_summary_json(resolved, fresh))
        else:
            console = create_console(no_color=ctx.obj["no_color"])
            format_catalog_summary_table(resolved, fresh, console)

    except Exception as e:
        handle_error(e, ExitCode.GENERIC_ERROR)


@catalog.command()
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True), help="Network fetch timeout in seconds.")
@click.pass_context
def refresh(ctx: click.Context, timeout: Optional[float] = None) -> None:
    """Force a new catalog resolution.

    The network source is tried first; on failure the disk cache or the
    compiled-in snapshot is used, and the source obtained is reported.
    """
    try:
        resolved = get_model_catalog(force_refresh=True, timeout=timeout)
        fresh = is_catalog_fresh(resolved)

        if ctx.obj["format"] == "json":
            format_json(format_catalog_summary_json(resolved, fresh))
        else:
            console = create_console(no_color=ctx.obj["no_color"])
            if resolved.source == CatalogSource.NETWORK:
                console.print("✅ [green]Catalog refreshed from the network[/green]")
            else:
                console.print(f"⚠️  [yellow]Catalog resolved from {resolved.source.value}, not the network[/yellow]")
            format_catalog_summary_table(resolved, fresh, console)

    except Exception as e:
        handle_error(e, ExitCode.GENERIC_ERROR)


@catalog.command()
@click.pass_context
def env(ctx: click.Context) -> None:
    """Show effective AMC environment variables."""
    try:
        env_vars = get_amc_env_vars()

        if ctx.obj["format"] == "json":
            format_json(format_env_vars_json(env_vars))
        else:
            console = create_console(no_color=ctx.obj["no_color"])
            format_env_vars_table(env_vars, console)

    except Exception as e:
        handle_error(e, ExitCode.GENERIC_ERROR)
