"""Cache management commands for the AMC CLI."""

import click

from ...catalog import clear_model_catalog
from ...data_manager import CatalogDataManager
from ..formatters import (
    create_console,
    format_cache_info_json,
    format_cache_info_table,
    format_json,
)
from ..utils import ExitCode, format_file_size, handle_error


@click.group()
def cache() -> None:
    """Manage the catalog disk cache."""
    pass


@cache.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Show cache file information."""
    try:
        cache_info = CatalogDataManager().get_cache_info()

        if ctx.obj["format"] == "json":
            format_json(format_cache_info_json(cache_info))
        else:
            console = create_console(no_color=ctx.obj["no_color"])
            format_cache_info_table(cache_info, console)

    except Exception as e:
        handle_error(e, ExitCode.GENERIC_ERROR)


@cache.command()
@click.option("--yes", is_flag=True, help="Confirm deletion without prompting (required for non-interactive use).")
@click.pass_context
def clear(ctx: click.Context, yes: bool = False) -> None:
    """Delete the catalog cache file.

    Resolution falls back to the compiled-in snapshot when the network is
    unavailable until the next successful fetch.
    """
    try:
        manager = CatalogDataManager()
        cache_info = manager.get_cache_info()
        console = create_console(no_color=ctx.obj["no_color"])

        if not yes:
            if not cache_info["exists"]:
                click.echo("No cache file found to clear.")
                return

            console.print(
                f"[yellow]Warning:[/yellow] This will delete {cache_info['path']} "
                f"({format_file_size(int(cache_info['size']))})"
            )
            if not click.confirm("\nAre you sure you want to clear the cache?"):
                console.print("Cache clear cancelled.")
                return

        removed = manager.clear_cache()
        clear_model_catalog()

        if ctx.obj["format"] == "json":
            format_json({"success": True, "removed": removed, "cache_file": cache_info["path"]})
        elif removed:
            console.print(f"✅ [green]Cleared catalog cache:[/green] {cache_info['path']}")
        else:
            console.print("ℹ️  No cache file was found to clear.")

    except Exception as e:
        handle_error(e, ExitCode.GENERIC_ERROR)
