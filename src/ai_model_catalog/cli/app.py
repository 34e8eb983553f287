"""Main CLI application for the AI model catalog."""

from typing import Optional

import click
import rich_click as rich_click

from .utils import configure_logging, resolve_format, resolve_log_level

# Configure rich-click
rich_click.rich_click.USE_RICH_MARKUP = True
rich_click.rich_click.USE_MARKDOWN = True
rich_click.rich_click.SHOW_ARGUMENTS = True
rich_click.rich_click.GROUP_ARGUMENTS_OPTIONS = True


@click.group(invoke_without_command=True)
@click.option(
    "--format",
    type=click.Choice(["table", "json"], case_sensitive=False),
    help="Output format. Defaults to 'table' for TTY, 'json' for non-TTY.",
)
@click.option("--verbose", "-v", count=True, help="Increase verbosity (can be used multiple times).")
@click.option("--debug", is_flag=True, help="Enable debug-level logging.")
@click.option("--no-color", is_flag=True, help="Disable color output.")
@click.option("--version", is_flag=True, help="Print CLI and library version information.")
@click.pass_context
def app(
    ctx: click.Context,
    format: Optional[str] = None,
    verbose: int = 0,
    debug: bool = False,
    no_color: bool = False,
    version: bool = False,
) -> None:
    """AI model catalog CLI - inspect the catalog and rank provider models.

    The AMC CLI resolves the model catalog (network, disk cache, or the
    compiled-in snapshot), manages the cache file, and ranks, recommends or
    checks provider model ids against it.

    Examples:
      # Show where the catalog came from
      amc catalog show

      # Rank an OpenAI model list
      amc models rank openai gpt-5 gpt-4o-2024-11-20 gpt-4o o3

      # Fail with exit code 5 if a configured model is deprecated
      amc models check openai gpt-3.5-turbo
    """
    if version:
        from .. import __version__

        click.echo(f"AMC CLI version: {__version__}")
        click.echo(f"Library version: {__version__}")
        ctx.exit()

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit()

    log_level = resolve_log_level(verbose, debug)
    configure_logging(log_level)

    # Store global options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj.update(
        {
            "format": resolve_format(format),
            "format_explicit": format is not None,
            "verbose": verbose,
            "debug": debug,
            "no_color": no_color,
            "log_level": log_level,
        }
    )


# Register subcommands after the group is defined to avoid circular imports.
from .commands import cache, catalog, models  # noqa: E402

app.add_command(catalog.catalog)
app.add_command(cache.cache)
app.add_command(models.models)


if __name__ == "__main__":
    app()
