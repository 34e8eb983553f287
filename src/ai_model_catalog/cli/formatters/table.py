"""Rich table formatter for CLI output."""

import sys
from typing import Any, Dict, List, Optional, TextIO

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ...schema import ModelCatalog, ModelTier, RankedModel
from ..utils.helpers import format_file_size

_TIER_STYLES = {
    ModelTier.DEFAULT: "bold green",
    ModelTier.FAST: "cyan",
    ModelTier.REASONING: "magenta",
    ModelTier.LEGACY: "dim",
    ModelTier.OTHER: "yellow",
}


def create_console(output: Optional[TextIO] = None, no_color: bool = False) -> Console:
    """Create a Rich console instance.

    Args:
        output: Output stream (defaults to stdout)
        no_color: Disable color output

    Returns:
        Console instance
    """
    if output is None:
        output = sys.stdout

    return Console(file=output, no_color=no_color)


def format_catalog_summary_table(catalog: ModelCatalog, fresh: bool, console: Optional[Console] = None) -> None:
    """Format a catalog summary as a Rich table.

    Args:
        catalog: Resolved catalog
        fresh: Whether the catalog is within the freshness window
        console: Rich console (will create if None)
    """
    if console is None:
        console = create_console()

    freshness = "[green]fresh[/green]" if fresh else "[yellow]stale[/yellow]"
    console.print(f"[bold]Source:[/bold] {catalog.source.value}")
    console.print(f"[bold]Fetched At:[/bold] {catalog.fetched_at} ({freshness})")
    console.print()

    table = Table(title="Catalog Providers", show_header=True, header_style="bold magenta")
    table.add_column("Provider", style="cyan")
    table.add_column("Models", justify="right")
    table.add_column("Deprecated", justify="right")

    for provider_id, provider in catalog.providers.items():
        deprecated = sum(1 for model in provider.models.values() if model.is_deprecated)
        table.add_row(provider_id, str(len(provider.models)), str(deprecated))

    table.add_row(Text("total", style="bold"), Text(str(catalog.model_count), style="bold"), "")
    console.print(table)


def format_ranked_models_table(
    provider: str, ranked: List[RankedModel], console: Optional[Console] = None, recommended: Optional[str] = None
) -> None:
    """Format ranked models as a Rich table.

    Args:
        provider: Provider id the models were ranked for
        ranked: Ranked models
        console: Rich console (will create if None)
        recommended: Id to highlight as the recommendation
    """
    if console is None:
        console = create_console()

    if not ranked:
        console.print(f"[dim]No {provider} models survived filtering[/dim]")
        return

    table = Table(title=f"Ranked Models ({provider})", show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Model", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Tier", no_wrap=True)
    table.add_column("Catalog", justify="center")
    table.add_column("Updated", style="dim")

    for index, model in enumerate(ranked, start=1):
        model_id = f"{model.id} ★" if model.id == recommended else model.id
        table.add_row(
            str(index),
            model_id,
            model.name,
            Text(model.tier.value, style=_TIER_STYLES.get(model.tier, "")),
            Text("✓", style="green") if model.known_in_catalog else Text("✗", style="red"),
            model.updated_at or "N/A",
        )

    console.print(table)


def format_cache_info_table(cache_info: Dict[str, Any], console: Optional[Console] = None) -> None:
    """Format cache information as a Rich table.

    Args:
        cache_info: Cache information
        console: Rich console (will create if None)
    """
    if console is None:
        console = create_console()

    console.print(f"[bold]Cache File:[/bold] {cache_info.get('path', 'N/A')}")
    if not cache_info.get("exists"):
        console.print("[dim]No cache file found[/dim]")
        return

    table = Table(title="Catalog Cache", show_header=True, header_style="bold magenta")
    table.add_column("Size", justify="right")
    table.add_column("Modified", style="dim")
    table.add_column("Fetched At", style="dim")

    table.add_row(
        format_file_size(int(cache_info.get("size", 0))),
        cache_info.get("modified") or "N/A",
        cache_info.get("fetched_at") or "N/A",
    )
    console.print(table)

    if cache_info.get("error"):
        console.print(f"[red]Unreadable cache:[/red] {cache_info['error']}")


def format_env_vars_table(env_vars: Dict[str, Optional[str]], console: Optional[Console] = None) -> None:
    """Format environment variables as a Rich table.

    Args:
        env_vars: Environment variables
        console: Rich console (will create if None)
    """
    if console is None:
        console = create_console()

    table = Table(title="AMC Environment Variables", show_header=True, header_style="bold magenta")

    table.add_column("Variable", style="cyan")
    table.add_column("Value", style="yellow")
    table.add_column("Set", justify="center")

    for key, value in sorted(env_vars.items()):
        is_set = value is not None
        display_value = value if is_set else "[dim]<not set>[/dim]"
        status = "✓" if is_set else "✗"
        status_style = "green" if is_set else "red"

        table.add_row(key, display_value, Text(status, style=status_style))

    console.print(table)
