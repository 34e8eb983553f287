"""Model ranking commands for the AMC CLI."""

from typing import Any, List, Optional, Tuple

import click

from ...catalog import get_catalog_model_metadata, get_model_catalog
from ...deprecation import assert_configured_model_allowed
from ...errors import ConfiguredModelDeprecatedError
from ...ranking import (
    RecommendationPolicy,
    dedupe_provider_models,
    find_recommended_model,
    rank_models_detailed,
    rank_provider_models,
)
from ...schema import ModelCatalog, ProviderModel, RankedModel
from ..formatters import (
    create_console,
    format_json,
    format_ranked_models_json,
    format_ranked_models_table,
)
from ..utils import (
    ExitCode,
    handle_error,
    load_model_input,
    model_input_options,
    provider_argument,
)


def collect_models(model_ids: Tuple[str, ...], input_path: Optional[str]) -> List[ProviderModel]:
    """Gather models from positional ids and an optional input file.

    Raises:
        click.BadParameter: If no models were given or an entry is malformed
    """
    raw: List[Any] = list(model_ids)
    if input_path:
        raw.extend(load_model_input(input_path))

    if not raw:
        raise click.BadParameter("Provide model ids as arguments or with --input")

    try:
        return [ProviderModel.coerce(entry) for entry in raw]
    except TypeError as e:
        raise click.BadParameter(str(e)) from e


def rank_for_display(
    provider: str, models: List[ProviderModel], catalog: ModelCatalog, dedupe: bool = True
) -> List[RankedModel]:
    """Rank models, optionally deduplicated, keeping the ranking annotations."""
    if not dedupe:
        return rank_models_detailed(provider, models, catalog)

    deduped = dedupe_provider_models(provider, rank_provider_models(provider, models, catalog))
    return rank_models_detailed(provider, deduped, catalog)


@click.group()
def models() -> None:
    """Rank, recommend and check provider models."""
    pass


@models.command()
@provider_argument
@model_input_options
@click.option("--no-dedupe", is_flag=True, help="Keep date-stamped and alias variants of the same model.")
@click.pass_context
def rank(
    ctx: click.Context,
    provider: str,
    model_ids: Tuple[str, ...],
    input_path: Optional[str] = None,
    no_dedupe: bool = False,
) -> None:
    """Rank a provider's model list against the catalog.

    Models are filtered by the provider's rules, catalog-deprecated models are
    dropped, and the rest are sorted by tier.

    Examples:
      amc models rank openai gpt-5 gpt-4o-2024-11-20 gpt-4o o3
    """
    try:
        candidates = collect_models(model_ids, input_path)
    except click.BadParameter as e:
        handle_error(e, ExitCode.INVALID_USAGE)
        return

    try:
        catalog = get_model_catalog()
        ranked = rank_for_display(provider, candidates, catalog, dedupe=not no_dedupe)

        if ctx.obj["format"] == "json":
            format_json(format_ranked_models_json(provider, ranked, deduped=not no_dedupe))
        else:
            console = create_console(no_color=ctx.obj["no_color"])
            format_ranked_models_table(provider, ranked, console)

    except Exception as e:
        handle_error(e, ExitCode.GENERIC_ERROR)


@models.command()
@provider_argument
@model_input_options
@click.option(
    "--policy",
    type=click.Choice([policy.value for policy in RecommendationPolicy], case_sensitive=False),
    default=RecommendationPolicy.BALANCED.value,
    show_default=True,
    help="Tier preference order used to pick the model.",
)
@click.pass_context
def recommend(
    ctx: click.Context,
    provider: str,
    model_ids: Tuple[str, ...],
    input_path: Optional[str] = None,
    policy: str = RecommendationPolicy.BALANCED.value,
) -> None:
    """Recommend one model from a provider's model list."""
    try:
        candidates = collect_models(model_ids, input_path)
    except click.BadParameter as e:
        handle_error(e, ExitCode.INVALID_USAGE)
        return

    try:
        catalog = get_model_catalog()
        recommended = find_recommended_model(provider, candidates, catalog, policy.lower())
    except Exception as e:
        handle_error(e, ExitCode.GENERIC_ERROR)
        return

    if recommended is None:
        handle_error(Exception(f"No {provider} models survived filtering"), ExitCode.MODEL_NOT_FOUND)
        return

    if ctx.obj["format"] == "json":
        format_json({"provider": provider, "policy": policy.lower(), "recommended": recommended})
    else:
        console = create_console(no_color=ctx.obj["no_color"])
        format_ranked_models_table(provider, rank_for_display(provider, candidates, catalog), console, recommended)
        console.print(f"\n[bold]Recommended ({policy.lower()}):[/bold] [green]{recommended}[/green]")


@models.command()
@provider_argument
@click.argument("model_id", type=str)
@click.pass_context
def check(ctx: click.Context, provider: str, model_id: str) -> None:
    """Check that a configured model is not deprecated.

    Exits with status 5 when the catalog marks the model deprecated.
    """
    try:
        catalog = get_model_catalog()
        metadata = get_catalog_model_metadata(provider, model_id, catalog)
        assert_configured_model_allowed(provider, model_id, catalog=catalog)
    except ConfiguredModelDeprecatedError as e:
        handle_error(e, ExitCode.MODEL_DEPRECATED)
        return
    except Exception as e:
        handle_error(e, ExitCode.GENERIC_ERROR)
        return

    if ctx.obj["format"] == "json":
        format_json(
            {
                "provider": provider,
                "model": model_id,
                "allowed": True,
                "known_in_catalog": metadata is not None,
                "catalog_id": metadata.id if metadata else None,
                "name": metadata.name if metadata else None,
                "status": metadata.status if metadata else None,
            }
        )
    else:
        console = create_console(no_color=ctx.obj["no_color"])
        if metadata is None:
            console.print(f"✅ [green]{model_id}[/green] is allowed (not found in the {catalog.source.value} catalog)")
        else:
            console.print(f"✅ [green]{model_id}[/green] is allowed ({metadata.name}, catalog id {metadata.id})")
