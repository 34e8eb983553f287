"""Static model defaults and featured-model helpers.

``find_default_model`` prefers the balanced recommendation and falls back to
the static per-provider default, then to the first listed model.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from .catalog import create_snapshot_catalog
from .provider_rules import SUPPORTED_PROVIDERS
from .ranking import (
    ModelInput,
    RecommendationPolicy,
    dedupe_provider_models,
    find_recommended_model,
    rank_provider_models,
)
from .schema import ModelCatalog, ProviderModel

POPULAR_PROVIDERS: Tuple[str, ...] = ("anthropic", "openai", "google")

FEATURED_MODELS: Dict[str, List[str]] = {
    "anthropic": [
        "anthropic/claude-sonnet-4-5",
        "anthropic/claude-haiku-4-5",
        "anthropic/claude-opus-4-6",
        "anthropic/claude-3.7-sonnet",
    ],
    "openai": [
        "openai/gpt-5.2",
        "openai/gpt-5-mini",
        "openai/o3",
        "openai/gpt-4.1",
    ],
    "google": [
        "google/gemini-3-pro-preview",
        "google/gemini-2.5-pro",
        "google/gemini-2.5-flash",
        "google/gemini-flash-latest",
    ],
}

DEFAULT_OPENROUTER_MODEL = "anthropic/claude-sonnet-4-5"

DEFAULT_MODELS: Dict[str, str] = {
    "openrouter": DEFAULT_OPENROUTER_MODEL,
    "anthropic": "claude-3-7-sonnet-latest",
    "openai": "gpt-5-mini",
    "google-ai-studio": "gemini-2.5-flash",
}

_snapshot_catalog: Optional[ModelCatalog] = None


def _get_snapshot_catalog() -> ModelCatalog:
    global _snapshot_catalog
    if _snapshot_catalog is None:
        _snapshot_catalog = create_snapshot_catalog()
    return _snapshot_catalog


def get_provider_from_model_id(model_id: str) -> str:
    """Get the vendor prefix of an aggregator model id."""
    provider = model_id.split("/", 1)[0]
    return provider or model_id


def is_popular_provider(model_id: str) -> bool:
    """Check if an aggregator model id comes from a popular vendor."""
    return get_provider_from_model_id(model_id) in POPULAR_PROVIDERS


def is_featured_model(model_id: str) -> bool:
    """Check if an aggregator model id is featured for its vendor."""
    featured = FEATURED_MODELS.get(get_provider_from_model_id(model_id))
    return featured is not None and model_id in featured


def find_default_model(
    models: Sequence[ModelInput],
    provider_id: str,
    catalog: Optional[ModelCatalog] = None,
) -> Optional[str]:
    """Pick the model to preselect for a provider.

    Args:
        models: Raw models listed by the provider
        provider_id: Provider id; unsupported ids skip the recommendation step
        catalog: Catalog for ranking. Defaults to the compiled-in snapshot.

    Returns:
        The chosen id, or None for an empty list
    """
    if not models:
        return None

    candidates = [ProviderModel.coerce(model) for model in models]

    if provider_id in SUPPORTED_PROVIDERS:
        recommended = find_recommended_model(
            provider_id,
            candidates,
            catalog if catalog is not None else _get_snapshot_catalog(),
            RecommendationPolicy.BALANCED,
        )
        if recommended:
            return recommended

    fallback = DEFAULT_MODELS.get(provider_id)
    if fallback and any(model.id == fallback for model in candidates):
        return fallback

    return candidates[0].id


def rank_models(models: Sequence[ModelInput]) -> List[Dict[str, Any]]:
    """Rank and dedupe an OpenRouter listing against the snapshot catalog.

    Each entry gets its vendor prefix as ``provider`` when none is given, and
    its zero-based position as ``rank``.
    """
    normalized = []
    for model in models:
        candidate = ProviderModel.coerce(model)
        normalized.append(
            ProviderModel(
                id=candidate.id,
                name=candidate.name,
                provider=candidate.provider or get_provider_from_model_id(candidate.id),
            )
        )

    ranked = dedupe_provider_models(
        "openrouter", rank_provider_models("openrouter", normalized, _get_snapshot_catalog())
    )
    return [
        {
            "id": model.id,
            "name": model.name,
            "provider": model.provider or get_provider_from_model_id(model.id),
            "rank": index,
        }
        for index, model in enumerate(ranked)
    ]
