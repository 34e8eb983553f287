"""Tests for static defaults and default-model selection."""

from typing import Any, Dict

import pytest

from ai_model_catalog.defaults import (
    DEFAULT_MODELS,
    find_default_model,
    get_provider_from_model_id,
    is_featured_model,
    is_popular_provider,
    rank_models,
)
from ai_model_catalog.provider_rules import SUPPORTED_PROVIDERS
from ai_model_catalog.schema import CatalogSource, ModelCatalog, ProviderModel


def test_every_supported_provider_has_a_default() -> None:
    """Each provider has a static fallback model."""
    assert set(DEFAULT_MODELS) == set(SUPPORTED_PROVIDERS)


def test_empty_model_list_has_no_default(catalog: ModelCatalog) -> None:
    """Nothing to choose from yields None."""
    assert find_default_model([], "openai", catalog) is None


def test_prefers_balanced_recommendation(catalog: ModelCatalog) -> None:
    """The recommendation wins over list order and the static default."""
    assert find_default_model(["gpt-5-mini", "gpt-5"], "openai", catalog) == "gpt-5"


def test_uses_snapshot_catalog_by_default() -> None:
    """Without a catalog the compiled-in snapshot is used."""
    models = [
        ProviderModel(id="claude-3-haiku-20240307", name="Claude 3 Haiku"),
        ProviderModel(id="claude-sonnet-4-5", name="Claude Sonnet 4.5"),
    ]

    assert find_default_model(models, "anthropic") == "claude-sonnet-4-5"


def test_unsupported_provider_uses_first_model(catalog: ModelCatalog) -> None:
    """Providers without rules fall back to list order."""
    assert find_default_model(["mistral-large", "mistral-small"], "mistral", catalog) == "mistral-large"


def test_static_default_when_recommendation_is_empty(raw_catalog: Dict[str, Any]) -> None:
    """The static default is used when everything is filtered out."""
    raw_catalog["openai"]["models"]["gpt-5-mini"]["status"] = "deprecated"
    catalog = ModelCatalog.from_raw(raw_catalog, CatalogSource.SNAPSHOT)

    assert find_default_model(["whisper-1", "gpt-5-mini"], "openai", catalog) == "gpt-5-mini"


def test_first_model_when_static_default_is_absent(catalog: ModelCatalog) -> None:
    """With no recommendation and no static default, the first id wins."""
    assert find_default_model(["whisper-1", "tts-1"], "openai", catalog) == "whisper-1"


@pytest.mark.parametrize(
    "model_id,expected",
    [
        ("anthropic/claude-sonnet-4-5", "anthropic"),
        ("openai/gpt-5", "openai"),
        ("gpt-5", "gpt-5"),
    ],
)
def test_get_provider_from_model_id(model_id: str, expected: str) -> None:
    """The vendor is the prefix before the first slash."""
    assert get_provider_from_model_id(model_id) == expected


def test_popular_and_featured_helpers() -> None:
    """Featured models are listed per popular vendor."""
    assert is_popular_provider("google/gemini-2.5-pro")
    assert not is_popular_provider("meta-llama/llama-3.1-70b-instruct")

    assert is_featured_model("anthropic/claude-sonnet-4-5")
    assert is_featured_model("openai/o3")
    assert not is_featured_model("openai/gpt-3.5-turbo")
    assert not is_featured_model("x-ai/grok-4")


def test_rank_models_fills_provider_and_rank() -> None:
    """Aggregator listings are ranked, deduped and numbered from zero."""
    ranked = rank_models(
        [
            {"id": "openai/gpt-5", "name": "GPT-5"},
            "anthropic/claude-sonnet-4-5",
            "openai/gpt-5-2025-08-07",
            "meta-llama/llama-3.1-70b-instruct",
            "openai/whisper-1",
        ]
    )

    assert ranked == [
        {
            "id": "anthropic/claude-sonnet-4-5",
            "name": "anthropic/claude-sonnet-4-5",
            "provider": "anthropic",
            "rank": 0,
        },
        {"id": "openai/gpt-5", "name": "GPT-5", "provider": "openai", "rank": 1},
    ]


def test_rank_models_keeps_explicit_provider() -> None:
    """A provider given on the input is not replaced by the id prefix."""
    ranked = rank_models([{"id": "google/gemini-2.5-pro", "name": "Gemini 2.5 Pro", "provider": "google"}])

    assert ranked == [{"id": "google/gemini-2.5-pro", "name": "Gemini 2.5 Pro", "provider": "google", "rank": 0}]


def test_rank_models_empty() -> None:
    """An empty listing ranks to an empty list."""
    assert rank_models([]) == []
