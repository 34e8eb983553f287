"""Tests for provider-specific model rules."""

import pytest

from ai_model_catalog.errors import UnsupportedProviderError
from ai_model_catalog.provider_rules import (
    PROVIDER_MODEL_RULES,
    SUPPORTED_PROVIDERS,
    base_anthropic_model_id,
    base_google_model_id,
    base_openai_model_id,
    classify_tier,
    get_provider_rules,
    matches_provider_rules,
    strip_date_suffix,
)
from ai_model_catalog.schema import CatalogModelDefinition, ModelTier, ProviderModel, normalize_model_key


def test_supported_providers() -> None:
    """Direct vendors plus the aggregator are supported."""
    assert set(SUPPORTED_PROVIDERS) == {"anthropic", "openai", "google-ai-studio", "openrouter"}


def test_unknown_provider_raises() -> None:
    """Lookups for unknown providers fail loudly."""
    with pytest.raises(UnsupportedProviderError) as exc_info:
        get_provider_rules("azure")

    assert exc_info.value.supported == list(SUPPORTED_PROVIDERS)
    assert "azure" in str(exc_info.value)


@pytest.mark.parametrize(
    "provider_id,model_id,expected",
    [
        ("openai", "gpt-5", True),
        ("openai", "o4-mini", True),
        ("openai", "chatgpt-4o-latest", True),
        ("openai", "codex-mini-latest", True),
        ("openai", "text-embedding-3-large", False),
        ("openai", "gpt-4o-audio-preview", False),
        ("openai", "gpt-4o-mini-tts", False),
        ("openai", "gpt-4o-search-preview", False),
        ("openai", "dall-e-3", False),
        ("anthropic", "claude-sonnet-4-5", True),
        ("anthropic", "Claude-Opus-4-1", True),
        ("google-ai-studio", "gemini-2.5-flash", True),
        ("google-ai-studio", "gemini-2.5-flash-image", False),
        ("google-ai-studio", "gemini-live-2.5-flash-preview-native-audio", False),
        ("google-ai-studio", "gemma-3-27b-it", False),
        ("openrouter", "anthropic/claude-sonnet-4-5", True),
        ("openrouter", "openai/gpt-4o-audio-preview", False),
        ("openrouter", "google/gemini-2.0-flash-exp:free", False),
        ("openrouter", "mistralai/mistral-large", False),
    ],
)
def test_include_and_exclude_patterns(provider_id: str, model_id: str, expected: bool) -> None:
    """A model must match an include pattern and no exclude pattern."""
    assert matches_provider_rules(provider_id, model_id) is expected


@pytest.mark.parametrize(
    "model_id,expected",
    [
        ("gpt-4o-2024-11-20", "gpt-4o"),
        ("claude-3-5-sonnet-20241022", "claude-3-5-sonnet"),
        ("gemini-1.5-flash-002", "gemini-1.5-flash"),
        ("gpt-5", "gpt-5"),
    ],
)
def test_strip_date_suffix(model_id: str, expected: str) -> None:
    """ISO dates, 8-digit dates and revision numbers are removed."""
    assert strip_date_suffix(model_id) == expected


def test_vendor_dedupe_keys() -> None:
    """Each vendor collapses its own alias conventions."""
    assert base_openai_model_id("gpt-4o-latest") == "gpt-4o"
    assert base_openai_model_id("o3-mini:beta") == "o3-mini"
    assert base_anthropic_model_id("claude-3.7-sonnet:thinking") == "claude-3-7-sonnet"
    assert base_anthropic_model_id("claude-3-7-sonnet-latest") == "claude-3-7-sonnet"
    assert base_google_model_id("gemini-2.5-flash-preview-05-20") == "gemini-2.5-flash"
    assert base_google_model_id("gemini-2.5-pro-preview") == "gemini-2.5-pro"
    assert base_google_model_id("gemini-flash-latest") == "gemini-flash"


def test_aggregator_dedupe_key_keeps_vendor() -> None:
    """Aggregator keys are vendor-qualified."""
    dedupe_key = PROVIDER_MODEL_RULES["openrouter"].dedupe_key

    assert dedupe_key("openai/gpt-4o-2024-08-06") == "openai/gpt-4o"
    assert dedupe_key("anthropic/claude-3.5-haiku") == "anthropic/claude-3-5-haiku"
    assert dedupe_key("mistralai/mistral-large") == "mistralai/mistral-large"


@pytest.mark.parametrize(
    "catalog_provider,model_id,expected",
    [
        ("openai", "gpt-5", ModelTier.DEFAULT),
        ("openai", "gpt-5.1", ModelTier.DEFAULT),
        ("openai", "gpt-4.1", ModelTier.DEFAULT),
        ("openai", "gpt-4.1-mini", ModelTier.FAST),
        ("openai", "gpt-5-nano", ModelTier.FAST),
        ("openai", "o3", ModelTier.REASONING),
        ("openai", "o3-deep-research", ModelTier.REASONING),
        ("openai", "gpt-4-turbo", ModelTier.LEGACY),
        ("openai", "gpt-3.5-turbo", ModelTier.LEGACY),
        ("anthropic", "claude-sonnet-4-5", ModelTier.DEFAULT),
        ("anthropic", "claude-3-7-sonnet-latest", ModelTier.DEFAULT),
        ("anthropic", "claude-3-haiku-20240307", ModelTier.FAST),
        ("anthropic", "claude-opus-4-1", ModelTier.REASONING),
        ("anthropic", "claude-3-sonnet-20240229", ModelTier.LEGACY),
        ("google", "gemini-2.5-pro", ModelTier.DEFAULT),
        ("google", "gemini-2.5-flash-lite", ModelTier.FAST),
        ("google", "gemini-2.0-thinking-exp", ModelTier.REASONING),
        ("google", "gemini-2.0-exp", ModelTier.LEGACY),
        ("google", "gemini-exp-1206", ModelTier.OTHER),
    ],
)
def test_classify_tier(catalog_provider: str, model_id: str, expected: ModelTier) -> None:
    """Tier heuristics are checked in tier order."""
    assert classify_tier(catalog_provider, model_id, None) == expected


def test_classify_tier_uses_catalog_date_for_legacy() -> None:
    """An old lastUpdated makes an unclassified model legacy."""
    old = CatalogModelDefinition(id="claude-2.1", name="Claude 2.1", last_updated="2023-11-21")
    recent = CatalogModelDefinition(id="claude-2.1", name="Claude 2.1", last_updated="2025-01-01")

    assert classify_tier("anthropic", "claude-2.1", old) == ModelTier.LEGACY
    assert classify_tier("anthropic", "claude-2.1", recent) == ModelTier.OTHER


def test_aggregator_rank_resolver() -> None:
    """The aggregator prefers anthropic, then openai, then google."""
    resolve_rank = PROVIDER_MODEL_RULES["openrouter"].resolve_provider_rank
    assert resolve_rank is not None

    assert resolve_rank(ProviderModel(id="anthropic/claude-sonnet-4-5", name="")) == 0
    assert resolve_rank(ProviderModel(id="openai/gpt-5", name="")) == 1
    assert resolve_rank(ProviderModel(id="google/gemini-2.5-pro", name="")) == 2
    assert resolve_rank(ProviderModel(id="x-ai/grok-4", name="")) == 99


def test_only_the_aggregator_has_a_rank_resolver() -> None:
    """Direct vendors rank everything at zero."""
    for provider_id, rules in PROVIDER_MODEL_RULES.items():
        assert (rules.resolve_provider_rank is not None) == (provider_id == "openrouter")


def test_catalog_targets() -> None:
    """Providers resolve models to catalog buckets."""
    google = PROVIDER_MODEL_RULES["google-ai-studio"].resolve_catalog_target
    aggregator = PROVIDER_MODEL_RULES["openrouter"].resolve_catalog_target

    assert google(ProviderModel(id="gemini-2.5-pro", name="")) == ("google", "gemini-2.5-pro")
    assert aggregator(ProviderModel(id="openai/gpt-5", name="")) == ("openai", "gpt-5")
    assert aggregator(ProviderModel(id="qwen/qwen3", name="")) is None


def test_normalize_model_key() -> None:
    """Normalization lowercases and keeps only ASCII letters and digits."""
    assert normalize_model_key("Claude-3.7_Sonnet (Latest)") == "claude37sonnetlatest"
