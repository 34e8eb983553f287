"""Provider-specific model rules.

Every supported provider has one ``ProviderModelRules`` entry in
``PROVIDER_MODEL_RULES``. The entries hold the include/exclude filters, the
tier classifier, the dedupe-key function, and (for the OpenRouter aggregator)
the sub-provider rank. Nothing outside this module knows which provider it is
working on.
"""

import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Pattern, Tuple

from .errors import UnsupportedProviderError
from .schema import (
    CATALOG_PROVIDERS,
    CatalogModelDefinition,
    ModelTier,
    ProviderModel,
    ProviderModelRules,
    RuleContext,
    normalize_model_key,
)

__all__ = [
    "LEGACY_CUTOFF",
    "MODEL_TIER_ORDER",
    "PROVIDER_MODEL_RULES",
    "SUPPORTED_PROVIDERS",
    "classify_tier",
    "get_provider_rules",
    "matches_provider_rules",
    "normalize_model_key",
]

MODEL_TIER_ORDER: Tuple[ModelTier, ...] = (
    ModelTier.DEFAULT,
    ModelTier.FAST,
    ModelTier.REASONING,
    ModelTier.LEGACY,
    ModelTier.OTHER,
)

# Catalog entries last updated before this date rank as legacy
LEGACY_CUTOFF = "2025-01-01"

# Preference order of upstream vendors behind the aggregator
AGGREGATOR_PROVIDER_RANK: Dict[str, int] = {
    "anthropic": 0,
    "openai": 1,
    "google": 2,
}
UNRANKED_PROVIDER = 99


def _patterns(*expressions: str) -> Tuple[Pattern[str], ...]:
    return tuple(re.compile(expression, re.IGNORECASE) for expression in expressions)


# ---------------------------------------------------------------------------
# Dedupe keys
# ---------------------------------------------------------------------------

_DATE_SUFFIXES = _patterns(r"-\d{4}-\d{2}-\d{2}$", r"-\d{8}$", r"-\d{3}$")
_LATEST_SUFFIX = re.compile(r"-latest$", re.IGNORECASE)
_OPENAI_TAG = re.compile(r":(?:free|beta|alpha|extended|thinking)$", re.IGNORECASE)
_ANTHROPIC_TAG = re.compile(r":(?:thinking|beta|alpha)$", re.IGNORECASE)
_ANTHROPIC_DOT_VERSION = re.compile(r"\.([0-9]+)")
_GOOGLE_TAG = re.compile(r":(?:free|beta|alpha)$", re.IGNORECASE)
_GOOGLE_PREVIEW = re.compile(r"-preview(?:-[\d-]+)?$", re.IGNORECASE)


def strip_date_suffix(model_id: str) -> str:
    """Strip ISO-date, 8-digit-date and 3-digit revision suffixes, in that order."""
    for pattern in _DATE_SUFFIXES:
        model_id = pattern.sub("", model_id, count=1)
    return model_id


def base_openai_model_id(model_id: str) -> str:
    """Canonical key for an OpenAI model id."""
    base = _LATEST_SUFFIX.sub("", strip_date_suffix(model_id))
    return _OPENAI_TAG.sub("", base)


def base_anthropic_model_id(model_id: str) -> str:
    """Canonical key for an Anthropic model id (``3.7`` and ``3-7`` collapse)."""
    base = _ANTHROPIC_DOT_VERSION.sub(r"-\1", strip_date_suffix(model_id))
    base = _LATEST_SUFFIX.sub("", base)
    return _ANTHROPIC_TAG.sub("", base)


def base_google_model_id(model_id: str) -> str:
    """Canonical key for a Google model id."""
    base = _GOOGLE_PREVIEW.sub("", strip_date_suffix(model_id))
    base = _LATEST_SUFFIX.sub("", base)
    return _GOOGLE_TAG.sub("", base)


_VENDOR_BASE_ID: Dict[str, Callable[[str], str]] = {
    "anthropic": base_anthropic_model_id,
    "openai": base_openai_model_id,
    "google": base_google_model_id,
}


def _aggregator_dedupe_key(model_id: str) -> str:
    vendor, _, rest = model_id.partition("/")
    base_id = _VENDOR_BASE_ID.get(vendor)
    if base_id is None:
        return model_id
    return f"{vendor}/{base_id(rest)}"


# ---------------------------------------------------------------------------
# Tier classification
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TierPatterns:
    """Id heuristics for one catalog provider, checked in tier order."""

    default: Pattern[str]
    fast: Pattern[str]
    reasoning: Pattern[str]
    legacy: Pattern[str]


TIER_PATTERNS: Dict[str, TierPatterns] = {
    "anthropic": TierPatterns(
        default=re.compile(r"claude-(sonnet|haiku)-4-5|claude-3-7-sonnet|claude-3-5-haiku"),
        fast=re.compile(r"haiku|mini|flash|lite"),
        reasoning=re.compile(r"thinking|opus"),
        legacy=re.compile(r"claude-3-(haiku|sonnet|opus)"),
    ),
    "openai": TierPatterns(
        default=re.compile(r"^gpt-5(?:$|\.|-chat-latest|-pro)|^gpt-4\.1$|^gpt-4o$"),
        fast=re.compile(r"mini|nano|flash|lite"),
        reasoning=re.compile(r"^o\d|reason|deep-research|codex"),
        legacy=re.compile(r"gpt-3\.5|gpt-4(?:$|-turbo)|preview|0314|0613"),
    ),
    "google": TierPatterns(
        default=re.compile(r"gemini-(3-pro-preview|2\.5-pro|flash-latest)"),
        fast=re.compile(r"flash-lite|flash"),
        reasoning=re.compile(r"thinking|pro"),
        legacy=re.compile(r"gemini-1\.5|gemini-2\.0"),
    ),
}


def _is_legacy_by_date(metadata: Optional[CatalogModelDefinition]) -> bool:
    if metadata is None or not metadata.last_updated:
        return False
    return metadata.last_updated < LEGACY_CUTOFF


def classify_tier(
    catalog_provider: str, model_id: str, metadata: Optional[CatalogModelDefinition]
) -> ModelTier:
    """Classify a model id within its catalog provider.

    Args:
        catalog_provider: Catalog bucket the id belongs to
        model_id: Vendor-native id (aggregator prefix already removed)
        metadata: Catalog metadata for the model, if known

    Returns:
        The first tier whose heuristic matches, else ``ModelTier.OTHER``
    """
    patterns = TIER_PATTERNS.get(catalog_provider)
    if patterns is None:
        return ModelTier.OTHER

    lowered = model_id.lower()
    if patterns.default.search(lowered):
        return ModelTier.DEFAULT
    if patterns.fast.search(lowered):
        return ModelTier.FAST
    if patterns.reasoning.search(lowered):
        return ModelTier.REASONING
    if patterns.legacy.search(lowered) or _is_legacy_by_date(metadata):
        return ModelTier.LEGACY
    return ModelTier.OTHER


# ---------------------------------------------------------------------------
# Catalog bucket resolution
# ---------------------------------------------------------------------------


def _direct_target(catalog_provider: str) -> Callable[[ProviderModel], Optional[Tuple[str, str]]]:
    def resolve(model: ProviderModel) -> Optional[Tuple[str, str]]:
        return catalog_provider, model.id

    return resolve


def _aggregator_vendor(model: ProviderModel) -> Optional[str]:
    if model.provider in CATALOG_PROVIDERS:
        return model.provider
    prefix = model.id.split("/", 1)[0]
    if prefix in CATALOG_PROVIDERS:
        return prefix
    return None


def _aggregator_target(model: ProviderModel) -> Optional[Tuple[str, str]]:
    vendor = _aggregator_vendor(model)
    if vendor is None:
        return None
    _, _, rest = model.id.partition("/")
    return vendor, rest or model.id


def _aggregator_provider_rank(model: ProviderModel) -> int:
    vendor = _aggregator_vendor(model)
    if vendor is None:
        return UNRANKED_PROVIDER
    return AGGREGATOR_PROVIDER_RANK.get(vendor, UNRANKED_PROVIDER)


def _tier_resolver(
    target: Callable[[ProviderModel], Optional[Tuple[str, str]]]
) -> Callable[[RuleContext], ModelTier]:
    def resolve(ctx: RuleContext) -> ModelTier:
        resolved = target(ctx.model)
        if resolved is None:
            return ModelTier.OTHER
        catalog_provider, model_id = resolved
        return classify_tier(catalog_provider, model_id, ctx.metadata)

    return resolve


def _rules(
    include: Tuple[Pattern[str], ...],
    exclude: Tuple[Pattern[str], ...],
    dedupe_key: Callable[[str], str],
    target: Callable[[ProviderModel], Optional[Tuple[str, str]]],
    provider_rank: Optional[Callable[[ProviderModel], int]] = None,
) -> ProviderModelRules:
    return ProviderModelRules(
        include_patterns=include,
        exclude_patterns=exclude,
        dedupe_key=dedupe_key,
        resolve_catalog_target=target,
        resolve_tier=_tier_resolver(target),
        resolve_provider_rank=provider_rank,
    )


PROVIDER_MODEL_RULES: Dict[str, ProviderModelRules] = {
    "anthropic": _rules(
        include=_patterns(r"^claude-"),
        exclude=_patterns(r"embed", r"moderation"),
        dedupe_key=base_anthropic_model_id,
        target=_direct_target("anthropic"),
    ),
    "openai": _rules(
        include=_patterns(r"^gpt-", r"^o\d", r"^chatgpt-", r"^codex"),
        exclude=_patterns(
            r"embedding",
            r"audio",
            r"realtime",
            r"whisper",
            r"tts",
            r"dall-e",
            r"instruct",
            r"moderation",
            r"search-preview",
        ),
        dedupe_key=base_openai_model_id,
        target=_direct_target("openai"),
    ),
    "google-ai-studio": _rules(
        include=_patterns(r"^gemini-"),
        exclude=_patterns(r"embedding", r"aqa", r"vision", r"native-audio", r"tts", r"image"),
        dedupe_key=base_google_model_id,
        target=_direct_target("google"),
    ),
    "openrouter": _rules(
        include=_patterns(r"^anthropic/", r"^openai/", r"^google/"),
        exclude=_patterns(r"/.*(?:embedding|audio|realtime|whisper|tts|dall-e)", r":free$"),
        dedupe_key=_aggregator_dedupe_key,
        target=_aggregator_target,
        provider_rank=_aggregator_provider_rank,
    ),
}

SUPPORTED_PROVIDERS: Tuple[str, ...] = tuple(PROVIDER_MODEL_RULES)


def get_provider_rules(provider_id: str) -> ProviderModelRules:
    """Look up the rules for a provider.

    Raises:
        UnsupportedProviderError: If the provider has no rules
    """
    rules = PROVIDER_MODEL_RULES.get(provider_id)
    if rules is None:
        supported: List[str] = list(SUPPORTED_PROVIDERS)
        raise UnsupportedProviderError(
            f"Provider '{provider_id}' is not supported. Must be one of: {', '.join(supported)}",
            provider=provider_id,
            supported=supported,
        )
    return rules


def matches_provider_rules(provider_id: str, model_id: str) -> bool:
    """Check a model id against a provider's include and exclude patterns."""
    return get_provider_rules(provider_id).matches(model_id)
