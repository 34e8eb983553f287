"""Ranking, deduplication and recommendation of provider models.

Everything here is a pure computation against a resolved ``ModelCatalog`` and
the provider's entry in ``PROVIDER_MODEL_RULES``. Nothing branches on the
provider id itself.
"""

from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .catalog import get_catalog_model_metadata, is_deprecated_model
from .errors import InvalidPolicyError
from .logging import LogEvent, log_debug
from .provider_rules import MODEL_TIER_ORDER, get_provider_rules
from .schema import ModelCatalog, ModelTier, ProviderModel, RankedModel, RuleContext

ModelInput = Union[ProviderModel, str, Mapping[str, Any]]


class RecommendationPolicy(str, Enum):
    """Named tier-preference orders for picking one model."""

    BALANCED = "balanced"
    SPEED = "speed"
    CAPABILITY = "capability"

    @classmethod
    def parse(cls, value: Union["RecommendationPolicy", str]) -> "RecommendationPolicy":
        """Convert a policy name, raising InvalidPolicyError if unknown."""
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(policy.value for policy in cls)
            raise InvalidPolicyError(
                f"Unknown recommendation policy '{value}'. Must be one of: {valid}",
                policy=str(value),
            ) from None


POLICY_TIER_ORDER: Dict[RecommendationPolicy, Tuple[ModelTier, ...]] = {
    RecommendationPolicy.BALANCED: (
        ModelTier.DEFAULT,
        ModelTier.FAST,
        ModelTier.REASONING,
        ModelTier.LEGACY,
        ModelTier.OTHER,
    ),
    RecommendationPolicy.SPEED: (
        ModelTier.FAST,
        ModelTier.DEFAULT,
        ModelTier.REASONING,
        ModelTier.LEGACY,
        ModelTier.OTHER,
    ),
    RecommendationPolicy.CAPABILITY: (
        ModelTier.REASONING,
        ModelTier.DEFAULT,
        ModelTier.FAST,
        ModelTier.LEGACY,
        ModelTier.OTHER,
    ),
}

_TIER_INDEX: Dict[ModelTier, int] = {tier: index for index, tier in enumerate(MODEL_TIER_ORDER)}


def _coerce_models(models: Iterable[ModelInput]) -> List[ProviderModel]:
    return [ProviderModel.coerce(model) for model in models]


def _sort_ranked(ranked: List[RankedModel]) -> List[RankedModel]:
    # Stable passes from least to most significant key
    ranked = sorted(ranked, key=lambda model: (model.name.casefold(), model.name, model.id))
    ranked = sorted(ranked, key=lambda model: model.updated_at, reverse=True)
    return sorted(
        ranked,
        key=lambda model: (
            _TIER_INDEX.get(model.tier, len(_TIER_INDEX)),
            model.provider_rank,
            not model.known_in_catalog,
        ),
    )


def rank_models_detailed(
    provider_id: str,
    models: Iterable[ModelInput],
    catalog: ModelCatalog,
    include_deprecated: bool = False,
) -> List[RankedModel]:
    """Filter, annotate and sort a provider's raw model list.

    Models failing the provider's include/exclude patterns are dropped, and so
    are models the catalog marks deprecated unless ``include_deprecated`` is set.

    Args:
        provider_id: Supported provider that listed the models
        models: Raw models as ``ProviderModel``, bare ids, or mappings
        catalog: Catalog used for metadata lookup
        include_deprecated: Keep deprecated models, flagged via ``deprecated``

    Returns:
        Ranked models in final order

    Raises:
        UnsupportedProviderError: If the provider has no rules
    """
    rules = get_provider_rules(provider_id)
    ranked: List[RankedModel] = []

    for model in _coerce_models(models):
        if not rules.matches(model.id):
            continue

        metadata = get_catalog_model_metadata(provider_id, model, catalog)
        tier = rules.resolve_tier(RuleContext(provider_id=provider_id, model=model, metadata=metadata))
        provider_rank = rules.resolve_provider_rank(model) if rules.resolve_provider_rank else 0
        updated_at = ""
        if metadata is not None:
            updated_at = metadata.last_updated or metadata.release_date or ""

        ranked.append(
            RankedModel(
                id=model.id,
                name=model.name,
                provider=model.provider,
                tier=tier,
                provider_rank=provider_rank,
                known_in_catalog=metadata is not None,
                deprecated=is_deprecated_model(metadata),
                updated_at=updated_at,
            )
        )

    if not include_deprecated:
        for model in ranked:
            if model.deprecated:
                log_debug(
                    LogEvent.MODEL_RANKING,
                    "Dropping deprecated model",
                    provider=provider_id,
                    model=model.id,
                )
        ranked = [model for model in ranked if not model.deprecated]

    return _sort_ranked(ranked)


def rank_provider_models(
    provider_id: str, models: Iterable[ModelInput], catalog: ModelCatalog
) -> List[ProviderModel]:
    """Rank a provider's raw model list, returning plain ``ProviderModel`` entries."""
    return [model.to_provider_model() for model in rank_models_detailed(provider_id, models, catalog)]


def dedupe_provider_models(provider_id: str, models: Iterable[ModelInput]) -> List[ProviderModel]:
    """Keep the first model for each dedupe key.

    The input must already be ranked so the first occurrence is the best one.
    """
    rules = get_provider_rules(provider_id)
    seen = set()
    deduped: List[ProviderModel] = []

    for model in _coerce_models(models):
        key = rules.dedupe_key(model.id)
        if key in seen:
            continue
        seen.add(key)
        deduped.append(model)

    return deduped


def find_recommended_model(
    provider_id: str,
    models: Sequence[ModelInput],
    catalog: ModelCatalog,
    policy: Union[RecommendationPolicy, str] = RecommendationPolicy.BALANCED,
) -> Optional[str]:
    """Pick one model id for a provider according to a recommendation policy.

    Args:
        provider_id: Supported provider that listed the models
        models: Raw models as ``ProviderModel``, bare ids, or mappings
        catalog: Catalog used for metadata lookup
        policy: ``balanced``, ``speed`` or ``capability``

    Returns:
        The recommended id, or None if no model survives ranking

    Raises:
        InvalidPolicyError: If the policy name is unknown
        UnsupportedProviderError: If the provider has no rules
    """
    resolved_policy = RecommendationPolicy.parse(policy)
    if not models:
        return None

    deduped = dedupe_provider_models(provider_id, rank_provider_models(provider_id, models, catalog))
    if not deduped:
        return None

    detailed = rank_models_detailed(provider_id, deduped, catalog)
    for tier in POLICY_TIER_ORDER[resolved_policy]:
        for model in detailed:
            if model.tier == tier:
                return model.id

    return deduped[0].id
