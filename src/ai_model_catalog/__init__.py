"""Model catalog and ranking engine for LLM provider model lists.

This package resolves an authoritative model metadata catalog (network, disk
cache, or compiled-in snapshot) and uses it to filter, rank, deduplicate and
recommend the models a provider's live API reports.
"""

# Version of the package
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _version

    __version__ = _version("ai-model-catalog")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Import main components for easier access
from .catalog import (
    CatalogConfig,
    ModelCatalogResolver,
    catalog_from_raw,
    clear_model_catalog,
    create_snapshot_catalog,
    find_catalog_model_id,
    get_catalog_model_metadata,
    get_model_catalog,
    is_catalog_fresh,
    is_deprecated_model,
)
from .defaults import (
    DEFAULT_MODELS,
    FEATURED_MODELS,
    POPULAR_PROVIDERS,
    find_default_model,
    get_provider_from_model_id,
    is_featured_model,
    is_popular_provider,
    rank_models,
)
from .deprecation import assert_configured_model_allowed
from .errors import (
    CatalogFormatError,
    ConfiguredModelDeprecatedError,
    InvalidPolicyError,
    ModelCatalogError,
    NetworkError,
    UnsupportedProviderError,
)
from .provider_rules import (
    PROVIDER_MODEL_RULES,
    SUPPORTED_PROVIDERS,
    get_provider_rules,
    matches_provider_rules,
)
from .ranking import (
    RecommendationPolicy,
    dedupe_provider_models,
    find_recommended_model,
    rank_models_detailed,
    rank_provider_models,
)
from .schema import (
    CATALOG_PROVIDERS,
    CatalogModelDefinition,
    CatalogSource,
    ModelCatalog,
    ModelTier,
    ProviderModel,
    ProviderModelCatalog,
    RankedModel,
    normalize_model_key,
)

# Define public API
__all__ = [
    # Catalog resolution
    "CatalogConfig",
    "ModelCatalogResolver",
    "get_model_catalog",
    "clear_model_catalog",
    "create_snapshot_catalog",
    "catalog_from_raw",
    "is_catalog_fresh",
    # Metadata lookup
    "find_catalog_model_id",
    "get_catalog_model_metadata",
    "is_deprecated_model",
    "normalize_model_key",
    # Ranking
    "RecommendationPolicy",
    "rank_provider_models",
    "rank_models_detailed",
    "dedupe_provider_models",
    "find_recommended_model",
    "assert_configured_model_allowed",
    # Provider rules
    "PROVIDER_MODEL_RULES",
    "SUPPORTED_PROVIDERS",
    "get_provider_rules",
    "matches_provider_rules",
    # Defaults
    "DEFAULT_MODELS",
    "FEATURED_MODELS",
    "POPULAR_PROVIDERS",
    "find_default_model",
    "get_provider_from_model_id",
    "is_featured_model",
    "is_popular_provider",
    "rank_models",
    # Types
    "CATALOG_PROVIDERS",
    "CatalogModelDefinition",
    "CatalogSource",
    "ModelCatalog",
    "ModelTier",
    "ProviderModel",
    "ProviderModelCatalog",
    "RankedModel",
    # Errors
    "ModelCatalogError",
    "NetworkError",
    "CatalogFormatError",
    "UnsupportedProviderError",
    "InvalidPolicyError",
    "ConfiguredModelDeprecatedError",
]
