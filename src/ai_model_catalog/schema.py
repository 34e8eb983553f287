"""Data structures for the model catalog and provider model ranking.

The catalog types mirror the authoritative metadata source, while
``ProviderModel`` is what a provider's live API returns at call time.
Catalogs serialize to the JSON layout used by the disk cache.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Pattern, Tuple, Union

from .errors import CatalogFormatError

# Provider buckets present in every resolved catalog
CATALOG_PROVIDERS: Tuple[str, ...] = ("anthropic", "openai", "google")

MODEL_STATUSES = ("alpha", "beta", "deprecated")

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]")


class CatalogSource(str, Enum):
    """Where a resolved catalog came from."""

    NETWORK = "network"
    CACHE = "cache"
    SNAPSHOT = "snapshot"


class ModelTier(str, Enum):
    """Capability/freshness bucket used as the primary ranking key."""

    DEFAULT = "default"
    FAST = "fast"
    REASONING = "reasoning"
    LEGACY = "legacy"
    OTHER = "other"


def normalize_model_key(model_id: str) -> str:
    """Lowercase a model id and drop everything but ASCII letters and digits."""
    return _NON_ALPHANUMERIC.sub("", model_id.lower())


def utc_now_iso() -> str:
    """Return the current UTC time as an ISO 8601 string."""
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class CatalogModelDefinition:
    """Authoritative metadata for one model, independent of any live API."""

    id: str
    name: str
    status: Optional[str] = None
    release_date: Optional[str] = None
    last_updated: Optional[str] = None
    reasoning: bool = False
    tool_call: bool = False

    @property
    def is_deprecated(self) -> bool:
        """Check if the catalog marks this model deprecated."""
        return self.status == "deprecated"

    @classmethod
    def from_dict(cls, model_id: str, data: Mapping[str, Any]) -> "CatalogModelDefinition":
        """Build a definition from a raw source entry or a cached entry.

        Both the snake_case keys of the raw source (``release_date``) and the
        camelCase keys of the cache file (``releaseDate``) are accepted.

        Raises:
            CatalogFormatError: If the entry is not a mapping
        """
        if not isinstance(data, Mapping):
            raise CatalogFormatError(f"Model entry '{model_id}' must be a mapping")

        status = data.get("status")
        release_date = data.get("release_date", data.get("releaseDate"))
        last_updated = data.get("last_updated", data.get("lastUpdated"))

        return cls(
            id=str(data.get("id") or model_id),
            name=str(data.get("name") or model_id),
            status=status if status in MODEL_STATUSES else None,
            release_date=str(release_date) if release_date else None,
            last_updated=str(last_updated) if last_updated else None,
            reasoning=bool(data.get("reasoning", False)),
            tool_call=bool(data.get("tool_call", data.get("toolCall", False))),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the cache file layout, omitting unset optional fields."""
        result: Dict[str, Any] = {"id": self.id, "name": self.name}
        if self.status:
            result["status"] = self.status
        if self.release_date:
            result["releaseDate"] = self.release_date
        if self.last_updated:
            result["lastUpdated"] = self.last_updated
        result["reasoning"] = self.reasoning
        result["toolCall"] = self.tool_call
        return result


@dataclass
class ProviderModelCatalog:
    """All catalog models for one provider plus a normalized-key index.

    ``normalized_model_index`` is first-write-wins on key collision, so it is
    deterministic given the iteration order of ``models``.
    """

    provider_id: str
    models: Dict[str, CatalogModelDefinition] = field(default_factory=dict)
    normalized_model_index: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def build(
        cls, provider_id: str, models: Mapping[str, CatalogModelDefinition]
    ) -> "ProviderModelCatalog":
        """Create a provider catalog and compute its normalized index."""
        index: Dict[str, str] = {}
        for model_id in models:
            index.setdefault(normalize_model_key(model_id), model_id)
        return cls(provider_id=provider_id, models=dict(models), normalized_model_index=index)

    @classmethod
    def from_raw(cls, provider_id: str, raw_provider: Any) -> "ProviderModelCatalog":
        """Create a provider catalog from a ``{"models": {...}}`` document.

        A missing or non-mapping provider document yields an empty catalog.

        Raises:
            CatalogFormatError: If ``models`` is present but not a mapping
        """
        raw_models: Any = {}
        if isinstance(raw_provider, Mapping):
            raw_models = raw_provider.get("models") or {}
        if not isinstance(raw_models, Mapping):
            raise CatalogFormatError(f"Provider '{provider_id}' models must be a mapping")

        models = {
            str(model_id): CatalogModelDefinition.from_dict(str(model_id), entry)
            for model_id, entry in raw_models.items()
        }
        return cls.build(provider_id, models)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the cache file layout."""
        return {
            "providerId": self.provider_id,
            "models": {model_id: model.to_dict() for model_id, model in self.models.items()},
            "normalizedModelIndex": dict(self.normalized_model_index),
        }


@dataclass
class ModelCatalog:
    """A resolved metadata catalog covering every catalog provider."""

    fetched_at: str
    source: CatalogSource
    providers: Dict[str, ProviderModelCatalog]

    @property
    def model_count(self) -> int:
        """Total number of models across providers."""
        return sum(len(provider.models) for provider in self.providers.values())

    def get_provider(self, provider_id: str) -> ProviderModelCatalog:
        """Get a provider bucket, creating an empty one if it is absent."""
        provider = self.providers.get(provider_id)
        if provider is None:
            provider = ProviderModelCatalog(provider_id=provider_id)
            self.providers[provider_id] = provider
        return provider

    @classmethod
    def from_raw(
        cls,
        raw: Any,
        source: Union[CatalogSource, str],
        fetched_at: Optional[str] = None,
    ) -> "ModelCatalog":
        """Build a catalog from a raw per-provider source document.

        Providers absent from ``raw`` become empty buckets.

        Raises:
            CatalogFormatError: If a provider's ``models`` value is malformed
        """
        raw_record = raw if isinstance(raw, Mapping) else {}
        providers = {
            provider_id: ProviderModelCatalog.from_raw(provider_id, raw_record.get(provider_id))
            for provider_id in CATALOG_PROVIDERS
        }
        return cls(
            fetched_at=fetched_at or utc_now_iso(),
            source=CatalogSource(source),
            providers=providers,
        )

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], source: Optional[Union[CatalogSource, str]] = None
    ) -> "ModelCatalog":
        """Rebuild a catalog from its serialized layout.

        The normalized indices are recomputed rather than trusted.

        Raises:
            CatalogFormatError: If ``providers`` is missing or malformed
        """
        if not isinstance(data, Mapping) or not isinstance(data.get("providers"), Mapping):
            raise CatalogFormatError("Catalog document has no 'providers' mapping")

        raw_source = source if source is not None else data.get("source", CatalogSource.SNAPSHOT)
        try:
            resolved_source = CatalogSource(raw_source)
        except ValueError:
            resolved_source = CatalogSource.SNAPSHOT

        return cls.from_raw(
            data["providers"],
            resolved_source,
            fetched_at=str(data.get("fetchedAt") or "") or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON layout written to the disk cache."""
        return {
            "fetchedAt": self.fetched_at,
            "source": self.source.value,
            "providers": {
                provider_id: provider.to_dict() for provider_id, provider in self.providers.items()
            },
        }


@dataclass(frozen=True)
class ProviderModel:
    """A model as returned by a provider's live model listing."""

    id: str
    name: str
    provider: Optional[str] = None

    @classmethod
    def coerce(cls, value: Union["ProviderModel", str, Mapping[str, Any]]) -> "ProviderModel":
        """Accept a ``ProviderModel``, a bare id, or an ``{id, name, provider}`` mapping."""
        if isinstance(value, ProviderModel):
            return value
        if isinstance(value, str):
            return cls(id=value, name=value)
        if isinstance(value, Mapping) and value.get("id"):
            model_id = str(value["id"])
            provider = value.get("provider")
            return cls(
                id=model_id,
                name=str(value.get("name") or model_id),
                provider=str(provider) if provider else None,
            )
        raise TypeError(f"Cannot interpret {value!r} as a provider model")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a plain ``{id, name, provider}`` dictionary."""
        return {"id": self.id, "name": self.name, "provider": self.provider}


@dataclass(frozen=True)
class RankedModel:
    """A provider model annotated with the keys used for ranking."""

    id: str
    name: str
    provider: Optional[str]
    tier: ModelTier
    provider_rank: int
    known_in_catalog: bool
    deprecated: bool
    updated_at: str

    def to_provider_model(self) -> ProviderModel:
        """Strip the ranking annotations."""
        return ProviderModel(id=self.id, name=self.name, provider=self.provider)


@dataclass(frozen=True)
class RuleContext:
    """Inputs available to a provider's tier classifier."""

    provider_id: str
    model: ProviderModel
    metadata: Optional[CatalogModelDefinition]


@dataclass(frozen=True)
class ProviderModelRules:
    """Provider-specific filters and classifiers.

    This is the only provider-specific surface; ranking, deduplication and
    recommendation are written once against it.

    Attributes:
        include_patterns: A model must match at least one of these
        exclude_patterns: A model must match none of these
        dedupe_key: Maps a model id to its canonical key
        resolve_catalog_target: Maps a model to ``(catalog_provider, lookup_id)``,
            or None when no catalog bucket applies
        resolve_tier: Classifies a model into a ``ModelTier``
        resolve_provider_rank: Optional sub-provider preference for aggregators
    """

    include_patterns: Tuple[Pattern[str], ...]
    exclude_patterns: Tuple[Pattern[str], ...]
    dedupe_key: Callable[[str], str]
    resolve_catalog_target: Callable[[ProviderModel], Optional[Tuple[str, str]]]
    resolve_tier: Callable[[RuleContext], ModelTier]
    resolve_provider_rank: Optional[Callable[[ProviderModel], int]] = None

    def matches(self, model_id: str) -> bool:
        """Check include/exclude patterns for a model id."""
        if not any(pattern.search(model_id) for pattern in self.include_patterns):
            return False
        return not any(pattern.search(model_id) for pattern in self.exclude_patterns)
