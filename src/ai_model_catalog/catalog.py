"""Model catalog resolution and metadata lookup.

This module provides the ModelCatalogResolver class, which resolves a
``ModelCatalog`` through a chain of sources that can each fail:

1. an override file, when one is configured
2. the authoritative network source (persisted to the disk cache on success)
3. the disk cache, whatever its age
4. the compiled-in snapshot, which cannot fail

The resolved catalog is memoized per resolver, and concurrent callers share a
single in-flight resolution. Typical usage:

    from ai_model_catalog import get_model_catalog

    catalog = get_model_catalog()
"""

import threading
from concurrent.futures import Future
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .config_paths import (
    get_catalog_url,
    get_override_path,
    network_fetch_disabled,
)
from .data_manager import DEFAULT_FETCH_TIMEOUT, CatalogDataManager
from .logging import LogEvent, log_debug, log_info, log_warning
from .provider_rules import get_provider_rules
from .schema import (
    CatalogModelDefinition,
    CatalogSource,
    ModelCatalog,
    ProviderModel,
    ProviderModelCatalog,
    normalize_model_key,
)
from .snapshot import SNAPSHOT_CATALOG_DATA

# Freshness target for the disk cache
CATALOG_CACHE_TTL_SECONDS = 24 * 60 * 60


class CatalogConfig:
    """Configuration for catalog resolution."""

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: float = DEFAULT_FETCH_TIMEOUT,
        cache_path: Optional[Union[str, Path]] = None,
        override_path: Optional[Union[str, Path]] = None,
        allow_network: Optional[bool] = None,
    ):
        """Initialize catalog configuration.

        Fields left as None are read from the ``AMC_*`` environment variables
        at resolution time.

        Args:
            url: Authoritative catalog URL.
            timeout: Network fetch timeout in seconds.
            cache_path: Disk cache file location.
            override_path: Override document used ahead of the network.
            allow_network: Whether the network tier may be attempted.
        """
        if timeout <= 0:
            raise ValueError("timeout must be positive")

        self.url = url
        self.timeout = timeout
        self.cache_path = Path(cache_path) if cache_path is not None else None
        self.override_path = Path(override_path) if override_path is not None else None
        self.allow_network = allow_network

    def get_url(self) -> str:
        """Resolve the catalog URL."""
        return self.url or get_catalog_url()

    def get_override_path(self) -> Optional[Path]:
        """Resolve the override document location, if any."""
        if self.override_path is not None:
            return self.override_path
        return get_override_path()

    def network_enabled(self) -> bool:
        """Resolve whether the network tier is enabled."""
        if self.allow_network is not None:
            return self.allow_network
        return not network_fetch_disabled()


def create_snapshot_catalog() -> ModelCatalog:
    """Build a catalog from the compiled-in snapshot table."""
    return ModelCatalog.from_raw(SNAPSHOT_CATALOG_DATA, CatalogSource.SNAPSHOT)


def catalog_from_raw(raw: Any, source: Union[CatalogSource, str]) -> ModelCatalog:
    """Build a catalog from a raw ``{provider: {models: {...}}}`` document."""
    return ModelCatalog.from_raw(raw, source)


def is_catalog_fresh(
    catalog: ModelCatalog,
    ttl_seconds: float = CATALOG_CACHE_TTL_SECONDS,
    now: Optional[datetime] = None,
) -> bool:
    """Check whether a catalog was fetched within ``ttl_seconds``.

    An unparseable ``fetched_at`` is never fresh.
    """
    try:
        fetched_at = datetime.fromisoformat(catalog.fetched_at.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        return False

    if fetched_at.tzinfo is None:
        fetched_at = fetched_at.replace(tzinfo=timezone.utc)

    current = now or datetime.now(timezone.utc)
    return (current - fetched_at).total_seconds() <= ttl_seconds


class ModelCatalogResolver:
    """Resolves and memoizes the model catalog."""

    _default_instance: Optional["ModelCatalogResolver"] = None
    _instance_lock = threading.RLock()

    @classmethod
    def get_default(cls) -> "ModelCatalogResolver":
        """Get the process-wide resolver with standard configuration.

        Returns:
            The default ModelCatalogResolver instance
        """
        with cls._instance_lock:
            if cls._default_instance is None:
                cls._default_instance = cls()
            return cls._default_instance

    @classmethod
    def cleanup(cls) -> None:
        """Drop the default resolver together with its memoized catalog."""
        with cls._instance_lock:
            cls._default_instance = None

    def __init__(
        self,
        config: Optional[CatalogConfig] = None,
        data_manager: Optional[CatalogDataManager] = None,
    ):
        """Initialize a new resolver.

        Args:
            config: Configuration for this resolver. If None, default
                    configuration is used.
            data_manager: Data manager for cache and network access.
        """
        self.config = config or CatalogConfig()
        self._data_manager = data_manager or CatalogDataManager(self.config.cache_path)
        self._state_lock = threading.Lock()
        self._catalog: Optional[ModelCatalog] = None
        self._in_flight: Optional["Future[ModelCatalog]"] = None
        self._generation = 0

    @property
    def data_manager(self) -> CatalogDataManager:
        """The data manager used for cache and network access."""
        return self._data_manager

    @property
    def cached_catalog(self) -> Optional[ModelCatalog]:
        """The memoized catalog, if one has been resolved."""
        with self._state_lock:
            return self._catalog

    def clear(self) -> None:
        """Forget the memoized catalog."""
        with self._state_lock:
            self._generation += 1
            self._catalog = None
            self._in_flight = None

    def resolve(self, force_refresh: bool = False, timeout: Optional[float] = None) -> ModelCatalog:
        """Resolve the catalog. This never fails.

        Args:
            force_refresh: Run a new resolution even if one is memoized
            timeout: Network fetch timeout overriding the configured one

        Returns:
            The resolved catalog
        """
        with self._state_lock:
            if not force_refresh and self._catalog is not None:
                return self._catalog

            pending = None if force_refresh else self._in_flight
            owner = pending is None
            if pending is None:
                pending = Future()
                self._in_flight = pending
                self._generation += 1
            generation = self._generation

        if not owner:
            log_debug(LogEvent.CATALOG_RESOLUTION, "Waiting for in-flight catalog resolution")
            return pending.result()

        try:
            catalog = self._resolve_uncached(timeout)
        except BaseException as e:
            with self._state_lock:
                if self._in_flight is pending:
                    self._in_flight = None
            pending.set_exception(e)
            raise

        with self._state_lock:
            # A newer resolution (forced refresh or clear) owns the memo
            if generation == self._generation:
                self._catalog = catalog
            if self._in_flight is pending:
                self._in_flight = None
        pending.set_result(catalog)
        return catalog

    def _resolve_uncached(self, timeout: Optional[float]) -> ModelCatalog:
        override_path = self.config.get_override_path()
        if override_path is not None:
            try:
                catalog = self._data_manager.load_override(override_path)
                log_info(
                    LogEvent.CATALOG_RESOLUTION,
                    "Using catalog override",
                    path=str(override_path),
                )
                return catalog
            except Exception as e:
                log_warning(
                    LogEvent.CATALOG_RESOLUTION,
                    f"Ignoring catalog override: {e}",
                    path=str(override_path),
                )

        if self.config.network_enabled():
            try:
                catalog = self._data_manager.fetch_remote_catalog(
                    self.config.get_url(), timeout or self.config.timeout
                )
                self._data_manager.save_cache(catalog)
                return catalog
            except Exception as e:
                log_warning(
                    LogEvent.CATALOG_RESOLUTION,
                    f"Network catalog unavailable, falling back: {e}",
                )
        else:
            log_info(LogEvent.CATALOG_RESOLUTION, "Network catalog fetch disabled")

        cached = self._data_manager.load_cache()
        if cached is not None:
            log_info(
                LogEvent.CATALOG_RESOLUTION,
                "Using cached catalog",
                fetched_at=cached.fetched_at,
                fresh=is_catalog_fresh(cached),
            )
            return cached

        log_info(LogEvent.CATALOG_RESOLUTION, "Using compiled-in catalog snapshot")
        return create_snapshot_catalog()


def get_model_catalog(force_refresh: bool = False, timeout: Optional[float] = None) -> ModelCatalog:
    """Resolve the catalog through the default resolver.

    Args:
        force_refresh: Run a new resolution even if one is memoized
        timeout: Network fetch timeout in seconds

    Returns:
        ModelCatalog: The resolved catalog
    """
    return ModelCatalogResolver.get_default().resolve(force_refresh=force_refresh, timeout=timeout)


def clear_model_catalog() -> None:
    """Forget the memoized catalog of the default resolver."""
    ModelCatalogResolver.cleanup()


def find_catalog_model_id(provider_catalog: ProviderModelCatalog, model_id: str) -> Optional[str]:
    """Find the catalog id matching ``model_id``.

    An exact normalized-key match wins. Otherwise any catalog key that
    contains, or is contained in, the normalized id is a candidate, and the
    candidate closest in length is chosen. Equal-distance candidates resolve
    to the first one in index order.

    Returns:
        The raw catalog id, or None when nothing matches
    """
    normalized = normalize_model_key(model_id)
    if not normalized:
        return None

    exact = provider_catalog.normalized_model_index.get(normalized)
    if exact:
        return exact

    best_match: Optional[str] = None
    best_distance = float("inf")
    for normalized_id, actual_id in provider_catalog.normalized_model_index.items():
        if normalized in normalized_id or normalized_id in normalized:
            distance = abs(len(normalized_id) - len(normalized))
            if distance < best_distance:
                best_distance = distance
                best_match = actual_id

    return best_match


def get_catalog_model_metadata(
    provider_id: str,
    model: Union[ProviderModel, str, Mapping[str, Any]],
    catalog: ModelCatalog,
) -> Optional[CatalogModelDefinition]:
    """Look up catalog metadata for a provider model.

    Args:
        provider_id: Supported provider the model was listed by
        model: The provider model, or its bare id
        catalog: Catalog to search

    Returns:
        The matching definition, or None if the model is unknown

    Raises:
        UnsupportedProviderError: If the provider has no rules
    """
    rules = get_provider_rules(provider_id)
    target = rules.resolve_catalog_target(ProviderModel.coerce(model))
    if target is None:
        return None

    catalog_provider, lookup_id = target
    provider_catalog = catalog.providers.get(catalog_provider)
    if provider_catalog is None:
        return None

    catalog_id = find_catalog_model_id(provider_catalog, lookup_id)
    if catalog_id is None:
        return None
    return provider_catalog.models.get(catalog_id)


def is_deprecated_model(metadata: Optional[CatalogModelDefinition]) -> bool:
    """Check whether catalog metadata marks a model deprecated."""
    return metadata is not None and metadata.is_deprecated
