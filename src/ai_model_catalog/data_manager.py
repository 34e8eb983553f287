"""Data manager for the model catalog.

This module handles fetching the authoritative catalog over HTTP, persisting
it to the disk cache, and reading the cache and override documents back.
Failures are raised as ``NetworkError`` or ``CatalogFormatError`` (or reported
as a ``None`` result for the cache) so the resolver can fall through to the
next tier.
"""

import json
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

import requests
import yaml

from .config_paths import get_catalog_cache_path, get_catalog_url
from .errors import CatalogFormatError, NetworkError
from .logging import LogEvent, log_debug, log_info, log_warning
from .schema import CATALOG_PROVIDERS, CatalogSource, ModelCatalog

DEFAULT_FETCH_TIMEOUT = 10.0

REQUEST_HEADERS = {
    "User-Agent": "ai-model-catalog",
    "Accept": "application/json",
}


class CatalogDataManager:
    """Reads and writes catalog documents for the resolver."""

    def __init__(self, cache_path: Optional[Union[str, Path]] = None) -> None:
        """Initialize the data manager.

        Args:
            cache_path: Cache file location. If None, the location is resolved
                from the environment on each access.
        """
        self._cache_path = Path(cache_path) if cache_path is not None else None

    @property
    def cache_path(self) -> Path:
        """The cache file location."""
        if self._cache_path is not None:
            return self._cache_path
        return get_catalog_cache_path()

    def fetch_remote_catalog(
        self, url: Optional[str] = None, timeout: float = DEFAULT_FETCH_TIMEOUT
    ) -> ModelCatalog:
        """Fetch and validate the authoritative catalog.

        Args:
            url: Source URL. Defaults to the configured catalog URL.
            timeout: Request timeout in seconds

        Returns:
            A catalog tagged ``network``

        Raises:
            NetworkError: If the request fails or returns a non-2xx status
            CatalogFormatError: If the payload is not JSON or any catalog
                provider has no models
        """
        url = url or get_catalog_url()
        log_debug(LogEvent.CATALOG_FETCH, "Fetching model catalog", url=url)

        try:
            response = requests.get(url, headers=REQUEST_HEADERS, timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise NetworkError(f"Catalog fetch failed: {e}", url=url) from e

        try:
            raw = response.json()
        except ValueError as e:
            raise CatalogFormatError(f"Catalog payload is not valid JSON: {e}", path=url) from e

        catalog = ModelCatalog.from_raw(raw, CatalogSource.NETWORK)

        for provider_id in CATALOG_PROVIDERS:
            if not catalog.providers[provider_id].models:
                raise CatalogFormatError(
                    f"Catalog payload missing provider '{provider_id}' models",
                    path=url,
                )

        log_info(
            LogEvent.CATALOG_FETCH,
            "Fetched model catalog",
            url=url,
            models=catalog.model_count,
        )
        return catalog

    def save_cache(self, catalog: ModelCatalog) -> bool:
        """Write the catalog to the cache file, replacing it wholesale.

        Returns:
            True if the cache was written, False otherwise
        """
        cache_file = self.cache_path
        try:
            cache_file.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{cache_file.name}.", suffix=".tmp", dir=str(cache_file.parent)
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(catalog.to_dict(), f, indent=2)
                os.replace(tmp_name, cache_file)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            log_warning(
                LogEvent.CATALOG_CACHE,
                f"Failed to write catalog cache: {e}",
                path=str(cache_file),
            )
            return False

        log_debug(LogEvent.CATALOG_CACHE, "Wrote catalog cache", path=str(cache_file))
        return True

    def load_cache(self) -> Optional[ModelCatalog]:
        """Load the cached catalog regardless of its age.

        Returns:
            The cached catalog tagged ``cache``, or None on any read or
            structural failure
        """
        cache_file = self.cache_path
        if not cache_file.is_file():
            log_debug(LogEvent.CATALOG_CACHE, "No catalog cache file", path=str(cache_file))
            return None

        try:
            with open(cache_file, "r", encoding="utf-8") as f:
                data = json.load(f)
            catalog = ModelCatalog.from_dict(data, source=CatalogSource.CACHE)
        except (OSError, ValueError, CatalogFormatError) as e:
            log_warning(
                LogEvent.CATALOG_CACHE,
                f"Ignoring unreadable catalog cache: {e}",
                path=str(cache_file),
            )
            return None

        if catalog.model_count == 0:
            log_warning(LogEvent.CATALOG_CACHE, "Ignoring empty catalog cache", path=str(cache_file))
            return None

        return catalog

    def load_override(self, path: Union[str, Path]) -> ModelCatalog:
        """Parse an override document as a full catalog or a raw per-provider document.

        The document may be JSON or YAML.

        Args:
            path: Override file location

        Returns:
            The override catalog tagged ``snapshot``

        Raises:
            CatalogFormatError: If the file cannot be read or parsed
        """
        override_file = Path(path)
        try:
            with open(override_file, "r", encoding="utf-8") as f:
                parsed: Any = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise CatalogFormatError(f"Failed to read catalog override: {e}", path=str(override_file)) from e

        if not isinstance(parsed, dict):
            raise CatalogFormatError("Catalog override must be a mapping", path=str(override_file))

        if isinstance(parsed.get("providers"), dict):
            return ModelCatalog.from_dict(parsed, source=CatalogSource.SNAPSHOT)
        return ModelCatalog.from_raw(parsed, CatalogSource.SNAPSHOT)

    def get_cache_info(self) -> Dict[str, Any]:
        """Describe the cache file.

        Returns:
            Dictionary with the path, existence, size, modification time, and
            the cached catalog's fetch timestamp when readable
        """
        cache_file = self.cache_path
        info: Dict[str, Any] = {
            "path": str(cache_file),
            "exists": cache_file.is_file(),
            "size": 0,
            "modified": None,
            "fetched_at": None,
        }
        if not info["exists"]:
            return info

        try:
            stat = cache_file.stat()
            info["size"] = stat.st_size
            info["modified"] = datetime.fromtimestamp(stat.st_mtime).strftime("%Y-%m-%d %H:%M:%S")
            with open(cache_file, "r", encoding="utf-8") as f:
                info["fetched_at"] = json.load(f).get("fetchedAt")
        except (OSError, ValueError, AttributeError) as e:
            info["error"] = str(e)

        return info

    def clear_cache(self) -> bool:
        """Delete the cache file.

        Returns:
            True if a file was removed, False if there was nothing to remove
        """
        cache_file = self.cache_path
        if not cache_file.exists():
            return False

        cache_file.unlink()
        log_info(LogEvent.CATALOG_CACHE, "Cleared catalog cache", path=str(cache_file))
        return True
