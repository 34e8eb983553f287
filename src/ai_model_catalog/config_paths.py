"""Path and environment configuration for the model catalog.

The disk cache lives in the platform user cache directory (XDG on Linux),
and every location can be overridden through ``AMC_*`` environment variables.
"""

import os
from pathlib import Path
from typing import Optional

import platformdirs

# Application name used for directory paths
APP_NAME = "ai-model-catalog"

# Environment variable names
ENV_CATALOG_CACHE_FILE = "AMC_CATALOG_CACHE_FILE"
ENV_MODEL_CATALOG_OVERRIDE = "AMC_MODEL_CATALOG_OVERRIDE"
ENV_DISABLE_CATALOG_FETCH = "AMC_DISABLE_CATALOG_FETCH"
ENV_CATALOG_URL = "AMC_CATALOG_URL"

# Default filenames
CATALOG_CACHE_FILENAME = "models-dev-catalog.json"

# Authoritative catalog source
MODELS_DEV_API_URL = "https://models.dev/api.json"


def get_user_cache_dir() -> Path:
    """Get the path to the user's cache directory for this application."""
    return Path(platformdirs.user_cache_dir(APP_NAME))


def get_catalog_cache_path() -> Path:
    """Get the path to the catalog cache file.

    Returns:
        ``AMC_CATALOG_CACHE_FILE`` when set, else the file in the user cache dir
    """
    env_path = os.environ.get(ENV_CATALOG_CACHE_FILE)
    if env_path:
        return Path(env_path).expanduser()

    return get_user_cache_dir() / CATALOG_CACHE_FILENAME


def get_override_path() -> Optional[Path]:
    """Get the configured catalog override file, if any."""
    env_path = os.environ.get(ENV_MODEL_CATALOG_OVERRIDE)
    if env_path:
        return Path(env_path).expanduser()
    return None


def get_catalog_url() -> str:
    """Get the authoritative catalog URL, respecting ``AMC_CATALOG_URL``."""
    return os.environ.get(ENV_CATALOG_URL) or MODELS_DEV_API_URL


def network_fetch_disabled() -> bool:
    """Check whether the network tier is disabled by environment variable."""
    return os.getenv(ENV_DISABLE_CATALOG_FETCH, "").lower() in ("1", "true", "yes")
