"""CLI formatters package."""

from .json import (
    format_cache_info_json,
    format_catalog_summary_json,
    format_env_vars_json,
    format_json,
    format_ranked_models_json,
)
from .table import (
    create_console,
    format_cache_info_table,
    format_catalog_summary_table,
    format_env_vars_table,
    format_ranked_models_table,
)

__all__ = [
    "format_json",
    "format_catalog_summary_json",
    "format_ranked_models_json",
    "format_cache_info_json",
    "format_env_vars_json",
    "create_console",
    "format_catalog_summary_table",
    "format_ranked_models_table",
    "format_cache_info_table",
    "format_env_vars_table",
]
