"""JSON output formatter for CLI."""

import datetime as _dt
import json
import sys
from enum import Enum as _Enum
from typing import Any, Dict, List, Optional, TextIO

from ...schema import ModelCatalog, RankedModel


def _default_serializer(obj: Any) -> Any:
    """Serialize otherwise non-JSON-serializable objects.

    - datetime/date -> ISO 8601 string
    - Enum -> value (fallback to name)
    - Fallback -> str(obj)
    """
    if isinstance(obj, (_dt.datetime, _dt.date)):
        return obj.isoformat()
    if isinstance(obj, _Enum):
        return getattr(obj, "value", obj.name)
    return str(obj)


def format_json(data: Any, output: Optional[TextIO] = None, indent: int = 2) -> None:
    """Format data as JSON and write to output.

    Args:
        data: Data to format
        output: Output stream (defaults to stdout)
        indent: JSON indentation level
    """
    if output is None:
        output = sys.stdout

    json.dump(
        data,
        output,
        indent=indent,
        ensure_ascii=False,
        sort_keys=True,
        default=_default_serializer,
    )
    output.write("\n")


def format_catalog_summary_json(catalog: ModelCatalog, fresh: bool) -> Dict[str, Any]:
    """Format a catalog summary for JSON output.

    Args:
        catalog: Resolved catalog
        fresh: Whether the catalog is within the freshness window

    Returns:
        Formatted data structure
    """
    return {
        "source": catalog.source.value,
        "fetched_at": catalog.fetched_at,
        "fresh": fresh,
        "providers": {provider_id: len(provider.models) for provider_id, provider in catalog.providers.items()},
        "model_count": catalog.model_count,
    }


def format_ranked_models_json(provider: str, ranked: List[RankedModel], deduped: bool) -> Dict[str, Any]:
    """Format ranked models for JSON output, preserving rank order.

    Args:
        provider: Provider id the models were ranked for
        ranked: Ranked models
        deduped: Whether deduplication was applied

    Returns:
        Formatted data structure
    """
    models = [
        {
            "rank": index + 1,
            "id": model.id,
            "name": model.name,
            "provider": model.provider,
            "tier": model.tier.value,
            "known_in_catalog": model.known_in_catalog,
            "updated_at": model.updated_at or None,
        }
        for index, model in enumerate(ranked)
    ]
    return {"provider": provider, "deduped": deduped, "models": models, "count": len(models)}


def format_cache_info_json(cache_info: Dict[str, Any]) -> Dict[str, Any]:
    """Format cache information for JSON output.

    Args:
        cache_info: Cache information

    Returns:
        Formatted data structure
    """
    return {
        "cache_file": cache_info.get("path"),
        "exists": cache_info.get("exists", False),
        "size_bytes": cache_info.get("size", 0),
        "modified": cache_info.get("modified"),
        "fetched_at": cache_info.get("fetched_at"),
    }


def format_env_vars_json(env_vars: Dict[str, Optional[str]]) -> Dict[str, Any]:
    """Format environment variables for JSON output.

    Args:
        env_vars: Environment variables

    Returns:
        Formatted data structure
    """
    return {
        "environment_variables": {key: {"value": value, "set": value is not None} for key, value in env_vars.items()},
        "set_count": sum(1 for v in env_vars.values() if v is not None),
        "total_count": len(env_vars),
    }
