"""Shared fixtures for the model catalog tests."""

import copy
from pathlib import Path
from typing import Any, Callable, Dict, Iterator
from unittest.mock import Mock

import pytest

from ai_model_catalog import clear_model_catalog
from ai_model_catalog.schema import CatalogSource, ModelCatalog

RAW_CATALOG: Dict[str, Any] = {
    "anthropic": {
        "models": {
            "claude-sonnet-4-5": {
                "name": "Claude Sonnet 4.5",
                "last_updated": "2025-09-29",
                "release_date": "2025-09-29",
                "reasoning": True,
                "tool_call": True,
            },
            "claude-3-7-sonnet-latest": {
                "name": "Claude 3.7 Sonnet",
                "last_updated": "2025-02-19",
                "release_date": "2025-02-19",
                "reasoning": True,
                "tool_call": True,
            },
            "claude-2.1": {
                "name": "Claude 2.1",
                "last_updated": "2023-11-21",
                "release_date": "2023-11-21",
                "reasoning": False,
                "tool_call": False,
            },
        },
    },
    "openai": {
        "models": {
            "gpt-5": {
                "name": "GPT-5",
                "last_updated": "2025-08-07",
                "release_date": "2025-08-07",
                "reasoning": True,
                "tool_call": True,
            },
            "gpt-5-mini": {
                "name": "GPT-5 Mini",
                "last_updated": "2025-08-07",
                "release_date": "2025-08-07",
                "reasoning": True,
                "tool_call": True,
            },
            "o3": {
                "name": "o3",
                "last_updated": "2025-04-16",
                "release_date": "2025-04-16",
                "reasoning": True,
                "tool_call": True,
            },
            "gpt-4": {
                "name": "GPT-4",
                "last_updated": "2023-03-14",
                "release_date": "2023-03-14",
                "reasoning": False,
                "tool_call": True,
            },
            "gpt-3.5-turbo": {
                "name": "GPT-3.5 Turbo",
                "status": "deprecated",
                "last_updated": "2023-11-06",
                "release_date": "2023-11-06",
                "reasoning": False,
                "tool_call": True,
            },
            "gpt-4o": {
                "name": "GPT-4o",
                "last_updated": "2024-05-13",
                "release_date": "2024-05-13",
                "reasoning": False,
                "tool_call": True,
            },
        },
    },
    "google": {
        "models": {
            "gemini-2.5-pro": {
                "name": "Gemini 2.5 Pro",
                "last_updated": "2025-06-05",
                "release_date": "2025-03-20",
                "reasoning": True,
                "tool_call": True,
            },
            "gemini-2.5-flash": {
                "name": "Gemini 2.5 Flash",
                "last_updated": "2025-06-17",
                "release_date": "2025-03-20",
                "reasoning": True,
                "tool_call": True,
            },
            "gemini-1.0-pro": {
                "name": "Gemini 1.0 Pro",
                "status": "deprecated",
                "last_updated": "2024-02-15",
                "release_date": "2023-12-06",
                "reasoning": False,
                "tool_call": True,
            },
        },
    },
}


@pytest.fixture(autouse=True)
def isolated_catalog(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point the cache at a temp file, disable the network, and reset the memo."""
    monkeypatch.setenv("AMC_CATALOG_CACHE_FILE", str(tmp_path / "models-dev-catalog.json"))
    monkeypatch.setenv("AMC_DISABLE_CATALOG_FETCH", "1")
    monkeypatch.delenv("AMC_MODEL_CATALOG_OVERRIDE", raising=False)
    monkeypatch.delenv("AMC_CATALOG_URL", raising=False)
    clear_model_catalog()
    yield
    clear_model_catalog()


@pytest.fixture
def raw_catalog() -> Dict[str, Any]:
    """A models.dev-shaped document covering every catalog provider."""
    return copy.deepcopy(RAW_CATALOG)


@pytest.fixture
def catalog(raw_catalog: Dict[str, Any]) -> ModelCatalog:
    """A small resolved catalog."""
    return ModelCatalog.from_raw(raw_catalog, CatalogSource.SNAPSHOT)


@pytest.fixture
def cache_file(tmp_path: Path) -> Path:
    """The cache file location used by the isolated environment."""
    return tmp_path / "models-dev-catalog.json"


@pytest.fixture
def make_response() -> Callable[..., Mock]:
    """Factory for mock ``requests`` responses."""

    def _make(payload: Any, status_code: int = 200) -> Mock:
        response = Mock()
        response.status_code = status_code
        response.json.return_value = payload
        response.raise_for_status.return_value = None
        return response

    return _make
