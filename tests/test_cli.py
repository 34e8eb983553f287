"""CLI tests for the AMC command line."""

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest
from click.testing import CliRunner

from ai_model_catalog.cli import app
from ai_model_catalog.cli.utils.helpers import ExitCode, format_file_size, resolve_format
from ai_model_catalog.data_manager import CatalogDataManager
from ai_model_catalog.schema import ModelCatalog


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI runner for testing."""
    return CliRunner()


def _invoke_json(cli_runner: CliRunner, args: List[str]) -> Dict[str, Any]:
    result = cli_runner.invoke(app, ["--format", "json", *args])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    return json.loads(result.stdout)


class TestGlobalOptions:
    """Tests for the top-level group."""

    def test_version(self, cli_runner: CliRunner) -> None:
        """--version prints both version lines."""
        result = cli_runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "AMC CLI version:" in result.output
        assert "Library version:" in result.output

    def test_help_without_subcommand(self, cli_runner: CliRunner) -> None:
        """Running with no subcommand prints help."""
        result = cli_runner.invoke(app, [])

        assert result.exit_code == 0
        assert "catalog" in result.output
        assert "models" in result.output

    def test_resolve_format(self) -> None:
        """An explicit format always wins over TTY detection."""
        assert resolve_format("JSON") == "json"
        assert resolve_format("table") == "table"

    def test_format_file_size(self) -> None:
        """Sizes are rendered in binary units."""
        assert format_file_size(0) == "0 B"
        assert format_file_size(512) == "512.0 B"
        assert format_file_size(2048) == "2.0 KB"


class TestCatalogCommands:
    """Tests for the catalog command group."""

    def test_show_uses_snapshot_offline(self, cli_runner: CliRunner) -> None:
        """With no network and no cache, the snapshot is reported."""
        data = _invoke_json(cli_runner, ["catalog", "show"])

        assert data["source"] == "snapshot"
        assert set(data["providers"]) == {"anthropic", "openai", "google"}
        assert data["model_count"] == sum(data["providers"].values())
        assert data["model_count"] > 0

    def test_show_reports_cache(self, cli_runner: CliRunner, catalog: ModelCatalog) -> None:
        """A readable cache is used when the network is disabled."""
        CatalogDataManager().save_cache(catalog)

        data = _invoke_json(cli_runner, ["catalog", "show"])

        assert data["source"] == "cache"
        assert data["providers"]["openai"] == 6
        assert data["fresh"] is True

    def test_show_table(self, cli_runner: CliRunner) -> None:
        """The table view names the source."""
        result = cli_runner.invoke(app, ["--format", "table", "catalog", "show"])

        assert result.exit_code == 0
        assert "snapshot" in result.output

    def test_refresh_falls_back_offline(self, cli_runner: CliRunner) -> None:
        """A forced refresh without network still resolves."""
        data = _invoke_json(cli_runner, ["catalog", "refresh", "--timeout", "1"])

        assert data["source"] == "snapshot"

    def test_refresh_rejects_non_positive_timeout(self, cli_runner: CliRunner) -> None:
        """The timeout must be positive."""
        result = cli_runner.invoke(app, ["catalog", "refresh", "--timeout", "0"])

        assert result.exit_code == ExitCode.INVALID_USAGE

    def test_env(self, cli_runner: CliRunner, cache_file: Path) -> None:
        """Environment variables are listed with their values."""
        data = _invoke_json(cli_runner, ["catalog", "env"])

        env_vars = data["environment_variables"]
        assert env_vars["AMC_CATALOG_CACHE_FILE"] == {"value": str(cache_file), "set": True}
        assert env_vars["AMC_DISABLE_CATALOG_FETCH"]["value"] == "1"
        assert env_vars["AMC_MODEL_CATALOG_OVERRIDE"] == {"value": None, "set": False}


class TestCacheCommands:
    """Tests for the cache command group."""

    def test_info_without_cache(self, cli_runner: CliRunner, cache_file: Path) -> None:
        """Info reports a missing cache file."""
        data = _invoke_json(cli_runner, ["cache", "info"])

        assert data["cache_file"] == str(cache_file)
        assert data["exists"] is False

    def test_info_with_cache(self, cli_runner: CliRunner, catalog: ModelCatalog) -> None:
        """Info reports size and fetch time of an existing cache."""
        CatalogDataManager().save_cache(catalog)

        data = _invoke_json(cli_runner, ["cache", "info"])

        assert data["exists"] is True
        assert data["size_bytes"] > 0
        assert data["fetched_at"] == catalog.fetched_at

    def test_clear(self, cli_runner: CliRunner, cache_file: Path, catalog: ModelCatalog) -> None:
        """Clear removes the cache file."""
        CatalogDataManager().save_cache(catalog)

        data = _invoke_json(cli_runner, ["cache", "clear", "--yes"])

        assert data == {"success": True, "removed": True, "cache_file": str(cache_file)}
        assert not cache_file.exists()

    def test_clear_without_cache(self, cli_runner: CliRunner) -> None:
        """Clearing a missing cache is not an error."""
        result = cli_runner.invoke(app, ["cache", "clear"])

        assert result.exit_code == 0
        assert "No cache file found to clear." in result.output

    def test_clear_cancelled(self, cli_runner: CliRunner, cache_file: Path, catalog: ModelCatalog) -> None:
        """Declining the prompt keeps the file."""
        CatalogDataManager().save_cache(catalog)

        result = cli_runner.invoke(app, ["--format", "table", "cache", "clear"], input="n\n")

        assert result.exit_code == 0
        assert cache_file.exists()


class TestModelCommands:
    """Tests for the models command group."""

    def test_rank_dedupes_by_default(self, cli_runner: CliRunner) -> None:
        """Dated variants collapse into their canonical id."""
        data = _invoke_json(cli_runner, ["models", "rank", "openai", "gpt-5", "gpt-4o-2024-11-20", "gpt-4o"])

        assert [model["id"] for model in data["models"]] == ["gpt-5", "gpt-4o"]
        assert [model["rank"] for model in data["models"]] == [1, 2]
        assert data["deduped"] is True

    def test_rank_without_dedupe(self, cli_runner: CliRunner) -> None:
        """--no-dedupe keeps every variant."""
        data = _invoke_json(
            cli_runner, ["models", "rank", "openai", "gpt-5", "gpt-4o-2024-11-20", "gpt-4o", "--no-dedupe"]
        )

        assert data["count"] == 3
        assert data["deduped"] is False
        assert data["models"][0]["tier"] == "default"

    def test_rank_from_input_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """--input accepts a provider listing response."""
        listing = tmp_path / "models.json"
        listing.write_text(
            json.dumps({"data": [{"id": "o3", "name": "o3"}, {"id": "gpt-5", "name": "GPT-5"}, "whisper-1"]}),
            encoding="utf-8",
        )

        data = _invoke_json(cli_runner, ["models", "rank", "openai", "--input", str(listing)])

        assert [model["id"] for model in data["models"]] == ["gpt-5", "o3"]

    def test_rank_table(self, cli_runner: CliRunner) -> None:
        """The table view lists the ranked ids."""
        result = cli_runner.invoke(app, ["--format", "table", "models", "rank", "anthropic", "claude-sonnet-4-5"])

        assert result.exit_code == 0
        assert "claude-sonnet-4-5" in result.output

    def test_rank_requires_models(self, cli_runner: CliRunner) -> None:
        """No ids and no input file is a usage error."""
        result = cli_runner.invoke(app, ["models", "rank", "openai"])

        assert result.exit_code == ExitCode.INVALID_USAGE
        assert "Provide model ids" in result.output

    def test_invalid_provider(self, cli_runner: CliRunner) -> None:
        """Unknown providers are rejected by argument validation."""
        result = cli_runner.invoke(app, ["models", "rank", "azure", "gpt-5"])

        assert result.exit_code == ExitCode.INVALID_USAGE
        assert "Invalid provider" in result.output

    @pytest.mark.parametrize(
        "policy,expected",
        [
            ("balanced", "gpt-5"),
            ("speed", "gpt-5-mini"),
            ("capability", "o3"),
        ],
    )
    def test_recommend(self, cli_runner: CliRunner, policy: str, expected: str) -> None:
        """Each policy picks from its preferred tier."""
        data = _invoke_json(
            cli_runner, ["models", "recommend", "openai", "o3", "gpt-5-mini", "gpt-5", "--policy", policy]
        )

        assert data == {"provider": "openai", "policy": policy, "recommended": expected}

    def test_recommend_nothing_survives(self, cli_runner: CliRunner) -> None:
        """A fully filtered list exits with MODEL_NOT_FOUND."""
        result = cli_runner.invoke(app, ["models", "recommend", "openai", "whisper-1", "dall-e-3"])

        assert result.exit_code == ExitCode.MODEL_NOT_FOUND

    def test_recommend_rejects_unknown_policy(self, cli_runner: CliRunner) -> None:
        """Policies are limited to the known choices."""
        result = cli_runner.invoke(app, ["models", "recommend", "openai", "gpt-5", "--policy", "fastest"])

        assert result.exit_code == ExitCode.INVALID_USAGE

    def test_check_allowed(self, cli_runner: CliRunner) -> None:
        """A supported model passes and reports its catalog entry."""
        data = _invoke_json(cli_runner, ["models", "check", "openai", "gpt-5"])

        assert data["allowed"] is True
        assert data["known_in_catalog"] is True
        assert data["catalog_id"] == "gpt-5"

    def test_check_unknown_model_is_allowed(self, cli_runner: CliRunner) -> None:
        """Models missing from the catalog are not blocked."""
        data = _invoke_json(cli_runner, ["models", "check", "openrouter", "mistralai/mistral-large"])

        assert data["allowed"] is True
        assert data["known_in_catalog"] is False
        assert data["catalog_id"] is None

    def test_check_deprecated_model(
        self,
        cli_runner: CliRunner,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        raw_catalog: Dict[str, Any],
    ) -> None:
        """A deprecated model exits with MODEL_DEPRECATED."""
        override = tmp_path / "override.json"
        override.write_text(json.dumps(raw_catalog), encoding="utf-8")
        monkeypatch.setenv("AMC_MODEL_CATALOG_OVERRIDE", str(override))

        result = cli_runner.invoke(app, ["models", "check", "openai", "gpt-3.5-turbo"])

        assert result.exit_code == ExitCode.MODEL_DEPRECATED
        assert "is deprecated for provider 'openai'" in result.output
