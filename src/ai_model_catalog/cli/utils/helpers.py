"""Helper functions for CLI operations."""

import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler

from ...config_paths import (
    ENV_CATALOG_CACHE_FILE,
    ENV_CATALOG_URL,
    ENV_DISABLE_CATALOG_FETCH,
    ENV_MODEL_CATALOG_OVERRIDE,
)
from ...logging import LOGGER_NAME
from ...provider_rules import SUPPORTED_PROVIDERS


class ExitCode:
    """Standard exit codes for the CLI."""

    SUCCESS = 0
    GENERIC_ERROR = 1
    INVALID_USAGE = 2
    MODEL_NOT_FOUND = 3
    MODEL_DEPRECATED = 5


def resolve_format(cli_format: Optional[str] = None, default_tty: str = "table", default_non_tty: str = "json") -> str:
    """Resolve output format with TTY detection.

    Args:
        cli_format: Format specified via CLI flag
        default_tty: Default format for TTY output
        default_non_tty: Default format for non-TTY output

    Returns:
        Resolved format name
    """
    if cli_format:
        return cli_format.lower()

    if sys.stdout.isatty():
        return default_tty
    return default_non_tty


def resolve_log_level(verbose: int = 0, debug: bool = False) -> int:
    """Map the verbosity flags to a logging level."""
    if debug or verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def configure_logging(level: int) -> None:
    """Send package log records to stderr at ``level``."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False, show_time=False))


def handle_error(error: Exception, exit_code: int = ExitCode.GENERIC_ERROR) -> None:
    """Handle CLI errors with consistent formatting.

    Args:
        error: Exception to handle
        exit_code: Exit code to use
    """
    click.echo(f"Error: {str(error)}", err=True)
    sys.exit(exit_code)


def get_amc_env_vars() -> Dict[str, Optional[str]]:
    """Get all AMC_* environment variables.

    Returns:
        Dictionary of AMC environment variables and their values
    """
    amc_vars: Dict[str, Optional[str]] = {key: value for key, value in os.environ.items() if key.startswith("AMC_")}

    common_vars: List[str] = [
        ENV_CATALOG_CACHE_FILE,
        ENV_MODEL_CATALOG_OVERRIDE,
        ENV_DISABLE_CATALOG_FETCH,
        ENV_CATALOG_URL,
    ]
    for var in common_vars:
        amc_vars.setdefault(var, None)

    return amc_vars


def validate_provider(provider: str) -> str:
    """Validate and normalize a provider id.

    Args:
        provider: Provider id to validate

    Returns:
        Normalized provider id

    Raises:
        click.BadParameter: If provider is not supported
    """
    provider_lower = provider.lower()
    if provider_lower in SUPPORTED_PROVIDERS:
        return provider_lower

    raise click.BadParameter(f"Invalid provider '{provider}'. Must be one of: {', '.join(SUPPORTED_PROVIDERS)}")


def load_model_input(path: str) -> List[Any]:
    """Read a list of model ids or ``{id, name, provider}`` objects from a file.

    JSON and YAML are both accepted. A mapping with a ``models`` or ``data``
    key is unwrapped, matching common provider listing responses.

    Raises:
        click.BadParameter: If the file is unreadable or not a list
    """
    try:
        with open(Path(path), "r", encoding="utf-8") as f:
            parsed = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise click.BadParameter(f"Cannot read model list from '{path}': {e}") from e

    if isinstance(parsed, dict):
        parsed = parsed.get("models", parsed.get("data"))

    if not isinstance(parsed, list):
        raise click.BadParameter(f"Model list in '{path}' must be a JSON/YAML list")

    return parsed


def format_file_size(size_bytes: int) -> str:
    """Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Human-readable size string
    """
    if size_bytes == 0:
        return "0 B"

    size_names = ["B", "KB", "MB", "GB"]
    size = float(size_bytes)
    i = 0
    while size >= 1024 and i < len(size_names) - 1:
        size /= 1024.0
        i += 1

    return f"{size:.1f} {size_names[i]}"
