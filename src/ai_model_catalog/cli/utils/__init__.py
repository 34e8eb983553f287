"""CLI utilities package."""

from .helpers import (
    ExitCode,
    configure_logging,
    format_file_size,
    get_amc_env_vars,
    handle_error,
    load_model_input,
    resolve_format,
    resolve_log_level,
    validate_provider,
)
from .options import model_input_options, provider_argument

__all__ = [
    "ExitCode",
    "configure_logging",
    "resolve_format",
    "resolve_log_level",
    "handle_error",
    "get_amc_env_vars",
    "load_model_input",
    "validate_provider",
    "format_file_size",
    "provider_argument",
    "model_input_options",
]
