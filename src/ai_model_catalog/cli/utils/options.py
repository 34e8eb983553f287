"""Common CLI options and decorators."""

from functools import wraps
from typing import Any, Callable, TypeVar, cast

import click

from .helpers import validate_provider

F = TypeVar("F", bound=Callable[..., Any])


def _validate_provider_callback(ctx: click.Context, param: click.Parameter, value: str) -> str:
    return validate_provider(value)


def provider_argument(func: F) -> F:
    """Add a validated PROVIDER argument to a command."""
    return cast(F, click.argument("provider", type=str, callback=_validate_provider_callback)(func))


def model_input_options(func: F) -> F:
    """Add the IDS... argument and --input option to a command."""

    @click.argument("model_ids", nargs=-1, type=str)
    @click.option(
        "--input",
        "input_path",
        type=click.Path(exists=True, dir_okay=False),
        help="Read models from a JSON/YAML list of ids or {id, name, provider} objects.",
    )
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return func(*args, **kwargs)

    return cast(F, wrapper)
