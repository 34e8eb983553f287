"""Startup validation of a configured model against the catalog.

This module rejects a configured model the catalog marks deprecated, before
any model invocation happens.
"""

from typing import Optional

from .catalog import get_catalog_model_metadata, get_model_catalog, is_deprecated_model
from .errors import ConfiguredModelDeprecatedError
from .logging import LogEvent, log_debug, log_error
from .schema import ModelCatalog, ProviderModel

DEFAULT_REMEDIATION = "Run 'ai-git configure' to choose a supported model."


def assert_configured_model_allowed(
    provider_id: str,
    model_id: str,
    catalog: Optional[ModelCatalog] = None,
    remediation: str = DEFAULT_REMEDIATION,
) -> None:
    """Assert that a configured model is not deprecated.

    Args:
        provider_id: Supported provider the model is configured for
        model_id: The configured model id
        catalog: Catalog to check against. If None, the catalog is resolved.
        remediation: Instruction appended to the error message

    Raises:
        ConfiguredModelDeprecatedError: If the catalog marks the model deprecated
        UnsupportedProviderError: If the provider has no rules
    """
    resolved = catalog if catalog is not None else get_model_catalog()
    metadata = get_catalog_model_metadata(
        provider_id, ProviderModel(id=model_id, name=model_id), resolved
    )

    if not is_deprecated_model(metadata):
        log_debug(
            LogEvent.MODEL_VALIDATION,
            "Configured model allowed",
            provider=provider_id,
            model=model_id,
            known=metadata is not None,
        )
        return

    display_name = (metadata.name if metadata else None) or model_id
    log_error(
        LogEvent.MODEL_VALIDATION,
        "Configured model is deprecated",
        provider=provider_id,
        model=model_id,
    )
    raise ConfiguredModelDeprecatedError(
        f"Configured model '{display_name}' ({model_id}) is deprecated for provider "
        f"'{provider_id}'. {remediation}",
        provider=provider_id,
        model=model_id,
        display_name=display_name,
        remediation=remediation,
    )
