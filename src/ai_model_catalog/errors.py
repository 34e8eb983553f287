"""Error types for the model catalog.

This module defines the error types raised while resolving the catalog,
ranking provider models, and validating configured models.
"""

from typing import List, Optional


class ModelCatalogError(Exception):
    """Base class for all catalog-related errors.

    This is the parent class for all catalog-specific exceptions.
    """

    pass


class NetworkError(ModelCatalogError):
    """Raised when fetching the authoritative catalog fails.

    The catalog resolver catches this and falls through to the next tier.

    Examples:
        >>> try:
        ...     manager.fetch_remote_catalog()
        ... except NetworkError as e:
        ...     print(f"Network error: {e}")
    """

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        """Initialize network error.

        Args:
            message: Error message
            url: Optional URL that was being accessed
        """
        super().__init__(message)
        self.message = message
        self.url = url


class CatalogFormatError(ModelCatalogError):
    """Raised when a catalog document is malformed or incomplete.

    Examples:
        >>> try:
        ...     manager.load_override(path)
        ... except CatalogFormatError as e:
        ...     print(f"Invalid catalog in {e.path}: {e}")
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        """Initialize catalog format error.

        Args:
            message: Error message
            path: Optional path or URL of the offending document
        """
        super().__init__(message)
        self.message = message
        self.path = path


class UnsupportedProviderError(ModelCatalogError):
    """Raised when a provider id has no ranking rules."""

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        supported: Optional[List[str]] = None,
    ) -> None:
        """Initialize unsupported provider error.

        Args:
            message: Error message
            provider: The unknown provider id
            supported: Provider ids that are supported
        """
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.supported = list(supported) if supported is not None else None

    def __str__(self) -> str:
        """Return string representation of the error."""
        return self.message


class InvalidPolicyError(ModelCatalogError):
    """Raised when a recommendation policy name is not recognised."""

    def __init__(self, message: str, policy: str) -> None:
        """Initialize invalid policy error.

        Args:
            message: Error message
            policy: The rejected policy value
        """
        super().__init__(message)
        self.message = message
        self.policy = policy


class ConfiguredModelDeprecatedError(ModelCatalogError):
    """Raised when the configured model is marked deprecated in the catalog.

    This is the one catalog condition surfaced to the user. It is not
    retried; the user must choose another model.

    Examples:
        >>> try:
        ...     assert_configured_model_allowed("openai", "gpt-3.5-turbo")
        ... except ConfiguredModelDeprecatedError as e:
        ...     print(e.remediation)
    """

    def __init__(
        self,
        message: str,
        provider: str,
        model: str,
        display_name: str,
        remediation: str,
    ) -> None:
        """Initialize configured model deprecated error.

        Args:
            message: Error message
            provider: Provider id the model was configured for
            model: The configured model id
            display_name: Human-readable catalog name of the model
            remediation: Instruction telling the user how to recover
        """
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.model = model
        self.display_name = display_name
        self.remediation = remediation

    def __str__(self) -> str:
        """Return string representation of the error."""
        return self.message
