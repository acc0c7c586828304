"""Core exception hierarchy for dpsia.

All dpsia exceptions inherit from DpsiaError, enabling both specific
and broad exception handling.

Exception Hierarchy:
    DpsiaError (base)
    ├── ProviderError - research provider issues
    │   ├── ProviderTimeoutError
    │   └── ProviderResponseError
    └── ConfigurationError - config issues
        ├── MissingConfigError
        └── InvalidConfigError

Provider errors never escape a provider's ``search`` call; they are raised
internally and rendered into the ``error`` field of a failed research result.
Configuration errors are raised while building providers and do propagate.
"""

from typing import Any, Dict, Optional


class DpsiaError(Exception):
    """Base exception for all dpsia errors.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code (e.g., "PROVIDER_TIMEOUT")
        details: Optional dict with additional context
    """

    error_code: str = "DPSIA_ERROR"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        if error_code:
            self.error_code = error_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dict for API responses."""
        return {
            "error": True,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


# Provider Errors
class ProviderError(DpsiaError):
    """Base class for research provider errors."""

    error_code = "PROVIDER_ERROR"


class ProviderTimeoutError(ProviderError):
    """Provider call did not complete within its timeout."""

    error_code = "PROVIDER_TIMEOUT"

    def __init__(self, provider: str, timeout_seconds: float):
        super().__init__(
            f"{provider} request timed out after {timeout_seconds:g}s",
            details={"provider": provider, "timeout_seconds": timeout_seconds},
        )


class ProviderResponseError(ProviderError):
    """Provider answered with a non-success HTTP status."""

    error_code = "PROVIDER_RESPONSE"

    def __init__(self, provider: str, status_code: int, body: str = ""):
        super().__init__(
            f"HTTP {status_code}: {body}",
            details={"provider": provider, "status_code": status_code},
        )


# Configuration Errors
class ConfigurationError(DpsiaError):
    """Base class for configuration errors."""

    error_code = "CONFIG_ERROR"


class MissingConfigError(ConfigurationError):
    """Required configuration is missing."""

    error_code = "MISSING_CONFIG"

    def __init__(self, config_key: str, source: str = "environment"):
        super().__init__(
            f"Required configuration '{config_key}' not found in {source}.",
            details={"config_key": config_key, "source": source},
        )


class InvalidConfigError(ConfigurationError):
    """Configuration value is invalid."""

    error_code = "INVALID_CONFIG"

    def __init__(self, config_key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid value for '{config_key}': {reason}",
            details={"config_key": config_key, "value": str(value), "reason": reason},
        )
