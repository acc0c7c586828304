"""Core building blocks shared across dpsia."""

from .errors import (
    ConfigurationError,
    DpsiaError,
    InvalidConfigError,
    MissingConfigError,
    ProviderError,
    ProviderResponseError,
    ProviderTimeoutError,
)

__all__ = [
    "DpsiaError",
    "ProviderError",
    "ProviderTimeoutError",
    "ProviderResponseError",
    "ConfigurationError",
    "MissingConfigError",
    "InvalidConfigError",
]
