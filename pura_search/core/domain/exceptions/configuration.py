"""Configuration-related exceptions for Pura Search."""

from .base import PuraSearchError


class ConfigurationError(PuraSearchError):
    """Configuration or environment variable errors.

    Raised when required configuration is missing or invalid.
    """

    error_code = "PS_CFG_001"


class InvalidConfigurationError(ConfigurationError):
    """Configuration value is invalid."""

    error_code = "PS_CFG_002"
