"""Validation exceptions for Pura Search."""

from .base import PuraSearchError


class ValidationError(PuraSearchError):
    """Input validation failed."""

    error_code = "PS_VAL_001"


class EmptyQueryError(ValidationError):
    """Query cannot be empty or whitespace only."""

    error_code = "PS_VAL_002"


class QueryTooLongError(ValidationError):
    """Query exceeds maximum allowed length."""

    error_code = "PS_VAL_003"


class InvalidCategoryError(ValidationError):
    """Category is not one of the known content categories."""

    error_code = "PS_VAL_004"
