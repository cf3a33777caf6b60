"""Storage exceptions for Pura Search."""

from .base import PuraSearchError


class StorageError(PuraSearchError):
    """Base error for content storage operations."""

    error_code = "PS_STO_001"


class ContentStorageError(StorageError):
    """Failed to write educational content.

    Common causes:
    - Database file is not writable
    - Schema mismatch with an older database
    """

    error_code = "PS_STO_002"
