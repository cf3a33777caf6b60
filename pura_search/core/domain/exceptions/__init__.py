"""Custom exception hierarchy for Pura Search.

Structured exceptions with error codes, raise-site capture, cause chaining
and JSON serialization. Import from this package directly:

    from pura_search.core.domain.exceptions import PuraSearchError, CorpusUnavailableError
"""

# Base classes
from .base import ExceptionContext, PuraSearchError

# Configuration exceptions
from .configuration import (
    ConfigurationError,
    InvalidConfigurationError,
)

# Retrieval exceptions
from .retrieval import (
    ContentNotFoundError,
    CorpusUnavailableError,
    RetrievalError,
)

# Storage exceptions
from .storage import (
    ContentStorageError,
    StorageError,
)

# Validation exceptions
from .validation import (
    EmptyQueryError,
    InvalidCategoryError,
    QueryTooLongError,
    ValidationError,
)

__all__ = [
    # Base
    "ExceptionContext",
    "PuraSearchError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    # Retrieval
    "RetrievalError",
    "CorpusUnavailableError",
    "ContentNotFoundError",
    # Storage
    "StorageError",
    "ContentStorageError",
    # Validation
    "ValidationError",
    "EmptyQueryError",
    "QueryTooLongError",
    "InvalidCategoryError",
]
