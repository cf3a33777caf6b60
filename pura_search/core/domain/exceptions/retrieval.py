"""Retrieval exceptions for Pura Search."""

from .base import PuraSearchError


class RetrievalError(PuraSearchError):
    """Error while fetching educational content."""

    error_code = "PS_RET_001"


class CorpusUnavailableError(RetrievalError):
    """The corpus provider could not return documents.

    Distinct from a search with zero matches, which is not an error.
    """

    error_code = "PS_RET_002"


class ContentNotFoundError(RetrievalError):
    """Requested educational content does not exist."""

    error_code = "PS_RET_003"
