"""Domain models for Pura Search.

- content: EducationalContent, ContentCategory and the repository payloads
- search: SearchQuery, SearchResult and SearchResponse

All models are re-exported here for convenient importing:

    from pura_search.core.domain import ContentCategory, EducationalContent
"""

from .content import ContentCategory, ContentUpdate, EducationalContent, NewContent
from .search import SearchQuery, SearchResponse, SearchResult

__all__ = [
    # Content models
    "ContentCategory",
    "EducationalContent",
    "NewContent",
    "ContentUpdate",
    # Search models
    "SearchQuery",
    "SearchResult",
    "SearchResponse",
]
