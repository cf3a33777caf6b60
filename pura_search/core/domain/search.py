"""Search query, result and response models."""

from dataclasses import dataclass, field

from .content import ContentCategory, EducationalContent


@dataclass(frozen=True)
class SearchQuery:
    """A single search request.

    Attributes:
        query: Free-text query as typed by the user.
        category: Optional category filter.
    """

    query: str
    category: ContentCategory | None = None


@dataclass(frozen=True)
class SearchResult:
    """A ranked search hit.

    Attributes:
        content: The matched article.
        relevance_score: Heuristic score in [0, 1]. Only meaningful for
            ordering results of the same query.
        excerpt: Snippet of the article body around the best match.
    """

    content: EducationalContent
    relevance_score: float
    excerpt: str


@dataclass(frozen=True)
class SearchResponse:
    """Ranked results for a query, highest score first."""

    query: str
    results: list[SearchResult] = field(default_factory=list)
    total: int = 0
