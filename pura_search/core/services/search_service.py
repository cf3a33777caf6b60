"""Smart search over educational content."""

import logging

from ..domain import ContentCategory, EducationalContent, SearchQuery, SearchResponse, SearchResult
from ..domain.exceptions import (
    CorpusUnavailableError,
    EmptyQueryError,
    PuraSearchError,
    QueryTooLongError,
)
from ..ports.corpus_port import CorpusProviderPort
from .excerpt import DEFAULT_EXCERPT_LENGTH, create_excerpt
from .relevance import calculate_relevance_score
from .text_matching import MIN_MATCH_LENGTH, matches_prefilter, tokenize

logger = logging.getLogger(__name__)

DEFAULT_MAX_QUERY_LENGTH = 1000


class SmartSearchService:
    """Ranks educational articles against a keyword query.

    The service keeps no state between calls. Each search fetches its own
    corpus snapshot from the provider, so concurrent searches never
    interfere with each other.
    """

    def __init__(
        self,
        corpus: CorpusProviderPort,
        excerpt_length: int = DEFAULT_EXCERPT_LENGTH,
        max_query_length: int = DEFAULT_MAX_QUERY_LENGTH,
    ) -> None:
        """Initialize the search service.

        Args:
            corpus: Provider of the articles to search.
            excerpt_length: Maximum excerpt length, excluding ellipses.
            max_query_length: Longest query accepted.
        """
        if excerpt_length <= 0:
            raise ValueError("excerpt_length must be positive")
        self.corpus = corpus
        self.excerpt_length = excerpt_length
        self.max_query_length = max_query_length

    def validate_query(self, query: str) -> None:
        """Reject queries the engine cannot search.

        Raises:
            EmptyQueryError: If the query is empty or whitespace only.
            QueryTooLongError: If the query exceeds max_query_length.
        """
        if not query or not query.strip():
            raise EmptyQueryError("Query cannot be empty or whitespace only")
        if len(query) > self.max_query_length:
            raise QueryTooLongError(
                f"Query exceeds {self.max_query_length} characters",
                context={"length": len(query), "max_length": self.max_query_length},
            )

    def _load_corpus(self, category: ContentCategory | None) -> list[EducationalContent]:
        try:
            return self.corpus.list_content(category)
        except PuraSearchError:
            raise
        except Exception as e:
            raise CorpusUnavailableError(
                "Failed to load educational content for search",
                cause=e,
                context={
                    "provider": type(self.corpus).__name__,
                    "category": category.value if category else None,
                },
            )

    def search(self, query: str, category: ContentCategory | None = None) -> SearchResponse:
        """Search the corpus for articles matching a query.

        Args:
            query: Free-text query.
            category: Optional category filter.

        Returns:
            SearchResponse with results sorted by descending relevance.
            Articles with equal scores keep their corpus order.

        Raises:
            EmptyQueryError: If the query is blank.
            QueryTooLongError: If the query is too long.
            CorpusUnavailableError: If the corpus could not be loaded.
        """
        self.validate_query(query)
        # Cleaned one-letter words take no part in the substring pre-filter
        query_words = [word for word in tokenize(query) if len(word) >= MIN_MATCH_LENGTH]

        corpus = self._load_corpus(category)
        candidates = [
            content
            for content in corpus
            if (category is None or content.category is category)
            and matches_prefilter(query, query_words, content.title, content.content)
        ]

        logger.debug(
            f"Query {query!r} -> words {query_words}, "
            f"{len(candidates)}/{len(corpus)} candidates"
        )

        results = [
            SearchResult(
                content=content,
                relevance_score=calculate_relevance_score(query, content),
                excerpt=create_excerpt(query, content.content, self.excerpt_length),
            )
            for content in candidates
        ]
        # list.sort is stable, including with reverse=True
        results.sort(key=lambda result: result.relevance_score, reverse=True)

        logger.info(
            f"Search {query!r} (category={category.value if category else 'any'}) "
            f"returned {len(results)} results"
        )

        return SearchResponse(query=query, results=results, total=len(results))

    def search_query(self, search_query: SearchQuery) -> SearchResponse:
        """Run a search from a SearchQuery object."""
        return self.search(search_query.query, search_query.category)
