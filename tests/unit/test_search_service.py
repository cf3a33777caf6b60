"""Unit tests for SmartSearchService."""

from unittest.mock import MagicMock

import pytest

from pura_search.core.domain import ContentCategory, SearchQuery
from pura_search.core.domain.exceptions import (
    CorpusUnavailableError,
    EmptyQueryError,
    QueryTooLongError,
)
from pura_search.core.services.search_service import SmartSearchService

pytestmark = pytest.mark.unit


@pytest.fixture
def service(sample_corpus):
    return SmartSearchService(sample_corpus)


class TestSearchScenarios:
    """End-to-end searches over the sample articles."""

    def test_exact_title_match(self, service):
        response = service.search("Temple Architecture")

        assert response.query == "Temple Architecture"
        assert response.total == 1
        [result] = response.results
        assert result.content.title == "Hindu Temple Architecture"
        assert result.relevance_score == pytest.approx(0.75)
        assert result.excerpt.startswith("Hindu temples")

    def test_content_match_ranks_below_title_match(self, service):
        response = service.search("meditation")

        assert response.total == 2
        titles = [r.content.title for r in response.results]
        assert titles == ["Yoga and Meditation Philosophy", "Hindu Temple Architecture"]
        assert response.results[0].relevance_score == pytest.approx(0.75)
        assert response.results[1].relevance_score == pytest.approx(0.3)

    def test_category_filter(self, service):
        response = service.search("ancient", ContentCategory.PHILOSOPHY)

        assert response.total == 1
        assert response.results[0].content.title == "Yoga and Meditation Philosophy"
        assert response.results[0].content.category is ContentCategory.PHILOSOPHY

    def test_no_matches_is_not_an_error(self, service):
        response = service.search("nonexistent topic")

        assert response.results == []
        assert response.total == 0

    def test_case_insensitive(self, service):
        response = service.search("DIWALI")

        assert response.total == 1
        assert response.results[0].content.title == "Diwali Festival Celebrations"
        assert response.results[0].relevance_score == pytest.approx(0.75)

    def test_title_match_beats_content_match(self, content_factory, corpus_factory):
        corpus = corpus_factory(
            [
                content_factory(1, "Ancient Practices", "Yoga has been practiced for ages."),
                content_factory(2, "Yoga Practice Guide", "A guide to yoga practice."),
            ]
        )
        response = SmartSearchService(corpus).search("yoga")

        assert [r.content.id for r in response.results] == [2, 1]
        assert response.results[0].relevance_score == pytest.approx(0.75)
        assert response.results[1].relevance_score == pytest.approx(0.3)


class TestSearchInvariants:
    """Ordering, bounds and purity of search results."""

    def test_equal_scores_keep_corpus_order(self, service):
        response = service.search("Hindu")

        assert [r.content.id for r in response.results] == [1, 2, 3, 4]
        assert response.results[0].relevance_score == pytest.approx(0.75)
        assert all(r.relevance_score == pytest.approx(0.3) for r in response.results[1:])

    @pytest.mark.parametrize("query", ["Hindu", "ancient sacred", "festival of lights", "a"])
    def test_results_sorted_bounded_and_counted(self, service, query):
        response = service.search(query)

        scores = [r.relevance_score for r in response.results]
        assert scores == sorted(scores, reverse=True)
        assert all(0.0 <= score <= 1.0 for score in scores)
        assert response.total == len(response.results)
        assert all(len(r.excerpt) <= 206 for r in response.results)

    def test_repeated_searches_are_identical(self, service):
        assert service.search("meditation yoga") == service.search("meditation yoga")

    def test_search_query_object(self, service):
        via_object = service.search_query(SearchQuery("ancient", ContentCategory.CULTURE))
        direct = service.search("ancient", ContentCategory.CULTURE)

        assert via_object == direct
        assert [r.content.title for r in via_object.results] == ["Traditional Dance Forms"]

    def test_zero_score_candidate_is_returned(self, content_factory, corpus_factory):
        """Substring pre-filter admits 'Temples' although no whole word matches."""
        corpus = corpus_factory([content_factory(1, "Sacred Sites", "Temples of Bali.")])
        response = SmartSearchService(corpus).search("temple xyz")

        assert response.total == 1
        assert response.results[0].relevance_score == 0.0

    def test_single_character_query_matches_on_phrase(self, content_factory, corpus_factory):
        corpus = corpus_factory([content_factory(1, "A Guide", "about a temple")])
        response = SmartSearchService(corpus).search("a")

        assert response.total == 1
        assert response.results[0].relevance_score == pytest.approx(0.25)

    def test_punctuated_one_letter_words_do_not_prefilter(self, content_factory, corpus_factory):
        """'C++' cleans to 'c', which must not match every article containing a 'c'."""
        corpus = corpus_factory(
            [
                content_factory(1, "Galungan Festival", "A celebration of dharma over adharma."),
                content_factory(2, "Nyepi", "Day of silence in Bali."),
            ]
        )
        service = SmartSearchService(corpus)

        assert service.search("C++ programming").total == 0
        assert service.search("x. a, silence").total == 1

    def test_excerpt_length_is_configurable(self, content_factory, corpus_factory):
        corpus = corpus_factory([content_factory(1, "Temple", "temple " + "y" * 100)])
        response = SmartSearchService(corpus, excerpt_length=10).search("temple")

        assert response.results[0].excerpt == "temple yyy..."


class TestCategoryHandling:
    """Category is passed to the provider and enforced again by the service."""

    def test_category_is_passed_to_provider(self, sample_corpus):
        SmartSearchService(sample_corpus).search("hindu", ContentCategory.FESTIVALS)

        assert sample_corpus.calls == [ContentCategory.FESTIVALS]

    def test_filters_even_when_provider_ignores_category(self, sample_corpus):
        assert sample_corpus.honor_category is False

        response = SmartSearchService(sample_corpus).search("hindu", ContentCategory.FESTIVALS)

        assert [r.content.title for r in response.results] == ["Diwali Festival Celebrations"]

    def test_category_with_no_articles(self, sample_corpus):
        response = SmartSearchService(sample_corpus).search("hindu", ContentCategory.HISTORY)

        assert response.total == 0

    def test_no_category_searches_everything(self, sample_corpus):
        SmartSearchService(sample_corpus).search("hindu")

        assert sample_corpus.calls == [None]


class TestQueryValidation:
    """Rejected queries never reach the provider."""

    @pytest.mark.parametrize("query", ["", "   ", "\t\n"])
    def test_blank_query_raises(self, sample_corpus, query):
        with pytest.raises(EmptyQueryError) as exc_info:
            SmartSearchService(sample_corpus).search(query)

        assert exc_info.value.error_code == "PS_VAL_002"
        assert sample_corpus.calls == []

    def test_too_long_query_raises(self, sample_corpus):
        service = SmartSearchService(sample_corpus, max_query_length=10)

        with pytest.raises(QueryTooLongError) as exc_info:
            service.search("temple " * 5)

        assert exc_info.value.extra_context == {"length": 35, "max_length": 10}
        assert sample_corpus.calls == []

    def test_query_at_limit_is_accepted(self, sample_corpus):
        service = SmartSearchService(sample_corpus, max_query_length=5)

        assert service.search("hindu").total == 4

    @pytest.mark.parametrize("length", [0, -1])
    def test_non_positive_excerpt_length_rejected(self, sample_corpus, length):
        with pytest.raises(ValueError):
            SmartSearchService(sample_corpus, excerpt_length=length)


class TestProviderFailures:
    """Corpus failures surface as CorpusUnavailableError."""

    def test_provider_exception_is_wrapped(self):
        corpus = MagicMock()
        corpus.list_content.side_effect = RuntimeError("disk on fire")

        with pytest.raises(CorpusUnavailableError) as exc_info:
            SmartSearchService(corpus).search("temple", ContentCategory.HISTORY)

        exc = exc_info.value
        assert isinstance(exc.cause, RuntimeError)
        assert exc.extra_context["category"] == "history"
        assert exc.location.method_name == "_load_corpus"
        assert exc.to_dict()["cause"] == {"type": "RuntimeError", "message": "disk on fire"}

    def test_pura_search_errors_propagate_unchanged(self):
        original = CorpusUnavailableError("database locked")
        corpus = MagicMock()
        corpus.list_content.side_effect = original

        with pytest.raises(CorpusUnavailableError) as exc_info:
            SmartSearchService(corpus).search("temple")

        assert exc_info.value is original
