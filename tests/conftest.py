"""
Pytest configuration and shared fixtures.
"""

import json
from datetime import UTC, datetime

import pytest

from pura_search.adapters.outbound.sqlite_adapter import SQLiteContentAdapter
from pura_search.core.domain import ContentCategory, EducationalContent, NewContent
from pura_search.core.ports.corpus_port import CorpusProviderPort


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (API and CLI)")


SAMPLE_ARTICLES = [
    {
        "title": "Hindu Temple Architecture",
        "category": "architecture",
        "content": "Hindu temples are sacred structures designed according to ancient "
        "architectural principles called Vastu Shastra. These magnificent buildings "
        "feature intricate carvings, towering spires called shikhara, and sacred spaces "
        "for worship and meditation.",
    },
    {
        "title": "Diwali Festival Celebrations",
        "category": "festivals",
        "content": "Diwali, the festival of lights, is one of the most important Hindu "
        "celebrations. Families light oil lamps called diyas, exchange sweets, and perform "
        "prayers to goddess Lakshmi for prosperity and happiness.",
    },
    {
        "title": "Yoga and Meditation Philosophy",
        "category": "philosophy",
        "content": "Yoga is an ancient practice that combines physical postures, breathing "
        "techniques, and meditation. The word yoga means union, representing the connection "
        "between mind, body, and spirit in Hindu philosophy.",
    },
    {
        "title": "Traditional Dance Forms",
        "category": "culture",
        "content": "Classical Indian dance forms like Bharatanatyam, Kathak, and Odissi are "
        "deeply rooted in Hindu traditions. These dances tell stories from ancient epics "
        "through graceful movements and expressions.",
    },
]


class StaticCorpus(CorpusProviderPort):
    """Corpus provider over a fixed list.

    Ignores the category argument unless ``honor_category`` is set, which
    lets tests check that the search service filters on its own.
    """

    def __init__(self, documents, honor_category=False):
        self.documents = list(documents)
        self.honor_category = honor_category
        self.calls = []

    def list_content(self, category=None):
        self.calls.append(category)
        if self.honor_category and category is not None:
            return [doc for doc in self.documents if doc.category is category]
        return list(self.documents)


def make_content(
    content_id: int,
    title: str,
    content: str,
    category: ContentCategory = ContentCategory.GENERAL,
) -> EducationalContent:
    """Build an EducationalContent with fixed timestamps."""
    timestamp = datetime(2024, 1, 1, tzinfo=UTC)
    return EducationalContent(
        id=content_id,
        title=title,
        category=category,
        content=content,
        created_at=timestamp,
        updated_at=timestamp,
    )


@pytest.fixture
def sample_articles():
    """The four sample articles as EducationalContent, ids 1-4."""
    return [
        make_content(i, a["title"], a["content"], ContentCategory(a["category"]))
        for i, a in enumerate(SAMPLE_ARTICLES, start=1)
    ]


@pytest.fixture
def sample_corpus(sample_articles):
    """Static corpus over the sample articles."""
    return StaticCorpus(sample_articles)


@pytest.fixture
def sqlite_repository(tmp_path):
    """Empty SQLite content repository in a temp directory."""
    return SQLiteContentAdapter(tmp_path / "content.db")


@pytest.fixture
def seeded_repository(sqlite_repository):
    """SQLite repository holding the sample articles."""
    for article in SAMPLE_ARTICLES:
        sqlite_repository.create_content(
            NewContent(
                title=article["title"],
                category=ContentCategory(article["category"]),
                content=article["content"],
            )
        )
    return sqlite_repository


@pytest.fixture
def seed_file(tmp_path):
    """JSON seed file with the sample articles."""
    path = tmp_path / "articles.json"
    path.write_text(json.dumps(SAMPLE_ARTICLES), encoding="utf-8")
    return path


@pytest.fixture
def content_factory():
    """Factory for EducationalContent with fixed timestamps."""
    return make_content


@pytest.fixture
def corpus_factory():
    """Factory for StaticCorpus instances."""
    return StaticCorpus
