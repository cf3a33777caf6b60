"""Corpus Provider Port Interfaces."""

from abc import ABC, abstractmethod

from ..domain import ContentCategory, ContentUpdate, EducationalContent, NewContent


class CorpusProviderPort(ABC):
    """Abstract interface for sources of searchable articles."""

    @abstractmethod
    def list_content(self, category: ContentCategory | None = None) -> list[EducationalContent]:
        """Return every article, or only those in ``category``, in corpus order."""
        ...


class ContentRepositoryPort(CorpusProviderPort):
    """Corpus provider that also supports managing articles."""

    @abstractmethod
    def create_content(self, new_content: NewContent) -> EducationalContent:
        """Store a new article."""
        ...

    @abstractmethod
    def create_contents(self, new_contents: list[NewContent]) -> list[EducationalContent]:
        """Store several articles atomically: all of them or none."""
        ...

    @abstractmethod
    def get_content(self, content_id: int) -> EducationalContent | None:
        """Get an article by id."""
        ...

    @abstractmethod
    def update_content(
        self, content_id: int, update: ContentUpdate
    ) -> EducationalContent | None:
        """Apply a partial update to an article."""
        ...

    @abstractmethod
    def delete_content(self, content_id: int) -> bool:
        """Delete an article. Returns True if it existed."""
        ...
