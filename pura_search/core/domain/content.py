"""Educational content models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .exceptions import InvalidCategoryError


class ContentCategory(str, Enum):
    """Category of an educational article.

    The set is closed: content outside these eight categories is rejected
    at the boundary and never reaches the search engine.
    """

    HISTORY = "history"
    CULTURE = "culture"
    TRADITIONS = "traditions"
    FESTIVALS = "festivals"
    ARCHITECTURE = "architecture"
    CEREMONIES = "ceremonies"
    PHILOSOPHY = "philosophy"
    GENERAL = "general"

    @classmethod
    def parse(cls, value: "str | ContentCategory") -> "ContentCategory":
        """Convert a raw string into a category.

        Raises:
            InvalidCategoryError: If the value is not a known category.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            raise InvalidCategoryError(
                f"Unknown content category: {value!r}",
                cause=e,
                context={"allowed": [c.value for c in cls]},
            )


@dataclass(frozen=True)
class EducationalContent:
    """An educational article about Balinese Hindu temples and culture.

    This is the document the search engine ranks. The repository layer
    owns it; the search core treats it as read-only.

    Attributes:
        id: Unique identifier assigned by the repository.
        title: Article title.
        category: One of the eight content categories.
        content: Article body text (may be empty).
        created_at: When the article was created.
        updated_at: When the article was last modified.
    """

    id: int
    title: str
    category: ContentCategory
    content: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class NewContent:
    """Payload for creating an article."""

    title: str
    category: ContentCategory
    content: str


@dataclass(frozen=True)
class ContentUpdate:
    """Partial update for an article. ``None`` fields are left unchanged."""

    title: str | None = None
    category: ContentCategory | None = None
    content: str | None = None
