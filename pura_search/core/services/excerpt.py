"""Excerpt extraction around the best query match."""

from .text_matching import tokenize

DEFAULT_EXCERPT_LENGTH = 200

# Characters of context kept before the anchor
CONTEXT_BEFORE = 50

ELLIPSIS = "..."


def find_anchor(query: str, content: str) -> int:
    """Find where an excerpt should be centred.

    Prefers the first occurrence of the longest query word found in the
    content. On equal length the word that comes first in the query wins.
    Falls back to the full query phrase, then to the start of the text.
    """
    content_lower = content.lower()

    best_index = -1
    best_length = 0
    for word in tokenize(query):
        index = content_lower.find(word)
        if index != -1 and len(word) > best_length:
            best_index = index
            best_length = len(word)

    if best_index == -1:
        best_index = content_lower.find(query.lower())

    return max(best_index, 0)


def create_excerpt(query: str, content: str, max_length: int = DEFAULT_EXCERPT_LENGTH) -> str:
    """Create a preview snippet of ``content`` for a query.

    The snippet starts up to 50 characters before the best match and is at
    most ``max_length`` characters long. An ellipsis marks each side where
    text was cut off, so the result never exceeds ``max_length + 6``.

    Args:
        query: The original query string.
        content: Article body.
        max_length: Maximum snippet length, excluding ellipses.

    Returns:
        Stripped snippet, or an empty string for empty content.

    Raises:
        ValueError: If max_length is not positive.
    """
    if max_length <= 0:
        raise ValueError("max_length must be positive")

    if not content:
        return ""

    anchor = find_anchor(query, content)
    start = max(0, anchor - CONTEXT_BEFORE)
    end = min(len(content), start + max_length)

    excerpt = content[start:end]
    if start > 0:
        excerpt = ELLIPSIS + excerpt
    if end < len(content):
        excerpt = excerpt + ELLIPSIS

    return excerpt.strip()
