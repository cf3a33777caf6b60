"""Query tokenization and keyword matching.

Two matching tiers are used on the same text:

* ``matches_prefilter`` does plain substring containment and decides which
  articles become candidates.
* ``count_matches`` counts whole-word occurrences and feeds the scorer.

A candidate can pass the first and still count zero in the second, e.g.
query "temple" against "temples".
"""

import re
from collections.abc import Iterable
from functools import lru_cache

_NON_WORD_CHARS = re.compile(r"[^\w]")

# Tokens of this length or shorter are dropped before cleaning
MAX_IGNORED_TOKEN_LENGTH = 1

# Cleaned words shorter than this never count as matches
MIN_MATCH_LENGTH = 2


def split_query(text: str) -> list[str]:
    """Lower-case and split on whitespace, dropping single-character tokens.

    Punctuation is kept, so "mind," stays "mind,".
    """
    return [word for word in text.lower().split() if len(word) > MAX_IGNORED_TOKEN_LENGTH]


def clean_word(word: str) -> str:
    """Strip every non-word character (anything but letters, digits, underscore)."""
    return _NON_WORD_CHARS.sub("", word)


def tokenize(text: str) -> list[str]:
    """Turn a query into cleaned, lower-cased query words.

    Args:
        text: Raw query text.

    Returns:
        Query words in their original order. Duplicates are kept.
    """
    cleaned = (clean_word(word) for word in split_query(text))
    return [word for word in cleaned if word]


@lru_cache(maxsize=1024)
def _word_pattern(word: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE)


def count_matches(text: str, query_words: Iterable[str]) -> int:
    """Count whole-word occurrences of the query words in ``text``.

    Matching is case-insensitive and respects word boundaries on both
    sides. Occurrences are non-overlapping and summed across all words, so
    a repeated query word is counted once per repetition.

    Args:
        text: Text to search in (title or body).
        query_words: Query words; each is cleaned again before use.

    Returns:
        Total number of matches.
    """
    if not text:
        return 0

    matches = 0
    for word in query_words:
        cleaned = clean_word(word.lower())
        if len(cleaned) < MIN_MATCH_LENGTH:
            continue
        matches += len(_word_pattern(cleaned).findall(text))
    return matches


def matches_prefilter(query: str, query_words: Iterable[str], title: str, content: str) -> bool:
    """Coarse candidate check by plain substring containment.

    True if the full lower-cased query, or any query word, appears anywhere
    in the lower-cased title or content. Matches inside longer words count.
    """
    title_lower = title.lower()
    content_lower = content.lower()

    needles = [query.lower(), *query_words]
    return any(needle in title_lower or needle in content_lower for needle in needles if needle)
