"""Relevance scoring for keyword search."""

from ..domain import EducationalContent
from .text_matching import count_matches, tokenize

TITLE_WEIGHT = 0.6
CONTENT_WEIGHT = 0.4

# Added when the whole query appears verbatim in the field
TITLE_PHRASE_BONUS = 0.3
CONTENT_PHRASE_BONUS = 0.2

# Fixed normalization divisor, not derived from the corpus
MAX_POSSIBLE_SCORE = 2.0


def calculate_relevance_score(query: str, content: EducationalContent) -> float:
    """Score how well an article matches a query.

    Title matches weigh more than body matches, and a verbatim phrase
    match earns a bonus in either field. The raw score is divided by a
    fixed constant and capped at 1.0, so scores rank results within one
    query but are not calibrated across queries or corpora.

    Args:
        query: The original query string.
        content: The article to score.

    Returns:
        Relevance score in [0, 1].
    """
    query_lower = query.lower()
    title_lower = content.title.lower()
    content_lower = content.content.lower()
    query_words = tokenize(query)

    score = 0.0
    score += count_matches(title_lower, query_words) * TITLE_WEIGHT
    score += count_matches(content_lower, query_words) * CONTENT_WEIGHT

    if query_lower in title_lower:
        score += TITLE_PHRASE_BONUS
    if query_lower in content_lower:
        score += CONTENT_PHRASE_BONUS

    return min(score / MAX_POSSIBLE_SCORE, 1.0)
