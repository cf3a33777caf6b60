"""Search engine services.

- text_matching: tokenizer, whole-word matcher and substring pre-filter
- relevance: weighted relevance scoring
- excerpt: snippet extraction around the best match
- search_service: SmartSearchService, the search orchestrator
"""

from .excerpt import create_excerpt
from .relevance import calculate_relevance_score
from .search_service import SmartSearchService
from .text_matching import count_matches, matches_prefilter, tokenize

__all__ = [
    "tokenize",
    "count_matches",
    "matches_prefilter",
    "calculate_relevance_score",
    "create_excerpt",
    "SmartSearchService",
]
