"""FastAPI dependency wiring for Pura Search."""

import logging
from functools import lru_cache

from ....adapters.outbound.json_corpus_adapter import JSONCorpusAdapter
from ....adapters.outbound.sqlite_adapter import SQLiteContentAdapter
from ....config.settings import settings
from ....core.domain.exceptions import InvalidConfigurationError
from ....core.ports.corpus_port import CorpusProviderPort
from ....core.services.search_service import SmartSearchService

logger = logging.getLogger(__name__)


@lru_cache
def get_content_repository() -> SQLiteContentAdapter:
    """Get or create the SQLite content repository singleton."""
    logger.info(f"Initializing SQLiteContentAdapter at {settings.database_path}...")
    settings.ensure_directories()
    return SQLiteContentAdapter(settings.database_path)


@lru_cache
def get_corpus() -> CorpusProviderPort:
    """Get the corpus provider selected by ``corpus_source``."""
    if settings.corpus_source == "json":
        if settings.corpus_file is None:
            raise InvalidConfigurationError(
                "CORPUS_FILE must be set when CORPUS_SOURCE is 'json'",
                context={"corpus_source": settings.corpus_source},
            )
        logger.info(f"Initializing JSONCorpusAdapter from {settings.corpus_file}...")
        return JSONCorpusAdapter(settings.corpus_file)
    return get_content_repository()


@lru_cache
def get_search_service() -> SmartSearchService:
    """Get or create the SmartSearchService singleton."""
    logger.info("Initializing SmartSearchService...")
    return SmartSearchService(
        get_corpus(),
        excerpt_length=settings.excerpt_max_length,
        max_query_length=settings.max_query_length,
    )
