"""Port interfaces for Pura Search adapters."""

from .corpus_port import ContentRepositoryPort, CorpusProviderPort

__all__ = ["CorpusProviderPort", "ContentRepositoryPort"]
