"""Pura Search - keyword relevance search over Balinese Hindu educational content."""

__version__ = "1.0.0"
