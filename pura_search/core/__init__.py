"""Core search engine: domain models, ports and services."""
