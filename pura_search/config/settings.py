"""Configuration management for Pura Search."""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Corpus settings
    corpus_source: Literal["sqlite", "json"] = "sqlite"
    database_path: Path = Path("./data/pura_search.db")
    corpus_file: Path | None = None

    # Search settings
    excerpt_max_length: int = Field(default=200, gt=0)
    max_query_length: int = Field(default=1000, gt=0)

    # API settings
    cors_origins: list[str] = [
        "http://localhost:3000",  # Local dev
        "http://localhost:5173",  # Vite dev server
    ]
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_json: bool = False
    log_file: Path | None = None

    @field_validator("log_level", mode="after")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """Upper-case the log level and reject unknown names."""
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def data_dir(self) -> Path:
        """Directory holding the SQLite database."""
        return self.database_path.parent

    def ensure_directories(self) -> None:
        """Create all required directories if they don't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)


# Global settings instance
settings = Settings()
