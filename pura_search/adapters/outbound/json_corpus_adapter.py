"""Read-only corpus provider backed by a JSON seed file."""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from ...core.domain import ContentCategory, EducationalContent, NewContent
from ...core.domain.exceptions import CorpusUnavailableError, PuraSearchError
from ...core.ports.corpus_port import CorpusProviderPort

logger = logging.getLogger(__name__)


def _parse_timestamp(value: Any, default: datetime) -> datetime:
    if not value:
        return default
    return datetime.fromisoformat(str(value))


def parse_seed_record(record: dict[str, Any]) -> NewContent:
    """Validate one seed record into a NewContent payload.

    Raises:
        KeyError: If title, category or content is missing.
        InvalidCategoryError: If the category is unknown.
    """
    return NewContent(
        title=str(record["title"]),
        category=ContentCategory.parse(record["category"]),
        content=str(record["content"]),
    )


def read_seed_file(path: Path) -> list[dict[str, Any]]:
    """Read a JSON array of article records.

    The file may also be an object with an ``items`` array.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("items", [])
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of articles in {path}")
    return data


class JSONCorpusAdapter(CorpusProviderPort):
    """Serves articles from a JSON file.

    The file is re-read on every call, so each search sees the file as it
    is at that moment. Records without an ``id`` are numbered by position
    (starting at 1). Records without timestamps get the load time.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _load(self) -> list[EducationalContent]:
        loaded_at = datetime.now(UTC)
        records = read_seed_file(self.path)

        documents = []
        for position, record in enumerate(records, start=1):
            new_content = parse_seed_record(record)
            created_at = _parse_timestamp(record.get("created_at"), loaded_at)
            documents.append(
                EducationalContent(
                    id=int(record.get("id", position)),
                    title=new_content.title,
                    category=new_content.category,
                    content=new_content.content,
                    created_at=created_at,
                    updated_at=_parse_timestamp(record.get("updated_at"), created_at),
                )
            )
        return documents

    def list_content(self, category: ContentCategory | None = None) -> list[EducationalContent]:
        """Load articles in file order.

        Raises:
            CorpusUnavailableError: If the file is missing or malformed.
        """
        try:
            documents = self._load()
        except (OSError, ValueError, KeyError, TypeError, PuraSearchError) as e:
            logger.error(f"Failed to load corpus file {self.path}: {e}")
            raise CorpusUnavailableError(
                "Failed to load corpus file",
                cause=e,
                context={"path": str(self.path)},
            )

        if category is None:
            return documents
        return [doc for doc in documents if doc.category is category]
