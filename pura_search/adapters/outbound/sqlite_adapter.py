"""SQLite adapter for storing and loading educational content."""

import logging
import sqlite3
from contextlib import closing
from datetime import UTC, datetime
from pathlib import Path

from ...core.domain import ContentCategory, ContentUpdate, EducationalContent, NewContent
from ...core.domain.exceptions import ContentStorageError, CorpusUnavailableError
from ...core.ports.corpus_port import ContentRepositoryPort

logger = logging.getLogger(__name__)

_CATEGORY_VALUES = ", ".join(f"'{category.value}'" for category in ContentCategory)

_SELECT_COLUMNS = "id, title, category, content, created_at, updated_at"


class SQLiteContentAdapter(ContentRepositoryPort):
    """Adapter for SQLite-backed educational content."""

    def __init__(self, db_path: str | Path = "data/pura_search.db") -> None:
        """Initialize the SQLite adapter.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = Path(db_path)
        self._ensure_db_dir()
        self._init_db()

    def _ensure_db_dir(self) -> None:
        """Ensure the database directory exists."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_db(self) -> None:
        """Initialize the database schema."""
        try:
            with closing(self._connect()) as conn, conn:
                cursor = conn.cursor()

                cursor.execute(f"""
                    CREATE TABLE IF NOT EXISTS educational_content (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        title TEXT NOT NULL,
                        category TEXT NOT NULL CHECK (category IN ({_CATEGORY_VALUES})),
                        content TEXT NOT NULL,
                        created_at TEXT NOT NULL,
                        updated_at TEXT NOT NULL
                    )
                """)

                cursor.execute("""
                    CREATE INDEX IF NOT EXISTS idx_educational_content_category
                    ON educational_content(category)
                """)

        except sqlite3.Error as e:
            logger.error(f"Failed to initialize database: {e}")
            raise ContentStorageError(
                "Failed to initialize content database",
                cause=e,
                context={"db_path": str(self.db_path)},
            )

    @staticmethod
    def _row_to_content(row: sqlite3.Row) -> EducationalContent:
        return EducationalContent(
            id=row["id"],
            title=row["title"],
            category=ContentCategory(row["category"]),
            content=row["content"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )

    def list_content(self, category: ContentCategory | None = None) -> list[EducationalContent]:
        """Load articles in insertion order.

        Args:
            category: Only return articles in this category.

        Returns:
            List of articles.

        Raises:
            CorpusUnavailableError: If the database cannot be read.
        """
        query = f"SELECT {_SELECT_COLUMNS} FROM educational_content"
        params: tuple[str, ...] = ()
        if category is not None:
            query += " WHERE category = ?"
            params = (category.value,)
        query += " ORDER BY id"

        try:
            with closing(self._connect()) as conn:
                rows = conn.execute(query, params).fetchall()
        except sqlite3.Error as e:
            logger.error(f"Failed to load educational content: {e}")
            raise CorpusUnavailableError(
                "Failed to load educational content",
                cause=e,
                context={"db_path": str(self.db_path)},
            )

        return [self._row_to_content(row) for row in rows]

    def create_content(self, new_content: NewContent) -> EducationalContent:
        """Insert an article.

        Args:
            new_content: Title, category and body of the article.

        Returns:
            The stored article with id and timestamps.
        """
        return self.create_contents([new_content])[0]

    def create_contents(self, new_contents: list[NewContent]) -> list[EducationalContent]:
        """Insert several articles in a single transaction.

        Either every article is stored or, on failure, none is.

        Args:
            new_contents: Articles to store, in insertion order.

        Returns:
            The stored articles with ids and timestamps.

        Raises:
            ContentStorageError: If any insert fails.
        """
        now = datetime.now(UTC).isoformat()
        content_ids: list[int] = []
        try:
            with closing(self._connect()) as conn, conn:
                for new_content in new_contents:
                    cursor = conn.execute(
                        """
                        INSERT INTO educational_content
                            (title, category, content, created_at, updated_at)
                        VALUES (?, ?, ?, ?, ?)
                        """,
                        (
                            new_content.title,
                            new_content.category.value,
                            new_content.content,
                            now,
                            now,
                        ),
                    )
                    content_ids.append(cursor.lastrowid)
        except sqlite3.Error as e:
            logger.error(f"Failed to insert educational content: {e}")
            raise ContentStorageError(
                "Failed to store educational content",
                cause=e,
                context={"count": len(new_contents)},
            )

        logger.debug(f"Stored {len(content_ids)} educational content rows")
        created = [self.get_content(content_id) for content_id in content_ids]
        missing = [cid for cid, content in zip(content_ids, created) if content is None]
        if missing:
            raise ContentStorageError(
                "Stored educational content could not be read back",
                context={"ids": missing},
            )
        return created

    def get_content(self, content_id: int) -> EducationalContent | None:
        """Get an article by id.

        Args:
            content_id: Article id.

        Returns:
            The article, or None if it does not exist.
        """
        try:
            with closing(self._connect()) as conn:
                row = conn.execute(
                    f"SELECT {_SELECT_COLUMNS} FROM educational_content WHERE id = ?",
                    (content_id,),
                ).fetchone()
        except sqlite3.Error as e:
            logger.error(f"Failed to load educational content {content_id}: {e}")
            raise CorpusUnavailableError(
                "Failed to load educational content",
                cause=e,
                context={"id": content_id},
            )

        return self._row_to_content(row) if row else None

    def update_content(
        self, content_id: int, update: ContentUpdate
    ) -> EducationalContent | None:
        """Apply a partial update. ``updated_at`` always changes.

        Args:
            content_id: Article id.
            update: Fields to change.

        Returns:
            The updated article, or None if it does not exist.
        """
        if self.get_content(content_id) is None:
            return None

        assignments = ["updated_at = ?"]
        params: list[str | int] = [datetime.now(UTC).isoformat()]
        if update.title is not None:
            assignments.append("title = ?")
            params.append(update.title)
        if update.category is not None:
            assignments.append("category = ?")
            params.append(update.category.value)
        if update.content is not None:
            assignments.append("content = ?")
            params.append(update.content)
        params.append(content_id)

        try:
            with closing(self._connect()) as conn, conn:
                conn.execute(
                    f"UPDATE educational_content SET {', '.join(assignments)} WHERE id = ?",
                    params,
                )
        except sqlite3.Error as e:
            logger.error(f"Failed to update educational content {content_id}: {e}")
            raise ContentStorageError(
                "Failed to update educational content",
                cause=e,
                context={"id": content_id},
            )

        return self.get_content(content_id)

    def delete_content(self, content_id: int) -> bool:
        """Delete an article.

        Args:
            content_id: Article id.

        Returns:
            True if a row was deleted, False if none existed.
        """
        try:
            with closing(self._connect()) as conn, conn:
                cursor = conn.execute(
                    "DELETE FROM educational_content WHERE id = ?", (content_id,)
                )
                return cursor.rowcount > 0
        except sqlite3.Error as e:
            logger.error(f"Failed to delete educational content {content_id}: {e}")
            raise ContentStorageError(
                "Failed to delete educational content",
                cause=e,
                context={"id": content_id},
            )

