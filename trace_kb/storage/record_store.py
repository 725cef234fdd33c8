"""SQLite-based storage for captured pages and videos."""

import sqlite3
from pathlib import Path
from typing import List, Optional
import json
import logging
from contextlib import contextmanager

from trace_kb.domain.errors import StoreUnavailable
from trace_kb.domain.models import ContentKind, ContentRecord, Page, Video
from trace_kb.storage.base import RecordStore

logger = logging.getLogger(__name__)

TABLES = {
    ContentKind.PAGE: "pages",
    ContentKind.VIDEO: "videos",
}


class SQLiteRecordStore(RecordStore):
    """SQLite storage for captured content records."""

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreUnavailable(f"Could not create {self.db_path.parent}: {e}") from e
        self._init_db()

    def _init_db(self):
        """Initialize the database schema."""
        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS pages (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    url TEXT NOT NULL,
                    title TEXT NOT NULL,
                    content TEXT NOT NULL DEFAULT '',
                    summary TEXT,
                    timestamp INTEGER NOT NULL DEFAULT 0,
                    favicon TEXT,
                    tags TEXT
                )
            """)

            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_pages_url ON pages(url)
            """)

            conn.execute("""
                CREATE TABLE IF NOT EXISTS videos (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    url TEXT NOT NULL,
                    title TEXT NOT NULL,
                    video_id TEXT,
                    content TEXT NOT NULL DEFAULT '',
                    transcript TEXT,
                    summary TEXT,
                    timestamp INTEGER NOT NULL DEFAULT 0,
                    duration INTEGER,
                    thumbnail TEXT
                )
            """)

            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_videos_video_id ON videos(video_id)
            """)

            conn.commit()

    @contextmanager
    def _get_connection(self):
        """Get a database connection, translating SQLite failures."""
        try:
            conn = sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            raise StoreUnavailable(f"Could not open {self.db_path}: {e}") from e

        conn.row_factory = sqlite3.Row
        try:
            yield conn
        except sqlite3.Error as e:
            raise StoreUnavailable(f"Record store operation failed: {e}") from e
        finally:
            conn.close()

    def add_record(self, record: ContentRecord) -> ContentRecord:
        """Insert a record and return it with its assigned id."""
        with self._get_connection() as conn:
            if isinstance(record, Video):
                cursor = conn.execute("""
                    INSERT INTO videos (
                        url, title, video_id, content, transcript, summary,
                        timestamp, duration, thumbnail
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """, (
                    record.url,
                    record.title,
                    record.video_id,
                    record.content,
                    record.transcript,
                    record.summary,
                    record.timestamp,
                    record.duration,
                    record.thumbnail
                ))
            else:
                cursor = conn.execute("""
                    INSERT INTO pages (
                        url, title, content, summary, timestamp, favicon, tags
                    ) VALUES (?, ?, ?, ?, ?, ?, ?)
                """, (
                    record.url,
                    record.title,
                    record.content,
                    record.summary,
                    record.timestamp,
                    getattr(record, 'favicon', None),
                    json.dumps(getattr(record, 'tags', []))
                ))

            conn.commit()
            record_id = cursor.lastrowid

        logger.info(f"Added {record.kind.value} {record_id} to record store")
        return self.get(record_id, record.kind)

    def fetch_all(self, kind: ContentKind) -> List[ContentRecord]:
        """Get every record of a kind, oldest id first."""
        with self._get_connection() as conn:
            cursor = conn.execute(
                f"SELECT * FROM {TABLES[kind]} ORDER BY id"
            )
            return [self._row_to_record(row, kind) for row in cursor]

    def get(self, content_id: int, kind: ContentKind) -> Optional[ContentRecord]:
        """Get a single record by ID."""
        with self._get_connection() as conn:
            row = conn.execute(
                f"SELECT * FROM {TABLES[kind]} WHERE id = ?", (content_id,)
            ).fetchone()

            if row:
                return self._row_to_record(row, kind)
            return None

    def count(self, kind: ContentKind) -> int:
        with self._get_connection() as conn:
            return conn.execute(
                f"SELECT COUNT(*) FROM {TABLES[kind]}"
            ).fetchone()[0]

    def get_statistics(self) -> dict:
        """Get statistics about the stored records."""
        with self._get_connection() as conn:
            summarized = conn.execute("""
                SELECT COUNT(*) FROM pages WHERE summary IS NOT NULL
            """).fetchone()[0]

        return {
            'backend': 'sqlite',
            'db_path': str(self.db_path),
            'total_pages': self.count(ContentKind.PAGE),
            'total_videos': self.count(ContentKind.VIDEO),
            'summarized_pages': summarized
        }

    def _row_to_record(self, row: sqlite3.Row, kind: ContentKind) -> ContentRecord:
        """Convert a database row to a content record."""
        if kind == ContentKind.VIDEO:
            return Video(
                id=row['id'],
                url=row['url'],
                title=row['title'],
                video_id=row['video_id'] or "",
                content=row['content'],
                transcript=row['transcript'],
                summary=row['summary'],
                timestamp=row['timestamp'],
                duration=row['duration'],
                thumbnail=row['thumbnail']
            )

        return Page(
            id=row['id'],
            url=row['url'],
            title=row['title'],
            content=row['content'],
            summary=row['summary'],
            timestamp=row['timestamp'],
            favicon=row['favicon'],
            tags=json.loads(row['tags']) if row['tags'] else []
        )

    def clear_all(self) -> None:
        """Clear all records from the store."""
        with self._get_connection() as conn:
            conn.execute("DELETE FROM pages")
            conn.execute("DELETE FROM videos")
            conn.commit()
            logger.info("Cleared all records from record store")
