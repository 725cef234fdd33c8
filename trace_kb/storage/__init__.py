"""Record stores for captured content."""

from .base import RecordStore, InMemoryRecordStore
from .record_store import SQLiteRecordStore

__all__ = ["RecordStore", "InMemoryRecordStore", "SQLiteRecordStore"]
