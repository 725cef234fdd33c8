"""Record store interface and an in-memory implementation."""

from abc import ABC, abstractmethod
import copy
from dataclasses import replace
from typing import Dict, List, Optional
import logging

from trace_kb.domain.models import ContentKind, ContentRecord

logger = logging.getLogger(__name__)


class RecordStore(ABC):
    """Read-only view of captured content used by retrieval."""

    @abstractmethod
    def fetch_all(self, kind: ContentKind) -> List[ContentRecord]:
        """Return every record of the given kind in insertion order."""
        pass

    @abstractmethod
    def get(self, content_id: int, kind: ContentKind) -> Optional[ContentRecord]:
        """Return a single record, or None if it does not exist."""
        pass


class InMemoryRecordStore(RecordStore):
    """Record store backed by plain dictionaries."""

    def __init__(self, records: Optional[List[ContentRecord]] = None):
        self._records: Dict[ContentKind, Dict[int, ContentRecord]] = {
            kind: {} for kind in ContentKind
        }
        self._next_id = 1

        for record in records or []:
            self.add_record(record)

    def add_record(self, record: ContentRecord) -> ContentRecord:
        """Store a record and return a copy carrying its assigned id."""
        stored = replace(copy.deepcopy(record), id=self._next_id)
        self._records[record.kind][stored.id] = stored
        self._next_id += 1
        logger.info(f"Added {record.kind.value} {stored.id} to in-memory store")
        return copy.deepcopy(stored)

    def fetch_all(self, kind: ContentKind) -> List[ContentRecord]:
        return [copy.deepcopy(record) for record in self._records[kind].values()]

    def get(self, content_id: int, kind: ContentKind) -> Optional[ContentRecord]:
        return copy.deepcopy(self._records[kind].get(content_id))

    def count(self, kind: ContentKind) -> int:
        return len(self._records[kind])

    def get_statistics(self) -> dict:
        """Get statistics about the stored records."""
        return {
            'backend': 'memory',
            'total_pages': self.count(ContentKind.PAGE),
            'total_videos': self.count(ContentKind.VIDEO),
        }

    def clear_all(self) -> None:
        """Clear all records from the store."""
        for records in self._records.values():
            records.clear()
        logger.info("Cleared all records from in-memory store")
