"""Knowledge base facade that wires storage and retrieval together."""

import logging
from typing import List, Optional, Dict, Any, Union

from trace_kb.domain.models import ContentKind, ContentRecord, SearchResult
from trace_kb.application.config import Config
from trace_kb.storage import InMemoryRecordStore, SQLiteRecordStore
from trace_kb.retrieval import QueryRanker, RetrievalService
from trace_kb.retrieval.related import create_strategy

logger = logging.getLogger(__name__)


class KnowledgeBase:
    """Main entry point for searching captured content."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()
        self._setup_logging()

        self.store = None
        self.service: Optional[RetrievalService] = None

        self._initialized = False

    def _setup_logging(self):
        """Setup logging configuration."""
        logging.basicConfig(
            level=getattr(logging, self.config.log_level.upper()),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            filename=self.config.log_file
        )

    def initialize(self) -> None:
        """Initialize all components."""
        if self._initialized:
            return

        logger.info("Initializing knowledge base...")

        self.store = self._create_store()

        ranker = QueryRanker()
        self.service = RetrievalService(
            self.store,
            ranker=ranker,
            related_strategy=create_strategy(self.config.search.related_strategy, ranker)
        )

        self._initialized = True
        logger.info("Knowledge base initialized successfully")

    def _create_store(self):
        """Create the record store based on configuration."""
        if self.config.storage.backend == "memory":
            return InMemoryRecordStore()
        elif self.config.storage.backend == "sqlite":
            return SQLiteRecordStore(self.config.storage.db_path)
        else:
            raise ValueError(f"Unknown storage backend: {self.config.storage.backend}")

    def search(self, query: str, limit: Optional[int] = None) -> List[SearchResult]:
        """Search captured pages."""
        if not self._initialized:
            self.initialize()

        if limit is None:
            limit = self.config.search.default_limit

        return self.service.search(query, limit)

    def related(
        self,
        content_id: int,
        kind: Union[ContentKind, str] = ContentKind.PAGE,
        limit: Optional[int] = None
    ) -> List[SearchResult]:
        """Find content related to a stored record."""
        if not self._initialized:
            self.initialize()

        if limit is None:
            limit = self.config.search.related_limit

        return self.service.get_related_content(content_id, kind, limit)

    def add_record(self, record: ContentRecord) -> ContentRecord:
        """Store a captured record."""
        if not self._initialized:
            self.initialize()

        return self.store.add_record(record)

    def get_statistics(self) -> Dict[str, Any]:
        """Get knowledge base statistics."""
        if not self._initialized:
            self.initialize()

        return {
            'store': self.store.get_statistics(),
            'search': self.config.get_search_config()
        }
