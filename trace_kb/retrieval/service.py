"""Retrieval entry point over a record store."""

from typing import List, Optional, Union
import logging

from trace_kb.domain.models import ContentKind, SearchResult
from trace_kb.retrieval.ranker import QueryRanker, DEFAULT_LIMIT
from trace_kb.retrieval.related import RelatedContentStrategy, NoRelatedContent
from trace_kb.storage.base import RecordStore

logger = logging.getLogger(__name__)

DEFAULT_RELATED_LIMIT = 5


class RetrievalService:
    """Searches captured content and looks up related records."""

    def __init__(
        self,
        store: RecordStore,
        ranker: Optional[QueryRanker] = None,
        related_strategy: Optional[RelatedContentStrategy] = None
    ):
        self.store = store
        self.ranker = ranker or QueryRanker()
        self.related_strategy = related_strategy or NoRelatedContent()

    def search(self, query: str, limit: int = DEFAULT_LIMIT) -> List[SearchResult]:
        """
        Search captured pages for a query.

        Store errors propagate to the caller unchanged.

        Args:
            query: Free-text query
            limit: Maximum number of results to return

        Returns:
            Ranked search results
        """
        pages = self.store.fetch_all(ContentKind.PAGE)
        logger.debug(f"Ranking {len(pages)} pages")

        return self.ranker.rank_all(pages, query, limit)

    def get_related_content(
        self,
        content_id: int,
        kind: Union[ContentKind, str],
        limit: int = DEFAULT_RELATED_LIMIT
    ) -> List[SearchResult]:
        """Find records related to the given one. Returns a list, possibly empty."""
        kind = ContentKind(kind)
        if limit <= 0:
            return []

        results = self.related_strategy.find_related(
            self.store, content_id, kind, limit
        )
        return results[:limit]
