"""Strategies for finding content related to a stored record."""

from abc import ABC, abstractmethod
from typing import List
import logging

from trace_kb.domain.models import ContentKind, SearchResult
from trace_kb.retrieval.ranker import QueryRanker
from trace_kb.storage.base import RecordStore

logger = logging.getLogger(__name__)


class RelatedContentStrategy(ABC):
    """Finds records related to a given record."""

    @abstractmethod
    def find_related(
        self,
        store: RecordStore,
        content_id: int,
        kind: ContentKind,
        limit: int
    ) -> List[SearchResult]:
        """Return at most `limit` related results, best first."""
        pass


class NoRelatedContent(RelatedContentStrategy):
    """Placeholder strategy that never finds anything."""

    def find_related(self, store, content_id, kind, limit):
        return []


class TitleMatchRelated(RelatedContentStrategy):
    """Ranks records of the same kind against the target record's title."""

    def __init__(self, ranker: QueryRanker):
        self.ranker = ranker

    def find_related(
        self,
        store: RecordStore,
        content_id: int,
        kind: ContentKind,
        limit: int
    ) -> List[SearchResult]:
        if limit <= 0:
            return []

        target = store.get(content_id, kind)
        if not target:
            logger.debug(f"No {kind.value} with id {content_id}")
            return []

        candidates = [
            record for record in store.fetch_all(kind)
            if record.id != content_id
        ]

        return self.ranker.rank_all(candidates, target.title, limit)


def create_strategy(name: str, ranker: QueryRanker) -> RelatedContentStrategy:
    """Create a related-content strategy by its configured name."""
    if name == "none":
        return NoRelatedContent()
    elif name == "title":
        return TitleMatchRelated(ranker)
    else:
        raise ValueError(f"Unknown related content strategy: {name}")
