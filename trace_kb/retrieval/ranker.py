"""Substring-based ranking of content records against a query."""

from typing import Iterable, List
import logging

from trace_kb.domain.models import ContentRecord, SearchResult

logger = logging.getLogger(__name__)

TITLE_WEIGHT = 3
CONTENT_WEIGHT = 1
SUMMARY_WEIGHT = 2

DEFAULT_LIMIT = 10


def normalize_query(query: str) -> str:
    """Case-fold a query the same way record fields are compared."""
    return query.lower()


class QueryRanker:
    """Scores and orders candidate records for a query."""

    def score_record(self, record: ContentRecord, normalized_query: str) -> int:
        """
        Score one record against an already normalized query.

        Each field that contains the query as an exact, case-insensitive
        substring adds its weight. An empty query is contained in every
        string, so it matches title and content of any record.

        Args:
            record: Candidate record
            normalized_query: Lowercased query text

        Returns:
            Sum of the matching signal weights
        """
        score = 0

        if normalized_query in record.title.lower():
            score += TITLE_WEIGHT

        if normalized_query in record.content.lower():
            score += CONTENT_WEIGHT

        if record.summary is not None and normalized_query in record.summary.lower():
            score += SUMMARY_WEIGHT

        return score

    def rank_all(
        self,
        records: Iterable[ContentRecord],
        query: str,
        limit: int = DEFAULT_LIMIT
    ) -> List[SearchResult]:
        """
        Rank candidates and return the best matches.

        Records scoring zero are dropped. Ties keep the order in which the
        candidates were given.

        Args:
            records: Candidate records in store order
            query: Raw query text
            limit: Maximum number of results; zero or less returns nothing

        Returns:
            Search results sorted by descending score
        """
        if limit <= 0:
            return []

        normalized = normalize_query(query)

        results = [
            SearchResult.from_record(record, self.score_record(record, normalized))
            for record in records
        ]
        results = [result for result in results if result.score > 0]

        # list.sort is stable, so equal scores stay in store order
        results.sort(key=lambda x: x.score, reverse=True)

        logger.debug(f"{len(results)} records matched query {query!r}")

        return results[:limit]
