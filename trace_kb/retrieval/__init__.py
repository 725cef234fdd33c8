"""Retrieval and ranking modules."""

from .ranker import QueryRanker, normalize_query
from .related import RelatedContentStrategy, NoRelatedContent, TitleMatchRelated
from .service import RetrievalService

__all__ = [
    "QueryRanker",
    "normalize_query",
    "RelatedContentStrategy",
    "NoRelatedContent",
    "TitleMatchRelated",
    "RetrievalService",
]
