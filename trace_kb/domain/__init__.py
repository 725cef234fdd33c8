"""Domain models for the knowledge base."""

from .models import ContentKind, ContentRecord, Page, Video, SearchResult, PREVIEW_LENGTH
from .errors import KnowledgeBaseError, StoreUnavailable

__all__ = [
    "ContentKind",
    "ContentRecord",
    "Page",
    "Video",
    "SearchResult",
    "PREVIEW_LENGTH",
    "KnowledgeBaseError",
    "StoreUnavailable",
]
