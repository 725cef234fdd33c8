"""Errors raised by the knowledge base."""


class KnowledgeBaseError(Exception):
    """Base class for all knowledge base errors."""


class StoreUnavailable(KnowledgeBaseError):
    """Raised when the record store cannot be read or written."""
