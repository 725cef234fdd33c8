"""Application layer for the knowledge base."""

from .config import Config
from .engine import KnowledgeBase

__all__ = ["Config", "KnowledgeBase"]
