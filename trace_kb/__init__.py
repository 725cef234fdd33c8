"""Local knowledge-base retrieval for captured pages and videos."""

__version__ = "0.1.0"
