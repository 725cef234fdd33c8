"""Domain models for captured content and search results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Any

PREVIEW_LENGTH = 500


class ContentKind(Enum):
    """Kinds of captured content."""
    PAGE = "page"
    VIDEO = "video"


@dataclass
class ContentRecord:
    """A piece of captured content held by a record store."""

    title: str
    url: str
    content: str = ""
    summary: Optional[str] = None
    timestamp: int = 0
    id: Optional[int] = None

    kind = None

    def __post_init__(self):
        """Validate the record after initialization."""
        if self.kind is None:
            raise TypeError("ContentRecord is abstract; use Page or Video")

        if not self.title:
            raise ValueError("Content record title cannot be empty")


@dataclass
class Page(ContentRecord):
    """A captured web page."""

    favicon: Optional[str] = None
    tags: List[str] = field(default_factory=list)

    kind = ContentKind.PAGE


@dataclass
class Video(ContentRecord):
    """A captured video. Its transcript is the searchable content."""

    video_id: str = ""
    transcript: Optional[str] = None
    duration: Optional[int] = None
    thumbnail: Optional[str] = None

    kind = ContentKind.VIDEO

    def __post_init__(self):
        super().__post_init__()
        if not self.content and self.transcript:
            self.content = self.transcript


@dataclass
class SearchResult:
    """A ranked hit returned to callers; never persisted."""

    id: int
    title: str
    content: str
    url: str
    score: int
    kind: ContentKind = ContentKind.PAGE

    @classmethod
    def from_record(cls, record: ContentRecord, score: int) -> "SearchResult":
        """Build a result from a record, cutting the content down to a preview."""
        return cls(
            id=record.id,
            title=record.title,
            content=record.content[:PREVIEW_LENGTH],
            url=record.url,
            score=score,
            kind=record.kind,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "url": self.url,
            "score": self.score,
            "kind": self.kind.value,
        }
