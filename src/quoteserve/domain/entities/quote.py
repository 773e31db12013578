"""Quote entity."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Quote:
    """Quote with author, tags, provenance and a like counter."""

    id: str
    content: str
    author: str
    source: str
    created_at: datetime
    updated_at: datetime
    tags: list[str] = field(default_factory=list)
    likes: int = 0
