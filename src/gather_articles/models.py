"""Data models for gather_articles pipeline stage."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ParsedArticle:
    """Post read from disk, chunked and ready to store."""
    filename: str
    title: str
    url: str
    date: Optional[str]
    is_draft: bool
    chunks: list[str] = field(default_factory=list)


@dataclass
class GatheredArticle:
    """Result of storing one post."""
    id: int
    filename: str
    is_draft: bool
    chunk_count: int
    new_chunks: int
    changed_chunks: int
