"""Data models for write_related pipeline stage."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class RelatedUpdate:
    """A post whose front matter gained a related list."""
    filename: str
    path: Path
    related: list[str]
    document: str
    written: bool
    backup: Optional[Path] = None
