"""Row models for the article store."""

from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass
class Article:
    """A post known to the store."""
    id: int
    title: str
    url: str
    date: Optional[str]
    filename: str
    is_draft: bool


@dataclass
class Chunk:
    """One embedding unit of an article. embedding is None until computed."""
    article_id: int
    chunk_id: int
    text: str
    embedding: Optional[np.ndarray] = None


@dataclass
class SimilarityPair:
    """Similarity of an unordered pair of articles, stored with article_a < article_b."""
    article_a: int
    article_b: int
    similarity: float


@dataclass
class RelatedCandidate:
    """A non-draft peer of an article and how similar it is."""
    article_id: int
    filename: str
    similarity: float
