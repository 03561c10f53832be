"""Pick the related articles to list in a post's front matter."""

from __future__ import annotations

from pathlib import PurePath
from typing import Sequence

from article_store.models import RelatedCandidate

RELATED_LIMIT = 3
MIN_SIMILARITY = 0.4


def related_for(
    candidates: Sequence[RelatedCandidate],
    limit: int = RELATED_LIMIT,
    min_similarity: float = MIN_SIMILARITY,
) -> list[str]:
    """
    Filenames of the most similar peers, best first.

    Peers below min_similarity are dropped; a peer exactly at the threshold is
    kept. Returns an empty list when nothing qualifies.
    """
    ranked = sorted(candidates, key=lambda c: c.similarity, reverse=True)
    related = [
        PurePath(candidate.filename).name
        for candidate in ranked
        if candidate.similarity >= min_similarity
    ]
    return related[:max(limit, 0)]


def merge_related(existing: Sequence[str], related: Sequence[str]) -> list[str] | None:
    """
    The related list to write, or None to leave the post alone.

    An existing non-empty list is never replaced, and an empty result is
    never written.
    """
    if existing or not related:
        return None
    return list(related)
