"""Cosine similarity between articles from their chunk embeddings."""

from __future__ import annotations

from typing import Iterator, Mapping, Sequence

import numpy as np

from article_store.models import SimilarityPair
from common.errors import EmbeddingDimensionError, EmptyComparisonError


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine similarity between two vectors. Zero vectors give 0.0."""
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.shape != b.shape:
        raise EmbeddingDimensionError(f"Vectors have different lengths: {a.size} and {b.size}")
    norm_a = np.linalg.norm(a)
    norm_b = np.linalg.norm(b)
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return float(np.dot(a, b) / (norm_a * norm_b))


def _unit_rows(vectors: np.ndarray) -> np.ndarray:
    norms = np.linalg.norm(vectors, axis=1, keepdims=True)
    norms[norms == 0] = 1.0
    return vectors / norms


def pair_similarity(
    a_vectors: np.ndarray | Sequence[Sequence[float]],
    b_vectors: np.ndarray | Sequence[Sequence[float]],
    a_name: str = "a",
    b_name: str = "b",
) -> float:
    """
    Mean cosine similarity over every (chunk of a, chunk of b) pair.

    Args:
        a_vectors: Embedded chunks of the first article, one row per chunk
        b_vectors: Embedded chunks of the second article
        a_name: Name of the first article for error messages
        b_name: Name of the second article for error messages

    Raises:
        EmptyComparisonError: If either article has no embedded chunks
        EmbeddingDimensionError: If the two articles' embeddings differ in length
    """
    a = np.atleast_2d(np.asarray(a_vectors, dtype=np.float64))
    b = np.atleast_2d(np.asarray(b_vectors, dtype=np.float64))

    for name, vectors in ((a_name, a), (b_name, b)):
        if vectors.size == 0:
            raise EmptyComparisonError(f"{name} has no embedded chunks; run the embed stage first")

    if a.shape[1] != b.shape[1]:
        raise EmbeddingDimensionError(
            f"Embedding dimensions differ: {a_name} has {a.shape[1]}, {b_name} has {b.shape[1]}"
        )

    cross = _unit_rows(a) @ _unit_rows(b).T
    return float(cross.mean())


def iter_similarity_batches(
    vectors_by_id: Mapping[int, np.ndarray],
    names: Mapping[int, str] | None = None,
) -> Iterator[tuple[int, list[SimilarityPair]]]:
    """
    Yield (article id, pairs with every later article) in id order.

    Each unordered pair appears exactly once, as (a, b) with a < b.
    """
    names = names or {}
    ids = sorted(vectors_by_id)
    for idx, a in enumerate(ids):
        batch = []
        for b in ids[idx + 1:]:
            similarity = pair_similarity(
                vectors_by_id[a],
                vectors_by_id[b],
                a_name=names.get(a, str(a)),
                b_name=names.get(b, str(b)),
            )
            batch.append(SimilarityPair(article_a=a, article_b=b, similarity=similarity))
        yield a, batch


def corpus_similarity(
    vectors_by_id: Mapping[int, np.ndarray],
    names: Mapping[int, str] | None = None,
) -> list[SimilarityPair]:
    """Similarity of every unordered pair of distinct articles, each computed once."""
    return [pair for _, batch in iter_similarity_batches(vectors_by_id, names) for pair in batch]
