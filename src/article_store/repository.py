"""Queries and upserts against the article store.

Every write here is an idempotent upsert: re-gathering unchanged posts or
re-running the calc stage never duplicates rows. A chunk's embedding is
cleared only when its text changes, which is the one place the embedding
cache is invalidated (besides an explicit clear_embeddings).
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
from sqlalchemy import text
from sqlalchemy.orm import Session

from article_store.codec import decode_embedding, encode_embedding
from article_store.models import Article, Chunk, RelatedCandidate, SimilarityPair
from common.errors import EmbeddingDimensionError, EmbeddingFormatError

logger = logging.getLogger(__name__)


def upsert_article(
    session: Session,
    filename: str,
    title: str,
    url: str,
    date: str | None,
    is_draft: bool,
) -> int:
    """Insert an article or update it in place by filename. Returns its id."""
    session.execute(
        text(
            """
            INSERT INTO article (filename, title, url, date, is_draft)
            VALUES (:filename, :title, :url, :date, :is_draft)
            ON CONFLICT (filename) DO UPDATE SET
                title = excluded.title,
                url = excluded.url,
                date = excluded.date,
                is_draft = excluded.is_draft
            """
        ),
        {"filename": filename, "title": title, "url": url, "date": date, "is_draft": bool(is_draft)},
    )
    return session.execute(
        text("SELECT id FROM article WHERE filename = :filename"),
        {"filename": filename},
    ).scalar_one()


def upsert_chunks(session: Session, article_id: int, chunks: Sequence[str]) -> tuple[int, int]:
    """
    Store the chunk texts of an article by ordinal.

    Unchanged chunks are left alone and keep their embedding. A changed chunk
    gets the new text and loses its embedding. Chunks are never deleted.

    Returns:
        Tuple of (inserted, changed) chunk counts
    """
    existing = {
        row.chunk_id: row.text
        for row in session.execute(
            text("SELECT chunk_id, text FROM article_chunk WHERE article_id = :article_id"),
            {"article_id": article_id},
        )
    }

    rows = []
    inserted = 0
    changed = 0
    for chunk_id, chunk_text in enumerate(chunks):
        if chunk_id not in existing:
            inserted += 1
        elif existing[chunk_id] != chunk_text:
            changed += 1
        else:
            continue
        rows.append({"article_id": article_id, "chunk_id": chunk_id, "text": chunk_text})

    if rows:
        session.execute(
            text(
                """
                INSERT INTO article_chunk (article_id, chunk_id, text)
                VALUES (:article_id, :chunk_id, :text)
                ON CONFLICT (article_id, chunk_id) DO UPDATE SET
                    text = excluded.text,
                    embed = NULL
                WHERE article_chunk.text != excluded.text
                """
            ),
            rows,
        )
        logger.debug("Article %d: %d new chunks, %d changed chunks", article_id, inserted, changed)
    return inserted, changed


def _to_article(row) -> Article:
    return Article(
        id=row.id,
        title=row.title,
        url=row.url,
        date=row.date,
        filename=row.filename,
        is_draft=bool(row.is_draft),
    )


def load_active_articles(session: Session) -> list[Article]:
    """All non-draft articles, ordered by id."""
    rows = session.execute(
        text(
            """
            SELECT id, title, url, date, filename, is_draft
            FROM article
            WHERE NOT is_draft
            ORDER BY id
            """
        )
    )
    return [_to_article(row) for row in rows]


def load_article(session: Session, filename: str) -> Article | None:
    row = session.execute(
        text(
            """
            SELECT id, title, url, date, filename, is_draft
            FROM article
            WHERE filename = :filename
            """
        ),
        {"filename": filename},
    ).first()
    return _to_article(row) if row is not None else None


def _decode(blob, article_id: int, chunk_id: int) -> np.ndarray | None:
    if blob is None:
        return None
    try:
        return decode_embedding(blob)
    except EmbeddingFormatError as exc:
        raise EmbeddingFormatError(f"article {article_id} chunk {chunk_id}: {exc}") from exc


def load_chunks(session: Session, article_id: int) -> list[Chunk]:
    """Chunks of an article by ordinal; embedding is None when not yet computed."""
    rows = session.execute(
        text(
            """
            SELECT chunk_id, text, embed
            FROM article_chunk
            WHERE article_id = :article_id
            ORDER BY chunk_id
            """
        ),
        {"article_id": article_id},
    )
    return [
        Chunk(
            article_id=article_id,
            chunk_id=row.chunk_id,
            text=row.text,
            embedding=_decode(row.embed, article_id, row.chunk_id),
        )
        for row in rows
    ]


def load_embeddings(session: Session, article: Article) -> np.ndarray:
    """
    Stack the embedded chunks of an article into a (chunks x dimension) matrix.

    Chunks without an embedding are left out; an article with none gives a
    (0, 0) matrix.

    Raises:
        EmbeddingDimensionError: If the article's chunks have different dimensions
    """
    vectors = [chunk.embedding for chunk in load_chunks(session, article.id) if chunk.embedding is not None]
    if not vectors:
        return np.empty((0, 0), dtype=np.float64)

    dimensions = {vector.size for vector in vectors}
    if len(dimensions) > 1:
        raise EmbeddingDimensionError(
            f"{article.filename}: chunks have mixed embedding dimensions {sorted(dimensions)}"
        )
    return np.vstack(vectors)


def save_embedding(session: Session, article_id: int, chunk_id: int, vector) -> None:
    session.execute(
        text(
            """
            UPDATE article_chunk
            SET embed = :embed
            WHERE article_id = :article_id AND chunk_id = :chunk_id
            """
        ),
        {"embed": encode_embedding(vector), "article_id": article_id, "chunk_id": chunk_id},
    )


def clear_embeddings(session: Session) -> int:
    """Forget every stored embedding so the next embed run recomputes them all."""
    result = session.execute(text("UPDATE article_chunk SET embed = NULL WHERE embed IS NOT NULL"))
    return result.rowcount or 0


def upsert_similarity(session: Session, article_a: int, article_b: int, similarity: float) -> SimilarityPair:
    """Store the similarity of an unordered pair, overwriting any previous value."""
    if article_a == article_b:
        raise ValueError(f"Cannot store similarity of article {article_a} with itself")
    low, high = sorted((article_a, article_b))
    session.execute(
        text(
            """
            INSERT INTO article_similarity (article_a, article_b, similarity)
            VALUES (:article_a, :article_b, :similarity)
            ON CONFLICT (article_a, article_b) DO UPDATE SET
                similarity = excluded.similarity
            """
        ),
        {"article_a": low, "article_b": high, "similarity": float(similarity)},
    )
    return SimilarityPair(article_a=low, article_b=high, similarity=float(similarity))


def load_similarities(session: Session) -> list[SimilarityPair]:
    rows = session.execute(
        text("SELECT article_a, article_b, similarity FROM article_similarity ORDER BY article_a, article_b")
    )
    return [SimilarityPair(article_a=row.article_a, article_b=row.article_b, similarity=row.similarity) for row in rows]


def load_related_candidates(session: Session, article_id: int) -> list[RelatedCandidate]:
    """Non-draft peers of an article with their similarity, most similar first."""
    rows = session.execute(
        text(
            """
            SELECT a.id, a.filename, s.similarity
            FROM article_similarity s
            JOIN article a
              ON a.id = CASE WHEN s.article_a = :article_id THEN s.article_b ELSE s.article_a END
            WHERE (s.article_a = :article_id OR s.article_b = :article_id)
              AND NOT a.is_draft
            ORDER BY s.similarity DESC, a.id
            """
        ),
        {"article_id": article_id},
    )
    return [
        RelatedCandidate(article_id=row.id, filename=row.filename, similarity=row.similarity)
        for row in rows
    ]
