"""Core embedding logic: fill in missing chunk embeddings."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from sqlalchemy.orm import Session

from article_store.connection import ensure_schema
from article_store.repository import clear_embeddings, load_active_articles, load_chunks, save_embedding
from common.progress import ProgressReporter, get_progress

logger = logging.getLogger(__name__)

EmbedFn = Callable[[str], Sequence[float]]


def embed_articles(
    session: Session,
    embed_fn: EmbedFn,
    force: bool = False,
    progress: ProgressReporter | None = None,
) -> int:
    """
    Compute embeddings for every non-draft chunk that doesn't have one yet.

    Each article is its own transaction, so a failure part way through keeps
    the embeddings already committed and a rerun carries on from there.

    Args:
        session: Article store session
        embed_fn: Returns the embedding vector for a chunk text
        force: Clear all stored embeddings first and recompute everything
        progress: Optional progress reporter

    Returns:
        Number of chunks embedded
    """
    ensure_schema(session)
    progress = get_progress(progress)

    if force:
        cleared = clear_embeddings(session)
        session.commit()
        logger.info("Cleared %d stored embeddings", cleared)

    articles = load_active_articles(session)
    logger.info("Embedding %d non-draft articles", len(articles))

    embedded = 0
    skipped = 0
    progress.start(len(articles), "Embedding")
    try:
        for article in articles:
            for chunk in load_chunks(session, article.id):
                if chunk.embedding is not None:
                    skipped += 1
                    continue
                vector = embed_fn(chunk.text)
                save_embedding(session, article.id, chunk.chunk_id, vector)
                embedded += 1
            session.commit()
            progress.advance(article.title)
    finally:
        progress.close()

    logger.info("Embedded %d chunks (%d already had embeddings)", embedded, skipped)
    return embedded
