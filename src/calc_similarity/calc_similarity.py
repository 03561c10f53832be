"""Compute and store pairwise similarity for all non-draft articles."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from article_store.connection import ensure_schema
from article_store.repository import load_active_articles, load_embeddings, upsert_similarity
from calc_similarity.similarity import iter_similarity_batches
from common.progress import ProgressReporter, get_progress

logger = logging.getLogger(__name__)


def calc_similarities(session: Session, progress: ProgressReporter | None = None) -> int:
    """
    Compare every pair of non-draft articles and upsert the results.

    Embeddings are loaded once per article. Pairs are committed one article
    at a time; rerunning overwrites the stored values.

    Raises:
        EmptyComparisonError: If an article has no embedded chunks
        EmbeddingDimensionError: If two articles were embedded with different dimensions

    Returns:
        Number of pairs written
    """
    ensure_schema(session)
    progress = get_progress(progress)

    articles = load_active_articles(session)
    logger.info("Calculating similarity for %d non-draft articles", len(articles))

    vectors_by_id = {article.id: load_embeddings(session, article) for article in articles}
    names = {article.id: article.filename for article in articles}

    count = 0
    progress.start(len(articles), "Comparing")
    try:
        for article_id, batch in iter_similarity_batches(vectors_by_id, names):
            for pair in batch:
                upsert_similarity(session, pair.article_a, pair.article_b, pair.similarity)
                logger.debug(
                    "%d: %s %s -> %.4f",
                    count,
                    names[pair.article_a],
                    names[pair.article_b],
                    pair.similarity,
                )
                count += 1
            session.commit()
            progress.advance(names[article_id])
    finally:
        progress.close()

    logger.info("Stored %d article pairs", count)
    return count
