"""Read Hugo posts, chunk them and record them in the article store."""

from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy.orm import Session

from article_store.connection import ensure_schema
from article_store.repository import upsert_article, upsert_chunks
from common.datetime import to_iso
from common.local_io import list_markdown_files, read_document
from common.progress import ProgressReporter, get_progress
from front_matter.front_matter import extract, split_document
from gather_articles.chunker import CHUNK_SIZE, MIN_CHUNK, build_header, chunk_body
from gather_articles.models import GatheredArticle, ParsedArticle

logger = logging.getLogger(__name__)


def parse_article(
    filepath: Path,
    contents: str,
    chunk_size: int = CHUNK_SIZE,
    min_chunk: int = MIN_CHUNK,
) -> ParsedArticle:
    """Parse a post's front matter and chunk its body."""
    source = str(filepath)
    fm, _ = extract(contents, source=source)
    _, _, body = split_document(contents, source=source)

    header = build_header(fm.title, fm.date)
    return ParsedArticle(
        filename=Path(filepath).name,
        title=fm.title,
        url=fm.url or "",
        date=to_iso(fm.date),
        is_draft=fm.draft,
        chunks=chunk_body(body, header, chunk_size=chunk_size, min_chunk=min_chunk),
    )


def gather_file(
    session: Session,
    filepath: Path,
    chunk_size: int = CHUNK_SIZE,
    min_chunk: int = MIN_CHUNK,
) -> GatheredArticle:
    """
    Store one post and its chunks.

    Re-gathering updates the article in place by filename (including the
    draft flag); unchanged chunks keep their embeddings. Does not commit.
    """
    article = parse_article(filepath, read_document(filepath), chunk_size, min_chunk)
    article_id = upsert_article(
        session,
        filename=article.filename,
        title=article.title,
        url=article.url,
        date=article.date,
        is_draft=article.is_draft,
    )
    inserted, changed = upsert_chunks(session, article_id, article.chunks)

    return GatheredArticle(
        id=article_id,
        filename=article.filename,
        is_draft=article.is_draft,
        chunk_count=len(article.chunks),
        new_chunks=inserted,
        changed_chunks=changed,
    )


def gather_directory(
    session: Session,
    directory: Path,
    chunk_size: int = CHUNK_SIZE,
    min_chunk: int = MIN_CHUNK,
    progress: ProgressReporter | None = None,
) -> list[GatheredArticle]:
    """
    Gather every Markdown post in directory, one transaction per post.

    Args:
        session: Article store session
        directory: Directory holding the posts
        chunk_size: Chunk split offset
        min_chunk: Split threshold
        progress: Optional progress reporter

    Returns:
        One GatheredArticle per post, in filename order
    """
    ensure_schema(session)
    progress = get_progress(progress)

    posts = list_markdown_files(directory)
    logger.info("Gathering %d posts from %s", len(posts), directory)

    results = []
    progress.start(len(posts), "Gathering")
    try:
        for filepath in posts:
            result = gather_file(session, filepath, chunk_size=chunk_size, min_chunk=min_chunk)
            session.commit()
            results.append(result)
            progress.advance(result.filename)
    finally:
        progress.close()

    new_chunks = sum(r.new_chunks for r in results)
    changed_chunks = sum(r.changed_chunks for r in results)
    drafts = sum(1 for r in results if r.is_draft)
    logger.info(
        "Gathered %d posts (%d drafts): %d new chunks, %d changed chunks",
        len(results),
        drafts,
        new_chunks,
        changed_chunks,
    )
    return results
