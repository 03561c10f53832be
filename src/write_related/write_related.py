"""Write related-article lists into post front matter."""

from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy.orm import Session

from article_store.connection import ensure_schema
from article_store.repository import load_active_articles, load_related_candidates
from common.local_io import read_document, write_document
from common.progress import ProgressReporter, get_progress
from front_matter.front_matter import extract, render_document, split_document
from write_related.models import RelatedUpdate
from write_related.selector import MIN_SIMILARITY, RELATED_LIMIT, merge_related, related_for

logger = logging.getLogger(__name__)


def write_related(
    session: Session,
    directory: Path,
    dry_run: bool = False,
    backup: bool = True,
    limit: int = RELATED_LIMIT,
    min_similarity: float = MIN_SIMILARITY,
    progress: ProgressReporter | None = None,
) -> list[RelatedUpdate]:
    """
    Add a related list to every non-draft post that doesn't have one.

    Posts with no sufficiently similar peers, and posts that already list
    related articles, are left untouched, so running this twice changes
    nothing the second time.

    Args:
        session: Article store session
        directory: Directory holding the posts
        dry_run: Build the new documents but don't write them
        backup: Rename each original to .BAK before writing
        limit: Maximum related articles per post
        min_similarity: Lowest similarity that still counts as related
        progress: Optional progress reporter

    Returns:
        The updates made (or that would be made, for a dry run)
    """
    ensure_schema(session)
    progress = get_progress(progress)
    directory = Path(directory)

    articles = load_active_articles(session)
    logger.info("Calculating similar articles for %d non-draft posts in %s", len(articles), directory)

    updates = []
    progress.start(len(articles), "Writing")
    try:
        for article in articles:
            related = related_for(
                load_related_candidates(session, article.id),
                limit=limit,
                min_similarity=min_similarity,
            )
            if related:
                update = _update_post(directory / article.filename, related, dry_run, backup)
                if update is not None:
                    updates.append(update)
            else:
                logger.debug("No article similar enough to %s", article.filename)
            progress.advance(article.filename)
    finally:
        progress.close()

    logger.info("%s %d posts", "Would update" if dry_run else "Updated", len(updates))
    return updates


def _update_post(path: Path, related: list[str], dry_run: bool, backup: bool) -> RelatedUpdate | None:
    contents = read_document(path)
    fm, _ = extract(contents, source=str(path))

    merged = merge_related(fm.related, related)
    if merged is None:
        logger.debug("Keeping existing related list in %s", path.name)
        return None

    _, _, body = split_document(contents, source=str(path))
    fields = dict(fm.fields)
    fields["related"] = merged
    document = render_document(fields, body)

    bak = None
    if not dry_run:
        bak = write_document(path, document, backup=backup)

    return RelatedUpdate(
        filename=path.name,
        path=path,
        related=merged,
        document=document,
        written=not dry_run,
        backup=bak,
    )
