"""CLI for writing related articles into post front matter."""

from __future__ import annotations

import logging

from dotenv import load_dotenv

from article_store.connection import get_session
from common.cli_helpers import resolve_db_path, setup_logging
from common.config import load_config
from common.progress import TqdmProgress
from write_related.helpers import format_dry_run, parse_write_related_args
from write_related.write_related import write_related

load_dotenv()

setup_logging()
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    args = parse_write_related_args(argv)
    config = load_config(args.config)
    db_path = resolve_db_path(args.db_path, config)

    limit = args.limit if args.limit is not None else config.similarity.related_limit
    min_similarity = (
        args.min_similarity if args.min_similarity is not None else config.similarity.min_similarity
    )

    with get_session(db_path) as session:
        updates = write_related(
            session,
            args.directory,
            dry_run=args.dry_run,
            backup=not args.no_backup,
            limit=limit,
            min_similarity=min_similarity,
            progress=None if args.dry_run else TqdmProgress(unit="post"),
        )

    if args.dry_run:
        for update in updates:
            print(format_dry_run(update))
        logger.info("Dry run: %d posts would be updated", len(updates))
        return

    for update in updates:
        logger.info("  %s -> %s", update.filename, ", ".join(update.related))
    logger.info("Updated %d posts", len(updates))


if __name__ == "__main__":
    main()
