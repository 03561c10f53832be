"""CLI for gathering posts into the article store."""

from __future__ import annotations

import logging

from dotenv import load_dotenv

from article_store.connection import get_session
from common.cli_helpers import resolve_db_path, setup_logging
from common.config import load_config
from common.progress import TqdmProgress
from gather_articles.gather_articles import gather_directory
from gather_articles.helpers import parse_gather_articles_args

load_dotenv()

setup_logging()
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    args = parse_gather_articles_args(argv)
    config = load_config(args.config)
    db_path = resolve_db_path(args.db_path, config)

    logger.info("Gathering posts from %s into %s", args.directory, db_path)
    with get_session(db_path) as session:
        gather_directory(
            session,
            args.directory,
            chunk_size=config.chunking.chunk_size,
            min_chunk=config.chunking.min_chunk,
            progress=TqdmProgress(unit="post"),
        )


if __name__ == "__main__":
    main()
