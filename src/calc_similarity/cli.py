"""CLI for calculating pairwise article similarity."""

from __future__ import annotations

import logging

from dotenv import load_dotenv

from article_store.connection import get_session
from calc_similarity.calc_similarity import calc_similarities
from calc_similarity.helpers import parse_calc_similarity_args
from common.cli_helpers import resolve_db_path, setup_logging
from common.config import load_config
from common.progress import TqdmProgress

load_dotenv()

setup_logging()
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    args = parse_calc_similarity_args(argv)
    if args.verbose:
        logging.getLogger("calc_similarity").setLevel(logging.DEBUG)

    config = load_config(args.config)
    db_path = resolve_db_path(args.db_path, config)

    # Per-pair lines would fight with the progress bar
    progress = None if args.verbose else TqdmProgress()
    with get_session(db_path) as session:
        count = calc_similarities(session, progress=progress)

    logger.info("Similarity complete: %d pairs in %s", count, db_path)


if __name__ == "__main__":
    main()
