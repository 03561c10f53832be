"""CLI for computing chunk embeddings."""

from __future__ import annotations

import logging
import sys
from functools import partial

from dotenv import load_dotenv

from article_store.connection import get_session
from common.cli_helpers import resolve_db_path, setup_logging
from common.config import load_config
from common.errors import ProviderError
from common.progress import TqdmProgress
from embed_chunks.embed_chunks import embed_articles
from embed_chunks.helpers import parse_embed_chunks_args
from providers.credentials import require_api_key
from providers.openai_client import API_KEY_ENV, embed

load_dotenv()

setup_logging()
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    args = parse_embed_chunks_args(argv)
    config = load_config(args.config)
    db_path = resolve_db_path(args.db_path, config)

    try:
        api_key = require_api_key(API_KEY_ENV)
    except ProviderError as exc:
        logger.error("%s", exc)
        sys.exit(2)

    model = args.model or config.providers.embedding_model
    embed_fn = partial(embed, model=model, api_key=api_key, timeout=config.providers.request_timeout)

    with get_session(db_path) as session:
        embedded = embed_articles(
            session,
            embed_fn,
            force=args.force,
            progress=TqdmProgress(),
        )

    logger.info("Embedding complete: %d chunks embedded with %s", embedded, model)


if __name__ == "__main__":
    main()
