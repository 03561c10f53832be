"""CLI for generating synopsis / tagline front matter with a chat model."""

from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from common.cli_helpers import setup_logging
from common.config import load_config
from common.errors import ProviderError
from common.progress import TqdmProgress
from fill_field.fill_field import ModelChoice, build_chat_fn, fill_field
from fill_field.helpers import parse_fill_field_args
from fill_field.prompts import PROMPTS_BY_KIND
from providers import anthropic_client, openai_client
from providers.credentials import require_api_key

load_dotenv()

setup_logging()
logger = logging.getLogger(__name__)


def _key_env(choice: ModelChoice) -> str:
    if choice in (ModelChoice.CLAUDE_35_SONNET, ModelChoice.CLAUDE_3_HAIKU):
        return anthropic_client.API_KEY_ENV
    return openai_client.API_KEY_ENV


def main(argv: list[str] | None = None) -> None:
    args = parse_fill_field_args(argv)
    config = load_config(args.config)

    try:
        require_api_key(_key_env(args.model))
    except ProviderError as exc:
        logger.error("%s", exc)
        sys.exit(2)

    fill_field(
        args.directory,
        PROMPTS_BY_KIND[args.kind],
        build_chat_fn(args.model, config.providers),
        backup=not args.no_backup,
        min_len=config.min_field_body_len,
        progress=TqdmProgress(unit="post"),
    )


if __name__ == "__main__":
    main()
