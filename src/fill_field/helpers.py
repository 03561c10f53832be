"""Helper functions for fill_field CLI."""

from __future__ import annotations

import argparse

from common.cli_helpers import add_common_args, directory_arg
from fill_field.fill_field import ModelChoice
from fill_field.prompts import PROMPTS_BY_KIND


def parse_fill_field_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for fill_field."""

    parser = argparse.ArgumentParser(
        description="Fill a front matter field (synopsis or tagline) on each post using a chat model",
    )
    parser.add_argument(
        "directory",
        type=directory_arg,
        help="Directory with the Markdown posts",
    )
    parser.add_argument(
        "--kind",
        required=True,
        choices=sorted(PROMPTS_BY_KIND),
        help="Which field to generate",
    )
    parser.add_argument(
        "--model",
        required=True,
        type=ModelChoice,
        choices=list(ModelChoice),
        metavar="{" + ",".join(choice.value for choice in ModelChoice) + "}",
        help="Big model (gpt-4o, claude-3-5-sonnet) or small model (gpt-4o-mini, claude-3-haiku)",
    )
    parser.add_argument(
        "--no-backup",
        action="store_true",
        help="Do not back up each file as a .BAK before rewriting it",
    )
    add_common_args(parser, with_db=False)

    return parser.parse_args(argv)
