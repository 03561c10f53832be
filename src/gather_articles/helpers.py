"""Helper functions for gather_articles CLI."""

from __future__ import annotations

import argparse

from common.cli_helpers import add_common_args, directory_arg


def parse_gather_articles_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for gather_articles."""

    parser = argparse.ArgumentParser(
        description="1. Parse Markdown posts, chunk them and store them in the sqlite db",
    )
    parser.add_argument(
        "directory",
        type=directory_arg,
        help="Directory with the Markdown posts",
    )
    add_common_args(parser)

    return parser.parse_args(argv)
