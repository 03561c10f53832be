"""Helper functions for write_related CLI."""

from __future__ import annotations

import argparse
import shutil

from common.cli_helpers import add_common_args, directory_arg, fraction_arg, positive_int_arg
from write_related.models import RelatedUpdate


def parse_write_related_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for write_related."""

    parser = argparse.ArgumentParser(
        description=(
            "4. Write a list of related articles to the front matter of each post. "
            "Backup your files first!"
        ),
    )
    parser.add_argument(
        "directory",
        type=directory_arg,
        help="Directory with the Markdown posts",
    )
    parser.add_argument(
        "--no-backup",
        action="store_true",
        help="Do not back up each file as a .BAK before rewriting it",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Don't change anything, print the new documents to stdout",
    )
    parser.add_argument(
        "--limit",
        type=positive_int_arg,
        default=None,
        help="Maximum related articles per post (default: similarity.related_limit from config)",
    )
    parser.add_argument(
        "--min-similarity",
        type=fraction_arg,
        default=None,
        help="Lowest similarity that counts as related (default: similarity.min_similarity from config)",
    )
    add_common_args(parser)

    return parser.parse_args(argv)


def format_dry_run(update: RelatedUpdate, width: int | None = None) -> str:
    """Banner with the filename followed by the document that would be written."""
    if width is None:
        width = shutil.get_terminal_size().columns
    fill = "+" * max((width - (len(update.filename) + 2)) // 2, 3)
    return f"\n\n{fill} {update.filename} {fill}\n{update.document}"
