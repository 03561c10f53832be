"""Helper functions for calc_similarity CLI."""

from __future__ import annotations

import argparse

from common.cli_helpers import add_common_args


def parse_calc_similarity_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for calc_similarity."""

    parser = argparse.ArgumentParser(
        description="3. Compare all non-draft articles pair-wise and store the results in the db",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every pair as it is computed",
    )
    add_common_args(parser)

    return parser.parse_args(argv)
