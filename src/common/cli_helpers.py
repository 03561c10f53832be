"""Common CLI helper utilities."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from common.config import Config

DB_NAME = "hugo-ai.db"
CFG_DIR = Path(".config") / "hugo-ai"


def setup_logging() -> None:
    """Configure standard logging format for CLI tools."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def add_common_args(parser: argparse.ArgumentParser, with_db: bool = True) -> None:
    """Add the --config (and optionally --db-path) options shared by every stage."""
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a YAML config file (default: $HUGO_AI_CONFIG or configs/default.yaml)",
    )
    if with_db:
        parser.add_argument(
            "--db-path",
            default=None,
            metavar="PATH",
            help=f"SQLite database path (default: ~/{CFG_DIR / DB_NAME})",
        )


def resolve_db_path(cli_value: str | None, config: Config) -> Path:
    """Pick the database path: CLI flag, then config, then ~/.config/hugo-ai/hugo-ai.db.

    The default directory is created on demand.
    """
    if cli_value:
        return Path(cli_value).expanduser()
    if config.db_path:
        return Path(config.db_path).expanduser()

    cfg_dir = Path.home() / CFG_DIR
    cfg_dir.mkdir(parents=True, exist_ok=True)
    return cfg_dir / DB_NAME


def directory_arg(value: str) -> Path:
    """argparse type for an existing directory."""
    path = Path(value).expanduser()
    if not path.is_dir():
        raise argparse.ArgumentTypeError(f"{value} is not a directory")
    return path


def fraction_arg(value: str) -> float:
    """argparse type for a similarity threshold in [-1, 1]."""
    try:
        number = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{value} is not a number") from exc
    if not -1.0 <= number <= 1.0:
        raise argparse.ArgumentTypeError("similarity must be between -1 and 1")
    return number


def positive_int_arg(value: str) -> int:
    """argparse type for a count of at least 1."""
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{value} is not an integer") from exc
    if number < 1:
        raise argparse.ArgumentTypeError(f"{value} must be at least 1")
    return number
