"""Helper functions for embed_chunks CLI."""

from __future__ import annotations

import argparse

from common.cli_helpers import add_common_args


def parse_embed_chunks_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for embed_chunks."""

    parser = argparse.ArgumentParser(
        description=(
            "2. Call the embedding model for each chunk without an embedding and store it in the db. "
            "Requires OPENAI_API_KEY."
        ),
    )
    parser.add_argument(
        "--model",
        default=None,
        help="Embedding model (default: providers.embedding_model from config)",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Discard stored embeddings and recompute all of them",
    )
    add_common_args(parser)

    return parser.parse_args(argv)
