"""Split post bodies into embedding-sized chunks."""

from __future__ import annotations

from typing import Sequence

CHUNK_SIZE = 2000
MIN_CHUNK = 2500


def build_header(title: str, date: str | None) -> str:
    """Title and date lines repeated at the top of every chunk."""
    return "\n".join([title, date or ""])


def find_split(body: str, chunk_size: int = CHUNK_SIZE) -> int:
    """First space at or after chunk_size, or the end of body."""
    split_pos = body.find(" ", chunk_size)
    return split_pos if split_pos != -1 else len(body)


def chunk_body(
    body: str,
    header: str | Sequence[str],
    chunk_size: int = CHUNK_SIZE,
    min_chunk: int = MIN_CHUNK,
) -> list[str]:
    """
    Cut a post body into chunks of roughly chunk_size characters.

    Each chunk is the header, a blank line, then a slice of the body. Slices
    end just before a space so no word is split, and together they are
    exactly the original body. The last chunk holds whatever remains, so a
    body of min_chunk characters or fewer gives a single chunk.

    Args:
        body: Post body without front matter
        header: Header text, or its lines (title, date)
        chunk_size: Offset at which to start looking for a split point
        min_chunk: Keep splitting while more than this many characters remain

    Returns:
        Non-empty list of chunk texts
    """
    if not isinstance(header, str):
        header = "\n".join(header)
    prefix = f"{header}\n\n"

    chunks = []
    while len(body) > min_chunk:
        split_pos = find_split(body, chunk_size)
        chunks.append(prefix + body[:split_pos])
        body = body[split_pos:]

    chunks.append(prefix + body)
    return chunks

