"""Local file I/O utilities."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".BAK"


def list_markdown_files(directory: Path) -> list[Path]:
    """Return the Markdown posts directly inside directory, sorted by name.

    Subdirectories and .BAK backups are ignored.
    """
    return sorted(
        path for path in Path(directory).iterdir() if path.is_file() and path.suffix == ".md"
    )


def read_document(path: Path) -> str:
    with open(path, encoding="utf-8") as f:
        return f.read()


def backup_path(path: Path) -> Path:
    return Path(path).with_suffix(BACKUP_SUFFIX)


def write_document(path: Path, text: str, backup: bool = True) -> Path | None:
    """
    Replace the contents of path with text.

    With backup, the original is renamed to a .BAK sibling and a fresh file is
    created. An existing .BAK is never overwritten.

    Args:
        path: File to rewrite
        text: New file contents
        backup: Keep the original as <name>.BAK

    Returns:
        Path of the backup file, or None when writing in place

    Raises:
        FileExistsError: If the backup already exists, or the file reappears
            between the rename and the create
    """
    path = Path(path)
    bak = None
    if backup:
        bak = backup_path(path)
        if bak.exists():
            raise FileExistsError(f"Backup already exists, refusing to overwrite: {bak}")
        path.rename(bak)
        mode = "x"
    else:
        mode = "w"

    with open(path, mode, encoding="utf-8") as f:
        f.write(text)

    logger.debug("Wrote %s (backup=%s)", path, bak)
    return bak
