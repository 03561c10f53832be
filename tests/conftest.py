"""Shared fixtures: a throwaway article store and a posts directory."""

from pathlib import Path

import pytest

from article_store.connection import dispose_engines, ensure_schema, get_session


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "hugo-ai.db"


@pytest.fixture
def session(db_path: Path):
    with get_session(db_path) as session:
        ensure_schema(session)
        yield session
    dispose_engines()


@pytest.fixture
def posts_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "posts"
    directory.mkdir()
    return directory


def render_post(
    title: str,
    body: str,
    date: str | None = "2024-05-01T10:00:00-07:00",
    draft: bool = False,
    extra: str = "",
) -> str:
    lines = ["---", f"title: {title}"]
    if date is not None:
        lines.append(f"date: {date}")
    if draft:
        lines.append("draft: true")
    lines.append(f"url: /{title.lower().replace(' ', '-')}/")
    if extra:
        lines.append(extra.rstrip("\n"))
    lines.append("---")
    return "\n".join(lines) + "\n" + body


@pytest.fixture
def write_post(posts_dir: Path):
    def _write(filename: str, title: str, body: str, **kwargs) -> Path:
        path = posts_dir / filename
        path.write_text(render_post(title, body, **kwargs), encoding="utf-8")
        return path

    return _write
