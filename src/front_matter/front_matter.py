"""Read and write the YAML metadata block at the top of a Hugo post.

A post looks like::

    ---
    title: Some title
    date: 2024-05-01T10:00:00-07:00
    related:
      - other-post.md
    ---
    Body text...

Timestamps are kept as the literal strings the author wrote: the loader and
dumper below drop YAML's implicit timestamp resolver, so a round trip does
not turn ``date`` into a datetime or re-quote it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml

from common.errors import FrontMatterError

DELIMITER = "---"
TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


def _without_timestamps(resolvers: dict) -> dict:
    return {
        first_char: [(tag, regexp) for tag, regexp in entries if tag != TIMESTAMP_TAG]
        for first_char, entries in resolvers.items()
    }


class FrontMatterLoader(yaml.SafeLoader):
    pass


class FrontMatterDumper(yaml.SafeDumper):
    pass


FrontMatterLoader.yaml_implicit_resolvers = _without_timestamps(yaml.SafeLoader.yaml_implicit_resolvers)
FrontMatterDumper.yaml_implicit_resolvers = _without_timestamps(yaml.SafeDumper.yaml_implicit_resolvers)


@dataclass
class FrontMatter:
    """Typed view of the fields the pipeline reads, plus the full mapping."""
    title: str
    date: str | None = None
    draft: bool = False
    url: str | None = None
    related: list[str] = field(default_factory=list)
    fields: dict[str, Any] = field(default_factory=dict)


def split_document(text: str, source: str | None = None) -> tuple[str, int, str]:
    """Split a post into (front matter YAML, number of YAML lines, body).

    The body is everything after the closing delimiter line, unchanged.
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip("\r\n") != DELIMITER:
        raise FrontMatterError(f"{source or 'document'}: does not start with a '---' front matter line")

    for idx in range(1, len(lines)):
        if lines[idx].startswith(DELIMITER):
            yaml_lines = lines[1:idx]
            body = "".join(lines[idx + 1:])
            return "".join(yaml_lines), len(yaml_lines), body

    raise FrontMatterError(f"{source or 'document'}: front matter is not closed with '---'")


def load_fields(yaml_text: str, source: str | None = None) -> dict[str, Any]:
    try:
        data = yaml.load(yaml_text, Loader=FrontMatterLoader)
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"{source or 'document'}: invalid front matter YAML: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FrontMatterError(f"{source or 'document'}: front matter must be a mapping")
    return data


def _as_str_list(value: Any, key: str, source: str | None) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise FrontMatterError(f"{source or 'document'}: '{key}' must be a list")
    return [str(item) for item in value]


def extract(text: str, source: str | None = None) -> tuple[FrontMatter, int]:
    """Parse the front matter of a post.

    Returns the typed front matter and the number of YAML lines between the
    delimiters.
    """
    yaml_text, line_count, _ = split_document(text, source)
    fields = load_fields(yaml_text, source)

    title = fields.get("title")
    if not title:
        raise FrontMatterError(f"{source or 'document'}: front matter has no title")

    date = fields.get("date")
    url = fields.get("url")
    fm = FrontMatter(
        title=str(title),
        date=str(date) if date is not None else None,
        draft=fields.get("draft") is True,
        url=str(url) if url is not None else None,
        related=_as_str_list(fields.get("related"), "related", source),
        fields=fields,
    )
    return fm, line_count


def serialize(fields: dict[str, Any]) -> str:
    return yaml.dump(
        fields,
        Dumper=FrontMatterDumper,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


def render_document(fields: dict[str, Any], body: str) -> str:
    """Reassemble a post from its front matter fields and body."""
    return f"{DELIMITER}\n{serialize(fields)}{DELIMITER}\n{body}"
