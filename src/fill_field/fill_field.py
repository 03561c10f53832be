"""Fill a front matter field on each post using a chat model."""

from __future__ import annotations

import logging
from enum import Enum
from functools import partial
from pathlib import Path
from typing import Callable

from common.config import ProviderConfig
from common.errors import ProviderError
from common.local_io import list_markdown_files, read_document, write_document
from common.progress import ProgressReporter, get_progress
from fill_field.prompts import Prompts
from front_matter.front_matter import load_fields, render_document, split_document
from providers import anthropic_client, openai_client

logger = logging.getLogger(__name__)

ChatFn = Callable[[str, str], str]

MIN_BODY_LEN = 1000


class ModelChoice(str, Enum):
    GPT_4O = "gpt-4o"
    GPT_4O_MINI = "gpt-4o-mini"
    CLAUDE_35_SONNET = "claude-3-5-sonnet"
    CLAUDE_3_HAIKU = "claude-3-haiku"


def build_chat_fn(choice: ModelChoice, providers: ProviderConfig | None = None) -> ChatFn:
    """Return chat(system, user) -> reply for the chosen model."""
    providers = providers or ProviderConfig()
    timeout = providers.request_timeout
    if choice is ModelChoice.GPT_4O:
        return partial(openai_client.chat, providers.openai_chat_big, timeout=timeout)
    if choice is ModelChoice.GPT_4O_MINI:
        return partial(openai_client.chat, providers.openai_chat_small, timeout=timeout)
    if choice is ModelChoice.CLAUDE_35_SONNET:
        return partial(anthropic_client.chat, providers.anthropic_chat_big, timeout=timeout)
    if choice is ModelChoice.CLAUDE_3_HAIKU:
        return partial(anthropic_client.chat, providers.anthropic_chat_small, timeout=timeout)
    raise ValueError(f"Unknown model choice: {choice}")


def fill_field(
    directory: Path,
    prompts: Prompts,
    chat_fn: ChatFn,
    backup: bool = True,
    min_len: int = MIN_BODY_LEN,
    progress: ProgressReporter | None = None,
) -> int:
    """
    Ask the model for prompts.field_name on every post that lacks it.

    Drafts, posts that already have the field and posts with a body shorter
    than min_len are skipped.

    Args:
        directory: Directory holding the posts
        prompts: Field name plus system and user prompts
        chat_fn: chat(system, user) -> reply
        backup: Rename each original to .BAK before writing
        min_len: Ignore posts with bodies shorter than this
        progress: Optional progress reporter

    Returns:
        Number of posts updated
    """
    progress = get_progress(progress)
    posts = list_markdown_files(directory)
    logger.info("Processing %d posts for field '%s'", len(posts), prompts.field_name)

    written_count = 0
    progress.start(len(posts), prompts.field_name)
    try:
        for filepath in posts:
            progress.advance(filepath.name)
            if _fill_post(filepath, prompts, chat_fn, backup, min_len):
                written_count += 1
                logger.info("Processed: %s", filepath)
    finally:
        progress.close()

    logger.info("Updated %d posts", written_count)
    return written_count


def _fill_post(filepath: Path, prompts: Prompts, chat_fn: ChatFn, backup: bool, min_len: int) -> bool:
    source = str(filepath)
    contents = read_document(filepath)
    yaml_text, _, body = split_document(contents, source=source)
    fields = load_fields(yaml_text, source=source)

    # Drafts will still change
    if fields.get("draft") is True:
        return False
    if prompts.field_name in fields:
        return False
    if len(body) < min_len:
        return False

    try:
        value = chat_fn(prompts.system, f"{prompts.user}\n\n{body}")
    except ProviderError as exc:
        raise ProviderError(f"{source}: {exc}") from exc

    fields[prompts.field_name] = value.strip()
    write_document(filepath, render_document(fields, body), backup=backup)
    return True
