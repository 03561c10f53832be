"""Anthropic Messages API chat client."""

from __future__ import annotations

import logging

import requests

from common.errors import ProviderError
from providers.credentials import require_api_key

logger = logging.getLogger(__name__)

API_KEY_ENV = "ANTHROPIC_API_KEY"
MESSAGES_URL = "https://api.anthropic.com/v1/messages"
API_VERSION = "2023-06-01"
MAX_TOKENS = 1024


def chat(
    model: str,
    system: str,
    user: str,
    api_key: str | None = None,
    timeout: float = 60,
) -> str:
    """Send one system prompt + user message and return the reply text."""
    api_key = api_key or require_api_key(API_KEY_ENV)
    logger.debug("Requesting %s completion (%d chars)", model, len(user))
    response = requests.post(
        MESSAGES_URL,
        timeout=timeout,
        headers={
            "x-api-key": api_key,
            "anthropic-version": API_VERSION,
            "content-type": "application/json",
        },
        json={
            "model": model,
            "max_tokens": MAX_TOKENS,
            "system": system,
            "messages": [{"role": "user", "content": user}],
        },
    )
    if response.status_code != 200:
        raise ProviderError(f"HTTP error {response.status_code} from {model}: {response.text}")

    data = response.json()
    content = data.get("content") or []
    if not content:
        raise ProviderError(f"No content in response from {model}: {data}")
    text = content[-1].get("text")
    if not text:
        raise ProviderError(f"Empty message in response from {model}")
    return text
