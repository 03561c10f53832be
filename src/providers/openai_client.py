"""OpenAI embeddings and chat completions."""

from __future__ import annotations

import logging

from openai import OpenAI

from common.errors import ProviderError
from providers.credentials import require_api_key

logger = logging.getLogger(__name__)

API_KEY_ENV = "OPENAI_API_KEY"
EMBEDDING_MODEL = "text-embedding-3-small"


def _client(api_key: str | None, timeout: float | None = None) -> OpenAI:
    return OpenAI(api_key=api_key or require_api_key(API_KEY_ENV), timeout=timeout)


def embed(
    text: str,
    model: str = EMBEDDING_MODEL,
    api_key: str | None = None,
    timeout: float | None = None,
) -> list[float]:
    """Calculate an embedding for text with the given embedding model."""
    client = _client(api_key, timeout)
    logger.debug("Embedding %d chars with %s", len(text), model)
    response = client.embeddings.create(model=model, input=text)
    if not response.data:
        raise ProviderError(f"No embedding in response from {model}")
    return [float(v) for v in response.data[0].embedding]


def chat(
    model: str,
    system: str,
    user: str,
    api_key: str | None = None,
    timeout: float | None = None,
) -> str:
    """Send one system + user message pair and return the reply text."""
    client = _client(api_key, timeout)
    response = client.chat.completions.create(
        model=model,
        messages=[
            {"role": "system", "content": system},
            {"role": "user", "content": user},
        ],
    )
    if not response.choices:
        raise ProviderError(f"No choices in response from {model}")
    content = response.choices[0].message.content
    if not content:
        raise ProviderError(f"Empty message in response from {model}")
    return content
