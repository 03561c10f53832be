"""Configuration loader for the hugo-ai pipeline."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

CONFIG_ENV_VAR = "HUGO_AI_CONFIG"

# Config directory at the repository root
CONFIG_DIR = Path(__file__).resolve().parent.parent.parent / "configs"


@dataclass
class ChunkingConfig:
    chunk_size: int = 2000
    min_chunk: int = 2500


@dataclass
class SimilarityConfig:
    min_similarity: float = 0.4
    related_limit: int = 3


@dataclass
class ProviderConfig:
    embedding_model: str = "text-embedding-3-small"
    openai_chat_big: str = "gpt-4o"
    openai_chat_small: str = "gpt-4o-mini"
    anthropic_chat_big: str = "claude-3-5-sonnet-20240620"
    anthropic_chat_small: str = "claude-3-haiku-20240307"
    request_timeout: int = 60


@dataclass
class Config:
    db_path: str | None = None
    min_field_body_len: int = 1000
    chunking: ChunkingConfig = field(default_factory=ChunkingConfig)
    similarity: SimilarityConfig = field(default_factory=SimilarityConfig)
    providers: ProviderConfig = field(default_factory=ProviderConfig)

    def __post_init__(self) -> None:
        if self.chunking.chunk_size <= 0:
            raise ValueError(f"Invalid chunk_size: {self.chunking.chunk_size}. Must be positive")
        if self.chunking.min_chunk < self.chunking.chunk_size:
            raise ValueError(
                f"Invalid min_chunk: {self.chunking.min_chunk}. "
                f"Must be at least chunk_size ({self.chunking.chunk_size})"
            )
        if not -1.0 <= self.similarity.min_similarity <= 1.0:
            raise ValueError(
                f"Invalid min_similarity: {self.similarity.min_similarity}. Must be in [-1, 1]"
            )
        if self.similarity.related_limit < 1:
            raise ValueError(
                f"Invalid related_limit: {self.similarity.related_limit}. Must be at least 1"
            )


def find_config_path(config_path: str | None = None) -> Path | None:
    """Find the config file, checking the explicit path, the env var, then the default.

    Returns None when no file is configured and the default does not exist.

    Raises:
        FileNotFoundError: If an explicitly requested config file doesn't exist
    """
    requested = config_path or os.environ.get(CONFIG_ENV_VAR)
    if requested:
        path = Path(requested).expanduser()
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        return path

    default = CONFIG_DIR / "default.yaml"
    return default if default.exists() else None


def load_yaml(path: Path) -> dict:
    """Load YAML file and return dict."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_config(config_path: str | None = None) -> Config:
    """Load configuration from YAML, falling back to built-in defaults."""
    path = find_config_path(config_path)
    if path is None:
        return Config()
    return _parse_config(load_yaml(path))


def _parse_config(data: dict) -> Config:
    """Parse config dictionary into Config object."""
    chunking_data = data.get("chunking", {})
    chunking = ChunkingConfig(
        chunk_size=chunking_data.get("chunk_size", 2000),
        min_chunk=chunking_data.get("min_chunk", 2500),
    )

    similarity_data = data.get("similarity", {})
    similarity = SimilarityConfig(
        min_similarity=float(similarity_data.get("min_similarity", 0.4)),
        related_limit=similarity_data.get("related_limit", 3),
    )

    provider_data = data.get("providers", {})
    defaults = ProviderConfig()
    providers = ProviderConfig(
        embedding_model=provider_data.get("embedding_model", defaults.embedding_model),
        openai_chat_big=provider_data.get("openai_chat_big", defaults.openai_chat_big),
        openai_chat_small=provider_data.get("openai_chat_small", defaults.openai_chat_small),
        anthropic_chat_big=provider_data.get("anthropic_chat_big", defaults.anthropic_chat_big),
        anthropic_chat_small=provider_data.get("anthropic_chat_small", defaults.anthropic_chat_small),
        request_timeout=provider_data.get("request_timeout", defaults.request_timeout),
    )

    return Config(
        db_path=data.get("db_path"),
        min_field_body_len=data.get("min_field_body_len", 1000),
        chunking=chunking,
        similarity=similarity,
        providers=providers,
    )
