"""Tests for common.config module."""

from pathlib import Path

import pytest

from common.config import (
    CONFIG_DIR,
    CONFIG_ENV_VAR,
    Config,
    ChunkingConfig,
    SimilarityConfig,
    find_config_path,
    load_config,
    _parse_config,
)


class TestParseConfig:
    def test_empty_gives_defaults(self) -> None:
        config = _parse_config({})
        assert config == Config()
        assert config.chunking.chunk_size == 2000
        assert config.chunking.min_chunk == 2500
        assert config.similarity.min_similarity == 0.4
        assert config.similarity.related_limit == 3
        assert config.providers.embedding_model == "text-embedding-3-small"

    def test_overrides(self) -> None:
        config = _parse_config(
            {
                "db_path": "/tmp/blog.db",
                "similarity": {"min_similarity": 0.6, "related_limit": 5},
                "providers": {"openai_chat_big": "gpt-4o-2024-08-06"},
            }
        )
        assert config.db_path == "/tmp/blog.db"
        assert config.similarity.min_similarity == 0.6
        assert config.similarity.related_limit == 5
        assert config.providers.openai_chat_big == "gpt-4o-2024-08-06"
        assert config.providers.openai_chat_small == "gpt-4o-mini"

    def test_min_chunk_below_chunk_size_rejected(self) -> None:
        with pytest.raises(ValueError, match="min_chunk"):
            Config(chunking=ChunkingConfig(chunk_size=3000, min_chunk=2500))

    def test_threshold_out_of_range_rejected(self) -> None:
        with pytest.raises(ValueError, match="min_similarity"):
            Config(similarity=SimilarityConfig(min_similarity=1.5))

    def test_related_limit_rejected(self) -> None:
        with pytest.raises(ValueError, match="related_limit"):
            Config(similarity=SimilarityConfig(related_limit=0))


class TestLoadConfig:
    def test_explicit_path(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.yaml"
        path.write_text("similarity:\n  related_limit: 7\n")

        assert load_config(str(path)).similarity.related_limit == 7

    def test_env_var(self, tmp_path: Path, monkeypatch) -> None:
        path = tmp_path / "env.yaml"
        path.write_text("min_field_body_len: 50\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

        assert find_config_path() == path
        assert load_config().min_field_body_len == 50

    def test_missing_explicit_path(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_default_file(self, monkeypatch) -> None:
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert find_config_path() == CONFIG_DIR / "default.yaml"
        assert load_config() == Config()

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == Config()
