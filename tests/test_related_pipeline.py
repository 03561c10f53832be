"""Gather, embed, calc and write against a small blog with a fake embedding model."""

import re

import numpy as np
import pytest

from article_store.repository import load_article, load_chunks, load_similarities
from calc_similarity.calc_similarity import calc_similarities
from embed_chunks.embed_chunks import embed_articles
from front_matter.front_matter import extract
from gather_articles.gather_articles import gather_directory
from write_related.write_related import write_related

VOCABULARY = ("python", "code", "function", "garden", "tomato", "soil")


def bag_of_words(chunk_text: str) -> list[float]:
    words = re.findall(r"[a-z]+", chunk_text.lower())
    return [float(words.count(term)) for term in VOCABULARY]


@pytest.fixture
def blog(posts_dir, write_post):
    write_post("a.md", "Python tips", "Write python code and test every function. " * 120)
    write_post("b.md", "More python", "Python code is a function of time and python. " * 20)
    write_post("c.md", "Growing tomatoes", "The garden soil suits a tomato in spring. " * 30)
    return posts_dir


def _pipeline(session, blog) -> list:
    gather_directory(session, blog)
    embed_articles(session, bag_of_words)
    calc_similarities(session)
    return write_related(session, blog)


class TestRelatedPipeline:
    def test_similar_posts_linked(self, session, blog) -> None:
        updates = _pipeline(session, blog)

        assert sorted(u.filename for u in updates) == ["a.md", "b.md"]
        assert extract((blog / "a.md").read_text(encoding="utf-8"))[0].related == ["b.md"]
        assert extract((blog / "b.md").read_text(encoding="utf-8"))[0].related == ["a.md"]

    def test_similarity_values(self, session, blog) -> None:
        _pipeline(session, blog)
        ids = {name: load_article(session, name).id for name in ("a.md", "b.md", "c.md")}
        by_pair = {(p.article_a, p.article_b): p.similarity for p in load_similarities(session)}

        assert by_pair[(ids["a.md"], ids["b.md"])] > 0.9
        assert by_pair[(ids["a.md"], ids["c.md"])] < 0.2
        assert by_pair[(ids["b.md"], ids["c.md"])] < 0.2

    def test_unrelated_post_untouched(self, session, blog) -> None:
        before = (blog / "c.md").read_text(encoding="utf-8")

        _pipeline(session, blog)

        assert (blog / "c.md").read_text(encoding="utf-8") == before
        assert not (blog / "c.BAK").exists()

    def test_backups_hold_originals(self, session, blog) -> None:
        before = (blog / "a.md").read_text(encoding="utf-8")

        _pipeline(session, blog)

        assert (blog / "a.BAK").read_text(encoding="utf-8") == before

    def test_rerun_is_a_no_op(self, session, blog) -> None:
        _pipeline(session, blog)
        snapshot = {p.name: p.read_text(encoding="utf-8") for p in blog.iterdir()}

        results = gather_directory(session, blog)
        assert all(r.new_chunks == 0 and r.changed_chunks == 0 for r in results)
        assert embed_articles(session, bag_of_words) == 0
        calc_similarities(session)
        assert write_related(session, blog) == []

        assert {p.name: p.read_text(encoding="utf-8") for p in blog.iterdir()} == snapshot

    def test_multi_chunk_article_fully_embedded(self, session, blog) -> None:
        _pipeline(session, blog)

        chunks = load_chunks(session, load_article(session, "a.md").id)

        assert len(chunks) > 1
        assert all(c.embedding is not None and np.isfinite(c.embedding).all() for c in chunks)
