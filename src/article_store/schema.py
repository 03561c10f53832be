"""Table definitions for the article store."""

# Uniqueness is on filename, not URL: drafts may not have settled on a slug yet
CREATE_ARTICLE_TABLE = """
CREATE TABLE IF NOT EXISTS article (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    url TEXT NOT NULL,
    date DATETIME NULL,
    filename TEXT NOT NULL,
    is_draft BOOL NOT NULL,
    UNIQUE (filename)
)
"""

# embed is NULL until the embed stage has run for the chunk
CREATE_CHUNK_TABLE = """
CREATE TABLE IF NOT EXISTS article_chunk (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    article_id INTEGER NOT NULL,
    chunk_id INTEGER NOT NULL,
    text TEXT NOT NULL,
    embed BLOB NULL,
    FOREIGN KEY (article_id) REFERENCES article (id),
    UNIQUE (article_id, chunk_id)
)
"""

# Pairs are stored with article_a < article_b
CREATE_SIMILARITY_TABLE = """
CREATE TABLE IF NOT EXISTS article_similarity (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    article_a INTEGER NOT NULL,
    article_b INTEGER NOT NULL,
    similarity REAL NOT NULL,
    FOREIGN KEY (article_a) REFERENCES article (id),
    FOREIGN KEY (article_b) REFERENCES article (id),
    CHECK (article_a < article_b),
    UNIQUE (article_a, article_b)
)
"""

ALL_TABLES = (CREATE_ARTICLE_TABLE, CREATE_CHUNK_TABLE, CREATE_SIMILARITY_TABLE)
