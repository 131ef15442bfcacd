"""
Sample store generation for local development and tests.

Creates the article/user schema the inspector expects (mirroring the
application that owns the real store) and fills it with deterministic
pseudo-random rows. A share of the articles carry empty, NULL or malformed
`image_urls` values so the inspector's decode path can be exercised.
"""

from __future__ import annotations

import json
import random
import sqlite3
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    username TEXT UNIQUE NOT NULL,
    email TEXT UNIQUE NOT NULL,
    password_hash TEXT NOT NULL,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS user_audiobooks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id INTEGER NOT NULL,
    title TEXT NOT NULL,
    url TEXT NOT NULL,
    full_text TEXT NOT NULL,
    summary TEXT,
    key_points TEXT,
    image_urls TEXT,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY (user_id) REFERENCES users (id) ON DELETE CASCADE
);
"""

_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class SampleArticle:
    """An article row to insert; `image_urls` is written verbatim."""

    title: str
    image_urls: Optional[str]
    created_at: str
    user_id: int = 1
    id: Optional[int] = None


def create_schema(conn: sqlite3.Connection) -> None:
    """Create the users and articles tables if they do not exist."""
    conn.executescript(SCHEMA)


def insert_articles(conn: sqlite3.Connection, articles: Iterable[SampleArticle]) -> int:
    """
    Insert articles in the given order and return how many were written.

    Rows with an explicit `id` keep it; others get one from the store.
    """
    count = 0
    for article in articles:
        conn.execute(
            """
            INSERT INTO user_audiobooks (id, user_id, title, url, full_text, image_urls, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                article.id,
                article.user_id,
                article.title,
                f"https://example.com/articles/{count + 1}",
                f"Full text of {article.title}.",
                article.image_urls,
                article.created_at,
            ),
        )
        count += 1
    conn.commit()
    return count


def insert_users(conn: sqlite3.Connection, usernames: Sequence[str]) -> int:
    """Insert one user per username with a placeholder password hash; existing names are kept."""
    conn.executemany(
        "INSERT OR IGNORE INTO users (username, email, password_hash) VALUES (?, ?, ?)",
        [(name, f"{name}@example.com", "x" * 60) for name in usernames],
    )
    conn.commit()
    return len(usernames)


def _random_image_urls(rng: random.Random, index: int) -> Optional[str]:
    roll = rng.random()
    if roll < 0.1:
        return None
    if roll < 0.2:
        return "[]"
    if roll < 0.3:
        return "not-json"
    count = rng.randint(1, 4)
    return json.dumps(
        [f"https://images.example.com/{index}/{n}.jpg" for n in range(1, count + 1)]
    )


def generate_articles(
    rows: int,
    seed: int = 42,
    start: Optional[datetime] = None,
    user_count: int = 1,
) -> List[SampleArticle]:
    """
    Build `rows` deterministic sample articles, one minute apart, oldest first.
    """
    rng = random.Random(seed)
    base = start or datetime(2024, 1, 1, 9, 0, 0)
    topics = ["markets", "science", "sports", "culture", "politics"]

    articles: List[SampleArticle] = []
    for i in range(rows):
        articles.append(
            SampleArticle(
                title=f"{rng.choice(topics).title()} briefing #{i + 1}",
                image_urls=_random_image_urls(rng, i + 1),
                created_at=(base + timedelta(minutes=i)).strftime(_TIMESTAMP_FORMAT),
                user_id=rng.randint(1, max(user_count, 1)),
            )
        )
    return articles


def build_sample_store(
    db_path: Union[str, Path],
    rows: int = 20,
    seed: int = 42,
    users: int = 2,
    articles: Optional[Iterable[SampleArticle]] = None,
) -> int:
    """
    Create (or extend) a store file and seed it.

    Parameters
    ----------
    db_path : str or Path
        Target SQLite file; parent directories are created.
    rows : int
        Number of generated articles when `articles` is not given.
    seed : int
        Deterministic RNG seed.
    users : int
        Number of users to create.
    articles : iterable of SampleArticle, optional
        Explicit rows to insert instead of generated ones.

    Returns
    -------
    int
        Number of articles inserted.
    """
    path = Path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(path)
    try:
        create_schema(conn)
        insert_users(conn, [f"user{n}" for n in range(1, users + 1)])
        if articles is None:
            articles = generate_articles(rows, seed=seed, user_count=users)
        return insert_articles(conn, articles)
    finally:
        conn.close()


__all__ = [
    "SCHEMA",
    "SampleArticle",
    "build_sample_store",
    "create_schema",
    "generate_articles",
    "insert_articles",
    "insert_users",
]
