"""
Pytest configuration for the Record Inspector.

Provides fixtures for:
- Settings isolation (cache reset, env overrides)
- Temporary SQLite stores seeded with known or generated rows
- Logging reset between tests
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Generator, List

import pytest

from record_inspector.config import get_settings
from record_inspector.infrastructure.sample_data import SampleArticle, build_sample_store

SCENARIO_ARTICLES: List[SampleArticle] = [
    SampleArticle(
        id=1,
        title="Morning edition",
        image_urls='["a.jpg","b.jpg"]',
        created_at="2024-05-01 10:00:00",
    ),
    SampleArticle(
        id=2,
        title="Midday edition",
        image_urls="[]",
        created_at="2024-05-01 11:00:00",
    ),
    SampleArticle(
        id=3,
        title="Noon edition",
        image_urls="not-json",
        created_at="2024-05-01 12:00:00",
    ),
]


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Drop cached settings and inspector env vars around each test.
    """
    for name in (
        "INSPECTOR_DB_PATH",
        "INSPECTOR_ARTICLES_TABLE",
        "INSPECTOR_USERS_TABLE",
        "INSPECTOR_LIMIT",
        "LOG_LEVEL",
        "JSON_LOGS",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_root_logging() -> Generator[None, None, None]:
    """
    Remove handlers the CLI installs so later tests don't write to closed streams.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def scenario_db(tmp_path: Path) -> Path:
    """
    Store with three articles inserted oldest first:
    id=1 with two images, id=2 with an empty list, id=3 with malformed JSON.
    """
    db_path = tmp_path / "scenario.db"
    build_sample_store(db_path, users=2, articles=SCENARIO_ARTICLES)
    return db_path


@pytest.fixture
def sample_db(tmp_path: Path) -> Path:
    """
    Store seeded with 25 generated articles and 3 users.
    """
    db_path = tmp_path / "sample.db"
    build_sample_store(db_path, rows=25, seed=7, users=3)
    return db_path


@pytest.fixture
def empty_db(tmp_path: Path) -> Path:
    """
    Store with the schema and users but no articles.
    """
    db_path = tmp_path / "empty.db"
    build_sample_store(db_path, users=1, articles=[])
    return db_path
