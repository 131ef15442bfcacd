import json
import sqlite3
from pathlib import Path

import pytest
from pydantic import ValidationError

from record_inspector import config
from record_inspector.infrastructure import sample_data


def test_get_settings_defaults():
    settings = config.get_settings()
    assert settings.db_path == config.DEFAULT_DB_PATH
    assert settings.db_path.name == "users.db"
    assert settings.db_path.parent == Path(config.__file__).resolve().parent
    assert settings.articles_table == "user_audiobooks"
    assert settings.users_table == "users"
    assert settings.inspect_limit == 5
    assert settings.log_level == "INFO"


def test_get_settings_reads_environment(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("INSPECTOR_DB_PATH", str(tmp_path / "other.db"))
    monkeypatch.setenv("INSPECTOR_LIMIT", "12")
    monkeypatch.setenv("INSPECTOR_ARTICLES_TABLE", "articles")

    settings = config.get_settings()

    assert settings.db_path == tmp_path / "other.db"
    assert settings.inspect_limit == 12
    assert settings.articles_table == "articles"


def test_settings_reject_non_positive_limit(monkeypatch):
    monkeypatch.setenv("INSPECTOR_LIMIT", "0")
    with pytest.raises(ValidationError):
        config.Settings()


def test_generate_articles_is_deterministic():
    first = sample_data.generate_articles(10, seed=123)
    second = sample_data.generate_articles(10, seed=123)

    assert first == second
    assert len({article.created_at for article in first}) == 10
    assert [a.created_at for a in first] == sorted(a.created_at for a in first)


def test_generated_image_urls_are_json_arrays_or_known_bad_values():
    articles = sample_data.generate_articles(200, seed=1)

    for article in articles:
        if article.image_urls in (None, "[]", "not-json"):
            continue
        assert isinstance(json.loads(article.image_urls), list)
    assert any(article.image_urls == "not-json" for article in articles)
    assert any(article.image_urls is None for article in articles)


def test_build_sample_store_writes_schema_and_rows(tmp_path: Path):
    db_path = tmp_path / "nested" / "store.db"

    inserted = sample_data.build_sample_store(db_path, rows=5, users=2, seed=9)

    assert inserted == 5
    with sqlite3.connect(db_path) as conn:
        assert conn.execute("SELECT COUNT(*) FROM user_audiobooks").fetchone()[0] == 5
        assert conn.execute("SELECT COUNT(*) FROM users").fetchone()[0] == 2
    conn.close()


def test_build_sample_store_can_extend_existing_file(tmp_path: Path):
    db_path = tmp_path / "store.db"

    sample_data.build_sample_store(db_path, rows=3, users=2)
    sample_data.build_sample_store(db_path, rows=4, users=2)

    conn = sqlite3.connect(db_path)
    try:
        assert conn.execute("SELECT COUNT(*) FROM user_audiobooks").fetchone()[0] == 7
        assert conn.execute("SELECT COUNT(*) FROM users").fetchone()[0] == 2
    finally:
        conn.close()
