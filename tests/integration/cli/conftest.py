"""Fixtures for CLI integration tests"""

import json

import pytest


SEED = [
    {"id": "a", "title": "Report A", "content": "quarterly numbers",
     "author": {"id": "u1", "name": "Ann"}, "created": "2024-01-01T00:00:00Z"},
    {"id": "b", "title": "Report B", "content": "annual summary",
     "author": {"id": "u2", "name": "Bo"}, "created": "2024-06-01T00:00:00Z"},
    {"title": "Notes", "content": "meeting numbers",
     "author": {"id": "u1", "name": "Ann"}, "created": "2024-12-01T00:00:00Z"},
]


@pytest.fixture(name="seed_file")
def seed_file_fixture(tmp_path, monkeypatch):
    """JSON seed file in an isolated working directory."""
    monkeypatch.chdir(tmp_path)
    for name in ("DOCSTORE_LOG_LEVEL", "DOCSTORE_PRESERVE_CREATED", "DOCSTORE_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    path = tmp_path / "seed.json"
    path.write_text(json.dumps(SEED))
    return str(path)


REPEATED_ID_SEED = [
    {"id": "a", "title": "first", "created": "2024-01-01T00:00:00Z"},
    {"id": "a", "title": "second", "created": "2025-01-01T00:00:00Z"},
]


@pytest.fixture(name="repeated_seed_file")
def repeated_seed_file_fixture(seed_file, tmp_path):
    """Seed file that saves the same id twice with different created values."""
    path = tmp_path / "repeated.json"
    path.write_text(json.dumps(REPEATED_ID_SEED))
    return str(path)
