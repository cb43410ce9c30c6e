"""Shared fixtures for store unit tests"""

from datetime import datetime, timezone

import pytest

from docstore.models import Author, Document
from docstore.store.memory_repo import MemoryRepo


T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)
T1 = datetime(2024, 6, 1, tzinfo=timezone.utc)
T2 = datetime(2024, 12, 1, tzinfo=timezone.utc)


@pytest.fixture(name="repo")
def repo_fixture():
    """Empty store with the default created-preserving policy."""
    return MemoryRepo()


@pytest.fixture(name="seeded")
def seeded_fixture(repo):
    """Store holding three documents with distinct titles, authors and timestamps."""
    repo.save(Document(id="a", title="Report A", content="quarterly numbers",
                       author=Author(id="u1", name="Ann"), created=T0))
    repo.save(Document(id="b", title="Report B", content="annual summary",
                       author=Author(id="u2", name="Bo"), created=T1))
    repo.save(Document(id="c", title="Notes", content="meeting numbers",
                       author=Author(id="u1", name="Ann"), created=T2))
    return repo
