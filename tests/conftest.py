import pytest

from pos.infrastructure.persistence.schema import Store


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'pos.db'}"


@pytest.fixture
def store(database_url):
    """An initialized store backed by a throwaway SQLite file."""
    s = Store(database_url)
    s.initialize()
    yield s
    s.dispose()
