# tests/conftest.py
import json
import sys
import pytest
from pathlib import Path
from unittest.mock import Mock
import requests

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from sqlalchemy.orm import Session
from bookshelf.clients import GoogleBooksClient
from bookshelf.config import BooksOptions, GoogleBooksApiOptions
from bookshelf.sa.database import Database
from tests.utils import FIXTURES_DIR, seed_catalog

@pytest.fixture
def database(tmp_path):
    """A fresh SQLite database file with the schema created"""
    db = Database(f"sqlite:///{tmp_path / 'test_bookshelf.db'}")
    db.init_db()
    yield db
    db.dispose()

@pytest.fixture
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def seeded_database(database):
    with database.get_db() as session:
        seed_catalog(session)
    return database

@pytest.fixture
def seeded_session(seeded_database):
    session: Session = seeded_database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def books_options():
    return BooksOptions()

def _volume_response(url: str) -> Mock:
    volume_id = url.rstrip("/").rsplit("/", 1)[-1]
    path = FIXTURES_DIR / f"{volume_id}.json"
    response = Mock(spec=requests.Response)
    if path.exists():
        response.status_code = 200
        response.json.return_value = json.loads(path.read_text(encoding="utf-8"))
        response.raise_for_status.return_value = None
    else:
        response.status_code = 404
        response.raise_for_status.side_effect = requests.HTTPError("404 Client Error", response=response)
    return response

@pytest.fixture
def http_session():
    """A requests.Session stand-in serving volumes from tests/fixtures/google_books"""
    session = Mock(spec=requests.Session)
    session.get.side_effect = lambda url, **kwargs: _volume_response(url)
    return session

@pytest.fixture
def google_books_client(http_session):
    return GoogleBooksClient(GoogleBooksApiOptions(), session=http_session)
