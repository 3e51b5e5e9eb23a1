# tests/test_sa/test_models.py

import pytest
from datetime import date
from sqlalchemy.exc import IntegrityError
from bookshelf.sa.models import Book, LibraryBook, WishlistBook, User

@pytest.fixture
def sample_user(db_session):
    user = User(id="user-1", full_name="Test User", normalized_full_name="test user")
    db_session.add(user)
    db_session.commit()
    return user

@pytest.fixture
def sample_book(db_session):
    book = Book(id="book-1", isbn="9780000000001", title="Test Book", normalized_title="test book")
    db_session.add(book)
    db_session.commit()
    return book

def test_book_defaults(db_session, sample_book):
    """Test that optional catalog columns get their defaults."""
    fetched = db_session.get(Book, "book-1")
    assert fetched.author == ""
    assert fetched.image_path == ""
    assert fetched.description is None
    assert fetched.created_at is not None
    assert fetched.updated_at is not None

def test_user_defaults_to_visible(db_session, sample_user):
    assert db_session.get(User, "user-1").visibility is True

def test_library_entry_defaults(db_session, sample_user, sample_book):
    """Test that a bare library entry starts unrated, fiction and not read."""
    db_session.add(LibraryBook(user_id=sample_user.id, book_id=sample_book.id))
    db_session.commit()

    entry = db_session.get(LibraryBook, (sample_user.id, sample_book.id))
    assert entry.rating == 0
    assert entry.tag == "0"
    assert entry.reading_state == "0"
    assert entry.initial_time is None
    assert entry.final_time is None

def test_library_entry_relationships(db_session, sample_user, sample_book):
    entry = LibraryBook(user_id=sample_user.id, book_id=sample_book.id, initial_time=date(2024, 1, 2))
    db_session.add(entry)
    db_session.commit()
    db_session.refresh(sample_user)

    assert entry.book.title == "Test Book"
    assert entry.user.full_name == "Test User"
    assert [b.id for b in sample_user.books] == ["book-1"]
    assert sample_book.library_entries == [entry]

def test_library_entry_is_unique_per_user_and_book(db_session, sample_user, sample_book):
    db_session.add(LibraryBook(user_id=sample_user.id, book_id=sample_book.id))
    db_session.commit()
    db_session.expunge_all()

    db_session.add(LibraryBook(user_id="user-1", book_id="book-1"))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()

def test_wishlist_entry_does_not_need_catalog_book(db_session, sample_user):
    """Test that a wishlist snapshot can refer to a book missing from the catalog."""
    db_session.add(WishlistBook(
        user_id=sample_user.id,
        book_id="not-in-catalog",
        title="Snapshot",
        normalized_title="snapshot"
    ))
    db_session.commit()

    assert db_session.get(Book, "not-in-catalog") is None
    assert [w.book_id for w in sample_user.wishlist_books] == ["not-in-catalog"]

def test_deleting_user_removes_entries(db_session, sample_user, sample_book):
    db_session.add(LibraryBook(user_id=sample_user.id, book_id=sample_book.id))
    db_session.add(WishlistBook(user_id=sample_user.id, book_id="w-1", title="W", normalized_title="w"))
    db_session.commit()
    db_session.refresh(sample_user)

    db_session.delete(sample_user)
    db_session.commit()

    assert db_session.query(LibraryBook).count() == 0
    assert db_session.query(WishlistBook).count() == 0
    assert db_session.get(Book, "book-1") is not None

def test_email_is_unique(db_session):
    db_session.add(User(id="a", email="same@example.org", full_name="A", normalized_full_name="a"))
    db_session.add(User(id="b", email="same@example.org", full_name="B", normalized_full_name="b"))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()

def test_library_entry_requires_known_user_and_book(db_session, sample_user):
    """Test that SQLite enforces the library's foreign keys."""
    db_session.add(LibraryBook(user_id=sample_user.id, book_id="not-in-catalog"))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()
