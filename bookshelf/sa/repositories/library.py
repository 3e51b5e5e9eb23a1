from typing import Optional
from sqlalchemy.orm import Session, Query
from bookshelf.sa.models import LibraryBook, Book
from bookshelf.utils.text import normalize

class LibraryRepository:
    """Repository for managing the per-user LibraryBook entries."""

    # Keys accepted for ordering a library list
    SORT_COLUMNS = {
        "title": Book.title,
        "rating": LibraryBook.rating,
        "tag": LibraryBook.tag,
        "reading_state": LibraryBook.reading_state,
    }

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def get_entry(self, user_id: str, book_id: str) -> Optional[LibraryBook]:
        """Get a user's library entry for a book.

        Args:
            user_id: The ID of the user
            book_id: The ID of the book

        Returns:
            The LibraryBook object if found, None otherwise
        """
        return (
            self.session.query(LibraryBook)
            .filter(
                LibraryBook.user_id == user_id,
                LibraryBook.book_id == book_id
            )
            .first()
        )

    def get_entry_by_isbn(self, user_id: str, isbn: str) -> Optional[LibraryBook]:
        """Get a user's library entry by the ISBN of its book.

        Args:
            user_id: The ID of the user
            isbn: The ISBN to search for

        Returns:
            The LibraryBook object if found, None otherwise
        """
        return (
            self.session.query(LibraryBook)
            .join(Book, Book.id == LibraryBook.book_id)
            .filter(
                LibraryBook.user_id == user_id,
                Book.isbn == isbn
            )
            .first()
        )

    def exists(self, user_id: str, book_id: str) -> bool:
        return self.get_entry(user_id, book_id) is not None

    def user_books_query(self, user_id: str, search: str = "") -> Query:
        """Build the query behind a user's library list.

        Args:
            user_id: The ID of the user
            search: Optional search term, matched as a substring of the normalized title

        Returns:
            An unordered Query yielding (LibraryBook, Book) pairs
        """
        query = (
            self.session.query(LibraryBook, Book)
            .join(Book, Book.id == LibraryBook.book_id)
            .filter(LibraryBook.user_id == user_id)
        )
        term = normalize(search)
        if term:
            query = query.filter(Book.normalized_title.contains(term, autoescape=True))
        return query

    def create_entry(self, user_id: str, book_id: str) -> LibraryBook:
        """Create a library entry with default rating, tag and reading state.

        Args:
            user_id: The ID of the user
            book_id: The ID of a book already in the catalog

        Returns:
            The created (flushed, uncommitted) LibraryBook object
        """
        entry = LibraryBook(
            user_id=user_id,
            book_id=book_id,
            rating=0,
            tag="0",
            reading_state="0",
            initial_time=None,
            final_time=None
        )
        self.session.add(entry)
        self.session.flush()
        return entry

    def delete_entry(self, user_id: str, book_id: str) -> bool:
        """Delete a library entry. The catalog book is left in place.

        Args:
            user_id: The ID of the user
            book_id: The ID of the book

        Returns:
            True if the entry was deleted, False if not found
        """
        result = (
            self.session.query(LibraryBook)
            .filter(
                LibraryBook.user_id == user_id,
                LibraryBook.book_id == book_id
            )
            .delete()
        )
        return result > 0
