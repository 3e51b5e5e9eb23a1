from typing import Optional
from sqlalchemy.orm import Session
from bookshelf.sa.models import Book
from bookshelf.models import BookMetadata
from bookshelf.utils.text import normalize

class BookRepository:
    """Repository for managing catalog Book entities."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def get_by_id(self, book_id: str) -> Optional[Book]:
        """Get a book by its ID.

        Args:
            book_id: The external ID of the book

        Returns:
            The Book object if found, None otherwise
        """
        return self.session.query(Book).filter(Book.id == book_id).first()

    def exists(self, book_id: str) -> bool:
        return self.session.query(Book.id).filter(Book.id == book_id).first() is not None

    def create_book(
        self,
        book_id: str,
        title: str,
        isbn: str = "",
        author: str = "",
        description: Optional[str] = None,
        image_path: str = ""
    ) -> Book:
        """Add a new book to the catalog.

        The book is flushed but not committed; the caller owns the transaction.

        Args:
            book_id: The external ID of the book
            title: The title of the book
            isbn: Optional ISBN
            author: Optional author(s)
            description: Optional description
            image_path: Optional cover image URL

        Returns:
            The created Book object
        """
        book = Book(
            id=book_id,
            isbn=isbn,
            title=title,
            normalized_title=normalize(title),
            author=author,
            description=description,
            image_path=image_path
        )
        self.session.add(book)
        self.session.flush()
        return book

    def create_from_metadata(self, metadata: BookMetadata) -> Book:
        return self.create_book(
            book_id=metadata.id,
            title=metadata.title,
            isbn=metadata.isbn,
            author=metadata.author,
            description=metadata.description,
            image_path=metadata.image_path
        )
