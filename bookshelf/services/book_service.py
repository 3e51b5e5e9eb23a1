# bookshelf/services/book_service.py

import logging
from datetime import date
from typing import Any, Dict, Optional
from sqlalchemy.orm import Session

from bookshelf.config import BooksOptions
from bookshelf.exceptions import InvalidArgumentError, NotFoundError
from bookshelf.models import (
    BookListInput, BookViewModel, BookDetailViewModel, EditBookInput,
    ListViewModel, ReadingState, Tag
)
from bookshelf.sa.models import Book, LibraryBook
from bookshelf.sa.repositories import BookRepository, LibraryRepository, UserRepository, WishlistRepository
from bookshelf.services.listing import paginate
from bookshelf.utils.text import is_blank

logger = logging.getLogger(__name__)

RATING_MIN = 0
RATING_MAX = 5


def validate_edit(entry: LibraryBook, model: EditBookInput, today: Optional[date] = None) -> Dict[str, Any]:
    """Check an edit against an existing entry without touching it.

    Args:
        entry: The current library entry
        model: Requested changes
        today: Override for the current date

    Returns:
        The complete set of new field values

    Raises:
        InvalidArgumentError: If any field is out of bounds
    """
    today = today or date.today()

    rating = entry.rating
    if model.rating is not None:
        if not RATING_MIN <= model.rating <= RATING_MAX:
            raise InvalidArgumentError(f"Rating must be between {RATING_MIN} and {RATING_MAX}, got {model.rating}")
        rating = model.rating

    tag = entry.tag
    if model.tag is not None:
        try:
            tag = Tag(model.tag).value
        except ValueError:
            raise InvalidArgumentError(f"Unknown tag '{model.tag}'")

    reading_state = entry.reading_state
    if model.reading_state is not None:
        try:
            reading_state = ReadingState(model.reading_state).value
        except ValueError:
            raise InvalidArgumentError(f"Unknown reading state '{model.reading_state}'")

    initial_time, final_time = model.initial_time, model.final_time
    if reading_state == ReadingState.NOT_READ.value:
        initial_time = final_time = None
    else:
        # Reading dates can't be in the future
        if initial_time is not None and initial_time > today:
            initial_time = today
        if final_time is not None and final_time > today:
            final_time = today
        if final_time is not None and initial_time is None:
            initial_time = today
        if final_time is not None and final_time < initial_time:
            raise InvalidArgumentError(f"Final date {final_time} precedes initial date {initial_time}")

    return {
        "rating": rating,
        "tag": tag,
        "reading_state": reading_state,
        "initial_time": initial_time,
        "final_time": final_time,
    }


class BookService:
    """Library operations for a single user: listing, editing, adding and removing books."""

    def __init__(self, session: Session, google_books_client=None, options: Optional[BooksOptions] = None):
        self.session = session
        self.google_books_client = google_books_client
        self.options = options or BooksOptions()
        self.books = BookRepository(session)
        self.library = LibraryRepository(session)
        self.wishlist = WishlistRepository(session)
        self.users = UserRepository(session)

    def default_input(self) -> BookListInput:
        return BookListInput.default(self.options)

    def get_books(self, user_id: str, model: Optional[BookListInput] = None) -> ListViewModel[BookViewModel]:
        """List a user's library.

        An unknown or blank user id gives an empty list, not an error.
        """
        model = model or self.default_input()
        if is_blank(user_id):
            return ListViewModel[BookViewModel](results=[], total_count=0, page=1, limit=model.limit)

        page = paginate(
            self.library.user_books_query(user_id, model.search),
            model,
            LibraryRepository.SORT_COLUMNS,
            tie_breaker=Book.id,
            order=self.options.order,
        )
        return ListViewModel[BookViewModel](
            results=[BookViewModel.from_entry(entry, book) for entry, book in page.rows],
            total_count=page.total_count,
            page=page.page,
            limit=model.limit,
        )

    def get_book_by_isbn(self, user_id: str, isbn: str) -> BookDetailViewModel:
        if is_blank(isbn):
            raise InvalidArgumentError("ISBN must not be empty")

        entry = self.library.get_entry_by_isbn(user_id, isbn)
        if entry is None:
            logger.warning(f"Book with ISBN {isbn} not found in library of user {user_id}")
            raise NotFoundError(f"Book with ISBN {isbn} is not in the library")
        return BookDetailViewModel.from_book(entry.book, entry)

    def get_book_by_id(self, user_id: str, book_id: str) -> BookDetailViewModel:
        return BookDetailViewModel.from_book(*self._require_entry(user_id, book_id))

    def get_catalog_only_book_by_id(self, book_id: str) -> BookDetailViewModel:
        """Catalog detail of a book, without any user's personal fields."""
        if is_blank(book_id):
            raise InvalidArgumentError("Book id must not be empty")

        book = self.books.get_by_id(book_id)
        if book is None:
            logger.warning(f"Book {book_id} not found in catalog")
            raise NotFoundError(f"Book {book_id} is not in the catalog")
        return BookDetailViewModel.from_book(book)

    def edit_book(self, user_id: str, model: EditBookInput) -> BookDetailViewModel:
        """Apply an edit to a library entry; nothing changes unless every field is valid.

        Raises:
            NotFoundError: If the user has no entry for the book
            InvalidArgumentError: If rating, tag, reading state or dates are invalid
        """
        book, entry = self._require_entry(user_id, model.book_id)

        changes = validate_edit(entry, model)
        for field, value in changes.items():
            setattr(entry, field, value)
        self._commit()

        logger.info(f"Edited book {model.book_id} for user {user_id}")
        return BookDetailViewModel.from_book(book, entry)

    def add_book_to_library(self, user_id: str, book_id: str) -> BookDetailViewModel:
        """Add a book to a user's library, fetching it into the catalog if needed.

        Any wishlist entry for the same book is removed in the same transaction.

        Raises:
            InvalidArgumentError: If an id is blank or the book is already in the library
            NotFoundError: If the user does not exist
            UpstreamError: If the book has to be fetched and the lookup fails
        """
        self._require_ids(user_id, book_id)
        if not self.users.exists(user_id):
            raise NotFoundError(f"User {user_id} does not exist")
        if self.library.exists(user_id, book_id):
            raise InvalidArgumentError(f"Book {book_id} is already in the library")

        try:
            book = self.get_or_create_book(book_id)
            entry = self.library.create_entry(user_id, book_id)
            if self.wishlist.delete_entry(user_id, book_id):
                logger.info(f"Moved book {book_id} from wishlist to library for user {user_id}")
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        logger.info(f"Added book {book_id} to library of user {user_id}")
        return BookDetailViewModel.from_book(book, entry)

    def remove_book_from_library(self, user_id: str, book_id: str) -> None:
        """Remove a library entry. The catalog book always stays.

        Raises:
            NotFoundError: If the user has no entry for the book
        """
        self._require_entry(user_id, book_id)
        self.library.delete_entry(user_id, book_id)
        self._commit()
        logger.info(f"Removed book {book_id} from library of user {user_id}")

    def get_or_create_book(self, book_id: str) -> Book:
        """Return the catalog book, resolving and inserting it when missing.

        The insert is flushed, not committed.
        """
        book = self.books.get_by_id(book_id)
        if book is not None:
            return book

        if self.google_books_client is None:
            raise NotFoundError(f"Book {book_id} is not in the catalog and no metadata client is configured")

        metadata = self.google_books_client.resolve(book_id)
        logger.info(f"Adding '{metadata.title}' ({book_id}) to catalog")
        return self.books.create_from_metadata(metadata)

    def is_book_stored_in_catalog(self, book_id: str) -> bool:
        if is_blank(book_id):
            return False
        return self.books.exists(book_id)

    def is_book_in_library(self, user_id: str, book_id: str) -> bool:
        if is_blank(user_id) or is_blank(book_id):
            return False
        return self.library.exists(user_id, book_id)

    def is_book_in_wishlist(self, user_id: str, book_id: str) -> bool:
        if is_blank(user_id) or is_blank(book_id):
            return False
        return self.wishlist.exists(user_id, book_id)

    def _require_ids(self, user_id: str, book_id: str) -> None:
        if is_blank(user_id):
            raise InvalidArgumentError("User id must not be empty")
        if is_blank(book_id):
            raise InvalidArgumentError("Book id must not be empty")

    def _require_entry(self, user_id: str, book_id: str) -> tuple[Book, LibraryBook]:
        self._require_ids(user_id, book_id)
        entry = self.library.get_entry(user_id, book_id)
        if entry is None:
            logger.warning(f"Book {book_id} not found in library of user {user_id}")
            raise NotFoundError(f"Book {book_id} is not in the library of user {user_id}")
        return entry.book, entry

    def _commit(self) -> None:
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
