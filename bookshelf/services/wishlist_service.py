# bookshelf/services/wishlist_service.py

import logging
from typing import Optional
from sqlalchemy.orm import Session

from bookshelf.config import BooksOptions
from bookshelf.exceptions import InvalidArgumentError, NotFoundError
from bookshelf.models import BookListInput, ListViewModel, WishlistViewModel
from bookshelf.sa.models import WishlistBook
from bookshelf.sa.repositories import WishlistRepository
from bookshelf.services.book_service import BookService
from bookshelf.services.listing import paginate
from bookshelf.utils.text import is_blank

logger = logging.getLogger(__name__)


class WishlistService:
    """Wishlist operations; catalog lookups go through a BookService."""

    def __init__(
        self,
        session: Session,
        google_books_client=None,
        options: Optional[BooksOptions] = None,
        book_service: Optional[BookService] = None
    ):
        self.session = session
        self.options = options or BooksOptions()
        self.book_service = book_service or BookService(session, google_books_client, self.options)
        self.wishlist = WishlistRepository(session)

    def get_books(self, user_id: str, model: Optional[BookListInput] = None) -> ListViewModel[WishlistViewModel]:
        model = model or BookListInput.default(self.options)
        if is_blank(user_id):
            return ListViewModel[WishlistViewModel](results=[], total_count=0, page=1, limit=model.limit)

        page = paginate(
            self.wishlist.user_books_query(user_id, model.search),
            model,
            WishlistRepository.SORT_COLUMNS,
            tie_breaker=WishlistBook.book_id,
            order=self.options.order,
        )
        return ListViewModel[WishlistViewModel](
            results=[WishlistViewModel.from_entry(entry) for entry in page.rows],
            total_count=page.total_count,
            page=page.page,
            limit=model.limit,
        )

    def add_book_to_wishlist(self, user_id: str, book_id: str) -> WishlistViewModel:
        """Add a book to a user's wishlist.

        The entry is a snapshot of the catalog book. A book missing from the
        catalog is resolved through the metadata client and stored first.

        Raises:
            InvalidArgumentError: If an id is blank, or the book is already wishlisted or in the library
            NotFoundError: If the user does not exist
            UpstreamError: If the metadata lookup fails
        """
        self._require_user(user_id, book_id)
        if self.wishlist.exists(user_id, book_id):
            raise InvalidArgumentError(f"Book {book_id} is already in user's wishlist")
        if self.book_service.is_book_in_library(user_id, book_id):
            raise InvalidArgumentError(f"Book {book_id} is already in the library and cannot be wishlisted")

        try:
            book = self.book_service.get_or_create_book(book_id)
            entry = self.wishlist.create_entry(
                user_id=user_id,
                book_id=book.id,
                title=book.title,
                isbn=book.isbn,
                author=book.author,
                image_path=book.image_path,
            )
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        logger.info(f"Added book {book_id} to wishlist of user {user_id}")
        return WishlistViewModel.from_entry(entry)

    def remove_book_from_wishlist(self, user_id: str, book_id: str) -> None:
        """Remove a book from a user's wishlist.

        Raises:
            InvalidArgumentError: If an id is blank
            NotFoundError: If the user does not exist or the book is not wishlisted
        """
        self._require_user(user_id, book_id)
        if not self.wishlist.delete_entry(user_id, book_id):
            self.session.rollback()
            logger.warning(f"Book {book_id} not found in wishlist of user {user_id}")
            raise NotFoundError(f"Book {book_id} is not in the wishlist of user {user_id}")
        self.session.commit()
        logger.info(f"Removed book {book_id} from wishlist of user {user_id}")

    def _require_user(self, user_id: str, book_id: str) -> None:
        if is_blank(user_id):
            raise InvalidArgumentError("User id must not be empty")
        if is_blank(book_id):
            raise InvalidArgumentError("Book id must not be empty")
        if not self.book_service.users.exists(user_id):
            raise NotFoundError(f"User {user_id} does not exist")
