# bookshelf/services/user_service.py

import logging
from typing import Optional
from sqlalchemy.orm import Session

from bookshelf.config import BooksOptions
from bookshelf.exceptions import InvalidArgumentError, NotFoundError
from bookshelf.models import BookListInput, BookViewModel, ListViewModel, UserViewModel
from bookshelf.sa.models import User
from bookshelf.sa.repositories import UserRepository
from bookshelf.services.book_service import BookService
from bookshelf.utils.text import is_blank

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, session: Session, options: Optional[BooksOptions] = None):
        self.session = session
        self.options = options or BooksOptions()
        self.users = UserRepository(session)

    def create_user(
        self,
        user_id: str,
        full_name: str,
        email: Optional[str] = None,
        visibility: bool = True
    ) -> UserViewModel:
        if is_blank(user_id):
            raise InvalidArgumentError("User id must not be empty")
        if is_blank(full_name):
            raise InvalidArgumentError("Full name must not be empty")
        try:
            user = self.users.create_user(user_id, full_name.strip(), email=email, visibility=visibility)
        except ValueError as e:
            raise InvalidArgumentError(str(e)) from e
        logger.info(f"Created user {user_id}")
        return UserViewModel.model_validate(user)

    def set_visibility(self, user_id: str, visible: bool) -> None:
        self._require_user(user_id)
        self.users.update_visibility(user_id, visible)

    def get_full_name(self, user_id: str) -> str:
        """Full name of a user, whatever their visibility"""
        return self._require_user(user_id).full_name

    def is_visible(self, user_id: str) -> bool:
        return self._require_user(user_id).visibility

    def search_users(self, caller_id: str, term: Optional[str]) -> ListViewModel[UserViewModel]:
        """Find visible users by name, leaving out the caller.

        A blank term matches every visible user; a None term is rejected.

        Raises:
            InvalidArgumentError: If term is None
        """
        if term is None:
            raise InvalidArgumentError("Search term must not be None")

        users = self.users.search_query(term, exclude_user_id=caller_id).all()
        return ListViewModel[UserViewModel](
            results=[UserViewModel.model_validate(user) for user in users],
            total_count=len(users),
            page=1,
            limit=max(len(users), 1),
        )

    def get_user_books(self, user_id: str, model: Optional[BookListInput] = None) -> ListViewModel[BookViewModel]:
        """Library of any user, listed the same way as one's own"""
        return BookService(self.session, options=self.options).get_books(user_id, model)

    def _require_user(self, user_id: str) -> User:
        if is_blank(user_id):
            raise InvalidArgumentError("User id must not be empty")
        user = self.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} does not exist")
        return user
