from typing import Optional
from sqlalchemy.orm import Session, Query
from sqlalchemy.exc import IntegrityError
from bookshelf.sa.models import User
from bookshelf.utils.text import normalize

class UserRepository:
    """Repository for managing User entities."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def create_user(
        self,
        user_id: str,
        full_name: str,
        email: Optional[str] = None,
        visibility: bool = True
    ) -> User:
        """Create a new user.

        Args:
            user_id: The ID of the user
            full_name: The user's full name
            email: Optional email address
            visibility: Whether other users may find this profile

        Returns:
            The created User object

        Raises:
            ValueError: If a user with the given ID already exists
        """
        if self.get_by_id(user_id):
            raise ValueError(f"User with id '{user_id}' already exists")

        user = User(
            id=user_id,
            email=email,
            full_name=full_name,
            normalized_full_name=normalize(full_name),
            visibility=visibility
        )
        self.session.add(user)
        try:
            self.session.commit()
            return user
        except IntegrityError:
            self.session.rollback()
            raise ValueError(f"User with id '{user_id}' or email '{email}' already exists")

    def update_visibility(self, user_id: str, visibility: bool) -> Optional[User]:
        """Update a user's visibility flag.

        Returns:
            The updated User object if found, None otherwise
        """
        user = self.get_by_id(user_id)
        if not user:
            return None

        user.visibility = visibility
        self.session.commit()
        return user

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Get a user by their ID.

        Args:
            user_id: The ID of the user to retrieve

        Returns:
            The User object if found, None otherwise
        """
        return self.session.query(User).filter(User.id == user_id).first()

    def exists(self, user_id: str) -> bool:
        return self.session.query(User.id).filter(User.id == user_id).first() is not None

    def search_query(self, query: str, exclude_user_id: Optional[str] = None) -> Query:
        """Build a query over visible users whose normalized name contains ``query``.

        Args:
            query: Search string; blank matches every visible user
            exclude_user_id: Optional ID to leave out of the results (the caller)

        Returns:
            A Query yielding User objects ordered by full name
        """
        users = self.session.query(User).filter(User.visibility.is_(True))
        term = normalize(query)
        if term:
            users = users.filter(User.normalized_full_name.contains(term, autoescape=True))
        if exclude_user_id is not None:
            users = users.filter(User.id != exclude_user_id)
        return users.order_by(User.full_name, User.id)
