# bookshelf/sa/models/user.py
from sqlalchemy import String, Boolean
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class User(Base, TimestampMixin):
    __tablename__ = 'user'

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True, unique=True)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    normalized_full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    visibility: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # Relationships
    library_books = relationship('LibraryBook', back_populates='user', cascade='all, delete-orphan')
    books = relationship('Book', secondary='library_book', viewonly=True)
    wishlist_books = relationship('WishlistBook', back_populates='user', cascade='all, delete-orphan')
