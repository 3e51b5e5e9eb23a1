# api/dependencies.py
from functools import lru_cache
from typing import Iterator
from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from bookshelf.clients import GoogleBooksClient
from bookshelf.config import BooksOptions, GoogleBooksApiOptions
from bookshelf.sa.database import Database
from bookshelf.services.book_service import BookService
from bookshelf.services.user_service import UserService
from bookshelf.services.wishlist_service import WishlistService

@lru_cache
def get_database() -> Database:
    return Database()

@lru_cache
def get_books_options() -> BooksOptions:
    return BooksOptions.from_env()

@lru_cache
def get_google_books_client() -> GoogleBooksClient:
    return GoogleBooksClient(GoogleBooksApiOptions.from_env())

def get_db() -> Iterator[Session]:
    """Get a database session.

    The session is closed when the request is complete.

    Yields:
        Session: A SQLAlchemy session
    """
    session = get_database().get_session()
    try:
        yield session
    finally:
        session.close()

def get_current_user_id(x_user_id: str = Header(..., description="ID of the calling user")) -> str:
    if not x_user_id.strip():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing user id")
    return x_user_id

def get_book_service(
    db: Session = Depends(get_db),
    client: GoogleBooksClient = Depends(get_google_books_client),
    options: BooksOptions = Depends(get_books_options)
) -> BookService:
    return BookService(db, client, options)

def get_wishlist_service(
    db: Session = Depends(get_db),
    client: GoogleBooksClient = Depends(get_google_books_client),
    options: BooksOptions = Depends(get_books_options)
) -> WishlistService:
    return WishlistService(db, client, options)

def get_user_service(
    db: Session = Depends(get_db),
    options: BooksOptions = Depends(get_books_options)
) -> UserService:
    return UserService(db, options)
