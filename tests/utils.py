# tests/utils.py
from datetime import date, timedelta
from pathlib import Path
from sqlalchemy.orm import Session
from bookshelf.sa.models import Book, LibraryBook, WishlistBook, User
from bookshelf.utils.text import normalize

USER_0 = "c6d3babc-1947-4806-ba13-c6385a63f726"
USER_1 = "720883f6-2029-4a4a-a7e1-a45dac9b644d"
USER_2 = "7b0b5f93-968e-4172-8d3fc545ffe3fbfe"
USER_3 = "8e9abf8c-f64d-4204-bf30-491f1d4c54d7"
ISBN_PREFIX = "97888000000"
GATSBY_ID = "Arw-jgEACAAJ"
GREEN_MILE_ID = "_5RCngEACAAJ"

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "google_books"

def isbn_for(i: int) -> str:
    return f"{ISBN_PREFIX}{i:02d}"

def library_entry(user_id: str, i: int, today: date) -> LibraryBook:
    """Entry for BookId{i} with rating, tag and state cycling through their ranges"""
    state = str(i % 4)
    entry = LibraryBook(
        user_id=user_id,
        book_id=f"BookId{i}",
        rating=i % 5,
        tag=str(i % 4),
        reading_state=state,
    )
    if state != "0":
        entry.initial_time = today - timedelta(days=2 * i)
    if state == "3":
        entry.final_time = today - timedelta(days=i)
    return entry

def seed_catalog(session: Session) -> None:
    """35 catalog books, four users, two populated libraries and wishlists.

    USER_0 owns BookId0-24 and wishes for BookId25-29 plus an external book.
    USER_1 owns BookId0-11 and wishes for BookId28-29. USER_2 has nothing.
    USER_3 is not visible to other users.
    """
    today = date.today()

    for i in range(35):
        session.add(Book(
            id=f"BookId{i}",
            isbn=isbn_for(i),
            title=f"Libro {i}",
            normalized_title=normalize(f"Libro {i}"),
            description=f"Descrizione {i}",
            author=f"Autore s{i}",
            image_path=""
        ))

    for user_id, name, visible in [
        (USER_0, "Cosimo de Medici", True),
        (USER_1, "Maria Callas", True),
        (USER_2, "Sofonisba Anguissola", True),
        (USER_3, "Ennio Morricone", False),
    ]:
        session.add(User(
            id=user_id,
            email=f"{user_id}@example.org",
            full_name=name,
            normalized_full_name=normalize(name),
            visibility=visible
        ))
    session.flush()

    for i in range(25):
        session.add(library_entry(USER_0, i, today))
        if i < 12:
            session.add(library_entry(USER_1, i, today))

    for i in range(25, 30):
        owners = [USER_0, USER_1] if i > 27 else [USER_0]
        for user_id in owners:
            session.add(WishlistBook(
                user_id=user_id,
                book_id=f"BookId{i}",
                isbn=isbn_for(i),
                title=f"Libro {i}",
                normalized_title=f"libro {i}",
                author=f"Autore {i}",
                image_path=""
            ))
    session.add(WishlistBook(
        user_id=USER_0,
        book_id=GATSBY_ID,
        isbn="9788844043957",
        title="Il grande Gatsby",
        normalized_title="il grande gatsby",
        author="Francis Scott Fitzgerald",
        image_path="http://books.google.com/books/content?id=Arw-jgEACAAJ&printsec=frontcover&img=1&zoom=1&source=gbs_api"
    ))
    session.commit()
