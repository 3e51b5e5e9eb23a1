# api/routes/books.py

from fastapi import APIRouter, Depends

from api.dependencies import get_book_service
from bookshelf.models import BookDetailViewModel
from bookshelf.services.book_service import BookService

router = APIRouter(prefix="/books", tags=["books"])

@router.get("/{book_id}", response_model=BookDetailViewModel)
def get_catalog_book(book_id: str, service: BookService = Depends(get_book_service)):
    """Get a book from the catalog, without personal fields."""
    return service.get_catalog_only_book_by_id(book_id)
