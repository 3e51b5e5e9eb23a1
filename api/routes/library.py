# api/routes/library.py

from typing import Optional
from fastapi import APIRouter, Depends, Query, Response, status

from api.dependencies import get_book_service, get_current_user_id
from api.schemas import BookEditRequest
from bookshelf.models import BookDetailViewModel, BookListInput, BookViewModel, EditBookInput, ListViewModel
from bookshelf.services.book_service import BookService

router = APIRouter(prefix="/library", tags=["library"])

@router.get("", response_model=ListViewModel[BookViewModel])
def get_library(
    search: str = Query("", description="Search books by title"),
    page: int = Query(1, description="Page number (1-based)"),
    order_by: Optional[str] = Query(None, description="Sort key"),
    ascending: bool = Query(True, description="Sort direction"),
    limit: int = Query(0, le=100, description="Items per page, 0 for the configured default"),
    user_id: str = Depends(get_current_user_id),
    service: BookService = Depends(get_book_service)
):
    """Get a page of the caller's library."""
    options = service.options
    model = BookListInput.build(search, page, order_by, ascending, limit, options.order, options.per_page)
    return service.get_books(user_id, model)

@router.get("/{book_id}", response_model=BookDetailViewModel)
def get_library_book(
    book_id: str,
    user_id: str = Depends(get_current_user_id),
    service: BookService = Depends(get_book_service)
):
    return service.get_book_by_id(user_id, book_id)

@router.put("/{book_id}", response_model=BookDetailViewModel)
def edit_library_book(
    book_id: str,
    changes: BookEditRequest,
    user_id: str = Depends(get_current_user_id),
    service: BookService = Depends(get_book_service)
):
    """Update rating, tag, reading state and reading dates of a library book."""
    return service.edit_book(user_id, EditBookInput(book_id=book_id, **changes.model_dump()))

@router.post("/{book_id}", response_model=BookDetailViewModel, status_code=status.HTTP_201_CREATED)
def add_library_book(
    book_id: str,
    user_id: str = Depends(get_current_user_id),
    service: BookService = Depends(get_book_service)
):
    return service.add_book_to_library(user_id, book_id)

@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_library_book(
    book_id: str,
    user_id: str = Depends(get_current_user_id),
    service: BookService = Depends(get_book_service)
):
    service.remove_book_from_library(user_id, book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
