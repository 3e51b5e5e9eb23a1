# api/routes/wishlist.py

from typing import Optional
from fastapi import APIRouter, Depends, Query, Response, status

from api.dependencies import get_current_user_id, get_wishlist_service
from bookshelf.models import BookListInput, ListViewModel, WishlistViewModel
from bookshelf.services.wishlist_service import WishlistService

router = APIRouter(prefix="/wishlist", tags=["wishlist"])

@router.get("", response_model=ListViewModel[WishlistViewModel])
def get_wishlist(
    search: str = Query("", description="Search books by title"),
    page: int = Query(1, description="Page number (1-based)"),
    order_by: Optional[str] = Query(None, description="Sort key"),
    ascending: bool = Query(True, description="Sort direction"),
    limit: int = Query(0, le=100, description="Items per page, 0 for the configured default"),
    user_id: str = Depends(get_current_user_id),
    service: WishlistService = Depends(get_wishlist_service)
):
    options = service.options
    model = BookListInput.build(search, page, order_by, ascending, limit, options.order, options.per_page)
    return service.get_books(user_id, model)

@router.post("/{book_id}", response_model=WishlistViewModel, status_code=status.HTTP_201_CREATED)
def add_wishlist_book(
    book_id: str,
    user_id: str = Depends(get_current_user_id),
    service: WishlistService = Depends(get_wishlist_service)
):
    return service.add_book_to_wishlist(user_id, book_id)

@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_wishlist_book(
    book_id: str,
    user_id: str = Depends(get_current_user_id),
    service: WishlistService = Depends(get_wishlist_service)
):
    service.remove_book_from_wishlist(user_id, book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
