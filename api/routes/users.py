# api/routes/users.py

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status

from api.dependencies import get_current_user_id, get_user_service
from bookshelf.models import BookListInput, BookViewModel, ListViewModel, UserViewModel
from bookshelf.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])

@router.get("", response_model=ListViewModel[UserViewModel])
def search_users(
    search: str = Query("", description="Search users by name"),
    user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service)
):
    """
    Find other visible users by name.

    Args:
        search: Search string, empty matches everyone
        user_id: The calling user, left out of the results
    """
    return service.search_users(user_id, search)

@router.get("/{other_user_id}/books", response_model=ListViewModel[BookViewModel])
def get_user_books(
    other_user_id: str,
    search: str = Query("", description="Search books by title"),
    page: int = Query(1, description="Page number (1-based)"),
    order_by: Optional[str] = Query(None, description="Sort key"),
    ascending: bool = Query(True, description="Sort direction"),
    limit: int = Query(0, le=100, description="Items per page, 0 for the configured default"),
    user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service)
):
    """
    Get a page of another user's library.

    Only visible profiles can be browsed, apart from one's own.
    """
    if other_user_id != user_id and not service.is_visible(other_user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    options = service.options
    model = BookListInput.build(search, page, order_by, ascending, limit, options.order, options.per_page)
    return service.get_user_books(other_user_id, model)
