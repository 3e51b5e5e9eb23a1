# bookshelf/services/listing.py
"""Filtered, ordered and paginated views over a user's books."""

import logging
from typing import Any, Dict, List, NamedTuple
from sqlalchemy.orm import Query

from bookshelf.config import OrderOptions
from bookshelf.models import BookListInput

logger = logging.getLogger(__name__)


class Page(NamedTuple):
    rows: List[Any]
    total_count: int
    page: int


def clamp_page(page: int, limit: int, total_count: int) -> int:
    """Return the page to actually serve.

    Pages below 1 become 1. A page past the end of the result set also falls
    back to page 1, not to the last page.
    """
    if page < 1:
        return 1
    if page > 1 and (page - 1) * limit >= total_count:
        return 1
    return page


def resolve_order(
    model: BookListInput,
    sort_columns: Dict[str, Any],
    order: OrderOptions
) -> tuple[Any, bool]:
    """Pick the column and direction to sort by.

    A key the source can't sort on falls back to the configured default, and
    then to title.
    """
    if model.order_by in sort_columns:
        return sort_columns[model.order_by], model.ascending
    if model.order_by != order.by:
        logger.debug(f"Order key '{model.order_by}' not sortable here, using '{order.by}'")
    column = sort_columns.get(order.by, sort_columns["title"])
    return column, order.ascending


def paginate(
    query: Query,
    model: BookListInput,
    sort_columns: Dict[str, Any],
    tie_breaker: Any,
    order: OrderOptions
) -> Page:
    """Apply ordering and paging to a filtered query.

    Args:
        query: Filtered, unordered query over the source rows
        model: Sanitized list input
        sort_columns: Sortable keys of this source mapped to columns
        tie_breaker: Column appended to every ORDER BY so pages are stable
        order: Ordering defaults

    Returns:
        Page with the rows, the size of the whole filtered set and the page served
    """
    total_count = query.count()
    page = clamp_page(model.page, model.limit, total_count)

    column, ascending = resolve_order(model, sort_columns, order)
    ordered = query.order_by(column.asc() if ascending else column.desc(), tie_breaker.asc())

    rows = ordered.offset((page - 1) * model.limit).limit(model.limit).all()
    return Page(rows=rows, total_count=total_count, page=page)
