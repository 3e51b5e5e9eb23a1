import click
from contextlib import contextmanager
from typing import Iterator
from sqlalchemy.orm import Session

from bookshelf.exceptions import BookshelfError
from bookshelf.models import BookListInput, ListViewModel

@contextmanager
def service_session(ctx: click.Context) -> Iterator[Session]:
    """Open a session on the CLI's database and turn service errors into exit code 1"""
    session = ctx.obj['database'].get_session()
    try:
        yield session
    except BookshelfError as e:
        session.rollback()
        click.echo(click.style(f"Error: {e}", fg='red'), err=True)
        ctx.exit(1)
    finally:
        session.close()

def list_input(ctx: click.Context, search: str, page: int, order_by: str, descending: bool, limit: int) -> BookListInput:
    options = ctx.obj['options']
    return BookListInput.build(search, page, order_by, not descending, limit, options.order, options.per_page)

def print_page(page: ListViewModel, describe) -> None:
    """Print one page of results followed by a summary line"""
    if not page.results:
        click.echo(click.style("No books found", fg='yellow'))
        return
    for item in page.results:
        click.echo(describe(item))
    click.echo(click.style(
        f"\nPage {page.page}, showing {len(page.results)} of {page.total_count}", fg='blue'
    ))

def list_options(f):
    """Shared paging, search and ordering options for list commands"""
    f = click.option('--limit', type=int, default=0, help='Books per page (default: configured page size)')(f)
    f = click.option('--desc', 'descending', is_flag=True, help='Sort in descending order')(f)
    f = click.option('--order-by', default=None, help='Sort key (title, rating, tag, reading_state, author)')(f)
    f = click.option('--page', type=int, default=1, help='Page number')(f)
    f = click.option('--search', default='', help='Search by title')(f)
    return f
