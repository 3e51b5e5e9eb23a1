import click

from bookshelf.clients import GoogleBooksClient
from bookshelf.models import EditBookInput
from bookshelf.services.book_service import BookService
from ..utils import list_input, list_options, print_page, service_session

def describe_book(book) -> str:
    return (
        f"{book.title} by {book.author or 'Unknown'} (ID: {book.id}) - "
        f"rating {book.rating:g}, {book.tag_label}, {book.reading_state_label}"
    )

def book_service(ctx, session) -> BookService:
    client = ctx.obj.get('google_books_client') or GoogleBooksClient()
    return BookService(session, client, ctx.obj['options'])

@click.group()
def library():
    """Manage a user's library"""
    pass

@library.command(name='list')
@click.option('--user-id', required=True, help='Owner of the library')
@list_options
@click.pass_context
def list_books(ctx, user_id, search, page, order_by, descending, limit):
    """List books in a user's library"""
    with service_session(ctx) as session:
        model = list_input(ctx, search, page, order_by, descending, limit)
        print_page(book_service(ctx, session).get_books(user_id, model), describe_book)

@library.command()
@click.argument('book_id')
@click.option('--user-id', required=True, help='Owner of the library')
@click.pass_context
def add(ctx, book_id, user_id):
    """Add a book to a user's library, looking it up on Google Books if needed"""
    with service_session(ctx) as session:
        book = book_service(ctx, session).add_book_to_library(user_id, book_id)
        click.echo(click.style(f"Added '{book.title}' to library", fg='green'))

@library.command()
@click.argument('book_id')
@click.option('--user-id', required=True, help='Owner of the library')
@click.pass_context
def remove(ctx, book_id, user_id):
    """Remove a book from a user's library"""
    with service_session(ctx) as session:
        book_service(ctx, session).remove_book_from_library(user_id, book_id)
        click.echo(click.style(f"Removed {book_id} from library", fg='green'))

@library.command()
@click.argument('book_id')
@click.option('--user-id', required=True, help='Owner of the library')
@click.option('--rating', type=float, default=None, help='Rating from 0 to 5 (default: unchanged)')
@click.option('--tag', default=None, help='Tag code (0-3)')
@click.option('--reading-state', default=None, help='Reading state code (0-3)')
@click.option('--started', type=click.DateTime(formats=['%Y-%m-%d']), default=None, help='Date reading started')
@click.option('--finished', type=click.DateTime(formats=['%Y-%m-%d']), default=None, help='Date reading finished')
@click.pass_context
def edit(ctx, book_id, user_id, rating, tag, reading_state, started, finished):
    """Edit rating, tag, reading state and dates of a library book"""
    with service_session(ctx) as session:
        model = EditBookInput(
            book_id=book_id,
            rating=rating,
            tag=tag,
            reading_state=reading_state,
            initial_time=started.date() if started else None,
            final_time=finished.date() if finished else None,
        )
        book = book_service(ctx, session).edit_book(user_id, model)
        click.echo(click.style(f"Updated '{book.title}'", fg='green'))
        click.echo(f"  Rating: {book.rating:g}")
        click.echo(f"  Tag: {book.tag_label}")
        click.echo(f"  Reading state: {book.reading_state_label}")
        click.echo(f"  Started: {book.initial_time or '-'}")
        click.echo(f"  Finished: {book.final_time or '-'}")
