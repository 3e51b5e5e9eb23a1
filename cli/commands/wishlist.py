import click

from bookshelf.clients import GoogleBooksClient
from bookshelf.services.wishlist_service import WishlistService
from ..utils import list_input, list_options, print_page, service_session

def wishlist_service(ctx, session) -> WishlistService:
    client = ctx.obj.get('google_books_client') or GoogleBooksClient()
    return WishlistService(session, client, ctx.obj['options'])

@click.group()
def wishlist():
    """Manage a user's wishlist"""
    pass

@wishlist.command(name='list')
@click.option('--user-id', required=True, help='Owner of the wishlist')
@list_options
@click.pass_context
def list_books(ctx, user_id, search, page, order_by, descending, limit):
    """List books in a user's wishlist"""
    with service_session(ctx) as session:
        model = list_input(ctx, search, page, order_by, descending, limit)
        print_page(
            wishlist_service(ctx, session).get_books(user_id, model),
            lambda book: f"{book.title} by {book.author or 'Unknown'} (ID: {book.id})"
        )

@wishlist.command()
@click.argument('book_id')
@click.option('--user-id', required=True, help='Owner of the wishlist')
@click.pass_context
def add(ctx, book_id, user_id):
    """Add a book to a user's wishlist"""
    with service_session(ctx) as session:
        book = wishlist_service(ctx, session).add_book_to_wishlist(user_id, book_id)
        click.echo(click.style(f"Added '{book.title}' to wishlist", fg='green'))

@wishlist.command()
@click.argument('book_id')
@click.option('--user-id', required=True, help='Owner of the wishlist')
@click.pass_context
def remove(ctx, book_id, user_id):
    """Remove a book from a user's wishlist"""
    with service_session(ctx) as session:
        wishlist_service(ctx, session).remove_book_from_wishlist(user_id, book_id)
        click.echo(click.style(f"Removed {book_id} from wishlist", fg='green'))
