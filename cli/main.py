# cli/main.py
import logging
import click

from bookshelf.config import BooksOptions
from bookshelf.sa.database import Database
from .commands.db import db
from .commands.user import user
from .commands.library import library
from .commands.wishlist import wishlist

@click.group()
@click.option('--database-url', envvar='DATABASE_URL', default=None, help='SQLAlchemy database URL')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, database_url, verbose):
    """Bookshelf CLI"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    ctx.ensure_object(dict)
    if 'database' not in ctx.obj:
        ctx.obj['database'] = Database(database_url)
    if 'options' not in ctx.obj:
        ctx.obj['options'] = BooksOptions.from_env()

cli.add_command(db)
cli.add_command(user)
cli.add_command(library)
cli.add_command(wishlist)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
