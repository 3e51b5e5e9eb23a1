import click

from bookshelf.services.user_service import UserService
from ..utils import service_session

@click.group()
def user():
    """Manage user profiles"""
    pass

@user.command()
@click.argument('user_id')
@click.argument('full_name')
@click.option('--email', default=None, help='Email address')
@click.option('--hidden', is_flag=True, help='Hide the profile from other users')
@click.pass_context
def create(ctx, user_id, full_name, email, hidden):
    """Create a user"""
    with service_session(ctx) as session:
        created = UserService(session, ctx.obj['options']).create_user(
            user_id, full_name, email=email, visibility=not hidden
        )
        click.echo(click.style(f"Created user: {created.full_name} (ID: {created.id})", fg='green'))

@user.command()
@click.argument('user_id')
@click.option('--visible/--hidden', default=True, help='Profile visibility')
@click.pass_context
def visibility(ctx, user_id, visible):
    """Change whether a profile is visible to other users"""
    with service_session(ctx) as session:
        UserService(session, ctx.obj['options']).set_visibility(user_id, visible)
        click.echo(f"User {user_id} is now {'visible' if visible else 'hidden'}")

@user.command()
@click.argument('term', default='')
@click.option('--user-id', required=True, help='Calling user, left out of the results')
@click.pass_context
def search(ctx, term, user_id):
    """Search visible users by name"""
    with service_session(ctx) as session:
        found = UserService(session, ctx.obj['options']).search_users(user_id, term)
        for profile in found.results:
            click.echo(f"{profile.full_name} (ID: {profile.id})")
        click.echo(click.style(f"\nFound {found.total_count} users", fg='blue'))
