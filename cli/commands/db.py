import click

@click.group()
def db():
    """Database management commands"""
    pass

@db.command()
@click.option('--drop', is_flag=True, help='Drop all tables first')
@click.pass_context
def init(ctx, drop):
    """Create the database schema"""
    database = ctx.obj['database']
    if drop:
        click.confirm("This will delete all data. Continue?", abort=True)
        database.drop_db()
    database.init_db()
    click.echo(click.style(f"Initialized database at {database.safe_url}", fg='green'))
