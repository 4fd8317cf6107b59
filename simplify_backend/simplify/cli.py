import click

from . import db
from .catalog_seed import COURSES, GIG_BOOKS, TRIAL_PROJECTS
from .services.catalog_service import CatalogService
from .services.user_service import UserService


def register_commands(app):
    @app.cli.command("init-db")
    def init_db():
        """Create all tables."""
        db.create_all()
        click.echo("Database tables created.")

    @app.cli.command("seed-catalog")
    def seed_catalog():
        """Insert the static courses, gig guide books and trial projects."""
        added = CatalogService().seed(COURSES, GIG_BOOKS, TRIAL_PROJECTS)
        click.echo(f"Catalog seeded ({added} new rows).")

    @app.cli.command("create-admin")
    @click.option("--name", required=True)
    @click.option("--email", required=True)
    @click.password_option()
    def create_admin(name, email, password):
        """Create an admin account for catalog management."""
        admin = UserService().create_admin(name, email, password)
        click.echo(f"Admin {admin.email} created.")
