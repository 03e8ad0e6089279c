"""Command-line interface for CuraLink."""

import logging

import click

from curalink.config import get_settings


@click.group()
@click.version_option(package_name="curalink")
def main():
    """CuraLink: accounts and research data for patients and researchers."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=5000, show_default=True, type=int)
@click.option("--reload", is_flag=True, help="Reload on code changes (development).")
def serve(host: str, port: int, reload: bool):
    """Run the HTTP API."""
    import uvicorn

    click.echo(f"Serving CuraLink at http://{host}:{port}")
    uvicorn.run("curalink.api.main:app", host=host, port=port, reload=reload)


@main.command("init-db")
def init_db():
    """Create the database tables."""
    from curalink.db.base import Base
    from curalink.db.session import get_engine
    import curalink.sqlalchemy.users  # noqa: F401

    engine = get_engine()
    Base.metadata.create_all(engine)
    engine.dispose()
    click.echo(f"Tables created: {', '.join(sorted(Base.metadata.tables))}")


if __name__ == "__main__":
    main()
