"""Typer CLI root application with serve command."""

import typer

from city_explorer_api.core.config import get_settings
from city_explorer_api.core.logging import setup_logging

app = typer.Typer(name="city-explorer", help="City Explorer API and cache management CLI")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir, json_logs=settings.log_json)


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),
    host: str = typer.Option("0.0.0.0", "--host", help="Bind host"),  # noqa: S104
    port: int = typer.Option(3000, "--port", help="Bind port"),
) -> None:
    """Start the API server."""
    import uvicorn

    uvicorn.run(
        "city_explorer_api.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


def _register_subcommands() -> None:
    """Register all CLI subcommand groups."""
    from city_explorer_api.cli.cache_cmd import cache_app
    from city_explorer_api.cli.db_cmd import db_app
    from city_explorer_api.cli.explore_cmd import explore_app

    app.add_typer(db_app, name="db", help="Database migration commands")
    app.add_typer(explore_app, name="explore", help="Resolve places and fetch their resources")
    app.add_typer(cache_app, name="cache", help="Resource cache maintenance commands")


_register_subcommands()
