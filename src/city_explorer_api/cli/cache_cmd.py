"""Cache maintenance CLI commands."""

import asyncio

import typer

from city_explorer_api.lib.cache import ResourceKind, StoreError

cache_app = typer.Typer()


@cache_app.command("clear")
def clear(
    kind: ResourceKind | None = typer.Option(None, "--kind", help="Only clear this resource kind"),  # noqa: B008
) -> None:
    """Delete cached resource rows so the next request fetches live data.

    Resolved locations are kept.
    """
    try:
        counts = asyncio.run(_clear(kind))
    except StoreError as e:
        typer.echo(f"Store error: {e}", err=True)
        raise typer.Exit(code=3) from e
    for cleared_kind, count in counts.items():
        typer.echo(f"{cleared_kind}: {count} rows deleted")


async def _clear(kind: ResourceKind | None) -> dict[ResourceKind, int]:
    from city_explorer_api.core.config import get_settings
    from city_explorer_api.core.database import dispose_engine, init_engine, session_scope
    from city_explorer_api.services.explorer_service import clear_cache

    settings = get_settings()
    init_engine(settings.database_url, schema=settings.database_schema)
    try:
        async with session_scope() as session:
            return await clear_cache(session, kind)
    finally:
        await dispose_engine()
