"""Explore CLI commands: resolve a place and print its cached resources."""

import asyncio
import json

import typer

from city_explorer_api.lib.cache import GatewayError, NotFoundError, ResourceKind, StoreError

explore_app = typer.Typer()


@explore_app.command("location")
def location(
    query: str = typer.Argument(..., help="Free-text place to search for"),
) -> None:
    """Resolve a search query to a stored location."""
    asyncio.run(_run(_location, query))


@explore_app.command("fetch")
def fetch(
    kind: ResourceKind = typer.Argument(..., help="Resource kind to fetch"),  # noqa: B008
    query: str = typer.Argument(..., help="Free-text place to search for"),
) -> None:
    """Resolve a query and print one kind of resource for it."""
    asyncio.run(_run(_fetch, kind, query))


async def _run(func, *args) -> None:  # type: ignore[no-untyped-def]
    """Run a command body with an initialized engine, mapping errors to exit codes."""
    from city_explorer_api.core.config import get_settings
    from city_explorer_api.core.database import dispose_engine, init_engine, session_scope

    settings = get_settings()
    init_engine(settings.database_url, schema=settings.database_schema)
    try:
        async with session_scope() as session:
            await func(session, settings, *args)
    except NotFoundError as e:
        typer.echo(f"Not found: {e}", err=True)
        raise typer.Exit(code=1) from e
    except GatewayError as e:
        typer.echo(f"Provider error: {e}", err=True)
        raise typer.Exit(code=2) from e
    except StoreError as e:
        typer.echo(f"Store error: {e}", err=True)
        raise typer.Exit(code=3) from e
    finally:
        await dispose_engine()


async def _location(session, settings, query: str) -> None:  # type: ignore[no-untyped-def]
    from city_explorer_api.services.explorer_service import resolve_location

    result = await resolve_location(session, settings, query)
    typer.echo(result.model_dump_json(indent=2))


async def _fetch(session, settings, kind: ResourceKind, query: str) -> None:  # type: ignore[no-untyped-def]
    from city_explorer_api.services.explorer_service import explore

    results = await explore(session, settings, kind, query)
    typer.echo(json.dumps([r.model_dump(mode="json") for r in results], indent=2))
