"""Integration tests for the `city-explorer` CLI.

Service calls and Alembic are mocked; these tests verify argument parsing,
output, and exit codes.
"""

from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from city_explorer_api.cli.app import app
from city_explorer_api.lib.cache import GatewayError, NotFoundError, ResourceKind, StoreError
from city_explorer_api.schemas.location import LocationResponse

runner = CliRunner()

SEATTLE = LocationResponse(
    id=1,
    search_query="seattle",
    formatted_query="Seattle, WA, USA",
    latitude=47.6062095,
    longitude=-122.3320708,
)


@pytest.fixture(autouse=True)
def _env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")


class TestExploreLocation:
    def test_prints_location_json(self) -> None:
        with patch(
            "city_explorer_api.services.explorer_service.resolve_location",
            new_callable=AsyncMock,
            return_value=SEATTLE,
        ) as mock_resolve:
            result = runner.invoke(app, ["explore", "location", "seattle"])

        assert result.exit_code == 0, result.output
        assert '"formatted_query": "Seattle, WA, USA"' in result.output
        assert mock_resolve.await_args.args[2] == "seattle"

    @pytest.mark.parametrize(
        ("error", "exit_code"),
        [
            (NotFoundError("No location for query 'nowhere'"), 1),
            (GatewayError("google", "Request timed out"), 2),
            (StoreError("insert_location", "database is locked"), 3),
        ],
    )
    def test_error_exit_codes(self, error: Exception, exit_code: int) -> None:
        with patch(
            "city_explorer_api.services.explorer_service.resolve_location",
            new_callable=AsyncMock,
            side_effect=error,
        ):
            result = runner.invoke(app, ["explore", "location", "nowhere"])

        assert result.exit_code == exit_code


class TestExploreFetch:
    def test_fetch_passes_kind(self) -> None:
        with patch(
            "city_explorer_api.services.explorer_service.explore",
            new_callable=AsyncMock,
            return_value=[],
        ) as mock_explore:
            result = runner.invoke(app, ["explore", "fetch", "movies", "seattle"])

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "[]"
        assert mock_explore.await_args.args[2] is ResourceKind.MOVIES
        assert mock_explore.await_args.args[3] == "seattle"

    def test_unknown_kind_rejected(self) -> None:
        result = runner.invoke(app, ["explore", "fetch", "parking", "seattle"])
        assert result.exit_code != 0


class TestCacheClear:
    def test_clear_all(self) -> None:
        counts = {ResourceKind.WEATHER: 4, ResourceKind.EVENTS: 0, ResourceKind.MOVIES: 20, ResourceKind.REVIEWS: 2}
        with patch(
            "city_explorer_api.services.explorer_service.clear_cache",
            new_callable=AsyncMock,
            return_value=counts,
        ) as mock_clear:
            result = runner.invoke(app, ["cache", "clear"])

        assert result.exit_code == 0, result.output
        assert "weather: 4 rows deleted" in result.output
        assert "movies: 20 rows deleted" in result.output
        assert mock_clear.await_args.args[1] is None

    def test_clear_one_kind(self) -> None:
        with patch(
            "city_explorer_api.services.explorer_service.clear_cache",
            new_callable=AsyncMock,
            return_value={ResourceKind.WEATHER: 1},
        ) as mock_clear:
            result = runner.invoke(app, ["cache", "clear", "--kind", "weather"])

        assert result.exit_code == 0, result.output
        assert mock_clear.await_args.args[1] is ResourceKind.WEATHER

    def test_store_failure_exits_3(self) -> None:
        with patch(
            "city_explorer_api.services.explorer_service.clear_cache",
            new_callable=AsyncMock,
            side_effect=StoreError("delete_all", "database is locked"),
        ):
            result = runner.invoke(app, ["cache", "clear"])

        assert result.exit_code == 3
        assert "rows deleted" not in result.output


class TestDbCommands:
    def test_upgrade_defaults_to_head(self) -> None:
        with patch("alembic.command.upgrade") as mock_upgrade:
            result = runner.invoke(app, ["db", "upgrade"])

        assert result.exit_code == 0, result.output
        assert mock_upgrade.call_args.args[1] == "head"

    def test_downgrade(self) -> None:
        with patch("alembic.command.downgrade") as mock_downgrade:
            result = runner.invoke(app, ["db", "downgrade", "base"])

        assert result.exit_code == 0, result.output
        assert mock_downgrade.call_args.args[1] == "base"


class TestServe:
    def test_serve_runs_app_factory(self) -> None:
        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve", "--port", "8080"])

        assert result.exit_code == 0, result.output
        assert mock_run.call_args.args[0] == "city_explorer_api.main:create_app"
        assert mock_run.call_args.kwargs["factory"] is True
        assert mock_run.call_args.kwargs["port"] == 8080
