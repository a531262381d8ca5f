"""Tests for cookie_investigator.cli."""

from __future__ import annotations

from unittest import mock

import pytest
from typer.testing import CliRunner

from cookie_investigator import cli
from cookie_investigator.utils import errors

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_dotenv():
    with mock.patch("dotenv.load_dotenv"):
        yield


@pytest.fixture()
def investigate_mock():
    with mock.patch("cookie_investigator.pipeline.investigation.investigate", new_callable=mock.AsyncMock) as m:
        yield m


class TestInvestigateCommand:
    def test_missing_url(self, investigate_mock: mock.AsyncMock) -> None:
        result = runner.invoke(cli.app, [])
        assert result.exit_code == 1
        assert "valid URL" in result.output
        investigate_mock.assert_not_called()

    def test_bad_url(self, investigate_mock: mock.AsyncMock) -> None:
        result = runner.invoke(cli.app, ["example.com"])
        assert result.exit_code == 1
        investigate_mock.assert_not_called()

    def test_runs_investigation(self, investigate_mock: mock.AsyncMock, tmp_path) -> None:
        result = runner.invoke(
            cli.app,
            ["https://example.com", "--output-dir", str(tmp_path), "--headless", "--settle-ms", "100"],
        )
        assert result.exit_code == 0
        investigate_mock.assert_awaited_once()
        args, kwargs = investigate_mock.call_args
        assert args == ("https://example.com",)
        settings = kwargs["settings"]
        assert settings.output_dir == str(tmp_path)
        assert settings.headless is True
        assert settings.settle_ms == 100

    def test_failure_exits_non_zero(self, investigate_mock: mock.AsyncMock) -> None:
        investigate_mock.side_effect = errors.NavigationError("https://example.com", "timeout")
        result = runner.invoke(cli.app, ["https://example.com"])
        assert result.exit_code == 1
        assert "Investigation failed" in result.output

    def test_unknown_settle_strategy(self, investigate_mock: mock.AsyncMock) -> None:
        result = runner.invoke(cli.app, ["https://example.com", "--settle-strategy", "sometimes"])
        assert result.exit_code == 1
        investigate_mock.assert_not_called()
