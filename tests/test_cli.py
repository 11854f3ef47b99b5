"""Tests for the workout-suggest command line entry point."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from load_engine.engine import AdaptiveWorkoutEngine
from workout_suggest import cli


@pytest.fixture
def engine(overloaded_history, history_provider_factory, templates, catalog):
    return AdaptiveWorkoutEngine(history_provider_factory(overloaded_history), templates, catalog)


@pytest.fixture
def configured(monkeypatch):
    monkeypatch.setattr(cli, "WORKOUT_STORE_URL", "https://store.example")


class TestMain:
    def test_missing_store_url(self, monkeypatch) -> None:
        monkeypatch.setattr(cli, "WORKOUT_STORE_URL", "")
        assert cli.main(["--user-id", "user-1"]) == cli.EXIT_CONFIG_ERROR

    def test_invalid_now(self, configured) -> None:
        assert cli.main(["--user-id", "user-1", "--now", "not-a-date"]) == cli.EXIT_CONFIG_ERROR

    def test_adaptive_output(self, configured, engine, capsys) -> None:
        with patch.object(cli, "build_engine", return_value=engine):
            code = cli.main(["--user-id", "user-1", "--now", "2026-03-18T12:00:00+00:00"])
        assert code == 0
        result = json.loads(capsys.readouterr().out)
        assert result["adaptation_type"] == "REST"
        assert result["template_name"] == "🔋 Recovery Push Day"

    def test_fatigue_mode(self, configured, engine, capsys) -> None:
        with patch.object(cli, "build_engine", return_value=engine):
            cli.main(["--user-id", "user-1", "--mode", "fatigue", "--now", "2026-03-18T12:00:00"])
        result = json.loads(capsys.readouterr().out)
        assert result["fatigue_score"] == 75
        assert len(result["signals"]) == 4

    def test_launcher_mode(self, configured, engine, capsys) -> None:
        with patch.object(cli, "build_engine", return_value=engine):
            cli.main(["--user-id", "user-1", "--mode", "launcher", "--now", "2026-03-18T12:00:00Z"])
        result = json.loads(capsys.readouterr().out)
        assert "fatigue_score" not in result
        assert result["template_id"] == "tpl-push"


class TestParseNow:
    def test_naive_is_utc(self) -> None:
        assert cli._parse_now("2026-03-18T12:00:00").tzinfo is not None

    def test_none(self) -> None:
        assert cli._parse_now(None) is None
