from __future__ import annotations

import logging

import pytest

from startup_namer.web_ui import main as web_main


@pytest.fixture
def captured_run(monkeypatch):
    calls = []
    monkeypatch.delenv("NAMER_SETTINGS_FILE", raising=False)
    monkeypatch.setattr(web_main, "_build_ui", lambda runtime: None)
    monkeypatch.setattr(web_main.ui, "run", lambda **kwargs: calls.append(kwargs))
    level = logging.getLogger().level
    yield calls
    logging.getLogger().setLevel(level)


def test_main_runs_nicegui_without_session_storage(captured_run) -> None:
    web_main.main(["--offline", "--port", "9001"])

    assert len(captured_run) == 1
    kwargs = captured_run[0]
    assert kwargs["port"] == 9001
    assert kwargs["title"] == "Startup Name Generator"
    assert "storage_secret" not in kwargs


def test_smoke_test_skips_the_server(captured_run, capsys) -> None:
    web_main.main(["--offline", "--smoke-test"])

    assert captured_run == []
    assert "web-smoke-ok" in capsys.readouterr().out
