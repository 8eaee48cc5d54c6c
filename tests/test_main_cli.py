"""Regression tests for the runtime CLI entrypoint."""

from __future__ import annotations

import json

import pytest

from app import main as main_module


def test_main_status_command_prints_snapshot_json(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    """Print one status snapshot as JSON for the `status` command."""

    monkeypatch.setenv("APP_VERSION", "9.9.9")
    monkeypatch.setenv("ENVIRONMENT_NAME", "cli-test")
    monkeypatch.setattr("sys.argv", ["infoline-api", "status"])

    main_module.main()

    payload = json.loads(capsys.readouterr().out)
    assert payload["version"] == "9.9.9"
    assert payload["environment"] == "cli-test"
    assert set(payload) == {
        "applicationName",
        "version",
        "environment",
        "timestamp",
        "uptime",
        "memoryTotal",
        "memoryFree",
        "memoryUsed",
    }


def test_main_api_command_runs_uvicorn_with_configured_binding(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start uvicorn with configured host and port for the default command."""

    captured: dict[str, object] = {}

    def _fake_run(application, host: str, port: int) -> None:
        captured.update({"application": application, "host": host, "port": port})

    monkeypatch.setenv("APPLICATION_PORT", "9090")
    monkeypatch.setattr("sys.argv", ["infoline-api"])
    monkeypatch.setattr(main_module.uvicorn, "run", _fake_run)

    main_module.main()

    assert captured["port"] == 9090
    assert captured["host"] == "0.0.0.0"
    assert captured["application"] is not None
