import logging

from apps.greeter import main
from lib.config.greeter_loader import parse_greeter_config


def _capture_uvicorn(monkeypatch):
    calls = []
    monkeypatch.setattr(
        main.uvicorn, "run", lambda target, **kwargs: calls.append((target, kwargs))
    )
    return calls


def _no_rebuild(*args, **kwargs):
    raise AssertionError("run() rebuilt the app")


def test_run_serves_module_app_without_rebuilding(monkeypatch):
    calls = _capture_uvicorn(monkeypatch)
    monkeypatch.setattr(main, "create_app", _no_rebuild)
    main.run()
    target, kwargs = calls[0]
    assert target is main.app
    server = main.app.state.config.server
    assert kwargs == {
        "host": server.host,
        "port": server.port,
        "log_level": server.log_level,
    }


def test_run_logs_routes_after_logging_is_configured(monkeypatch, caplog):
    _capture_uvicorn(monkeypatch)
    caplog.set_level(logging.INFO, logger="greeter")
    main.run()
    messages = [r.getMessage() for r in caplog.records]
    for path in ("/", "/ping", "/greet"):
        assert any(m.startswith(f"registered GET {path} ->") for m in messages), path


def test_run_with_config_builds_new_app(monkeypatch):
    calls = _capture_uvicorn(monkeypatch)
    cfg = parse_greeter_config(
        {"server": {"host": "0.0.0.0", "port": 9090, "log_level": "warning"}}
    )
    main.run(cfg)
    target, kwargs = calls[0]
    assert target is not main.app
    assert target.state.config is cfg
    assert kwargs["port"] == 9090
    assert kwargs["host"] == "0.0.0.0"
