"""Tests for monitoring helpers."""

from types import SimpleNamespace

from stom import Policy
from stom.observability import monitoring
from stom.runtime import MapperEnv, Settings


class ConsoleOptions:
    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)


def dummy_logfire(called: dict, events: list) -> SimpleNamespace:
    return SimpleNamespace(
        ConsoleOptions=ConsoleOptions,
        configure=lambda **kwargs: called.update(kwargs),
        instrument_pydantic=lambda: events.append(("instrument", {})),
        debug=lambda *a, **k: events.append(("debug", k)),
        info=lambda *a, **k: events.append(("info", k)),
    )


def test_init_logfire_configures_and_instruments(monkeypatch):
    called: dict[str, object] = {}
    events: list[tuple[str, dict]] = []
    monkeypatch.setattr(monitoring, "logfire", dummy_logfire(called, events))

    monitoring.init_logfire(
        Settings.model_validate({"logfire_token": "token"}), "info"
    )

    assert called["token"] == "token"
    assert called["service_name"] == "stom"
    assert called["send_to_logfire"] == "if-token-present"
    assert called["console"].min_log_level == "info"
    assert called["min_level"] == "info"
    assert ("instrument", {}) in events


def test_init_logfire_reads_token_from_env(monkeypatch, tmp_path):
    called: dict[str, object] = {}
    monkeypatch.setattr(monitoring, "logfire", dummy_logfire(called, []))
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("STOM_LOGFIRE_TOKEN", "env-token")

    monitoring.init_logfire(service_name="orders")

    assert called["token"] == "env-token"
    assert called["service_name"] == "orders"


def test_init_logfire_without_token(monkeypatch, settings):
    called: dict[str, object] = {}
    monkeypatch.setattr(monitoring, "logfire", dummy_logfire(called, []))

    monitoring.init_logfire(settings)

    assert "token" in called and called["token"] is None


def test_init_logfire_reports_active_defaults(monkeypatch, settings):
    events: list[tuple[str, dict]] = []
    monkeypatch.setattr(monitoring, "logfire", dummy_logfire({}, events))
    MapperEnv.initialize(settings).update(tag="custom_tag", policy=Policy.EXCLUDE)

    monitoring.init_logfire()

    info = [attrs for kind, attrs in events if kind == "info"]
    assert info == [
        {"tag": "custom_tag", "policy": "exclude", "default_value": "None"}
    ]


def test_init_logfire_without_pydantic_instrumentation(monkeypatch, settings):
    called: dict[str, object] = {}
    module = SimpleNamespace(
        ConsoleOptions=ConsoleOptions,
        configure=lambda **kwargs: called.update(kwargs),
        debug=lambda *a, **k: None,
        info=lambda *a, **k: None,
    )
    monkeypatch.setattr(monitoring, "logfire", module)

    monitoring.init_logfire(settings)

    assert called["service_name"] == "stom"


def test_init_logfire_masks_token(monkeypatch):
    events: list[tuple[str, dict]] = []
    monkeypatch.setattr(monitoring, "logfire", dummy_logfire({}, events))

    monitoring.init_logfire(
        Settings.model_validate({"logfire_token": "secret-token"}), "info"
    )

    debug = [attrs for kind, attrs in events if kind == "debug"]
    assert debug[0]["token"] == "secr..."
    assert "secret-token" not in debug[0]["token"]
