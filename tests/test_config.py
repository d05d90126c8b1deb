from __future__ import annotations

import pytest

from tsview.config import TsviewConfig
from tsview.exceptions import TsviewConfigError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TSVIEW_SOCKET", "TSVIEW_BASE_URL", "TSVIEW_REQUEST_TIMEOUT", "TSVIEW_API_TRACE_ENABLED"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    config = TsviewConfig.from_env()
    assert config.socket_path == "/var/run/tailscale/tailscaled.sock"
    assert config.base_url == "http://local-tailscaled.sock"
    assert config.request_timeout == 10.0
    assert config.api_trace_enabled is False


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TSVIEW_SOCKET", "/tmp/ts.sock")
    monkeypatch.setenv("TSVIEW_BASE_URL", "http://127.0.0.1:41112/")
    monkeypatch.setenv("TSVIEW_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("TSVIEW_API_TRACE_ENABLED", "yes")

    config = TsviewConfig.from_env()

    assert config.socket_path == "/tmp/ts.sock"
    assert config.base_url == "http://127.0.0.1:41112"
    assert config.request_timeout == 2.5
    assert config.api_trace_enabled is True


def test_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TSVIEW_SOCKET", "/tmp/ts.sock")
    monkeypatch.setenv("TSVIEW_REQUEST_TIMEOUT", "not-a-number")
    monkeypatch.setenv("TSVIEW_API_TRACE_ENABLED", "1")

    config = TsviewConfig.from_env(socket_path="/run/other.sock", request_timeout=1.0, api_trace_enabled=False)

    assert config.socket_path == "/run/other.sock"
    assert config.request_timeout == 1.0
    assert config.api_trace_enabled is False


def test_invalid_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TSVIEW_REQUEST_TIMEOUT", "soon")
    with pytest.raises(TsviewConfigError, match="TSVIEW_REQUEST_TIMEOUT"):
        TsviewConfig.from_env()


def test_unrecognized_bool_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TSVIEW_API_TRACE_ENABLED", "maybe")
    assert TsviewConfig.from_env().api_trace_enabled is False
