"""Client configuration for tsview."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from tsview._constants import DEFAULT_BASE_URL, DEFAULT_SOCKET_PATH
from tsview.exceptions import TsviewConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_float(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise TsviewConfigError(f"{name} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class TsviewConfig:
    """Client configuration.

    Parameters
    ----------
    socket_path : str
        Path of the ``tailscaled`` LocalAPI unix socket.
    base_url : str
        URL prefix for LocalAPI requests.  The host part is only used
        as the ``Host`` header; the daemon checks it.
    request_timeout : float
        Total timeout in seconds for a single LocalAPI request.
        Set to ``0`` to disable.
    api_trace_enabled : bool
        Log redacted request/response bodies at DEBUG level.
    """

    socket_path: str = DEFAULT_SOCKET_PATH
    base_url: str = DEFAULT_BASE_URL
    request_timeout: float = 10.0
    api_trace_enabled: bool = False

    @classmethod
    def from_env(cls, **overrides: Any) -> TsviewConfig:
        """Create configuration from ``TSVIEW_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        socket_path = env.get("TSVIEW_SOCKET")
        if socket_path:
            config_kwargs["socket_path"] = socket_path

        base_url = env.get("TSVIEW_BASE_URL")
        if base_url:
            config_kwargs["base_url"] = base_url.rstrip("/")

        timeout_env = env.get("TSVIEW_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            config_kwargs["request_timeout"] = _env_float("TSVIEW_REQUEST_TIMEOUT", timeout_env)

        if "api_trace_enabled" not in overrides:
            config_kwargs["api_trace_enabled"] = _env_bool(
                env.get("TSVIEW_API_TRACE_ENABLED"),
                False,
            )

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
