"""LocalAPI transport over the tailscaled unix socket."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from tsview._constants import CURRENT_CAP_VERSION, USER_AGENT
from tsview._redact import redact_for_log
from tsview.config import TsviewConfig
from tsview.exceptions import TsviewTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`LocalApiTransport`) concrete.
    """

    async def request_json(
        self,
        method: str,
        endpoint: str,
        *,
        params: Mapping[str, str] | None = None,
        json_body: Any = None,
    ) -> Any:
        ...


def create_http_session(config: TsviewConfig) -> aiohttp.ClientSession:
    """Create a client session bound to the LocalAPI socket."""
    timeout = aiohttp.ClientTimeout(total=config.request_timeout or None)
    connector = aiohttp.UnixConnector(path=config.socket_path)
    return aiohttp.ClientSession(connector=connector, timeout=timeout)


def _error_message(text: str) -> str:
    """Extract the daemon's ``{"error": ...}`` message, else the raw text."""
    try:
        body = json.loads(text)
    except json.JSONDecodeError:
        return text.strip()[:200]
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return text.strip()[:200]


class LocalApiTransport:
    """JSON-over-HTTP transport for the tailscaled LocalAPI."""

    def __init__(self, config: TsviewConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session

    async def request_json(
        self,
        method: str,
        endpoint: str,
        *,
        params: Mapping[str, str] | None = None,
        json_body: Any = None,
    ) -> Any:
        """Send one LocalAPI request and decode the JSON reply.

        An empty reply body decodes to ``None``.
        """
        headers: dict[str, str] = {
            "user-agent": USER_AGENT,
            "tailscale-cap": CURRENT_CAP_VERSION,
        }
        data: str | None = None
        if json_body is not None:
            data = json.dumps(json_body)
            headers["content-type"] = "application/json"

        url = f"{self._config.base_url}{endpoint}"
        _logger.debug("%s %s", method, endpoint)
        if self._config.api_trace_enabled and json_body is not None:
            _logger.debug("%s %s request: %s", method, endpoint, redact_for_log(json_body))

        try:
            async with self._http.request(method, url, params=params, data=data, headers=headers) as resp:
                body = await resp.read()
                if resp.status < 200 or resp.status >= 300:
                    message = _error_message(body.decode("utf-8", errors="replace"))
                    raise TsviewTransportError(
                        f"HTTP {resp.status} from {endpoint}: {message}",
                        status_code=resp.status,
                        endpoint=endpoint,
                    )
        except TsviewTransportError:
            raise
        except asyncio.TimeoutError as exc:
            raise TsviewTransportError(
                f"Request to {endpoint} timed out",
                endpoint=endpoint,
            ) from exc
        except aiohttp.ClientError as exc:
            raise TsviewTransportError(
                f"Request to {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc

        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise TsviewTransportError(
                f"Invalid UTF-8 from {endpoint}",
                endpoint=endpoint,
            ) from exc

        if not text.strip():
            return None

        try:
            result = json.loads(text)
        except json.JSONDecodeError as exc:
            raise TsviewTransportError(
                f"Invalid JSON from {endpoint}: {text[:200]}",
                endpoint=endpoint,
            ) from exc

        if self._config.api_trace_enabled:
            _logger.debug("%s %s response: %s", method, endpoint, redact_for_log(result))
        return result
