"""Login and logout endpoints."""

from __future__ import annotations

from tsview._constants import LOGIN_INTERACTIVE_ENDPOINT, LOGOUT_ENDPOINT, START_ENDPOINT
from tsview._transport import Transport


async def start(transport: Transport) -> None:
    """Start the backend with empty options."""
    await transport.request_json("POST", START_ENDPOINT, json_body={})


async def start_login_interactive(transport: Transport) -> None:
    """Start an interactive login flow.

    When re-authenticating, the daemon can enter ``Starting`` without
    populating ``AuthURL``.  Calling ``start`` with empty options first
    makes the URL appear, which the UI needs to show the login prompt.
    """
    await start(transport)
    await transport.request_json("POST", LOGIN_INTERACTIVE_ENDPOINT)


async def logout(transport: Transport) -> None:
    await transport.request_json("POST", LOGOUT_ENDPOINT)
