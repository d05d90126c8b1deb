"""Status endpoint."""

from __future__ import annotations

from tsview._api._common import fetch_input
from tsview._constants import STATUS_ENDPOINT
from tsview._transport import Transport
from tsview.models.status import Status


async def fetch_status(transport: Transport) -> Status:
    """Return the daemon status, including the peer list."""
    return await fetch_input(transport, Status, STATUS_ENDPOINT, fetch="status")
