"""Network lock endpoint."""

from __future__ import annotations

from tsview._api._common import fetch_input
from tsview._constants import LOCK_STATUS_ENDPOINT
from tsview._transport import Transport
from tsview.models.lock import NetworkLockStatus


async def fetch_lock_status(transport: Transport) -> NetworkLockStatus:
    return await fetch_input(transport, NetworkLockStatus, LOCK_STATUS_ENDPOINT, fetch="lock")
