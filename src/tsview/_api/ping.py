"""Ping endpoint."""

from __future__ import annotations

from tsview._api._common import parse_model
from tsview._constants import PING_ENDPOINT, PING_TYPE_DISCO
from tsview._transport import Transport
from tsview.models.ping import PingResult


async def ping(transport: Transport, ip: str, *, ping_type: str = PING_TYPE_DISCO) -> PingResult:
    """Ping the node owning *ip*.

    Discovery pings are the default since they do not depend on the peer
    accepting ICMP; this matches ``tailscale ping``.
    """
    response = await transport.request_json(
        "POST",
        PING_ENDPOINT,
        params={"ip": ip, "type": ping_type},
    )
    return parse_model(PingResult, PING_ENDPOINT, response)
