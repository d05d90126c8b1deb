"""High-level async client for the tailscaled LocalAPI."""

from __future__ import annotations

import logging
import sys
from typing import Any

import aiohttp

from tsview._api import lock as _lock_api
from tsview._api import login as _login_api
from tsview._api import ping as _ping_api
from tsview._api import prefs as _prefs_api
from tsview._api import status as _status_api
from tsview._transport import LocalApiTransport, Transport, create_http_session
from tsview.config import TsviewConfig
from tsview.exceptions import ExitNodeError, TsviewError
from tsview.models.lock import NetworkLockStatus
from tsview.models.peer import PeerStatus
from tsview.models.ping import PingResult
from tsview.models.prefs import MaskedPrefs, Prefs
from tsview.models.status import Status
from tsview.state.naming import peer_name
from tsview.state.snapshot import StateSnapshot, build_state_snapshot

_logger = logging.getLogger(__name__)


def start_login_interactive_will_open_browser() -> bool:
    """Whether :meth:`TailscaleClient.start_login_interactive` (probably) opens a browser.

    Only the macOS daemon opens the browser itself.  UIs use this to
    decide whether to show the login URL.
    """
    return sys.platform == "darwin"


class TailscaleClient:
    """Async client for the tailscaled LocalAPI.

    Usage::

        async with TailscaleClient(TsviewConfig()) as client:
            state = await client.get_state()

    Pass ``session`` to reuse an existing :class:`aiohttp.ClientSession`
    (it must already be bound to the LocalAPI socket), or ``transport``
    to bypass HTTP entirely.
    """

    def __init__(
        self,
        config: TsviewConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config or TsviewConfig()
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport
        self._external_transport = transport is not None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> TailscaleClient:
        if self._external_transport:
            return self
        if self._http_session is None:
            self._http_session = create_http_session(self._config)
        self._transport = LocalApiTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        if not self._external_transport:
            self._transport = None

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise TsviewError("Client not initialized. Use 'async with TailscaleClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def get_status(self) -> Status:
        """Return the daemon status. Fails if the daemon is not running."""
        return await _status_api.fetch_status(self._require_transport())

    async def get_prefs(self) -> Prefs:
        return await _prefs_api.fetch_prefs(self._require_transport())

    async def get_lock_status(self) -> NetworkLockStatus:
        """Return the network lock status of this node."""
        return await _lock_api.fetch_lock_status(self._require_transport())

    async def get_state(self) -> StateSnapshot:
        """Fetch status, prefs and lock status and build a snapshot.

        The first failing fetch aborts the call with
        :class:`~tsview.exceptions.CollaboratorFetchError`; an unknown
        backend state raises
        :class:`~tsview.exceptions.UnknownBackendStateError`.
        """
        status = await self.get_status()
        prefs = await self.get_prefs()
        lock = await self.get_lock_status()
        return build_state_snapshot(status, prefs, lock)

    async def ping_peer(self, peer: PeerStatus) -> PingResult:
        """Disco-ping *peer* on its first Tailscale address."""
        if not peer.tailscale_ips:
            raise TsviewError(f"Peer {peer_name(peer)} has no Tailscale IPs")
        return await _ping_api.ping(self._require_transport(), peer.tailscale_ips[0])

    # ------------------------------------------------------------------
    # Preferences
    # ------------------------------------------------------------------

    async def edit_prefs(self, masked: MaskedPrefs) -> Prefs:
        return await _prefs_api.edit_prefs(self._require_transport(), masked)

    async def can_write(self) -> bool:
        """Whether the caller may edit the daemon config.

        If not, the UI may have to run with elevated privileges.
        """
        try:
            await self.edit_prefs(MaskedPrefs())
        except TsviewError:
            _logger.debug("Prefs are not writable", exc_info=True)
            return False
        return True

    async def up(self) -> None:
        """Start the daemon's connection to the tailnet."""
        await self.edit_prefs(MaskedPrefs(want_running=True))

    async def down(self) -> None:
        await self.edit_prefs(MaskedPrefs(want_running=False))

    async def set_exit_node(self, peer: PeerStatus | None) -> None:
        """Route traffic through *peer*, or stop using an exit node if ``None``.

        The peer is resolved by its first Tailscale address against a
        fresh status, so a stale record cannot select a node that no
        longer offers itself as an exit node.
        """
        if peer is None:
            masked = MaskedPrefs(exit_node_id="", exit_node_ip="")
        else:
            if not peer.tailscale_ips:
                raise ExitNodeError(f"Peer {peer_name(peer)} has no Tailscale IPs")
            ip = peer.tailscale_ips[0]
            status = await self.get_status()
            target = status.find_peer_by_ip(ip)
            if target is None or not target.exit_node_option:
                raise ExitNodeError(f"{ip} is not an exit node option")
            masked = MaskedPrefs(exit_node_id=target.id, exit_node_ip="")
        await self.edit_prefs(masked)

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    async def start_login_interactive(self) -> None:
        """Start an interactive login flow.

        On macOS the daemon opens the user's browser; elsewhere the UI
        should show ``StateSnapshot.auth_url`` once it is populated.
        """
        await _login_api.start_login_interactive(self._require_transport())

    async def logout(self) -> None:
        await _login_api.logout(self._require_transport())
