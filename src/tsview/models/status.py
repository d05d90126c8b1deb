"""Daemon status model."""

from __future__ import annotations

from pydantic import AliasChoices, Field

from tsview.models._base import TsBaseModel
from tsview.models.peer import ExitNodeStatus, PeerStatus, UserProfile


class Status(TsBaseModel):
    """Response of ``GET /localapi/v0/status``.

    ``backend_state`` is kept as the raw wire tag; it is mapped to
    :class:`~tsview.models.backend_state.BackendState` when a snapshot
    is built so that an unknown tag fails snapshot construction rather
    than status parsing.
    """

    version: str = Field(default="", validation_alias=AliasChoices("Version", "version"))
    backend_state: str = Field(default="", validation_alias=AliasChoices("BackendState", "backend_state"))
    auth_url: str = Field(default="", validation_alias=AliasChoices("AuthURL", "auth_url"))
    tailscale_ips: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("TailscaleIPs", "tailscale_ips"),
    )
    self_peer: PeerStatus | None = Field(default=None, validation_alias=AliasChoices("Self", "self_peer"))
    peers: dict[str, PeerStatus] = Field(default_factory=dict, validation_alias=AliasChoices("Peer", "peers"))
    """Peers keyed by node public key, in response order."""
    users: dict[int, UserProfile] = Field(default_factory=dict, validation_alias=AliasChoices("User", "users"))
    """User directory keyed by user ID."""
    exit_node_status: ExitNodeStatus | None = Field(
        default=None,
        validation_alias=AliasChoices("ExitNodeStatus", "exit_node_status"),
    )
    magic_dns_suffix: str = Field(default="", validation_alias=AliasChoices("MagicDNSSuffix", "magic_dns_suffix"))
    health: list[str] = Field(default_factory=list, validation_alias=AliasChoices("Health", "health"))

    @property
    def peer_list(self) -> list[PeerStatus]:
        """Peers in response order."""
        return list(self.peers.values())

    def find_peer_by_ip(self, ip: str) -> PeerStatus | None:
        """Return the first peer owning the Tailscale address *ip*."""
        for peer in self.peers.values():
            if ip in peer.tailscale_ips:
                return peer
        return None
