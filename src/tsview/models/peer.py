"""Peer, user and exit node models."""

from __future__ import annotations

from pydantic import AliasChoices, Field

from tsview.models._base import TsBaseModel


class PeerStatus(TsBaseModel):
    """A node in the tailnet as seen by the local daemon.

    Mapped from ``ipnstate.PeerStatus``.  Used both for ``Self`` and for
    the entries of ``Peer`` in the status response.
    """

    id: str = Field(default="", validation_alias=AliasChoices("ID", "id"))
    """Stable node ID."""
    public_key: str = Field(default="", validation_alias=AliasChoices("PublicKey", "public_key"))
    """Node public key (``nodekey:...``)."""
    host_name: str = Field(default="", validation_alias=AliasChoices("HostName", "host_name"))
    """Host name reported by the node itself."""
    dns_name: str = Field(default="", validation_alias=AliasChoices("DNSName", "dns_name"))
    """MagicDNS FQDN, usually with a trailing dot."""
    os: str = Field(default="", validation_alias=AliasChoices("OS", "os"))
    user_id: int = Field(default=0, validation_alias=AliasChoices("UserID", "user_id"))
    """Owning user. Tagged nodes carry the tagged-devices pseudo user."""
    tailscale_ips: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("TailscaleIPs", "tailscale_ips"),
    )
    tags: list[str] = Field(default_factory=list, validation_alias=AliasChoices("Tags", "tags"))
    online: bool = Field(default=False, validation_alias=AliasChoices("Online", "online"))
    active: bool = Field(default=False, validation_alias=AliasChoices("Active", "active"))
    exit_node: bool = Field(default=False, validation_alias=AliasChoices("ExitNode", "exit_node"))
    """Whether this node is the exit node currently in use."""
    exit_node_option: bool = Field(
        default=False,
        validation_alias=AliasChoices("ExitNodeOption", "exit_node_option"),
    )
    """Whether this node can be used as an exit node."""
    rx_bytes: int = Field(default=0, validation_alias=AliasChoices("RxBytes", "rx_bytes"))
    tx_bytes: int = Field(default=0, validation_alias=AliasChoices("TxBytes", "tx_bytes"))
    relay: str = Field(default="", validation_alias=AliasChoices("Relay", "relay"))
    """Home DERP region code."""
    cur_addr: str = Field(default="", validation_alias=AliasChoices("CurAddr", "cur_addr"))
    """Direct address in use, empty when relayed."""
    last_seen: str = Field(default="", validation_alias=AliasChoices("LastSeen", "last_seen"))
    last_handshake: str = Field(default="", validation_alias=AliasChoices("LastHandshake", "last_handshake"))

    @property
    def is_tagged(self) -> bool:
        """Whether the node is owned by tags rather than a user."""
        return len(self.tags) > 0


class UserProfile(TsBaseModel):
    """A tailnet account."""

    id: int = Field(default=0, validation_alias=AliasChoices("ID", "id"))
    login_name: str = Field(default="", validation_alias=AliasChoices("LoginName", "login_name"))
    display_name: str = Field(default="", validation_alias=AliasChoices("DisplayName", "display_name"))
    profile_pic_url: str = Field(default="", validation_alias=AliasChoices("ProfilePicURL", "profile_pic_url"))


class ExitNodeStatus(TsBaseModel):
    """The exit node selected in prefs, as reported by status."""

    id: str = Field(default="", validation_alias=AliasChoices("ID", "id"))
    online: bool = Field(default=False, validation_alias=AliasChoices("Online", "online"))
    tailscale_ips: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("TailscaleIPs", "tailscale_ips"),
    )
