"""Network lock (tailnet key authority) status model."""
from __future__ import annotations

from pydantic import AliasChoices, Field

from tsview.models._base import TsBaseModel


def is_zero_key(value: str | None) -> bool:
    """Return ``True`` for a missing key or one whose hex body is all zeros."""
    if not value:
        return True
    body = value.split(":", 1)[1] if ":" in value else value
    return body.strip("0") == ""


class NetworkLockStatus(TsBaseModel):
    """Response of ``GET /localapi/v0/tka/status``."""

    enabled: bool = Field(default=False, validation_alias=AliasChoices("Enabled", "enabled"))
    public_key: str = Field(default="", validation_alias=AliasChoices("PublicKey", "public_key"))
    """This node's network-lock key (``tlpub:...``)."""
    node_key: str | None = Field(default=None, validation_alias=AliasChoices("NodeKey", "node_key"))
    """This node's node key, ``None`` when the daemon has none yet."""
    node_key_signed: bool = Field(default=False, validation_alias=AliasChoices("NodeKeySigned", "node_key_signed"))
    head: str = Field(default="", validation_alias=AliasChoices("Head", "head"))

    @property
    def has_node_key(self) -> bool:
        return bool(self.node_key)

    @property
    def public_key_is_zero(self) -> bool:
        return is_zero_key(self.public_key)
