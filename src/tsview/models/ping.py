"""Ping result model."""

from __future__ import annotations

from pydantic import AliasChoices, Field

from tsview.models._base import TsBaseModel


class PingResult(TsBaseModel):
    """Response of ``POST /localapi/v0/ping``.

    ``err`` is non-empty when the ping itself failed; the daemon still
    answers with HTTP 200 in that case.
    """

    ip: str = Field(default="", validation_alias=AliasChoices("IP", "ip"))
    node_ip: str = Field(default="", validation_alias=AliasChoices("NodeIP", "node_ip"))
    node_name: str = Field(default="", validation_alias=AliasChoices("NodeName", "node_name"))
    err: str = Field(default="", validation_alias=AliasChoices("Err", "err"))
    latency_seconds: float | None = Field(
        default=None,
        validation_alias=AliasChoices("LatencySeconds", "latency_seconds"),
    )
    endpoint: str = Field(default="", validation_alias=AliasChoices("Endpoint", "endpoint"))
    """Direct UDP endpoint, empty when the pong came through DERP."""
    derp_region_id: int | None = Field(default=None, validation_alias=AliasChoices("DERPRegionID", "derp_region_id"))
    derp_region_code: str = Field(default="", validation_alias=AliasChoices("DERPRegionCode", "derp_region_code"))
    peer_api_port: int | None = Field(default=None, validation_alias=AliasChoices("PeerAPIPort", "peer_api_port"))
    is_local_ip: bool = Field(default=False, validation_alias=AliasChoices("IsLocalIP", "is_local_ip"))

    @property
    def ok(self) -> bool:
        return not self.err
