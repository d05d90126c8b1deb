"""Preference models.

:class:`Prefs` is treated as an opaque blob that snapshots pass through
unchanged; only the fields tsview itself reads or edits are typed.
:class:`MaskedPrefs` is the partial-update body for ``PATCH /prefs``.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from tsview.models._base import TsBaseModel


class Prefs(TsBaseModel):
    """Response of ``GET /localapi/v0/prefs``."""

    control_url: str = Field(default="", validation_alias=AliasChoices("ControlURL", "control_url"))
    want_running: bool = Field(default=False, validation_alias=AliasChoices("WantRunning", "want_running"))
    logged_out: bool = Field(default=False, validation_alias=AliasChoices("LoggedOut", "logged_out"))
    exit_node_id: str = Field(default="", validation_alias=AliasChoices("ExitNodeID", "exit_node_id"))
    exit_node_ip: str = Field(default="", validation_alias=AliasChoices("ExitNodeIP", "exit_node_ip"))
    exit_node_allow_lan_access: bool = Field(
        default=False,
        validation_alias=AliasChoices("ExitNodeAllowLANAccess", "exit_node_allow_lan_access"),
    )
    route_all: bool = Field(default=False, validation_alias=AliasChoices("RouteAll", "route_all"))
    corp_dns: bool = Field(default=False, validation_alias=AliasChoices("CorpDNS", "corp_dns"))
    run_ssh: bool = Field(default=False, validation_alias=AliasChoices("RunSSH", "run_ssh"))
    shields_up: bool = Field(default=False, validation_alias=AliasChoices("ShieldsUp", "shields_up"))
    hostname: str = Field(default="", validation_alias=AliasChoices("Hostname", "hostname"))
    advertise_routes: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("AdvertiseRoutes", "advertise_routes"),
    )
    advertise_tags: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("AdvertiseTags", "advertise_tags"),
    )


class MaskedPrefs(BaseModel):
    """A partial preference edit.

    Only fields that are not ``None`` are sent, each together with its
    ``<Field>Set: true`` mask bit.  An empty edit is valid and is used to
    probe write access.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    _WIRE_NAMES: ClassVar[dict[str, str]] = {
        "want_running": "WantRunning",
        "exit_node_id": "ExitNodeID",
        "exit_node_ip": "ExitNodeIP",
        "exit_node_allow_lan_access": "ExitNodeAllowLANAccess",
        "route_all": "RouteAll",
        "corp_dns": "CorpDNS",
        "run_ssh": "RunSSH",
        "shields_up": "ShieldsUp",
        "hostname": "Hostname",
    }

    want_running: bool | None = None
    exit_node_id: str | None = None
    exit_node_ip: str | None = None
    exit_node_allow_lan_access: bool | None = None
    route_all: bool | None = None
    corp_dns: bool | None = None
    run_ssh: bool | None = None
    shields_up: bool | None = None
    hostname: str | None = None

    def to_payload(self) -> dict[str, Any]:
        """Render the ``PATCH /localapi/v0/prefs`` body."""
        payload: dict[str, Any] = {}
        for field_name, wire_name in self._WIRE_NAMES.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            payload[wire_name] = value
            payload[f"{wire_name}Set"] = True
        return payload
