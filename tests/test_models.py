"""Tests for LocalAPI model parsing."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tsview.models.lock import NetworkLockStatus, is_zero_key
from tsview.models.peer import PeerStatus
from tsview.models.ping import PingResult
from tsview.models.prefs import MaskedPrefs, Prefs
from tsview.models.status import Status

# ------------------------------------------------------------------
# Status
# ------------------------------------------------------------------


class TestStatus:
    SAMPLE_PAYLOAD: dict = {
        "Version": "1.70.0-t1234abcd-g5678ef",
        "BackendState": "Running",
        "AuthURL": "",
        "TailscaleIPs": ["100.64.0.1", "fd7a:115c:a1e0::1"],
        "Self": {
            "ID": "nSelf",
            "HostName": "laptop",
            "DNSName": "laptop.tail1234.ts.net.",
            "UserID": 1,
            "TailscaleIPs": ["100.64.0.1"],
            "Tags": None,
        },
        "Peer": {
            "nodekey:bbbb": {
                "ID": "n2",
                "DNSName": "server.tail1234.ts.net.",
                "UserID": 1,
                "Tags": ["tag:prod"],
                "RxBytes": 1024,
                "TxBytes": 2048,
                "ExitNodeOption": True,
                "Online": True,
            },
            "nodekey:aaaa": {"ID": "n1", "HostName": "phone", "UserID": 2},
        },
        "User": {
            "1": {"ID": 1, "LoginName": "alice@example.com", "DisplayName": "Alice"},
            "2": {"ID": 2, "LoginName": "bob@example.com", "DisplayName": ""},
        },
        "ExitNodeStatus": {"ID": "n2", "Online": True, "TailscaleIPs": ["100.64.0.2/32"]},
        "MagicDNSSuffix": "tail1234.ts.net",
        "Health": None,
    }

    def test_parses_top_level_fields(self) -> None:
        status = Status.model_validate(self.SAMPLE_PAYLOAD)
        assert status.version == "1.70.0-t1234abcd-g5678ef"
        assert status.backend_state == "Running"
        assert status.auth_url == ""
        assert status.magic_dns_suffix == "tail1234.ts.net"
        assert status.health == []
        assert status.raw["BackendState"] == "Running"

    def test_self_peer(self) -> None:
        status = Status.model_validate(self.SAMPLE_PAYLOAD)
        assert status.self_peer is not None
        assert status.self_peer.id == "nSelf"
        assert status.self_peer.user_id == 1
        assert status.self_peer.tags == []
        assert not status.self_peer.is_tagged

    def test_peers_keep_response_order(self) -> None:
        status = Status.model_validate(self.SAMPLE_PAYLOAD)
        assert [peer.id for peer in status.peer_list] == ["n2", "n1"]

    def test_peer_fields(self) -> None:
        peer = Status.model_validate(self.SAMPLE_PAYLOAD).peers["nodekey:bbbb"]
        assert peer.dns_name == "server.tail1234.ts.net."
        assert peer.is_tagged
        assert peer.exit_node_option
        assert peer.online
        assert peer.rx_bytes == 1024
        assert peer.tx_bytes == 2048

    def test_user_directory_keys_are_ints(self) -> None:
        status = Status.model_validate(self.SAMPLE_PAYLOAD)
        assert set(status.users) == {1, 2}
        assert status.users[1].display_name == "Alice"
        assert status.users[2].login_name == "bob@example.com"

    def test_exit_node_status(self) -> None:
        status = Status.model_validate(self.SAMPLE_PAYLOAD)
        assert status.exit_node_status is not None
        assert status.exit_node_status.id == "n2"

    def test_null_collections_use_defaults(self) -> None:
        status = Status.model_validate({"BackendState": "NoState", "Self": None, "Peer": None, "User": None})
        assert status.self_peer is None
        assert status.peers == {}
        assert status.users == {}
        assert status.exit_node_status is None

    def test_find_peer_by_ip(self) -> None:
        status = Status.model_validate(
            {
                "Peer": {
                    "nodekey:a": {"ID": "n1", "TailscaleIPs": ["100.64.0.5", "fd7a::5"]},
                    "nodekey:b": {"ID": "n2", "TailscaleIPs": ["100.64.0.6"]},
                }
            }
        )
        found = status.find_peer_by_ip("100.64.0.6")
        assert found is not None
        assert found.id == "n2"
        assert status.find_peer_by_ip("100.64.0.99") is None

    def test_models_are_frozen(self) -> None:
        status = Status.model_validate(self.SAMPLE_PAYLOAD)
        with pytest.raises(ValidationError):
            status.version = "2.0.0"  # type: ignore[misc]


# ------------------------------------------------------------------
# PeerStatus
# ------------------------------------------------------------------


class TestPeerStatus:
    def test_snake_case_construction(self) -> None:
        peer = PeerStatus(id="n1", dns_name="box.ts.net.", tags=["tag:x"], rx_bytes=5)
        assert peer.id == "n1"
        assert peer.is_tagged
        assert peer.rx_bytes == 5

    def test_unknown_fields_ignored_but_kept_in_raw(self) -> None:
        peer = PeerStatus.model_validate({"ID": "n1", "PeerAPIURL": ["http://100.64.0.1:1234"]})
        assert peer.raw["PeerAPIURL"] == ["http://100.64.0.1:1234"]


# ------------------------------------------------------------------
# Prefs
# ------------------------------------------------------------------


class TestPrefs:
    def test_opaque_fields_survive_in_raw(self) -> None:
        payload = {
            "ControlURL": "https://controlplane.tailscale.com",
            "WantRunning": True,
            "ExitNodeID": "n2",
            "NetfilterMode": 2,
            "AdvertiseRoutes": None,
        }
        prefs = Prefs.model_validate(payload)
        assert prefs.want_running
        assert prefs.exit_node_id == "n2"
        assert prefs.advertise_routes == []
        assert prefs.raw == payload


class TestMaskedPrefs:
    def test_empty_edit(self) -> None:
        assert MaskedPrefs().to_payload() == {}

    def test_want_running(self) -> None:
        assert MaskedPrefs(want_running=False).to_payload() == {
            "WantRunning": False,
            "WantRunningSet": True,
        }

    def test_clear_exit_node_sends_empty_values(self) -> None:
        assert MaskedPrefs(exit_node_id="", exit_node_ip="").to_payload() == {
            "ExitNodeID": "",
            "ExitNodeIDSet": True,
            "ExitNodeIP": "",
            "ExitNodeIPSet": True,
        }

    def test_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError):
            MaskedPrefs(netfilter_mode=2)  # type: ignore[call-arg]


# ------------------------------------------------------------------
# NetworkLockStatus
# ------------------------------------------------------------------


class TestNetworkLockStatus:
    def test_parses_enabled_status(self) -> None:
        lock = NetworkLockStatus.model_validate(
            {
                "Enabled": True,
                "PublicKey": "tlpub:" + "ab" * 32,
                "NodeKey": "nodekey:" + "cd" * 32,
                "NodeKeySigned": True,
            }
        )
        assert lock.enabled
        assert lock.has_node_key
        assert lock.node_key_signed
        assert not lock.public_key_is_zero

    def test_null_node_key(self) -> None:
        lock = NetworkLockStatus.model_validate({"Enabled": True, "NodeKey": None})
        assert lock.node_key is None
        assert not lock.has_node_key

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, True),
            ("", True),
            ("tlpub:" + "0" * 64, True),
            ("tlpub:" + "0" * 63 + "1", False),
            ("tlpub:" + "ab" * 32, False),
        ],
    )
    def test_is_zero_key(self, value: str | None, expected: bool) -> None:
        assert is_zero_key(value) is expected


# ------------------------------------------------------------------
# PingResult
# ------------------------------------------------------------------


class TestPingResult:
    def test_direct_pong(self) -> None:
        result = PingResult.model_validate(
            {
                "IP": "100.64.0.2",
                "NodeIP": "100.64.0.2",
                "NodeName": "server",
                "LatencySeconds": 0.0123,
                "Endpoint": "192.0.2.10:41641",
                "DERPRegionID": 0,
            }
        )
        assert result.ok
        assert result.latency_seconds == pytest.approx(0.0123)
        assert result.endpoint == "192.0.2.10:41641"

    def test_failed_ping(self) -> None:
        result = PingResult.model_validate({"IP": "100.64.0.2", "Err": "timeout"})
        assert not result.ok
        assert result.latency_seconds is None
