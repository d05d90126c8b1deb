"""UI-ready view of the daemon state."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, model_validator

from tsview.models.backend_state import BackendState, parse_backend_state
from tsview.models.lock import NetworkLockStatus
from tsview.models.peer import PeerStatus, UserProfile
from tsview.models.prefs import Prefs
from tsview.models.status import Status
from tsview.state.classify import classify_peers
from tsview.state.naming import sort_peers
from tsview.state.policy import evaluate_lock, normalize_version, resolve_exit_node

_logger = logging.getLogger(__name__)


class StateSnapshot(BaseModel):
    """Opinionated, sanitized subset of the daemon state.

    Every peer of the status response is in exactly one of
    ``exit_nodes``, ``my_nodes``, ``tagged_nodes`` or one
    ``owned_nodes`` bucket.  All peer sequences are sorted by
    :func:`~tsview.state.naming.peer_name`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    preferences: Prefs
    """Daemon preferences, unmodified."""
    backend_state: BackendState
    ts_version: str = ""
    """Short version string such as ``"1.70.0"``."""
    auth_url: str = ""
    """Empty unless the user needs to authenticate."""
    user: UserProfile | None = None
    """Profile of the logged-in user, ``None`` if unknown."""
    self_peer: PeerStatus | None = None

    lock_key: str | None = None
    """Network-lock key, ``None`` unless lock is enabled."""
    is_locked_out: bool = False

    exit_nodes: tuple[PeerStatus, ...] = ()
    my_nodes: tuple[PeerStatus, ...] = ()
    tagged_nodes: tuple[PeerStatus, ...] = ()
    owned_node_keys: tuple[str, ...] = ()
    """Sorted keys of ``owned_nodes``."""
    owned_nodes: Mapping[str, tuple[PeerStatus, ...]] = Field(default_factory=dict)
    """Peers of other accounts keyed by account name. Read-only."""

    current_exit_node_id: str | None = None
    current_exit_node_name: str = ""
    """Empty when no exit node is selected or the selection is not an exit-capable peer."""

    rx_bytes: int = 0
    tx_bytes: int = 0

    @model_validator(mode="after")
    def _check_owned_keys(self) -> StateSnapshot:
        if list(self.owned_node_keys) != sorted(self.owned_nodes):
            raise ValueError("owned_node_keys must be the sorted keys of owned_nodes")
        object.__setattr__(self, "owned_nodes", MappingProxyType(dict(self.owned_nodes)))
        return self

    @field_serializer("owned_nodes")
    def _serialize_owned_nodes(self, value: Mapping[str, tuple[PeerStatus, ...]]) -> dict[str, Any]:
        return {account: value[account] for account in self.owned_node_keys}


def build_state_snapshot(status: Status, prefs: Prefs, lock: NetworkLockStatus) -> StateSnapshot:
    """Reduce one status, prefs and lock-status fetch into a snapshot.

    Raises
    ------
    UnknownBackendStateError
        If the status carries a backend state tag outside
        :class:`~tsview.models.backend_state.BackendState`.
    """
    backend_state = parse_backend_state(status.backend_state)

    self_peer = status.self_peer
    self_user_id = self_peer.user_id if self_peer is not None else None
    classified = classify_peers(status.peer_list, self_user_id, status.users)

    exit_nodes = sort_peers(classified.exit_nodes)
    owned_nodes = {account: sort_peers(nodes) for account, nodes in classified.owned_nodes.items()}

    user: UserProfile | None = None
    if self_user_id is not None:
        user = status.users.get(self_user_id)

    lock_eval = evaluate_lock(lock, backend_state)
    exit_node = resolve_exit_node(status.exit_node_status, exit_nodes)

    snapshot = StateSnapshot(
        preferences=prefs,
        backend_state=backend_state,
        ts_version=normalize_version(status.version),
        auth_url=status.auth_url,
        user=user,
        self_peer=self_peer,
        lock_key=lock_eval.lock_key,
        is_locked_out=lock_eval.is_locked_out,
        exit_nodes=exit_nodes,
        my_nodes=sort_peers(classified.my_nodes),
        tagged_nodes=sort_peers(classified.tagged_nodes),
        owned_node_keys=tuple(sorted(owned_nodes)),
        owned_nodes=owned_nodes,
        current_exit_node_id=exit_node.id,
        current_exit_node_name=exit_node.name,
        rx_bytes=classified.rx_bytes,
        tx_bytes=classified.tx_bytes,
    )
    _logger.debug(
        "Built snapshot: state=%s exit=%d mine=%d tagged=%d accounts=%d peers=%d",
        backend_state,
        len(snapshot.exit_nodes),
        len(snapshot.my_nodes),
        len(snapshot.tagged_nodes),
        len(snapshot.owned_node_keys),
        classified.total,
    )
    if exit_node.id is not None and not exit_node.name:
        _logger.debug("Selected exit node %s is not among exit-capable peers", exit_node.id)
    return snapshot
