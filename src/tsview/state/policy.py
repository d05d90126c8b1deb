"""Derived snapshot fields: version, network lock and exit node."""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence

from tsview.models.backend_state import BackendState
from tsview.models.lock import NetworkLockStatus
from tsview.models.peer import ExitNodeStatus, PeerStatus
from tsview.state.naming import peer_name


@dataclasses.dataclass(frozen=True, slots=True)
class LockEvaluation:
    lock_key: str | None = None
    is_locked_out: bool = False


@dataclasses.dataclass(frozen=True, slots=True)
class ExitNodeSelection:
    id: str | None = None
    name: str = ""


def normalize_version(version: str) -> str:
    """Strip build metadata: ``"1.70.0-tabc-gdef"`` -> ``"1.70.0"``."""
    return version.split("-", 1)[0]


def evaluate_lock(lock: NetworkLockStatus, backend_state: BackendState) -> LockEvaluation:
    """Compute the network-lock key and lockout flag.

    The key is reported only when lock is enabled, the node has a node key
    and the lock key is non-zero.  The node is locked out when, on top of
    that, its node key is unsigned while the backend is running.
    """
    if not lock.enabled or not lock.has_node_key or lock.public_key_is_zero:
        return LockEvaluation()
    locked_out = not lock.node_key_signed and backend_state == BackendState.RUNNING
    return LockEvaluation(lock_key=lock.public_key, is_locked_out=locked_out)


def resolve_exit_node(
    exit_node_status: ExitNodeStatus | None,
    exit_nodes: Sequence[PeerStatus],
) -> ExitNodeSelection:
    """Resolve the selected exit node against the exit-capable peers.

    The ID is reported whenever one is selected.  The name stays empty if
    no exit-capable peer carries that ID; callers treat that as a transient
    inconsistency, not an error.
    """
    if exit_node_status is None:
        return ExitNodeSelection()
    for peer in exit_nodes:
        if peer.id == exit_node_status.id:
            return ExitNodeSelection(id=exit_node_status.id, name=peer_name(peer))
    return ExitNodeSelection(id=exit_node_status.id)
