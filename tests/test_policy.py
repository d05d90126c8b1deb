from __future__ import annotations

import pytest

from tsview.models.backend_state import BackendState
from tsview.models.lock import NetworkLockStatus
from tsview.models.peer import ExitNodeStatus, PeerStatus
from tsview.state.policy import evaluate_lock, normalize_version, resolve_exit_node

LOCK_KEY = "tlpub:" + "ab" * 32
NODE_KEY = "nodekey:" + "cd" * 32

# ------------------------------------------------------------------
# normalize_version
# ------------------------------------------------------------------


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1.70.0-abc123", "1.70.0"),
        ("1.70.0-t1234abcd-g5678ef", "1.70.0"),
        ("1.70.0", "1.70.0"),
        ("", ""),
        ("-dev", ""),
    ],
)
def test_normalize_version(raw: str, expected: str) -> None:
    assert normalize_version(raw) == expected


def test_normalize_version_is_idempotent() -> None:
    once = normalize_version("1.70.0-abc123")
    assert normalize_version(once) == once


# ------------------------------------------------------------------
# evaluate_lock
# ------------------------------------------------------------------


def _lock(**kwargs) -> NetworkLockStatus:
    values = {"enabled": True, "public_key": LOCK_KEY, "node_key": NODE_KEY, "node_key_signed": False}
    values.update(kwargs)
    return NetworkLockStatus(**values)


@pytest.mark.parametrize("state", list(BackendState))
def test_lock_disabled_is_never_locked_out(state: BackendState) -> None:
    result = evaluate_lock(_lock(enabled=False), state)
    assert result.lock_key is None
    assert result.is_locked_out is False


def test_unsigned_node_key_while_running_is_locked_out() -> None:
    result = evaluate_lock(_lock(), BackendState.RUNNING)
    assert result.lock_key == LOCK_KEY
    assert result.is_locked_out is True


def test_unsigned_node_key_while_stopped_is_not_locked_out() -> None:
    result = evaluate_lock(_lock(), BackendState.STOPPED)
    assert result.lock_key == LOCK_KEY
    assert result.is_locked_out is False


def test_signed_node_key_is_not_locked_out() -> None:
    result = evaluate_lock(_lock(node_key_signed=True), BackendState.RUNNING)
    assert result.lock_key == LOCK_KEY
    assert result.is_locked_out is False


def test_missing_node_key_yields_no_lock_key() -> None:
    result = evaluate_lock(_lock(node_key=None), BackendState.RUNNING)
    assert result.lock_key is None
    assert result.is_locked_out is False


@pytest.mark.parametrize("public_key", ["", "tlpub:" + "0" * 64])
def test_zero_public_key_yields_no_lock_key(public_key: str) -> None:
    result = evaluate_lock(_lock(public_key=public_key), BackendState.RUNNING)
    assert result.lock_key is None
    assert result.is_locked_out is False


# ------------------------------------------------------------------
# resolve_exit_node
# ------------------------------------------------------------------

EXIT_NODES = (
    PeerStatus(id="nA", dns_name="amsterdam.tail.ts.net."),
    PeerStatus(id="nB", dns_name="berlin.tail.ts.net."),
)


def test_no_selection() -> None:
    result = resolve_exit_node(None, EXIT_NODES)
    assert result.id is None
    assert result.name == ""


def test_selection_matching_exit_node() -> None:
    result = resolve_exit_node(ExitNodeStatus(id="nB"), EXIT_NODES)
    assert result.id == "nB"
    assert result.name == "berlin"


def test_selection_without_matching_exit_node_keeps_id() -> None:
    result = resolve_exit_node(ExitNodeStatus(id="nGone"), EXIT_NODES)
    assert result.id == "nGone"
    assert result.name == ""


def test_first_match_wins() -> None:
    nodes = (
        PeerStatus(id="nA", host_name="first"),
        PeerStatus(id="nA", host_name="second"),
    )
    assert resolve_exit_node(ExitNodeStatus(id="nA"), nodes).name == "first"
