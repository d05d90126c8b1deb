"""Peer display names and ordering."""

from __future__ import annotations

from collections.abc import Iterable

from tsview.models.peer import PeerStatus


def peer_name(peer: PeerStatus) -> str:
    """Best human-readable name for *peer*.

    The first label of the MagicDNS name, falling back to the host name
    the node reports, then to its stable ID.
    """
    label = peer.dns_name.rstrip(".").split(".", 1)[0]
    if label:
        return label
    if peer.host_name:
        return peer.host_name
    return peer.id


def sort_peers(peers: Iterable[PeerStatus]) -> tuple[PeerStatus, ...]:
    """Return *peers* ordered by :func:`peer_name`.

    Python's sort is stable, so peers with equal names keep their input order.
    """
    return tuple(sorted(peers, key=peer_name))
