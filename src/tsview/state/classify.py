"""Peer classification and traffic totals."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping

from tsview.models.peer import PeerStatus, UserProfile


@dataclasses.dataclass(slots=True)
class PeerClassification:
    """Unsorted result of :func:`classify_peers`.

    ``owned_nodes`` keeps insertion order, but callers must not rely on
    it; the snapshot exposes a separately sorted key list.
    """

    exit_nodes: list[PeerStatus] = dataclasses.field(default_factory=list)
    my_nodes: list[PeerStatus] = dataclasses.field(default_factory=list)
    tagged_nodes: list[PeerStatus] = dataclasses.field(default_factory=list)
    owned_nodes: dict[str, list[PeerStatus]] = dataclasses.field(default_factory=dict)
    rx_bytes: int = 0
    tx_bytes: int = 0

    @property
    def total(self) -> int:
        return (
            len(self.exit_nodes)
            + len(self.my_nodes)
            + len(self.tagged_nodes)
            + sum(len(nodes) for nodes in self.owned_nodes.values())
        )


def account_name(user_id: int, users: Mapping[int, UserProfile]) -> str:
    """Owner label for an owned-node bucket.

    Display name, then login name.  Owners missing from the directory all
    share the ``""`` bucket.
    """
    user = users.get(user_id)
    if user is None:
        return ""
    return user.display_name or user.login_name


def classify_peers(
    peers: Iterable[PeerStatus],
    self_user_id: int | None,
    users: Mapping[int, UserProfile],
) -> PeerClassification:
    """Partition *peers* into exactly one category each.

    First match wins:

    1. exit-node capable -> ``exit_nodes``
    2. owned by the local user -> ``my_nodes``
    3. tagged -> ``tagged_nodes``
    4. otherwise -> ``owned_nodes[account_name]``

    ``self_user_id`` is ``None`` when the daemon has no self peer; no peer
    is then considered the local user's.  Traffic counters are summed over
    every peer regardless of category.
    """
    result = PeerClassification()
    for peer in peers:
        result.rx_bytes += peer.rx_bytes
        result.tx_bytes += peer.tx_bytes

        if peer.exit_node_option:
            result.exit_nodes.append(peer)
        elif self_user_id is not None and peer.user_id == self_user_id:
            result.my_nodes.append(peer)
        elif peer.is_tagged:
            result.tagged_nodes.append(peer)
        else:
            result.owned_nodes.setdefault(account_name(peer.user_id, users), []).append(peer)
    return result
