#!/usr/bin/env python3
"""Dump the state snapshot tsview builds from the local daemon.

Usage
-----
::

    python scripts/dump_state.py

Options::

    --socket PATH    LocalAPI socket (default: $TSVIEW_SOCKET or the system socket)
    --json           Output as machine-readable JSON
    --output FILE    Write output to FILE instead of stdout
    --verbose        Enable DEBUG logging with redacted API traces
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from tsview import PeerStatus, StateSnapshot, TailscaleClient, TsviewConfig, TsviewError, peer_name  # noqa: E402


def _section(title: str) -> str:
    line = "=" * 60
    return f"\n{line}\n  {title}\n{line}"


def _format_bytes(value: int) -> str:
    size = float(value)
    for unit in ("B", "KiB", "MiB", "GiB"):
        if size < 1024:
            return f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} TiB"


def _peer_line(peer: PeerStatus) -> str:
    status = "online" if peer.online else "offline"
    ips = ", ".join(peer.tailscale_ips) or "-"
    return f"  {peer_name(peer):<32} {ips:<40} {status}"


def _format_peers(title: str, peers: tuple[PeerStatus, ...], out: list[str]) -> None:
    out.append(_section(f"{title} ({len(peers)})"))
    if not peers:
        out.append("  (none)")
    for peer in peers:
        out.append(_peer_line(peer))


def format_text(state: StateSnapshot) -> str:
    out: list[str] = [_section("Daemon")]
    out.append(f"  backend state: {state.backend_state}")
    out.append(f"  version:       {state.ts_version}")
    if state.user is not None:
        out.append(f"  user:          {state.user.display_name or state.user.login_name}")
    if state.self_peer is not None:
        out.append(f"  this node:     {peer_name(state.self_peer)}")
    if state.auth_url:
        out.append(f"  login at:      {state.auth_url}")
    if state.current_exit_node_id is not None:
        name = state.current_exit_node_name or "<not an exit node option>"
        out.append(f"  exit node:     {name} ({state.current_exit_node_id})")
    if state.lock_key is not None:
        locked = " (LOCKED OUT)" if state.is_locked_out else ""
        out.append(f"  network lock:  enabled{locked}")
    out.append(f"  traffic:       rx {_format_bytes(state.rx_bytes)} / tx {_format_bytes(state.tx_bytes)}")

    _format_peers("Exit nodes", state.exit_nodes, out)
    _format_peers("My nodes", state.my_nodes, out)
    _format_peers("Tagged nodes", state.tagged_nodes, out)
    for account in state.owned_node_keys:
        _format_peers(account or "Unknown account", state.owned_nodes[account], out)
    return "\n".join(out) + "\n"


def format_json(state: StateSnapshot) -> str:
    data: dict[str, Any] = state.model_dump(mode="json", exclude={"preferences"})
    data["preferences"] = state.preferences.raw
    return json.dumps(data, indent=2) + "\n"


async def _run(args: argparse.Namespace) -> int:
    overrides: dict[str, Any] = {}
    if args.socket:
        overrides["socket_path"] = args.socket
    if args.verbose:
        overrides["api_trace_enabled"] = True
    config = TsviewConfig.from_env(**overrides)

    try:
        async with TailscaleClient(config) as client:
            state = await client.get_state()
    except TsviewError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    text = format_json(state) if args.json else format_text(state)
    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--socket", help="LocalAPI socket path")
    parser.add_argument("--json", action="store_true", help="Output JSON")
    parser.add_argument("--output", help="Write output to FILE")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable DEBUG logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    sys.exit(asyncio.run(_run(args)))


if __name__ == "__main__":
    main()
