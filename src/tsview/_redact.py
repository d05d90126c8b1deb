"""Helpers for safe debug logging.

LocalAPI responses carry login URLs and node/lock keys.  Login secrets are
dropped entirely.  Keys keep their type prefix and last few hex digits so a
trace can still tell peers apart; this also applies to the node keys that
index the ``Peer`` map.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

_SECRET_KEYS: frozenset[str] = frozenset(
    {
        "authurl",
        "authkey",
        "cookie",
        "authorization",
        "token",
    }
)

_KEY_PREFIXES: tuple[str, ...] = ("nodekey:", "mkey:", "discokey:", "tlpub:", "nlpub:", "privkey:")

# Hex digits of a key left visible.
_KEY_TAIL = 4


def mask_key(value: str) -> str:
    """``"nodekey:ab12...ef34"`` -> ``"nodekey:…ef34"``; other strings unchanged."""
    for prefix in _KEY_PREFIXES:
        if value.startswith(prefix):
            body = value[len(prefix) :]
            if len(body) <= _KEY_TAIL:
                return f"{prefix}…"
            return f"{prefix}…{body[-_KEY_TAIL:]}"
    return value


def redact_for_log(value: Any, *, max_string: int = 512, _depth: int = 0) -> Any:
    """Return a redacted copy of *value* suitable for debug logs."""
    if _depth > 20:
        return "<max-depth>"

    if value is None:
        return None

    if isinstance(value, str):
        value = mask_key(value)
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, bytes):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, Mapping):
        redacted: dict[str, Any] = {}
        for k, v in value.items():
            key = mask_key(str(k))
            if key.lower() in _SECRET_KEYS and v not in (None, ""):
                redacted[key] = "<redacted>"
            else:
                redacted[key] = redact_for_log(v, max_string=max_string, _depth=_depth + 1)
        return redacted

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [redact_for_log(v, max_string=max_string, _depth=_depth + 1) for v in value]

    return repr(value)
