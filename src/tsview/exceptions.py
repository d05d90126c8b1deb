"""Custom exception hierarchy for tsview."""

from __future__ import annotations


class TsviewError(Exception):
    """Base exception for all tsview errors."""


class TsviewConfigError(TsviewError):
    """Invalid or missing configuration."""


class TsviewTransportError(TsviewError):
    """LocalAPI-level failure (socket, non-2xx, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class CollaboratorFetchError(TsviewError):
    """One of the snapshot inputs could not be fetched from the daemon.

    ``fetch`` names the failed input (``"status"``, ``"prefs"`` or
    ``"lock"``).  The underlying transport error is chained as
    ``__cause__``.
    """

    def __init__(self, message: str, *, fetch: str) -> None:
        self.fetch = fetch
        super().__init__(message)


class UnknownBackendStateError(TsviewError, ValueError):
    """The daemon reported a backend state tag outside the known set."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"unknown backend state: {tag!r}")


class ExitNodeError(TsviewError):
    """Requested exit node is not offered as an exit node by the tailnet."""
