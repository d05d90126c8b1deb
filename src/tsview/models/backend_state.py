"""Backend lifecycle state of the daemon."""

from __future__ import annotations

from enum import StrEnum

from tsview.exceptions import UnknownBackendStateError


class BackendState(StrEnum):
    """Coarse lifecycle phase reported by ``tailscaled``."""

    NO_STATE = "NoState"
    IN_USE_OTHER_USER = "InUseOtherUser"
    NEEDS_LOGIN = "NeedsLogin"
    NEEDS_MACHINE_AUTH = "NeedsMachineAuth"
    STOPPED = "Stopped"
    STARTING = "Starting"
    RUNNING = "Running"


_BACKEND_STATES: dict[str, BackendState] = {state.value: state for state in BackendState}


def parse_backend_state(tag: str) -> BackendState:
    """Map the wire tag from the status response to :class:`BackendState`.

    The set is closed: an unrecognized tag raises
    :class:`~tsview.exceptions.UnknownBackendStateError` instead of falling
    back to a default.
    """
    state = _BACKEND_STATES.get(tag)
    if state is None:
        raise UnknownBackendStateError(tag)
    return state
