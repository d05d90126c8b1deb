"""Data models for LocalAPI responses."""

from tsview.models._base import TsBaseModel
from tsview.models.backend_state import BackendState, parse_backend_state
from tsview.models.lock import NetworkLockStatus, is_zero_key
from tsview.models.peer import ExitNodeStatus, PeerStatus, UserProfile
from tsview.models.ping import PingResult
from tsview.models.prefs import MaskedPrefs, Prefs
from tsview.models.status import Status

__all__ = [
    "BackendState",
    "ExitNodeStatus",
    "MaskedPrefs",
    "NetworkLockStatus",
    "PeerStatus",
    "PingResult",
    "Prefs",
    "Status",
    "TsBaseModel",
    "UserProfile",
    "is_zero_key",
    "parse_backend_state",
]
