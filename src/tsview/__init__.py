"""tsview - Async client and UI view model for the Tailscale LocalAPI."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("tsview")
except PackageNotFoundError:
    __version__ = "0+local"
from tsview.client import TailscaleClient, start_login_interactive_will_open_browser
from tsview.config import TsviewConfig
from tsview.exceptions import (
    CollaboratorFetchError,
    ExitNodeError,
    TsviewConfigError,
    TsviewError,
    TsviewTransportError,
    UnknownBackendStateError,
)
from tsview.models import (
    BackendState,
    ExitNodeStatus,
    MaskedPrefs,
    NetworkLockStatus,
    PeerStatus,
    PingResult,
    Prefs,
    Status,
    UserProfile,
    parse_backend_state,
)
from tsview.state.naming import peer_name, sort_peers
from tsview.state.snapshot import StateSnapshot, build_state_snapshot

__all__ = [
    "__version__",
    "BackendState",
    "CollaboratorFetchError",
    "ExitNodeError",
    "ExitNodeStatus",
    "MaskedPrefs",
    "NetworkLockStatus",
    "PeerStatus",
    "PingResult",
    "Prefs",
    "StateSnapshot",
    "Status",
    "TailscaleClient",
    "TsviewConfig",
    "TsviewConfigError",
    "TsviewError",
    "TsviewTransportError",
    "UnknownBackendStateError",
    "UserProfile",
    "build_state_snapshot",
    "parse_backend_state",
    "peer_name",
    "sort_peers",
    "start_login_interactive_will_open_browser",
]
