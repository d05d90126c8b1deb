"""LocalAPI constants."""

from __future__ import annotations

DEFAULT_SOCKET_PATH = "/var/run/tailscale/tailscaled.sock"

# tailscaled only answers LocalAPI requests addressed to this host.
DEFAULT_BASE_URL = "http://local-tailscaled.sock"

# Capability version advertised to the daemon.
CURRENT_CAP_VERSION = "106"

USER_AGENT = "tsview"

STATUS_ENDPOINT = "/localapi/v0/status"
PREFS_ENDPOINT = "/localapi/v0/prefs"
LOCK_STATUS_ENDPOINT = "/localapi/v0/tka/status"
START_ENDPOINT = "/localapi/v0/start"
LOGIN_INTERACTIVE_ENDPOINT = "/localapi/v0/login-interactive"
LOGOUT_ENDPOINT = "/localapi/v0/logout"
PING_ENDPOINT = "/localapi/v0/ping"

# Discovery ping works even when the peer drops ICMP.
PING_TYPE_DISCO = "disco"
