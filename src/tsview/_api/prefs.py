"""Preference endpoints."""

from __future__ import annotations

import logging

from tsview._api._common import fetch_input, parse_model
from tsview._constants import PREFS_ENDPOINT
from tsview._transport import Transport
from tsview.models.prefs import MaskedPrefs, Prefs

_logger = logging.getLogger(__name__)


async def fetch_prefs(transport: Transport) -> Prefs:
    return await fetch_input(transport, Prefs, PREFS_ENDPOINT, fetch="prefs")


async def edit_prefs(transport: Transport, masked: MaskedPrefs) -> Prefs:
    """Apply a partial preference edit and return the resulting prefs."""
    payload = masked.to_payload()
    _logger.debug("Editing prefs: %s", sorted(key for key in payload if not key.endswith("Set")))
    response = await transport.request_json("PATCH", PREFS_ENDPOINT, json_body=payload)
    return parse_model(Prefs, PREFS_ENDPOINT, response)
