"""Shared helpers for LocalAPI endpoint modules.

It is internal to tsview and may change at any time.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from tsview._transport import Transport
from tsview.exceptions import CollaboratorFetchError, TsviewError, TsviewTransportError

M = TypeVar("M", bound=BaseModel)


def parse_model(model: type[M], endpoint: str, payload: Any) -> M:
    """Validate *payload* into *model*, mapping failures to transport errors."""
    if not isinstance(payload, dict):
        raise TsviewTransportError(
            f"Expected a JSON object from {endpoint}, got {type(payload).__name__}",
            endpoint=endpoint,
        )
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise TsviewTransportError(
            f"Unexpected response shape from {endpoint}: {exc.error_count()} error(s)",
            endpoint=endpoint,
        ) from exc


async def fetch_input(
    transport: Transport,
    model: type[M],
    endpoint: str,
    *,
    fetch: str,
) -> M:
    """GET one snapshot input, wrapping any failure in :class:`CollaboratorFetchError`."""
    try:
        payload = await transport.request_json("GET", endpoint)
        return parse_model(model, endpoint, payload)
    except TsviewError as exc:
        raise CollaboratorFetchError(f"cannot fetch {fetch}: {exc}", fetch=fetch) from exc
