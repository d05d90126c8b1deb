"""Base model for LocalAPI responses.

Every response model inherits from :class:`TsBaseModel` which provides:

* Frozen, ``extra="ignore"`` models that also accept snake_case names.
* A ``model_validator(mode="before")`` that drops JSON ``null`` values
  so the field default is used (Go marshals nil slices and maps as
  ``null``).
* A ``raw`` dict that captures the original payload.

Daemon keys are PascalCase with upper-case acronyms (``DNSName``,
``TailscaleIPs``), which no alias generator reproduces, so fields
declare their aliases explicitly.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TsBaseModel(BaseModel):
    """Base for LocalAPI response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    raw: dict[str, Any] = Field(default_factory=dict, repr=False)
    """Original LocalAPI response dict."""

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, values: Any) -> Any:
        """Drop ``null`` values and stash the raw payload."""
        if not isinstance(values, dict):
            return values
        cleaned = {key: value for key, value in values.items() if value is not None}
        # Keep an explicit raw= when constructing from kwargs.
        if "raw" not in values:
            cleaned["raw"] = dict(values)
        return cleaned
