"""
Base model for Datadog request and response records.

Every field defaults to None and presence is tracked by pydantic's
``model_fields_set``. That gives each field three states on the wire:

- left unset: absent from the JSON body
- explicitly set to a zero value (``""``, ``0``, ``False``, ``[]``, ``None``):
  present with that value
- set to a value: present with that value

Partial updates depend on this, e.g. sending only ``host_filters``
must not clear other fields on the Datadog side.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer


class DDModel(BaseModel):
    """
    Base class for all Datadog payload records.

    Unknown response fields are ignored so new API fields never break
    decoding.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Serialize to a JSON-ready dict, omitting fields never set."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    def is_set(self, field: str) -> bool:
        """Check whether a field was explicitly provided."""
        return field in self.model_fields_set


def _parse_string_bool(value: Any) -> Any:
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1"):
            return True
        if lowered in ("false", "0"):
            return False
        raise ValueError(f"invalid boolean string: {value!r}")
    return value


# Boolean carried as a JSON string ("true"/"false") on the wire.
StringBool = Annotated[
    bool,
    BeforeValidator(_parse_string_bool),
    PlainSerializer(lambda v: "true" if v else "false", return_type=str, when_used="json"),
]
