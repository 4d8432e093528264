from __future__ import annotations

import string

from pydantic import BaseModel, Field, field_validator

UNKNOWN_MAC = "00:00:00:00:00:00"


def normalize_mac(value: str | None) -> str:
    """Return ``value`` as upper-case colon-separated hex, or ``UNKNOWN_MAC``."""
    if not value:
        return UNKNOWN_MAC
    cleaned = value.strip().replace(":", "").replace("-", "").replace(".", "")
    if len(cleaned) == 12 and all(ch in string.hexdigits for ch in cleaned):
        pairs = [cleaned[i : i + 2] for i in range(0, 12, 2)]
        return ":".join(pair.upper() for pair in pairs)
    return UNKNOWN_MAC


class DeviceRecord(BaseModel):
    """A discovered TV, identified by its MAC address."""

    model_config = {"extra": "ignore", "populate_by_name": True}

    friendly_name: str = Field(alias="friendlyName")
    ip: str
    mac: str = UNKNOWN_MAC

    @field_validator("mac", mode="before")
    @classmethod
    def _canonical_mac(cls, value: object) -> str:
        return normalize_mac(value if isinstance(value, str) else None)

    @property
    def has_known_mac(self) -> bool:
        return self.mac != UNKNOWN_MAC

    def describe(self) -> str:
        return f"{self.friendly_name}, ip: {self.ip}, mac: {self.mac}"

    def to_json(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)
