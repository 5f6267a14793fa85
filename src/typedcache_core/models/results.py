"""Result models for cache operations."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class WriteResult(BaseModel):
    """Outcome of a write that may carry an expiry.

    Writes that need a separate expire call cannot set the TTL atomically.
    ``ttl_confirmed`` is False when the follow-up expire found no key, which
    means another caller deleted it (or it expired) between the two calls.
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(description="Key that was written")
    ttl_seconds: int | None = Field(default=None, description="Requested TTL, if any")
    ttl_confirmed: bool = Field(
        default=True,
        description="Whether the requested TTL is known to be in place",
    )
    written: bool = Field(default=True, description="Whether anything was sent to the store")


class IncrementResult(WriteResult):
    """Outcome of an atomic increment followed by an expire."""

    value: int = Field(description="Value after the increment")


class TTLState(StrEnum):
    """Expiry state of a key."""

    ABSENT = "absent"
    PERSISTENT = "persistent"
    EXPIRING = "expiring"


class KeyTTL(BaseModel):
    """Remaining time-to-live of a key."""

    model_config = ConfigDict(frozen=True)

    state: TTLState = Field(description="Whether the key is absent, persistent or expiring")
    seconds: int | None = Field(
        default=None,
        description="Remaining seconds, only set when the key is expiring",
    )

    @model_validator(mode="after")
    def validate_seconds(self) -> KeyTTL:
        """Seconds are present exactly when the key is expiring."""
        if self.state is TTLState.EXPIRING and self.seconds is None:
            msg = "seconds required when state is expiring"
            raise ValueError(msg)
        if self.state is not TTLState.EXPIRING and self.seconds is not None:
            msg = f"seconds must be unset when state is {self.state.value}"
            raise ValueError(msg)
        return self

    @property
    def exists(self) -> bool:
        """True unless the key is absent."""
        return self.state is not TTLState.ABSENT

    @property
    def expires(self) -> bool:
        """True when the key will expire."""
        return self.state is TTLState.EXPIRING
