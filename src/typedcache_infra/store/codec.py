"""JSON value codec for the store handle."""

from __future__ import annotations

import json
from typing import Any

from pydantic_core import PydanticSerializationError, to_json, to_jsonable_python

from typedcache_core.exceptions import TypeMismatchError


def _canonical(value: Any) -> Any:  # noqa: ANN401
    """Fold JSON-ready values that compare equal in Python onto one form."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {field: _canonical(item) for field, item in value.items()}
    if isinstance(value, list):
        return [_canonical(item) for item in value]
    return value


class JsonCodec:
    """Encode values as JSON text.

    Serialization goes through pydantic-core so models, datetimes, UUIDs and
    sets encode without custom hooks. Decoding yields plain JSON types; typed
    reads validate them afterwards.
    """

    def encode(self, value: Any) -> str:  # noqa: ANN401
        """Encode a value, rejecting None (reserved for absent keys)."""
        _reject_none(value)
        try:
            return to_json(value).decode("utf-8")
        except PydanticSerializationError as e:
            msg = f"Value of type {type(value).__name__} is not JSON-serializable: {e}"
            raise TypeMismatchError(msg) from e

    def encode_member(self, value: Any) -> str:  # noqa: ANN401
        """Encode a set member so that members equal in Python encode identically.

        Object keys are sorted, bools become 0/1 and integral floats become
        ints, so ``1``, ``1.0`` and ``True`` are one member, as they are in a
        Python set. Members read back in that canonical form; pass ``as_type``
        to get the original type back.
        """
        _reject_none(value)
        try:
            plain = to_jsonable_python(value)
        except PydanticSerializationError as e:
            msg = f"Value of type {type(value).__name__} is not JSON-serializable: {e}"
            raise TypeMismatchError(msg) from e
        return json.dumps(
            _canonical(plain),
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
        )

    def decode(self, raw: str | bytes) -> Any:  # noqa: ANN401
        """Decode stored JSON text."""
        try:
            return json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            msg = f"Stored value is not valid JSON: {e}"
            raise TypeMismatchError(msg) from e


def _reject_none(value: Any) -> None:  # noqa: ANN401
    if value is None:
        msg = "None cannot be cached; it marks an absent key"
        raise ValueError(msg)
