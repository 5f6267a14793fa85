"""Tests for JsonCodec."""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import UUID

import pytest
from pydantic import BaseModel

from typedcache_core.exceptions import TypeMismatchError
from typedcache_core.interfaces.store import ValueCodec
from typedcache_infra.store.codec import JsonCodec


class Item(BaseModel):
    """Sample model."""

    sku: str
    qty: int


@pytest.mark.unit
class TestJsonCodec:
    """Tests for JSON encoding and decoding."""

    def test_satisfies_protocol(self) -> None:
        """JsonCodec implements ValueCodec."""
        assert isinstance(JsonCodec(), ValueCodec)

    def test_encodes_compact_json(self) -> None:
        """Plain values encode as compact JSON text."""
        assert JsonCodec().encode({"a": [1, 2]}) == '{"a":[1,2]}'

    def test_integers_stay_counter_compatible(self) -> None:
        """Integers encode as bare digits so INCRBY can use them."""
        assert JsonCodec().encode(10) == "10"

    def test_encodes_model(self) -> None:
        """Pydantic models encode as their JSON dump."""
        assert JsonCodec().encode(Item(sku="a1", qty=2)) == '{"sku":"a1","qty":2}'

    def test_encodes_datetime_and_uuid(self) -> None:
        """Datetimes and UUIDs encode as strings."""
        codec = JsonCodec()
        when = datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)
        assert codec.decode(codec.encode(when)) == "2024-01-02T03:04:05Z"
        uid = UUID("12345678-1234-5678-1234-567812345678")
        assert codec.decode(codec.encode(uid)) == str(uid)

    def test_none_rejected(self) -> None:
        """None cannot be encoded."""
        with pytest.raises(ValueError, match="None cannot be cached"):
            JsonCodec().encode(None)

    def test_unserializable_raises(self) -> None:
        """Arbitrary objects are a type mismatch."""
        with pytest.raises(TypeMismatchError, match="not JSON-serializable"):
            JsonCodec().encode(object())

    def test_decode_invalid_json(self) -> None:
        """Text that is not JSON is a type mismatch."""
        with pytest.raises(TypeMismatchError, match="not valid JSON"):
            JsonCodec().decode("not json")

    def test_decode_bytes(self) -> None:
        """Bytes replies decode too."""
        assert JsonCodec().decode(b'"hi"') == "hi"

    def test_member_encoding_sorts_keys(self) -> None:
        """Equal dicts encode to one member whatever their key order."""
        codec = JsonCodec()
        assert codec.encode_member({"b": 1, "a": 2}) == codec.encode_member({"a": 2, "b": 1})
        assert codec.encode_member({"b": 1, "a": 2}) == '{"a":2,"b":1}'

    @pytest.mark.parametrize("value", [1, 1.0, True])
    def test_member_encoding_folds_equal_numbers(self, value: object) -> None:
        """1, 1.0 and True are one member, as in a Python set."""
        assert JsonCodec().encode_member(value) == "1"

    def test_member_encoding_keeps_fractions_and_text(self) -> None:
        """Non-integral floats and strings are left alone."""
        codec = JsonCodec()
        assert codec.encode_member(1.5) == "1.5"
        assert codec.encode_member("1") == '"1"'
        assert codec.encode_member([2.0, {"x": False}]) == '[2,{"x":0}]'

    def test_member_encoding_rejects_none(self) -> None:
        """None is not a member either."""
        with pytest.raises(ValueError, match="None cannot be cached"):
            JsonCodec().encode_member(None)
