"""Unit tests for mongowrap.to_object_id."""

import os

import pytest
from bson import ObjectId

from mongowrap.InvalidIdentifierError import InvalidIdentifierError
from mongowrap.to_object_id import to_object_id


@pytest.mark.parametrize("hex_string", ["", "abc", "507f1f77bcf86cd79943901", "507f1f77bcf86cd7994390111", "0" * 48])
def test_wrong_length_rejected(hex_string):
    with pytest.raises(InvalidIdentifierError) as exc_info:
        to_object_id(hex_string)
    assert str(exc_info.value) == "ObjectId must be 24 hexadecimal characters long (to be converted to 12 bytes)"
    assert isinstance(exc_info.value, ValueError)


def test_non_hex_rejected():
    with pytest.raises(InvalidIdentifierError, match="hexadecimal") as exc_info:
        to_object_id("z" * 24)
    assert exc_info.value.__cause__ is not None


def test_non_string_rejected():
    with pytest.raises(InvalidIdentifierError):
        to_object_id(os.urandom(12))  # type: ignore[arg-type]


def test_random_hex_strings_convert():
    for _ in range(20):
        raw = os.urandom(12)
        oid = to_object_id(raw.hex())
        assert oid.binary == raw
        assert str(oid) == raw.hex()
        assert oid == ObjectId(raw.hex())


def test_upper_case_hex_accepted():
    oid = to_object_id("507F1F77BCF86CD799439011")
    assert str(oid) == "507f1f77bcf86cd799439011"
