"""Convert a 24-character hex string into an ObjectId."""

from bson import ObjectId
from bson.errors import InvalidId

from .constants import OBJECT_ID_BYTE_LENGTH, OBJECT_ID_HEX_LENGTH
from .InvalidIdentifierError import InvalidIdentifierError


def to_object_id(hex_string: str) -> ObjectId:
    """Convert the external representation of a document identifier.

    Args:
        hex_string: 24 hexadecimal characters (case-insensitive)

    Returns:
        ObjectId wrapping the 12 decoded bytes

    Raises:
        InvalidIdentifierError: If the string is not 24 hexadecimal characters
    """
    if not isinstance(hex_string, str) or len(hex_string) != OBJECT_ID_HEX_LENGTH:
        raise InvalidIdentifierError(
            f"ObjectId must be {OBJECT_ID_HEX_LENGTH} hexadecimal characters long "
            f"(to be converted to {OBJECT_ID_BYTE_LENGTH} bytes)"
        )
    try:
        return ObjectId(hex_string)
    except InvalidId as exc:
        raise InvalidIdentifierError(f"ObjectId must be hexadecimal (found: {hex_string!r})") from exc
