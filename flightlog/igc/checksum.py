"""IGC security record digest validation.

A flight recorder signs its log with one or more G records at the end of the
file. Each G record carries part of a manufacturer-specific digest written as
hexadecimal text:

    G6C3F0B5A0E6D2B0A1C94F3E1A7D3B2C8
    ^^                              ^
    |+-- digest (hex)             end
    +-- record type

Only the form of the digest is checked here. Checking the digest against the
file content needs every preceding line and the manufacturer's algorithm,
which is outside the scope of a per-line decoder.
"""

from flightlog.igc.errors import FieldError

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _find_invalid_hex_digit(digest: str) -> int | None:
    """Return the index of the first non-hex character, or None.

    Example:
        >>> _find_invalid_hex_digit("0A1B") is None
        True
        >>> _find_invalid_hex_digit("0A1Z")
        3
    """
    for index, character in enumerate(digest):
        if character not in _HEX_DIGITS:
            return index
    return None


def is_well_formed_digest(digest: str) -> bool:
    """Check that a G record payload is non-empty hexadecimal text.

    Args:
        digest: Characters after the leading ``G``.

    Returns:
        True if every character is a hex digit, False for an empty payload
        or any other character.

    Example:
        >>> is_well_formed_digest("6C3F0B5A")
        True
        >>> is_well_formed_digest("6C3F 0B5A")
        False
    """
    return bool(digest) and _find_invalid_hex_digit(digest) is None


def decode_digest(raw: str, field_name: str = "digest") -> int:
    """Decode a G record payload as a checksum value.

    Args:
        raw: Characters after the leading ``G``.
        field_name: Role of the slice, used in error reports.

    Returns:
        The digest as an unsigned integer.

    Raises:
        FieldError: If the payload is empty or holds a non-hex character.
    """
    if not raw:
        raise FieldError(field_name, raw, "empty digest")

    position = _find_invalid_hex_digit(raw)
    if position is not None:
        raise FieldError(
            field_name, raw, f"invalid hex digit {raw[position]!r} at {position}"
        )

    return int(raw, 16)
