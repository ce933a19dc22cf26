"""K record decoder.

K records carry data sampled less often than fixes (wind, true heading,
airspeed...). The record itself only has a fixed time field; everything else
is laid out by the most recent J record.

K Record Format:
    K095214[extensions]
    ||     |
    ||     +-- columns declared by the J record
    |+-- UTC time HHMMSS
    +-- record type
"""

from flightlog.igc.errors import DecodeError, FieldError, WrongLength, invalid_field
from flightlog.igc.extension import (
    BASE_LENGTHS,
    ExtensionSchema,
    required_length,
    split_extensions,
)
from flightlog.igc.fields import decode_time, require_ascii
from flightlog.igc.types import ExtensionDataRecord, RecordKind

_BASE_LENGTH = BASE_LENGTHS[RecordKind.EXTENSION_DATA]


def decode_extension_data(
    line: str, schema: ExtensionSchema | None = None
) -> ExtensionDataRecord | DecodeError:
    """Decode a K record.

    Args:
        line: Complete line starting with ``K``, without line terminator.
        schema: Schema built from the most recent J record, or None.

    Returns:
        ExtensionDataRecord, or:
        - ``WrongLength`` if the line is shorter than 7 columns, or shorter
          than the last column declared by ``schema``
        - ``InvalidField`` for a bad time or non-ASCII characters

    Raises:
        ValueError: If ``schema`` was built from an I record.

    Example:
        >>> decode_extension_data("K095214")
        ExtensionDataRecord(time=Time(hours=9, minutes=52, seconds=14), extensions={}, trailing_data='')
    """
    expected = required_length(schema, RecordKind.EXTENSION_DATA)

    if len(line) < _BASE_LENGTH:
        return WrongLength(RecordKind.EXTENSION_DATA, _BASE_LENGTH, len(line), line)
    if len(line) < expected:
        return WrongLength(RecordKind.EXTENSION_DATA, expected, len(line), line)

    try:
        require_ascii(line, "line")
        time = decode_time(line[1:7])
    except FieldError as error:
        return invalid_field(error, RecordKind.EXTENSION_DATA, line)

    extensions, _, trailing_data = split_extensions(
        line, schema, RecordKind.EXTENSION_DATA
    )
    return ExtensionDataRecord(
        time=time, extensions=extensions, trailing_data=trailing_data
    )
