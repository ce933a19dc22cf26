"""B record decoder.

The B record is the fix: one position and altitude sample, written every few
seconds for the whole flight. It is by far the most frequent line in a log.

B Record Format:
    B1101355206343N00006198WA0058800558[extensions]
    ||     |       |        ||    |    |
    ||     |       |        ||    |    +-- columns declared by the I record
    ||     |       |        ||    +-- GNSS altitude (5, metres)
    ||     |       |        |+-- pressure altitude (5, metres)
    ||     |       |        +-- fix validity (A = 3D, V = 2D / no fix)
    ||     |       +-- longitude DDDMMmmm + E/W
    ||     +-- latitude DDMMmmm + N/S
    |+-- UTC time HHMMSS
    +-- record type

The first 35 columns are fixed. Anything after them belongs to the extension
fields declared by the most recent I record, which the caller passes in as an
``ExtensionSchema``. A line may end before some declared fields; the fix is
still decoded and those fields are listed in ``missing_extensions``.
"""

from flightlog.igc.errors import DecodeError, FieldError, WrongLength, invalid_field
from flightlog.igc.extension import (
    BASE_LENGTHS,
    ExtensionSchema,
    check_schema_target,
    split_extensions,
)
from flightlog.igc.fields import (
    decode_altitude,
    decode_fix_validity,
    decode_latitude,
    decode_longitude,
    decode_time,
    require_ascii,
)
from flightlog.igc.types import FixRecord, RecordKind

_BASE_LENGTH = BASE_LENGTHS[RecordKind.FIX]


def _build_fix_record(line: str, schema: ExtensionSchema | None) -> FixRecord:
    """Construct a FixRecord from a line of at least 35 columns.

    Maps columns (0-indexed slices) to FixRecord attributes:
        line[1:7]   -> time
        line[7:15]  -> latitude
        line[15:24] -> longitude
        line[24]    -> validity
        line[25:30] -> pressure_altitude
        line[30:35] -> gnss_altitude
        line[35:]   -> extensions, missing_extensions and trailing_data

    Raises:
        FieldError: On the first field that fails to decode.
    """
    require_ascii(line, "line")
    extensions, missing, trailing_data = split_extensions(
        line, schema, RecordKind.FIX
    )

    return FixRecord(
        time=decode_time(line[1:7]),
        latitude=decode_latitude(line[7:15]),
        longitude=decode_longitude(line[15:24]),
        validity=decode_fix_validity(line[24]),
        pressure_altitude=decode_altitude(line[25:30], "pressure_altitude"),
        gnss_altitude=decode_altitude(line[30:35], "gnss_altitude"),
        extensions=extensions,
        trailing_data=trailing_data,
        missing_extensions=missing,
    )


def decode_fix(line: str, schema: ExtensionSchema | None = None) -> FixRecord | DecodeError:
    """Decode a B record.

    Args:
        line: Complete line starting with ``B``, without line terminator.
        schema: Schema built from the most recent I record, or None if the
            log has none so far.

    Returns:
        FixRecord, or:
        - ``WrongLength`` if the line is shorter than the 35 fixed columns
        - ``InvalidField`` for the first field that does not decode, or for
          a line holding non-ASCII characters

    Raises:
        ValueError: If ``schema`` was built from a J record.

    Note:
        Only the fixed columns are required. Declared fields the line ends
        before are named in ``missing_extensions``; characters past the last
        declared column are returned in ``trailing_data``. Neither is an
        error.

    Example:
        >>> fix = decode_fix("B1101355206343N00006198WA0058800558")
        >>> fix.latitude.to_decimal_degrees()
        52.10571666666667
        >>> fix.extensions
        {}
    """
    check_schema_target(schema, RecordKind.FIX)

    if len(line) < _BASE_LENGTH:
        return WrongLength(RecordKind.FIX, _BASE_LENGTH, len(line), line)

    try:
        return _build_fix_record(line, schema)
    except FieldError as error:
        return invalid_field(error, RecordKind.FIX, line)
