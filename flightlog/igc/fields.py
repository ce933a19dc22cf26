"""IGC field decoding utilities.

IGC records have no delimiters: every field sits at fixed columns and is
identified only by its position. The functions here decode one such column
range into a typed value. They know nothing about record layouts; the record
decoders slice the line and pass the slice together with the field name.

Every function either returns a fully checked value or raises ``FieldError``
describing which constraint failed. Values outside their range are errors,
never clamped or wrapped. Only ASCII digits count as digits.
"""

from flightlog.igc.errors import FieldError
from flightlog.igc.types import Compass, Date, FixValidity, Latitude, Longitude, Time

TIME_LENGTH = 6
DATE_LENGTH = 6
LATITUDE_LENGTH = 8
LONGITUDE_LENGTH = 9
ALTITUDE_LENGTH = 5

_DIGITS = frozenset("0123456789")


def _require_length(raw: str, length: int, field_name: str) -> None:
    if len(raw) != length:
        raise FieldError(field_name, raw, f"expected {length} characters")


def require_ascii(raw: str, field_name: str) -> str:
    """Return ``raw`` unchanged, or raise ``FieldError`` if it is not ASCII.

    Example:
        >>> require_ascii("GII", "unique_id")
        'GII'
    """
    if not raw.isascii():
        raise FieldError(field_name, raw, "non-ASCII characters")
    return raw


def _require_digits(raw: str, field_name: str) -> None:
    if not raw or not _DIGITS.issuperset(raw):
        raise FieldError(field_name, raw, "expected digits")


def decode_number(
    raw: str,
    field_name: str,
    minimum: int = 0,
    maximum: int | None = None,
) -> int:
    """Decode an unsigned, zero-padded decimal field.

    Args:
        raw: Column slice holding only digits (e.g. ``"0042"``).
        field_name: Role of the slice, used in error reports.
        minimum: Smallest accepted value.
        maximum: Largest accepted value, or None for no upper bound.

    Returns:
        The integer value.

    Raises:
        FieldError: On an empty slice, a non-digit character or a value
            outside ``minimum..maximum``.

    Example:
        >>> decode_number("0204", "task_id")
        204
    """
    _require_digits(raw, field_name)
    value = int(raw)
    if value < minimum or (maximum is not None and value > maximum):
        raise FieldError(field_name, raw, "out of range")
    return value


def decode_time(raw: str, field_name: str = "time") -> Time:
    """Decode an HHMMSS time.

    Hours must be 0-23, minutes and seconds 0-59.

    Example:
        >>> decode_time("110135")
        Time(hours=11, minutes=1, seconds=35)
    """
    _require_length(raw, TIME_LENGTH, field_name)
    _require_digits(raw, field_name)

    hours, minutes, seconds = int(raw[0:2]), int(raw[2:4]), int(raw[4:6])
    if hours > 23 or minutes > 59 or seconds > 59:
        raise FieldError(field_name, raw, "out of range")

    return Time(hours=hours, minutes=minutes, seconds=seconds)


def decode_date(raw: str, field_name: str = "date") -> Date:
    """Decode a DDMMYY date.

    Day must be 1-31 and month 1-12. The year stays a two-digit value; the
    day is not checked against the month length, since that needs the
    century.

    Example:
        >>> decode_date("230718")
        Date(day=23, month=7, year=18)
    """
    _require_length(raw, DATE_LENGTH, field_name)
    _require_digits(raw, field_name)

    day, month, year = int(raw[0:2]), int(raw[2:4]), int(raw[4:6])
    if not 1 <= day <= 31 or not 1 <= month <= 12:
        raise FieldError(field_name, raw, "out of range")

    return Date(day=day, month=month, year=year)


def _decode_coordinate(
    raw: str,
    field_name: str,
    degree_digits: int,
    max_degrees: int,
    hemispheres: tuple[Compass, Compass],
) -> tuple[int, int, Compass]:
    """Split a D..DMMmmmH coordinate into degrees, milli-minutes and hemisphere.

    The layout is ``degree_digits`` digits of degrees, two digits of whole
    minutes, three digits of thousandths of a minute and one hemisphere
    letter. Minutes and thousandths are concatenated into one integer, so
    ``06343`` becomes 6343 milli-minutes with no float rounding.
    """
    _require_length(raw, degree_digits + 6, field_name)

    letter = raw[-1]
    try:
        hemisphere = Compass(letter)
    except ValueError:
        raise FieldError(field_name, raw, f"invalid hemisphere {letter!r}") from None
    if hemisphere not in hemispheres:
        raise FieldError(field_name, raw, f"invalid hemisphere {letter!r}")

    digits = raw[:-1]
    _require_digits(digits, field_name)

    degrees = int(digits[:degree_digits])
    minutes = int(digits[degree_digits : degree_digits + 2])
    minute_thousandths = int(digits[degree_digits:])

    if degrees > max_degrees or minutes > 59:
        raise FieldError(field_name, raw, "out of range")
    if degrees == max_degrees and minute_thousandths != 0:
        raise FieldError(field_name, raw, "out of range")

    return degrees, minute_thousandths, hemisphere


def decode_latitude(raw: str, field_name: str = "latitude") -> Latitude:
    """Decode a DDMMmmmN / DDMMmmmS latitude.

    Example:
        >>> decode_latitude("5206343N")
        Latitude(degrees=52, minute_thousandths=6343, hemisphere=<Compass.NORTH: 'N'>)
        >>> decode_latitude("9000001N")  # past the pole
        Traceback (most recent call last):
        FieldError: latitude '9000001N': out of range
    """
    degrees, minute_thousandths, hemisphere = _decode_coordinate(
        raw, field_name, 2, 90, (Compass.NORTH, Compass.SOUTH)
    )
    return Latitude(degrees, minute_thousandths, hemisphere)


def decode_longitude(raw: str, field_name: str = "longitude") -> Longitude:
    """Decode a DDDMMmmmE / DDDMMmmmW longitude.

    Example:
        >>> decode_longitude("00006198W")
        Longitude(degrees=0, minute_thousandths=6198, hemisphere=<Compass.WEST: 'W'>)
    """
    degrees, minute_thousandths, hemisphere = _decode_coordinate(
        raw, field_name, 3, 180, (Compass.EAST, Compass.WEST)
    )
    return Longitude(degrees, minute_thousandths, hemisphere)


def decode_altitude(raw: str, field_name: str) -> int:
    """Decode a five-character altitude in metres.

    Altitudes below the datum use a leading minus sign in place of the first
    digit, so the range is -9999 to 99999.

    Example:
        >>> decode_altitude("00588", "pressure_altitude")
        588
        >>> decode_altitude("-0116", "gnss_altitude")
        -116
    """
    _require_length(raw, ALTITUDE_LENGTH, field_name)

    if raw[0] == "-":
        _require_digits(raw[1:], field_name)
        return -int(raw[1:])

    _require_digits(raw, field_name)
    return int(raw)


def decode_fix_validity(raw: str, field_name: str = "fix_validity") -> FixValidity:
    """Decode the single-character B record validity flag (``A`` or ``V``)."""
    try:
        return FixValidity(raw)
    except ValueError:
        raise FieldError(field_name, raw, "expected 'A' or 'V'") from None


def decode_satellite_ids(raw: str, field_name: str = "satellites") -> tuple[int, ...]:
    """Decode a run of two-digit satellite ids.

    An empty slice is an empty constellation.

    Example:
        >>> decode_satellite_ids("040713")
        (4, 7, 13)
    """
    if len(raw) % 2 != 0:
        raise FieldError(field_name, raw, "expected pairs of digits")
    if raw:
        _require_digits(raw, field_name)
    return tuple(int(raw[index : index + 2]) for index in range(0, len(raw), 2))
