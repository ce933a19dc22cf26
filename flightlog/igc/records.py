"""Decoders for the A, C, E, F, G, H and L records.

These records have a short fixed part followed, for most of them, by free
text. None of them depends on an extension schema. The fixed columns must be
ASCII. Free text is kept as written.

Record Formats (fixed part, then free text):
    A LXN GII FLIGHT:1            manufacturer, serial, id extension
    C 230718 092044 000000 0002 04 Task   declaration: dates, time, id, count
    C 5156040N 00038120W LBZ      turnpoint: latitude, longitude, name
    E 120515 PEV text             time, event code, text
    F 095212 04 07 13             time, satellite ids
    G 6C3F0B5A...                 security digest
    H F DTE DATE:150718,01        source, mnemonic, friendly name:value
    L XCS comment                 comment text
"""

from flightlog.igc.checksum import decode_digest
from flightlog.igc.errors import (
    DecodeError,
    FieldError,
    InvalidChecksum,
    WrongLength,
    invalid_field,
)
from flightlog.igc.fields import (
    decode_date,
    decode_latitude,
    decode_longitude,
    decode_number,
    decode_satellite_ids,
    decode_time,
    require_ascii,
)
from flightlog.igc.types import (
    CommentRecord,
    EventRecord,
    HeaderRecord,
    ManufacturerRecord,
    RecordKind,
    SatelliteRecord,
    SecurityRecord,
    TaskDeclarationRecord,
    TaskTurnpointRecord,
)

_MANUFACTURER_LENGTH = 7
_TASK_TURNPOINT_LENGTH = 18
_TASK_DECLARATION_LENGTH = 25
_EVENT_LENGTH = 10
_SATELLITE_LENGTH = 7
_SECURITY_LENGTH = 2
_HEADER_LENGTH = 5
_COMMENT_LENGTH = 1

# Column 9 of a C record is a hemisphere letter only in the turnpoint layout;
# in the declaration layout it is a digit of the declaration time.
_TURNPOINT_MARKER_INDEX = 8
_TURNPOINT_MARKERS = ("N", "S")

_UNSET_DATE = "000000"
_DATE_HEADER = "DTE"


def _optional_text(text: str) -> str | None:
    return text or None


def _require_code(raw: str, field_name: str) -> str:
    if not (raw.isascii() and raw.isalnum()):
        raise FieldError(field_name, raw, "expected letters or digits")
    return raw


def decode_manufacturer(line: str) -> ManufacturerRecord | DecodeError:
    """Decode an A record.

    Example:
        >>> decode_manufacturer("ALXNGIIFLIGHT:1")
        ManufacturerRecord(manufacturer_code='LXN', unique_id='GII', id_extension='FLIGHT:1')
    """
    if len(line) < _MANUFACTURER_LENGTH:
        return WrongLength(
            RecordKind.MANUFACTURER, _MANUFACTURER_LENGTH, len(line), line
        )

    try:
        manufacturer_code = _require_code(line[1:4], "manufacturer_code")
        unique_id = require_ascii(line[4:7], "unique_id")
    except FieldError as error:
        return invalid_field(error, RecordKind.MANUFACTURER, line)

    return ManufacturerRecord(
        manufacturer_code=manufacturer_code,
        unique_id=unique_id,
        id_extension=_optional_text(line[7:]),
    )


def _build_task_declaration(line: str) -> TaskDeclarationRecord:
    flight_date_raw = line[13:19]
    flight_date = (
        None
        if flight_date_raw == _UNSET_DATE
        else decode_date(flight_date_raw, "flight_date")
    )

    return TaskDeclarationRecord(
        declaration_date=decode_date(line[1:7], "declaration_date"),
        declaration_time=decode_time(line[7:13], "declaration_time"),
        flight_date=flight_date,
        task_id=decode_number(line[19:23], "task_id"),
        turnpoint_count=decode_number(line[23:25], "turnpoint_count"),
        description=_optional_text(line[25:]),
    )


def _build_task_turnpoint(line: str) -> TaskTurnpointRecord:
    return TaskTurnpointRecord(
        latitude=decode_latitude(line[1:9]),
        longitude=decode_longitude(line[9:18]),
        description=_optional_text(line[18:]),
    )


def decode_task(line: str) -> TaskDeclarationRecord | TaskTurnpointRecord | DecodeError:
    """Decode a C record in either of its two layouts.

    The layout is chosen by column 9: ``N`` or ``S`` (a latitude hemisphere)
    means a turnpoint, anything else a declaration.

    Returns:
        TaskDeclarationRecord or TaskTurnpointRecord, or:
        - ``WrongLength`` if the line is too short to tell the layouts apart
          (reported against the 18-column turnpoint layout) or shorter than
          its layout
        - ``InvalidField`` for the first field that does not decode
    """
    if len(line) <= _TURNPOINT_MARKER_INDEX:
        return WrongLength(RecordKind.TASK, _TASK_TURNPOINT_LENGTH, len(line), line)

    if line[_TURNPOINT_MARKER_INDEX] in _TURNPOINT_MARKERS:
        expected, build = _TASK_TURNPOINT_LENGTH, _build_task_turnpoint
    else:
        expected, build = _TASK_DECLARATION_LENGTH, _build_task_declaration

    if len(line) < expected:
        return WrongLength(RecordKind.TASK, expected, len(line), line)

    try:
        return build(line)
    except FieldError as error:
        return invalid_field(error, RecordKind.TASK, line)


def decode_event(line: str) -> EventRecord | DecodeError:
    """Decode an E record.

    Example:
        >>> decode_event("E120515PEV")
        EventRecord(time=Time(hours=12, minutes=5, seconds=15), code='PEV', text=None)
    """
    if len(line) < _EVENT_LENGTH:
        return WrongLength(RecordKind.EVENT, _EVENT_LENGTH, len(line), line)

    try:
        return EventRecord(
            time=decode_time(line[1:7]),
            code=_require_code(line[7:10], "code"),
            text=_optional_text(line[10:]),
        )
    except FieldError as error:
        return invalid_field(error, RecordKind.EVENT, line)


def decode_satellite(line: str) -> SatelliteRecord | DecodeError:
    """Decode an F record.

    Example:
        >>> decode_satellite("F095212040713").satellites
        (4, 7, 13)
    """
    if len(line) < _SATELLITE_LENGTH:
        return WrongLength(RecordKind.SATELLITE, _SATELLITE_LENGTH, len(line), line)

    try:
        return SatelliteRecord(
            time=decode_time(line[1:7]),
            satellites=decode_satellite_ids(line[7:]),
        )
    except FieldError as error:
        return invalid_field(error, RecordKind.SATELLITE, line)


def decode_security(line: str) -> SecurityRecord | DecodeError:
    """Decode a G record, checking that its payload is hexadecimal.

    Returns:
        SecurityRecord, ``WrongLength`` for a bare ``G``, or
        ``InvalidChecksum`` if the payload holds a non-hex character.
    """
    if len(line) < _SECURITY_LENGTH:
        return WrongLength(RecordKind.SECURITY, _SECURITY_LENGTH, len(line), line)

    digest = line[1:]
    try:
        decode_digest(digest)
    except FieldError:
        return InvalidChecksum(raw_slice=digest, line=line)

    return SecurityRecord(digest=digest)


def decode_header(line: str) -> HeaderRecord | DecodeError:
    """Decode an H record.

    The text after the three-character mnemonic is split at its first colon
    into a friendly name and a value. For ``DTE`` headers the first six
    characters of the value are also decoded as the flight date, which
    covers both the ``HFDTE150718`` and ``HFDTEDATE:150718,01`` forms.

    Example:
        >>> decode_header("HFGIDGLIDERID:D-KOOL")
        HeaderRecord(source='F', mnemonic='GID', friendly_name='GLIDERID', value='D-KOOL', date=None)
    """
    if len(line) < _HEADER_LENGTH:
        return WrongLength(RecordKind.HEADER, _HEADER_LENGTH, len(line), line)

    try:
        require_ascii(line[1:5], "source_and_mnemonic")
    except FieldError as error:
        return invalid_field(error, RecordKind.HEADER, line)

    source = line[1]
    mnemonic = line[2:5]
    friendly_name, colon, value = line[5:].partition(":")
    if not colon:
        friendly_name, value = None, line[5:]

    date = None
    if mnemonic == _DATE_HEADER:
        try:
            date = decode_date(value[:6])
        except FieldError as error:
            return invalid_field(error, RecordKind.HEADER, line)

    return HeaderRecord(
        source=source,
        mnemonic=mnemonic,
        friendly_name=friendly_name,
        value=value,
        date=date,
    )


def decode_comment(line: str) -> CommentRecord | DecodeError:
    """Decode an L record. Everything after the ``L`` is the comment."""
    if len(line) < _COMMENT_LENGTH:
        return WrongLength(RecordKind.COMMENT, _COMMENT_LENGTH, len(line), line)
    return CommentRecord(text=line[1:])
