"""IGC record types.

This module defines the immutable values produced by the decoders.

Design Decisions:
    1. One frozen dataclass per record kind, joined in the ``Record`` union.
       There is no shared record base class; callers dispatch on ``kind`` or
       ``isinstance``. The C record has two layouts (declaration and
       turnpoint), both reporting ``RecordKind.TASK``.

    2. Coordinates stay in the integer form the file uses: whole degrees,
       thousandths of a minute and a hemisphere letter. The sign is only
       applied when a caller asks for decimal degrees, so no precision is
       lost while decoding.

    3. Dates keep the two-digit year of the file. Resolving the century is
       the caller's decision (``Date.to_date``).

    4. Extension values on B and K records are the raw column slices keyed
       by mnemonic, held in a read-only ``ExtensionValues`` mapping so the
       records stay immutable and hashable. Their units are recorder-defined.
"""

import datetime
import enum
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import ClassVar, Union

from flightlog.igc.manufacturers import Manufacturer


class RecordKind(enum.Enum):
    """Record kinds, valued by their leading character."""

    MANUFACTURER = "A"
    FIX = "B"
    TASK = "C"
    EVENT = "E"
    SATELLITE = "F"
    SECURITY = "G"
    HEADER = "H"
    FIX_EXTENSION = "I"
    K_EXTENSION = "J"
    EXTENSION_DATA = "K"
    COMMENT = "L"


class Compass(enum.Enum):
    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"


class FixValidity(enum.Enum):
    """Fix validity flag of a B record.

    ``VALID`` is a 3D fix. ``NAV_WARNING`` means a 2D fix or no GNSS data,
    in which case the GNSS altitude is not meaningful.
    """

    VALID = "A"
    NAV_WARNING = "V"


class DataSource(enum.Enum):
    """Who supplied an H record's value."""

    FLIGHT_RECORDER = "F"
    OFFICIAL_OBSERVER = "O"
    PILOT = "P"


@dataclass(frozen=True)
class Date:
    """A calendar day as written in IGC files (DDMMYY).

    Attributes:
        day: 1 to 31.
        month: 1 to 12.
        year: Last two digits of the year, 0 to 99.
    """

    day: int
    month: int
    year: int

    def to_date(self, century: int = 2000) -> datetime.date:
        """Return a ``datetime.date`` placing ``year`` in ``century``.

        Raises:
            ValueError: If the day does not exist in that month
                (e.g. 30 February).
        """
        return datetime.date(century + self.year, self.month, self.day)


@dataclass(frozen=True)
class Time:
    """A UTC time of day with second precision (HHMMSS)."""

    hours: int
    minutes: int
    seconds: int

    def seconds_since_midnight(self) -> int:
        return (self.hours * 60 + self.minutes) * 60 + self.seconds

    def to_time(self) -> datetime.time:
        return datetime.time(self.hours, self.minutes, self.seconds)


def _signed_degrees(degrees: int, minute_thousandths: int, negative: bool) -> float:
    value = degrees + minute_thousandths / 60_000
    return -value if negative else value


@dataclass(frozen=True)
class Latitude:
    """Latitude as degrees, thousandths of a minute and hemisphere.

    ``5206343N`` is 52 degrees 06.343 minutes North, stored as
    ``Latitude(52, 6343, Compass.NORTH)``.

    Attributes:
        degrees: 0 to 90.
        minute_thousandths: Minutes multiplied by 1000, 0 to 59999.
            Always 0 when ``degrees`` is 90.
        hemisphere: ``Compass.NORTH`` or ``Compass.SOUTH``.
    """

    degrees: int
    minute_thousandths: int
    hemisphere: Compass

    @property
    def minutes(self) -> int:
        return self.minute_thousandths // 1000

    def to_decimal_degrees(self) -> float:
        """Signed decimal degrees, negative in the southern hemisphere."""
        return _signed_degrees(
            self.degrees, self.minute_thousandths, self.hemisphere is Compass.SOUTH
        )


@dataclass(frozen=True)
class Longitude:
    """Longitude as degrees, thousandths of a minute and hemisphere.

    Attributes:
        degrees: 0 to 180.
        minute_thousandths: Minutes multiplied by 1000, 0 to 59999.
            Always 0 when ``degrees`` is 180.
        hemisphere: ``Compass.EAST`` or ``Compass.WEST``.
    """

    degrees: int
    minute_thousandths: int
    hemisphere: Compass

    @property
    def minutes(self) -> int:
        return self.minute_thousandths // 1000

    def to_decimal_degrees(self) -> float:
        """Signed decimal degrees, negative west of Greenwich."""
        return _signed_degrees(
            self.degrees, self.minute_thousandths, self.hemisphere is Compass.WEST
        )


@dataclass(frozen=True)
class ExtensionDescriptor:
    """One extension field declared by an I or J record.

    Attributes:
        start: First column of the field, 1-indexed as in the IGC standard.
        length: Number of columns.
        mnemonic: Three-character code such as ``FXA`` or ``ENL``.
    """

    start: int
    length: int
    mnemonic: str

    @property
    def end(self) -> int:
        """Last column of the field, inclusive and 1-indexed."""
        return self.start + self.length - 1


class ExtensionValues(Mapping[str, str]):
    """Read-only mapping of extension mnemonic to raw column value.

    Compares equal to any mapping with the same items, and is hashable so
    that the records holding it stay hashable.

    Example:
        >>> values = ExtensionValues({"FXA": "012"})
        >>> values == {"FXA": "012"}
        True
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def __getitem__(self, mnemonic: str) -> str:
        return self._values[mnemonic]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __hash__(self) -> int:
        return hash(frozenset(self._values.items()))

    def __repr__(self) -> str:
        return repr(self._values)


def _freeze_extensions(record: object) -> None:
    extensions = record.extensions
    if not isinstance(extensions, ExtensionValues):
        object.__setattr__(record, "extensions", ExtensionValues(extensions))


# --- records ------------------------------------------------------------------


@dataclass(frozen=True)
class ManufacturerRecord:
    """A record: flight recorder manufacturer and serial.

    Attributes:
        manufacturer_code: Three-character manufacturer code (e.g. ``LXN``).
        unique_id: Three-character recorder serial.
        id_extension: Any text after the serial, or None.
    """

    kind: ClassVar[RecordKind] = RecordKind.MANUFACTURER

    manufacturer_code: str
    unique_id: str
    id_extension: str | None

    @property
    def manufacturer(self) -> Manufacturer | None:
        """The registered manufacturer, or None for unlisted codes."""
        return Manufacturer.from_code(self.manufacturer_code)


@dataclass(frozen=True)
class FixRecord:
    """B record: one position and altitude sample.

    Attributes:
        time: UTC time of the fix.
        latitude: Fix latitude.
        longitude: Fix longitude.
        validity: ``VALID`` for a 3D fix, ``NAV_WARNING`` otherwise.
        pressure_altitude: Metres relative to the ISA 1013.25 hPa datum.
            May be negative.
        gnss_altitude: Metres above the WGS84 ellipsoid. May be negative.
        extensions: Raw value per mnemonic declared by the active I record,
            read-only. Empty when no I record was supplied.
        trailing_data: Characters after the last declared column that no
            descriptor consumed. Empty in a well-formed line; a non-empty
            value is a warning, not an error.
        missing_extensions: Declared mnemonics whose columns run past the
            end of the line, in declaration order. They have no entry in
            ``extensions``.
    """

    kind: ClassVar[RecordKind] = RecordKind.FIX

    time: Time
    latitude: Latitude
    longitude: Longitude
    validity: FixValidity
    pressure_altitude: int
    gnss_altitude: int
    extensions: Mapping[str, str] = field(default_factory=ExtensionValues)
    trailing_data: str = ""
    missing_extensions: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _freeze_extensions(self)

    @property
    def is_valid(self) -> bool:
        return self.validity is FixValidity.VALID


@dataclass(frozen=True)
class TaskDeclarationRecord:
    """First C record of a task declaration.

    A conforming file follows it with ``turnpoint_count + 4`` turnpoint
    records: takeoff, start, the turnpoints, finish and landing.

    Attributes:
        declaration_date: Date the task was declared.
        declaration_time: Time the task was declared.
        flight_date: Intended flight date, or None when written as 000000.
        task_id: Four-digit task number of the day.
        turnpoint_count: Number of turnpoints, excluding start and finish.
        description: Free text after the fixed part, or None.
    """

    kind: ClassVar[RecordKind] = RecordKind.TASK

    declaration_date: Date
    declaration_time: Time
    flight_date: Date | None
    task_id: int
    turnpoint_count: int
    description: str | None


@dataclass(frozen=True)
class TaskTurnpointRecord:
    """C record naming one point of a declared task."""

    kind: ClassVar[RecordKind] = RecordKind.TASK

    latitude: Latitude
    longitude: Longitude
    description: str | None


@dataclass(frozen=True)
class EventRecord:
    """E record: an event such as a pilot event (``PEV``) at a given time."""

    kind: ClassVar[RecordKind] = RecordKind.EVENT

    time: Time
    code: str
    text: str | None


@dataclass(frozen=True)
class SatelliteRecord:
    """F record: the satellites used for fixes from ``time`` onward."""

    kind: ClassVar[RecordKind] = RecordKind.SATELLITE

    time: Time
    satellites: tuple[int, ...]


@dataclass(frozen=True)
class SecurityRecord:
    """G record: one line of the file's security digest.

    Only the hex form of ``digest`` is checked. Verifying it against the rest
    of the file needs the whole file and is left to the caller.
    """

    kind: ClassVar[RecordKind] = RecordKind.SECURITY

    digest: str


@dataclass(frozen=True)
class HeaderRecord:
    """H record: one header key/value pair.

    ``HFGIDGLIDERID:D-KOOL`` decodes to source ``F``, mnemonic ``GID``,
    friendly name ``GLIDERID`` and value ``D-KOOL``.

    Attributes:
        source: Data source character (``F``, ``O`` or ``P`` in conforming
            files; other characters are kept as written).
        mnemonic: Three-character header code (e.g. ``DTE``, ``PLT``).
        friendly_name: Text between the mnemonic and the first colon, or None
            when the line has no colon.
        value: Text after the colon, or after the mnemonic without one.
        date: The decoded flight date for ``DTE`` headers, otherwise None.
    """

    kind: ClassVar[RecordKind] = RecordKind.HEADER

    source: str
    mnemonic: str
    friendly_name: str | None
    value: str
    date: Date | None = None

    @property
    def data_source(self) -> DataSource | None:
        try:
            return DataSource(self.source)
        except ValueError:
            return None


@dataclass(frozen=True)
class FixExtensionRecord:
    """I record: layout of the extension columns appended to B records."""

    kind: ClassVar[RecordKind] = RecordKind.FIX_EXTENSION

    declared_count: int
    descriptors: tuple[ExtensionDescriptor, ...]


@dataclass(frozen=True)
class KExtensionRecord:
    """J record: layout of the extension columns of K records."""

    kind: ClassVar[RecordKind] = RecordKind.K_EXTENSION

    declared_count: int
    descriptors: tuple[ExtensionDescriptor, ...]


@dataclass(frozen=True)
class ExtensionDataRecord:
    """K record: time plus the columns declared by the active J record.

    ``extensions`` and ``trailing_data`` follow the same rules as on
    ``FixRecord``. A K line must hold every declared column, so nothing is
    ever missing.
    """

    kind: ClassVar[RecordKind] = RecordKind.EXTENSION_DATA

    time: Time
    extensions: Mapping[str, str] = field(default_factory=ExtensionValues)
    trailing_data: str = ""

    def __post_init__(self) -> None:
        _freeze_extensions(self)


@dataclass(frozen=True)
class CommentRecord:
    """L record: free text."""

    kind: ClassVar[RecordKind] = RecordKind.COMMENT

    text: str


Record = Union[
    ManufacturerRecord,
    FixRecord,
    TaskDeclarationRecord,
    TaskTurnpointRecord,
    EventRecord,
    SatelliteRecord,
    SecurityRecord,
    HeaderRecord,
    FixExtensionRecord,
    KExtensionRecord,
    ExtensionDataRecord,
    CommentRecord,
]
