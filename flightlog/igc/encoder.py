"""Write decoded records back in their fixed-width IGC form.

``encode_record`` is the inverse of ``decode_line``: for any record the
decoders produce, decoding the encoded line gives an equal record back. B and
K records that carry extension values need the schema they were decoded with,
since the record only keeps the values and not their columns.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING

from flightlog.igc.types import (
    CommentRecord,
    Date,
    EventRecord,
    ExtensionDataRecord,
    ExtensionDescriptor,
    FixExtensionRecord,
    FixRecord,
    HeaderRecord,
    KExtensionRecord,
    Latitude,
    Longitude,
    ManufacturerRecord,
    Record,
    SatelliteRecord,
    SecurityRecord,
    TaskDeclarationRecord,
    TaskTurnpointRecord,
    Time,
)

if TYPE_CHECKING:
    from flightlog.igc.extension import ExtensionSchema


def encode_time(time: Time) -> str:
    return f"{time.hours:02d}{time.minutes:02d}{time.seconds:02d}"


def encode_date(date: Date | None) -> str:
    if date is None:
        return "000000"
    return f"{date.day:02d}{date.month:02d}{date.year:02d}"


def encode_latitude(latitude: Latitude) -> str:
    return (
        f"{latitude.degrees:02d}{latitude.minute_thousandths:05d}"
        f"{latitude.hemisphere.value}"
    )


def encode_longitude(longitude: Longitude) -> str:
    return (
        f"{longitude.degrees:03d}{longitude.minute_thousandths:05d}"
        f"{longitude.hemisphere.value}"
    )


def encode_altitude(altitude: int) -> str:
    if not -9999 <= altitude <= 99999:
        raise ValueError(f"altitude {altitude} does not fit in five characters")
    if altitude < 0:
        return f"-{-altitude:04d}"
    return f"{altitude:05d}"


def encode_descriptor(descriptor: ExtensionDescriptor) -> str:
    return f"{descriptor.start:02d}{descriptor.end:02d}{descriptor.mnemonic}"


def _place_extensions(
    base: str,
    extensions: Mapping[str, str],
    trailing_data: str,
    schema: "ExtensionSchema | None",
    missing: tuple[str, ...] = (),
) -> str:
    """Lay extension values out at their declared columns.

    Columns between the fixed part and the declared fields are not kept by
    the decoders and are written as spaces. The line ends after the last
    field present, so fields in ``missing`` stay missing when decoded again.
    """
    if schema is None:
        if extensions or missing:
            raise ValueError("a schema is needed to place extension values")
        return base + trailing_data

    declared = set(schema.mnemonics)
    if set(missing) - declared or set(extensions) != declared - set(missing):
        raise ValueError(
            f"extensions {sorted(extensions)} and missing {sorted(missing)} "
            f"do not match schema {sorted(schema.mnemonics)}"
        )

    placed = [d for d in schema.descriptors if d.mnemonic in extensions]
    columns = list(base.ljust(max((d.end for d in placed), default=0)))
    for descriptor in placed:
        value = extensions[descriptor.mnemonic]
        if len(value) != descriptor.length:
            raise ValueError(
                f"{descriptor.mnemonic} value {value!r} is not "
                f"{descriptor.length} characters"
            )
        columns[descriptor.start - 1 : descriptor.end] = value

    return "".join(columns) + trailing_data


def _encode_manufacturer(record: ManufacturerRecord) -> str:
    return f"A{record.manufacturer_code}{record.unique_id}{record.id_extension or ''}"


def _encode_fix(record: FixRecord, schema: "ExtensionSchema | None") -> str:
    base = (
        f"B{encode_time(record.time)}"
        f"{encode_latitude(record.latitude)}{encode_longitude(record.longitude)}"
        f"{record.validity.value}"
        f"{encode_altitude(record.pressure_altitude)}"
        f"{encode_altitude(record.gnss_altitude)}"
    )
    return _place_extensions(
        base, record.extensions, record.trailing_data, schema, record.missing_extensions
    )


def _encode_task_declaration(record: TaskDeclarationRecord) -> str:
    return (
        f"C{encode_date(record.declaration_date)}"
        f"{encode_time(record.declaration_time)}"
        f"{encode_date(record.flight_date)}"
        f"{record.task_id:04d}{record.turnpoint_count:02d}"
        f"{record.description or ''}"
    )


def _encode_task_turnpoint(record: TaskTurnpointRecord) -> str:
    return (
        f"C{encode_latitude(record.latitude)}{encode_longitude(record.longitude)}"
        f"{record.description or ''}"
    )


def _encode_event(record: EventRecord) -> str:
    return f"E{encode_time(record.time)}{record.code}{record.text or ''}"


def _encode_satellite(record: SatelliteRecord) -> str:
    ids = "".join(f"{satellite:02d}" for satellite in record.satellites)
    return f"F{encode_time(record.time)}{ids}"


def _encode_security(record: SecurityRecord) -> str:
    return f"G{record.digest}"


def _encode_header(record: HeaderRecord) -> str:
    # The colon is only written when the line had a friendly name.
    if record.friendly_name is None:
        return f"H{record.source}{record.mnemonic}{record.value}"
    return f"H{record.source}{record.mnemonic}{record.friendly_name}:{record.value}"


def _encode_extension_definition(
    letter: str, record: FixExtensionRecord | KExtensionRecord
) -> str:
    descriptors = "".join(encode_descriptor(d) for d in record.descriptors)
    return f"{letter}{record.declared_count:02d}{descriptors}"


def _encode_extension_data(
    record: ExtensionDataRecord, schema: "ExtensionSchema | None"
) -> str:
    base = f"K{encode_time(record.time)}"
    return _place_extensions(base, record.extensions, record.trailing_data, schema)


def _encode_comment(record: CommentRecord) -> str:
    return f"L{record.text}"


def encode_record(record: Record, schema: "ExtensionSchema | None" = None) -> str:
    """Encode a record as one IGC line, without line terminator.

    Args:
        record: Any decoded (or hand-built) record.
        schema: For B and K records with extension values, the schema whose
            columns the values belong to. Ignored for other kinds.

    Raises:
        ValueError: If a value cannot be written in its fixed width, or the
            extension values do not match ``schema``.
        TypeError: If ``record`` is not a record.
    """
    if isinstance(record, FixRecord):
        return _encode_fix(record, schema)
    if isinstance(record, ExtensionDataRecord):
        return _encode_extension_data(record, schema)
    if isinstance(record, FixExtensionRecord):
        return _encode_extension_definition("I", record)
    if isinstance(record, KExtensionRecord):
        return _encode_extension_definition("J", record)

    encoder = _ENCODERS.get(type(record))
    if encoder is None:
        raise TypeError(f"cannot encode {type(record).__name__}")
    return encoder(record)


_ENCODERS = {
    ManufacturerRecord: _encode_manufacturer,
    TaskDeclarationRecord: _encode_task_declaration,
    TaskTurnpointRecord: _encode_task_turnpoint,
    EventRecord: _encode_event,
    SatelliteRecord: _encode_satellite,
    SecurityRecord: _encode_security,
    HeaderRecord: _encode_header,
    CommentRecord: _encode_comment,
}
