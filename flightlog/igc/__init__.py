"""IGC flight recorder record decoding."""

from flightlog.igc.checksum import is_well_formed_digest
from flightlog.igc.classifier import classify, decode_line, decode_record
from flightlog.igc.encoder import encode_record
from flightlog.igc.errors import (
    DecodeError,
    InvalidChecksum,
    InvalidField,
    SchemaMismatch,
    UnrecognizedRecordType,
    WrongLength,
)
from flightlog.igc.extension import ExtensionSchema
from flightlog.igc.manufacturers import Manufacturer
from flightlog.igc.types import (
    CommentRecord,
    Compass,
    DataSource,
    Date,
    EventRecord,
    ExtensionDataRecord,
    ExtensionDescriptor,
    ExtensionValues,
    FixExtensionRecord,
    FixRecord,
    FixValidity,
    HeaderRecord,
    KExtensionRecord,
    Latitude,
    Longitude,
    ManufacturerRecord,
    Record,
    RecordKind,
    SatelliteRecord,
    SecurityRecord,
    TaskDeclarationRecord,
    TaskTurnpointRecord,
    Time,
)

__all__ = [
    "CommentRecord",
    "Compass",
    "DataSource",
    "Date",
    "DecodeError",
    "EventRecord",
    "ExtensionDataRecord",
    "ExtensionDescriptor",
    "ExtensionSchema",
    "ExtensionValues",
    "FixExtensionRecord",
    "FixRecord",
    "FixValidity",
    "HeaderRecord",
    "InvalidChecksum",
    "InvalidField",
    "KExtensionRecord",
    "Latitude",
    "Longitude",
    "Manufacturer",
    "ManufacturerRecord",
    "Record",
    "RecordKind",
    "SatelliteRecord",
    "SchemaMismatch",
    "SecurityRecord",
    "TaskDeclarationRecord",
    "TaskTurnpointRecord",
    "Time",
    "UnrecognizedRecordType",
    "WrongLength",
    "classify",
    "decode_line",
    "decode_record",
    "encode_record",
    "is_well_formed_digest",
]
