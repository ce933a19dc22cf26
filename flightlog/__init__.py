"""Flightlog package for decoding IGC flight recorder logs."""

from flightlog.igc import (
    DecodeError,
    ExtensionSchema,
    Record,
    RecordKind,
    classify,
    decode_line,
    encode_record,
)
from flightlog.session import DecodedLine, LogDecodeError, LogDecoder, decode_lines

__all__ = [
    "DecodeError",
    "DecodedLine",
    "ExtensionSchema",
    "LogDecodeError",
    "LogDecoder",
    "Record",
    "RecordKind",
    "classify",
    "decode_line",
    "decode_lines",
    "encode_record",
]
