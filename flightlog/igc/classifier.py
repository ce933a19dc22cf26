"""Record classification and the single-line decode entry point.

The first character of an IGC line names its record kind. ``decode_line``
looks that character up in a fixed table and hands the whole line to the
matching decoder. Length checks are left to each decoder so that errors can
name the record kind and the length it needs.

The only state involved is the extension schema for B and K lines, which the
caller passes in. Nothing is kept between calls, so ``decode_line`` can be
used from any number of threads or processes at once.
"""

from collections.abc import Callable

from flightlog.igc.errors import DecodeError, UnrecognizedRecordType
from flightlog.igc.extension import (
    ExtensionSchema,
    decode_fix_extension,
    decode_k_extension,
)
from flightlog.igc.extension_data import decode_extension_data
from flightlog.igc.fix import decode_fix
from flightlog.igc.records import (
    decode_comment,
    decode_event,
    decode_header,
    decode_manufacturer,
    decode_satellite,
    decode_security,
    decode_task,
)
from flightlog.igc.types import Record, RecordKind

_LINE_TERMINATORS = "\r\n"

_DECODERS: dict[RecordKind, Callable[[str], Record | DecodeError]] = {
    RecordKind.MANUFACTURER: decode_manufacturer,
    RecordKind.TASK: decode_task,
    RecordKind.EVENT: decode_event,
    RecordKind.SATELLITE: decode_satellite,
    RecordKind.SECURITY: decode_security,
    RecordKind.HEADER: decode_header,
    RecordKind.FIX_EXTENSION: decode_fix_extension,
    RecordKind.K_EXTENSION: decode_k_extension,
    RecordKind.COMMENT: decode_comment,
}


def classify(line: str) -> RecordKind | UnrecognizedRecordType:
    """Return the record kind named by the first character of ``line``.

    Example:
        >>> classify("B1101355206343N00006198WA0058800558")
        <RecordKind.FIX: 'B'>
        >>> classify("Z12345")
        UnrecognizedRecordType(char='Z', line='Z12345')
    """
    leading = line[:1]
    try:
        return RecordKind(leading)
    except ValueError:
        return UnrecognizedRecordType(char=leading, line=line)


def decode_line(
    line: str,
    *,
    fix_schema: ExtensionSchema | None = None,
    data_schema: ExtensionSchema | None = None,
) -> Record | DecodeError:
    """Decode one IGC line.

    This is the main entry point for record decoding. It performs:
    1. Removal of a trailing CR/LF (other whitespace is kept, since it can be
       part of H and L record text)
    2. Classification by the first character
    3. Decoding by the record's own decoder

    Args:
        line: One line of an IGC file.
        fix_schema: Schema from the most recent I record, used for B lines.
        data_schema: Schema from the most recent J record, used for K lines.

    Returns:
        The decoded record, or the first ``DecodeError`` found. A line is
        never partially decoded.

    Raises:
        ValueError: If a schema is passed for the wrong record kind (e.g. a
            J-derived schema as ``fix_schema``).

    Example:
        >>> decode_line("LXCSflight logged by XCSoar")
        CommentRecord(text='XCSflight logged by XCSoar')
    """
    line = line.rstrip(_LINE_TERMINATORS)

    kind = classify(line)
    if isinstance(kind, UnrecognizedRecordType):
        return kind

    return decode_record(kind, line, fix_schema=fix_schema, data_schema=data_schema)


def decode_record(
    kind: RecordKind,
    line: str,
    *,
    fix_schema: ExtensionSchema | None = None,
    data_schema: ExtensionSchema | None = None,
) -> Record | DecodeError:
    """Decode a line already classified as ``kind``.

    For callers that need the record kind themselves, so that a line is
    classified only once. ``line`` must not end with CR/LF.
    """
    if kind is RecordKind.FIX:
        return decode_fix(line, fix_schema)
    if kind is RecordKind.EXTENSION_DATA:
        return decode_extension_data(line, data_schema)
    return _DECODERS[kind](line)
