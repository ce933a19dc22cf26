"""LogDecoder: decodes the lines of one flight log in order.

The record decoders in ``flightlog.igc`` are stateless; the extension schemas
that I and J records declare have to be carried from line to line by the
caller. ``LogDecoder`` is that caller for the common case of one log read
sequentially:

* an I record replaces the schema used for the following B records
* a J record replaces the schema used for the following K records
* an I or J line that fails to decode, or declares an unusable layout,
  clears the corresponding schema, so later lines are decoded without
  extensions rather than with a layout the log no longer claims

What happens on a bad line is a policy choice:

Skip and continue (default)::

    for decoded in LogDecoder().decode_all(lines):
        if decoded.ok:
            process(decoded.record)

Abort on the first error::

    try:
        records = [d.record for d in LogDecoder(strict=True).decode_all(lines)]
    except LogDecodeError as e:
        report(e.decoded)

A ``LogDecoder`` holds the state of one log. Use one instance per log when
decoding several logs concurrently.
"""

import logging
from collections.abc import Iterable, Iterator

from flightlog.igc.classifier import classify, decode_record
from flightlog.igc.errors import DecodeError, UnrecognizedRecordType
from flightlog.igc.extension import ExtensionSchema
from flightlog.igc.types import Record, RecordKind
from flightlog.session.types import DecodedLine

__all__ = ["LogDecodeError", "LogDecoder", "decode_lines"]

logger = logging.getLogger(__name__)


class LogDecodeError(Exception):
    """Raised by a strict ``LogDecoder`` on the first line that fails to decode.

    Attributes:
        decoded: The failing line, its number and its ``DecodeError``.
    """

    def __init__(self, decoded: DecodedLine) -> None:
        super().__init__(f"line {decoded.line_number}: {decoded.error.message}")
        self.decoded = decoded


class LogDecoder:
    """Decode the lines of one IGC log, threading I/J schemas through.

    Args:
        strict: Raise ``LogDecodeError`` on the first bad line instead of
            returning it (default: ``False``).
    """

    def __init__(self, strict: bool = False) -> None:
        self._strict = strict
        self._line_number = 0
        self._fix_schema: ExtensionSchema | None = None
        self._data_schema: ExtensionSchema | None = None

    @property
    def fix_schema(self) -> ExtensionSchema | None:
        """Schema from the most recent I record, or None."""
        return self._fix_schema

    @property
    def data_schema(self) -> ExtensionSchema | None:
        """Schema from the most recent J record, or None."""
        return self._data_schema

    @property
    def line_number(self) -> int:
        """Number of lines decoded so far."""
        return self._line_number

    def reset(self) -> None:
        """Forget the schemas and line count, ready for another log."""
        self._line_number = 0
        self._fix_schema = None
        self._data_schema = None

    def _replace_schema(
        self, kind: RecordKind, result: Record | DecodeError
    ) -> Record | DecodeError:
        """Install the schema declared by an I/J result, or clear it.

        Returns ``result`` unchanged, or the schema's ``DecodeError`` when the
        record decoded but its layout is unusable.
        """
        schema: ExtensionSchema | None = None
        if not isinstance(result, DecodeError):
            built = ExtensionSchema.from_record(result)
            if isinstance(built, DecodeError):
                result = built
            else:
                schema = built

        if kind is RecordKind.FIX_EXTENSION:
            self._fix_schema = schema
        else:
            self._data_schema = schema

        if schema is None:
            logger.warning(
                f"Line {self._line_number}: {kind.value} record rejected, "
                "decoding without extensions"
            )
        return result

    def decode(self, line: str) -> DecodedLine:
        """Decode the next line of the log.

        Raises:
            LogDecodeError: In strict mode, if the line fails to decode.
        """
        self._line_number += 1
        line = line.rstrip("\r\n")

        kind = classify(line)
        if isinstance(kind, UnrecognizedRecordType):
            result: Record | DecodeError = kind
        else:
            result = decode_record(
                kind,
                line,
                fix_schema=self._fix_schema,
                data_schema=self._data_schema,
            )
            if kind in (RecordKind.FIX_EXTENSION, RecordKind.K_EXTENSION):
                result = self._replace_schema(kind, result)

        decoded = DecodedLine(line_number=self._line_number, line=line, result=result)

        if decoded.error is not None:
            logger.debug(f"Line {decoded.line_number}: {decoded.error.message}")
            if self._strict:
                raise LogDecodeError(decoded)
            return decoded

        if decoded.trailing_data:
            logger.debug(
                f"Line {decoded.line_number}: "
                f"{len(decoded.trailing_data)} unused trailing characters"
            )
        missing = getattr(decoded.record, "missing_extensions", ())
        if missing:
            logger.debug(
                f"Line {decoded.line_number}: ends before {', '.join(missing)}"
            )

        return decoded

    def decode_all(self, lines: Iterable[str]) -> Iterator[DecodedLine]:
        """Decode lines lazily, yielding one ``DecodedLine`` per line."""
        for line in lines:
            yield self.decode(line)


def decode_lines(lines: Iterable[str], strict: bool = False) -> Iterator[DecodedLine]:
    """Decode the lines of one log with a fresh ``LogDecoder``.

    Example:
        >>> with open("flight.igc", encoding="latin-1") as file:
        ...     records = [d.record for d in decode_lines(file) if d.ok]
    """
    return LogDecoder(strict=strict).decode_all(lines)
