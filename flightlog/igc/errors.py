"""Decode failures for IGC records.

Every failure a decoder can report is one of the frozen dataclasses below.
Decoders return these values instead of raising them, so a caller walking a
large log can decide per line whether to abort or skip:

    result = decode_line(line)
    if isinstance(result, DecodeError):
        print(result.message)

Each error keeps the offending line (and, where one exists, the offending
slice) so it can be reported without going back to the source file.

Field decoders signal problems with ``FieldError``, an ordinary
``ValueError`` subclass. Record decoders catch it at their entry point and
turn it into an ``InvalidField`` value.
"""

import abc
from dataclasses import dataclass

from flightlog.igc.types import RecordKind


class FieldError(ValueError):
    """A single column range failed to decode.

    Raised by the functions in ``flightlog.igc.fields`` and never escapes a
    record decoder.

    Args:
        field_name: Role of the column range (e.g. ``"latitude"``).
        raw_slice: The characters that were decoded.
        reason: Which constraint failed (e.g. ``"out of range"``).
    """

    def __init__(self, field_name: str, raw_slice: str, reason: str) -> None:
        super().__init__(f"{field_name} {raw_slice!r}: {reason}")
        self.field_name = field_name
        self.raw_slice = raw_slice
        self.reason = reason


class DecodeError(abc.ABC):
    """Common base of all decode error values."""

    __slots__ = ()

    @property
    @abc.abstractmethod
    def message(self) -> str:
        """Human-readable description of the failure."""


@dataclass(frozen=True)
class UnrecognizedRecordType(DecodeError):
    """The leading character does not name any known record kind.

    ``char`` is empty when the line itself was empty.
    """

    char: str
    line: str

    @property
    def message(self) -> str:
        if not self.char:
            return "empty line"
        return f"unrecognized record type {self.char!r}"


@dataclass(frozen=True)
class WrongLength(DecodeError):
    """The line is shorter than the fixed portion of its record kind."""

    record_kind: RecordKind
    expected: int
    actual: int
    line: str

    @property
    def message(self) -> str:
        return (
            f"{self.record_kind.value} record needs at least {self.expected} "
            f"characters, got {self.actual}"
        )


@dataclass(frozen=True)
class InvalidField(DecodeError):
    """A column range does not decode as its declared type or range."""

    record_kind: RecordKind
    field_name: str
    raw_slice: str
    reason: str
    line: str

    @property
    def message(self) -> str:
        return (
            f"{self.record_kind.value} record field {self.field_name} "
            f"{self.raw_slice!r}: {self.reason}"
        )


@dataclass(frozen=True)
class InvalidChecksum(DecodeError):
    """A security record payload is not a well-formed hex digest."""

    raw_slice: str
    line: str

    @property
    def message(self) -> str:
        return f"malformed security digest {self.raw_slice!r}"


@dataclass(frozen=True)
class SchemaMismatch(DecodeError):
    """An I or J record declares more descriptors than it carries."""

    record_kind: RecordKind
    declared_count: int
    parsed_count: int
    line: str

    @property
    def message(self) -> str:
        return (
            f"{self.record_kind.value} record declares {self.declared_count} "
            f"extensions but holds {self.parsed_count}"
        )


def invalid_field(
    error: FieldError, record_kind: RecordKind, line: str
) -> InvalidField:
    """Convert a raised ``FieldError`` into its returned ``InvalidField`` value."""
    return InvalidField(
        record_kind=record_kind,
        field_name=error.field_name,
        raw_slice=error.raw_slice,
        reason=error.reason,
        line=line,
    )
