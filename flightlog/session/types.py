"""Session data types for decoded log lines."""

from dataclasses import dataclass

from flightlog.igc.errors import DecodeError
from flightlog.igc.types import Record


@dataclass(frozen=True)
class DecodedLine:
    """The outcome of decoding one line of a log.

    ``LogDecoder`` emits one ``DecodedLine`` per input line, in order.

    Attributes:
        line_number: 1-based position of the line in the input.
        line: The line with any trailing CR/LF removed.
        result: The decoded record, or the error that stopped decoding.

    Example:
        >>> decoded = LogDecoder().decode("B1101355206343N00006198WA0058800558")
        >>> decoded.ok
        True
        >>> decoded.record.pressure_altitude
        588
    """

    line_number: int
    line: str
    result: Record | DecodeError

    @property
    def ok(self) -> bool:
        return not isinstance(self.result, DecodeError)

    @property
    def record(self) -> Record | None:
        return None if isinstance(self.result, DecodeError) else self.result

    @property
    def error(self) -> DecodeError | None:
        return self.result if isinstance(self.result, DecodeError) else None

    @property
    def trailing_data(self) -> str:
        """Unconsumed characters of a B or K line, empty for other lines."""
        return getattr(self.result, "trailing_data", "")
