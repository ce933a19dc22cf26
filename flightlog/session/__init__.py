"""Session module for decoding whole IGC logs line by line."""

from flightlog.session.decoder import LogDecodeError, LogDecoder, decode_lines
from flightlog.session.types import DecodedLine

__all__ = ["DecodedLine", "LogDecodeError", "LogDecoder", "decode_lines"]
