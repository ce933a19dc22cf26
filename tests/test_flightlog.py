"""Tests for the top-level flightlog API."""

from flightlog import (
    DecodeError,
    LogDecoder,
    RecordKind,
    classify,
    decode_line,
    decode_lines,
    encode_record,
)


class TestPublicAPI:
    """Worked examples through the package entry points."""

    def test_fix_example(self):
        fix = decode_line("B1101355206343N00006198WA0058800558")
        assert fix.kind is RecordKind.FIX
        assert (fix.latitude.degrees, fix.latitude.minute_thousandths) == (52, 6343)
        assert (fix.longitude.degrees, fix.longitude.minute_thousandths) == (0, 6198)
        assert (fix.pressure_altitude, fix.gnss_altitude) == (588, 558)
        assert fix.extensions == {}

    def test_extension_example(self):
        record = decode_line("I033638FXA3941ENL4246TAS")
        assert [(d.start, d.length) for d in record.descriptors] == [(36, 3), (39, 3), (42, 5)]

    def test_unrecognized_example(self):
        result = decode_line("Z12345")
        assert isinstance(result, DecodeError)
        assert result.char == "Z"

    def test_wrong_length_example(self):
        result = decode_line("B110135520634" + "3N00006198WA005880055")
        assert isinstance(result, DecodeError)
        assert (result.expected, result.actual) == (35, 34)

    def test_classify(self):
        assert classify("HFDTE150718") is RecordKind.HEADER

    def test_round_trip(self):
        for line in ["AXCS123", "LXCSrecorded", "B1101355206343N00006198WA0058800558"]:
            assert encode_record(decode_line(line)) == line

    def test_session(self):
        decoded = list(decode_lines(["I013638FXA", "B1101355206343N00006198WA0058800558012"]))
        assert decoded[1].record.extensions == {"FXA": "012"}
        assert LogDecoder().line_number == 0
