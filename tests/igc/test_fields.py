"""Tests for IGC field decoding."""

import pytest

from flightlog.igc.errors import FieldError
from flightlog.igc.fields import (
    decode_altitude,
    decode_date,
    decode_fix_validity,
    decode_latitude,
    decode_longitude,
    decode_number,
    decode_satellite_ids,
    decode_time,
    require_ascii,
)
from flightlog.igc.types import Compass, Date, FixValidity, Latitude, Longitude, Time


class TestRequireAscii:
    def test_ascii_returned(self):
        assert require_ascii("GII", "unique_id") == "GII"
        assert require_ascii("", "unique_id") == ""

    def test_non_ascii(self):
        with pytest.raises(FieldError) as exc_info:
            require_ascii("GéI", "unique_id")
        assert exc_info.value.field_name == "unique_id"
        assert exc_info.value.reason == "non-ASCII characters"


class TestDecodeNumber:
    def test_zero_padded(self):
        assert decode_number("0042", "task_id") == 42

    def test_below_minimum(self):
        with pytest.raises(FieldError) as exc_info:
            decode_number("00", "extension_1.start", minimum=1)
        assert exc_info.value.field_name == "extension_1.start"
        assert exc_info.value.reason == "out of range"

    def test_above_maximum(self):
        with pytest.raises(FieldError):
            decode_number("99", "count", maximum=50)

    @pytest.mark.parametrize("raw", ["", "4a", " 4", "-1", "٣"])
    def test_non_digits(self, raw):
        with pytest.raises(FieldError) as exc_info:
            decode_number(raw, "count")
        assert exc_info.value.reason == "expected digits"


class TestDecodeTime:
    def test_valid(self):
        assert decode_time("110135") == Time(hours=11, minutes=1, seconds=35)

    def test_midnight_and_last_second(self):
        assert decode_time("000000").seconds_since_midnight() == 0
        assert decode_time("235959").seconds_since_midnight() == 86399

    @pytest.mark.parametrize("raw", ["240000", "126000", "120060"])
    def test_out_of_range(self, raw):
        with pytest.raises(FieldError):
            decode_time(raw)

    def test_wrong_length(self):
        with pytest.raises(FieldError) as exc_info:
            decode_time("11013")
        assert exc_info.value.reason == "expected 6 characters"

    def test_field_name_in_error(self):
        with pytest.raises(FieldError) as exc_info:
            decode_time("1101x5", "declaration_time")
        assert exc_info.value.field_name == "declaration_time"
        assert exc_info.value.raw_slice == "1101x5"


class TestDecodeDate:
    def test_valid(self):
        assert decode_date("230718") == Date(day=23, month=7, year=18)

    @pytest.mark.parametrize("raw", ["000718", "320718", "230018", "231318"])
    def test_out_of_range(self, raw):
        with pytest.raises(FieldError):
            decode_date(raw)

    def test_to_date(self):
        assert decode_date("230718").to_date().isoformat() == "2018-07-23"
        assert decode_date("230798").to_date(century=1900).year == 1998


class TestDecodeLatitude:
    def test_north(self):
        assert decode_latitude("5206343N") == Latitude(52, 6343, Compass.NORTH)

    def test_south_is_negative(self):
        latitude = decode_latitude("3356123S")
        assert latitude.hemisphere is Compass.SOUTH
        assert latitude.minutes == 56
        assert latitude.to_decimal_degrees() == pytest.approx(-33.93538333)

    def test_pole(self):
        assert decode_latitude("9000000N") == Latitude(90, 0, Compass.NORTH)

    def test_past_pole(self):
        with pytest.raises(FieldError) as exc_info:
            decode_latitude("9000001N")
        assert exc_info.value.reason == "out of range"

    def test_minutes_out_of_range(self):
        with pytest.raises(FieldError):
            decode_latitude("5260000N")

    @pytest.mark.parametrize("raw", ["5206343E", "5206343X"])
    def test_invalid_hemisphere(self, raw):
        with pytest.raises(FieldError):
            decode_latitude(raw)

    def test_wrong_length(self):
        with pytest.raises(FieldError):
            decode_latitude("520634N")


class TestDecodeLongitude:
    def test_west(self):
        longitude = decode_longitude("00006198W")
        assert longitude == Longitude(0, 6198, Compass.WEST)
        assert longitude.to_decimal_degrees() == pytest.approx(-0.1033)

    def test_antimeridian(self):
        assert decode_longitude("18000000E").degrees == 180

    def test_past_antimeridian(self):
        with pytest.raises(FieldError):
            decode_longitude("18000001E")

    def test_invalid_hemisphere(self):
        with pytest.raises(FieldError):
            decode_longitude("00006198N")


class TestDecodeAltitude:
    def test_positive(self):
        assert decode_altitude("00588", "pressure_altitude") == 588

    def test_negative(self):
        assert decode_altitude("-0116", "gnss_altitude") == -116

    @pytest.mark.parametrize("raw", ["0058", "00-58", "--116", "0058a"])
    def test_malformed(self, raw):
        with pytest.raises(FieldError):
            decode_altitude(raw, "gnss_altitude")


class TestDecodeFixValidity:
    def test_flags(self):
        assert decode_fix_validity("A") is FixValidity.VALID
        assert decode_fix_validity("V") is FixValidity.NAV_WARNING

    def test_unknown_flag(self):
        with pytest.raises(FieldError):
            decode_fix_validity("X")


class TestDecodeSatelliteIds:
    def test_pairs(self):
        assert decode_satellite_ids("040713") == (4, 7, 13)

    def test_empty(self):
        assert decode_satellite_ids("") == ()

    def test_odd_length(self):
        with pytest.raises(FieldError):
            decode_satellite_ids("04071")
