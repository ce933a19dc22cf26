"""Tests for manufacturer code lookup."""

import pytest

from flightlog.igc import Manufacturer


class TestManufacturer:
    def test_from_code(self):
        assert Manufacturer.from_code("LXV") is Manufacturer.LXNAV
        assert Manufacturer.from_code("XCS") is None

    @pytest.mark.parametrize(
        "character, manufacturer",
        [
            ("L", Manufacturer.LX_NAVIGATION),
            ("V", Manufacturer.LXNAV),
            ("n", Manufacturer.FLYTECH),
            ("N", Manufacturer.NEW_TECHNOLOGIES),
        ],
    )
    def test_from_single_char(self, character, manufacturer):
        assert Manufacturer.from_single_char(character) is manufacturer
        assert manufacturer.single_char == character

    def test_unknown_single_char(self):
        assert Manufacturer.from_single_char("?") is None

    def test_newer_manufacturer_has_no_single_char(self):
        assert Manufacturer.NAVITER.single_char is None

    def test_single_chars_unique(self):
        characters = [m.single_char for m in Manufacturer if m.single_char is not None]
        assert len(characters) == len(set(characters))
