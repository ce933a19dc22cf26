"""Flight recorder manufacturer codes.

The A record names the manufacturer with a three-character code. Older
short file names (``YMDCXXXF.IGC``) use a single character instead, so both
forms are mapped here.
"""

import enum


class Manufacturer(enum.Enum):
    """Registered manufacturers, valued by their three-character code."""

    AIRCOTEC = "ACT"
    CAMBRIDGE_AERO_INSTRUMENTS = "CAM"
    CLEARNAV_INSTRUMENTS = "CNI"
    DATA_SWAN = "DSX"
    EW_AVIONICS = "EWA"
    FILSER = "FIL"
    FLARM = "FLA"
    FLYTECH = "FLY"
    GARRECHT = "GCS"
    IMI_GLIDING_EQUIPMENT = "IMI"
    LOGSTREAM = "LGS"
    LX_NAVIGATION = "LXN"
    LXNAV = "LXV"
    NAVITER = "NAV"
    NEW_TECHNOLOGIES = "NTE"
    NIELSEN_KELLERMAN = "NKL"
    PESCHGES = "PES"
    PRESS_FINISH_ELECTRONICS = "PFE"
    PRINT_TECHNIK = "PRT"
    SCHEFFEL = "SCH"
    STREAMLINE_DATA_INSTRUMENTS = "SDI"
    TRIADIS_ENGINEERING = "TRI"
    ZANDER = "ZAN"

    @classmethod
    def from_code(cls, code: str) -> "Manufacturer | None":
        """Look up a three-character code, returning None if unlisted."""
        try:
            return cls(code)
        except ValueError:
            return None

    @classmethod
    def from_single_char(cls, character: str) -> "Manufacturer | None":
        """Look up a legacy single-character code, returning None if unlisted."""
        return _BY_SINGLE_CHAR.get(character)

    @property
    def single_char(self) -> str | None:
        """Legacy single-character code, or None for newer manufacturers."""
        return _SINGLE_CHARS.get(self)


# Manufacturers registered after short file names were retired have no entry.
_SINGLE_CHARS: dict[Manufacturer, str] = {
    Manufacturer.AIRCOTEC: "I",
    Manufacturer.CAMBRIDGE_AERO_INSTRUMENTS: "C",
    Manufacturer.DATA_SWAN: "D",
    Manufacturer.EW_AVIONICS: "E",
    Manufacturer.FILSER: "F",
    Manufacturer.FLARM: "G",
    Manufacturer.FLYTECH: "n",
    Manufacturer.GARRECHT: "A",
    Manufacturer.IMI_GLIDING_EQUIPMENT: "M",
    Manufacturer.LX_NAVIGATION: "L",
    Manufacturer.LXNAV: "V",
    Manufacturer.NEW_TECHNOLOGIES: "N",
    Manufacturer.NIELSEN_KELLERMAN: "K",
    Manufacturer.PESCHGES: "P",
    Manufacturer.PRINT_TECHNIK: "R",
    Manufacturer.SCHEFFEL: "H",
    Manufacturer.STREAMLINE_DATA_INSTRUMENTS: "S",
    Manufacturer.TRIADIS_ENGINEERING: "T",
    Manufacturer.ZANDER: "Z",
}

_BY_SINGLE_CHAR: dict[str, Manufacturer] = {
    character: manufacturer for manufacturer, character in _SINGLE_CHARS.items()
}
