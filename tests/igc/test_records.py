"""Tests for the A, C, E, F, G, H and L record decoders."""

from flightlog.igc import (
    CommentRecord,
    Compass,
    DataSource,
    Date,
    EventRecord,
    HeaderRecord,
    InvalidChecksum,
    InvalidField,
    Manufacturer,
    ManufacturerRecord,
    RecordKind,
    SatelliteRecord,
    SecurityRecord,
    TaskDeclarationRecord,
    TaskTurnpointRecord,
    Time,
    WrongLength,
)
from flightlog.igc.records import (
    decode_comment,
    decode_event,
    decode_header,
    decode_manufacturer,
    decode_satellite,
    decode_security,
    decode_task,
)


class TestDecodeManufacturer:
    def test_with_id_extension(self):
        result = decode_manufacturer("ALXNGIIFLIGHT:1")
        assert result == ManufacturerRecord("LXN", "GII", "FLIGHT:1")
        assert result.manufacturer is Manufacturer.LX_NAVIGATION

    def test_without_id_extension(self):
        result = decode_manufacturer("AXCS123")
        assert result.id_extension is None
        assert result.manufacturer is None

    def test_too_short(self):
        assert decode_manufacturer("ALXN12") == WrongLength(
            RecordKind.MANUFACTURER, 7, 6, "ALXN12"
        )

    def test_invalid_code(self):
        result = decode_manufacturer("AL-N123")
        assert isinstance(result, InvalidField)
        assert result.field_name == "manufacturer_code"

    def test_non_ascii_unique_id(self):
        result = decode_manufacturer("ALXN\u00e9\u00e9\u00e9")
        assert isinstance(result, InvalidField)
        assert result.field_name == "unique_id"
        assert result.reason == "non-ASCII characters"

    def test_non_ascii_id_extension_kept(self):
        result = decode_manufacturer("ALXNGIIVol \u00e0 voile")
        assert result.id_extension == "Vol \u00e0 voile"


class TestDecodeTask:
    def test_declaration(self):
        result = decode_task("C230718092044000000000204500K Triangle")
        assert isinstance(result, TaskDeclarationRecord)
        assert result.declaration_date == Date(23, 7, 18)
        assert result.declaration_time == Time(9, 20, 44)
        assert result.flight_date is None
        assert result.task_id == 2
        assert result.turnpoint_count == 4
        assert result.description == "500K Triangle"

    def test_declaration_with_flight_date(self):
        result = decode_task("C2307180920442407180001" + "03")
        assert result.flight_date == Date(24, 7, 18)
        assert result.description is None

    def test_turnpoint(self):
        result = decode_task("C5156040N00038120WLBZ Leighton Buzzard")
        assert isinstance(result, TaskTurnpointRecord)
        assert result.latitude.degrees == 51
        assert result.latitude.minute_thousandths == 56040
        assert result.longitude.hemisphere is Compass.WEST
        assert result.description == "LBZ Leighton Buzzard"

    def test_turnpoint_without_name(self):
        result = decode_task("C5156040S00038120E")
        assert result.latitude.hemisphere is Compass.SOUTH
        assert result.description is None

    def test_too_short_to_classify(self):
        assert decode_task("C515604") == WrongLength(RecordKind.TASK, 18, 7, "C515604")

    def test_short_turnpoint(self):
        result = decode_task("C5156040N0003812")
        assert result == WrongLength(RecordKind.TASK, 18, 16, "C5156040N0003812")

    def test_short_declaration(self):
        result = decode_task("C23071809204400000000")
        assert isinstance(result, WrongLength)
        assert result.expected == 25

    def test_invalid_declaration_date(self):
        result = decode_task("C330718092044000000000204")
        assert isinstance(result, InvalidField)
        assert result.field_name == "declaration_date"

    def test_both_layouts_report_task(self):
        assert decode_task("C5156040N00038120W").kind is RecordKind.TASK
        assert decode_task("C230718092044000000000204").kind is RecordKind.TASK


class TestDecodeEvent:
    def test_without_text(self):
        assert decode_event("E120515PEV") == EventRecord(Time(12, 5, 15), "PEV", None)

    def test_with_text(self):
        assert decode_event("E120515ATSQNH 1013").text == "QNH 1013"

    def test_too_short(self):
        assert isinstance(decode_event("E120515PE"), WrongLength)

    def test_invalid_time(self):
        result = decode_event("E126015PEV")
        assert isinstance(result, InvalidField)
        assert result.field_name == "time"


class TestDecodeSatellite:
    def test_constellation(self):
        assert decode_satellite("F095212040713") == SatelliteRecord(
            Time(9, 52, 12), (4, 7, 13)
        )

    def test_no_satellites(self):
        assert decode_satellite("F095212").satellites == ()

    def test_odd_satellite_digits(self):
        result = decode_satellite("F09521204071")
        assert isinstance(result, InvalidField)
        assert result.field_name == "satellites"


class TestDecodeSecurity:
    def test_hex_digest(self):
        assert decode_security("G6C3F0B5A") == SecurityRecord("6C3F0B5A")

    def test_bare_g(self):
        assert decode_security("G") == WrongLength(RecordKind.SECURITY, 2, 1, "G")

    def test_non_hex(self):
        assert decode_security("G6C3F0B5Z") == InvalidChecksum("6C3F0B5Z", "G6C3F0B5Z")


class TestDecodeHeader:
    def test_friendly_name_and_value(self):
        result = decode_header("HFGIDGLIDERID:D-KOOL")
        assert result == HeaderRecord("F", "GID", "GLIDERID", "D-KOOL")
        assert result.data_source is DataSource.FLIGHT_RECORDER

    def test_value_containing_colons(self):
        result = decode_header("HFTZNTIMEZONE:UTC+01:00")
        assert result.friendly_name == "TIMEZONE"
        assert result.value == "UTC+01:00"

    def test_without_colon(self):
        result = decode_header("HPPLTJohn Doe")
        assert result.friendly_name is None
        assert result.value == "John Doe"
        assert result.data_source is DataSource.PILOT

    def test_unknown_source_kept(self):
        result = decode_header("HXFTYFRTYPE:Unknown")
        assert result.source == "X"
        assert result.data_source is None

    def test_short_date_form(self):
        result = decode_header("HFDTE150718")
        assert result.date == Date(15, 7, 18)
        assert result.friendly_name is None

    def test_long_date_form(self):
        result = decode_header("HFDTEDATE:150718,01")
        assert result.date == Date(15, 7, 18)
        assert result.value == "150718,01"

    def test_invalid_date(self):
        result = decode_header("HFDTE451318")
        assert isinstance(result, InvalidField)
        assert result.record_kind is RecordKind.HEADER
        assert result.field_name == "date"

    def test_too_short(self):
        assert decode_header("HFDT") == WrongLength(RecordKind.HEADER, 5, 4, "HFDT")

    def test_non_ascii_mnemonic(self):
        result = decode_header("HFPéLPILOT:John Doe")
        assert isinstance(result, InvalidField)
        assert result.field_name == "source_and_mnemonic"
        assert result.raw_slice == "FPéL"

    def test_non_ascii_value_kept(self):
        result = decode_header("HFPLTPILOTINCHARGE:José Martín")
        assert result.mnemonic == "PLT"
        assert result.value == "José Martín"


class TestDecodeComment:
    def test_text(self):
        assert decode_comment("LXCSflight logged by XCSoar") == CommentRecord(
            "XCSflight logged by XCSoar"
        )

    def test_empty_comment(self):
        assert decode_comment("L") == CommentRecord("")
