"""Sample log lines for server tests."""

FIX_LINE = "B1101355206343N00006198WA0058800558"


def make_log(extensions: bool) -> list[str]:
    if not extensions:
        return ["ALXNGIIFLIGHT:1", "HFDTE150718", FIX_LINE]
    return ["ALXNGIIFLIGHT:1", "I013638FXA", FIX_LINE + "012"]
