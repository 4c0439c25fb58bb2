import pytest
from certno.codec import CertificateNumber, format_compact, parse_compact
from certno.config import CompactRules, OfficeCode


def test_all_fields():
    r = parse_compact("WBMSDBRWV5C20252572026599")
    assert r == CertificateNumber(
        book_number="V",
        volume_number="5",
        volume_letter="C",
        volume_year="2025",
        serial_number="257",
        serial_year="2026",
        page_number="599",
    )


def test_serial_year_without_volume_year():
    r = parse_compact("WBMSDBRWI1C16202521")
    assert r.volume_year == ""
    assert (r.serial_number, r.serial_year, r.page_number) == ("16", "2025", "21")


def test_leading_year_is_serial_when_nothing_follows_it():
    # "2020" cannot be a volume year: "251" alone has no serial year in it.
    r = parse_compact("WBMSDBRWI1C2020251")
    assert r.volume_year == ""
    assert (r.serial_number, r.serial_year, r.page_number) == ("20", "2025", "1")


def test_multi_letter_book_and_volume_letter():
    r = parse_compact("WBMSDBRWXLIV12AB2024320251")
    assert r.book_number == "XLIV"
    assert r.volume_number == "12"
    assert r.volume_letter == "AB"
    assert r.volume_year == "2024"
    assert (r.serial_number, r.serial_year, r.page_number) == ("3", "2025", "1")


@pytest.mark.parametrize(
    "value",
    [
        None,
        "",
        "WB-MSD-BRW-I-1-C-16-21",    # legacy form
        "XXMSDBRWI1C16202521",       # wrong prefix
        "WBMSDBRWI1C1621",           # no serial year: serial and page inseparable
        "WBMSDBRWIIII1C16202521",    # not a book numeral
        "WBMSDBRWI116202521",        # no volume letter
        "WBMSDBRWI1C",               # no digits after the letter
        "WBMSDBRWI1C162025A21",      # letters in the digit tail
    ],
)
def test_unrecognized_gives_defaults(value):
    assert parse_compact(value).is_default()


def test_year_prefixes_are_configurable():
    rules = CompactRules(year_prefixes=["18"])
    r = parse_compact("WBMSDBRWI1C16185021", rules=rules)
    assert (r.serial_number, r.serial_year, r.page_number) == ("16", "1850", "21")
    assert parse_compact("WBMSDBRWI1C16202521", rules=rules).is_default()


def test_custom_office():
    office = OfficeCode(office="KND")
    assert parse_compact("WBMSDKNDI1C16202521", office).serial_year == "2025"
    assert parse_compact("WBMSDBRWI1C16202521", office).is_default()


def test_two_possible_serial_years_give_defaults():
    # serial 120 / 2025 / page 5 reads just as well as serial 1 / 2020 / page 255
    value = format_compact(
        CertificateNumber(
            volume_number="1",
            volume_letter="C",
            serial_number="120",
            serial_year="2025",
            page_number="5",
        )
    )
    assert value == "WBMSDBRWI1C12020255"
    assert parse_compact(value).is_default()


def test_ambiguous_tail_after_volume_year_gives_defaults():
    assert parse_compact("WBMSDBRWI1C202412020255").is_default()


def test_leading_year_is_preferred_as_volume_year():
    # Without the volume year "2025257" / 2026 / 599 would also fit.
    r = parse_compact("WBMSDBRWV5C20252572026599")
    assert r.volume_year == "2025"
    assert r.serial_number == "257"
