"""
Matcher for the compact certificate-number form.

    WBMSDBRW{book}{volume}{letter}[volume year]{serial}[serial year]{page}

e.g. "WBMSDBRWV5C20252572026599" -> book V, volume 5, letter C,
volume year 2025, serial 257, serial year 2026, page 599.

There are no separators, so field boundaries come from character classes:
roman symbols, then digits, then letters, then one digit tail. The digit tail
can only be split where a plausible year sits between the serial and the
page. Two rules decide the split:

- a leading plausible year is the volume year whenever the digits after it
  can still be split; only otherwise is the whole tail read without one;
- the serial/year/page split must be unique. No candidate, or more than one,
  gives the default record rather than a guess.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

from ..books import from_roman
from ..config import DEFAULT_OFFICE, CompactRules, OfficeCode
from .record import CertificateNumber
from .validators import is_plausible_year

_BODY = re.compile(
    r"(?P<book>[IVXL]+)(?P<volume>[0-9]+)(?P<letter>[A-Za-z]+)(?P<tail>[0-9]+)"
)


def _serial_splits(digits: str, prefixes: Sequence[str]) -> List[Tuple[str, str, str]]:
    """
    Every way to read "{serial}{serial year}{page}": a plausible year with at
    least one digit on each side.
    """
    return [
        (digits[:i], digits[i : i + 4], digits[i + 4 :])
        for i in range(1, len(digits) - 4)
        if is_plausible_year(digits[i : i + 4], prefixes)
    ]


def parse_compact(
    value: Optional[str],
    office: OfficeCode = DEFAULT_OFFICE,
    rules: Optional[CompactRules] = None,
) -> CertificateNumber:
    """
    Parse a compact (separator-free) certificate number.

    Never raises. Tails with no serial year, or with more than one place a
    serial year could sit, give the default record.
    """
    if not value:
        return CertificateNumber.default()

    rules = rules or CompactRules()
    prefix = office.compact_prefix
    if not value.startswith(prefix):
        return CertificateNumber.default()

    m = _BODY.fullmatch(value[len(prefix):])
    if not m or from_roman(m.group("book")) is None:
        return CertificateNumber.default()

    tail = m.group("tail")
    volume_year = ""
    splits: List[Tuple[str, str, str]] = []
    if is_plausible_year(tail[:4], rules.year_prefixes):
        splits = _serial_splits(tail[4:], rules.year_prefixes)
        if splits:
            volume_year = tail[:4]
    if not splits:
        splits = _serial_splits(tail, rules.year_prefixes)
    if len(splits) != 1:
        return CertificateNumber.default()
    serial, serial_year, page = splits[0]

    return CertificateNumber(
        book_number=m.group("book"),
        volume_number=m.group("volume"),
        volume_letter=m.group("letter"),
        volume_year=volume_year,
        serial_number=serial,
        serial_year=serial_year,
        page_number=page,
    )
