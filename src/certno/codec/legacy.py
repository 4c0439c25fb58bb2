"""
Parser for the legacy hyphenated certificate-number form.

    WB-MSD-BRW-{book}-{volume}-[letter]-[volume year]-{serial}-[serial year]-{page}

The optional parts mean the same string can have between 7 and 11+ segments,
so fields are assigned by position *and* by what each segment looks like:

- the segment after the office prefix is always the book numeral;
- of the rest, the first is the volume number and the last is the page;
- everything in between ("middle") is classified by count and content
  (letters -> volume letter, 4 digits -> a year).

Input comes from manual transcription of paper registers, so the parser never
raises. Anything it cannot place yields the default record.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from ..config import DEFAULT_OFFICE, OfficeCode
from .record import DEFAULT_BOOK, CertificateNumber
from .validators import is_letters, is_year

# Prefix (3) + book + volume + middle + page
_MIN_SEGMENTS = 7


def _classify_middle(middle: List[str]) -> Dict[str, str]:
    """
    Assign the segments between volume and page to fields.

    Rules are checked in order; the first match wins.
    """
    n = len(middle)

    if n == 1:
        return {"serial_number": middle[0]}

    if n == 2:
        p1, p2 = middle
        if is_letters(p1):
            return {"volume_letter": p1, "serial_number": p2}
        if is_year(p1):
            return {"volume_year": p1, "serial_number": p2}
        if is_year(p2):
            return {"serial_number": p1, "serial_year": p2}
        return {"volume_letter": p1, "serial_number": p2}

    if n == 3:
        p1, p2, p3 = middle
        if is_letters(p1):
            if is_year(p2):
                return {"volume_letter": p1, "volume_year": p2, "serial_number": p3}
            # p3 a year or not, the last two are serial and serial year.
            return {"volume_letter": p1, "serial_number": p2, "serial_year": p3}
        if is_year(p1):
            return {"volume_year": p1, "serial_number": p2, "serial_year": p3}
        return {"volume_letter": p1, "serial_number": p2, "serial_year": p3}

    if n == 4:
        p1, p2, p3, p4 = middle
        if is_year(p1):
            # p4 is dropped. See DESIGN.md before changing this.
            return {"volume_year": p1, "serial_number": p2, "serial_year": p3}
        return {
            "volume_letter": p1,
            "volume_year": p2,
            "serial_number": p3,
            "serial_year": p4,
        }

    # Five or more: first four in order, the rest ignored.
    return {
        "volume_letter": middle[0],
        "volume_year": middle[1],
        "serial_number": middle[2],
        "serial_year": middle[3],
    }


def parse_legacy(
    value: Optional[str], office: OfficeCode = DEFAULT_OFFICE
) -> CertificateNumber:
    """
    Parse a hyphenated certificate number into a `CertificateNumber`.

    Args:
        value:  Raw string, e.g. "WB-MSD-BRW-I-1-C-16-21". None and "" allowed.
        office: Expected prefix codes; compared case-sensitively.

    Returns:
        A fresh record. Unknown shapes (no hyphens, short, wrong prefix) give
        the default record (book "I", everything else "").
    """
    if not value:
        return CertificateNumber.default()

    parts = value.split("-")
    if len(parts) < _MIN_SEGMENTS or parts[:3] != office.segments:
        return CertificateNumber.default()

    book = parts[3] or DEFAULT_BOOK
    rest = parts[4:]  # volume, middle (1+), page

    return CertificateNumber(
        book_number=book,
        volume_number=rest[0],
        page_number=rest[-1],
        **_classify_middle(rest[1:-1]),
    )
