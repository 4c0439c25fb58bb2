from __future__ import annotations

from typing import Any, Mapping, Union

from ..config import DEFAULT_OFFICE, OfficeCode
from .record import DEFAULT_BOOK, CertificateNumber


def format_compact(
    fields: Union[CertificateNumber, Mapping[str, Any]],
    office: OfficeCode = DEFAULT_OFFICE,
) -> str:
    """
    Render a (possibly partial) certificate number in the compact form.

    Empty fields are skipped, not rendered as placeholders, and nothing is
    placed between components:

        {"bookNumber": "I", "volumeNumber": "1", "volumeLetter": "C",
         "serialNumber": "16", "pageNumber": "21"}  ->  "WBMSDBRWI1C1621"

    Returns "" when only the office prefix would survive. Since an empty book
    falls back to "I" first, that never happens through this function; the
    check is kept so the prefix alone is never emitted.

    The hyphenated legacy form is never produced.
    """
    record = fields if isinstance(fields, CertificateNumber) else CertificateNumber.from_mapping(fields)

    parts = [
        office.compact_prefix,
        record.book_number or DEFAULT_BOOK,
        record.volume_number,
        record.volume_letter,
        record.volume_year,
        record.serial_number,
        record.serial_year,
        record.page_number,
    ]
    parts = [p for p in parts if p]

    if len(parts) == 1:
        return ""
    return "".join(parts)
