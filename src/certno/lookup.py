"""
Entry points for callers holding a user-entered certificate number.

The verification pages accept either textual form. This module decides which
form a string is in, hands it to the matching parser, and produces the key
stored records are looked up by (hyphens removed).
"""

from __future__ import annotations

from typing import Literal, Optional

import structlog

from .codec.compact import parse_compact
from .codec.legacy import parse_legacy
from .codec.record import CertificateNumber
from .codec.validators import strip_hyphens
from .config import DEFAULT_OFFICE, CompactRules, OfficeCode

log = structlog.get_logger()

Form = Literal["legacy", "compact"]


class UnrecognizedCertificateNumber(ValueError):
    """Raised by `require_recognized` for strings with neither prefix."""

    def __init__(self, value: str, office: OfficeCode = DEFAULT_OFFICE) -> None:
        self.value = value
        super().__init__(
            "Please enter a valid certificate number starting with "
            f"{office.compact_prefix} or {office.legacy_prefix}"
        )


def detect_form(value: Optional[str], office: OfficeCode = DEFAULT_OFFICE) -> Optional[Form]:
    """'legacy', 'compact', or None. Surrounding whitespace is ignored."""
    if not value:
        return None
    v = value.strip()
    if v.startswith(office.legacy_prefix):
        return "legacy"
    if v.startswith(office.compact_prefix):
        return "compact"
    return None


def is_recognized(value: Optional[str], office: OfficeCode = DEFAULT_OFFICE) -> bool:
    return detect_form(value, office) is not None


def require_recognized(value: Optional[str], office: OfficeCode = DEFAULT_OFFICE) -> str:
    """Trimmed value, or UnrecognizedCertificateNumber."""
    if not is_recognized(value, office):
        raise UnrecognizedCertificateNumber(value or "", office)
    return value.strip()


def normalize_lookup_key(value: str) -> str:
    """Both forms map to the same stored key: the string without hyphens."""
    return strip_hyphens(value)


def decode(
    value: Optional[str],
    office: OfficeCode = DEFAULT_OFFICE,
    rules: Optional[CompactRules] = None,
) -> CertificateNumber:
    """
    Parse either form. Unrecognized prefixes give the default record.

    A result equal to the default record means nothing could be recovered;
    check `CertificateNumber.is_default()` when that matters.
    """
    form = detect_form(value, office)
    if form == "legacy":
        record = parse_legacy(value.strip(), office)
    elif form == "compact":
        record = parse_compact(value.strip(), office, rules)
    else:
        record = CertificateNumber.default()

    if record.is_default() and value:
        log.debug("certificate_number_unrecognized", value=value, form=form)
    return record
