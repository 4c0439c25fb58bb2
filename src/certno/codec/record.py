from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping

DEFAULT_BOOK = "I"

# Python attribute -> form field name used by the registration forms.
FORM_FIELDS: Dict[str, str] = {
    "book_number": "bookNumber",
    "volume_number": "volumeNumber",
    "volume_letter": "volumeLetter",
    "volume_year": "volumeYear",
    "serial_number": "serialNumber",
    "serial_year": "serialYear",
    "page_number": "pageNumber",
}


@dataclass(frozen=True)
class CertificateNumber:
    """
    Structured certificate number.

    Every field is text: book numbers are roman numerals and ordinals may be
    zero-padded, so nothing is converted to int. Absent fields are "" rather
    than None; callers test for emptiness.
    """
    book_number: str = DEFAULT_BOOK
    volume_number: str = ""
    volume_letter: str = ""
    volume_year: str = ""
    serial_number: str = ""
    serial_year: str = ""
    page_number: str = ""

    @classmethod
    def default(cls) -> "CertificateNumber":
        return cls()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CertificateNumber":
        """
        Build a record from form values.

        Accepts camelCase (form) or snake_case keys. None becomes "", unknown
        keys are ignored. An empty book number is kept empty here; defaulting
        is the parser's and formatter's job.
        """
        values: Dict[str, str] = {}
        for attr, form_name in FORM_FIELDS.items():
            raw = data.get(attr, data.get(form_name))
            values[attr] = "" if raw is None else str(raw)
        return cls(**values)

    def to_dict(self) -> Dict[str, str]:
        """camelCase mapping, ready to pre-populate a form."""
        return {FORM_FIELDS[k]: v for k, v in asdict(self).items()}

    def is_default(self) -> bool:
        """True when nothing was recovered beyond the default book."""
        return self == CertificateNumber()

