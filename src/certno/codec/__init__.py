"""Certificate-number codec: legacy and compact parsers, compact formatter."""

from .record import CertificateNumber
from .legacy import parse_legacy
from .compact import parse_compact
from .formatter import format_compact

__all__ = [
    "CertificateNumber",
    "parse_legacy",
    "parse_compact",
    "format_compact",
]
