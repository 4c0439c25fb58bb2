"""
Classification predicates and normalizers used by the certificate-number codec.

Certificate numbers are transcribed by hand from paper ledgers, so the parsers
cannot rely on fixed positions alone. These checks let them decide what a
segment *is* (a year or a letter code) before assigning it to a
field.

All functions are pure and operate on a single segment.
"""

from __future__ import annotations

import re
from typing import Sequence

_YEAR = re.compile(r"[0-9]{4}")
_LETTERS = re.compile(r"[A-Za-z]+")


def is_year(segment: str) -> bool:
    """
    True when the segment is exactly four ASCII digits.

    No range check: "0000" and "9999" both count. The legacy parser only needs
    to tell years apart from short ordinals.
    """
    return bool(_YEAR.fullmatch(segment))


def is_letters(segment: str) -> bool:
    """True for one or more ASCII letters (any case) and nothing else."""
    return bool(_LETTERS.fullmatch(segment))


def is_plausible_year(segment: str, prefixes: Sequence[str]) -> bool:
    """
    Stricter year check for the compact form, where digit runs are glued
    together and any four digits would otherwise look like a year.
    """
    return is_year(segment) and any(segment.startswith(p) for p in prefixes)


def strip_hyphens(s: str) -> str:
    """
    Trim surrounding whitespace and remove every hyphen.

    Both textual forms of a certificate number collapse to the same key, e.g.
    "WB-MSD-BRW-I-1-C-16-21" -> "WBMSDBRWI1C1621".
    """
    return s.strip().replace("-", "")
