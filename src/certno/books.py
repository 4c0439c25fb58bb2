"""
Roman-numeral book index.

Registers are bound in books numbered I..L. The registration forms offer them
as a bounded selection list, so only the symbols up to L are needed.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

MAX_BOOK = 50

# Largest first; subtractive pairs included so greedy encoding is correct.
_PAIRS: List[Tuple[int, str]] = [
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
]


def to_roman(n: int) -> str:
    """
    Encode 1..50 as an upper-case roman numeral.

    Raises:
        ValueError: if n is outside 1..50.
    """
    if not (1 <= n <= MAX_BOOK):
        raise ValueError(f"book number must be between 1 and {MAX_BOOK}, got {n}")

    out = []
    for value, numeral in _PAIRS:
        while n >= value:
            out.append(numeral)
            n -= value
    return "".join(out)


def roman_numerals() -> List[str]:
    """Numerals for books 1..50, in order."""
    return [to_roman(i) for i in range(1, MAX_BOOK + 1)]


def book_options() -> List[Tuple[int, str]]:
    """(ordinal, numeral) pairs for a book selection list."""
    return list(enumerate(roman_numerals(), start=1))


_ORDINALS: Dict[str, int] = {numeral: i for i, numeral in book_options()}


def from_roman(numeral: str) -> Optional[int]:
    """Ordinal of a well-formed book numeral, or None."""
    return _ORDINALS.get(numeral)
