import pytest
from certno.books import MAX_BOOK, book_options, from_roman, roman_numerals, to_roman


def test_fifty_numerals():
    numerals = roman_numerals()
    assert len(numerals) == 50
    assert len(set(numerals)) == 50


@pytest.mark.parametrize(
    "n, numeral",
    [(1, "I"), (4, "IV"), (9, "IX"), (14, "XIV"), (19, "XIX"), (40, "XL"), (44, "XLIV"), (49, "XLIX"), (50, "L")],
)
def test_known_values(n, numeral):
    assert to_roman(n) == numeral
    assert roman_numerals()[n - 1] == numeral


def test_deterministic():
    assert roman_numerals() == roman_numerals()


def test_options_are_one_based():
    options = book_options()
    assert options[0] == (1, "I")
    assert options[-1] == (50, "L")
    assert [i for i, _ in options] == list(range(1, MAX_BOOK + 1))


_SYMBOLS = {"I": 1, "V": 5, "X": 10, "L": 50}


def _decode(numeral):
    # Additive decoding with the subtractive rule, independent of books.py.
    total = 0
    for i, ch in enumerate(numeral):
        value = _SYMBOLS[ch]
        if i + 1 < len(numeral) and _SYMBOLS[numeral[i + 1]] > value:
            total -= value
        else:
            total += value
    return total


def test_strictly_increasing_values():
    assert [_decode(n) for n in roman_numerals()] == list(range(1, 51))


def test_first_twenty():
    assert roman_numerals()[:20] == [
        "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X",
        "XI", "XII", "XIII", "XIV", "XV", "XVI", "XVII", "XVIII", "XIX", "XX",
    ]


@pytest.mark.parametrize("n", [0, -1, 51])
def test_out_of_range(n):
    with pytest.raises(ValueError):
        to_roman(n)


@pytest.mark.parametrize("numeral", ["IIII", "VV", "LI", "", "iv", "C"])
def test_from_roman_rejects(numeral):
    assert from_roman(numeral) is None
