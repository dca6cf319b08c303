"""Numeral formatters used by \\arabic, \\roman, \\alph, \\fnsymbol and friends.

All functions are pure and take the counter's integer value.  Values out of
a formatter's range produce an empty string rather than an error, matching
what LaTeX prints for e.g. ``\\alph`` of 27.
"""
from __future__ import annotations

from typing import Callable

Formatter = Callable[[int], str]

_ROMAN_NUMERALS: tuple[tuple[str, int], ...] = (
    ("M", 1000),
    ("CM", 900),
    ("D", 500),
    ("CD", 400),
    ("C", 100),
    ("XC", 90),
    ("L", 50),
    ("XL", 40),
    ("X", 10),
    ("IX", 9),
    ("V", 5),
    ("IV", 4),
    ("I", 1),
)

_FN_SYMBOLS: tuple[str, ...] = (
    "*",
    "†",          # dagger
    "‡",          # double dagger
    "§",          # section sign
    "¶",          # pilcrow
    "‖",          # double vertical line
    "**",
    "††",
    "‡‡",
)


def to_arabic(num: int) -> str:
    return str(num)


def to_roman(num: int) -> str:
    """Uppercase Roman numeral; ``""`` for zero and negatives.

    There is no upper bound: 4000 and above repeat ``M``.
    """
    if num <= 0:
        return ""
    result = ""
    for symbol, value in _ROMAN_NUMERALS:
        count, num = divmod(num, value)
        result += symbol * count
    return result


def to_alph(num: int) -> str:
    """``A``..``Z`` for 1..26."""
    if num <= 0 or num > 26:
        return ""
    return chr(0x40 + num)


def to_fn_symbol(num: int) -> str:
    if num <= 0 or num > len(_FN_SYMBOLS):
        return ""
    return _FN_SYMBOLS[num - 1]


# LaTeX command name → (formatter, capital).  ``capital`` None means the
# formatter's output is used as is.
FORMATTERS: dict[str, tuple[Formatter, bool | None]] = {
    "arabic":   (to_arabic, None),
    "roman":    (to_roman, False),
    "Roman":    (to_roman, True),
    "alph":     (to_alph, False),
    "Alph":     (to_alph, True),
    "fnsymbol": (to_fn_symbol, None),
}


def format_value(style: str, num: int) -> str:
    """Format ``num`` the way the LaTeX command ``style`` would.

    >>> format_value("roman", 14)
    'xiv'
    """
    formatter, capital = FORMATTERS[style]
    text = formatter(num)
    if capital is None:
        return text
    return text.upper() if capital else text.lower()
