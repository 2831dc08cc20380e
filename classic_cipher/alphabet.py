"""
Alphabet — the 36-symbol alphanumeric domain
============================================
Every cipher in the package works over the same ordered alphabet:

    A B C ... Z 0 1 ... 9      (indices 0-35)

The lookup tables are built once at import time and are read-only:
`ALPHABET` is a str and `INDEX` is a mapping proxy, so no worker
thread can ever mutate them.

Rotation keeps a symbol inside its own class. Letters wrap modulo 26
and digits wrap modulo 10, so a letter never turns into a digit and
text that went in as letters comes back out as letters.
"""

from types import MappingProxyType

LETTERS  = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS   = "0123456789"
ALPHABET = LETTERS + DIGITS

INDEX = MappingProxyType({symbol: i for i, symbol in enumerate(ALPHABET)})

_LETTER_SET = frozenset(LETTERS)
_DIGIT_SET  = frozenset(DIGITS)


def index_of(symbol: str) -> int:
    """Position of `symbol` in ALPHABET. Raises ValueError if absent."""
    try:
        return INDEX[symbol]
    except KeyError:
        raise ValueError(f"{symbol!r} is not in the alphanumeric alphabet.") from None


def is_letter(ch: str) -> bool:
    return ch in _LETTER_SET


def is_digit(ch: str) -> bool:
    return ch in _DIGIT_SET


def rotate(symbol: str, amount: int) -> str:
    """
    Shift `symbol` by `amount` places within its class.
    Negative amounts shift backwards.
    """
    idx = index_of(symbol)
    if idx < len(LETTERS):
        return LETTERS[(idx + amount) % len(LETTERS)]
    return DIGITS[(idx - len(LETTERS) + amount) % len(DIGITS)]
