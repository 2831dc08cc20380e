"""
Vigenère — repeating-keyword polyalphabetic shift
=================================================
The i-th symbol is shifted by the alphabet index of key letter
i mod len(key): A shifts by 0, B by 1, ... Z by 25. Encryption adds the
shift, decryption subtracts it.

Historical note: Blaise de Vigenère, 1553. Called "le chiffre
indéchiffrable" for 300 years until Kasiski showed that the repeating
key leaks its own length.

Parallelism: the shift applied to a symbol depends on its position in
the whole message. A chunk may only start at a multiple of the key
length, otherwise the worker starts mid-key. `period` publishes that
length to the executor.
"""

import logging

from .base import Cipher
from ..alphabet import index_of, is_letter, rotate
from ..exceptions import InvalidKey
from ..modes import CipherMode, CipherType

logger = logging.getLogger(__name__)


class PolyShiftCipher(Cipher):
    """Vigenère cipher over the alphanumeric alphabet."""

    cipher_type = CipherType.VIGENERE

    def __init__(self, key: str):
        if not key or not all(is_letter(ch.upper()) for ch in key):
            raise InvalidKey("Vigenère key must be a non-empty string of letters A-Z.", key)
        self._key    = key.upper()
        self._shifts = tuple(index_of(ch) for ch in self._key)
        self._freeze()
        logger.debug(f"PolyShiftCipher ready: period={len(self._shifts)}")

    @property
    def key(self) -> str:
        return self._key

    @property
    def period(self) -> int:
        return len(self._shifts)

    def apply_cipher(self, text: str, mode: CipherMode) -> str:
        sign   = 1 if mode is CipherMode.ENCRYPT else -1
        shifts = self._shifts
        period = len(shifts)
        return "".join(
            rotate(ch, sign * shifts[i % period]) for i, ch in enumerate(text)
        )

    def __repr__(self):
        return f"PolyShiftCipher(key={self._key!r})"
