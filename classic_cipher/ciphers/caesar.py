"""
Caesar — single-key shift cipher
================================
Every symbol moves the same number of places through the alphabet:
forward to encrypt, backward to decrypt. Letters wrap within A-Z and
digits within 0-9.

Historical note: Suetonius records Julius Caesar shifting his letters
by three. With only a handful of useful keys it falls to brute force
instantly; it is here as the simplest member of the family.

Parallelism: no character depends on any other, so the text may be cut
at any boundary.
"""

import logging

from .base import Cipher
from ..alphabet import ALPHABET, rotate
from ..exceptions import InvalidKey
from ..modes import CipherMode, CipherType

logger = logging.getLogger(__name__)


class ShiftCipher(Cipher):
    """Caesar shift cipher with an integer key in [0, 35]."""

    cipher_type = CipherType.CAESAR
    MAX_KEY     = len(ALPHABET) - 1

    def __init__(self, key: str):
        if not isinstance(key, str) or not (key.isascii() and key.isdigit()):
            raise InvalidKey(f"Caesar key must be a whole number in ASCII digits, got {key!r}.", key)
        value = int(key)
        if not 0 <= value <= self.MAX_KEY:
            raise InvalidKey(
                f"Caesar key must lie between 0 and {self.MAX_KEY}, got {value}.", key
            )
        self._key = value
        self._freeze()
        logger.debug(f"ShiftCipher ready: key={value}")

    @property
    def key(self) -> int:
        return self._key

    def apply_cipher(self, text: str, mode: CipherMode) -> str:
        shift = self._key if mode is CipherMode.ENCRYPT else -self._key
        return "".join(rotate(ch, shift) for ch in text)

    def __repr__(self):
        return f"ShiftCipher(key={self._key})"
