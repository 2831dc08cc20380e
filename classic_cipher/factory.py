"""
Cipher factory
==============
Turn a variant tag and a raw key string into a ready cipher instance.

    cipher = cipher_factory(CipherType.VIGENERE, "hello")
    cipher = cipher_factory("caesar", "10")

Key validation belongs to each variant's constructor; InvalidKey
propagates from here untouched so the caller can report it before any
text is processed.
"""

import logging

from .ciphers.base     import Cipher
from .ciphers.caesar   import ShiftCipher
from .ciphers.playfair import DigraphCipher
from .ciphers.vigenere import PolyShiftCipher
from .modes            import CipherType

logger = logging.getLogger(__name__)

CIPHERS = {
    CipherType.CAESAR:   ShiftCipher,
    CipherType.PLAYFAIR: DigraphCipher,
    CipherType.VIGENERE: PolyShiftCipher,
}


def cipher_factory(cipher_type, key: str) -> Cipher:
    """
    Build the cipher named by `cipher_type` (CipherType or its name).

    Raises:
        UnknownCipher : cipher_type is not caesar, playfair or vigenere
        InvalidKey    : key fails the variant's validation rules
    """
    cipher_type = CipherType.from_name(cipher_type)
    cipher = CIPHERS[cipher_type](key)
    logger.info(f"Constructed {cipher_type.value} cipher: {cipher!r}")
    return cipher
