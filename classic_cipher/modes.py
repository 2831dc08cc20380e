"""Cipher direction and cipher variant tags."""

from enum import Enum

from .exceptions import UnknownCipher


class CipherMode(Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


class CipherType(Enum):
    CAESAR   = "caesar"
    PLAYFAIR = "playfair"
    VIGENERE = "vigenere"

    @classmethod
    def from_name(cls, name) -> "CipherType":
        """Accept a CipherType or its case-insensitive name."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise UnknownCipher(str(name)) from None
