"""
Cipher — common contract for every variant
==========================================
A cipher owns validated key material, is immutable once built, and
transforms a whole string in one call:

    cipher.apply_cipher(text, CipherMode.ENCRYPT) -> str

`period` tells the chunked executor where it may cut the text:
    1     any boundary is safe (no dependency between characters)
    k > 1 boundaries must fall on multiples of k
    None  never chunk; the cipher needs the whole message
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..modes import CipherMode, CipherType


class Cipher(ABC):
    """Abstract base for the shift, digraph and poly-shift ciphers."""

    cipher_type: Optional[CipherType] = None

    @property
    def period(self) -> Optional[int]:
        return 1

    @abstractmethod
    def apply_cipher(self, text: str, mode: CipherMode) -> str:
        """Encrypt or decrypt normalised uppercase alphanumeric text."""

    def encrypt(self, plaintext: str) -> str:
        return self.apply_cipher(plaintext, CipherMode.ENCRYPT)

    def decrypt(self, ciphertext: str) -> str:
        return self.apply_cipher(ciphertext, CipherMode.DECRYPT)

    def __setattr__(self, name, value):
        # Key material is fixed during __init__; afterwards the instance is read-only.
        if getattr(self, "_frozen", False):
            raise AttributeError(f"{type(self).__name__} is immutable.")
        super().__setattr__(name, value)

    def _freeze(self):
        self._frozen = True
