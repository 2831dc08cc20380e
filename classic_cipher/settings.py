"""Run settings populated by the command line."""

from dataclasses import dataclass
from typing import Optional

from .executor import DEFAULT_WORKERS
from .modes import CipherMode, CipherType

# Keys used when none is given. Caesar 0 and Vigenère "A" leave text
# unchanged; Playfair has no such key, so the plain-alphabet square is used.
NULL_KEYS = {
    CipherType.CAESAR:   "0",
    CipherType.PLAYFAIR: "",
    CipherType.VIGENERE: "A",
}


def null_key(cipher_type) -> str:
    return NULL_KEYS[CipherType.from_name(cipher_type)]


@dataclass
class ProgramSettings:
    input_file:  Optional[str] = None
    output_file: Optional[str] = None
    cipher_type: CipherType    = CipherType.CAESAR
    cipher_key:  Optional[str] = None
    cipher_mode: CipherMode    = CipherMode.ENCRYPT
    workers:     int           = DEFAULT_WORKERS
    verbose:     bool          = False

    @property
    def effective_key(self) -> str:
        """The key to build the cipher with, falling back to the null key."""
        if self.cipher_key is None:
            return null_key(self.cipher_type)
        return self.cipher_key
