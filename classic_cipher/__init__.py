"""
classic_cipher — classical ciphers with chunked parallel execution
=================================================================
Three substitution ciphers over the alphanumeric alphabet (A-Z, 0-9),
from Caesar to Vigenère, plus an executor that splits long messages
across worker threads without changing a single output character.

Ciphers:
    caesar    ShiftCipher      single integer key, per-symbol rotation
    playfair  DigraphCipher    5×5 key square, pairwise substitution
    vigenere  PolyShiftCipher  repeating keyword, per-symbol rotation

    cipher = cipher_factory("vigenere", "hello")
    ChunkedExecutor(workers=12).run(text, cipher, CipherMode.ENCRYPT)

None of these are secure. They are here for study, not for secrets.
"""

__version__  = "0.5.0"

from .exceptions          import InvalidKey, UnknownCipher
from .modes               import CipherMode, CipherType
from .ciphers.base        import Cipher
from .ciphers.caesar      import ShiftCipher
from .ciphers.playfair    import DigraphCipher
from .ciphers.vigenere    import PolyShiftCipher
from .factory             import cipher_factory
from .executor            import ChunkedExecutor, Chunk, split_text, DEFAULT_WORKERS
from .transform           import transform_char, normalise_text

__all__ = [
    "InvalidKey",
    "UnknownCipher",
    "CipherMode",
    "CipherType",
    "Cipher",
    "ShiftCipher",
    "DigraphCipher",
    "PolyShiftCipher",
    "cipher_factory",
    "ChunkedExecutor",
    "Chunk",
    "split_text",
    "DEFAULT_WORKERS",
    "transform_char",
    "normalise_text",
]
