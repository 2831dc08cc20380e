"""Exceptions raised by the cipher engine and its command-line front end."""

from typing import Optional


class InvalidKey(ValueError):
    """Key string rejected by a cipher's validation rules."""

    def __init__(self, message: str, key: Optional[str] = None):
        self.key = key
        super().__init__(message)


class UnknownCipher(ValueError):
    """Requested cipher name is not one of the supported variants."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown cipher {name!r}; choose caesar, playfair or vigenere.")
