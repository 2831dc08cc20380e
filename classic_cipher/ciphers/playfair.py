"""
Playfair — digraph substitution on a 5×5 key square
===================================================
The keyword (J folded into I, duplicates removed) seeds a 5×5 grid and
the rest of the alphabet fills the remaining cells in order. With key
"HELLO":

    H E L O A
    B C D F G
    I K M N P
    Q R S T U
    V W X Y Z

The message is read as letter pairs. A doubled pair is split with an X
(or a Q when the letter is X itself), and an odd final letter is padded
with Z (or X after a Z). Each pair is then replaced:

    same row     -> one column right (left to decrypt), wrapping
    same column  -> one row down (up to decrypt), wrapping
    rectangle    -> each letter takes the other's column

Decryption runs the same preparation, so padding letters stay visible
in recovered plaintext: "BOBISSOMES..." comes back as "BOBISXSOMES...".

Historical note: Charles Wheatstone, 1854; promoted by Lord Playfair
and used by British forces as late as the Second World War.

Parallelism: none. Where a pair starts depends on every padding letter
inserted before it, so the whole message must go through one call.
"""

import logging
from types import MappingProxyType
from typing import List, Optional, Tuple

from .base import Cipher
from ..alphabet import LETTERS, is_digit, is_letter
from ..exceptions import InvalidKey
from ..modes import CipherMode, CipherType

logger = logging.getLogger(__name__)


class DigraphCipher(Cipher):
    """Playfair cipher with an I/J-merged 5×5 key square."""

    cipher_type = CipherType.PLAYFAIR
    SIZE        = 5
    GRID_ALPHA  = LETTERS.replace("J", "")   # 25 letters, J merged to I

    def __init__(self, key: str = ""):
        if key is None:
            key = ""
        if not all(is_letter(ch.upper()) for ch in key):
            raise InvalidKey("Playfair key must contain only letters A-Z.", key)
        self._key  = key.upper()
        self._grid = self._build_square(self._key)
        self._coords = MappingProxyType(
            {letter: divmod(i, self.SIZE) for i, letter in enumerate(self._grid)}
        )
        self._freeze()
        logger.debug(f"DigraphCipher ready: square={self._grid}")

    @property
    def key(self) -> str:
        return self._key

    @property
    def period(self) -> Optional[int]:
        return None

    @property
    def square(self) -> Tuple[str, ...]:
        """The key square as five row strings."""
        return tuple(
            self._grid[r * self.SIZE:(r + 1) * self.SIZE] for r in range(self.SIZE)
        )

    def apply_cipher(self, text: str, mode: CipherMode) -> str:
        step = 1 if mode is CipherMode.ENCRYPT else -1
        out = []
        for first, second in self.digraphs(text):
            out.extend(self._substitute(first, second, step))
        return "".join(out)

    # ── key square ───────────────────────────────────────────────────────────

    @classmethod
    def _build_square(cls, key: str) -> str:
        seen = []
        for ch in key.replace("J", "I") + cls.GRID_ALPHA:
            if ch not in seen:
                seen.append(ch)
        return "".join(seen)

    # ── message preparation ──────────────────────────────────────────────────

    @staticmethod
    def digraphs(text: str) -> List[Tuple[str, str]]:
        """
        Split text into padded letter pairs.
        J becomes I; digits have no cell in the square and are dropped.
        """
        dropped = sum(1 for ch in text if is_digit(ch))
        if dropped:
            logger.debug(f"Playfair dropped {dropped} digit(s) outside the key square")
        letters = [ch.replace("J", "I") for ch in text if is_letter(ch)]

        pairs = []
        i = 0
        while i < len(letters):
            first = letters[i]
            if i + 1 == len(letters):
                second = "X" if first == "Z" else "Z"
                i += 1
            elif letters[i + 1] == first:
                second = "Q" if first == "X" else "X"
                i += 1
            else:
                second = letters[i + 1]
                i += 2
            pairs.append((first, second))
        return pairs

    # ── substitution ─────────────────────────────────────────────────────────

    def _substitute(self, first: str, second: str, step: int) -> Tuple[str, str]:
        r1, c1 = self._coords[first]
        r2, c2 = self._coords[second]
        n = self.SIZE
        if r1 == r2:
            c1, c2 = (c1 + step) % n, (c2 + step) % n
        elif c1 == c2:
            r1, r2 = (r1 + step) % n, (r2 + step) % n
        else:
            c1, c2 = c2, c1
        return self._grid[r1 * n + c1], self._grid[r2 * n + c2]

    def __repr__(self):
        return f"DigraphCipher(key={self._key!r})"
