"""
Chunked executor — parallel cipher application
==============================================
Splits a message into chunks, hands each chunk to a worker thread and
stitches the results back together in submission order. The output is
identical to one sequential `apply_cipher` call over the whole text.

Chunking rules per variant:

    Caesar    first len % N chunks get one extra character, the rest
              get len // N; any boundary is safe
    Vigenère  chunk length ceil(len / N) rounded up to a multiple of
              the key length; the last chunk takes what remains
    Playfair  never chunked; one call over the whole message

Workers share only the immutable cipher instance. The single blocking
point is the join over every future, taken in submission order, after
which the coordinating thread concatenates the pieces.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, NamedTuple, Optional

from .ciphers.base import Cipher
from .modes import CipherMode, CipherType

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 12


class Chunk(NamedTuple):
    index: int    # submission order
    start: int    # offset into the original text
    text:  str


def split_text(text: str, workers: int, period: int = 1) -> List[Chunk]:
    """
    Partition `text` into at most `workers` contiguous chunks.

    period == 1 : balanced split, longer chunks first.
    period  > 1 : every chunk except the last is a multiple of `period`.

    Empty chunks are never produced, so empty text yields [].
    """
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}.")
    if period < 1:
        raise ValueError(f"period must be >= 1, got {period}.")

    if period == 1:
        base, extra = divmod(len(text), workers)
        lengths = [base + 1] * extra + [base] * (workers - extra)
    else:
        chunk_len = -(-len(text) // workers)
        chunk_len = -(-chunk_len // period) * period
        lengths = [chunk_len] * workers

    chunks = []
    start = 0
    for length in lengths:
        if start >= len(text) or length == 0:
            break
        piece = text[start:start + length]
        chunks.append(Chunk(len(chunks), start, piece))
        start += len(piece)
    return chunks


class ChunkedExecutor:
    """Apply a cipher across a fixed-size pool of worker threads."""

    def __init__(self, workers: int = DEFAULT_WORKERS):
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}.")
        self._workers = workers

    @property
    def workers(self) -> int:
        return self._workers

    def run(self, text: str, cipher: Cipher, mode: CipherMode,
            cipher_type: Optional[CipherType] = None) -> str:
        """
        Encrypt or decrypt `text` with `cipher`.
        `cipher_type` defaults to the variant the instance declares; a tag
        naming a different variant raises ValueError.
        """
        declared = CipherType.from_name(cipher.cipher_type)
        cipher_type = CipherType.from_name(cipher_type or declared)
        if cipher_type is not declared:
            raise ValueError(
                f"cipher_type {cipher_type.value!r} does not match {cipher!r} "
                f"({declared.value})."
            )

        if cipher_type is CipherType.PLAYFAIR:
            logger.debug("Playfair: single sequential call, no chunking")
            return cipher.apply_cipher(text, mode)

        period = cipher.period if cipher_type is CipherType.VIGENERE else 1
        chunks = split_text(text, self._workers, period)
        if not chunks:
            return ""
        logger.debug(
            f"{cipher_type.value}: {len(text)} chars -> {len(chunks)} chunk(s), "
            f"period={period}, workers={self._workers}"
        )

        with ThreadPoolExecutor(max_workers=min(self._workers, len(chunks))) as pool:
            futures = [pool.submit(cipher.apply_cipher, chunk.text, mode)
                       for chunk in chunks]
            # Results are collected by submission index, not completion order.
            return "".join(future.result() for future in futures)

    def __repr__(self):
        return f"ChunkedExecutor(workers={self._workers})"
