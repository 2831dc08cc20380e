"""
classic-cipher — command-line front end
=======================================
Encrypt or decrypt alphanumeric text with a classical cipher.

Usage:
  classic-cipher [-i FILE] [-o FILE] [-c CIPHER] [-k KEY]
                 [--encrypt | --decrypt] [-j N] [-v] [--version]

Input is read from FILE or stdin and normalised (letters upper-cased,
digits spelled out, everything else dropped). The result goes to FILE
or stdout followed by a newline.

Exit codes: 0=OK, 1=invalid key or file error, 2=usage error.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .exceptions import InvalidKey
from .executor import DEFAULT_WORKERS, ChunkedExecutor
from .factory import cipher_factory
from .modes import CipherMode, CipherType
from .settings import ProgramSettings
from .transform import normalise_text

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="classic-cipher",
        description="Encrypts/Decrypts input alphanumeric text using classical ciphers",
    )
    ap.add_argument("--version", action="version", version=__version__)
    ap.add_argument("-i", dest="input_file", metavar="FILE", default=None,
                    help="Read text to be processed from FILE (default: stdin)")
    ap.add_argument("-o", dest="output_file", metavar="FILE", default=None,
                    help="Write processed text to FILE (default: stdout)")
    ap.add_argument("-c", dest="cipher", metavar="CIPHER", default="caesar", type=str.lower,
                    choices=[t.value for t in CipherType],
                    help="caesar, playfair or vigenere (default: caesar)")
    ap.add_argument("-k", dest="key", metavar="KEY", default=None,
                    help="Cipher KEY; a null key (no encryption) is used if omitted")
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("--encrypt", dest="mode", action="store_const",
                      const=CipherMode.ENCRYPT, default=CipherMode.ENCRYPT,
                      help="Encrypt the input text (default)")
    mode.add_argument("--decrypt", dest="mode", action="store_const",
                      const=CipherMode.DECRYPT, help="Decrypt the input text")
    ap.add_argument("-j", "--workers", type=_positive_int, default=DEFAULT_WORKERS,
                    help=f"Worker threads for chunked processing (default: {DEFAULT_WORKERS})")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    return ap


def parse_settings(argv: Optional[List[str]] = None) -> ProgramSettings:
    args = _build_parser().parse_args(argv)
    return ProgramSettings(
        input_file=args.input_file,
        output_file=args.output_file,
        cipher_type=CipherType.from_name(args.cipher),
        cipher_key=args.key,
        cipher_mode=args.mode,
        workers=args.workers,
        verbose=args.verbose,
    )


def _read_input(settings: ProgramSettings) -> str:
    if settings.input_file:
        with open(settings.input_file, "r", encoding="utf-8") as f:
            return f.read()
    return sys.stdin.read()


def _write_output(settings: ProgramSettings, text: str):
    if settings.output_file:
        with open(settings.output_file, "w", encoding="utf-8") as f:
            f.write(text + "\n")
    else:
        sys.stdout.write(text + "\n")


def main(argv: Optional[List[str]] = None) -> int:
    settings = parse_settings(argv)
    logging.basicConfig(
        level=logging.DEBUG if settings.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        cipher = cipher_factory(settings.cipher_type, settings.effective_key)
    except InvalidKey as e:
        print(f"[error] Invalid key: {e}", file=sys.stderr)
        return 1

    try:
        raw = _read_input(settings)
    except OSError as e:
        print(f"[error] failed to read input file '{settings.input_file}': {e}", file=sys.stderr)
        return 1

    text = normalise_text(raw)
    output = ChunkedExecutor(settings.workers).run(
        text, cipher, settings.cipher_mode, settings.cipher_type
    )
    logger.info(f"{settings.cipher_mode.value}: {len(text)} chars in, {len(output)} chars out")

    try:
        _write_output(settings, output)
    except OSError as e:
        print(f"[error] failed to write output file '{settings.output_file}': {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
