"""
classic_cipher — Cipher + Factory Test Suite
============================================
Run with:  python -m pytest tests/ -v
       or:  python tests/test_all_ciphers.py
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from classic_cipher.alphabet          import ALPHABET, INDEX, index_of, rotate
from classic_cipher.ciphers.caesar    import ShiftCipher
from classic_cipher.ciphers.playfair  import DigraphCipher
from classic_cipher.ciphers.vigenere  import PolyShiftCipher
from classic_cipher.exceptions        import InvalidKey, UnknownCipher
from classic_cipher.factory           import cipher_factory
from classic_cipher.modes             import CipherMode, CipherType

ENC, DEC = CipherMode.ENCRYPT, CipherMode.DECRYPT

VIG_PLAIN  = "THISISQUITEALONGMESSAGESOTHEKEYWILLNEEDTOREPEATAFEWTIMES"
VIG_CIPHER = "ALTDWZUFTHLEWZBNQPDGHKPDCALPVSFATWZUIPOHVVPASHXLQSDXTXSZ"
PF_PLAIN   = "BOBISSOMESORTOFJUNIORCOMPLEXXENOPHONEONEZEROTHING"
PF_CIPHER  = "FHIQXLTLKLTLSUFNPQPKETFENIOLVSWLTFIAFTLAKOWATEQOKPPA"
PF_DECRYPT = "BOBISXSOMESORTOFIUNIORCOMPLEXQXENOPHONEONEZEROTHINGZ"
MIXED      = "ATTACKATDAWN0123456789ZEBRAS9XYZ"

# ── Alphabet ──────────────────────────────────────────────────────────────────
def test_alphabet_is_bijection():
    assert len(ALPHABET) == 36
    assert len(set(ALPHABET)) == 36
    assert all(ALPHABET[INDEX[s]] == s for s in ALPHABET)

def test_alphabet_rejects_foreign_symbol():
    with pytest.raises(ValueError):
        index_of("a")

def test_alphabet_rotation_stays_in_class():
    assert rotate("Z", 1) == "A"
    assert rotate("9", 1) == "0"
    assert rotate("A", -1) == "Z"
    assert rotate("5", 35) == "0"

def test_alphabet_tables_are_read_only():
    with pytest.raises(TypeError):
        INDEX["A"] = 5

# ── Caesar ────────────────────────────────────────────────────────────────────
def test_caesar_known_vector():
    c = cipher_factory(CipherType.CAESAR, "10")
    assert c.apply_cipher("HELLOWORLD", ENC) == "ROVVYGYBVN"
    assert c.apply_cipher("ROVVYGYBVN", DEC) == "HELLOWORLD"

@pytest.mark.parametrize("key", ["0", "10", "25", "35"])
def test_caesar_roundtrip(key):
    c = ShiftCipher(key)
    assert c.decrypt(c.encrypt(MIXED)) == MIXED

def test_caesar_digits_rotate_among_digits():
    assert ShiftCipher("3").encrypt("0789") == "3012"

def test_caesar_zero_is_identity():
    assert ShiftCipher("0").encrypt(MIXED) == MIXED

@pytest.mark.parametrize("key", ["-10", "agfag", ";[]'.", "36", "", "1.5", "1_0", "١٠", " 10 ", "+5"])
def test_caesar_invalid_key(key):
    with pytest.raises(InvalidKey):
        cipher_factory(CipherType.CAESAR, key)

# ── Playfair ──────────────────────────────────────────────────────────────────
def test_playfair_known_vector():
    c = cipher_factory(CipherType.PLAYFAIR, "hello")
    assert c.apply_cipher(PF_PLAIN, ENC) == PF_CIPHER
    assert c.apply_cipher(PF_CIPHER, DEC) == PF_DECRYPT

def test_playfair_key_square():
    assert DigraphCipher("hello").square == ("HELOA", "BCDFG", "IKMNP", "QRSTU", "VWXYZ")

def test_playfair_empty_key_uses_plain_alphabet():
    assert "".join(DigraphCipher("").square) == "ABCDEFGHIKLMNOPQRSTUVWXYZ"

def test_playfair_square_holds_each_letter_once():
    rows = DigraphCipher("PLAYFAIREXAMPLEJ").square
    letters = "".join(rows)
    assert len(letters) == 25
    assert set(letters) == set(ALPHABET[:26]) - {"J"}

def test_playfair_padding_rules():
    assert DigraphCipher.digraphs("XX") == [("X", "Q"), ("X", "Z")]
    assert DigraphCipher.digraphs("LLZZ") == [("L", "X"), ("L", "Z"), ("Z", "X")]
    assert DigraphCipher.digraphs("JAM") == [("I", "A"), ("M", "Z")]

def test_playfair_roundtrip_modulo_padding():
    c = DigraphCipher("monarchy")
    prepared = "".join(a + b for a, b in DigraphCipher.digraphs(VIG_PLAIN))
    assert c.decrypt(c.encrypt(VIG_PLAIN)) == prepared

def test_playfair_drops_digits():
    c = DigraphCipher("hello")
    assert c.encrypt("HE11LLO") == c.encrypt("HELLO")

def test_playfair_valid_key():
    cipher_factory(CipherType.PLAYFAIR, "hello")

@pytest.mark.parametrize("key", ["1340", "hello world", ";[]'."])
def test_playfair_invalid_key(key):
    with pytest.raises(InvalidKey):
        cipher_factory(CipherType.PLAYFAIR, key)

# ── Vigenère ──────────────────────────────────────────────────────────────────
def test_vigenere_known_vector():
    c = cipher_factory(CipherType.VIGENERE, "hello")
    assert c.apply_cipher(VIG_PLAIN, ENC) == VIG_CIPHER
    assert c.apply_cipher(VIG_CIPHER, DEC) == VIG_PLAIN

def test_vigenere_roundtrip():
    c = PolyShiftCipher("LEMON")
    assert c.decrypt(c.encrypt(MIXED)) == MIXED

def test_vigenere_period_is_key_length():
    assert PolyShiftCipher("hello").period == 5

def test_vigenere_single_a_is_identity():
    assert PolyShiftCipher("A").encrypt(MIXED) == MIXED

@pytest.mark.parametrize("key", ["1340", "-10", ";[]'.", ""])
def test_vigenere_invalid_key(key):
    with pytest.raises(InvalidKey):
        cipher_factory(CipherType.VIGENERE, key)

# ── Factory ───────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("name,key,cls", [
    ("caesar",   "10",    ShiftCipher),
    ("Playfair", "hello", DigraphCipher),
    ("VIGENERE", "hello", PolyShiftCipher),
])
def test_factory_accepts_names(name, key, cls):
    c = cipher_factory(name, key)
    assert isinstance(c, cls)
    assert c.cipher_type is CipherType.from_name(name)

def test_factory_unknown_cipher():
    with pytest.raises(UnknownCipher):
        cipher_factory("enigma", "abc")

def test_cipher_is_immutable():
    c = ShiftCipher("10")
    with pytest.raises(AttributeError):
        c._key = 3

@pytest.mark.parametrize("cipher", [ShiftCipher("7"), DigraphCipher("key"), PolyShiftCipher("key")])
def test_empty_text(cipher):
    assert cipher.encrypt("") == ""
    assert cipher.decrypt("") == ""

# ── run directly ─────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import time
    tests = [
        ("Alphabet — bijection",               test_alphabet_is_bijection),
        ("Alphabet — class rotation",          test_alphabet_rotation_stays_in_class),
        ("Caesar   — known vector",            test_caesar_known_vector),
        ("Caesar   — roundtrip",               lambda: test_caesar_roundtrip("10")),
        ("Caesar   — invalid key",             lambda: test_caesar_invalid_key("-10")),
        ("Playfair — known vector",            test_playfair_known_vector),
        ("Playfair — key square",              test_playfair_key_square),
        ("Playfair — padding rules",           test_playfair_padding_rules),
        ("Playfair — roundtrip",               test_playfair_roundtrip_modulo_padding),
        ("Vigenère — known vector",            test_vigenere_known_vector),
        ("Vigenère — roundtrip",               test_vigenere_roundtrip),
        ("Vigenère — invalid key",             lambda: test_vigenere_invalid_key("1340")),
        ("Factory  — unknown cipher",          test_factory_unknown_cipher),
    ]

    print("\n" + "═" * 70)
    print("  classic_cipher — Cipher Test Suite")
    print("═" * 70)
    passed = failed = 0
    for name, fn in tests:
        t0 = time.perf_counter()
        try:
            fn()
            elapsed = time.perf_counter() - t0
            print(f"  ✓  {name:<45} {elapsed:.3f}s")
            passed += 1
        except Exception as e:
            print(f"  ✗  {name:<45} FAILED: {e}")
            failed += 1
    print("═" * 70)
    print(f"  {passed} passed  |  {failed} failed")
    print("═" * 70 + "\n")
    sys.exit(0 if failed == 0 else 1)
