"""
Input normalisation
===================
Reduce free text to what the ciphers accept: uppercase letters, with
digits spelled out as words and everything else dropped.

    "Hello, World 42!"  ->  "HELLOWORLDFOURTWO"
"""

DIGIT_WORDS = {
    "0": "ZERO",
    "1": "ONE",
    "2": "TWO",
    "3": "THREE",
    "4": "FOUR",
    "5": "FIVE",
    "6": "SIX",
    "7": "SEVEN",
    "8": "EIGHT",
    "9": "NINE",
}


def transform_char(ch: str) -> str:
    """Uppercase an ASCII letter, spell out a digit, drop anything else."""
    if ch.isascii() and ch.isalpha():
        return ch.upper()
    return DIGIT_WORDS.get(ch, "")


def normalise_text(text: str) -> str:
    return "".join(transform_char(ch) for ch in text)
