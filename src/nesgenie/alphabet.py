"""
Game Genie Alphabet
===================

The NES Game Genie spells every 4-bit nibble with one of sixteen letters.
A letter's value is its position in the alphabet string:

    A P Z L G I T Y E O X U K S V N
    0 1 2 3 4 5 6 7 8 9 A B C D E F

The ordering is shared by every Game Genie tool and by the printed code
books, so it must never change.
"""

from typing import Final, Optional


ALPHABET: Final[str] = "APZLGITYEOXUKSVN"

# Reverse lookup table, built once at import time
_CHAR_VALUES: Final[dict[str, int]] = {
    char: value for value, char in enumerate(ALPHABET)
}


def char_to_value(char: str) -> Optional[int]:
    """
    Return the 4-bit value of a Game Genie letter.

    Args:
        char: A single upper-case letter

    Returns:
        The value 0-15, or None if the character is not in the alphabet

    Example:
        >>> char_to_value("G")
        4
        >>> char_to_value("B") is None
        True
    """
    return _CHAR_VALUES.get(char)


def value_to_char(value: int) -> str:
    """
    Return the Game Genie letter for a 4-bit value.

    Callers are expected to pass masked nibbles; anything outside 0-15
    raises ValueError.
    """
    if not 0 <= value <= 0xF:
        raise ValueError(f"Nibble out of range: {value} (expected 0-15)")
    return ALPHABET[value]
