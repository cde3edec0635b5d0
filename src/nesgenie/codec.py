"""
NES Game Genie Code Codec
=========================

This module converts between Game Genie letter codes and patch descriptors.

Code Layout
-----------
Each letter carries one 4-bit nibble (see `nesgenie.alphabet`). Writing
n0..n7 for the nibbles of a code, the patch fields are scattered across
them as follows (bit 3 of a nibble is its "high" bit, bits 0-2 its "low"
bits):

    address  = $8000
             | n3.lo << 12 | n5.lo << 8 | n4.hi << 8
             | n2.lo << 4  | n1.hi << 4 | n4.lo      | n3.hi
    value    = n1.lo << 4  | n0.hi << 4 | n0.lo      | n5.hi   (6 letters)
    value    = n1.lo << 4  | n0.hi << 4 | n0.lo      | n7.hi   (8 letters)
    compare  = n7.lo << 4  | n6.hi << 4 | n6.lo      | n5.hi   (8 letters)

Bit 15 of the address is not stored; every patch targets cartridge space.

Alternate Spellings
-------------------
The high bit of the third letter (n2.hi) is not read by the decoder.
Published code lists commonly set it on 8-letter codes, but both settings
decode to the same patch, so every code has a second spelling.
`encode()` always leaves the bit clear and `alternate()` toggles it.
"""

import logging
from typing import Final

from nesgenie.alphabet import char_to_value, value_to_char
from nesgenie.errors import InvalidCodeError
from nesgenie.patch import (
    ADDRESS_MIN,
    CONDITIONAL_CODE_LENGTH,
    SIMPLE_CODE_LENGTH,
    AnyPatch,
    ConditionalPatch,
    SimplePatch,
)


logger = logging.getLogger(__name__)


# Nibble masks
LOW_BITS: Final[int] = 0x7
HIGH_BIT: Final[int] = 0x8

# Index of the letter whose high bit is redundant
ALTERNATE_INDEX: Final[int] = 2

VALID_LENGTHS: Final[tuple[int, ...]] = (
    SIMPLE_CODE_LENGTH,
    CONDITIONAL_CODE_LENGTH,
)


# =============================================================================
# Validation
# =============================================================================

def validate(code: str) -> None:
    """
    Check that a code is structurally well-formed.

    A code is well-formed when it is exactly 6 or 8 characters long and
    every character is a Game Genie letter. No checksum exists.

    Raises:
        InvalidCodeError: Describing the first problem found
    """
    if not isinstance(code, str) or len(code) not in VALID_LENGTHS:
        logger.debug(f"Code validation failed: bad length for {code!r}")
        raise InvalidCodeError(code, "length")

    for position, char in enumerate(code):
        if char_to_value(char) is None:
            logger.debug(
                f"Code validation failed: {char!r} at position {position} "
                f"in {code!r}"
            )
            raise InvalidCodeError(
                code, "character", position=position, character=char
            )


def is_valid(code: str) -> bool:
    """
    Return True if `code` is a well-formed 6- or 8-letter Game Genie code.

    Example:
        >>> is_valid("GOSSIP")
        True
        >>> is_valid("GOSSIB")
        False
    """
    try:
        validate(code)
    except InvalidCodeError:
        return False
    return True


def _nibbles(code: str) -> list[int]:
    """Validate a code and return the 4-bit value of each letter."""
    validate(code)
    return [char_to_value(char) for char in code]


# =============================================================================
# Decoding
# =============================================================================

def decode(code: str) -> AnyPatch:
    """
    Decode a Game Genie code into a patch descriptor.

    Args:
        code: 6- or 8-letter upper-case code

    Returns:
        SimplePatch for 6-letter codes, ConditionalPatch for 8-letter codes

    Raises:
        InvalidCodeError: If the code is not well-formed

    Example:
        >>> decode("GOSSIP")
        SimplePatch(address=53725, value=20)
    """
    n = _nibbles(code)

    address = (ADDRESS_MIN
               | ((n[3] & LOW_BITS) << 12)
               | ((n[5] & LOW_BITS) << 8) | ((n[4] & HIGH_BIT) << 8)
               | ((n[2] & LOW_BITS) << 4) | ((n[1] & HIGH_BIT) << 4)
               | (n[4] & LOW_BITS) | (n[3] & HIGH_BIT))

    if len(n) == SIMPLE_CODE_LENGTH:
        value = (((n[1] & LOW_BITS) << 4) | ((n[0] & HIGH_BIT) << 4)
                 | (n[0] & LOW_BITS) | (n[5] & HIGH_BIT))
        patch = SimplePatch(address=address, value=value)
    else:
        condition = (((n[7] & LOW_BITS) << 4) | ((n[6] & HIGH_BIT) << 4)
                     | (n[6] & LOW_BITS) | (n[5] & HIGH_BIT))
        value = (((n[1] & LOW_BITS) << 4) | ((n[0] & HIGH_BIT) << 4)
                 | (n[0] & LOW_BITS) | (n[7] & HIGH_BIT))
        patch = ConditionalPatch(
            address=address, condition=condition, value=value
        )

    logger.debug(f"Decoded {code} -> {patch}")
    return patch


# =============================================================================
# Encoding
# =============================================================================

def encode(patch: AnyPatch) -> str:
    """
    Encode a patch descriptor as its canonical Game Genie code.

    The canonical spelling leaves the high bit of the third letter clear;
    use `alternate()` for the other spelling.

    Args:
        patch: SimplePatch or ConditionalPatch

    Returns:
        6-letter code for a SimplePatch, 8-letter code for a ConditionalPatch

    Example:
        >>> encode(SimplePatch(address=0xD1DD, value=0x14))
        'GOISIP'
    """
    if not isinstance(patch, (SimplePatch, ConditionalPatch)):
        raise TypeError(
            f"expected SimplePatch or ConditionalPatch, "
            f"got {type(patch).__name__}"
        )

    a = patch.address
    v = patch.value

    nibbles = [
        ((v >> 4) & HIGH_BIT) | (v & LOW_BITS),
        ((a >> 4) & HIGH_BIT) | ((v >> 4) & LOW_BITS),
        (a >> 4) & LOW_BITS,
        (a & HIGH_BIT) | ((a >> 12) & LOW_BITS),
        ((a >> 8) & HIGH_BIT) | (a & LOW_BITS),
    ]

    if isinstance(patch, ConditionalPatch):
        c = patch.condition
        nibbles.append((c & HIGH_BIT) | ((a >> 8) & LOW_BITS))
        nibbles.append(((c >> 4) & HIGH_BIT) | (c & LOW_BITS))
        nibbles.append((v & HIGH_BIT) | ((c >> 4) & LOW_BITS))
    else:
        nibbles.append((v & HIGH_BIT) | ((a >> 8) & LOW_BITS))

    code = "".join(value_to_char(nibble) for nibble in nibbles)
    logger.debug(f"Encoded {patch} -> {code}")
    return code


# =============================================================================
# Alternate Spellings
# =============================================================================

def alternate(code: str) -> str:
    """
    Return the other spelling of a code.

    Toggles the high bit of the third letter. Applying it twice gives back
    the original code, and both spellings decode to the same patch.

    Raises:
        InvalidCodeError: If the code is not well-formed

    Example:
        >>> alternate("GOSSIP")
        'GOISIP'
    """
    validate(code)

    flipped = value_to_char(char_to_value(code[ALTERNATE_INDEX]) ^ HIGH_BIT)
    result = code[:ALTERNATE_INDEX] + flipped + code[ALTERNATE_INDEX + 1:]

    logger.debug(f"Alternate of {code} is {result}")
    return result


def is_canonical(code: str) -> bool:
    """
    Return True if `code` is the spelling `encode()` produces.

    Raises:
        InvalidCodeError: If the code is not well-formed
    """
    validate(code)
    return not char_to_value(code[ALTERNATE_INDEX]) & HIGH_BIT


def canonicalize(code: str) -> str:
    """Return the canonical spelling of a code (`encode(decode(code))`)."""
    return encode(decode(code))
