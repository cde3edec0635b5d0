"""
Game Genie Patch Descriptors
============================

A decoded Game Genie code describes a read patch on the NES CPU bus:
whenever the console reads `address`, the Game Genie answers with
`value` instead of the cartridge byte.

Two Forms
---------
- **SimplePatch** (6-letter codes): always substitute `value`.
- **ConditionalPatch** (8-letter codes): substitute `value` only when the
  cartridge byte at `address` equals `condition`. The compare byte lets
  a code target one bank of a bank-switched ROM.

Both forms are immutable, hashable and totally ordered: simple patches
sort before conditional ones, then by field order.

Patch Notation
--------------
Patches print in the notation used by most Game Genie references:

    D1DD:14        simple patch, address $D1DD, value $14
    94A7?03:02     conditional patch, compare $03, value $02

`parse_patch()` reads the same notation back.

Address Space
-------------
The Game Genie sits between the console and the cartridge, so only PRG
space $8000-$FFFF can be patched. Codes carry 15 address bits and the
decoder always sets bit 15.
"""

import re
from dataclasses import dataclass
from typing import Final, Union

from nesgenie.errors import PatchFormatError, PatchRangeError


# =============================================================================
# Field Ranges
# =============================================================================

# Cartridge PRG space on the NES CPU bus
ADDRESS_MIN: Final[int] = 0x8000
ADDRESS_MAX: Final[int] = 0xFFFF

BYTE_MIN: Final[int] = 0x00
BYTE_MAX: Final[int] = 0xFF

# Number of letters in each code form
SIMPLE_CODE_LENGTH: Final[int] = 6
CONDITIONAL_CODE_LENGTH: Final[int] = 8


def _check_field(name: str, value: int, low: int, high: int) -> None:
    """Raise if a descriptor field is not an integer in [low, high]."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not low <= value <= high:
        raise PatchRangeError(name, value, low, high)


# =============================================================================
# Descriptor Types
# =============================================================================

class Patch:
    """
    Common behaviour of the two descriptor forms.

    Ordering is defined across both forms via `sort_key`, so a mixed list
    of patches can be sorted deterministically.
    """

    # Variant tag, lower sorts first
    _tag: int = 0

    @property
    def sort_key(self) -> tuple[int, ...]:
        raise NotImplementedError

    @property
    def code_length(self) -> int:
        """Number of letters in this patch's Game Genie code."""
        raise NotImplementedError

    @property
    def is_conditional(self) -> bool:
        return False

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Patch):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Patch):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Patch):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Patch):
            return NotImplemented
        return self.sort_key >= other.sort_key


@dataclass(frozen=True)
class SimplePatch(Patch):
    """
    Unconditional read patch, spelled with a 6-letter code.

    Attributes:
        address: CPU address in $8000-$FFFF
        value: Byte returned for reads of `address`
    """
    address: int
    value: int

    _tag = 0

    def __post_init__(self) -> None:
        _check_field("address", self.address, ADDRESS_MIN, ADDRESS_MAX)
        _check_field("value", self.value, BYTE_MIN, BYTE_MAX)

    @property
    def sort_key(self) -> tuple[int, ...]:
        return (self._tag, self.address, self.value)

    @property
    def code_length(self) -> int:
        return SIMPLE_CODE_LENGTH

    def __str__(self) -> str:
        return f"{self.address:04X}:{self.value:02X}"


@dataclass(frozen=True)
class ConditionalPatch(Patch):
    """
    Read patch gated on a compare byte, spelled with an 8-letter code.

    Attributes:
        address: CPU address in $8000-$FFFF
        condition: Cartridge byte that must be present for the patch to apply
        value: Byte returned for reads of `address`
    """
    address: int
    condition: int
    value: int

    _tag = 1

    def __post_init__(self) -> None:
        _check_field("address", self.address, ADDRESS_MIN, ADDRESS_MAX)
        _check_field("condition", self.condition, BYTE_MIN, BYTE_MAX)
        _check_field("value", self.value, BYTE_MIN, BYTE_MAX)

    @property
    def sort_key(self) -> tuple[int, ...]:
        return (self._tag, self.address, self.condition, self.value)

    @property
    def code_length(self) -> int:
        return CONDITIONAL_CODE_LENGTH

    @property
    def is_conditional(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"{self.address:04X}?{self.condition:02X}:{self.value:02X}"


AnyPatch = Union[SimplePatch, ConditionalPatch]


# =============================================================================
# Patch Notation Parsing
# =============================================================================

# AAAA[?CC]:VV with an optional 0x or $ prefix on the address
_PATCH_PATTERN: Final[re.Pattern] = re.compile(
    r"^(?:0x|\$)?(?P<address>[0-9a-f]{1,4})"
    r"(?:\?(?P<condition>[0-9a-f]{1,2}))?"
    r":(?P<value>[0-9a-f]{1,2})$",
    re.IGNORECASE,
)


def parse_patch(text: str) -> AnyPatch:
    """
    Parse a patch written in "AAAA:VV" or "AAAA?CC:VV" notation.

    Args:
        text: Patch text; hex digits are case-insensitive and surrounding
            whitespace is ignored

    Returns:
        SimplePatch or ConditionalPatch

    Raises:
        PatchFormatError: If the text does not match the notation
        PatchRangeError: If the address lies outside $8000-$FFFF

    Example:
        >>> parse_patch("94a7?03:02")
        ConditionalPatch(address=38055, condition=3, value=2)
    """
    match = _PATCH_PATTERN.match(text.strip())
    if match is None:
        raise PatchFormatError(
            f"invalid patch {text!r}: expected AAAA:VV or AAAA?CC:VV"
        )

    address = int(match.group("address"), 16)
    value = int(match.group("value"), 16)
    condition = match.group("condition")

    if condition is None:
        return SimplePatch(address=address, value=value)
    return ConditionalPatch(
        address=address, condition=int(condition, 16), value=value
    )
