"""
NES Genie Error Hierarchy
=========================

This module defines the exception hierarchy for the nesgenie package.
All exceptions inherit from GenieError, allowing callers to catch all
codec-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
GenieError (base)
├── InvalidCodeError - code has the wrong length or a foreign character
└── PatchError (patch descriptors)
    ├── PatchRangeError - address/value/condition outside its range
    └── PatchFormatError - malformed "ADDR:VAL" / "ADDR?CMP:VAL" text

Design Philosophy
-----------------
Validity of a code is a precondition, not a transient fault. Errors are
raised straight to the caller; the codec never retries or logs them at
error level.
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class GenieError(Exception):
    """
    Base exception for all nesgenie errors.

        try:
            patch = decode(user_input)
        except GenieError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Code Exceptions
# =============================================================================

class InvalidCodeError(GenieError):
    """
    A Game Genie code failed structural validation.

    Raised when a code is not exactly 6 or 8 characters long, or when it
    contains a character outside the 16-letter alphabet.

    Attributes:
        code: The rejected code as supplied by the caller
        reason: "length" or "character"
        position: Index of the first bad character (character errors only)
        character: The first bad character (character errors only)
    """

    def __init__(
        self,
        code: object,
        reason: str,
        position: Optional[int] = None,
        character: Optional[str] = None,
        message: str = "",
    ):
        self.code = code
        self.reason = reason
        self.position = position
        self.character = character
        if not message:
            message = self._default_message()
        super().__init__(message)

    def _default_message(self) -> str:
        if self.reason == "length":
            try:
                length = len(self.code)
            except TypeError:
                return f"invalid code {self.code!r}: not a string"
            return (
                f"invalid code {self.code!r}: expected 6 or 8 characters, "
                f"got {length}"
            )
        if self.reason == "character":
            return (
                f"invalid code {self.code!r}: character {self.character!r} "
                f"at position {self.position} is not a Game Genie letter"
            )
        return f"invalid code {self.code!r}"


# =============================================================================
# Patch Exceptions
# =============================================================================

class PatchError(GenieError):
    """Base exception for patch descriptor errors."""
    pass


class PatchRangeError(PatchError, ValueError):
    """
    A patch field is out of range.

    Addresses must lie in cartridge space ($8000-$FFFF); values and
    compare bytes must fit in 8 bits.
    """

    def __init__(self, field_name: str, value: object, low: int, high: int):
        self.field_name = field_name
        self.value = value
        self.low = low
        self.high = high
        if isinstance(value, int) and value >= 0:
            shown = f"${value:X}"
        else:
            shown = repr(value)
        super().__init__(
            f"{field_name} {shown} out of range (${low:X}-${high:X})"
        )


class PatchFormatError(PatchError):
    """
    Malformed textual patch notation.

    Accepted forms are "AAAA:VV" for a simple patch and "AAAA?CC:VV"
    for a conditional patch (hex digits).
    """
    pass
