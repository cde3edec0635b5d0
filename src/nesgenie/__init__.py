"""
nesgenie - NES Game Genie Code Codec
====================================

This package converts between NES Game Genie codes and the patches they
describe. A Game Genie code is six or eight letters from a 16-letter
alphabet; each letter carries four bits of a scrambled patch:

- **6 letters**: an address in $8000-$FFFF and the byte to return for it
- **8 letters**: the same, plus a compare byte that must match the
  cartridge's own byte for the patch to apply

Main Components
---------------
- **alphabet**: the letter <-> nibble mapping
- **patch**: SimplePatch / ConditionalPatch descriptors and patch notation
- **codec**: validation, decoding, encoding, alternate spellings
- **cli**: the `ggcode` command-line tool

Quick Start
-----------
    >>> from nesgenie import decode, encode, alternate
    >>> decode("GOSSIP")
    SimplePatch(address=53725, value=20)
    >>> str(decode("ZEXPYGLA"))
    '94A7?03:02'
    >>> encode(decode("GOSSIP"))
    'GOISIP'
    >>> alternate("GOISIP")
    'GOSSIP'

Or from the shell:
    $ ggcode decode GOSSIP ZEXPYGLA
    $ ggcode encode D1DD:14 94A7?03:02
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from nesgenie.alphabet import ALPHABET, char_to_value, value_to_char
from nesgenie.codec import (
    alternate,
    canonicalize,
    decode,
    encode,
    is_canonical,
    is_valid,
    validate,
)
from nesgenie.errors import (
    GenieError,
    InvalidCodeError,
    PatchError,
    PatchFormatError,
    PatchRangeError,
)
from nesgenie.patch import (
    ConditionalPatch,
    Patch,
    SimplePatch,
    parse_patch,
)

__all__ = [
    "__version__",
    # Alphabet
    "ALPHABET",
    "char_to_value",
    "value_to_char",
    # Codec
    "alternate",
    "canonicalize",
    "decode",
    "encode",
    "is_canonical",
    "is_valid",
    "validate",
    # Descriptors
    "Patch",
    "SimplePatch",
    "ConditionalPatch",
    "parse_patch",
    # Errors
    "GenieError",
    "InvalidCodeError",
    "PatchError",
    "PatchFormatError",
    "PatchRangeError",
]
