"""
NES Genie Command-Line Interface
================================

- **ggcode**: decode, encode, validate and respell Game Genie codes

Implemented as a Click-based CLI application.
"""

__all__ = ["ggcode"]
