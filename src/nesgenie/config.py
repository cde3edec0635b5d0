"""
NES Genie - Configuration
=========================

Settings for the `ggcode` command-line tool. Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line flags (applied by the CLI on top of the environment)

Environment variables (all optional, truthy values: 1, true, yes, on):
    NESGENIE_STRICT: Reject lower-case or padded codes instead of folding them
    NESGENIE_SHOW_ALTERNATE: Print the alternate spelling alongside results
    NESGENIE_VERBOSE: Enable debug logging
"""

from dataclasses import dataclass
import os


_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(name: str) -> bool:
    """Return True if environment variable `name` holds a truthy value."""
    return os.environ.get(name, "").strip().lower() in _TRUTHY


@dataclass
class CodecConfig:
    """
    Configuration for the ggcode tool.

    Attributes:
        strict: Pass codes to the codec exactly as typed (default: False,
            which strips whitespace and upper-cases input first)
        show_alternate: Also print the alternate spelling of each code
        verbose: Enable debug logging
    """

    strict: bool = False
    show_alternate: bool = False
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "CodecConfig":
        """Create a CodecConfig from NESGENIE_* environment variables."""
        return cls(
            strict=_env_flag("NESGENIE_STRICT"),
            show_alternate=_env_flag("NESGENIE_SHOW_ALTERNATE"),
            verbose=_env_flag("NESGENIE_VERBOSE"),
        )

    def prepare_code(self, text: str) -> str:
        """
        Apply the input folding policy to a code typed by the user.

        Game Genie letters are upper case; in non-strict mode "gossip " is
        accepted as "GOSSIP".
        """
        if self.strict:
            return text
        return text.strip().upper()
