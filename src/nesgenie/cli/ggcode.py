"""
ggcode - NES Game Genie Code Tool
=================================

This module implements the command-line interface for the Game Genie
codec. It is a thin layer over `nesgenie.codec`.

Commands
--------
- **decode**: Show the patch a code describes
- **encode**: Build the canonical code for a patch
- **alternate**: Show the other spelling of a code
- **validate**: Check codes for structural well-formedness

Usage Examples
--------------
Decode codes:
    $ ggcode decode GOSSIP ZEXPYGLA
    GOSSIP    ->  D1DD:14
    ZEXPYGLA  ->  94A7?03:02

Encode patches (AAAA:VV or AAAA?CC:VV, hex):
    $ ggcode encode D1DD:14 94A7?03:02
    D1DD:14     ->  GOISIP
    94A7?03:02  ->  ZEZPYGLA

Show both spellings:
    $ ggcode --alternate encode D1DD:14

Environment variables NESGENIE_STRICT, NESGENIE_SHOW_ALTERNATE and
NESGENIE_VERBOSE set the defaults for the matching flags.
"""

import logging
import sys

import click

from nesgenie import __version__
from nesgenie.cli.errors import ExitCode, handle_cli_exception
from nesgenie.codec import alternate, decode, encode, validate
from nesgenie.config import CodecConfig
from nesgenie.errors import InvalidCodeError
from nesgenie.patch import parse_patch


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.option(
    "--strict",
    is_flag=True,
    help="Use codes exactly as typed (default: strip and upper-case them)",
)
@click.option(
    "-a", "--alternate",
    "show_alternate",
    is_flag=True,
    help="Also print the alternate spelling of each code",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable debug logging",
)
@click.version_option(__version__, "--version", "-V", prog_name="ggcode")
@click.pass_context
def main(
    ctx: click.Context,
    strict: bool,
    show_alternate: bool,
    verbose: bool,
) -> None:
    """
    NES Game Genie code tool.

    Decode, encode, validate and respell 6- and 8-letter Game Genie codes.

    \b
    Commands:
      decode     Show the patch a code describes
      encode     Build the canonical code for a patch
      alternate  Show the other spelling of a code
      validate   Check codes for well-formedness

    \b
    Examples:
      ggcode decode GOSSIP
      ggcode encode 94A7?03:02
      ggcode alternate ZEXPYGLA
    """
    config = CodecConfig.from_env()
    if strict:
        config.strict = True
    if show_alternate:
        config.show_alternate = True
    if verbose:
        config.verbose = True

    if config.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    ctx.obj = config


def _column_width(items: tuple[str, ...]) -> int:
    return max(len(item) for item in items)


# =============================================================================
# Decode Command
# =============================================================================

@main.command("decode")
@click.argument("codes", nargs=-1, required=True)
@click.pass_obj
def decode_command(config: CodecConfig, codes: tuple[str, ...]) -> None:
    """
    Decode Game Genie codes into patches.

    Each patch prints as AAAA:VV (6 letters) or AAAA?CC:VV (8 letters).
    """
    try:
        prepared = tuple(config.prepare_code(code) for code in codes)
        width = _column_width(prepared)

        for code in prepared:
            patch = decode(code)
            line = f"{code:<{width}}  ->  {patch}"
            if config.show_alternate:
                line += f"  (alternate: {alternate(code)})"
            click.echo(line)

    except Exception as e:
        handle_cli_exception(e, verbose=config.verbose)


# =============================================================================
# Encode Command
# =============================================================================

@main.command("encode")
@click.argument("patches", nargs=-1, required=True)
@click.pass_obj
def encode_command(config: CodecConfig, patches: tuple[str, ...]) -> None:
    """
    Encode patches as canonical Game Genie codes.

    PATCHES are hex patches: AAAA:VV or AAAA?CC:VV. The address must lie
    in $8000-$FFFF.
    """
    try:
        width = _column_width(patches)

        for text in patches:
            code = encode(parse_patch(text))
            line = f"{text.strip():<{width}}  ->  {code}"
            if config.show_alternate:
                line += f"  (alternate: {alternate(code)})"
            click.echo(line)

    except Exception as e:
        handle_cli_exception(e, verbose=config.verbose)


# =============================================================================
# Alternate Command
# =============================================================================

@main.command("alternate")
@click.argument("codes", nargs=-1, required=True)
@click.pass_obj
def alternate_command(config: CodecConfig, codes: tuple[str, ...]) -> None:
    """Print the alternate spelling of each code."""
    try:
        prepared = tuple(config.prepare_code(code) for code in codes)
        width = _column_width(prepared)

        for code in prepared:
            click.echo(f"{code:<{width}}  ->  {alternate(code)}")

    except Exception as e:
        handle_cli_exception(e, verbose=config.verbose)


# =============================================================================
# Validate Command
# =============================================================================

@main.command("validate")
@click.argument("codes", nargs=-1, required=True)
@click.pass_obj
def validate_command(config: CodecConfig, codes: tuple[str, ...]) -> None:
    """
    Check that codes are well-formed.

    Exits with status 1 if any code is invalid.
    """
    prepared = tuple(config.prepare_code(code) for code in codes)
    width = _column_width(prepared)
    all_valid = True

    for code in prepared:
        try:
            validate(code)
        except InvalidCodeError as e:
            all_valid = False
            click.echo(f"{code:<{width}}  invalid: {e}")
        else:
            click.echo(f"{code:<{width}}  valid")

    if not all_valid:
        sys.exit(ExitCode.INVALID_INPUT)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
