"""
Tests for ggcode - Game Genie Code Tool
=======================================

These tests drive the click CLI through CliRunner and check its output
and exit codes, plus the CodecConfig it is configured from.
"""

import pytest
from click.testing import CliRunner

from nesgenie import __version__
from nesgenie.cli.errors import ExitCode
from nesgenie.cli.ggcode import main
from nesgenie.config import CodecConfig


@pytest.fixture
def runner(monkeypatch):
    """CliRunner with NESGENIE_* variables cleared."""
    for name in ("NESGENIE_STRICT", "NESGENIE_SHOW_ALTERNATE", "NESGENIE_VERBOSE"):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


# =============================================================================
# Group Options
# =============================================================================

class TestMain:
    """Tests for the command group."""

    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "decode" in result.output
        assert "encode" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# =============================================================================
# Decode Command
# =============================================================================

class TestDecodeCommand:

    def test_decode(self, runner):
        result = runner.invoke(main, ["decode", "GOSSIP", "ZEXPYGLA"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0].split() == ["GOSSIP", "->", "D1DD:14"]
        assert lines[1].split() == ["ZEXPYGLA", "->", "94A7?03:02"]

    def test_lower_case_folded(self, runner):
        """Typed codes are upper-cased by default."""
        result = runner.invoke(main, ["decode", " gossip "])
        assert result.exit_code == 0
        assert "D1DD:14" in result.output

    def test_strict_rejects_lower_case(self, runner):
        result = runner.invoke(main, ["--strict", "decode", "gossip"])
        assert result.exit_code == ExitCode.INVALID_INPUT
        assert "Error:" in result.output

    def test_strict_from_environment(self, runner):
        result = runner.invoke(main, ["decode", "gossip"], env={"NESGENIE_STRICT": "1"})
        assert result.exit_code == ExitCode.INVALID_INPUT

    def test_show_alternate(self, runner):
        result = runner.invoke(main, ["--alternate", "decode", "GOSSIP"])
        assert result.exit_code == 0
        assert "alternate: GOISIP" in result.output

    def test_invalid_code(self, runner):
        result = runner.invoke(main, ["decode", "GOSSIB"])
        assert result.exit_code == ExitCode.INVALID_INPUT
        assert "'B'" in result.output

    def test_requires_argument(self, runner):
        result = runner.invoke(main, ["decode"])
        assert result.exit_code == 2


# =============================================================================
# Encode Command
# =============================================================================

class TestEncodeCommand:

    def test_encode(self, runner):
        result = runner.invoke(main, ["encode", "D1DD:14", "94A7?03:02"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0].split() == ["D1DD:14", "->", "GOISIP"]
        assert lines[1].split() == ["94A7?03:02", "->", "ZEZPYGLA"]

    def test_show_alternate(self, runner):
        result = runner.invoke(main, ["-a", "encode", "94A7?03:02"])
        assert result.exit_code == 0
        assert "ZEZPYGLA" in result.output
        assert "alternate: ZEXPYGLA" in result.output

    def test_show_alternate_from_environment(self, runner):
        result = runner.invoke(
            main, ["encode", "D1DD:14"], env={"NESGENIE_SHOW_ALTERNATE": "yes"}
        )
        assert "alternate: GOSSIP" in result.output

    def test_malformed_patch(self, runner):
        result = runner.invoke(main, ["encode", "D1DD"])
        assert result.exit_code == ExitCode.INVALID_INPUT
        assert "invalid patch" in result.output

    def test_address_below_cartridge_space(self, runner):
        result = runner.invoke(main, ["encode", "0100:FF"])
        assert result.exit_code == ExitCode.INVALID_INPUT
        assert "address" in result.output


# =============================================================================
# Alternate and Validate Commands
# =============================================================================

class TestAlternateCommand:

    def test_alternate(self, runner):
        result = runner.invoke(main, ["alternate", "GOSSIP", "ZEZPYGLA"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0].split() == ["GOSSIP", "->", "GOISIP"]
        assert lines[1].split() == ["ZEZPYGLA", "->", "ZEXPYGLA"]

    def test_invalid_code(self, runner):
        result = runner.invoke(main, ["alternate", "GOSS"])
        assert result.exit_code == ExitCode.INVALID_INPUT


class TestValidateCommand:

    def test_all_valid(self, runner):
        result = runner.invoke(main, ["validate", "GOSSIP", "ZEXPYGLA"])
        assert result.exit_code == 0
        assert result.output.count("valid") == 2
        assert "invalid" not in result.output

    def test_some_invalid(self, runner):
        result = runner.invoke(main, ["validate", "GOSSIP", "GOSSIPS"])
        assert result.exit_code == ExitCode.INVALID_INPUT
        lines = result.output.splitlines()
        assert lines[0].split() == ["GOSSIP", "valid"]
        assert "invalid" in lines[1]


# =============================================================================
# Configuration
# =============================================================================

class TestCodecConfig:

    def test_defaults(self):
        config = CodecConfig()
        assert not config.strict
        assert not config.show_alternate
        assert not config.verbose

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("NESGENIE_STRICT", "true")
        monkeypatch.setenv("NESGENIE_SHOW_ALTERNATE", "ON")
        monkeypatch.setenv("NESGENIE_VERBOSE", "0")
        config = CodecConfig.from_env()
        assert config.strict
        assert config.show_alternate
        assert not config.verbose

    def test_from_env_unset(self, monkeypatch):
        for name in ("NESGENIE_STRICT", "NESGENIE_SHOW_ALTERNATE", "NESGENIE_VERBOSE"):
            monkeypatch.delenv(name, raising=False)
        assert CodecConfig.from_env() == CodecConfig()

    def test_prepare_code(self):
        assert CodecConfig().prepare_code(" zexpygla\t") == "ZEXPYGLA"
        assert CodecConfig(strict=True).prepare_code(" zexpygla") == " zexpygla"
