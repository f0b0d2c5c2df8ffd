"""
Tests for the rmcxml command line interface.

Covers argument parsing, the ``check`` command output and exit status,
configuration errors and error formatting.
"""

import logging
from pathlib import Path

import pytest

from rmcxml import __version__
from rmcxml.cli import _configure_logging, build_parser, main
from rmcxml.cli.errors import CLIRuntimeError, format_cli_error
from rmcxml.config import ServerConfig
from rmcxml.errors import ConfigError

DATA_DIR = Path(__file__).resolve().parents[1] / "lsp" / "data"


@pytest.fixture(autouse=True)
def _isolated_logger():
    """Leave the package logger as it was found."""
    logger = logging.getLogger("rmcxml")
    handlers = list(logger.handlers)
    level, propagate = logger.level, logger.propagate
    for handler in handlers:
        logger.removeHandler(handler)
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate


class TestParser:
    """Argument parsing."""

    def test_lsp_defaults(self):
        args = build_parser().parse_args(["lsp"])
        assert args.tcp is False
        assert (args.host, args.port) == ("127.0.0.1", 2087)

    def test_check_requires_files(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["check"])

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 1
        assert "usage:" in capsys.readouterr().out


class TestCheckCommand:
    """The ``check`` subcommand."""

    def test_valid_file_exits_cleanly(self, tmp_path, capsys):
        main(["--workspace", str(tmp_path), "check", str(DATA_DIR / "valid.rmc.xml")])
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "no errors" in captured.err

    def test_findings_are_printed_and_fail(self, tmp_path, capsys):
        target = str(DATA_DIR / "unbalanced.rmc.xml")
        with pytest.raises(SystemExit) as exc_info:
            main(["--workspace", str(tmp_path), "check", target])
        assert exc_info.value.code == 1
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            f"{target}:5:1: error: Closing tag </OmegaA> has no matching opening tag [unmatched-closing-tag]",
            f"{target}:1:1: error: Unclosed tag: BetaEntry [unclosed-tag]",
        ]

    def test_warnings_alone_do_not_fail(self, tmp_path, capsys):
        (tmp_path / "rmcxml.toml").write_text("require_xml_declaration = true\n", encoding="utf-8")
        document = tmp_path / "doc.rmc.xml"
        document.write_text('<EtaRsccat UpsilonProduct="p"></EtaRsccat>\n', encoding="utf-8")
        main(["--workspace", str(tmp_path), "check", str(document)])
        out = capsys.readouterr().out
        assert "warning: XML document should start with XML declaration" in out

    def test_missing_file_is_reported(self, tmp_path, capsys, monkeypatch):
        monkeypatch.delenv("RMC_XML_RERAISE", raising=False)
        with pytest.raises(SystemExit) as exc_info:
            main(["--workspace", str(tmp_path), "check", str(tmp_path / "absent.xml")])
        assert exc_info.value.code == 1
        assert "CLI_RUNTIME_ERROR" in capsys.readouterr().err

    def test_bad_config_is_reported(self, tmp_path, capsys, monkeypatch):
        monkeypatch.delenv("RMC_XML_RERAISE", raising=False)
        (tmp_path / "rmcxml.toml").write_text('check_structure = "often"\n', encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main(["--workspace", str(tmp_path), "check", str(DATA_DIR / "valid.rmc.xml")])
        assert exc_info.value.code == 1
        assert "CLI_CONFIG_ERROR" in capsys.readouterr().err


class TestLogging:
    """Logger configuration."""

    def test_flag_overrides_config_level(self):
        args = build_parser().parse_args(["--log-level", "debug", "lsp"])
        _configure_logging(args, ServerConfig(log_level="error"))
        logger = logging.getLogger("rmcxml")
        assert logger.level == logging.DEBUG
        assert logger.propagate is False

    def test_log_file_handler(self, tmp_path):
        logger = logging.getLogger("rmcxml")
        log_file = tmp_path / "server.log"
        args = build_parser().parse_args(["lsp"])
        _configure_logging(args, ServerConfig(log_file=log_file))
        logging.getLogger("rmcxml.lsp.workspace").info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in log_file.read_text(encoding="utf-8")


class TestErrorFormatting:
    """format_cli_error output."""

    def test_cli_error_with_hint(self):
        message = format_cli_error(CLIRuntimeError("Cannot read x", hint="Check it"))
        assert message == "Error [CLI_RUNTIME_ERROR]: Cannot read x\nHint: Check it"

    def test_library_error(self):
        message = format_cli_error(ConfigError("bad value", uri="rmcxml.toml"))
        assert message == "Error: rmcxml.toml: [config-error] bad value"

    def test_unexpected_error(self):
        assert format_cli_error(ValueError("nope")) == "Error: ValueError: nope"
