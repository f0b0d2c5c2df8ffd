"""
Subcommand implementations for the rmcxml CLI.

``lsp`` launches the language server; ``check`` runs the same validation
the server publishes as diagnostics over files on disk.
"""

import argparse
import os
import sys
from pathlib import Path
from typing import List

from lsprotocol.types import DiagnosticSeverity

from rmcxml.config import ServerConfig
from rmcxml.lsp.protocol import ValidationError
from rmcxml.lsp.workspace import WorkspaceIndex

from .errors import CLIRuntimeError, handle_cli_exception


def _config(args: argparse.Namespace) -> ServerConfig:
    return getattr(args, "server_config", None) or ServerConfig()


def cmd_lsp(args: argparse.Namespace) -> None:
    """
    Handle the 'lsp' subcommand.

    Serves over stdio unless ``--tcp`` is given.  Startup messages go to
    stderr because stdout carries the protocol stream.
    """
    try:
        from rmcxml.lsp.server import create_server

        server = create_server(_config(args))
        print(f"Starting RMC XML language server (pid={os.getpid()})", file=sys.stderr)
        try:
            if getattr(args, "tcp", False):
                server.start_tcp(args.host, args.port)
            else:
                server.start_io()
        except KeyboardInterrupt:
            print("Language server interrupted by user.", file=sys.stderr)
        except Exception as exc:
            raise CLIRuntimeError(
                f"Language server stopped unexpectedly: {exc}",
            ) from exc
    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))


def format_finding(path: str, error: ValidationError) -> str:
    start = error.range.start
    severity = DiagnosticSeverity(error.severity).name.lower()
    suffix = f" [{error.code}]" if error.code else ""
    return f"{path}:{start.line + 1}:{start.character + 1}: {severity}: {error.message}{suffix}"


def check_file(workspace: WorkspaceIndex, path: Path) -> List[ValidationError]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CLIRuntimeError(f"Cannot read {path}: {exc}", hint="Check the path and file encoding") from exc
    uri = path.resolve().as_uri()
    try:
        return workspace.open_document(uri, text, 1)
    finally:
        workspace.close_document(uri)


def cmd_check(args: argparse.Namespace) -> None:
    """
    Handle the 'check' subcommand.

    Prints one line per finding and exits with status 1 when any finding
    has error severity.
    """
    try:
        workspace = WorkspaceIndex(config=_config(args))
        failed = False
        for raw in args.files:
            findings = check_file(workspace, Path(raw))
            for error in findings:
                print(format_finding(raw, error))
            failed = failed or any(error.severity == DiagnosticSeverity.Error for error in findings)
        if not failed:
            print(f"Checked {len(args.files)} file(s): no errors", file=sys.stderr)
    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))
    else:
        if failed:
            sys.exit(1)


__all__ = ["cmd_lsp", "cmd_check", "check_file", "format_finding"]
