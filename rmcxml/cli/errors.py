"""
Error handling for the rmcxml CLI.

Commands raise :class:`CLIError` subclasses; :func:`handle_cli_exception`
turns any exception into a short message on stderr and a non-zero exit.
"""

import os
import sys
import traceback
from typing import Any, Dict, Optional

from rmcxml.errors import RmcError

# Maximum length for traceback output in CLI
_CLI_TRACE_LIMIT = 4000


class CLIError(Exception):
    """
    Base exception for all CLI operations.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code
        hint: Optional suggestion for resolving the error
        context: Additional metadata about the error
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        hint: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.hint = hint
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class CLIConfigError(CLIError):
    """Configuration file or environment errors."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_CONFIG_ERROR')
        super().__init__(message, **kwargs)


class CLIRuntimeError(CLIError):
    """Errors during command execution."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_RUNTIME_ERROR')
        super().__init__(message, **kwargs)


def format_cli_error(exc: BaseException, *, verbose: bool = False) -> str:
    """
    Format an exception for terminal output.

    CLI and library errors print their message, code and hint; anything
    else prints its type and message.  With *verbose* the traceback is
    appended, truncated to a fixed size.
    """
    if isinstance(exc, CLIError):
        lines = [f"Error [{exc.code}]: {exc.message}"]
        if exc.hint:
            lines.append(f"Hint: {exc.hint}")
    elif isinstance(exc, RmcError):
        lines = [f"Error: {exc.format()}"]
    else:
        lines = [f"Error: {exc.__class__.__name__}: {exc}"]
    if verbose:
        trace = traceback.format_exc().strip()
        if len(trace) > _CLI_TRACE_LIMIT:
            trace = f"{trace[:_CLI_TRACE_LIMIT - 3]}..."
        lines.append(trace)
    return "\n".join(lines)


def _env_flag(name: str) -> bool:
    val = os.getenv(name)
    if val is None:
        return False
    return val.strip().lower() in {"1", "true", "yes", "on"}


def cli_verbose_enabled(verbose_flag: bool = False) -> bool:
    """Explicit flag or the RMC_XML_VERBOSE/RMC_XML_DEBUG environment variables."""
    return verbose_flag or _env_flag("RMC_XML_VERBOSE") or _env_flag("RMC_XML_DEBUG")


def handle_cli_exception(
    exc: BaseException,
    *,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """
    Print *exc* and exit with *exit_code*.

    Note:
        This function calls sys.exit() and does not return.
    """
    if _env_flag("RMC_XML_RERAISE"):
        raise exc
    print(format_cli_error(exc, verbose=cli_verbose_enabled(verbose)), file=sys.stderr)
    sys.exit(exit_code)


__all__ = [
    "CLIError",
    "CLIConfigError",
    "CLIRuntimeError",
    "format_cli_error",
    "handle_cli_exception",
]
