"""
rmcxml CLI entry point.

Dispatches to the ``lsp`` and ``check`` subcommands after resolving the
workspace configuration and configuring the ``rmcxml`` logger.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from rmcxml import __version__
from rmcxml.config import ServerConfig, load_config
from rmcxml.errors import ConfigError

from .commands import cmd_check, cmd_lsp
from .errors import CLIConfigError, handle_cli_exception

_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warn': logging.WARNING,
    'warning': logging.WARNING,
    'error': logging.ERROR,
}


def _configure_logging(args, config: ServerConfig) -> None:
    """Configure the ``rmcxml`` logger from the CLI flag or resolved config."""
    log_level = (getattr(args, 'log_level', None) or config.log_level or 'info').lower()
    numeric_level = _LEVELS.get(log_level, logging.INFO)

    logger = logging.getLogger('rmcxml')
    logger.setLevel(numeric_level)

    # stdout belongs to the protocol stream when serving over stdio
    if not logger.handlers:
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        if config.log_file is not None:
            file_handler = logging.FileHandler(config.log_file, encoding='utf-8')
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='rmcxml',
        description='Language tooling for RMC XML documents',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument(
        '--log-level',
        choices=sorted(_LEVELS),
        help='Logging level (default: from config or RMC_XML_LOG_LEVEL, else info)',
    )
    parser.add_argument(
        '--workspace',
        help='Directory holding rmcxml.toml or pyproject.toml (default: current directory)',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Show tracebacks on failure',
    )

    subparsers = parser.add_subparsers(dest='command', title='commands')

    lsp_parser = subparsers.add_parser('lsp', help='Start the language server')
    lsp_parser.add_argument('--tcp', action='store_true', help='Serve over TCP instead of stdio')
    lsp_parser.add_argument('--host', default='127.0.0.1', help='TCP host (default: 127.0.0.1)')
    lsp_parser.add_argument('--port', type=int, default=2087, help='TCP port (default: 2087)')
    lsp_parser.set_defaults(func=cmd_lsp)

    check_parser = subparsers.add_parser('check', help='Validate RMC XML files and print findings')
    check_parser.add_argument('files', nargs='+', help='Files to validate')
    check_parser.set_defaults(func=cmd_check)

    return parser


def main(argv: Optional[list] = None) -> None:
    """
    Main CLI entrypoint.

    Args:
        argv: Command-line arguments (None uses sys.argv[1:])
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, 'func'):
        parser.print_help()
        sys.exit(1)

    workspace_root = Path(args.workspace).resolve() if args.workspace else Path.cwd()
    try:
        config = load_config(workspace_root)
    except ConfigError as exc:
        handle_cli_exception(CLIConfigError(exc.message, hint=exc.hint), verbose=args.verbose)

    args.server_config = config
    _configure_logging(args, config)

    args.func(args)


__all__ = ["main", "build_parser"]


if __name__ == '__main__':  # pragma: no cover
    main()
