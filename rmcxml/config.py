"""Configuration support for the RMC XML language server and CLI."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from rmcxml.errors import ConfigError

CONFIG_FILENAME = "rmcxml.toml"
PYPROJECT_TABLE = "rmcxml"
ENV_PREFIX = "RMC_XML_"

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ServerConfig:
    """Resolved settings shared by the server and the ``check`` command."""

    diagnostic_source: str = "rmc-xml-lsp"
    check_structure: bool = True
    require_xml_declaration: bool = False
    log_level: str = "info"
    log_file: Optional[Path] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, origin: str = "configuration") -> "ServerConfig":
        return cls().with_overrides(data, origin=origin)

    def with_overrides(self, data: Mapping[str, Any], *, origin: str = "configuration") -> "ServerConfig":
        """Return a copy updated from *data*; unknown keys are ignored."""

        known = {item.name for item in fields(self)}
        updates: Dict[str, Any] = {}
        for raw_key, value in data.items():
            key = str(raw_key).replace("-", "_")
            if key not in known or value is None:
                continue
            updates[key] = _coerce(key, value, origin)
        return replace(self, **updates)


def _coerce(key: str, value: Any, origin: str) -> Any:
    if key in {"check_structure", "require_xml_declaration"}:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in _TRUE_STRINGS | _FALSE_STRINGS:
            return value.lower() in _TRUE_STRINGS
        raise ConfigError(f"'{key}' in {origin} must be a boolean, got {value!r}")
    if key == "log_file":
        if isinstance(value, (str, os.PathLike)):
            return Path(value)
        raise ConfigError(f"'{key}' in {origin} must be a path, got {value!r}")
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' in {origin} must be a string, got {value!r}")
    return value.lower() if key == "log_level" else value


def _read_toml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Cannot read {path}: {exc}", hint="Fix or remove the file") from exc


def _file_settings(root: Path) -> Tuple[Dict[str, Any], str]:
    dedicated = root / CONFIG_FILENAME
    if dedicated.is_file():
        return _read_toml(dedicated), str(dedicated)
    pyproject = root / "pyproject.toml"
    if pyproject.is_file():
        table = _read_toml(pyproject).get("tool", {}).get(PYPROJECT_TABLE)
        if isinstance(table, dict):
            return table, f"{pyproject} [tool.{PYPROJECT_TABLE}]"
    return {}, "defaults"


def _env_settings(environ: Mapping[str, str]) -> Dict[str, str]:
    settings: Dict[str, str] = {}
    for item in fields(ServerConfig):
        value = environ.get(ENV_PREFIX + item.name.upper())
        if value is not None:
            settings[item.name] = value
    return settings


def load_config(root: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> ServerConfig:
    """Resolve settings from ``rmcxml.toml`` or ``pyproject.toml``, then the environment."""

    root = root or Path.cwd()
    environ = os.environ if environ is None else environ
    data, origin = _file_settings(root)
    config = ServerConfig.from_mapping(data, origin=origin)
    return config.with_overrides(_env_settings(environ), origin="environment")


__all__ = ["ServerConfig", "load_config", "CONFIG_FILENAME", "ENV_PREFIX"]
