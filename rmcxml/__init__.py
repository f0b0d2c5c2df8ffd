"""
RMC XML language tooling.

This package implements editor assistance for RMC resource catalog
documents (``*.rmc.xml``): context-aware completion, hover
documentation and schema diagnostics.  None of it builds a DOM.  Every
feature works from lexical scans of the raw buffer so that it keeps
behaving sensibly while a document is half typed and therefore usually
malformed.

The code is organised into several modules:

* ``schema`` – the fixed, in-memory schema registry for the dialect
  (allowed children, attributes, required attributes, enumerations and
  documentation).
* ``lsp`` – the language server core: document buffers, the tolerant
  tag scanner, the cursor context resolver and the completion,
  validation and hover engines, wired into a pygls server.
* ``cli`` – a command line interface that starts the server or checks
  files from a terminal.
"""

import re
from pathlib import Path
from importlib import metadata as _metadata


def _local_version() -> str | None:
    root = Path(__file__).resolve().parents[1]
    pyproject = root / "pyproject.toml"
    if not pyproject.exists():
        return None
    try:
        text = pyproject.read_text(encoding="utf-8")
    except OSError:  # pragma: no cover - IO errors should not break imports
        return None
    match = re.search(r"^version\s*=\s*\"([^\"]+)\"", text, flags=re.MULTILINE)
    if match:
        return match.group(1)
    return None


try:  # pragma: no cover - metadata fallback for editable installs
    __version__ = _metadata.version("rmc-xml-lsp")
except _metadata.PackageNotFoundError:  # pragma: no cover - source tree
    __version__ = _local_version() or "0.3.0"
else:  # pragma: no cover - version override for in-repo runs
    __version__ = _local_version() or __version__

__all__ = ["__version__"]
