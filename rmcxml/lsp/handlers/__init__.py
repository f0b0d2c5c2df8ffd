"""Feature handlers wired onto the language server at construction time."""

from __future__ import annotations

from . import completion, diagnostics, hover


def register_all(server) -> None:
    """Register every feature handler on *server*."""
    for module in (diagnostics, completion, hover):
        module.register(server)


__all__ = ["register_all"]
