"""Schema registry for the RMC XML dialect."""

from .catalog import RMC_SCHEMA
from .registry import ROOT, ElementDocumentation, SchemaNode, SchemaRegistry

__all__ = [
    "RMC_SCHEMA",
    "ROOT",
    "ElementDocumentation",
    "SchemaNode",
    "SchemaRegistry",
]
