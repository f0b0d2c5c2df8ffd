"""Language Server Protocol implementation for RMC XML documents."""

from .server import RmcXmlLanguageServer, create_server
from .workspace import WorkspaceIndex

__all__ = [
    "RmcXmlLanguageServer",
    "WorkspaceIndex",
    "create_server",
]
