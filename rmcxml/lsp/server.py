"""pygls based Language Server entrypoint."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from lsprotocol.types import InitializedParams, InitializeParams
from pygls.server import LanguageServer

from rmcxml import __version__
from rmcxml.config import ServerConfig, load_config
from rmcxml.errors import ConfigError

from .handlers import register_all
from .workspace import WorkspaceIndex

logger = logging.getLogger(__name__)


class RmcXmlLanguageServer(LanguageServer):
    """Concrete LanguageServer holding the RMC XML workspace state."""

    def __init__(self, config: Optional[ServerConfig] = None) -> None:
        super().__init__(name="rmc-xml-lsp", version=__version__)
        self.workspace_index = WorkspaceIndex(config=config)
        self.initialization_options: Dict[str, Any] = {}
        register_all(self)
        self._register_lifecycle_handlers()

    def reload_config(self) -> ServerConfig:
        """Re-read settings for the workspace root and apply client overrides."""

        workspace = self.workspace_index
        config = load_config(workspace.root_path).with_overrides(
            self.initialization_options, origin="initializationOptions"
        )
        workspace.configure(config)
        return config

    def _register_lifecycle_handlers(self) -> None:
        workspace = self.workspace_index

        @self.feature("initialize")
        def _on_initialize(ls: "RmcXmlLanguageServer", params: InitializeParams) -> None:
            options = params.initialization_options
            if isinstance(options, dict):
                ls.initialization_options = dict(options)

        @self.feature("initialized")
        async def _on_initialized(ls: "RmcXmlLanguageServer", params: InitializedParams) -> None:  # noqa: ARG001
            workspace.set_root(ls.workspace.root_uri)
            try:
                ls.reload_config()
            except ConfigError as exc:
                logger.error("Keeping previous settings: %s", exc.format())
            logger.info("RMC XML workspace initialised at %s", workspace.root_path)


def create_server(config: Optional[ServerConfig] = None) -> RmcXmlLanguageServer:
    return RmcXmlLanguageServer(config)


def main() -> None:
    server = create_server()
    logger.info("Starting RMC XML LSP (pid=%s)", os.getpid())
    server.start_io()


if __name__ == "__main__":  # pragma: no cover
    main()
