"""
WCAG MCP Server.

Exposes WCAG content as MCP resources using the FastMCP framework over
STDIO:

- ``wcag://principles-guidelines``: principles, guidelines and success criteria
- ``wcag://criteria/{criterion_id}``: a success criterion
- ``wcag://understanding/{criterion_id}``: an understanding document
- ``wcag://techniques/{technique_id}``: a technique
"""

import asyncio
import logging
from typing import Dict, List, Optional

from fastmcp import FastMCP

from wcag_backend.core import ResourceFacade, resource_uri
from wcag_backend.core.resource_facade import (
    CRITERION_TEMPLATE,
    OUTLINE_RESOURCE,
    TECHNIQUE_TEMPLATE,
    UNDERSTANDING_TEMPLATE,
)
from wcag_backend.exceptions import WcagServerError
from wcag_backend.models import DocumentKind
from wcag_backend.utils.config import ConfigManager
from wcag_backend.utils.logging_config import LoggingManager

from .protocol.error_handler import ErrorHandler

logger = logging.getLogger(__name__)


class MCPServer:
    """
    WCAG MCP Server.

    Registers the static outline resource and the three resource templates
    on a FastMCP instance and routes every read through the resource façade.
    """

    def __init__(
        self,
        name: str = "wcag-server",
        version: str = "0.1.0",
        facade: Optional[ResourceFacade] = None,
        config_manager: Optional[ConfigManager] = None,
    ):
        """
        Initialize the MCP server.

        Args:
            name: Server name
            version: Server version
            facade: Resource façade (default: built from configuration)
            config_manager: Configuration used when no façade is given
        """
        self.name = name
        self.version = version

        if facade is None:
            facade = ResourceFacade.from_config(config_manager or ConfigManager())
        self.facade = facade
        self.error_handler = ErrorHandler()

        self.mcp = FastMCP(name)
        self._resources: Dict[str, str] = {}
        self._setup_resources()

        logger.info(f"MCPServer '{name}' v{version} initialized")

    def read_resource(self, uri: str) -> str:
        """
        Read a resource through the façade.

        Raises:
            ResourceError: With the error kind and identifier in its message
        """
        try:
            return self.facade.read(uri).text
        except WcagServerError as e:
            raise self.error_handler.to_resource_error(e) from e

    def get_resource_uris(self) -> List[str]:
        """URIs and URI templates registered on the server."""
        return list(self._resources.values())

    def get_supported_transports(self) -> List[str]:
        return ["stdio"]

    async def run_stdio(self) -> None:
        """Run the server over STDIO until the client disconnects."""
        logger.info("[Setup] Starting WCAG MCP server...")
        try:
            await self.mcp.run_async(transport="stdio")
        except KeyboardInterrupt:
            logger.info("Server interrupted by user")
        except Exception as e:
            logger.error(f"[Setup] Failed to start server: {e}")
            raise

    def _setup_resources(self) -> None:
        """Register the outline resource and the document templates."""
        logger.debug("Setting up resources")

        @self.mcp.resource(
            OUTLINE_RESOURCE.uri,
            name=OUTLINE_RESOURCE.name,
            description=OUTLINE_RESOURCE.description,
            mime_type=OUTLINE_RESOURCE.mime_type,
        )
        def principles_guidelines() -> str:
            return self.read_resource(resource_uri(DocumentKind.OUTLINE))

        @self.mcp.resource(
            CRITERION_TEMPLATE.uri,
            name=CRITERION_TEMPLATE.name,
            description=CRITERION_TEMPLATE.description,
            mime_type=CRITERION_TEMPLATE.mime_type,
        )
        def criterion(criterion_id: str) -> str:
            return self.read_resource(resource_uri(DocumentKind.CRITERION, criterion_id))

        @self.mcp.resource(
            UNDERSTANDING_TEMPLATE.uri,
            name=UNDERSTANDING_TEMPLATE.name,
            description=UNDERSTANDING_TEMPLATE.description,
            mime_type=UNDERSTANDING_TEMPLATE.mime_type,
        )
        def understanding(criterion_id: str) -> str:
            return self.read_resource(resource_uri(DocumentKind.UNDERSTANDING, criterion_id))

        @self.mcp.resource(
            TECHNIQUE_TEMPLATE.uri,
            name=TECHNIQUE_TEMPLATE.name,
            description=TECHNIQUE_TEMPLATE.description,
            mime_type=TECHNIQUE_TEMPLATE.mime_type,
        )
        def technique(technique_id: str) -> str:
            return self.read_resource(resource_uri(DocumentKind.TECHNIQUE, technique_id))

        self._resources["principles_guidelines"] = OUTLINE_RESOURCE.uri
        self._resources["criterion"] = CRITERION_TEMPLATE.uri
        self._resources["understanding"] = UNDERSTANDING_TEMPLATE.uri
        self._resources["technique"] = TECHNIQUE_TEMPLATE.uri

        logger.debug("Resources setup complete")


def create_server(config_manager: Optional[ConfigManager] = None) -> MCPServer:
    """
    Factory function to create and configure an MCP server.

    Returns:
        Configured MCPServer instance
    """
    config_manager = config_manager or ConfigManager()
    return MCPServer(
        name=config_manager.get("server.name", "wcag-server"),
        version=config_manager.get("server.version", "0.1.0"),
        config_manager=config_manager,
    )


async def main():
    """
    Main entry point for running the MCP server.
    """
    config_manager = ConfigManager()
    LoggingManager.from_config(config_manager)

    server = create_server(config_manager)
    await server.run_stdio()


def run() -> None:
    """Console script entry point."""
    try:
        asyncio.run(main())
    except Exception as e:
        logger.critical(f"[Fatal] Server error: {e}")
        raise SystemExit(1) from e


if __name__ == "__main__":
    run()
