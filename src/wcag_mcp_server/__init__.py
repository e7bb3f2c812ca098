"""
WCAG MCP Server package.

Serves WCAG principles, success criteria, understanding documents and
techniques as markdown MCP resources.
"""

from .server import MCPServer, create_server

__all__ = ["MCPServer", "create_server"]
