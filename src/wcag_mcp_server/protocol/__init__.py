"""
Protocol module for the WCAG MCP Server.

Contains error code mapping for MCP protocol compliance.
"""

from .error_handler import ErrorHandler, MCPErrorCode, ERROR_KIND_CODES, format_error_message

__all__ = [
    "ErrorHandler",
    "MCPErrorCode",
    "ERROR_KIND_CODES",
    "format_error_message",
]
