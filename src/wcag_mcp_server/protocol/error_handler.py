"""
Error Handler for the WCAG MCP Server.

Maps resolution error kinds to MCP/JSON-RPC error codes and converts them
into FastMCP resource errors that keep the kind and offending identifier
visible to clients.
"""

import logging
from enum import IntEnum
from typing import Any, Dict, Optional

from fastmcp.exceptions import ResourceError

from wcag_backend.exceptions import WcagServerError

logger = logging.getLogger(__name__)


class MCPErrorCode(IntEnum):
    """MCP protocol error codes."""

    # Standard JSON-RPC errors
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603

    # MCP resource errors
    RESOURCE_NOT_FOUND = -32002


ERROR_KIND_CODES = {
    "InvalidRequest": MCPErrorCode.INVALID_REQUEST,
    "NotFound": MCPErrorCode.RESOURCE_NOT_FOUND,
    "UnknownPrefix": MCPErrorCode.INVALID_PARAMS,
    "InternalError": MCPErrorCode.INTERNAL_ERROR,
}


class ErrorHandler:
    """
    Handles error management for MCP protocol.

    Provides error code lookup, categorization and error object formatting
    for resolution failures.
    """

    def __init__(self):
        """Initialize the error handler."""
        self.error_categories = {
            MCPErrorCode.PARSE_ERROR: "Parse Errors",
            MCPErrorCode.INVALID_REQUEST: "Invalid Request Errors",
            MCPErrorCode.METHOD_NOT_FOUND: "Method Not Found Errors",
            MCPErrorCode.INVALID_PARAMS: "Invalid Parameters Errors",
            MCPErrorCode.INTERNAL_ERROR: "Internal Errors",
            MCPErrorCode.RESOURCE_NOT_FOUND: "Resource Not Found Errors",
        }
        logger.debug("ErrorHandler initialized")

    def is_valid_error_code(self, code: int) -> bool:
        """Check if an error code is a known MCP error code."""
        try:
            MCPErrorCode(code)
            return True
        except ValueError:
            return False

    def get_error_category(self, code: int) -> Optional[str]:
        """Get the category name for an error code, or None if unknown."""
        try:
            return self.error_categories.get(MCPErrorCode(code))
        except ValueError:
            return None

    def get_error_code(self, error: Exception) -> MCPErrorCode:
        """Get the MCP error code for an exception."""
        if isinstance(error, WcagServerError):
            return ERROR_KIND_CODES.get(error.kind, MCPErrorCode.INTERNAL_ERROR)
        return MCPErrorCode.INTERNAL_ERROR

    def create_error_object(self, error: Exception) -> Dict[str, Any]:
        """
        Create a JSON-RPC error object for an exception.

        Args:
            error: Exception raised while serving a request

        Returns:
            Error object for JSON-RPC response
        """
        code = self.get_error_code(error)
        error_obj: Dict[str, Any] = {"code": int(code), "message": format_error_message(error)}

        if isinstance(error, WcagServerError):
            error_obj["data"] = error.to_dict()

        return error_obj

    def to_resource_error(self, error: Exception) -> ResourceError:
        """Convert an exception into a FastMCP resource error."""
        error_obj = self.create_error_object(error)
        logger.error(f"[MCP Error] {error_obj['code']} {error_obj['message']}")
        return ResourceError(error_obj["message"])


def format_error_message(error: Exception) -> str:
    """Prefix the message with the error kind, e.g. ``NotFound: Criterion not found: x``."""
    kind = error.kind if isinstance(error, WcagServerError) else "InternalError"
    return f"{kind}: {error}"
