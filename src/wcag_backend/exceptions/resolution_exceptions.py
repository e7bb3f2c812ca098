"""
Resolution and transformation exceptions for the WCAG server.

Every failure that reaches a resource caller is one of the kinds defined
here. The ``kind`` attribute names the category reported to MCP clients and
the ``identifier`` attribute carries the offending id or URI.
"""

from typing import Optional


class WcagServerError(Exception):
    """Base exception for content resolution and transformation failures."""

    kind = "InternalError"

    def __init__(self, message: str, identifier: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.identifier = identifier

    def to_dict(self) -> dict:
        """Convert the error to a dictionary for protocol responses."""
        result = {"kind": self.kind, "message": self.message}
        if self.identifier is not None:
            result["identifier"] = self.identifier
        return result


class InvalidRequestError(WcagServerError):
    """Raised when a logical address does not match a known resource shape."""

    kind = "InvalidRequest"


class InvalidIdentifierError(InvalidRequestError):
    """Raised when an identifier is malformed for its document kind."""

    def __init__(self, identifier: str, reason: str = "Invalid identifier format") -> None:
        super().__init__(f"{reason}: {identifier}", identifier)


class DocumentNotFoundError(WcagServerError):
    """Raised when no document exists in any searched version or technology."""

    kind = "NotFound"

    def __init__(self, label: str, identifier: str) -> None:
        super().__init__(f"{label} not found: {identifier}", identifier)
        self.label = label


class UnknownPrefixError(WcagServerError):
    """Raised when a technique prefix has no technology mapping."""

    kind = "UnknownPrefix"

    def __init__(self, prefix: str, identifier: str) -> None:
        super().__init__(
            f"Unknown technique prefix: {prefix} (technique {identifier})",
            identifier,
        )
        self.prefix = prefix


class InternalServerError(WcagServerError):
    """Raised when a collaborator fails unexpectedly while serving a request."""

    kind = "InternalError"

    def __init__(
        self,
        message: str,
        identifier: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, identifier)
        self.original_exception = original_exception
