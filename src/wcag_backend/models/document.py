"""
Document kinds, version tags and resolved locations.

These types describe where a WCAG document lives in the corpus. They carry
no behaviour beyond simple conversions and are shared by the document store,
the identifier resolver and the resource façade.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Tuple


class DocumentKind(Enum):
    """Closed set of document kinds; selects the resolution strategy."""
    OUTLINE = "outline"
    CRITERION = "criterion"
    UNDERSTANDING = "understanding"
    TECHNIQUE = "technique"

    @property
    def label(self) -> str:
        """Human readable label used in log and error messages."""
        return _KIND_LABELS[self]


_KIND_LABELS = {
    DocumentKind.OUTLINE: "Principles and guidelines",
    DocumentKind.CRITERION: "Criterion",
    DocumentKind.UNDERSTANDING: "Understanding document",
    DocumentKind.TECHNIQUE: "Technique",
}

# Tried in this order; the earliest version holding an id wins.
SUPPORTED_VERSIONS: Tuple[str, ...] = ("20", "21", "22")

MARKDOWN_MIME_TYPE = "text/markdown"


@dataclass(frozen=True)
class ResolvedLocation:
    """
    A document that was found to exist, plus its raw markup.

    ``namespace`` is the version tag for criteria and understanding
    documents, the technology directory for techniques and empty for the
    outline.
    """
    kind: DocumentKind
    namespace: str
    identifier: str
    path: Path
    content: str = ""


@dataclass(frozen=True)
class ResourceContent:
    """Normalized resource returned to the transport."""
    uri: str
    text: str
    mime_type: str = MARKDOWN_MIME_TYPE
