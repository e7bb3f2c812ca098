"""Data models for WCAG content resolution."""

from .document import (
    DocumentKind,
    ResolvedLocation,
    ResourceContent,
    SUPPORTED_VERSIONS,
    MARKDOWN_MIME_TYPE,
)
from .outline import (
    CriterionRefNode,
    GuidelineNode,
    PrincipleNode,
    OutlineNode,
    CRITERION_URI_PREFIX,
    criterion_number,
)
from .criteria import CriterionRecord, CriteriaIndex

__all__ = [
    "DocumentKind",
    "ResolvedLocation",
    "ResourceContent",
    "SUPPORTED_VERSIONS",
    "MARKDOWN_MIME_TYPE",
    "CriterionRefNode",
    "GuidelineNode",
    "PrincipleNode",
    "OutlineNode",
    "CRITERION_URI_PREFIX",
    "criterion_number",
    "CriterionRecord",
    "CriteriaIndex",
]
