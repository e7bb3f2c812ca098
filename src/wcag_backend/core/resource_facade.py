"""
Resource façade for WCAG content.

Maps the four ``wcag://`` address shapes to the resolver, extractor and
transformer. The façade validates request shape and dispatches; it performs
no transformation itself and keeps no state between requests.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from ..exceptions import InternalServerError, InvalidRequestError, WcagServerError
from ..models import DocumentKind, MARKDOWN_MIME_TYPE, ResourceContent
from .criteria_index import load_criteria_index
from .document_store import DocumentStore
from .document_transformer import DEFAULT_STYLE_POLICY, DocumentTransformer, StylePolicy
from .identifier_resolver import IdentifierResolver
from .structural_extractor import StructuralExtractor, heading_title

logger = logging.getLogger(__name__)

URI_SCHEME = "wcag://"
OUTLINE_URI = "wcag://principles-guidelines"

ADDRESS_PATTERNS: Tuple[Tuple[DocumentKind, re.Pattern], ...] = (
    (DocumentKind.CRITERION, re.compile(r"^wcag://criteria/(?P<id>.+)$")),
    (DocumentKind.UNDERSTANDING, re.compile(r"^wcag://understanding/(?P<id>.+)$")),
    (DocumentKind.TECHNIQUE, re.compile(r"^wcag://techniques/(?P<id>[^/]+)$")),
)

_URI_TEMPLATES = {
    DocumentKind.CRITERION: "wcag://criteria/{criterion_id}",
    DocumentKind.UNDERSTANDING: "wcag://understanding/{criterion_id}",
    DocumentKind.TECHNIQUE: "wcag://techniques/{technique_id}",
}


@dataclass(frozen=True)
class ResourceDescriptor:
    """Catalogue entry for a static resource or a resource template."""
    uri: str
    name: str
    description: str
    mime_type: str = MARKDOWN_MIME_TYPE

    @property
    def is_template(self) -> bool:
        return "{" in self.uri

    def to_dict(self) -> Dict[str, str]:
        key = "uriTemplate" if self.is_template else "uri"
        return {key: self.uri, "name": self.name, "mimeType": self.mime_type, "description": self.description}


OUTLINE_RESOURCE = ResourceDescriptor(
    uri=OUTLINE_URI,
    name="WCAG Principles and Guidelines",
    description=(
        "The principles and guidelines of WCAG, including a hierarchical structure of principles, "
        "guidelines, and success criteria with their IDs. This resource provides all success "
        "criterion IDs needed for accessing specific criteria and understanding documents."
    ),
)

CRITERION_TEMPLATE = ResourceDescriptor(
    uri=_URI_TEMPLATES[DocumentKind.CRITERION],
    name="WCAG Success Criterion",
    description=(
        "A specific WCAG success criterion with detailed requirements. Note: You need to first "
        "check wcag://principles-guidelines to find the criterion ID you need."
    ),
)

UNDERSTANDING_TEMPLATE = ResourceDescriptor(
    uri=_URI_TEMPLATES[DocumentKind.UNDERSTANDING],
    name="WCAG Understanding Document",
    description=(
        "Understanding document for a specific WCAG success criterion, providing detailed "
        "explanations, examples, and implementation guidance. Note: You need to first check "
        "wcag://principles-guidelines to find the criterion ID you need."
    ),
)

TECHNIQUE_TEMPLATE = ResourceDescriptor(
    uri=_URI_TEMPLATES[DocumentKind.TECHNIQUE],
    name="WCAG Technique",
    description=(
        "A specific WCAG technique that provides detailed implementation guidance for meeting "
        "success criteria. Techniques are categorized by technology (HTML, CSS, ARIA, etc.) and "
        "identified by prefixes in their IDs."
    ),
)


def parse_address(uri: str) -> Tuple[DocumentKind, Optional[str]]:
    """
    Split a resource URI into its document kind and identifier.

    Raises:
        InvalidRequestError: If the URI matches none of the known shapes
    """
    if uri == OUTLINE_URI:
        return DocumentKind.OUTLINE, None

    for kind, pattern in ADDRESS_PATTERNS:
        match = pattern.match(uri or "")
        if match:
            return kind, match.group("id")

    raise InvalidRequestError(f"Invalid URI: {uri}", uri)


def resource_uri(kind: DocumentKind, identifier: Optional[str] = None) -> str:
    """Build the resource URI for a kind and identifier."""
    if kind is DocumentKind.OUTLINE:
        return OUTLINE_URI
    template = _URI_TEMPLATES[kind]
    return template[:template.index("{")] + (identifier or "")


class ResourceFacade:
    """
    Entry point for reading WCAG resources.

    Engine errors (``WcagServerError`` subclasses) pass through unchanged;
    any other failure raised by a collaborator is reported as an
    ``InternalServerError`` naming the requested URI.
    """

    def __init__(
        self,
        corpus_root: Union[str, Path],
        criteria_index_path: Optional[Union[str, Path]] = None,
        policy: StylePolicy = DEFAULT_STYLE_POLICY,
        store: Optional[DocumentStore] = None,
    ) -> None:
        self.store = store or DocumentStore(corpus_root)
        self.resolver = IdentifierResolver(self.store)
        self.transformer = DocumentTransformer(policy)
        self.criteria_index_path = criteria_index_path

    @classmethod
    def from_config(cls, config_manager) -> "ResourceFacade":
        """Create a façade from the corpus settings of a ConfigManager."""
        return cls(
            corpus_root=config_manager.get_path("corpus.root"),
            criteria_index_path=config_manager.get_path("corpus.criteria_index"),
        )

    def read(self, uri: str) -> ResourceContent:
        """Read any resource by URI."""
        logger.info(f"[Request] Reading resource: {uri}")
        kind, identifier = parse_address(uri)

        try:
            text = self._dispatch(kind, identifier)
        except WcagServerError:
            raise
        except Exception as e:
            logger.error(f"[Error] Failed to read resource {uri}: {e}", exc_info=True)
            raise InternalServerError(f"Failed to read resource {uri}: {e}", uri, e) from e

        return ResourceContent(uri=uri, text=text)

    def get_outline(self) -> str:
        """Principles, guidelines and numbered, linked success criteria."""
        location = self.resolver.resolve_outline()
        logger.info("[Conversion] Generating principles and guidelines with links to criteria")
        extractor = StructuralExtractor(
            criteria_index=load_criteria_index(self.criteria_index_path),
            title_lookup=self._criterion_title,
        )
        return extractor.build_outline(location.content)

    def get_criterion(self, criterion_id: str) -> str:
        logger.info(f"[Criteria] ID: {criterion_id}")
        location = self.resolver.resolve_criterion(criterion_id)
        logger.info("[Conversion] Converting success criterion to Markdown")
        return self.transformer.convert(location.content)

    def get_understanding(self, criterion_id: str) -> str:
        logger.info(f"[Understanding] ID: {criterion_id}")
        location = self.resolver.resolve_understanding(criterion_id)
        logger.info("[Conversion] Converting understanding document to Markdown")
        return self.transformer.convert(location.content)

    def get_technique(self, technique_id: str) -> str:
        logger.info(f"[Technique] ID: {technique_id}")
        location = self.resolver.resolve_technique(technique_id)
        logger.info("[Conversion] Converting technique to Markdown")
        return self.transformer.convert(location.content)

    def list_resources(self) -> List[ResourceDescriptor]:
        return [OUTLINE_RESOURCE]

    def list_resource_templates(self) -> List[ResourceDescriptor]:
        return [CRITERION_TEMPLATE, UNDERSTANDING_TEMPLATE, TECHNIQUE_TEMPLATE]

    def _dispatch(self, kind: DocumentKind, identifier: Optional[str]) -> str:
        if kind is DocumentKind.OUTLINE:
            return self.get_outline()
        if kind is DocumentKind.CRITERION:
            return self.get_criterion(identifier)
        if kind is DocumentKind.UNDERSTANDING:
            return self.get_understanding(identifier)
        return self.get_technique(identifier)

    def _criterion_title(self, criterion_id: str) -> str:
        location = self.resolver.resolve_criterion(criterion_id)
        return heading_title(location.content)
