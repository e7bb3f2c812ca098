"""
Identifier resolution for WCAG documents.

Maps a document kind and identifier to a concrete location in the
document store. Criteria and understanding documents fan out over the
supported versions; techniques are mapped to a technology directory by the
prefix of their identifier.

Version policy: versions are tried in ascending order and the first
version holding the identifier wins. When the same identifier exists in more
than one version, newer content is never returned.
"""

import logging
from dataclasses import replace
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple

from ..exceptions import (
    DocumentNotFoundError,
    InvalidIdentifierError,
    InvalidRequestError,
    UnknownPrefixError,
)
from ..models import DocumentKind, ResolvedLocation, SUPPORTED_VERSIONS
from .document_store import DocumentStore

logger = logging.getLogger(__name__)


TECHNIQUE_TECHNOLOGIES: Mapping[str, str] = MappingProxyType({
    "ARIA": "aria",
    "C": "css",
    "F": "failures",
    "FLASH": "flash",
    "G": "general",
    "H": "html",
    "PDF": "pdf",
    "SCR": "client-side-script",
    "SL": "silverlight",
    "SM": "smil",
    "SVR": "server-side-script",
    "T": "text",
})

# Multi-character prefixes, longest first, so "FLASH" beats "F" and "SCR" beats "S".
MULTI_CHARACTER_PREFIXES: Tuple[str, ...] = tuple(
    sorted((p for p in TECHNIQUE_TECHNOLOGIES if len(p) > 1), key=len, reverse=True)
)


def technique_prefix(
    technique_id: str,
    candidates: Sequence[str] = MULTI_CHARACTER_PREFIXES,
) -> str:
    """
    Derive the prefix of a technique identifier.

    Args:
        technique_id: Technique identifier such as ``SCR21`` or ``H37``
        candidates: Multi-character prefixes tested in order

    Returns:
        The matching multi-character prefix, else the leading uppercase letter

    Raises:
        InvalidIdentifierError: If the identifier does not start with an
            uppercase letter
    """
    for candidate in candidates:
        if technique_id.startswith(candidate):
            return candidate

    first = technique_id[:1]
    if first.isascii() and first.isupper():
        return first

    raise InvalidIdentifierError(technique_id, "Invalid technique ID format")


def technology_for(
    technique_id: str,
    table: Mapping[str, str] = TECHNIQUE_TECHNOLOGIES,
) -> str:
    """
    Map a technique identifier to its technology directory.

    Raises:
        InvalidIdentifierError: If no prefix can be derived
        UnknownPrefixError: If the prefix is not in the table
    """
    if table is TECHNIQUE_TECHNOLOGIES:
        candidates = MULTI_CHARACTER_PREFIXES
    else:
        candidates = tuple(sorted((p for p in table if len(p) > 1), key=len, reverse=True))
    prefix = technique_prefix(technique_id, candidates)
    technology = table.get(prefix)
    if technology is None:
        raise UnknownPrefixError(prefix, technique_id)
    return technology


class IdentifierResolver:
    """
    Resolves logical identifiers against a document store.

    Resolution only checks for existence; the document is read once a
    location has been found.
    """

    def __init__(
        self,
        store: DocumentStore,
        versions: Sequence[str] = SUPPORTED_VERSIONS,
    ) -> None:
        self.store = store
        self.versions = tuple(versions)

    def resolve_outline(self) -> ResolvedLocation:
        """Locate and read the top-level guidelines document."""
        return self._fetch(self.locate_outline())

    def resolve_criterion(self, criterion_id: str) -> ResolvedLocation:
        """Locate and read a success criterion in the earliest version that has it."""
        return self._fetch(self.locate_versioned(DocumentKind.CRITERION, criterion_id))

    def resolve_understanding(self, criterion_id: str) -> ResolvedLocation:
        """Locate and read an understanding document in the earliest version that has it."""
        return self._fetch(self.locate_versioned(DocumentKind.UNDERSTANDING, criterion_id))

    def resolve_technique(self, technique_id: str) -> ResolvedLocation:
        """Locate and read a technique through its prefix's technology."""
        return self._fetch(self.locate_technique(technique_id))

    def resolve(self, kind: DocumentKind, identifier: Optional[str] = None) -> ResolvedLocation:
        """Dispatch to the resolution strategy for ``kind``."""
        if kind is DocumentKind.OUTLINE:
            return self.resolve_outline()
        if kind is DocumentKind.CRITERION:
            return self.resolve_criterion(identifier)
        if kind is DocumentKind.UNDERSTANDING:
            return self.resolve_understanding(identifier)
        return self.resolve_technique(identifier)

    def locate_outline(self) -> ResolvedLocation:
        """
        Locate the outline source.

        Raises:
            DocumentNotFoundError: If the corpus root or outline is missing
        """
        kind = DocumentKind.OUTLINE
        if not self.store.root_exists():
            logger.error(f"[File] Corpus root does not exist: {self.store.root}")
            raise DocumentNotFoundError("WCAG corpus root", str(self.store.root))
        if not self.store.exists(kind):
            raise DocumentNotFoundError(kind.label, str(self.store.path_for(kind)))
        return ResolvedLocation(kind, "", "", self.store.path_for(kind))

    def locate_versioned(self, kind: DocumentKind, identifier: str) -> ResolvedLocation:
        """
        Find the first version holding ``identifier`` for a versioned kind.

        Raises:
            InvalidRequestError: If the identifier is empty or malformed
            DocumentNotFoundError: If no version holds the identifier
        """
        _require_identifier(identifier)

        for version in self.versions:
            if self.store.exists(kind, version, identifier):
                logger.info(f"[File] Found {kind.label.lower()} {identifier} in version {version}")
                return ResolvedLocation(kind, version, identifier, self.store.path_for(kind, version, identifier))

        raise DocumentNotFoundError(kind.label, identifier)

    def locate_technique(self, technique_id: str) -> ResolvedLocation:
        """
        Find a technique in the technology directory for its prefix.

        Raises:
            InvalidIdentifierError: If the identifier has no letter-led prefix
            UnknownPrefixError: If the prefix has no technology mapping
            DocumentNotFoundError: If the technology has no such technique
        """
        _require_identifier(technique_id)
        kind = DocumentKind.TECHNIQUE

        technology = technology_for(technique_id)
        logger.info(f"[Technique] ID: {technique_id}, Technology: {technology}")

        if not self.store.exists(kind, technology, technique_id):
            raise DocumentNotFoundError(kind.label, technique_id)
        return ResolvedLocation(kind, technology, technique_id, self.store.path_for(kind, technology, technique_id))

    def _fetch(self, location: ResolvedLocation) -> ResolvedLocation:
        content = self.store.read(location.kind, location.namespace, location.identifier)
        return replace(location, content=content)


def _require_identifier(identifier: Optional[str]) -> None:
    if not identifier or not identifier.strip():
        raise InvalidRequestError("Missing document identifier", identifier)
