"""
Read-only access to an on-disk WCAG corpus.

The store owns path construction for every document kind. It performs
existence checks and reads, and enumerates namespaces for the offline
indexer. It holds no state beyond the corpus root.

Layout under the corpus root::

    guidelines/index.html                      outline
    guidelines/sc/<version>/<id>.html          success criteria
    understanding/<version>/<id>.html          understanding documents
    techniques/<technology>/<id>.html          techniques
"""

import errno
import logging
from pathlib import Path
from typing import List, Union

from ..exceptions import DocumentNotFoundError, InvalidRequestError
from ..models import DocumentKind

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIX = ".html"

# Errors meaning "no such document" for a well-formed but unusable file name.
_MISSING_ERRNOS = frozenset({errno.ENOENT, errno.ENOTDIR, errno.ENAMETOOLONG})

_KIND_DIRECTORIES = {
    DocumentKind.CRITERION: ("guidelines", "sc"),
    DocumentKind.UNDERSTANDING: ("understanding",),
    DocumentKind.TECHNIQUE: ("techniques",),
}

OUTLINE_RELATIVE_PATH = Path("guidelines") / "index.html"


class DocumentStore:
    """File-system backed document store rooted at a corpus directory."""

    def __init__(self, root: Union[str, Path], encoding: str = "utf-8") -> None:
        self.root = Path(root)
        self.encoding = encoding

    def path_for(self, kind: DocumentKind, namespace: str = "", identifier: str = "") -> Path:
        """
        Build the path of a document without touching the file system.

        Args:
            kind: Document kind
            namespace: Version tag or technology directory
            identifier: Document identifier (file stem)

        Returns:
            Path of the document under the corpus root

        Raises:
            InvalidRequestError: If the identifier or namespace would escape
                its directory
        """
        if kind is DocumentKind.OUTLINE:
            return self.root / OUTLINE_RELATIVE_PATH

        for part in (namespace, identifier):
            _check_path_segment(part)

        return self.root.joinpath(*_KIND_DIRECTORIES[kind], namespace, f"{identifier}{DOCUMENT_SUFFIX}")

    def exists(self, kind: DocumentKind, namespace: str = "", identifier: str = "") -> bool:
        """Check whether a document exists."""
        path = self.path_for(kind, namespace, identifier)
        logger.debug(f"[File] Trying: {path}")
        try:
            return path.is_file()
        except OSError as e:
            if e.errno in _MISSING_ERRNOS:
                return False
            raise

    def read(self, kind: DocumentKind, namespace: str = "", identifier: str = "") -> str:
        """
        Read the raw markup of a document.

        Raises:
            DocumentNotFoundError: If the document does not exist
        """
        path = self.path_for(kind, namespace, identifier)
        logger.debug(f"[File] Reading: {path}")
        try:
            return path.read_text(encoding=self.encoding)
        except OSError as e:
            if e.errno not in _MISSING_ERRNOS:
                raise
            raise DocumentNotFoundError(kind.label, identifier or str(path)) from e

    def root_exists(self) -> bool:
        return self.root.is_dir()

    def namespaces(self, kind: DocumentKind) -> List[str]:
        """List the version or technology directories present for a kind."""
        if kind is DocumentKind.OUTLINE:
            return []
        base = self.root.joinpath(*_KIND_DIRECTORIES[kind])
        if not base.is_dir():
            return []
        return sorted(entry.name for entry in base.iterdir() if entry.is_dir())

    def identifiers(self, kind: DocumentKind, namespace: str) -> List[str]:
        """List document identifiers within one namespace, sorted."""
        if kind is DocumentKind.OUTLINE:
            return []
        _check_path_segment(namespace)
        directory = self.root.joinpath(*_KIND_DIRECTORIES[kind], namespace)
        if not directory.is_dir():
            return []
        return sorted(
            entry.stem for entry in directory.iterdir()
            if entry.is_file() and entry.suffix == DOCUMENT_SUFFIX
        )


def _check_path_segment(segment: str) -> None:
    if "/" in segment or "\\" in segment or segment in (".", "..") or "\x00" in segment:
        raise InvalidRequestError(f"Invalid path segment in identifier: {segment}", segment)
