"""
Tests for the on-disk document store.
"""

import pytest

from wcag_backend.core import DocumentStore
from wcag_backend.exceptions import DocumentNotFoundError, InvalidRequestError
from wcag_backend.models import DocumentKind


class TestDocumentStore:
    """Test path construction, reads and enumeration."""

    def test_path_for(self, document_store, corpus_root):
        assert document_store.path_for(DocumentKind.OUTLINE) == corpus_root / "guidelines" / "index.html"
        assert document_store.path_for(DocumentKind.CRITERION, "21", "x") == corpus_root / "guidelines" / "sc" / "21" / "x.html"
        assert document_store.path_for(DocumentKind.UNDERSTANDING, "20", "x") == corpus_root / "understanding" / "20" / "x.html"
        assert document_store.path_for(DocumentKind.TECHNIQUE, "aria", "ARIA4") == corpus_root / "techniques" / "aria" / "ARIA4.html"

    @pytest.mark.parametrize("segment", ["..", ".", "a/b", "a\\b", "a\x00b"])
    def test_path_for_rejects_escapes(self, document_store, segment):
        with pytest.raises(InvalidRequestError):
            document_store.path_for(DocumentKind.CRITERION, "20", segment)
        with pytest.raises(InvalidRequestError):
            document_store.path_for(DocumentKind.TECHNIQUE, segment, "H37")

    def test_exists(self, document_store):
        assert document_store.exists(DocumentKind.OUTLINE)
        assert document_store.exists(DocumentKind.TECHNIQUE, "html", "H37")
        assert not document_store.exists(DocumentKind.TECHNIQUE, "css", "C12")

    def test_read(self, document_store):
        assert "H37: Using alt attributes" in document_store.read(DocumentKind.TECHNIQUE, "html", "H37")

    def test_read_missing(self, document_store):
        with pytest.raises(DocumentNotFoundError) as exc_info:
            document_store.read(DocumentKind.CRITERION, "20", "missing")
        assert exc_info.value.identifier == "missing"

    def test_overlong_name(self, document_store):
        """Test that a file name beyond the file-system limit is simply absent."""
        identifier = "a" * 300
        assert not document_store.exists(DocumentKind.CRITERION, "20", identifier)
        with pytest.raises(DocumentNotFoundError):
            document_store.read(DocumentKind.CRITERION, "20", identifier)

    def test_root_exists(self, document_store, temp_directory):
        assert document_store.root_exists()
        assert not DocumentStore(temp_directory / "absent").root_exists()

    def test_namespaces(self, document_store):
        assert document_store.namespaces(DocumentKind.CRITERION) == ["20", "21", "22"]
        assert document_store.namespaces(DocumentKind.UNDERSTANDING) == ["20", "22"]
        assert "client-side-script" in document_store.namespaces(DocumentKind.TECHNIQUE)
        assert document_store.namespaces(DocumentKind.OUTLINE) == []

    def test_identifiers(self, document_store):
        assert document_store.identifiers(DocumentKind.CRITERION, "22") == [
            "draft-notes",
            "shared-criterion",
            "target-size-minimum",
        ]
        assert document_store.identifiers(DocumentKind.TECHNIQUE, "css") == []
