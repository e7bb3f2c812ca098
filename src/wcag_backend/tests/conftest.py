"""Shared test fixtures and configuration for WCAG backend tests."""

import json
import shutil
import tempfile
from pathlib import Path

import pytest

from wcag_backend.core import DocumentStore, ResourceFacade


GUIDELINES_INDEX = """<!DOCTYPE html>
<html>
<head><title>Web Content Accessibility Guidelines (WCAG) 2.2</title></head>
<body>
<section class="principle" id="perceivable">
  <h2>Perceivable</h2>
  <p>Information and user interface components must be presentable to users in ways they can perceive.</p>
  <section class="guideline" id="text-alternatives">
    <h3>Text Alternatives</h3>
    <p>Provide text alternatives for any non-text content.</p>
    <section data-include="sc/20/non-text-content.html" data-include-replace="true"></section>
    <section class="sc" id="audio-only">
      <h4>Audio-only and Video-only</h4>
      <section id="audio-only-note"><h4>Note</h4></section>
    </section>
  </section>
</section>
<section class="principle" id="operable">
  <h2>Operable</h2>
  <section class="guideline" id="keyboard-accessible">
    <h3>Keyboard Accessible</h3>
    <section data-include="sc/21/character-key-shortcuts.html"></section>
    <section data-include="sc/22/missing-criterion.html"></section>
  </section>
</section>
</body>
</html>
"""

CRITERION_TEMPLATE = """<section class="sc" id="{id}">
  <h4>{title}</h4>
  <p class="conformance-level">{level}</p>
  <p>{body}</p>
</section>
"""

CRITERIA = {
    ("20", "non-text-content"): ("Non-text Content", "A", "All non-text content has a text alternative."),
    ("20", "shared-criterion"): ("Shared Criterion", "AA", "Text from version 2.0."),
    ("21", "character-key-shortcuts"): ("Character Key Shortcuts", "A", "Single character shortcuts can be turned off."),
    ("22", "shared-criterion"): ("Shared Criterion", "AA", "Text from version 2.2."),
    ("22", "target-size-minimum"): ("Target Size (Minimum)", "AA", "Targets are at least 24 by 24 pixels."),
}

UNDERSTANDING = {
    ("20", "non-text-content"): "Understanding Non-text Content",
    ("22", "target-size-minimum"): "Understanding Target Size (Minimum)",
}

TECHNIQUES = {
    ("client-side-script", "SCR21"): "Using functions of the Document Object Model to add content to a page",
    ("aria", "ARIA4"): "Using a WAI-ARIA role to expose the role of a user interface component",
    ("html", "H37"): "Using alt attributes on img elements",
    ("flash", "FLASH1"): "Setting the name property for a non-text object",
    ("failures", "F65"): "Failure due to omitting the alt attribute",
}


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def build_corpus(root: Path) -> Path:
    """Write a miniature WCAG corpus under ``root``."""
    _write(root / "guidelines" / "index.html", GUIDELINES_INDEX)

    for (version, criterion_id), (title, level, body) in CRITERIA.items():
        _write(
            root / "guidelines" / "sc" / version / f"{criterion_id}.html",
            CRITERION_TEMPLATE.format(id=criterion_id, title=title, level=level, body=body),
        )
    _write(root / "guidelines" / "sc" / "22" / "draft-notes.html", "<p>Draft without a section</p>\n")

    for (version, criterion_id), title in UNDERSTANDING.items():
        _write(
            root / "understanding" / version / f"{criterion_id}.html",
            f"<html><head><title>{title}</title></head><body><h1>{title}</h1>"
            f"<p>See <a href=\"../../guidelines/sc/{version}/{criterion_id}.html\">the criterion</a>.</p>"
            f"</body></html>\n",
        )

    for (technology, technique_id), title in TECHNIQUES.items():
        _write(
            root / "techniques" / technology / f"{technique_id}.html",
            f"<html><body><h1>{technique_id}: {title}</h1>"
            f"<p>Applies to <a href=\"../../understanding/20/non-text-content.html\">Non-text Content</a>.</p>"
            f"</body></html>\n",
        )

    return root


@pytest.fixture
def temp_directory():
    """Provide a temporary directory for testing."""
    temp_dir = tempfile.mkdtemp()
    temp_path = Path(temp_dir)

    yield temp_path

    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def corpus_root(temp_directory):
    """A miniature WCAG corpus on disk."""
    return build_corpus(temp_directory / "wcag")


@pytest.fixture
def document_store(corpus_root):
    return DocumentStore(corpus_root)


@pytest.fixture
def criteria_index_file(temp_directory):
    """A criteria index holding a single record."""
    path = temp_directory / "wcag-criteria.json"
    path.write_text(json.dumps({
        "criteria": [
            {"id": "non-text-content", "version": "20", "level": "A", "title": "Non-text Content", "content": ""},
        ],
        "count": 1,
        "generatedAt": "2024-01-01T00:00:00+00:00",
    }), encoding="utf-8")
    return path


@pytest.fixture
def facade(corpus_root, criteria_index_file):
    return ResourceFacade(corpus_root, criteria_index_file)


@pytest.fixture
def config_file(temp_directory, corpus_root, criteria_index_file):
    """A configuration file pointing at the test corpus."""
    path = temp_directory / "wcag.config.json"
    path.write_text(json.dumps({
        "corpus": {"root": str(corpus_root), "criteria_index": str(criteria_index_file)},
        "logging": {"level": "WARNING"},
    }), encoding="utf-8")
    return path
