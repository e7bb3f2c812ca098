"""Shared test fixtures for WCAG MCP server tests."""

import shutil
import tempfile
from pathlib import Path

import pytest

from wcag_backend.core import ResourceFacade
from wcag_mcp_server.server import MCPServer


CORPUS_FILES = {
    "guidelines/index.html": (
        '<section class="principle"><h2>Robust</h2><p>Content must be robust.</p>'
        '<section class="guideline"><h3>Compatible</h3>'
        '<section data-include="sc/20/name-role-value.html"></section>'
        '<section data-include="sc/21/status-messages.html"></section>'
        '</section></section>'
    ),
    "guidelines/sc/20/name-role-value.html": (
        '<section class="sc" id="name-role-value"><h4>Name, Role, Value</h4>'
        '<p>For all user interface components, the name and role can be programmatically determined.</p></section>'
    ),
    "guidelines/sc/21/status-messages.html": (
        '<section class="sc" id="status-messages"><h4>Status Messages</h4>'
        '<p>Status messages can be programmatically determined.</p></section>'
    ),
    "understanding/20/name-role-value.html": "<h1>Understanding Name, Role, Value</h1><p>Intent.</p>",
    "techniques/aria/ARIA4.html": "<h1>ARIA4: Using a WAI-ARIA role</h1>",
    "techniques/client-side-script/SCR21.html": "<h1>SCR21: Using functions of the DOM</h1>",
}


@pytest.fixture
def temp_directory():
    """Provide a temporary directory for testing."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def corpus_root(temp_directory):
    root = temp_directory / "wcag"
    for relative, content in CORPUS_FILES.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def server(corpus_root, temp_directory):
    """An MCP server over the test corpus, without a criteria index."""
    facade = ResourceFacade(corpus_root, temp_directory / "wcag-criteria.json")
    return MCPServer(name="wcag-server-test", facade=facade)
