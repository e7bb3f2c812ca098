"""
WCAG content backend.

Resolves ``wcag://`` resource identifiers against a local WCAG corpus and
converts the documents to markdown.
"""

__version__ = "0.1.0"
