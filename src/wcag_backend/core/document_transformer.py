"""
HTML to markdown conversion for single WCAG documents.

Conversion is a pure function of the input markup and a fixed style
policy, so the same document always yields byte-identical output. Before
conversion the markup is cleaned of non-content elements and links that
point into the corpus are rewritten to ``wcag://`` resource URIs.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from bs4 import BeautifulSoup
from markdownify import ATX, MarkdownConverter

logger = logging.getLogger(__name__)

NON_CONTENT_ELEMENTS = ("head", "script", "style", "template")

_TAIL = r"(?:\.html?)?(?:[?#].*)?$"

# Ordered: criterion paths also contain segments the other patterns could match.
LINK_REWRITE_RULES: Tuple[Tuple[re.Pattern, str], ...] = (
    (re.compile(r"(?:^|/)guidelines/sc/\d+/(?P<id>[^/#?.]+)" + _TAIL, re.IGNORECASE), "wcag://criteria/{id}"),
    (re.compile(r"(?:^|/)understanding/(?:\d+/)?(?P<id>[^/#?.]+)" + _TAIL, re.IGNORECASE), "wcag://understanding/{id}"),
    (re.compile(r"(?:^|/)techniques/[^/#?.]+/(?P<id>[^/#?.]+)" + _TAIL, re.IGNORECASE), "wcag://techniques/{id}"),
)


@dataclass(frozen=True)
class StylePolicy:
    """
    Markdown style used for every conversion.

    Headings are ATX (``#``), code blocks are fenced, bullets use a single
    marker and strong text doubles the emphasis delimiter.
    """
    heading_style: str = ATX
    bullet_marker: str = "-"
    em_delimiter: str = "*"
    code_language: str = ""
    rewrite_links: bool = True

    @property
    def strong_delimiter(self) -> str:
        return self.em_delimiter * 2

    def converter_options(self) -> Dict[str, Any]:
        """Options passed to the markdownify converter."""
        return {
            "heading_style": self.heading_style,
            "bullets": self.bullet_marker,
            "strong_em_symbol": self.em_delimiter,
            "code_language": self.code_language,
        }


DEFAULT_STYLE_POLICY = StylePolicy()


def rewrite_href(href: str) -> Optional[str]:
    """Return the ``wcag://`` URI for a corpus link, or ``None`` to keep it."""
    for pattern, template in LINK_REWRITE_RULES:
        match = pattern.search(href)
        if match:
            return template.format(id=match.group("id"))
    return None


class DocumentTransformer:
    """Converts resolved HTML documents to normalized markdown."""

    def __init__(self, policy: StylePolicy = DEFAULT_STYLE_POLICY, parser: str = "html.parser") -> None:
        self.policy = policy
        self.parser = parser

    def convert(self, html: str) -> str:
        """
        Convert one HTML document to markdown.

        Errors raised by the parser or converter propagate unchanged.
        """
        soup = BeautifulSoup(html, self.parser)

        for element in soup.find_all(NON_CONTENT_ELEMENTS):
            element.decompose()

        if self.policy.rewrite_links:
            self._rewrite_links(soup)

        markdown = MarkdownConverter(**self.policy.converter_options()).convert_soup(soup)
        markdown = markdown.strip() + "\n"

        _log_size_reduction(html, markdown)
        return markdown

    def _rewrite_links(self, soup: BeautifulSoup) -> None:
        for anchor in soup.find_all("a", href=True):
            target = rewrite_href(anchor["href"].strip())
            if target is not None:
                anchor["href"] = target


def _log_size_reduction(html: str, markdown: str) -> None:
    if not logger.isEnabledFor(logging.DEBUG) or not html:
        return
    reduction = (len(html) - len(markdown)) / len(html) * 100
    logger.debug(f"[Conversion] Original HTML size: {len(html)} bytes")
    logger.debug(f"[Conversion] Markdown size: {len(markdown)} bytes")
    logger.debug(f"[Conversion] Size reduction: {reduction:.2f}%")
