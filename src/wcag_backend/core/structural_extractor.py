"""
Principles and guidelines outline extraction.

Parses the top-level guidelines document into principle, guideline and
criterion reference nodes and renders them as a numbered markdown outline
with a ``wcag://criteria/<id>`` link per criterion.

The outline is advisory front-matter, so extraction degrades instead of
failing: a criterion whose title cannot be found is listed with an empty
title, and a document that yields no structure at all produces a one-line
diagnostic.
"""

import logging
import posixpath
from typing import Callable, List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from ..models import (
    CriteriaIndex,
    CriterionRefNode,
    GuidelineNode,
    PrincipleNode,
    criterion_number,
)

logger = logging.getLogger(__name__)

PRINCIPLE_SELECTOR = "section.principle"
GUIDELINE_SELECTOR = "section.guideline"
INCLUDE_ATTRIBUTE = "data-include"

PRINCIPLE_HEADING = "h2"
GUIDELINE_HEADING = "h3"
CRITERION_HEADING = "h4"

DIAGNOSTIC_PREFIX = "> Unable to extract WCAG principles and guidelines"

TitleLookup = Callable[[str], Optional[str]]
TitleResolver = Callable[[str, Optional[Tag]], str]


class OutlineExtractionError(ValueError):
    """Raised when the outline source has no recognizable structure."""


class StructuralExtractor:
    """
    Builds the principles and guidelines outline.

    Titles come from the criteria index when it has an entry, then from the
    criterion's own heading (embedded sections, or ``title_lookup`` for
    transcluded ones), else they are left empty.
    """

    def __init__(
        self,
        criteria_index: Optional[CriteriaIndex] = None,
        title_lookup: Optional[TitleLookup] = None,
        parser: str = "html.parser",
    ) -> None:
        self.criteria_index = criteria_index or {}
        self.title_lookup = title_lookup
        self.parser = parser

    def extract(self, html: str) -> Tuple[PrincipleNode, ...]:
        """
        Parse the outline source into principle nodes.

        Raises:
            OutlineExtractionError: If no principle sections are present
        """
        soup = BeautifulSoup(html, self.parser)
        principles = extract_principles(soup, self.resolve_title)
        if not principles:
            raise OutlineExtractionError("no principle sections found")
        return principles

    def build_outline(self, html: str) -> str:
        """Render the outline; never raises."""
        logger.info("[HTML] Extracting principles, guidelines, and success criteria")
        try:
            principles = self.extract(html)
        except Exception as e:
            logger.error(f"[HTML] Error extracting content: {e}")
            return f"{DIAGNOSTIC_PREFIX}: {e}\n"

        criteria_count = sum(len(g.criteria) for p in principles for g in p.guidelines)
        logger.debug(f"[HTML] Extracted {len(principles)} principles and {criteria_count} criteria")
        return render_outline(principles)

    def resolve_title(self, identifier: str, section: Optional[Tag] = None) -> str:
        """Resolve a criterion's display title, degrading to an empty string."""
        record = self.criteria_index.get(identifier)
        if record is not None and record.title:
            return record.title

        if section is not None and not section.has_attr(INCLUDE_ATTRIBUTE):
            heading = section.find(CRITERION_HEADING)
            if heading is not None:
                return _text(heading)

        if self.title_lookup is not None:
            try:
                return self.title_lookup(identifier) or ""
            except Exception as e:
                logger.warning(f"[Criterion] Could not resolve title for {identifier}: {e}")

        logger.debug(f"[Criterion] No title available for {identifier}")
        return ""


def extract_principles(root: Tag, resolve_title: TitleResolver) -> Tuple[PrincipleNode, ...]:
    """Extract every principle in document order, numbered from 1."""
    return tuple(
        extract_principle(node, index, resolve_title)
        for index, node in enumerate(root.select(PRINCIPLE_SELECTOR), 1)
    )


def extract_principle(node: Tag, principle_index: int, resolve_title: TitleResolver) -> PrincipleNode:
    title, description = _heading_and_description(node, PRINCIPLE_HEADING)
    guidelines = tuple(
        extract_guideline(guideline, principle_index, guideline_index, resolve_title)
        for guideline_index, guideline in enumerate(node.select(GUIDELINE_SELECTOR), 1)
    )
    return PrincipleNode(title=title, description=description, guidelines=guidelines)


def extract_guideline(
    node: Tag,
    principle_index: int,
    guideline_index: int,
    resolve_title: TitleResolver,
) -> GuidelineNode:
    title, description = _heading_and_description(node, GUIDELINE_HEADING)
    criteria = extract_criterion_refs(node, principle_index, guideline_index, resolve_title)
    return GuidelineNode(title=title, description=description, criteria=criteria)


def extract_criterion_refs(
    guideline: Tag,
    principle_index: int,
    guideline_index: int,
    resolve_title: TitleResolver,
) -> Tuple[CriterionRefNode, ...]:
    """
    Extract the criterion references of one guideline in document order.

    Both transclusion markers (``<section data-include="sc/20/x.html">``)
    and embedded sections keyed by ``id`` count. Sections nested inside an
    already selected reference belong to it and are skipped.
    """
    refs: List[CriterionRefNode] = []
    selected: List[Tag] = []

    for section in guideline.find_all("section"):
        identifier = criterion_identifier(section)
        if not identifier:
            continue
        if any(parent is ref for parent in _parents_within(section, guideline) for ref in selected):
            continue

        selected.append(section)
        number = criterion_number(principle_index, guideline_index, len(selected))
        logger.debug(f"[Criterion] ID: {identifier}")
        refs.append(CriterionRefNode(
            identifier=identifier,
            number=number,
            title=resolve_title(identifier, section),
        ))

    return tuple(refs)


def criterion_identifier(section: Tag) -> str:
    """
    Derive the criterion identifier of a reference node.

    Transclusion markers use the final path segment of ``data-include``
    without its extension; embedded sections use their ``id``.
    """
    include = (section.get(INCLUDE_ATTRIBUTE) or "").strip()
    if include:
        segment = include.rstrip("/").rsplit("/", 1)[-1]
        stem, _ = posixpath.splitext(segment)
        if stem:
            return stem
    return (section.get("id") or "").strip()


def render_outline(principles: Tuple[PrincipleNode, ...]) -> str:
    """Render principle nodes as a flat, numbered markdown outline."""
    parts: List[str] = []

    for principle in principles:
        parts.append(f"## {principle.title}\n\n")
        if principle.description:
            parts.append(f"{principle.description}\n\n")

        for guideline in principle.guidelines:
            parts.append(f"### {guideline.title}\n\n")
            if guideline.description:
                parts.append(f"{guideline.description}\n\n")

            for criterion in guideline.criteria:
                parts.append(f"- [{criterion.label}]({criterion.link})\n")
            parts.append("\n")

    return "".join(parts)


def heading_title(html: str, heading_tag: str = CRITERION_HEADING, parser: str = "html.parser") -> str:
    """Return the text of the first ``heading_tag`` in a document, or ``""``."""
    soup = BeautifulSoup(html, parser)
    section = soup.select_one("section.sc") or soup
    heading = section.find(heading_tag)
    return _text(heading) if heading is not None else ""


def _heading_and_description(node: Tag, heading_tag: str) -> Tuple[str, str]:
    heading = node.find(heading_tag)
    if heading is None:
        return "", ""

    following = heading.find_next_sibling()
    description = _text(following) if following is not None and following.name == "p" else ""
    return _text(heading), description


def _parents_within(node: Tag, boundary: Tag):
    for parent in node.parents:
        if parent is boundary:
            return
        yield parent


def _text(node: Tag) -> str:
    return " ".join(node.get_text().split())
