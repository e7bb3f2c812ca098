"""
Outline node types for the principles and guidelines hierarchy.

The outline is a closed set of three node variants. Principles own
guidelines, guidelines own criterion references. Nodes are frozen and the
tree is rebuilt from source on every request.
"""

from dataclasses import dataclass, field
from typing import Tuple, Union

CRITERION_URI_PREFIX = "wcag://criteria/"


@dataclass(frozen=True)
class CriterionRefNode:
    """A numbered, linked reference to one success criterion."""
    identifier: str
    number: str
    title: str = ""

    @property
    def link(self) -> str:
        return f"{CRITERION_URI_PREFIX}{self.identifier}"

    @property
    def label(self) -> str:
        """Link text: the dotted number followed by the title, if any."""
        return f"{self.number} {self.title}".rstrip()


@dataclass(frozen=True)
class GuidelineNode:
    """A guideline with its ordered criterion references."""
    title: str
    description: str = ""
    criteria: Tuple[CriterionRefNode, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PrincipleNode:
    """A principle with its ordered guidelines."""
    title: str
    description: str = ""
    guidelines: Tuple[GuidelineNode, ...] = field(default_factory=tuple)


OutlineNode = Union[PrincipleNode, GuidelineNode, CriterionRefNode]


def criterion_number(principle_index: int, guideline_index: int, criterion_index: int) -> str:
    """Build the dotted ``p.g.c`` number from 1-based indexes."""
    return f"{principle_index}.{guideline_index}.{criterion_index}"
