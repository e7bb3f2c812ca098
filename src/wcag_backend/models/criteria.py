"""
Criterion records stored in the criteria index side-file.

The JSON layout keeps the keys written by the offline indexer
(``id``, ``version``, ``level``, ``title``, ``content``).
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class CriterionRecord:
    """Lightweight record for one success criterion."""
    id: str
    version: str
    conformance_level: str = ""
    title: str = ""
    raw_content: str = ""

    @property
    def sort_key(self):
        return (self.version, self.id)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the side-file record shape."""
        return {
            "id": self.id,
            "version": self.version,
            "level": self.conformance_level,
            "title": self.title,
            "content": self.raw_content,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CriterionRecord":
        """Create from a side-file record."""
        return cls(
            id=str(data["id"]),
            version=str(data.get("version", "")),
            conformance_level=str(data.get("level", data.get("conformance_level", "")) or ""),
            title=str(data.get("title", "") or ""),
            raw_content=str(data.get("content", data.get("raw_content", "")) or ""),
        )


# Read-only view keyed by criterion identifier.
CriteriaIndex = Mapping[str, CriterionRecord]
