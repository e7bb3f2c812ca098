"""
Criteria index side-file: offline build and tolerant loading.

The index maps criterion identifiers to lightweight records so the outline
can show titles without parsing every criterion document. It is a
rebuildable cache: a missing, unreadable or malformed index is logged and
treated as empty.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, List, Optional, Union

from bs4 import BeautifulSoup

from ..models import CriteriaIndex, CriterionRecord, DocumentKind
from .document_store import DocumentStore

logger = logging.getLogger(__name__)

DEFAULT_INDEX_FILE = "wcag-criteria.json"


def build_criteria_index(store: DocumentStore, parser: str = "html.parser") -> List[CriterionRecord]:
    """
    Scan every success criterion document in the corpus.

    Files without a ``<section>`` element are skipped with a warning, as are
    files that cannot be read or parsed.

    Returns:
        Records sorted by (version, id)
    """
    records: List[CriterionRecord] = []
    kind = DocumentKind.CRITERION

    for version in store.namespaces(kind):
        for file_id in store.identifiers(kind, version):
            try:
                content = store.read(kind, version, file_id)
                record = extract_criterion_record(content, version, file_id, parser)
            except Exception as e:
                logger.error(f"[Extract] Error processing {store.path_for(kind, version, file_id)}: {e}")
                continue

            if record is None:
                logger.warning(f"[Extract] Warning: No section found in {store.path_for(kind, version, file_id)}")
                continue

            records.append(record)
            logger.debug(
                f"[Extract] Processed: {record.id} ({record.version}) - "
                f"{record.title} [{record.conformance_level}]"
            )

    records.sort(key=lambda r: r.sort_key)
    logger.info(f"[Extract] Extracted {len(records)} criteria")
    return records


def extract_criterion_record(
    content: str,
    version: str,
    fallback_id: str,
    parser: str = "html.parser",
) -> Optional[CriterionRecord]:
    """Build a record from one criterion document, or ``None`` if it has no section."""
    soup = BeautifulSoup(content, parser)
    section = soup.find("section")
    if section is None:
        return None

    heading = soup.find("h4")
    level = soup.select_one(".conformance-level")
    return CriterionRecord(
        id=section.get("id") or fallback_id,
        version=version,
        conformance_level=level.get_text().strip() if level is not None else "",
        title=heading.get_text().strip() if heading is not None else "",
        raw_content=content.strip(),
    )


def write_criteria_index(records: Iterable[CriterionRecord], output_path: Union[str, Path]) -> Path:
    """Persist records in the side-file format and return the written path."""
    records = sorted(records, key=lambda r: r.sort_key)
    payload = {
        "criteria": [record.to_dict() for record in records],
        "count": len(records),
        "generatedAt": datetime.now(timezone.utc).isoformat(),
    }

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info(f"[Extract] Successfully wrote {len(records)} criteria to {path}")
    return path


def load_criteria_index(index_path: Optional[Union[str, Path]]) -> CriteriaIndex:
    """
    Load the side-file as a read-only mapping.

    Never raises: any problem yields an empty index. When an identifier
    appears more than once the first record in file order is kept.
    """
    if not index_path:
        return MappingProxyType({})

    path = Path(index_path)
    logger.debug(f"[Criteria] Loading criteria data from: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        entries = data.get("criteria", []) if isinstance(data, dict) else []
        index = {}
        for entry in entries:
            record = CriterionRecord.from_dict(entry)
            index.setdefault(record.id, record)
    except FileNotFoundError:
        logger.info(f"[Criteria] No criteria index at {path}, continuing without it")
        return MappingProxyType({})
    except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
        logger.warning(f"[Criteria] Error loading criteria data from {path}: {e}")
        return MappingProxyType({})

    logger.info(f"[Criteria] Loaded {len(index)} criteria")
    return MappingProxyType(index)
