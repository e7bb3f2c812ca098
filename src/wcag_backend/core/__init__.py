"""
Core content resolution and transformation engine.

Document store, identifier resolver, structural extractor, document
transformer, criteria index and the resource façade composing them.
"""

from .document_store import DocumentStore
from .identifier_resolver import (
    IdentifierResolver,
    TECHNIQUE_TECHNOLOGIES,
    MULTI_CHARACTER_PREFIXES,
    technique_prefix,
    technology_for,
)
from .structural_extractor import (
    StructuralExtractor,
    OutlineExtractionError,
    render_outline,
    heading_title,
)
from .document_transformer import (
    DocumentTransformer,
    StylePolicy,
    DEFAULT_STYLE_POLICY,
    rewrite_href,
)
from .criteria_index import (
    build_criteria_index,
    write_criteria_index,
    load_criteria_index,
    DEFAULT_INDEX_FILE,
)
from .resource_facade import (
    ResourceFacade,
    ResourceDescriptor,
    OUTLINE_URI,
    parse_address,
    resource_uri,
)

__all__ = [
    "DocumentStore",
    "IdentifierResolver",
    "TECHNIQUE_TECHNOLOGIES",
    "MULTI_CHARACTER_PREFIXES",
    "technique_prefix",
    "technology_for",
    "StructuralExtractor",
    "OutlineExtractionError",
    "render_outline",
    "heading_title",
    "DocumentTransformer",
    "StylePolicy",
    "DEFAULT_STYLE_POLICY",
    "rewrite_href",
    "build_criteria_index",
    "write_criteria_index",
    "load_criteria_index",
    "DEFAULT_INDEX_FILE",
    "ResourceFacade",
    "ResourceDescriptor",
    "OUTLINE_URI",
    "parse_address",
    "resource_uri",
]
