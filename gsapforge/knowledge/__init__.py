from gsapforge.knowledge.api_table import CORE_METHODS, GUIDES, KNOWLEDGE_TABLE, PLUGINS
from gsapforge.knowledge.patterns import (
    INDUSTRY_CUSTOMIZATIONS,
    PRODUCTION_PATTERNS,
    ProductionPattern,
    customizations_for,
    get_pattern,
    pattern_names,
)
from gsapforge.knowledge.schema import KnowledgeTable, ReferenceEntry

__all__ = [
    "CORE_METHODS",
    "GUIDES",
    "INDUSTRY_CUSTOMIZATIONS",
    "KNOWLEDGE_TABLE",
    "KnowledgeTable",
    "PLUGINS",
    "PRODUCTION_PATTERNS",
    "ProductionPattern",
    "ReferenceEntry",
    "customizations_for",
    "get_pattern",
    "pattern_names",
]
