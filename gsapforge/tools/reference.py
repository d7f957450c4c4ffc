from __future__ import annotations

import logging
import re
from typing import Any, Callable

from gsapforge.knowledge.api_table import KNOWLEDGE_TABLE
from gsapforge.knowledge.schema import (
    DEFAULT_DETAIL_LEVEL,
    DETAIL_LEVELS,
    ENTRY_KINDS,
    BulletSection,
    CodeSection,
    InlineSection,
    KnowledgeTable,
    LabeledSection,
    ReferenceEntry,
)

logger = logging.getLogger("gsapforge.reference")

KIND_LABELS = dict(zip(ENTRY_KINDS, ("Core Animation Method", "Plugin", "Reference Guide")))
LISTING_TITLES = dict(zip(ENTRY_KINDS, ("Available Core Methods", "Available Plugins", "Available Guides")))


def heading(label: str) -> str:
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), label.replace("_", " "))


def _labeled(section: LabeledSection) -> list[str]:
    return [f"- **{row.label}**: {row.text}" for row in section.items]


def _bullets(section: BulletSection) -> list[str]:
    return [f"- {row}" for row in section.items]


def _inline(section: InlineSection) -> list[str]:
    return [", ".join(section.items)]


def _code(section: CodeSection) -> list[str]:
    lines: list[str] = []
    for sample in section.samples:
        lines.extend([f"### {heading(sample.label)}", f"```{section.language}", sample.text, "```", ""])
    return lines


SECTION_RENDERERS: dict[type, Callable[[Any], list[str]]] = {
    LabeledSection: _labeled,
    BulletSection: _bullets,
    InlineSection: _inline,
    CodeSection: _code,
}


def render_entry(entry: ReferenceEntry, level: str) -> list[str]:
    kind = KIND_LABELS.get(entry.kind, entry.kind)
    if entry.tier:
        kind = f"{kind} ({entry.tier})"
    lines = [f"**Type**: {kind}", f"**Description**: {entry.description}"]
    if entry.syntax:
        lines.append(f"**Syntax**: `{entry.syntax}`")
    lines.append(f"**Detail Level**: {level}")
    lines.append("")
    for section in entry.visible_sections(level):
        lines.append(f"## {section.title}")
        lines.extend(SECTION_RENDERERS[type(section)](section))
        if lines[-1] != "":
            lines.append("")
    return lines


def render_not_found(query: str, table: KnowledgeTable) -> list[str]:
    lines = [f'API element "{query}" not found in the reference table.', ""]
    for kind in ENTRY_KINDS:
        lines.extend([f"## {LISTING_TITLES[kind]}:", ", ".join(table.names(kind)), ""])
    lines.append("## Did you mean?")
    suggestions = table.suggestions(query)
    if suggestions:
        lines.append(f"Possible matches: {', '.join(suggestions)}")
    else:
        lines.append("No close matches. Try one of the names above.")
    return lines


def lookup_reference(arguments: dict[str, Any], table: KnowledgeTable = KNOWLEDGE_TABLE) -> str:
    query = str(arguments["element_name"]).strip()
    level = str(arguments.get("detail_level") or DEFAULT_DETAIL_LEVEL).strip().lower()
    if level not in DETAIL_LEVELS:
        logger.info("unknown detail level %r, using %s", level, DEFAULT_DETAIL_LEVEL)
        level = DEFAULT_DETAIL_LEVEL

    lines = [f"# 🎯 GSAP API Expert: {query}", ""]
    entry = table.get(query)
    if entry is None:
        logger.info("reference miss for %r", query)
        lines.extend(render_not_found(query, table))
    else:
        lines.extend(render_entry(entry, level))
    return "\n".join(lines).rstrip() + "\n"


__all__ = ["heading", "lookup_reference", "render_entry", "render_not_found"]
