"""Typed schema for the static reference table.

Each field of an entry is declared once as one section variant (labeled
pairs, bullet list, inline list or code samples), so rendering never has
to sniff the shape of a value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

DETAIL_LEVELS = ("basic", "intermediate", "advanced", "expert")
DEFAULT_DETAIL_LEVEL = "advanced"

ENTRY_KINDS = ("core_method", "plugin", "guide")


def detail_rank(level: str) -> int:
    clean = str(level or "").strip().lower()
    if clean not in DETAIL_LEVELS:
        clean = DEFAULT_DETAIL_LEVEL
    return DETAIL_LEVELS.index(clean)


@dataclass(frozen=True)
class LabeledItem:
    label: str
    text: str


@dataclass(frozen=True)
class LabeledSection:
    title: str
    items: tuple[LabeledItem, ...]
    detail: str = "basic"


@dataclass(frozen=True)
class BulletSection:
    title: str
    items: tuple[str, ...]
    detail: str = "basic"


@dataclass(frozen=True)
class InlineSection:
    title: str
    items: tuple[str, ...]
    detail: str = "basic"


@dataclass(frozen=True)
class CodeSection:
    title: str
    samples: tuple[LabeledItem, ...]
    detail: str = "intermediate"
    language: str = "javascript"


Section = Union[LabeledSection, BulletSection, InlineSection, CodeSection]


@dataclass(frozen=True)
class ReferenceEntry:
    name: str
    kind: str
    description: str
    syntax: str | None = None
    tier: str | None = None
    sections: tuple[Section, ...] = field(default_factory=tuple)

    def section(self, title: str) -> Section | None:
        for row in self.sections:
            if row.title == title:
                return row
        return None

    def visible_sections(self, level: str) -> list[Section]:
        limit = detail_rank(level)
        return [row for row in self.sections if detail_rank(row.detail) <= limit]


def labeled(title: str, pairs: dict[str, str], detail: str = "basic") -> LabeledSection:
    return LabeledSection(title, tuple(LabeledItem(k, v) for k, v in pairs.items()), detail)


def bullets(title: str, items: list[str] | tuple[str, ...], detail: str = "basic") -> BulletSection:
    return BulletSection(title, tuple(items), detail)


def inline(title: str, items: list[str] | tuple[str, ...], detail: str = "basic") -> InlineSection:
    return InlineSection(title, tuple(items), detail)


def code(title: str, samples: dict[str, str], detail: str = "intermediate", language: str = "javascript") -> CodeSection:
    return CodeSection(title, tuple(LabeledItem(k, v) for k, v in samples.items()), detail, language)


def _normalize_name(name: str) -> str:
    clean = str(name or "").strip().lower()
    if clean.endswith("plugin") and len(clean) > len("plugin"):
        clean = clean[: -len("plugin")]
    return clean


class KnowledgeTable:
    """Read-only index over reference entries, keyed case-insensitively."""

    def __init__(self, entries: tuple[ReferenceEntry, ...]) -> None:
        self._entries = entries
        self._index = {_normalize_name(row.name): row for row in entries}

    def get(self, name: str) -> ReferenceEntry | None:
        return self._index.get(_normalize_name(name))

    def names(self, kind: str | None = None) -> list[str]:
        return [row.name for row in self._entries if kind is None or row.kind == kind]

    def suggestions(self, query: str) -> list[str]:
        needle = str(query or "").strip().lower()
        if not needle:
            return []
        return [name for name in self.names() if name.lower() in needle or needle in name.lower()]

    def __len__(self) -> int:
        return len(self._entries)


__all__ = [
    "BulletSection",
    "CodeSection",
    "DEFAULT_DETAIL_LEVEL",
    "DETAIL_LEVELS",
    "ENTRY_KINDS",
    "InlineSection",
    "KnowledgeTable",
    "LabeledItem",
    "LabeledSection",
    "ReferenceEntry",
    "Section",
    "bullets",
    "code",
    "detail_rank",
    "inline",
    "labeled",
]
