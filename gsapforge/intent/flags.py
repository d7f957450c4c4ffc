from __future__ import annotations

from typing import Mapping

FeatureFlags = dict[str, bool]
FlagDefinitions = Mapping[str, tuple[str, ...]]

SCROLL_FLAGS: FlagDefinitions = {
    "parallax": ("parallax",),
    "stagger": ("stagger", "one by one"),
    "pinned": ("pin", "stick"),
}
TEXT_FLAGS: FlagDefinitions = {
    "typewriter": ("typewriter", "typing"),
    "char_reveal": ("character", "char"),
    "word_reveal": ("word",),
}
INTERACTIVE_FLAGS: FlagDefinitions = {
    "draggable": ("drag",),
    "hover": ("hover",),
    "click": ("click",),
}

# Skeleton name -> flag definitions it consumes.
SKELETON_FLAGS: dict[str, FlagDefinitions] = {
    "scroll": SCROLL_FLAGS,
    "text": TEXT_FLAGS,
    "interactive": INTERACTIVE_FLAGS,
}


def extract_flags(text: str, definitions: FlagDefinitions) -> FeatureFlags:
    """A flag is true when any of its trigger substrings occurs in ``text`` (case-insensitive)."""
    lowered = str(text or "").lower()
    return {name: any(trigger.lower() in lowered for trigger in triggers) for name, triggers in definitions.items()}


def flags_for(skeleton: str, text: str) -> FeatureFlags:
    return extract_flags(text, SKELETON_FLAGS.get(skeleton, {}))


__all__ = [
    "FeatureFlags",
    "INTERACTIVE_FLAGS",
    "SCROLL_FLAGS",
    "SKELETON_FLAGS",
    "TEXT_FLAGS",
    "extract_flags",
    "flags_for",
]
