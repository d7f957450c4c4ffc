"""Tool definitions published to clients.

Enumerated labels are listed for discovery only; argument validation treats
them as advisory and the handlers degrade unknown labels to defaults.
Optional arguments also accept null, which the handlers treat as absent.
"""

from __future__ import annotations

from typing import Any

from gsapforge.config.runtime_config import VALID_COMPLEXITIES, VALID_CONTEXTS
from gsapforge.knowledge.patterns import INDUSTRY_CUSTOMIZATIONS, PRODUCTION_PATTERNS
from gsapforge.knowledge.schema import DETAIL_LEVELS

OPTIMIZATION_TARGETS = ("60fps-desktop", "mobile-smooth", "battery-efficient", "memory-optimized")
SETUP_FRAMEWORKS = ("react", "nextjs", "vue", "nuxt", "svelte", "vanilla")
SETUP_PLUGINS = (
    "ScrollTrigger",
    "SplitText",
    "DrawSVGPlugin",
    "MorphSVGPlugin",
    "MotionPathPlugin",
    "Draggable",
    "InertiaPlugin",
    "Flip",
    "Observer",
    "CustomEase",
    "GSDevTools",
)
PERFORMANCE_LEVELS = ("basic", "optimized", "60fps-guaranteed", "mobile-first")


def _required_text(description: str) -> dict[str, Any]:
    return {"type": "string", "description": description, "minLength": 1, "pattern": r"\S"}


def _optional_text(description: str) -> dict[str, Any]:
    return {"type": ["string", "null"], "description": description}


def _label(description: str, values: tuple[str, ...] | list[str], default: str | None = None) -> dict[str, Any]:
    schema: dict[str, Any] = {"type": ["string", "null"], "description": description, "enum": list(values)}
    if default is not None:
        schema["default"] = default
    return schema


TOOL_DEFINITIONS: list[dict[str, Any]] = [
    {
        "name": "classify_and_generate",
        "description": "Understand a natural-language animation request and generate production-ready GSAP code",
        "inputSchema": {
            "type": "object",
            "properties": {
                "request": _required_text(
                    'Natural language description of the animation (e.g. "fade in cards one by one when scrolling")'
                ),
                "context": _label("Development context", VALID_CONTEXTS, "react"),
                "complexity": _label("Animation complexity level", VALID_COMPLEXITIES, "intermediate"),
            },
            "required": ["request"],
        },
    },
    {
        "name": "lookup_reference",
        "description": "Look up a GSAP method, plugin or guide in the reference table",
        "inputSchema": {
            "type": "object",
            "properties": {
                "element_name": _required_text('GSAP API element (e.g. "gsap.to", "ScrollTrigger", "DrawSVG")'),
                "detail_level": _label("Detail level needed", DETAIL_LEVELS, "advanced"),
            },
            "required": ["element_name"],
        },
    },
    {
        "name": "debug_request",
        "description": "Diagnose a GSAP animation problem and suggest fixes",
        "inputSchema": {
            "type": "object",
            "properties": {
                "issue_description": _required_text("Description of the animation problem"),
                "code": _optional_text("Problematic animation code"),
                "expected": _optional_text("What should happen vs what is happening"),
            },
            "required": ["issue_description"],
        },
    },
    {
        "name": "optimize_request",
        "description": "Apply textual performance rewrites to GSAP code and explain each one",
        "inputSchema": {
            "type": "object",
            "properties": {
                "source_code": _required_text("Existing GSAP animation code to optimize"),
                "target": _label("Optimization target", OPTIMIZATION_TARGETS, "60fps-desktop"),
            },
            "required": ["source_code"],
        },
    },
    {
        "name": "build_pattern",
        "description": "Generate a production-ready animation pattern",
        "inputSchema": {
            "type": "object",
            "properties": {
                "pattern_type": _required_text("Pattern name: " + ", ".join(PRODUCTION_PATTERNS)),
                "category_label": _label("Industry or use case", list(INDUSTRY_CUSTOMIZATIONS), "portfolio"),
            },
            "required": ["pattern_type"],
        },
    },
    {
        "name": "generate_setup",
        "description": "Generate a complete GSAP environment setup with plugins and optimizations",
        "inputSchema": {
            "type": "object",
            "properties": {
                "framework": _required_text("Target framework: " + ", ".join(SETUP_FRAMEWORKS)),
                "plugins": {
                    "type": ["array", "null"],
                    "description": "Plugins to import and register",
                    "items": {"type": "string", "enum": list(SETUP_PLUGINS)},
                },
                "performance_level": _label("Performance optimization level", PERFORMANCE_LEVELS, "optimized"),
            },
            "required": ["framework"],
        },
    },
]

TOOL_NAMES = tuple(row["name"] for row in TOOL_DEFINITIONS)


def tool_definition(name: str) -> dict[str, Any] | None:
    for row in TOOL_DEFINITIONS:
        if row["name"] == name:
            return row
    return None


__all__ = [
    "OPTIMIZATION_TARGETS",
    "PERFORMANCE_LEVELS",
    "SETUP_FRAMEWORKS",
    "SETUP_PLUGINS",
    "TOOL_DEFINITIONS",
    "TOOL_NAMES",
    "tool_definition",
]
