"""Template assembly for generated animation code.

``render`` is a pure function of its arguments: it picks a skeleton for the
category, includes flag-gated fragments, and interpolates the request text
and the target context. An absent category renders the clarification text.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Mapping

from gsapforge.templates import clarification, interactive, scroll, text

COMPONENT_CONTEXTS = {"react", "nextjs"}
DEFAULT_SKELETON = "scroll"

SKELETONS: dict[str, ModuleType] = {
    "scroll": scroll,
    "text": text,
    "interactive": interactive,
}

# Categories without their own skeleton fall back to DEFAULT_SKELETON.
CATEGORY_SKELETONS = {
    "scroll_based": "scroll",
    "text_animations": "text",
    "interactive": "interactive",
}


@dataclass(frozen=True)
class RenderedSection:
    fragments: tuple[str, ...]

    @property
    def body(self) -> str:
        return "".join(self.fragments)


def skeleton_for(category_id: str | None) -> str:
    return CATEGORY_SKELETONS.get(str(category_id or ""), DEFAULT_SKELETON)


def uses_component(context: str) -> bool:
    return str(context or "").strip().lower() in COMPONENT_CONTEXTS


def request_comment(original_text: str) -> str:
    collapsed = " ".join(str(original_text or "").split())
    return f"// Request: {collapsed}\n"


def _fenced(language: str, code: str) -> str:
    return f"```{language}\n{code.rstrip()}\n```\n"


def assemble(category_id: str | None, original_text: str, flags: Mapping[str, bool], context: str) -> RenderedSection:
    if category_id is None:
        return RenderedSection(fragments=(clarification.clarification_text(),))

    skeleton = SKELETONS[skeleton_for(category_id)]
    flag_values = dict(flags)
    component = uses_component(context)
    header = request_comment(original_text) + f"// Context: {context}\n"
    if component:
        fragments = [skeleton.TITLE, "\n\n", _fenced("jsx", header + skeleton.component_code(flag_values))]
        extra_css = getattr(skeleton, "COMPONENT_CSS", "")
        if extra_css:
            fragments.extend(["\n", _fenced("css", extra_css)])
    else:
        fragments = [skeleton.TITLE, "\n\n", _fenced("javascript", header + skeleton.module_code(flag_values))]
    fragments.extend(["\n", skeleton.FEATURES])
    return RenderedSection(fragments=tuple(fragments))


def render(category_id: str | None, original_text: str, flags: Mapping[str, bool], context: str) -> str:
    return assemble(category_id, original_text, flags, context).body


__all__ = ["RenderedSection", "assemble", "render", "skeleton_for", "uses_component"]
