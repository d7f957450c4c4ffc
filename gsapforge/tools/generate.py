from __future__ import annotations

import logging
from typing import Any

from gsapforge.config.runtime_config import VALID_COMPLEXITIES, VALID_CONTEXTS, load_settings
from gsapforge.formatting.response import GenerationConfig, format_generation
from gsapforge.intent.classifier import classify
from gsapforge.intent.flags import flags_for
from gsapforge.templates.renderer import render, skeleton_for

logger = logging.getLogger("gsapforge.generate")


def _label(value: Any, fallback: str, known: tuple[str, ...], name: str) -> str:
    clean = str(value or "").strip()
    if not clean:
        return fallback
    if clean.lower() not in known:
        logger.info("unknown %s label %r, echoing it as given", name, clean)
    return clean


def classify_and_generate(arguments: dict[str, Any]) -> str:
    settings = load_settings()
    request = str(arguments["request"])
    context = _label(arguments.get("context"), settings.default_context, VALID_CONTEXTS, "context")
    complexity = _label(arguments.get("complexity"), settings.default_complexity, VALID_COMPLEXITIES, "complexity")

    results = classify(request)
    if not results:
        logger.info("no intent matched, returning clarification")
        body = render(None, request, {}, context)
    else:
        primary = results[0]
        skeleton = skeleton_for(primary.category_id)
        body = render(primary.category_id, request, flags_for(skeleton, request), context)
    return format_generation(results, body, request, GenerationConfig(context=context, complexity=complexity))


__all__ = ["classify_and_generate"]
