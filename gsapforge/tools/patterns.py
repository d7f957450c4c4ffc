from __future__ import annotations

import logging
from typing import Any

from gsapforge.knowledge.patterns import DEFAULT_INDUSTRY, customizations_for, get_pattern, pattern_names

logger = logging.getLogger("gsapforge.patterns")

BASE_PATTERN_CSS = """.animated-element {
  will-change: transform, opacity;
  backface-visibility: hidden;
}"""


def build_pattern(arguments: dict[str, Any]) -> str:
    pattern_type = str(arguments["pattern_type"]).strip()
    industry = str(arguments.get("category_label") or DEFAULT_INDUSTRY).strip()

    lines = [f"# 🎨 Production Pattern: {pattern_type.upper()}", "", f"**Industry**: {industry} | **Pattern**: {pattern_type}", ""]
    pattern = get_pattern(pattern_type)
    if pattern is None:
        logger.info("unknown pattern %r", pattern_type)
        lines.append(f'Pattern "{pattern_type}" not found. Available patterns:')
        lines.extend(f"- {name}" for name in pattern_names())
        return "\n".join(lines)

    css = f"/* Essential styles for {pattern.name} */\n{BASE_PATTERN_CSS}"
    if pattern.css:
        css = f"{css}\n\n{pattern.css}"

    lines.extend(["## 📋 Pattern Description", pattern.description, ""])
    lines.extend(["## 🚀 Production Code", "", "```javascript", pattern.code, "```", ""])
    lines.append("## ✨ Features Included")
    lines.extend(f"- ✅ {feature}" for feature in pattern.features)
    lines.extend(["", "## 🎨 Required HTML Structure", "", "```html", pattern.html, "```", ""])
    lines.extend(["## 💅 Required CSS", "", "```css", css, "```", ""])
    lines.extend([f"## 🎯 Industry Customization ({industry})", ""])
    lines.extend(f"- {row}" for row in customizations_for(industry))
    lines.extend(["", f"🎉 **Production-ready pattern for {industry} industry!**"])
    return "\n".join(lines)


__all__ = ["build_pattern"]
