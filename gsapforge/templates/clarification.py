from __future__ import annotations

from gsapforge.intent.catalog import INTENT_CATEGORIES

EXAMPLE_REQUESTS = (
    "Fade in portfolio cards one by one when scrolling into view",
    "Create a hero title that reveals character by character on page load",
    "Build a smooth hover effect for navigation buttons",
    "Make an interactive drag system for image gallery",
)

CATEGORY_BLURBS = {
    "scroll_based": "✨ **Scroll-based effects** - Parallax, reveals, pins, scrubbing",
    "entrance_animations": "🚪 **Entrance animations** - Fades, slides, staggered page-load reveals",
    "text_animations": "🎭 **Text animations** - Character reveals, typewriter, morphing",
    "interactive": "🎯 **Interactive elements** - Hover, click, drag, touch gestures",
    "svg_animations": "✏️ **SVG animations** - Stroke drawing, morphing, motion paths",
    "complex_sequences": "🎬 **Complex sequences** - Timelines, choreographed animations",
    "performance_critical": "⚡ **Performance critical** - 60fps, mobile-optimized, efficient",
}


def clarification_text() -> str:
    lines = [
        "# Animation Request Analysis",
        "",
        "I need more specific details to create the animation. Could you describe:",
        "",
        "**What elements should animate?** (buttons, cards, text, images, etc.)",
        "**When should it trigger?** (page load, scroll, hover, click, etc.)",
        "**What kind of movement?** (fade, slide, scale, rotate, etc.)",
        "",
        "## Examples of clear requests:",
    ]
    lines.extend(f'- *"{example}"*' for example in EXAMPLE_REQUESTS)
    lines.extend(["", "## I can create animations for:"])
    for category in INTENT_CATEGORIES:
        blurb = CATEGORY_BLURBS.get(category.category_id, f"**{category.category_id}**")
        lines.append(f"{blurb} (`{category.category_id}`)")
    lines.extend(["", "Describe what you want in natural language and I'll generate production-ready code."])
    return "\n".join(lines)
