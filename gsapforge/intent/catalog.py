from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    category_id: str
    keywords: tuple[str, ...]
    boosters: tuple[str, ...] = ()
    techniques: tuple[str, ...] = ()
    best_practices: tuple[str, ...] = ()

    @property
    def term_count(self) -> int:
        return len(self.keywords) + len(self.boosters)


# Declaration order is the tie-break order for ranking.
INTENT_CATEGORIES: tuple[Category, ...] = (
    Category(
        category_id="scroll_based",
        keywords=(
            "scroll",
            "scrolling",
            "viewport",
            "parallax",
            "when scrolling",
            "on scroll",
            "scroll trigger",
            "reveal on scroll",
            "scroll animation",
        ),
        boosters=("viewport", "parallax", "when user scrolls", "scroll into view"),
        techniques=("ScrollTrigger", "parallax", "pin", "scrub", "batch processing"),
        best_practices=(
            "Use ScrollTrigger.batch for performance",
            "Add refreshPriority for important triggers",
            "Use toggleActions for simple reveals",
        ),
    ),
    Category(
        category_id="entrance_animations",
        keywords=("fade in", "slide in", "appear", "entrance", "reveal", "show", "animate in", "come in", "enter"),
        boosters=("when page loads", "on page load", "initially", "at start"),
        techniques=("gsap.from", "stagger", "timeline", "delay"),
        best_practices=(
            "Use power3.out for natural feel",
            "Add stagger for multiple elements",
            "Set initial state with gsap.set",
        ),
    ),
    Category(
        category_id="text_animations",
        keywords=(
            "text",
            "words",
            "characters",
            "letters",
            "typewriter",
            "typing",
            "text reveal",
            "character by character",
            "word by word",
        ),
        boosters=("split text", "character animation", "typing effect", "text effect"),
        techniques=("SplitText", "stagger", "char animation", "word animation"),
        best_practices=(
            "Use SplitText for complex text effects",
            "Add stagger for character reveals",
            "Consider performance on mobile",
        ),
    ),
    Category(
        category_id="interactive",
        keywords=("hover", "click", "drag", "interactive", "on hover", "on click", "mouse over", "touch", "press"),
        boosters=("user interaction", "interactive", "drag and drop", "clickable"),
        techniques=("event listeners", "Draggable", "hover effects", "click animations"),
        best_practices=(
            "Add visual feedback",
            "Use touch-friendly targets",
            "Provide clear interaction hints",
        ),
    ),
    Category(
        category_id="svg_animations",
        keywords=("svg", "path", "draw", "drawing", "stroke", "icon", "vector", "shape", "morph"),
        boosters=("svg path", "draw svg", "svg animation", "vector animation"),
        techniques=("DrawSVG", "MorphSVG", "MotionPath", "stroke animation"),
        best_practices=(
            "Optimize SVG paths",
            "Use vector-effect for consistent strokes",
            "Consider file size",
        ),
    ),
    Category(
        category_id="complex_sequences",
        keywords=("sequence", "timeline", "choreography", "orchestrate", "step by step", "one after another", "chain"),
        boosters=("complex animation", "sequence", "timeline", "choreographed"),
        techniques=("Timeline", "labels", "callbacks", "nested timelines"),
        best_practices=(
            "Use labels for complex timelines",
            "Add callbacks for events",
            "Break complex sequences into smaller timelines",
        ),
    ),
    Category(
        category_id="performance_critical",
        keywords=("smooth", "performance", "60fps", "lag", "stuttering", "optimize", "fast", "efficient"),
        boosters=("performance", "smooth", "60fps", "optimized"),
        techniques=("transform properties", "will-change", "force3D", "efficient selectors"),
        best_practices=(
            "Use transform over layout properties",
            "Add will-change CSS",
            "Cleanup animations properly",
        ),
    ),
)

# Diagnostic categories carry remedies in ``best_practices``.
DIAGNOSTIC_CATEGORIES: tuple[Category, ...] = (
    Category(
        category_id="performance",
        keywords=("lag", "stutter", "slow", "janky", "choppy", "60fps", "performance"),
        best_practices=(
            "Use transform properties (x, y, scale, rotation) instead of CSS positioning",
            "Add force3D: true to enable GPU acceleration",
            "Set will-change: transform on animated elements",
            "Use ScrollTrigger.batch() for multiple elements",
            'Clear properties after animation with clearProps: "all"',
            "Avoid animating layout properties (width, height, top, left)",
        ),
    ),
    Category(
        category_id="scroll_issues",
        keywords=("scroll", "scrolltrigger", "not triggering", "refresh", "positions"),
        best_practices=(
            "Call ScrollTrigger.refresh() after DOM changes",
            "Use invalidateOnRefresh: true for dynamic content",
            "Check if elements exist before creating triggers",
            "Add markers: true for debugging trigger positions",
            "Ensure trigger element has proper positioning context",
            "Use ScrollTrigger.update() to force update positions",
        ),
    ),
    Category(
        category_id="mobile_issues",
        keywords=("mobile", "ios", "android", "touch", "safari", "viewport"),
        best_practices=(
            "Add touch-action: none for draggable elements",
            "Use -webkit-transform for iOS compatibility",
            "Test with real devices, not just browser dev tools",
            "Reduce animation complexity on mobile",
            "Use matchMedia for responsive animations",
            "Handle viewport changes with resize listeners",
        ),
    ),
    Category(
        category_id="timeline_issues",
        keywords=("timeline", "sequence", "order", "timing", "delay", "overlap"),
        best_practices=(
            "Use timeline labels for complex sequences",
            "Check timeline positioning with relative values",
            "Use timeline.progress() to debug current position",
            "Add onUpdate callbacks to track progress",
            "Verify timeline.duration() matches expectations",
            "Use timeline.getChildren() to inspect child tweens",
        ),
    ),
    Category(
        category_id="plugin_issues",
        keywords=("plugin", "splittext", "scrolltrigger", "morphsvg", "drawsvg", "not working"),
        best_practices=(
            "Ensure plugins are registered with gsap.registerPlugin()",
            "Check plugin import paths are correct",
            "Verify you have the correct GSAP version",
            "Test plugin functionality in isolation",
            "Check browser console for plugin errors",
            "Ensure elements exist before applying plugins",
        ),
    ),
)


def category_ids(categories: tuple[Category, ...] = INTENT_CATEGORIES) -> list[str]:
    return [row.category_id for row in categories]


__all__ = ["Category", "DIAGNOSTIC_CATEGORIES", "INTENT_CATEGORIES", "category_ids"]
