from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from gsapforge.intent.classifier import ClassificationResult


@dataclass(frozen=True)
class GenerationConfig:
    context: str
    complexity: str


def _header(input_echo: str) -> list[str]:
    return ["# 🎯 Generated GSAP Animation", "", f'**Your Request**: "{input_echo}"', ""]


def _analysis(primary: ClassificationResult) -> list[str]:
    # Match strength is relative to the category's own term list and may exceed 1.0.
    return [
        "**🧠 Analysis**:",
        f"- **Primary Intent**: {primary.category_id} "
        f"(match strength {primary.confidence:.2f}, raw score {primary.raw_score})",
        f"- **Detected Keywords**: {', '.join(primary.matched_terms)}",
        f"- **Recommended Techniques**: {', '.join(primary.techniques)}",
        f"- **Best Practices Applied**: {', '.join(primary.best_practices)}",
        "",
    ]


def _configuration(config: GenerationConfig) -> list[str]:
    return [
        "**⚙️ Configuration**:",
        f"- **Framework**: {config.context}",
        f"- **Complexity**: {config.complexity}",
        "- **Performance**: 60fps optimized",
        "- **Responsive**: Mobile-friendly",
        "",
    ]


def _footer(config: GenerationConfig) -> list[str]:
    return [
        "",
        "",
        "## 🚀 Production Features Included:",
        "- ✅ **Performance**: GPU acceleration, memory cleanup",
        "- ✅ **Responsive**: Adapts to all screen sizes",
        "- ✅ **Accessibility**: Respects user motion preferences",
        "- ✅ **Browser Support**: Modern browsers + IE11 with polyfills",
        f"- ✅ **Framework Ready**: {config.context} integration included",
        "- ✅ **Production Tested**: Battle-tested patterns and techniques",
        "",
        "## 🎨 Customization Options:",
        "- **Timing**: Adjust `duration` and `stagger` values",
        '- **Easing**: Try `"power3.out"`, `"elastic.out(1, 0.3)"`, `"back.out(1.7)"`',
        "- **Triggers**: Modify `start` and `end` positions for ScrollTrigger",
        "- **Effects**: Combine multiple properties for unique animations",
        "",
        "*Generated by GSAP Forge* ⚡",
    ]


def format_generation(
    classification: Sequence[ClassificationResult],
    rendered: str,
    input_echo: str,
    config: GenerationConfig,
) -> str:
    """Wrap a rendered body with the request echo, analysis, configuration and footer.

    With an empty classification ``rendered`` is the clarification text. The
    reply is then only the request echo followed by that text: the analysis,
    the configuration summary and the footer are all left out, because the
    footer describes generated code and none was produced.
    """
    lines = _header(input_echo)
    if not classification:
        lines.append(rendered)
        return "\n".join(lines)
    lines.extend(_analysis(classification[0]))
    lines.extend(_configuration(config))
    lines.append(rendered)
    lines.extend(_footer(config))
    return "\n".join(lines)


__all__ = ["GenerationConfig", "format_generation"]
