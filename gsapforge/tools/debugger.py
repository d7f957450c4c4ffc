from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from gsapforge.intent.catalog import DIAGNOSTIC_CATEGORIES
from gsapforge.intent.classifier import ClassificationResult, score_categories

logger = logging.getLogger("gsapforge.debugger")

LAYOUT_PROPERTIES = ("width:", "height:", "left:", "top:")


@dataclass(frozen=True)
class CodeFinding:
    label: str
    message: str
    severity: str = "warning"

    def render(self) -> str:
        icon = "⚠️" if self.severity == "warning" else "💡"
        return f"{icon} **{self.label}**: {self.message}"


def detect_issues(issue_description: str) -> list[ClassificationResult]:
    """Diagnostic categories matching the description, strongest first (stable on ties)."""
    return sorted(
        score_categories(issue_description, DIAGNOSTIC_CATEGORIES),
        key=lambda row: row.confidence,
        reverse=True,
    )


def scan_code(code: str) -> list[CodeFinding]:
    findings: list[CodeFinding] = []
    uses_plugins = "ScrollTrigger" in code or "SplitText" in code
    if uses_plugins and "gsap.registerPlugin" not in code:
        findings.append(
            CodeFinding(
                "Missing Plugin Registration",
                "Add `gsap.registerPlugin(ScrollTrigger, SplitText)` before using plugins",
            )
        )
    if any(prop in code for prop in LAYOUT_PROPERTIES):
        findings.append(
            CodeFinding(
                "Performance Warning",
                "Consider using transform properties (x, y, scale) instead of layout properties for better performance",
            )
        )
    if "ScrollTrigger" in code and "markers" not in code:
        findings.append(
            CodeFinding("Debug Tip", "Add `markers: true` to ScrollTrigger for visual debugging", severity="tip")
        )
    if ".to(" in code and "force3D" not in code:
        findings.append(
            CodeFinding(
                "Performance Tip",
                "Add `force3D: true` for GPU acceleration on complex animations",
                severity="tip",
            )
        )
    return findings


CHECKLIST: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "Basic Setup",
        (
            "GSAP is properly imported",
            "Required plugins are registered",
            "Elements exist in DOM before animation",
            "No console errors",
        ),
    ),
    (
        "Performance",
        (
            "Using transform properties when possible",
            "GPU acceleration enabled (force3D: true)",
            "will-change CSS property set",
            "Proper cleanup with clearProps",
        ),
    ),
    (
        "ScrollTrigger Specific",
        (
            "Trigger elements have proper positioning",
            "Start/end values are correct",
            "ScrollTrigger.refresh() called after DOM changes",
            "Using markers: true for debugging",
        ),
    ),
    (
        "Mobile Compatibility",
        (
            "Tested on real devices",
            "touch-action CSS property set",
            "Reduced animation complexity",
            "Proper viewport handling",
        ),
    ),
)

QUICK_FIXES = """// Emergency reset - clears all animations
gsap.globalTimeline.clear();
ScrollTrigger.getAll().forEach(t => t.kill());
gsap.set("*", { clearProps: "all" });

// Performance boost
gsap.defaults({ force3D: true, lazy: false });

// ScrollTrigger debug
ScrollTrigger.create({
  trigger: ".your-element",
  markers: true, // Shows trigger points
  onToggle: self => console.log("Triggered:", self.isActive)
});"""


def debug_request(arguments: dict[str, Any]) -> str:
    issue = str(arguments["issue_description"])
    code = str(arguments.get("code") or "")
    expected = str(arguments.get("expected") or "")

    lines = ["# 🔧 GSAP Animation Debugger", "", f"**Issue**: {issue}", ""]
    if expected.strip():
        lines.extend([f"**Expected**: {expected}", ""])

    detected = detect_issues(issue)
    logger.info("debug request matched %d diagnostic categories", len(detected))
    if detected:
        lines.extend(["## 🎯 Detected Issues", ""])
        for index, row in enumerate(detected, start=1):
            lines.append(f"### {index}. {row.category_id.replace('_', ' ').upper()}")
            lines.append(f"**Confidence**: {row.confidence * 100:.1f}%")
            lines.append(f"**Matched**: {', '.join(row.matched_terms)}")
            lines.extend(["", "**Solutions**:"])
            lines.extend(f"- {solution}" for solution in row.best_practices)
            lines.append("")

    if code.strip():
        lines.extend(["## 📝 Code Analysis", "", "```javascript", code, "```", ""])
        findings = scan_code(code)
        if findings:
            lines.append("**Potential Issues Found**:")
            for finding in findings:
                lines.extend([finding.render(), ""])
        else:
            lines.extend(["✅ No common anti-patterns found in the supplied code.", ""])

    lines.extend(["## ✅ Complete Debugging Checklist", ""])
    for index, (title, items) in enumerate(CHECKLIST, start=1):
        lines.append(f"### {index}. {title}")
        lines.extend(f"- [ ] {item}" for item in items)
        lines.append("")

    lines.extend(["## 🚀 Quick Fixes", "", "```javascript", QUICK_FIXES, "```", ""])
    lines.extend(
        [
            "Need more specific help? Provide:",
            "1. **Browser/device** where issue occurs",
            "2. **Complete code** including HTML structure",
            "3. **Console errors** (if any)",
            "4. **Expected vs actual behavior** in detail",
        ]
    )
    return "\n".join(lines)


__all__ = ["CHECKLIST", "CodeFinding", "debug_request", "detect_issues", "scan_code"]
