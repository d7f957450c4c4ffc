from gsapforge.tools.debugger import debug_request, detect_issues, scan_code


def test_detected_issues_sorted_by_confidence() -> None:
    detected = detect_issues("animation is janky and slow on mobile safari")
    assert [row.category_id for row in detected] == ["mobile_issues", "performance"]
    assert detected[0].confidence == 2 / 6
    assert detected[1].confidence == 2 / 7


def test_report_lists_solutions_and_checklist() -> None:
    text = debug_request(
        {
            "issue_description": "animation is janky and slow on mobile safari",
            "expected": "smooth slide in",
        }
    )
    assert "**Issue**: animation is janky and slow on mobile safari" in text
    assert "**Expected**: smooth slide in" in text
    assert "### 1. MOBILE ISSUES" in text
    assert "**Confidence**: 33.3%" in text
    assert "- Add touch-action: none for draggable elements" in text
    assert "## 📝 Code Analysis" not in text
    assert "## ✅ Complete Debugging Checklist" in text
    assert "### 4. Mobile Compatibility" in text
    assert "gsap.globalTimeline.clear();" in text


def test_unmatched_issue_still_gets_checklist() -> None:
    text = debug_request({"issue_description": "it is weird"})
    assert "## 🎯 Detected Issues" not in text
    assert "## ✅ Complete Debugging Checklist" in text


def test_code_scan_flags_common_mistakes() -> None:
    findings = scan_code('gsap.to(".box", { left: 100, duration: 1 }); ScrollTrigger.create({})')
    labels = [row.label for row in findings]
    assert labels == ["Missing Plugin Registration", "Performance Warning", "Debug Tip", "Performance Tip"]


def test_clean_code_has_no_findings() -> None:
    code = 'gsap.registerPlugin(ScrollTrigger);\ngsap.to(".box", { x: 100, force3D: true, scrollTrigger: { markers: true } });'
    assert scan_code(code) == []
    text = debug_request({"issue_description": "scroll not triggering", "code": code})
    assert "## 📝 Code Analysis" in text
    assert "No common anti-patterns found" in text
