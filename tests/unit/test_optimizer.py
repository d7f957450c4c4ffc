from gsapforge.tools.optimizer import apply_optimizations, optimize_request


def test_layout_and_force3d_rewrites_are_counted() -> None:
    optimized, applied = apply_optimizations('gsap.to(".box", { left: 100, top: 50, duration: 1 });')
    assert optimized == 'gsap.to(".box", { x: 100, y: 50, duration: 1, force3D: true });'
    assert [row.issue for row in applied] == ["Layout Properties Detected", "Missing GPU Acceleration"]
    assert applied[0].rewritten == 2
    assert applied[1].rewritten == 1


def test_every_duration_gets_force3d() -> None:
    code = 'gsap.to(".a", { y: 10, duration: 0.5 });\ngsap.from(".b", { opacity: 0, duration: 2 });'
    optimized, applied = apply_optimizations(code)
    assert optimized.count("force3D: true") == 2
    assert applied[0].rewritten == 2


def test_already_optimized_code_is_left_alone() -> None:
    code = 'gsap.to(".box", { x: 100, duration: 1, force3D: true });'
    optimized, applied = apply_optimizations(code)
    assert optimized == code
    assert applied == []
    text = optimize_request({"source_code": code})
    assert "✅ **Code is already well-optimized!**" in text


def test_many_tweens_produce_advisory_only() -> None:
    code = "\n".join(f'gsap.to(".i{n}", {{ x: {n}, force3D: true }});' for n in range(4))
    optimized, applied = apply_optimizations(code)
    assert optimized == code
    assert len(applied) == 1
    assert applied[0].advisory
    text = optimize_request({"source_code": code})
    assert "### 1. Multiple GSAP Calls (MEDIUM Impact)" in text
    assert "advisory only" in text


def test_report_documents_before_and_after() -> None:
    text = optimize_request({"source_code": 'gsap.to(".box", { left: 100, duration: 1 });'})
    assert "**Target**: 60fps-desktop" in text
    assert "gsap.defaults({ force3D: true, lazy: false });" in text
    assert "**Before**: `left: 100, top: 50`" in text
    assert "**After**: `x: 100, y: 50`" in text
    assert "**Rewritten**: 1 occurrence(s)" in text
    assert "perfMonitor.checkFPS();" in text
    assert "## 💡 60FPS-DESKTOP Performance Tips" in text
    assert "@media (max-width: 767px)" not in text


def test_mobile_target_wraps_code_in_branch() -> None:
    text = optimize_request({"source_code": 'gsap.to(".box", { x: 1, duration: 1 });', "target": "mobile-smooth"})
    assert "const isMobile = window.innerWidth < 768;" in text
    assert '  gsap.to(".box", { x: 1, duration: 1, force3D: true });' in text
    assert "@media (max-width: 767px)" in text
    assert "- Use shorter durations (0.3-0.8s) for touch interactions" in text


def test_unknown_target_uses_desktop_tips() -> None:
    text = optimize_request({"source_code": "gsap.set('.a', { x: 0 });", "target": "warp-speed"})
    assert "**Target**: warp-speed" in text
    assert "## 💡 WARP-SPEED Performance Tips" in text
    assert "- Use transform properties exclusively for smooth 60fps" in text
