from gsapforge.knowledge import pattern_names
from gsapforge.tools.environment import FULL_PLUGIN_ROSTER, generate_setup, normalize_plugins
from gsapforge.tools.patterns import build_pattern


def test_known_pattern_renders_all_sections() -> None:
    text = build_pattern({"pattern_type": "hero-section", "category_label": "ecommerce"})
    assert text.startswith("# 🎨 Production Pattern: HERO-SECTION")
    assert "**Industry**: ecommerce | **Pattern**: hero-section" in text
    assert "Epic hero section with layered animations and scroll effects" in text
    assert "const heroTimeline = gsap.timeline" in text
    assert "- ✅ Parallax background" in text
    assert '<section class="hero-section">' in text
    assert ".hero-bg { position: absolute; inset: 0; z-index: -1; }" in text
    assert "- Add product hover effects" in text


def test_unknown_pattern_enumerates_names_without_rendering() -> None:
    text = build_pattern({"pattern_type": "nonexistent-pattern"})
    assert 'Pattern "nonexistent-pattern" not found. Available patterns:' in text
    for name in pattern_names():
        assert f"- {name}" in text
    assert "```" not in text


def test_unknown_industry_uses_portfolio_customizations() -> None:
    text = build_pattern({"pattern_type": "micro-interactions", "category_label": "space"})
    assert "## 🎯 Industry Customization (space)" in text
    assert "- Add personal branding colors" in text


def test_game_industry() -> None:
    text = build_pattern({"pattern_type": "data-visualization", "category_label": "game"})
    assert "- Score and reward celebrations" in text


def test_react_setup_registers_full_roster() -> None:
    text = generate_setup({"framework": "react"})
    assert "npm install gsap @gsap/react" in text
    for name in FULL_PLUGIN_ROSTER:
        assert f'import {{ {name} }} from "gsap/{name}";' in text
    assert "// ScrollTrigger example" in text
    assert "gsap.defaults(performanceConfig);" not in text


def test_react_setup_without_scrolltrigger_skips_batch_example() -> None:
    text = generate_setup({"framework": "nextjs", "plugins": ["SplitText"]})
    assert "// ScrollTrigger example" not in text


def test_vanilla_setup_registers_requested_plugins_only() -> None:
    text = generate_setup({"framework": "vanilla", "plugins": ["Flip"], "performance_level": "60fps-guaranteed"})
    assert "```bash\nnpm install gsap\n```" in text
    assert 'import { Flip } from "gsap/Flip";' in text
    assert "gsap.registerPlugin(Flip);" in text
    assert "ScrollToPlugin" not in text
    assert "## 🔧 Performance Optimizations (60fps-guaranteed)" in text
    assert "gsap.defaults(performanceConfig);" in text


def test_plugin_normalization() -> None:
    assert normalize_plugins(None) == ["ScrollTrigger", "SplitText"]
    assert normalize_plugins("Flip, Observer,Flip") == ["Flip", "Observer"]
    assert normalize_plugins([]) == []
