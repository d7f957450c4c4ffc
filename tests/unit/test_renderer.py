from gsapforge.templates.renderer import assemble, render, request_comment, skeleton_for, uses_component


def test_skeleton_choice_defaults_to_scroll() -> None:
    assert skeleton_for("scroll_based") == "scroll"
    assert skeleton_for("text_animations") == "text"
    assert skeleton_for("interactive") == "interactive"
    assert skeleton_for("svg_animations") == "scroll"
    assert skeleton_for(None) == "scroll"


def test_component_contexts() -> None:
    assert uses_component("react")
    assert uses_component("NextJS")
    assert not uses_component("vanilla")
    assert not uses_component("vue")


def test_render_is_deterministic() -> None:
    args = ("scroll_based", "fade in cards one by one", {"stagger": True, "parallax": True}, "react")
    assert render(*args) == render(*args)


def test_request_text_is_interpolated_on_one_line() -> None:
    assert request_comment("fade in\ncards   now") == "// Request: fade in cards now\n"
    body = render("scroll_based", "fade in\ncards", {}, "vanilla")
    assert "// Request: fade in cards\n// Context: vanilla\n" in body


def test_scroll_fragments_follow_flags() -> None:
    staggered = render("scroll_based", "x", {"stagger": True, "pinned": True}, "react")
    assert staggered.startswith("## Professional Scroll Animation System")
    assert "```jsx" in staggered
    assert 'ScrollTrigger.batch(".scroll-item"' in staggered
    assert "// Pin section during scroll" in staggered
    assert "parallax-bg absolute" not in staggered

    single = render("scroll_based", "x", {}, "react")
    assert "// Single element scroll animation" in single
    assert "// Pin section during scroll" not in single


def test_module_variant_for_non_component_contexts() -> None:
    body = render("scroll_based", "x", {"parallax": True}, "vanilla")
    assert "```javascript" in body
    assert "useGSAP" not in body
    assert 'gsap.to(".parallax-bg"' in body


def test_text_effect_precedence() -> None:
    both = render("text_animations", "x", {"typewriter": True, "char_reveal": True}, "react")
    assert "// Typewriter effect" in both
    assert "// Character reveal animation" not in both
    assert "Complex Multi-Layer Animation" in both

    lines = render("text_animations", "x", {}, "react")
    assert "// Line by line reveal" in lines

    module_lines = render("text_animations", "x", {}, "vanilla")
    assert "// Word reveal" in module_lines


def test_interactive_component_includes_css_block() -> None:
    body = render("interactive", "x", {"draggable": True}, "react")
    assert "Draggable.create" in body
    assert "```css" in body

    plain = render("interactive", "x", {"hover": True}, "vanilla")
    assert "```css" not in plain
    assert "Draggable" not in plain


def test_missing_category_renders_clarification() -> None:
    section = assemble(None, "", {}, "react")
    assert len(section.fragments) == 1
    body = section.body
    assert "I need more specific details" in body
    for category_id in ("scroll_based", "entrance_animations", "text_animations", "performance_critical"):
        assert f"`{category_id}`" in body
    assert "Fade in portfolio cards one by one" in body
