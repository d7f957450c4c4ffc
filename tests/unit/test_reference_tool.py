from gsapforge.knowledge.api_table import KNOWLEDGE_TABLE
from gsapforge.knowledge.schema import ENTRY_KINDS
from gsapforge.tools.reference import heading, lookup_reference


def test_core_method_full_listing() -> None:
    text = lookup_reference({"element_name": "gsap.to"})
    assert text.startswith("# 🎯 GSAP API Expert: gsap.to")
    assert "**Type**: Core Animation Method" in text
    assert "**Syntax**: `gsap.to(targets, vars)`" in text
    assert "## Parameters" in text
    assert "- **targets**: String selector, object, or array of elements to animate" in text
    assert "## Examples" in text
    assert "### Basic" in text
    assert 'gsap.to(".element", { x: 100, duration: 1 })' in text
    assert "## Animatable Properties" in text
    assert "x, y, z, rotation" in text
    assert "## Performance Tips" in text


def test_basic_detail_level_hides_examples() -> None:
    text = lookup_reference({"element_name": "gsap.to", "detail_level": "basic"})
    assert "**Detail Level**: basic" in text
    assert "## Parameters" in text
    assert "## Examples" not in text
    assert "## Performance Tips" not in text


def test_unknown_detail_level_behaves_as_advanced() -> None:
    assert lookup_reference({"element_name": "gsap.to", "detail_level": "guru"}) == lookup_reference(
        {"element_name": "gsap.to", "detail_level": "advanced"}
    )


def test_plugin_entry_with_tier_and_suffix_lookup() -> None:
    text = lookup_reference({"element_name": "DrawSVG"})
    assert "**Type**: Plugin (PREMIUM_NOW_FREE)" in text
    assert "## Properties" in text
    assert "### Simple Draw" in text

    split = lookup_reference({"element_name": "SplitText", "detail_level": "expert"})
    assert "## Split Types" in split
    assert "## Responsive Handling" in split
    assert "### Match Media" in split


def test_not_found_lists_entries_and_suggestions() -> None:
    text = lookup_reference({"element_name": "gsap.toooo"})
    assert 'API element "gsap.toooo" not found' in text
    assert "## Available Core Methods:" in text
    assert "gsap.to, gsap.from, gsap.fromTo" in text
    assert "## Available Plugins:" in text
    assert "## Did you mean?" in text
    assert "Possible matches: gsap.to" in text


def test_not_found_without_suggestions() -> None:
    text = lookup_reference({"element_name": "qwerty"})
    assert "No close matches" in text


def test_heading_title_cases_labels() -> None:
    assert heading("char_reveal") == "Char Reveal"
    assert heading("basic") == "Basic"


def test_every_entry_kind_is_labeled_and_listed() -> None:
    assert sum(len(KNOWLEDGE_TABLE.names(kind)) for kind in ENTRY_KINDS) == len(KNOWLEDGE_TABLE)
    assert "**Type**: Reference Guide" in lookup_reference({"element_name": "easing"})

    text = lookup_reference({"element_name": "qwerty"})
    titles = ["## Available Core Methods:", "## Available Plugins:", "## Available Guides:"]
    positions = [text.index(title) for title in titles]
    assert positions == sorted(positions)
    assert "Easing" in text[positions[2]:]
