from gsapforge.knowledge import KNOWLEDGE_TABLE, PRODUCTION_PATTERNS, customizations_for, get_pattern
from gsapforge.knowledge.schema import CodeSection, LabeledSection, detail_rank


def test_lookup_is_case_insensitive_and_ignores_plugin_suffix() -> None:
    assert KNOWLEDGE_TABLE.get("gsap.to").name == "gsap.to"
    assert KNOWLEDGE_TABLE.get("GSAP.FROMTO").name == "gsap.fromTo"
    assert KNOWLEDGE_TABLE.get("DrawSVG").name == "DrawSVGPlugin"
    assert KNOWLEDGE_TABLE.get("scrolltriggerplugin").name == "ScrollTrigger"
    assert KNOWLEDGE_TABLE.get("easing").kind == "guide"
    assert KNOWLEDGE_TABLE.get("gsap.toooo") is None


def test_names_by_kind() -> None:
    assert KNOWLEDGE_TABLE.names("core_method") == [
        "gsap.to",
        "gsap.from",
        "gsap.fromTo",
        "gsap.set",
        "gsap.timeline",
        "gsap.delayedCall",
    ]
    plugins = KNOWLEDGE_TABLE.names("plugin")
    assert "ScrollTrigger" in plugins
    assert "Draggable" in plugins
    assert len(KNOWLEDGE_TABLE) == len(KNOWLEDGE_TABLE.names())


def test_suggestions_use_containment_both_ways() -> None:
    assert "gsap.to" in KNOWLEDGE_TABLE.suggestions("gsap.toooo")
    assert "ScrollTrigger" in KNOWLEDGE_TABLE.suggestions("scroll")
    assert KNOWLEDGE_TABLE.suggestions("") == []


def test_sections_are_typed_once() -> None:
    entry = KNOWLEDGE_TABLE.get("gsap.to")
    assert isinstance(entry.section("Parameters"), LabeledSection)
    assert isinstance(entry.section("Examples"), CodeSection)
    assert entry.section("Nope") is None


def test_detail_gating() -> None:
    entry = KNOWLEDGE_TABLE.get("gsap.to")
    basic = [row.title for row in entry.visible_sections("basic")]
    advanced = [row.title for row in entry.visible_sections("advanced")]
    assert "Examples" not in basic
    assert "Performance Tips" not in basic
    assert "Examples" in advanced
    assert "Performance Tips" in advanced
    assert detail_rank("bogus") == detail_rank("advanced")


def test_patterns_and_industries() -> None:
    assert set(PRODUCTION_PATTERNS) == {
        "hero-section",
        "scroll-system",
        "text-effects",
        "loading-sequence",
        "interactive-ui",
        "page-transitions",
        "micro-interactions",
        "data-visualization",
    }
    assert get_pattern("HERO-SECTION").name == "hero-section"
    assert get_pattern("nonexistent-pattern") is None
    assert customizations_for("unknown") == customizations_for("portfolio")
    assert customizations_for("game")[0] == "Snappy feedback on player input"
