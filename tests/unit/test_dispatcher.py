from gsapforge.tools import TOOL_NAMES, call_tool, list_tools
from gsapforge.tools import dispatcher


def test_every_published_tool_has_a_handler() -> None:
    assert set(TOOL_NAMES) == set(dispatcher.HANDLERS)
    assert [row["name"] for row in list_tools()] == list(TOOL_NAMES)


def test_list_tools_returns_copies() -> None:
    listed = list_tools()
    listed[0]["name"] = "mutated"
    assert list_tools()[0]["name"] == "classify_and_generate"


def test_success_result_payload() -> None:
    result = call_tool("lookup_reference", {"element_name": "gsap.set"})
    assert not result.is_error
    assert result.error_code is None
    payload = result.to_payload("lookup_reference")
    assert payload["tool"] == "lookup_reference"
    assert payload["is_error"] is False
    assert payload["content"] == [{"type": "text", "text": result.text}]
    assert "error" not in payload


def test_unknown_tool_is_an_error_result() -> None:
    result = call_tool("make_coffee", {})
    assert result.is_error
    assert result.error_code == "unknown_tool"
    assert result.text == "❌ Error: Unknown tool: make_coffee"


def test_validation_runs_before_handler(monkeypatch) -> None:
    calls: list[dict] = []
    monkeypatch.setitem(dispatcher.HANDLERS, "classify_and_generate", lambda args: calls.append(args) or "ok")

    result = call_tool("classify_and_generate", {"request": ""})
    assert result.is_error
    assert result.error_code == "validation_error"
    assert "\n" not in result.text
    assert calls == []

    missing = call_tool("classify_and_generate", None)
    assert missing.error_code == "validation_error"
    assert calls == []


def test_handler_failure_becomes_internal_error(monkeypatch) -> None:
    def boom(arguments: dict) -> str:
        raise RuntimeError("table\nexploded")

    monkeypatch.setitem(dispatcher.HANDLERS, "lookup_reference", boom)
    result = call_tool("lookup_reference", {"element_name": "gsap.to"})
    assert result.is_error
    assert result.error_code == "internal_error"
    assert result.text == "❌ Error: lookup_reference failed: table exploded"


def test_generate_scenarios_end_to_end() -> None:
    scroll = call_tool("classify_and_generate", {"request": "fade in cards one by one when scrolling into view"})
    assert not scroll.is_error
    assert "- **Primary Intent**: scroll_based" in scroll.text
    assert 'ScrollTrigger.batch(".scroll-item"' in scroll.text
    assert "- **Framework**: react" in scroll.text

    text = call_tool(
        "classify_and_generate",
        {"request": "make text appear letter by letter like a typewriter", "context": "vanilla"},
    )
    assert "- **Primary Intent**: text_animations" in text.text
    assert "// Typewriter effect" in text.text
    assert "```javascript" in text.text

    vague = call_tool("classify_and_generate", {"request": "make it nice"})
    assert not vague.is_error
    assert "I need more specific details" in vague.text


def test_generate_uses_configured_defaults(monkeypatch) -> None:
    monkeypatch.setenv("GSAPFORGE_DEFAULT_CONTEXT", "vue")
    monkeypatch.setenv("GSAPFORGE_DEFAULT_COMPLEXITY", "expert")
    result = call_tool("classify_and_generate", {"request": "hover over the button"})
    assert "- **Framework**: vue" in result.text
    assert "- **Complexity**: expert" in result.text
    assert "```javascript" in result.text
