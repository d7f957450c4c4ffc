import pytest

from gsapforge.tools.dispatcher import call_tool
from gsapforge.tools.validation import ArgumentValidator, ToolValidationError


def test_missing_required_argument_is_rejected() -> None:
    validator = ArgumentValidator()
    with pytest.raises(ToolValidationError) as exc_info:
        validator.validate("classify_and_generate", {})
    exc = exc_info.value
    assert exc.tool == "classify_and_generate"
    assert exc.issues[0]["path"] == "$"
    assert "'request' is a required property" in exc.issues[0]["message"]
    assert "\n" not in str(exc)


@pytest.mark.parametrize("value", ["", "   ", "\n\t"])
def test_blank_required_text_is_rejected(value: str) -> None:
    validator = ArgumentValidator()
    with pytest.raises(ToolValidationError) as exc_info:
        validator.validate("classify_and_generate", {"request": value})
    assert all(row["path"] == "request" for row in exc_info.value.issues)
    assert exc_info.value.issues[0]["message"] == "must be a non-empty string"


def test_wrong_type_is_rejected() -> None:
    validator = ArgumentValidator()
    with pytest.raises(ToolValidationError):
        validator.validate("lookup_reference", {"element_name": 5})
    with pytest.raises(ToolValidationError):
        validator.validate("generate_setup", {"framework": "react", "plugins": "ScrollTrigger"})


def test_enumerated_labels_are_advisory() -> None:
    validator = ArgumentValidator()
    validator.validate("classify_and_generate", {"request": "fade in", "context": "svelte", "complexity": "epic"})
    validator.validate("generate_setup", {"framework": "solid", "plugins": ["NotAPlugin"]})
    validator.validate("build_pattern", {"pattern_type": "nonexistent-pattern", "category_label": "space"})


def test_unknown_tool_has_no_schema() -> None:
    ArgumentValidator().validate("not-a-tool", {})


def test_null_optional_arguments_are_accepted() -> None:
    validator = ArgumentValidator()
    validator.validate("debug_request", {"issue_description": "lag on scroll", "code": None, "expected": None})
    validator.validate("classify_and_generate", {"request": "fade in", "context": None, "complexity": None})
    validator.validate("generate_setup", {"framework": "react", "plugins": None, "performance_level": None})
    with pytest.raises(ToolValidationError):
        validator.validate("classify_and_generate", {"request": None})


def test_null_optional_arguments_fall_back_to_defaults(monkeypatch) -> None:
    monkeypatch.delenv("GSAPFORGE_DEFAULT_CONTEXT", raising=False)
    debug = call_tool("debug_request", {"issue_description": "lag on scroll", "code": None})
    assert not debug.is_error
    assert "No common anti-patterns found" not in debug.text

    generated = call_tool("classify_and_generate", {"request": "hover over the button", "context": None})
    assert not generated.is_error
    assert "- **Framework**: react" in generated.text
