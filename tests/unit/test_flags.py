from gsapforge.intent.flags import SCROLL_FLAGS, SKELETON_FLAGS, TEXT_FLAGS, extract_flags, flags_for


def test_any_trigger_sets_flag() -> None:
    flags = extract_flags("Reveal cards ONE BY ONE", SCROLL_FLAGS)
    assert flags == {"parallax": False, "stagger": True, "pinned": False}


def test_flags_are_not_mutually_exclusive() -> None:
    flags = flags_for("scroll", "parallax hero that should stick, with staggered items")
    assert flags == {"parallax": True, "stagger": True, "pinned": True}


def test_typewriter_flag_from_typing_trigger() -> None:
    flags = extract_flags("a typing effect for the headline", TEXT_FLAGS)
    assert flags["typewriter"] is True
    assert flags["word_reveal"] is False


def test_interactive_flags() -> None:
    flags = flags_for("interactive", "drag the cards and hover to highlight")
    assert flags == {"draggable": True, "hover": True, "click": False}


def test_unknown_skeleton_yields_no_flags() -> None:
    assert flags_for("missing", "parallax") == {}


def test_each_skeleton_has_its_flag_set() -> None:
    assert sorted(SKELETON_FLAGS) == ["interactive", "scroll", "text"]
    assert flags_for("unknown", "drag and hover") == {}
