from gsapforge.intent import DIAGNOSTIC_CATEGORIES, INTENT_CATEGORIES, category_ids, classify, score_categories
from gsapforge.intent.classifier import BOOSTER_SUFFIX


def test_empty_and_blank_input_classify_to_nothing() -> None:
    assert classify("") == []
    assert classify("   \n ") == []
    assert classify("zzz qqq") == []


def test_scroll_request_outranks_entrance() -> None:
    results = classify("fade in cards one by one when scrolling into view")
    ids = [row.category_id for row in results]
    assert "scroll_based" in ids
    assert "entrance_animations" in ids
    assert ids.index("scroll_based") < ids.index("entrance_animations")

    scroll = results[0]
    assert scroll.category_id == "scroll_based"
    assert scroll.raw_score == 3
    assert scroll.matched_terms == ("scroll", "scrolling", "when scrolling")


def test_typewriter_request_classifies_as_text() -> None:
    results = classify("make text appear letter by letter like a typewriter")
    assert results[0].category_id == "text_animations"
    assert results[0].confidence > 0
    assert "typewriter" in results[0].matched_terms


def test_results_sorted_by_raw_score_with_stable_ties() -> None:
    results = classify("fade in and hover")
    assert [row.category_id for row in results] == ["entrance_animations", "interactive"]
    assert [row.raw_score for row in results] == [1, 1]

    mixed = classify("an interactive timeline sequence with smooth scroll and text")
    scores = [row.raw_score for row in mixed]
    assert scores == sorted(scores, reverse=True)


def test_keyword_and_booster_score_independently() -> None:
    results = classify("an interactive widget")
    assert len(results) == 1
    row = results[0]
    assert row.category_id == "interactive"
    assert row.raw_score == 3
    assert row.matched_terms == ("interactive", f"interactive{BOOSTER_SUFFIX}")
    assert row.booster_matches == ["interactive"]
    assert row.confidence == 3 / 13


def test_every_result_has_positive_score_covering_its_keywords() -> None:
    text = "Smooth SVG path drawing on scroll with a staggered text reveal and click feedback"
    for row in classify(text):
        assert row.raw_score >= 1
        plain = [term for term in row.matched_terms if not term.endswith(BOOSTER_SUFFIX)]
        assert row.raw_score >= len(set(plain))


def test_classification_is_case_insensitive() -> None:
    assert classify("PARALLAX Hero") == classify("parallax hero")


def test_score_categories_keeps_declaration_order() -> None:
    ids = [row.category_id for row in score_categories("timeline with a smooth parallax")]
    declared = category_ids()
    assert ids == [row for row in declared if row in ids]


def test_diagnostic_categories_have_no_boosters() -> None:
    for category in DIAGNOSTIC_CATEGORIES:
        assert category.boosters == ()
        assert category.best_practices
    assert len(INTENT_CATEGORIES) == 7
