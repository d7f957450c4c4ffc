"""Keyword intent scoring.

Every category is scored independently against the lowercased request:
base keywords add 1, booster phrases add 2. ``confidence`` divides the raw
score by the category's own term count, so it is a relative ranking signal
that can exceed 1.0 and is never a calibrated probability.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gsapforge.intent.catalog import INTENT_CATEGORIES, Category

logger = logging.getLogger("gsapforge.intent")

KEYWORD_WEIGHT = 1
BOOSTER_WEIGHT = 2
BOOSTER_SUFFIX = " (high confidence)"


@dataclass(frozen=True)
class ClassificationResult:
    category_id: str
    raw_score: int
    confidence: float
    matched_terms: tuple[str, ...]
    techniques: tuple[str, ...] = ()
    best_practices: tuple[str, ...] = ()

    @property
    def booster_matches(self) -> list[str]:
        return [term[: -len(BOOSTER_SUFFIX)] for term in self.matched_terms if term.endswith(BOOSTER_SUFFIX)]


def _score(lowered: str, category: Category) -> ClassificationResult | None:
    raw_score = 0
    matched: list[str] = []
    for keyword in category.keywords:
        if keyword in lowered:
            raw_score += KEYWORD_WEIGHT
            matched.append(keyword)
    for booster in category.boosters:
        if booster in lowered:
            raw_score += BOOSTER_WEIGHT
            matched.append(f"{booster}{BOOSTER_SUFFIX}")
    if raw_score <= 0:
        return None
    return ClassificationResult(
        category_id=category.category_id,
        raw_score=raw_score,
        confidence=raw_score / max(1, category.term_count),
        matched_terms=tuple(matched),
        techniques=category.techniques,
        best_practices=category.best_practices,
    )


def score_categories(text: str, categories: tuple[Category, ...] = INTENT_CATEGORIES) -> list[ClassificationResult]:
    """Score ``text`` against ``categories`` in declaration order, dropping zero scores."""
    lowered = str(text or "").lower()
    if not lowered.strip():
        return []
    results: list[ClassificationResult] = []
    for category in categories:
        result = _score(lowered, category)
        if result is not None:
            results.append(result)
    return results


def classify(text: str, categories: tuple[Category, ...] = INTENT_CATEGORIES) -> list[ClassificationResult]:
    """Rank matching categories by raw score, keeping declaration order on ties."""
    results = sorted(score_categories(text, categories), key=lambda row: row.raw_score, reverse=True)
    if results:
        logger.debug(
            "classified request: %s",
            ", ".join(f"{row.category_id}={row.raw_score}" for row in results),
        )
    return results


__all__ = ["BOOSTER_SUFFIX", "ClassificationResult", "classify", "score_categories"]
