from gsapforge.intent.catalog import DIAGNOSTIC_CATEGORIES, INTENT_CATEGORIES, Category, category_ids
from gsapforge.intent.classifier import ClassificationResult, classify, score_categories
from gsapforge.intent.flags import FeatureFlags, extract_flags, flags_for

__all__ = [
    "Category",
    "ClassificationResult",
    "DIAGNOSTIC_CATEGORIES",
    "FeatureFlags",
    "INTENT_CATEGORIES",
    "category_ids",
    "classify",
    "extract_flags",
    "flags_for",
    "score_categories",
]
