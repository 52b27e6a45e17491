# ml_engine.py
# Keyword-scoring classifier. Deterministic, no model weights, no I/O.

from categories import DEFAULT_REGISTRY, CategoryConfig, CategoryRegistry
from config import (
    BASE_CONFIDENCE,
    CONFIDENCE_PER_KEYWORD,
    FALLBACK_CONFIDENCE,
    MAX_CONFIDENCE,
)
from shared_types import ClassificationResult


def keyword_score(text_lower: str, config: CategoryConfig) -> int:
    # plain substring containment: "pay" also hits "repayment"
    return sum(1 for keyword in config.keywords if keyword in text_lower)


def confidence_for(score: int) -> float:
    if score <= 0:
        return FALLBACK_CONFIDENCE
    return min(BASE_CONFIDENCE + CONFIDENCE_PER_KEYWORD * score, MAX_CONFIDENCE)


def classify(text: str, registry: CategoryRegistry = DEFAULT_REGISTRY) -> ClassificationResult:
    """
    Pick the category whose keywords appear most often in ``text``.

    Categories are scanned in declaration order and a later one only wins
    with a strictly higher score. With no hits at all the registry's
    fallback category is returned at FALLBACK_CONFIDENCE.
    """
    text_lower = (text or "").lower()

    best = registry.fallback
    best_score = 0
    for config in registry.scored():
        score = keyword_score(text_lower, config)
        if score > best_score:
            best_score = score
            best = config

    return ClassificationResult(
        category=best.name,
        confidence=confidence_for(best_score),
        priority=best.priority,
        color=best.color,
        response=best.response_template(text),
    )
