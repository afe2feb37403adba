from __future__ import annotations

from enum import Enum

from .weights import ScoringWeights

_DEFAULT_WEIGHTS = ScoringWeights()


class MatchStrength(str, Enum):
    STRONG = "strong"
    GOOD = "good"
    NONE = "none"


def match_strength(score: int, weights: ScoringWeights | None = None) -> MatchStrength:
    weights = weights or _DEFAULT_WEIGHTS
    if score >= weights.strong_threshold:
        return MatchStrength.STRONG
    if score >= weights.good_threshold:
        return MatchStrength.GOOD
    return MatchStrength.NONE


def should_display(
    score: int,
    min_score: int | None = None,
    weights: ScoringWeights | None = None,
) -> bool:
    """Badge gate; defaults to the job-list threshold."""
    if min_score is None:
        min_score = (weights or _DEFAULT_WEIGHTS).list_badge_threshold
    return score >= min_score
