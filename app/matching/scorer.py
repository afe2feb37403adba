"""Candidate/job compatibility scorer.

Converts a candidate's AI-derived profile and a job posting into an integer
score in [0, 100]. Every missing-data branch has a fixed fallback value, so the
function degrades instead of raising. A profile that has not been generated yet
yields the neutral score.
"""

from __future__ import annotations

import logging
import math

from app.schemas.match import CandidateProfile, JobPosting

from .skills import SkillMatcher, SubstringSkillMatcher, count_matched_skills
from .weights import ScoringWeights

logger = logging.getLogger(__name__)

_DEFAULT_SKILL_MATCHER = SubstringSkillMatcher()
_DEFAULT_WEIGHTS = ScoringWeights()


def _first_token(text: str) -> str:
    tokens = text.lower().split()
    return tokens[0] if tokens else ""


def skills_subscore(
    profile: CandidateProfile,
    job: JobPosting,
    weights: ScoringWeights,
    matcher: SkillMatcher,
) -> float:
    if not job.skills or not profile.skills:
        return weights.skills_fallback
    matched = count_matched_skills(job.skills, profile.skills, matcher)
    return (matched / len(job.skills)) * weights.skills


def experience_subscore(profile: CandidateProfile, job: JobPosting, weights: ScoringWeights) -> float:
    if not job.experience_level or not profile.experience:
        return weights.experience_fallback

    # Entry count stands in for years of experience.
    years = len(profile.experience)
    level = job.experience_level.lower()
    for band in weights.experience_bands:
        if band.label in level and band.holds(years):
            return weights.experience
    return 0


def work_style_subscore(profile: CandidateProfile, job: JobPosting, weights: ScoringWeights) -> float:
    workplace = job.employment_type or job.location
    if not workplace or not profile.work_style:
        return weights.work_style_fallback

    workplace_lower = workplace.lower()
    style_lower = profile.work_style.lower()
    for signal in weights.work_style_signals:
        if signal in style_lower and signal in workplace_lower:
            return weights.work_style
    return 0


def goals_subscore(profile: CandidateProfile, job: JobPosting, weights: ScoringWeights) -> float:
    if not job.description or not profile.career_goals:
        return 0

    description_lower = job.description.lower()
    goals_lower = profile.career_goals.lower()
    goal_token = _first_token(goals_lower)
    title_token = _first_token(job.title or "")

    if goal_token and goal_token in description_lower:
        return weights.goals
    if title_token and title_token in goals_lower:
        return weights.goals
    return 0


def finalize_score(total: float, weights: ScoringWeights) -> int:
    if not math.isfinite(total):
        logger.debug("match_score_non_finite total=%s fallback=%s", total, weights.neutral_score)
        return weights.neutral_score
    # Half-up rounding, not banker's rounding.
    rounded = math.floor(total + 0.5)
    return max(0, min(rounded, weights.max_score))


def score_compatibility(
    profile: CandidateProfile | None,
    job: JobPosting,
    *,
    weights: ScoringWeights | None = None,
    skill_matcher: SkillMatcher | None = None,
) -> int:
    """Return the 0-100 compatibility score of ``profile`` for ``job``.

    ``profile`` is None while the AI-derived profile has not been generated;
    that case returns the neutral score without partial scoring. Without
    explicit ``weights`` the built-in defaults apply; callers that honour
    config/scoring.yaml pass ``load_scoring_weights()``.
    """
    weights = weights or _DEFAULT_WEIGHTS
    if profile is None:
        return weights.neutral_score

    matcher = skill_matcher or _DEFAULT_SKILL_MATCHER
    total = (
        skills_subscore(profile, job, weights, matcher)
        + experience_subscore(profile, job, weights)
        + work_style_subscore(profile, job, weights)
        + goals_subscore(profile, job, weights)
    )
    return finalize_score(total, weights)
