from __future__ import annotations

from dataclasses import dataclass

from app.schemas.match import CandidateProfile, JobPosting

from .scorer import score_compatibility
from .skills import SkillMatcher
from .strength import MatchStrength, match_strength
from .weights import ScoringWeights


@dataclass(frozen=True)
class RankedJob:
    job: JobPosting
    score: int
    strength: MatchStrength
    pinned: bool = False


def rank_jobs(
    profile: CandidateProfile | None,
    jobs: list[JobPosting],
    *,
    min_score: int | None = None,
    limit: int | None = None,
    pinned_job_id: str | None = None,
    weights: ScoringWeights | None = None,
    skill_matcher: SkillMatcher | None = None,
) -> list[RankedJob]:
    """Score every posting, drop those under ``min_score`` and sort best first.

    Ties keep their input order. The posting whose id equals ``pinned_job_id``
    (a pending application) is moved to the top regardless of its score.
    """
    if limit is not None and limit <= 0:
        raise ValueError("limit must be greater than 0")

    weights = weights or ScoringWeights()
    pinned: RankedJob | None = None
    ranked: list[RankedJob] = []
    for job in jobs:
        score = score_compatibility(profile, job, weights=weights, skill_matcher=skill_matcher)
        if pinned is None and pinned_job_id is not None and job.id == pinned_job_id:
            pinned = RankedJob(
                job=job, score=score, strength=match_strength(score, weights), pinned=True
            )
            continue
        if min_score is not None and score < min_score:
            continue
        ranked.append(RankedJob(job=job, score=score, strength=match_strength(score, weights)))

    ranked.sort(key=lambda item: item.score, reverse=True)
    if pinned is not None:
        ranked.insert(0, pinned)
    if limit is not None:
        ranked = ranked[:limit]
    return ranked
