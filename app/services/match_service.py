from __future__ import annotations

import logging

from app.core.config import settings
from app.matching import (
    load_scoring_weights,
    match_strength,
    rank_jobs,
    score_compatibility,
    should_display,
)
from app.schemas.match import RankRequest, RankResponse, ScoredJob, ScoreRequest, ScoreResponse

logger = logging.getLogger(__name__)


class MatchRequestError(RuntimeError):
    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


def run_score(payload: ScoreRequest) -> ScoreResponse:
    weights = load_scoring_weights()
    score = score_compatibility(payload.profile, payload.job, weights=weights)
    logger.info(
        "match_score job_id=%s profile_present=%s score=%s",
        payload.job.id,
        payload.profile is not None,
        score,
    )
    return ScoreResponse(
        score=score,
        strength=match_strength(score, weights).value,
        display=should_display(score, weights.detail_card_threshold),
    )


def run_rank(payload: RankRequest) -> RankResponse:
    if len(payload.jobs) > settings.match_rank_max_jobs:
        raise MatchRequestError(
            f"Too many job postings: {len(payload.jobs)} (max {settings.match_rank_max_jobs}).",
            status_code=413,
        )

    ranked = rank_jobs(
        payload.profile,
        payload.jobs,
        min_score=payload.min_score,
        limit=payload.limit,
        pinned_job_id=payload.pinned_job_id,
        weights=load_scoring_weights(),
    )
    logger.info(
        "match_rank jobs=%s returned=%s min_score=%s profile_present=%s",
        len(payload.jobs),
        len(ranked),
        payload.min_score,
        payload.profile is not None,
    )
    return RankResponse(
        results=[
            ScoredJob(
                job_id=item.job.id,
                title=item.job.title,
                score=item.score,
                strength=item.strength.value,
                pinned=item.pinned,
            )
            for item in ranked
        ],
        total=len(payload.jobs),
    )
