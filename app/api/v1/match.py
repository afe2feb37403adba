from fastapi import APIRouter, HTTPException, Request

from app.core.config import settings
from app.core.rate_limit import rate_limit
from app.schemas.match import RankRequest, RankResponse, ScoreRequest, ScoreResponse
from app.services.match_service import MatchRequestError, run_rank, run_score

router = APIRouter()


@router.post("/match/score", response_model=ScoreResponse)
@rate_limit()
async def match_score(request: Request, payload: ScoreRequest):
    _ = request
    return run_score(payload)


@router.post("/match/rank", response_model=RankResponse)
@rate_limit(settings.rank_rate_limit)
async def match_rank(request: Request, payload: RankRequest):
    _ = request
    try:
        return run_rank(payload)
    except MatchRequestError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
