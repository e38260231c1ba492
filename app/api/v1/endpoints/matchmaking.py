"""Matchmaking endpoints — potential matches, like/pass actions, mutual matches."""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.matching.errors import InvalidLimit, ProfileNotFound
from app.services import matchmaking_service
from app.api.v1.endpoints.profiles import profile_to_response
from app.api.v1.schemas.matchmaking import (
    ActionRequest,
    ActionResponse,
    MatchStatsResponse,
    MutualMatchesResponse,
    PotentialMatchesResponse,
    ScoreBreakdownResponse,
    ScoreRuleDetail,
    ScoredProfileResponse,
)

router = APIRouter(prefix="/matchmaking", tags=["Matchmaking"])


@router.get("/{user_id}/potential-matches", response_model=PotentialMatchesResponse)
def get_potential_matches(
    user_id: str,
    limit: int | None = Query(None, description="Maximum number of matches to return"),
    exclude_viewed: bool = Query(True, description="Skip users already liked or passed"),
    db: Session = Depends(get_db),
):
    """
    Rank other players by compatibility with user_id.

    Players the user already liked or passed are skipped unless
    exclude_viewed=false.
    """
    try:
        result = matchmaking_service.find_potential_matches(
            db, user_id, limit=limit, exclude_viewed=exclude_viewed
        )
    except ProfileNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidLimit as e:
        raise HTTPException(status_code=400, detail=str(e))

    return PotentialMatchesResponse(
        matches=[
            ScoredProfileResponse(
                **profile_to_response(profile).model_dump(),
                match_score=match_score,
            )
            for profile, match_score in result.matches
        ],
        total_found=result.total_found,
        viewed_count=result.viewed_count,
        request_time=result.request_time,
    )


@router.get("/{user_id}/score/{target_user_id}", response_model=ScoreBreakdownResponse)
def get_score_breakdown(
    user_id: str,
    target_user_id: str,
    db: Session = Depends(get_db),
):
    """Show how target_user_id scores for user_id, rule by rule."""
    try:
        score_result = matchmaking_service.explain_score(db, user_id, target_user_id)
    except ProfileNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))

    return ScoreBreakdownResponse(
        user_id=user_id,
        target_user_id=target_user_id,
        match_score=score_result.match_score,
        total_score=round(score_result.total_score, 2),
        max_possible=score_result.max_possible,
        rules={
            name: ScoreRuleDetail(
                score=round(rule["score"], 2),
                max_score=rule["max_score"],
                details=rule["details"],
            )
            for name, rule in score_result.rule_scores.items()
        },
    )


@router.post("/action", response_model=ActionResponse)
def record_action(
    request: ActionRequest,
    db: Session = Depends(get_db),
):
    """
    Record a like or pass.

    A like on a player who already liked the user back creates a match and
    notifies both players.
    """
    if request.user_id == request.target_user_id:
        raise HTTPException(status_code=400, detail="Users cannot like or pass themselves")

    result = matchmaking_service.record_action(
        db, request.user_id, request.target_user_id, request.action
    )

    return ActionResponse(
        action=result.action.value,
        is_match=result.is_match,
        message=result.message,
    )


@router.get("/{user_id}/matches", response_model=MutualMatchesResponse)
def get_matches(user_id: str, db: Session = Depends(get_db)):
    """List profiles the user has mutually matched with."""
    profiles = matchmaking_service.get_mutual_matches(db, user_id)
    return MutualMatchesResponse(
        matches=[profile_to_response(p) for p in profiles],
        total_matches=len(profiles),
    )


@router.get("/{user_id}/stats", response_model=MatchStatsResponse)
def get_stats(user_id: str, db: Session = Depends(get_db)):
    """Like, pass and match counts for a user."""
    stats = matchmaking_service.get_stats(db, user_id)
    return MatchStatsResponse(**stats.to_dict())
