"""Pydantic schemas for matchmaking endpoints."""

from datetime import datetime
from pydantic import BaseModel

from app.api.v1.schemas.profiles import ProfileResponse
from app.models.like import LikeAction


class ScoredProfileResponse(ProfileResponse):
    """Profile with its compatibility score for the viewer."""
    match_score: int


class PotentialMatchesResponse(BaseModel):
    matches: list[ScoredProfileResponse]
    total_found: int
    viewed_count: int
    request_time: datetime


class ScoreRuleDetail(BaseModel):
    score: float
    max_score: float
    details: str


class ScoreBreakdownResponse(BaseModel):
    user_id: str
    target_user_id: str
    match_score: int
    total_score: float
    max_possible: float
    rules: dict[str, ScoreRuleDetail]


class ActionRequest(BaseModel):
    """Request body for recording a like or pass."""
    user_id: str
    target_user_id: str
    action: LikeAction


class ActionResponse(BaseModel):
    action: str
    is_match: bool
    message: str


class MutualMatchesResponse(BaseModel):
    matches: list[ProfileResponse]
    total_matches: int


class MatchStatsResponse(BaseModel):
    total_likes: int
    total_passes: int
    total_matches: int
    total_actions: int
    match_rate: float
