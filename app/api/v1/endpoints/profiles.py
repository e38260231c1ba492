"""Profile endpoints — list, fetch, create, upsert, and delete player profiles."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.profile import Profile
from app.services import username_service
from app.services.username_service import InvalidUsername
from app.api.v1.endpoints.usernames import availability_response
from app.api.v1.schemas.usernames import UsernameCheckResponse
from app.api.v1.schemas.profiles import (
    ProfileCreateRequest,
    ProfileFields,
    ProfileListResponse,
    ProfileResponse,
    ProfileUpsertRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profiles", tags=["Profiles"])

# username goes through _resolve_username instead
_EDITABLE_FIELDS = tuple(name for name in ProfileFields.model_fields if name != "username")


def profile_to_response(profile: Profile) -> ProfileResponse:
    """Convert a Profile ORM object to a ProfileResponse schema."""
    return ProfileResponse(
        user_id=profile.user_id,
        first_name=profile.first_name,
        last_name=profile.last_name,
        username=profile.username,
        bio=profile.bio,
        profile_image_url=profile.profile_image_url,
        skill_level=profile.skill_level or 0.0,
        skill_tier=profile.skill_tier,
        preferred_location=profile.preferred_location,
        preferred_game_types=profile.preferred_game_types or [],
        availability=profile.availability or {},
        created_at=profile.created_at,
        updated_at=profile.updated_at,
    )


def _apply_fields(profile: Profile, request: ProfileFields) -> None:
    for name in _EDITABLE_FIELDS:
        setattr(profile, name, getattr(request, name))


def _resolve_username(db: Session, user_id: str, username: str | None) -> str | None:
    """Normalize a profile username; 400 if malformed, 409 if another user has it."""
    if not (username or "").strip():
        return None
    try:
        normalized = username_service.validate_username(username)
    except InvalidUsername as e:
        raise HTTPException(status_code=400, detail=str(e))
    if username_service.is_taken(db, normalized, user_id):
        raise HTTPException(status_code=409, detail=f"Username '{normalized}' is already taken")
    return normalized


def _get_profile_or_404(db: Session, user_id: str) -> Profile:
    profile = db.query(Profile).filter(Profile.user_id == user_id).first()
    if not profile:
        raise HTTPException(status_code=404, detail=f"Profile {user_id} not found")
    return profile


@router.get("", response_model=ProfileListResponse)
def list_profiles(db: Session = Depends(get_db)):
    """List all profiles in creation order."""
    profiles = db.query(Profile).order_by(Profile.created_at, Profile.seq).all()
    return ProfileListResponse(
        total=len(profiles),
        profiles=[profile_to_response(p) for p in profiles],
    )


@router.get("/check-username/{username}", response_model=UsernameCheckResponse)
def check_profile_username(username: str, db: Session = Depends(get_db)):
    """Whether a username is free for a profile. Same rules as /usernames/check."""
    try:
        normalized, is_available = username_service.check_availability(db, username)
    except InvalidUsername as e:
        raise HTTPException(status_code=400, detail=str(e))
    return availability_response(normalized, is_available)


@router.get("/{user_id}", response_model=ProfileResponse)
def get_profile(user_id: str, db: Session = Depends(get_db)):
    """Get a single profile by user ID."""
    return profile_to_response(_get_profile_or_404(db, user_id))


@router.post("", response_model=ProfileResponse, status_code=201)
def create_profile(request: ProfileCreateRequest, db: Session = Depends(get_db)):
    """Create a profile. Fails with 409 if the user already has one."""
    existing = db.query(Profile).filter(Profile.user_id == request.user_id).first()
    if existing:
        raise HTTPException(status_code=409, detail=f"Profile {request.user_id} already exists")

    username = _resolve_username(db, request.user_id, request.username)
    profile = Profile(user_id=request.user_id, username=username)
    _apply_fields(profile, request)
    db.add(profile)
    db.commit()
    db.refresh(profile)

    logger.info("Created profile for %s", profile.user_id)
    return profile_to_response(profile)


@router.put("/{user_id}", response_model=ProfileResponse)
def upsert_profile(
    user_id: str,
    request: ProfileUpsertRequest,
    response: Response,
    db: Session = Depends(get_db),
):
    """
    Create or replace the profile for user_id.

    Returns 201 when the profile is new, 200 when an existing one was updated.
    """
    if request.user_id is not None and request.user_id != user_id:
        raise HTTPException(
            status_code=400,
            detail=f"Body user_id '{request.user_id}' does not match path '{user_id}'",
        )

    username = _resolve_username(db, user_id, request.username)
    profile = db.query(Profile).filter(Profile.user_id == user_id).first()
    if profile:
        _apply_fields(profile, request)
        profile.username = username
        response.status_code = 200
        logger.info("Updated profile for %s", user_id)
    else:
        profile = Profile(user_id=user_id, username=username)
        _apply_fields(profile, request)
        db.add(profile)
        response.status_code = 201
        logger.info("Created profile for %s", user_id)

    db.commit()
    db.refresh(profile)
    return profile_to_response(profile)


@router.delete("/{user_id}")
def delete_profile(user_id: str, db: Session = Depends(get_db)):
    """Delete a profile."""
    profile = _get_profile_or_404(db, user_id)
    db.delete(profile)
    db.commit()

    logger.info("Deleted profile for %s", user_id)
    return {"message": f"Profile {user_id} deleted"}
