"""Username endpoints — check availability, reserve, and rename usernames."""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.username import Username
from app.services import username_service
from app.services.username_service import InvalidUsername, UsernameNotOwned, UsernameTaken
from app.api.v1.schemas.usernames import (
    UsernameCheckResponse,
    UsernameReserveRequest,
    UsernameResponse,
    UsernameUpdateRequest,
    UsernameUpdateResponse,
)

router = APIRouter(prefix="/usernames", tags=["Usernames"])


def _to_response(entry: Username) -> UsernameResponse:
    return UsernameResponse(
        id=str(entry.id),
        username=entry.username,
        display_username=entry.display_username,
        user_id=entry.user_id,
        created_at=entry.created_at,
        updated_at=entry.updated_at,
    )


def availability_response(normalized: str, is_available: bool) -> UsernameCheckResponse:
    return UsernameCheckResponse(
        username=normalized,
        is_available=is_available,
        message="Username is available" if is_available else "Username is already taken",
    )


@router.get("/check", response_model=UsernameCheckResponse)
def check_username(
    username: str | None = Query(None, description="Username to look up"),
    db: Session = Depends(get_db),
):
    """Whether a username is free. Comparison ignores case and surrounding spaces."""
    try:
        normalized, is_available = username_service.check_availability(db, username)
    except InvalidUsername as e:
        raise HTTPException(status_code=400, detail=str(e))
    return availability_response(normalized, is_available)


@router.post("/reserve", response_model=UsernameResponse, status_code=201)
def reserve_username(request: UsernameReserveRequest, db: Session = Depends(get_db)):
    """Reserve a username for a user. Fails with 409 if it is taken."""
    try:
        entry = username_service.reserve(db, request.username, request.user_id)
    except InvalidUsername as e:
        raise HTTPException(status_code=400, detail=str(e))
    except UsernameTaken as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _to_response(entry)


@router.put("/update", response_model=UsernameUpdateResponse)
def update_username(request: UsernameUpdateRequest, db: Session = Depends(get_db)):
    """
    Rename a reserved username.

    The old name must be reserved by the same user (404 otherwise) and the
    new one must be free (409 otherwise).
    """
    try:
        entry = username_service.rename(
            db, request.old_username, request.new_username, request.user_id
        )
    except InvalidUsername as e:
        raise HTTPException(status_code=400, detail=str(e))
    except UsernameNotOwned as e:
        raise HTTPException(status_code=404, detail=str(e))
    except UsernameTaken as e:
        raise HTTPException(status_code=409, detail=str(e))

    if entry is None:
        return UsernameUpdateResponse(message="No change in username")
    return UsernameUpdateResponse(
        message="Username updated successfully",
        username=_to_response(entry),
    )
