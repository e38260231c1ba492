"""Wishlist endpoints — manage named lists of venues per user."""

import logging
import uuid
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.config import get_settings
from app.db.session import get_db
from app.models.wishlist import Wishlist
from app.api.v1.schemas.wishlists import (
    WishlistCreateRequest,
    WishlistRenameRequest,
    WishlistResponse,
    WishlistVenueRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/wishlists", tags=["Wishlists"])


def _to_response(wishlist: Wishlist) -> WishlistResponse:
    return WishlistResponse(
        id=str(wishlist.id),
        user_id=wishlist.user_id,
        name=wishlist.name,
        venue_ids=list(wishlist.venue_ids or []),
        created_at=wishlist.created_at,
        updated_at=wishlist.updated_at,
    )


def _validate_name(name: str) -> str:
    """Trim a wishlist name and enforce the length limit."""
    name = name.strip()
    max_length = get_settings().wishlist_name_max_length
    if not name:
        raise HTTPException(status_code=400, detail="Name is required")
    if len(name) > max_length:
        raise HTTPException(
            status_code=400,
            detail=f"Wishlist name cannot exceed {max_length} characters",
        )
    return name


def _get_wishlist_or_404(db: Session, wishlist_id: str) -> Wishlist:
    try:
        key = uuid.UUID(wishlist_id)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Wishlist {wishlist_id} not found")

    wishlist = db.get(Wishlist, key)
    if not wishlist:
        raise HTTPException(status_code=404, detail=f"Wishlist {wishlist_id} not found")
    return wishlist


@router.get("/user/{user_id}", response_model=list[WishlistResponse])
def list_user_wishlists(user_id: str, db: Session = Depends(get_db)):
    """List a user's wishlists, most recently updated first."""
    wishlists = (
        db.query(Wishlist)
        .filter(Wishlist.user_id == user_id)
        .order_by(Wishlist.updated_at.desc())
        .all()
    )
    return [_to_response(w) for w in wishlists]


@router.post("", response_model=WishlistResponse, status_code=201)
def create_wishlist(request: WishlistCreateRequest, db: Session = Depends(get_db)):
    """Create a wishlist, optionally pre-filled with venues."""
    name = _validate_name(request.name)

    venue_ids = list(dict.fromkeys(request.venue_ids))
    wishlist = Wishlist(name=name, user_id=request.user_id, venue_ids=venue_ids)
    db.add(wishlist)
    db.commit()
    db.refresh(wishlist)

    logger.info("Created wishlist %s '%s' for %s", wishlist.id, name, request.user_id)
    return _to_response(wishlist)


@router.get("/{wishlist_id}", response_model=WishlistResponse)
def get_wishlist(wishlist_id: str, db: Session = Depends(get_db)):
    """Get a single wishlist."""
    return _to_response(_get_wishlist_or_404(db, wishlist_id))


@router.put("/{wishlist_id}", response_model=WishlistResponse)
def rename_wishlist(
    wishlist_id: str,
    request: WishlistRenameRequest,
    db: Session = Depends(get_db),
):
    """Rename a wishlist."""
    name = _validate_name(request.name)
    wishlist = _get_wishlist_or_404(db, wishlist_id)

    wishlist.name = name
    wishlist.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(wishlist)

    return _to_response(wishlist)


@router.delete("/{wishlist_id}")
def delete_wishlist(wishlist_id: str, db: Session = Depends(get_db)):
    """Delete a wishlist."""
    wishlist = _get_wishlist_or_404(db, wishlist_id)
    name = wishlist.name
    db.delete(wishlist)
    db.commit()

    logger.info("Deleted wishlist %s '%s'", wishlist_id, name)
    return {"message": "Wishlist deleted successfully"}


@router.post("/{wishlist_id}/venues", response_model=WishlistResponse)
def add_venue(
    wishlist_id: str,
    request: WishlistVenueRequest,
    db: Session = Depends(get_db),
):
    """Add a venue to a wishlist."""
    wishlist = _get_wishlist_or_404(db, wishlist_id)

    venue_ids = list(wishlist.venue_ids or [])
    if request.venue_id in venue_ids:
        raise HTTPException(status_code=400, detail="Venue is already in this wishlist")

    # Reassign rather than append so the JSON column is flagged dirty
    wishlist.venue_ids = venue_ids + [request.venue_id]
    wishlist.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(wishlist)

    return _to_response(wishlist)


@router.delete("/{wishlist_id}/venues/{venue_id}", response_model=WishlistResponse)
def remove_venue(wishlist_id: str, venue_id: str, db: Session = Depends(get_db)):
    """Remove a venue from a wishlist."""
    wishlist = _get_wishlist_or_404(db, wishlist_id)

    venue_ids = list(wishlist.venue_ids or [])
    if venue_id not in venue_ids:
        raise HTTPException(status_code=404, detail="Venue not found in this wishlist")

    venue_ids.remove(venue_id)
    wishlist.venue_ids = venue_ids
    wishlist.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(wishlist)

    return _to_response(wishlist)
