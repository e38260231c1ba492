"""
Username registry — normalization, availability, reservation and renames.

Usernames are compared trimmed and lowercased, so "  PoolShark " and
"poolshark" are the same name. A name is taken when it is reserved in the
usernames table or set on another player's profile. The trimmed spelling
the user typed is kept separately for display.
"""

import logging

from sqlalchemy.orm import Session

from app.config import get_settings
from app.models.profile import Profile
from app.models.username import Username

logger = logging.getLogger(__name__)


class UsernameError(Exception):
    """Base class for username registry errors."""


class InvalidUsername(UsernameError):
    """Blank, too short, or too long after trimming."""


class UsernameTaken(UsernameError):
    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Username '{username}' is already taken")


class UsernameNotOwned(UsernameError):
    def __init__(self, username: str, user_id: str):
        self.username = username
        self.user_id = user_id
        super().__init__(f"Username '{username}' not found or not owned by {user_id}")


def normalize_username(username: str | None) -> str:
    return (username or "").strip().lower()


def validate_username(username: str | None) -> str:
    """Normalize a username and enforce the configured length limits."""
    normalized = normalize_username(username)
    settings = get_settings()
    if not normalized:
        raise InvalidUsername("Username is required")
    if len(normalized) < settings.username_min_length:
        raise InvalidUsername(
            f"Username must be at least {settings.username_min_length} characters"
        )
    if len(normalized) > settings.username_max_length:
        raise InvalidUsername(
            f"Username must be at most {settings.username_max_length} characters"
        )
    return normalized


def _reservation(db: Session, normalized: str) -> Username | None:
    return db.query(Username).filter(Username.username == normalized).first()


def is_taken(db: Session, normalized: str, user_id: str | None = None) -> bool:
    """
    True if `normalized` is reserved, or set on a profile, by anyone other
    than user_id.
    """
    reserved = db.query(Username).filter(Username.username == normalized)
    on_profile = db.query(Profile).filter(Profile.username == normalized)
    if user_id is not None:
        reserved = reserved.filter(Username.user_id != user_id)
        on_profile = on_profile.filter(Profile.user_id != user_id)
    return reserved.first() is not None or on_profile.first() is not None


def check_availability(db: Session, username: str | None) -> tuple[str, bool]:
    """Return (normalized username, is_available)."""
    normalized = validate_username(username)
    return normalized, not is_taken(db, normalized)


def reserve(db: Session, username: str | None, user_id: str) -> Username:
    """Reserve a username for user_id."""
    normalized = validate_username(username)
    if _reservation(db, normalized) is not None or is_taken(db, normalized, user_id):
        raise UsernameTaken(normalized)

    entry = Username(
        username=normalized,
        display_username=username.strip(),
        user_id=user_id,
    )
    db.add(entry)
    db.commit()
    db.refresh(entry)

    logger.info("Reserved username %s for %s", normalized, user_id)
    return entry


def rename(
    db: Session,
    old_username: str | None,
    new_username: str | None,
    user_id: str,
) -> Username | None:
    """
    Move user_id's reservation from old_username to new_username.

    Returns None when both names normalize to the same value; nothing is
    changed in that case.
    """
    old_normalized = normalize_username(old_username)
    new_normalized = validate_username(new_username)
    if not old_normalized:
        raise InvalidUsername("Old username is required")
    if old_normalized == new_normalized:
        return None

    entry = (
        db.query(Username)
        .filter(Username.username == old_normalized, Username.user_id == user_id)
        .first()
    )
    if entry is None:
        raise UsernameNotOwned(old_normalized, user_id)
    if _reservation(db, new_normalized) is not None or is_taken(db, new_normalized, user_id):
        raise UsernameTaken(new_normalized)

    entry.username = new_normalized
    entry.display_username = new_username.strip()
    db.commit()
    db.refresh(entry)

    logger.info("User %s renamed %s to %s", user_id, old_normalized, new_normalized)
    return entry
