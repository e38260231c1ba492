"""SQLAlchemy-backed ProfileStore for the matchmaking engine."""

from typing import Iterable

from sqlalchemy.orm import Session

from app.matching.profile import PlayerProfile
from app.models.profile import Profile


class SqlProfileStore:
    """Reads profiles from the database and hands PlayerProfile records to the engine."""

    def __init__(self, db: Session):
        self.db = db

    def get_profile(self, user_id: str) -> PlayerProfile | None:
        row = self.db.query(Profile).filter(Profile.user_id == user_id).first()
        if row is None:
            return None
        return row.to_player_profile()

    def list_profiles(
        self,
        exclude_user_id: str | None = None,
        exclude_ids: Iterable[str] | None = None,
    ) -> list[PlayerProfile]:
        query = self.db.query(Profile)
        if exclude_user_id is not None:
            query = query.filter(Profile.user_id != exclude_user_id)
        excluded = list(exclude_ids or ())
        if excluded:
            query = query.filter(Profile.user_id.notin_(excluded))

        rows = query.order_by(Profile.created_at, Profile.seq).all()
        return [row.to_player_profile() for row in rows]
