import uuid
from datetime import datetime
from sqlalchemy import String, Text, DateTime, Float, Integer, event, func, select
from sqlalchemy.orm import Mapped, mapped_column
from app.db.compat import UUID, JSONB

from app.db.base import Base
from app.matching.profile import PlayerProfile


class Profile(Base):
    """Player profile used for matchmaking."""

    __tablename__ = "profiles"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(), primary_key=True, default=uuid.uuid4
    )
    user_id: Mapped[str] = mapped_column(String(128), unique=True, nullable=False, index=True)

    # Display fields
    first_name: Mapped[str] = mapped_column(String(100), nullable=True)
    last_name: Mapped[str] = mapped_column(String(100), nullable=True)
    # Trimmed and lowercased; see app.services.username_service
    username: Mapped[str] = mapped_column(String(100), unique=True, nullable=True)
    bio: Mapped[str] = mapped_column(Text, nullable=True)
    profile_image_url: Mapped[str] = mapped_column(String(500), nullable=True)

    # Matchmaking fields
    skill_level: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    skill_tier: Mapped[str] = mapped_column(String(50), nullable=True)
    preferred_location: Mapped[str] = mapped_column(String(255), nullable=True)
    preferred_game_types: Mapped[list] = mapped_column(JSONB, default=list)
    availability: Mapped[dict] = mapped_column(JSONB, default=dict)

    # Insertion sequence; breaks ties between profiles created in the same instant
    seq: Mapped[int] = mapped_column(Integer, nullable=True, index=True)

    # Metadata
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    def to_player_profile(self) -> PlayerProfile:
        """Convert to the immutable record the scoring engine works on."""
        return PlayerProfile.build(
            user_id=self.user_id,
            skill_level=self.skill_level,
            preferred_location=self.preferred_location,
            preferred_game_types=self.preferred_game_types,
            availability=self.availability,
        )

    def __repr__(self) -> str:
        return f"<Profile {self.user_id}: skill {self.skill_level}>"


@event.listens_for(Profile, "before_insert")
def _assign_seq(mapper, connection, target: Profile) -> None:
    """Give each new profile a sequence number above every existing one."""
    if target.seq is not None:
        return
    # Rows inserted earlier in the same flush are not visible to the max() yet
    current = connection.scalar(select(func.max(Profile.seq))) or 0
    last = connection.info.get("profiles_last_seq", 0)
    target.seq = max(current, last) + 1
    connection.info["profiles_last_seq"] = target.seq
