import uuid
import enum
from datetime import datetime
from sqlalchemy import String, DateTime, Enum, Boolean
from sqlalchemy.orm import Mapped, mapped_column
from app.db.compat import UUID

from app.db.base import Base


class LikeAction(str, enum.Enum):
    LIKE = "like"
    PASS = "pass"


class Like(Base):
    """A like or pass one user gave another. Mutual likes are matches."""

    __tablename__ = "likes"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(), primary_key=True, default=uuid.uuid4
    )
    user_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    target_user_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    action: Mapped[LikeAction] = mapped_column(
        Enum(LikeAction), default=LikeAction.LIKE, nullable=False
    )
    is_match: Mapped[bool] = mapped_column(Boolean, default=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    def __repr__(self) -> str:
        return f"<Like {self.user_id} -> {self.target_user_id} ({self.action.value})>"
