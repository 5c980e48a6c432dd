"""
Screen session model — one authorization window per screen.

The table is keyed by `screen_id`, not by a session id: issuing a new
session overwrites the secret and window in place.  Rows are never
deleted; a session outside its window is simply not live.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from daiara.models.base import Base, as_utc


class ScreenSession(Base):
    __tablename__ = "screen_sessions"

    screen_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("screens.id", ondelete="CASCADE"),
        primary_key=True,
    )
    session_secret: Mapped[str] = mapped_column(String(128), nullable=False)
    valid_from: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    valid_to: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def is_live(self, now: datetime) -> bool:
        """Inclusive on both ends: valid_from <= now <= valid_to."""
        return as_utc(self.valid_from) <= as_utc(now) <= as_utc(self.valid_to)

    def __repr__(self) -> str:
        return f"<ScreenSession screen={self.screen_id} until={self.valid_to}>"
