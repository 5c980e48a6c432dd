from datetime import datetime

from sqlalchemy import DateTime, Float, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from daiara.models.base import Base, UUIDPrimaryKeyMixin, utcnow


class Artwork(Base, UUIDPrimaryKeyMixin):
    __tablename__ = "artworks"

    screen_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("screens.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )
    # Key returned by the object store
    object_key: Mapped[str] = mapped_column(String(512), nullable=False)

    title: Mapped[str | None] = mapped_column(String(256), nullable=True)
    artist: Mapped[str | None] = mapped_column(String(256), nullable=True)
    price: Mapped[float | None] = mapped_column(Float, nullable=True)
    currency: Mapped[str | None] = mapped_column(String(16), nullable=True)
    link: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    short_text: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Artwork {self.id} screen={self.screen_id}>"
