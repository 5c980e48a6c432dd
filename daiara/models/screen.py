"""
Screen model — a registered physical display device.

`wallet_address` holds the single current wallet; every successful
link overwrites it.  `push_notification_token` belongs to the owner's
mobile app and is only read by the notification sender.
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from daiara.models.base import Base, UUIDPrimaryKeyMixin, utcnow


class Screen(Base, UUIDPrimaryKeyMixin):
    __tablename__ = "screens"

    registered_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )
    wallet_address: Mapped[str | None] = mapped_column(String(128), nullable=True)
    push_notification_token: Mapped[str | None] = mapped_column(String(256), nullable=True)

    def __repr__(self) -> str:
        return f"<Screen {self.id} wallet={self.wallet_address}>"
