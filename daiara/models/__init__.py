"""
Models package — import every model so SQLAlchemy's Base.metadata
knows about all tables (critical for `create_all` / Alembic).
"""

from daiara.models.base import Base, UUIDPrimaryKeyMixin
from daiara.models.screen import Screen
from daiara.models.session import ScreenSession
from daiara.models.artwork import Artwork

__all__ = [
    "Base",
    "UUIDPrimaryKeyMixin",
    "Screen",
    "ScreenSession",
    "Artwork",
]
