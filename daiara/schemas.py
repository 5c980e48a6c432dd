"""
Pydantic schemas for request / response serialization.

Schemas are deliberately decoupled from SQLAlchemy models so the
API surface can evolve independently of the DB layer.  Blank-string
checks for the wallet flow live in the service.
"""

from datetime import datetime

from pydantic import BaseModel


# ── Screens ──────────────────────────────────────────────────────────
class RegisterScreenRequest(BaseModel):
    push_notification_token: str | None = None


class UpdatePushTokenRequest(BaseModel):
    push_notification_token: str


class ScreenOut(BaseModel):
    id: str
    registered_date: datetime
    wallet_address: str | None = None

    model_config = {"from_attributes": True}


# ── Sessions ─────────────────────────────────────────────────────────
class SessionTokenResponse(BaseModel):
    session_token: str


# ── Wallets ──────────────────────────────────────────────────────────
class LinkWalletRequest(BaseModel):
    screen_id: str = ""
    session_token: str = ""
    wallet_address: str = ""


class LinkWalletResponse(BaseModel):
    screen_id: str
    wallet_address: str
    notified: bool


# ── Artworks ─────────────────────────────────────────────────────────
class ArtworkOut(BaseModel):
    id: str
    screen_id: str
    created_date: datetime
    object_key: str
    title: str | None = None
    artist: str | None = None
    price: float | None = None
    currency: str | None = None
    link: str | None = None
    short_text: str | None = None

    model_config = {"from_attributes": True}


# ── Generic ──────────────────────────────────────────────────────────
class MessageResponse(BaseModel):
    detail: str
