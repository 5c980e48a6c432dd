"""
Session service — issuance & storage of screen session windows.

Handles:
- Reading the session row for a screen
- Insert-if-absent-else-refresh of the row (one row per screen)
- Issuing a session: mint a secret, open a fixed window, return the
  signed credential

Concurrency note:
    Two concurrent issuances for the same screen race and the last
    write wins.  Sessions are single-tenant per screen, so the loser's
    credential simply stops verifying — no locking is attempted.
"""

import logging
import secrets
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from daiara.core.config import settings
from daiara.core.exceptions import ScreenNotFound, StoreUnavailable
from daiara.core.security import encode_session_credential
from daiara.models.base import utcnow
from daiara.models.session import ScreenSession
from daiara.services import screen_service

logger = logging.getLogger(__name__)


def _generate_session_secret() -> str:
    """Cryptographically secure URL-safe secret."""
    return secrets.token_urlsafe(32)


async def get_session(screen_id: str, db: AsyncSession) -> ScreenSession | None:
    try:
        return await db.get(ScreenSession, screen_id)
    except SQLAlchemyError as exc:
        raise StoreUnavailable(reason=f"failed to retrieve session for screen {screen_id}: {exc}") from exc


async def put_session(
    screen_id: str,
    session_secret: str,
    valid_from: datetime,
    valid_to: datetime,
    db: AsyncSession,
) -> ScreenSession:
    """Insert the session row, or overwrite the existing one in place."""
    session = await get_session(screen_id, db)
    if session is None:
        session = ScreenSession(screen_id=screen_id)
        db.add(session)

    session.session_secret = session_secret
    session.valid_from = valid_from
    session.valid_to = valid_to

    try:
        await db.flush()
    except SQLAlchemyError as exc:
        raise StoreUnavailable(reason=f"failed to refresh session for screen {screen_id}: {exc}") from exc
    return session


async def issue_session(
    screen_id: str,
    db: AsyncSession,
    now: datetime | None = None,
) -> str:
    """
    Open a new session window for a registered screen and return the
    credential the client must present on follow-up calls.

    Any previous session for the screen is superseded, even if its own
    window is still open.
    """
    if not await screen_service.screen_exists(screen_id, db):
        logger.info("Session requested for unregistered screen %s", screen_id)
        raise ScreenNotFound(reason=f"screen {screen_id} is not registered")

    now = now or utcnow()
    session_secret = _generate_session_secret()
    await put_session(
        screen_id,
        session_secret,
        valid_from=now,
        valid_to=now + settings.SESSION_WINDOW,
        db=db,
    )
    logger.info("Issued session for screen %s (valid for %s)", screen_id, settings.SESSION_WINDOW)
    return encode_session_credential(screen_id, session_secret)
