"""
Authorization service — verifies a presented session credential.

The server-held session secret is the source of truth: the expected
credential is re-encoded from the stored secret and compared with the
presented string.  The presented value is decoded only to reject
malformed input or (for `authenticate_screen`) to learn which screen
it claims to belong to.

Each failure raises a specific `Unauthorized` subclass so callers can
log the cause; the client-facing detail is identical for all of them.
"""

import logging
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from daiara.core.exceptions import (
    CredentialMismatch,
    InvalidCredential,
    NoActiveSession,
    SessionExpired,
)
from daiara.core.security import (
    credentials_match,
    decode_session_credential,
    encode_session_credential,
)
from daiara.models.base import utcnow
from daiara.models.session import ScreenSession
from daiara.services import session_service

logger = logging.getLogger(__name__)


async def verify_session(
    screen_id: str,
    presented_credential: str,
    db: AsyncSession,
    now: datetime | None = None,
) -> ScreenSession:
    """
    Return the live session for `screen_id` if `presented_credential`
    matches it.

    Raises:
        NoActiveSession: the screen has never been issued a session.
        SessionExpired: `now` is outside [valid_from, valid_to].
        CredentialMismatch: the credential is malformed, superseded,
            or belongs to another screen.
    """
    session = await session_service.get_session(screen_id, db)
    if session is None:
        raise NoActiveSession(reason=f"no active session for screen {screen_id}")

    now = now or utcnow()
    if not session.is_live(now):
        raise SessionExpired(
            reason=f"session for screen {screen_id} is outside its window "
                   f"({session.valid_from} to {session.valid_to})"
        )

    expected = encode_session_credential(screen_id, session.session_secret)
    if credentials_match(expected, presented_credential):
        return session

    try:
        decode_session_credential(presented_credential)
    except InvalidCredential:
        raise CredentialMismatch(reason=f"malformed session token provided for screen {screen_id}")
    raise CredentialMismatch(reason=f"wrong session token provided for screen {screen_id}")


async def authenticate_screen(
    presented_credential: str,
    db: AsyncSession,
    now: datetime | None = None,
) -> str:
    """
    Resolve a bare credential to the screen it was issued for.

    Decoding only tells us which session row to check; the credential
    is then verified against the stored secret like any other.
    """
    claims = decode_session_credential(presented_credential)
    await verify_session(claims.screen_id, presented_credential, db, now=now)
    return claims.screen_id
