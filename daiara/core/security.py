"""
Session credential codec & shared API token gate.

- Session credentials are compact JWS tokens (HS256) over the screen id
  and the server-held session secret.  No time claims are embedded, so
  encoding is deterministic: the verifier re-encodes the stored secret
  and string-compares it with what the client presented.
- Expiry lives in the session row, not in the credential.
- Trusted clients authenticate with a static bearer token shared out of
  band (`SHARED_AUTH_TOKEN`).
"""

import hmac
import logging
from dataclasses import dataclass

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from daiara.core.config import settings
from daiara.core.exceptions import InvalidCredential

logger = logging.getLogger(__name__)


# ── Session credentials ─────────────────────────────────────────────


@dataclass(frozen=True)
class SessionCredential:
    screen_id: str
    session_secret: str


def encode_session_credential(screen_id: str, session_secret: str) -> str:
    claims = {
        "authorized": True,
        "screen_id": screen_id,
        "session_token": session_secret,
    }
    return jwt.encode(claims, settings.SIGNING_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_session_credential(credential: str) -> SessionCredential:
    """Verify the signature and unpack the claims.  Raises InvalidCredential."""
    try:
        payload = jwt.decode(
            credential, settings.SIGNING_KEY, algorithms=[settings.JWT_ALGORITHM],
        )
    except JWTError as exc:
        raise InvalidCredential(reason=f"credential rejected: {exc}") from exc

    screen_id = payload.get("screen_id")
    session_secret = payload.get("session_token")
    if not isinstance(screen_id, str) or not isinstance(session_secret, str):
        raise InvalidCredential(reason="credential is missing session claims")

    return SessionCredential(screen_id=screen_id, session_secret=session_secret)


def credentials_match(expected: str, presented: str) -> bool:
    """Constant-time string equality."""
    return hmac.compare_digest(expected.encode("utf-8"), presented.encode("utf-8"))


# ── Shared API token ────────────────────────────────────────────────
bearer_scheme = HTTPBearer(auto_error=False)


async def require_shared_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> None:
    """FastAPI dependency — rejects callers without the shared bearer token."""
    token = credentials.credentials.strip() if credentials else ""
    if not token or not credentials_match(settings.SHARED_AUTH_TOKEN, token):
        logger.warning("Rejected request with missing or wrong shared API token")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Wrong authorization token provided",
        )
