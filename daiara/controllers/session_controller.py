"""
Session controller — issues screen session credentials.

The returned `session_token` is a bearer credential: clients present
it unchanged on follow-up calls.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from daiara.core.database import get_db
from daiara.core.exceptions import InvalidRequest
from daiara.core.security import require_shared_token
from daiara.schemas import SessionTokenResponse
from daiara.services import session_service

router = APIRouter(prefix="/api/sessions", tags=["Sessions"])


@router.post(
    "",
    response_model=SessionTokenResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_shared_token)],
)
async def start_session(
    screen_id: str = Query(""),
    db: AsyncSession = Depends(get_db),
):
    """Open (or refresh) the session window for a screen."""
    if not screen_id.strip():
        raise InvalidRequest("Invalid screen ID")
    token = await session_service.issue_session(screen_id.strip(), db)
    return SessionTokenResponse(session_token=token)
