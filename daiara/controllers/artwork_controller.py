"""
Artwork controller — screens upload artwork images.

Requires BOTH the shared API token and a live screen session
credential in the `screen-session-token` header; the artwork is
recorded against the screen the credential was issued for.
"""

import logging

from fastapi import APIRouter, Depends, File, Form, Header, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from daiara.core.database import get_db
from daiara.core.exceptions import InvalidCredential, Unauthorized
from daiara.core.security import require_shared_token
from daiara.schemas import ArtworkOut
from daiara.services import artwork_service, authorization_service
from daiara.services.storage_service import ObjectStore, get_object_store

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/artworks",
    tags=["Artworks"],
    dependencies=[Depends(require_shared_token)],
)


async def require_screen_session(
    screen_session_token: str = Header(""),
    db: AsyncSession = Depends(get_db),
) -> str:
    """Dependency — resolves the session credential to its screen id."""
    if not screen_session_token:
        raise InvalidCredential(reason="missing screen-session-token header")
    try:
        return await authorization_service.authenticate_screen(screen_session_token, db)
    except Unauthorized as exc:
        logger.warning("Artwork upload denied: %s", exc.reason)
        raise Unauthorized() from exc


@router.post("", response_model=ArtworkOut, status_code=status.HTTP_201_CREATED)
async def upload_artwork(
    file: UploadFile = File(...),
    title: str | None = Form(None),
    artist: str | None = Form(None),
    price: float | None = Form(None),
    currency: str | None = Form(None),
    link: str | None = Form(None),
    short_text: str | None = Form(None),
    screen_id: str = Depends(require_screen_session),
    db: AsyncSession = Depends(get_db),
    object_store: ObjectStore = Depends(get_object_store),
):
    content = await file.read()
    artwork = await artwork_service.save_artwork(
        screen_id=screen_id,
        filename=file.filename or "",
        content=content,
        db=db,
        object_store=object_store,
        title=title,
        artist=artist,
        price=price,
        currency=currency,
        link=link,
        short_text=short_text,
    )
    return ArtworkOut.model_validate(artwork)
