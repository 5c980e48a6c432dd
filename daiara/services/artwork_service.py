"""
Artwork service.

Uploads the image to the object store first, then records the artwork
against the screen that holds the live session.  If the record insert
fails the uploaded object is left behind.
"""

import logging
import uuid
from pathlib import PurePath

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from daiara.core.exceptions import InvalidRequest, StoreUnavailable
from daiara.models.artwork import Artwork
from daiara.services.storage_service import ObjectStore

logger = logging.getLogger(__name__)


def _object_key(filename: str) -> str:
    name = PurePath(filename or "").name or "artwork"
    return f"{uuid.uuid4()}_{name}"


async def save_artwork(
    screen_id: str,
    filename: str,
    content: bytes,
    db: AsyncSession,
    object_store: ObjectStore,
    title: str | None = None,
    artist: str | None = None,
    price: float | None = None,
    currency: str | None = None,
    link: str | None = None,
    short_text: str | None = None,
) -> Artwork:
    if not content:
        raise InvalidRequest("Failed to read file")

    try:
        object_key = await object_store.put(_object_key(filename), content)
    except (OSError, ValueError) as exc:
        raise StoreUnavailable(reason=f"failed to upload artwork for screen {screen_id}: {exc}") from exc

    artwork = Artwork(
        screen_id=screen_id,
        object_key=object_key,
        title=title,
        artist=artist,
        price=price,
        currency=currency,
        link=link,
        short_text=short_text,
    )
    db.add(artwork)
    try:
        await db.flush()
    except SQLAlchemyError as exc:
        raise StoreUnavailable(reason=f"failed to persist artwork {object_key}: {exc}") from exc

    logger.info("Saved artwork %s for screen %s", artwork.id, screen_id)
    return artwork
