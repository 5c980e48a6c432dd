"""
Screen service — registry access for physical display devices.

Handles:
- Registering a screen (fresh id + registration date)
- Existence / push-token lookups used by the session & wallet flows
- Overwriting the linked wallet address

Any unexpected database failure surfaces as `StoreUnavailable`.
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from daiara.core.exceptions import ScreenNotFound, StoreUnavailable
from daiara.models.screen import Screen

logger = logging.getLogger(__name__)


async def register_screen(
    db: AsyncSession,
    push_notification_token: str | None = None,
) -> Screen:
    """Create a new screen record."""
    screen = Screen(push_notification_token=push_notification_token)
    db.add(screen)
    try:
        await db.flush()
    except SQLAlchemyError as exc:
        raise StoreUnavailable(reason=f"failed to persist screen: {exc}") from exc
    logger.info("Registered screen %s", screen.id)
    return screen


async def find_screen(screen_id: str, db: AsyncSession) -> Screen | None:
    try:
        result = await db.execute(select(Screen).where(Screen.id == screen_id))
    except SQLAlchemyError as exc:
        raise StoreUnavailable(reason=f"failed to retrieve screen {screen_id}: {exc}") from exc
    return result.scalar_one_or_none()


async def get_screen(screen_id: str, db: AsyncSession) -> Screen:
    screen = await find_screen(screen_id, db)
    if screen is None:
        raise ScreenNotFound(reason=f"screen {screen_id} is not registered")
    return screen


async def screen_exists(screen_id: str, db: AsyncSession) -> bool:
    return await find_screen(screen_id, db) is not None


async def get_push_token(screen_id: str, db: AsyncSession) -> str | None:
    """Return the owner's push token, or None when unset / screen unknown."""
    screen = await find_screen(screen_id, db)
    if screen is None:
        return None
    return screen.push_notification_token or None


async def _update_screen(screen_id: str, db: AsyncSession, **values) -> None:
    stmt = update(Screen).where(Screen.id == screen_id).values(**values)
    try:
        result = await db.execute(stmt)
        await db.flush()
    except SQLAlchemyError as exc:
        raise StoreUnavailable(reason=f"failed to update screen {screen_id}: {exc}") from exc
    if result.rowcount == 0:
        raise ScreenNotFound(reason=f"screen {screen_id} is not registered")


async def set_wallet(screen_id: str, wallet_address: str, db: AsyncSession) -> None:
    """Overwrite the screen's wallet address (single current wallet)."""
    await _update_screen(screen_id, db, wallet_address=wallet_address)


async def set_push_token(screen_id: str, push_notification_token: str, db: AsyncSession) -> None:
    await _update_screen(screen_id, db, push_notification_token=push_notification_token)
