"""
Screen controller — registration & lookups.

Every route requires the shared API token.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from daiara.core.database import get_db
from daiara.core.security import require_shared_token
from daiara.schemas import (
    MessageResponse,
    RegisterScreenRequest,
    ScreenOut,
    UpdatePushTokenRequest,
)
from daiara.services import screen_service

router = APIRouter(
    prefix="/api/screens",
    tags=["Screens"],
    dependencies=[Depends(require_shared_token)],
)


@router.post("", response_model=ScreenOut, status_code=status.HTTP_201_CREATED)
async def register_screen(
    body: RegisterScreenRequest | None = None,
    db: AsyncSession = Depends(get_db),
):
    """Register a new physical screen and return its device code."""
    screen = await screen_service.register_screen(
        db,
        push_notification_token=body.push_notification_token if body else None,
    )
    return ScreenOut.model_validate(screen)


@router.get("/{screen_id}", response_model=ScreenOut)
async def get_screen(screen_id: str, db: AsyncSession = Depends(get_db)):
    screen = await screen_service.get_screen(screen_id, db)
    return ScreenOut.model_validate(screen)


@router.put("/{screen_id}/push-token", response_model=MessageResponse)
async def update_push_token(
    screen_id: str,
    body: UpdatePushTokenRequest,
    db: AsyncSession = Depends(get_db),
):
    """Attach the owner's mobile push token to the screen."""
    await screen_service.set_push_token(screen_id, body.push_notification_token, db)
    return MessageResponse(detail="Push token updated")
