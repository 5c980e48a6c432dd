"""
Wallet service — links a wallet address to a screen.

Flow:
1. Reject blank input before touching any store.
2. Verify the presented session credential (uniform `Unauthorized`
   for the client, specific cause in the logs).
3. Ask the external validator about the address.
4. Overwrite the screen's wallet address and COMMIT.
5. Notify the owner's app — best-effort; the committed wallet update
   stands whatever happens here.
"""

import logging
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from daiara.core.exceptions import (
    InvalidRequest,
    InvalidWallet,
    StoreUnavailable,
    Unauthorized,
)
from daiara.services import authorization_service, screen_service
from daiara.services.push_service import PushNotifier
from daiara.services.wallet_validator import WalletValidator

logger = logging.getLogger(__name__)

NOTIFICATION_TITLE = "New wallet added"
NOTIFICATION_BODY = "click here to accept"


@dataclass
class WalletLinkResult:
    screen_id: str
    wallet_address: str
    notified: bool


def _require(value: str | None, detail: str) -> str:
    """Reject blank input; the value itself is passed on unchanged."""
    if not (value or "").strip():
        raise InvalidRequest(detail)
    return value


async def link_wallet(
    screen_id: str,
    presented_credential: str,
    wallet_address: str,
    db: AsyncSession,
    validator: WalletValidator,
    notifier: PushNotifier,
    now: datetime | None = None,
) -> WalletLinkResult:
    screen_id = _require(screen_id, "Invalid screen ID")
    wallet_address = _require(wallet_address, "Invalid wallet address")
    presented_credential = _require(presented_credential, "Invalid session code")
    if wallet_address != wallet_address.strip():
        raise InvalidRequest("Invalid wallet address")

    try:
        await authorization_service.verify_session(screen_id, presented_credential, db, now=now)
    except Unauthorized as exc:
        logger.warning("Wallet link denied for screen %s: %s", screen_id, exc.reason)
        raise Unauthorized() from exc

    if not await validator.is_valid(wallet_address):
        logger.info("Wallet %s rejected by validator for screen %s", wallet_address, screen_id)
        raise InvalidWallet()

    await screen_service.set_wallet(screen_id, wallet_address, db)
    try:
        await db.commit()
    except SQLAlchemyError as exc:
        raise StoreUnavailable(
            reason=f"failed to commit wallet {wallet_address} for screen {screen_id}: {exc}"
        ) from exc
    logger.info("Linked wallet %s to screen %s", wallet_address, screen_id)

    notified = await _notify_wallet_linked(screen_id, wallet_address, db, notifier)
    return WalletLinkResult(screen_id=screen_id, wallet_address=wallet_address, notified=notified)


async def _notify_wallet_linked(
    screen_id: str,
    wallet_address: str,
    db: AsyncSession,
    notifier: PushNotifier,
) -> bool:
    """Fire-and-forget push to the screen owner.  Never raises."""
    try:
        token = await screen_service.get_push_token(screen_id, db)
    except StoreUnavailable as exc:
        logger.error("Could not load push token for screen %s: %s", screen_id, exc.reason)
        return False

    if token is None:
        logger.warning("Notification token for screen %s not found", screen_id)
        return False

    try:
        await notifier.send(
            token,
            NOTIFICATION_TITLE,
            NOTIFICATION_BODY,
            {"wallet_address": wallet_address},
        )
    except Exception:
        logger.exception(
            "Failed to send push notification with wallet %s for screen %s",
            wallet_address,
            screen_id,
        )
        return False
    return True
