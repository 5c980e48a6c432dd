"""
Wallet controller — links a wallet to a screen.

Authorized by the screen session credential in the body; no shared
API token is required here.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from daiara.core.database import get_db
from daiara.schemas import LinkWalletRequest, LinkWalletResponse
from daiara.services import wallet_service
from daiara.services.push_service import PushNotifier, get_push_notifier
from daiara.services.wallet_validator import WalletValidator, get_wallet_validator

router = APIRouter(prefix="/api/wallets", tags=["Wallets"])


@router.post("", response_model=LinkWalletResponse)
async def link_wallet(
    body: LinkWalletRequest,
    db: AsyncSession = Depends(get_db),
    validator: WalletValidator = Depends(get_wallet_validator),
    notifier: PushNotifier = Depends(get_push_notifier),
):
    result = await wallet_service.link_wallet(
        screen_id=body.screen_id,
        presented_credential=body.session_token,
        wallet_address=body.wallet_address,
        db=db,
        validator=validator,
        notifier=notifier,
    )
    return LinkWalletResponse(
        screen_id=result.screen_id,
        wallet_address=result.wallet_address,
        notified=result.notified,
    )
