"""
Wallet validator — asks an external NFT index whether an address is known.

The Alchemy `getNFTs` endpoint answers 200 for any address it can
index and an error status otherwise; we treat that as a boolean
oracle.  Transport failures are not a "no" — they surface as
`StoreUnavailable` so the client gets a server error, not a 400.
"""

import logging
from typing import Protocol

import httpx

from daiara.core.config import settings
from daiara.core.exceptions import StoreUnavailable

logger = logging.getLogger(__name__)


class WalletValidator(Protocol):
    async def is_valid(self, wallet_address: str) -> bool: ...


class AlchemyWalletValidator:
    def __init__(
        self,
        url: str,
        timeout: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def is_valid(self, wallet_address: str) -> bool:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.get(self.url, params={"owner": wallet_address})
        except httpx.HTTPError as exc:
            raise StoreUnavailable(
                reason=f"wallet validator unreachable for {wallet_address}: {exc}"
            ) from exc

        if resp.status_code != httpx.codes.OK:
            logger.info(
                "Wallet validator rejected %s (HTTP %s)", wallet_address, resp.status_code,
            )
            return False
        return True


def get_wallet_validator() -> WalletValidator:
    """FastAPI dependency — overridden in tests."""
    return AlchemyWalletValidator(
        url=settings.WALLET_VALIDATOR_URL,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
    )
