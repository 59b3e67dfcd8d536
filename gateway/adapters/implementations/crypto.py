import asyncio
from typing import Dict, List, Sequence

import httpx

from gateway.adapters.interfaces.provider import ProviderAdapter
from gateway.core.config import Settings
from gateway.core.exceptions import NotFoundError
from gateway.core.logging import get_logger
from gateway.domain.models.crypto import CryptoPrice
from gateway.domain.models.envelope import Envelope, ErrorKind, utc_timestamp

logger = get_logger(__name__)

CRYPTO_NAMES: Dict[str, str] = {
    "BTC": "Bitcoin",
    "ETH": "Ethereum",
    "ADA": "Cardano",
    "DOT": "Polkadot",
    "LTC": "Litecoin",
    "XRP": "Ripple",
    "DOGE": "Dogecoin",
    "MATIC": "Polygon",
    "SOL": "Solana",
    "AVAX": "Avalanche",
}


class CryptoAdapter(ProviderAdapter):
    """
    USD spot prices from the Coinbase exchange-rates endpoint.

    Coinbase reports, for a base ``currency``, how many units of every other
    currency one unit buys; the ``USD`` entry is therefore the USD price.
    No API key is needed for this endpoint.
    """

    key = "crypto"
    name = "Crypto"
    operations = ("get_price", "get_prices")

    @classmethod
    def from_settings(cls, settings: Settings, http_client: httpx.AsyncClient) -> "CryptoAdapter":
        return cls(settings.CRYPTO_BASE_URL, http_client, timeout=settings.DEFAULT_TIMEOUT)

    async def get_price(self, symbol: str) -> Envelope:
        return await self.execute(self._fetch_price, symbol)

    async def get_prices(self, symbols: Sequence[str]) -> Envelope:
        """
        Best-effort gather of several prices.

        One ``get_price`` call per symbol, all in flight at once. Symbols whose
        lookup fails are dropped from the result (and listed in
        ``Envelope.omitted``); the aggregate still succeeds. Results keep the
        input order.
        """
        try:
            results = await asyncio.gather(
                *(self.get_price(symbol) for symbol in symbols),
                return_exceptions=True,
            )
        except Exception as e:
            logger.error(f"Error fetching multiple crypto prices: {str(e)}", exc_info=True)
            return Envelope.fail("Failed to fetch cryptocurrency prices", kind=ErrorKind.UNEXPECTED)

        prices: List[CryptoPrice] = []
        omitted: List[str] = []
        for symbol, result in zip(symbols, results):
            if isinstance(result, BaseException) or not result.success:
                reason = str(result) if isinstance(result, BaseException) else result.error
                logger.warning(f"Failed to fetch price for {symbol}", extra={"symbol": symbol, "reason": reason})
                omitted.append(symbol)
                continue
            prices.append(result.data)

        return Envelope.ok(prices, omitted=omitted)

    async def _fetch_price(self, symbol: str) -> CryptoPrice:
        upper_symbol = symbol.strip().upper()
        not_found = NotFoundError(
            "Cryptocurrency", upper_symbol, detail=f"Cryptocurrency {upper_symbol} not found"
        )
        payload = await self.get_json(
            "exchange-rates",
            params={"currency": upper_symbol},
            not_found=not_found,
        )

        usd_rate = payload["data"]["rates"].get("USD")
        if not usd_rate:
            raise not_found

        return CryptoPrice(
            symbol=upper_symbol,
            name=CRYPTO_NAMES.get(upper_symbol, upper_symbol),
            price=float(usd_rate),
            last_updated=utc_timestamp(),
        )

    def provider_message(self, response: httpx.Response) -> str:
        # Coinbase reports failures as {"errors": [{"id": ..., "message": ...}]}
        errors = self.error_payload(response).get("errors")
        if isinstance(errors, list) and errors and isinstance(errors[0], dict) and errors[0].get("message"):
            return str(errors[0]["message"])
        return super().provider_message(response)
