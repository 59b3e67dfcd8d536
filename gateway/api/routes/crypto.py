from typing import Iterable, Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from gateway.adapters.implementations import CryptoAdapter
from gateway.api.dependencies import get_app_settings, get_crypto_adapter
from gateway.api.responses import envelope_response, error_response
from gateway.api.validation import parse_symbol_list, validate_symbol
from gateway.core.config import Settings
from gateway.core.logging import get_logger

crypto_router = APIRouter()
logger = get_logger(__name__)

OMITTED_SYMBOLS_HEADER = "X-Omitted-Symbols"


def omitted_header_value(symbols: Iterable[str]) -> str:
    """Comma-joined symbols, each percent-encoded so the value stays latin-1 and single-line."""
    return ",".join(quote(symbol, safe="") for symbol in symbols)


@crypto_router.get(
    "",
    summary="Multiple crypto prices",
    description="Usage: /api/crypto?symbols=BTC,ETH,ADA. Symbols that fail are left out of the result.",
)
async def get_crypto_prices(
    symbols: Optional[str] = Query(None, description="Comma-separated ticker symbols"),
    crypto: CryptoAdapter = Depends(get_crypto_adapter),
    settings: Settings = Depends(get_app_settings),
) -> JSONResponse:
    symbol_list = parse_symbol_list(symbols, max_symbols=settings.CRYPTO_MAX_SYMBOLS)
    try:
        envelope = await crypto.get_prices(symbol_list)
    except Exception as e:
        logger.error(f"Multiple crypto prices route error: {str(e)}", exc_info=True)
        return error_response("Failed to fetch cryptocurrency prices")

    headers = {OMITTED_SYMBOLS_HEADER: omitted_header_value(envelope.omitted)} if envelope.omitted else None
    return envelope_response(envelope, headers=headers)


@crypto_router.get("/{symbol}", summary="Crypto price by symbol")
async def get_crypto_price(symbol: str, crypto: CryptoAdapter = Depends(get_crypto_adapter)) -> JSONResponse:
    symbol = validate_symbol(symbol)
    try:
        envelope = await crypto.get_price(symbol)
    except Exception as e:
        logger.error(f"Crypto price route error: {str(e)}", exc_info=True)
        return error_response("Failed to fetch cryptocurrency price")
    return envelope_response(envelope)
