from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from gateway.adapters.implementations import QuotesAdapter
from gateway.api.dependencies import get_quotes_adapter
from gateway.api.responses import envelope_response, error_response
from gateway.api.validation import require_text
from gateway.core.logging import get_logger

quotes_router = APIRouter()
logger = get_logger(__name__)


@quotes_router.get("", summary="Random quote")
async def get_random_quote(quotes: QuotesAdapter = Depends(get_quotes_adapter)) -> JSONResponse:
    try:
        envelope = await quotes.get_random_quote()
    except Exception as e:
        logger.error(f"Random quote route error: {str(e)}", exc_info=True)
        return error_response("Failed to fetch random quote")
    return envelope_response(envelope)


@quotes_router.get(
    "/author/{author}",
    summary="Quotes by author",
    description="Up to five quotes attributed to the given author.",
)
async def get_quotes_by_author(author: str, quotes: QuotesAdapter = Depends(get_quotes_adapter)) -> JSONResponse:
    author = require_text(author, "Author parameter is required", field="author")
    try:
        envelope = await quotes.get_quotes_by_author(author)
    except Exception as e:
        logger.error(f"Quotes by author route error: {str(e)}", exc_info=True)
        return error_response("Failed to fetch quotes by author")
    return envelope_response(envelope)
