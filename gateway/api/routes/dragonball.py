from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from gateway.adapters.implementations import DragonballAdapter
from gateway.api.dependencies import get_dragonball_adapter
from gateway.api.responses import envelope_response, error_response
from gateway.api.validation import parse_positive_int
from gateway.core.logging import get_logger

dragonball_router = APIRouter()
logger = get_logger(__name__)


@dragonball_router.get("/{character_id}", summary="Dragon Ball character by ID")
async def get_character(
    character_id: str,
    dragonball: DragonballAdapter = Depends(get_dragonball_adapter),
) -> JSONResponse:
    parsed_id = parse_positive_int(character_id, "Character ID must be a positive number", field="id")
    try:
        envelope = await dragonball.get_character(parsed_id)
    except Exception as e:
        logger.error(f"Dragonball route error: {str(e)}", exc_info=True)
        return error_response("Failed to fetch character")
    return envelope_response(envelope)
