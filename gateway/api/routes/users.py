from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from gateway.adapters.implementations import UsersAdapter
from gateway.api.dependencies import get_users_adapter
from gateway.api.responses import envelope_response, error_response
from gateway.api.validation import parse_optional_positive_int, parse_positive_int
from gateway.core.logging import get_logger

users_router = APIRouter()
logger = get_logger(__name__)

INVALID_USER_ID = "User ID must be a positive number"


@users_router.get("", summary="List users")
async def get_users(
    limit: Optional[str] = Query(None, description="Maximum number of users to return"),
    users: UsersAdapter = Depends(get_users_adapter),
) -> JSONResponse:
    parsed_limit = parse_optional_positive_int(limit, "Limit must be a positive number", field="limit")
    try:
        envelope = await users.get_users(parsed_limit)
    except Exception as e:
        logger.error(f"Get all users route error: {str(e)}", exc_info=True)
        return error_response("Failed to fetch users")
    return envelope_response(envelope)


@users_router.get("/{user_id}", summary="User by ID")
async def get_user(user_id: str, users: UsersAdapter = Depends(get_users_adapter)) -> JSONResponse:
    parsed_id = parse_positive_int(user_id, INVALID_USER_ID, field="id")
    try:
        envelope = await users.get_user(parsed_id)
    except Exception as e:
        logger.error(f"Get user by ID route error: {str(e)}", exc_info=True)
        return error_response("Failed to fetch user")
    return envelope_response(envelope)


@users_router.get("/{user_id}/posts", summary="Posts by user")
async def get_user_posts(user_id: str, users: UsersAdapter = Depends(get_users_adapter)) -> JSONResponse:
    parsed_id = parse_positive_int(user_id, INVALID_USER_ID, field="id")
    try:
        envelope = await users.get_user_posts(parsed_id)
    except Exception as e:
        logger.error(f"Get user posts route error: {str(e)}", exc_info=True)
        return error_response("Failed to fetch user posts")
    return envelope_response(envelope)
