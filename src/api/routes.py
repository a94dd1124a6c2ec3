"""
Registration and admin endpoints.

Handlers delegate to the registration and query services and translate
their exceptions into the JSON envelope: validation failures become
HTTP 400 with the service message, store failures become HTTP 500 with a
generic message.  Every failure is isolated to its request.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from src.api.schemas import (
    MessageResponse,
    RegistrationCreate,
    RegistrationListResponse,
    RegistrationRead,
    Stats,
    StatsResponse,
)
from src.services.query_service import get_stats, list_registrations
from src.services.registration_service import (
    STORE_FAILURE_MESSAGE,
    SUCCESS_MESSAGE,
    submit_registration,
)
from src.utils.exceptions import StoreFailureError, ValidationError

logger = logging.getLogger(__name__)

HEALTH_MESSAGE = "Conference Registration API is running"
STATS_FAILURE_MESSAGE = "Failed to fetch dashboard statistics"
LIST_FAILURE_MESSAGE = "Failed to fetch registrations"

router = APIRouter()


def failure_response(status_code: int, message: str) -> JSONResponse:
    """Build the ``{success: false, message}`` error envelope."""
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


@router.get("/")
def health_check() -> dict:
    """Health check."""
    return {"message": HEALTH_MESSAGE}


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": MessageResponse}, 500: {"model": MessageResponse}},
)
def register(payload: RegistrationCreate):
    """Register a student or professional."""
    try:
        submit_registration(payload.model_dump())
    except ValidationError as e:
        return failure_response(status.HTTP_400_BAD_REQUEST, str(e))
    except StoreFailureError:
        logger.exception("Registration error")
        return failure_response(status.HTTP_500_INTERNAL_SERVER_ERROR, STORE_FAILURE_MESSAGE)

    return MessageResponse(success=True, message=SUCCESS_MESSAGE)


@router.get(
    "/admin/stats",
    response_model=StatsResponse,
    responses={500: {"model": MessageResponse}},
)
def dashboard_stats():
    """Total, student and professional registration counts."""
    try:
        counts = get_stats()
    except StoreFailureError:
        logger.exception("Dashboard stats error")
        return failure_response(status.HTTP_500_INTERNAL_SERVER_ERROR, STATS_FAILURE_MESSAGE)

    return StatsResponse(data=Stats(**counts))


@router.get(
    "/admin/registrations",
    response_model=RegistrationListResponse,
    response_model_exclude_none=True,
    responses={500: {"model": MessageResponse}},
)
def all_registrations(
    type: Optional[str] = Query(default="all", description="all, student or professional"),
    sort: Optional[str] = Query(default="desc", description="asc or desc by creation time"),
    search: Optional[str] = Query(default=None, description="Name or email substring"),
):
    """
    List registrations filtered by type and sorted by creation time.

    Unknown ``type`` or ``sort`` values fall back to ``all`` and ``desc``.
    """
    try:
        registrations = list_registrations(type, sort, search)
    except StoreFailureError:
        logger.exception("Fetch registrations error")
        return failure_response(status.HTTP_500_INTERNAL_SERVER_ERROR, LIST_FAILURE_MESSAGE)

    return RegistrationListResponse(
        data=[RegistrationRead.model_validate(registration) for registration in registrations]
    )
