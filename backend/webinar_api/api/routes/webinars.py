"""
Webinar endpoints: organize a webinar and change its seat count.

Handlers only translate HTTP to use case commands and map error kinds back to
status codes; every business rule lives in the use cases.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from webinar_api.api.deps import get_container, get_current_user
from webinar_api.container import AppContainer
from webinar_api.core.logging import get_logger
from webinar_api.core.metrics import record_webinar_operation
from webinar_api.domain.errors import DomainError, ErrorKind
from webinar_api.domain.user import User
from webinar_api.schemas.webinar import (
    ErrorResponse, MessageResponse, SeatsChange, WebinarCreate, WebinarCreated,
)
from webinar_api.services.change_seats import ChangeSeatsCommand
from webinar_api.services.organize_webinar import OrganizeWebinarCommand

logger = get_logger(__name__)
router = APIRouter(prefix="/webinars", tags=["Webinars"])

GENERIC_ERROR = "An error occurred"

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
}


def domain_error_response(operation: str, error: DomainError) -> JSONResponse:
    record_webinar_operation(operation, error.kind.value.lower())
    logger.info(f"{operation}_rejected", kind=error.kind.value, reason=error.message)
    return JSONResponse(
        status_code=STATUS_BY_KIND[error.kind],
        content={"error": error.message},
    )


def unexpected_error_response(operation: str) -> JSONResponse:
    record_webinar_operation(operation, "error")
    logger.exception(f"{operation}_failed")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": GENERIC_ERROR},
    )


@router.post(
    "",
    response_model=WebinarCreated,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def organize_webinar_endpoint(
    payload: WebinarCreate,
    user: User = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
):
    """Create a webinar organized by the current user."""
    command = OrganizeWebinarCommand(
        user_id=user.id,
        title=payload.title,
        seats=payload.seats,
        start_date=payload.start_date,
        end_date=payload.end_date,
    )
    try:
        result = await container.organize_webinar.execute(command)
    except DomainError as e:
        return domain_error_response("organize_webinar", e)
    except Exception:
        return unexpected_error_response("organize_webinar")

    record_webinar_operation("organize_webinar", "success")
    return WebinarCreated(id=result.id)


@router.post(
    "/{webinar_id}/seats",
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def change_seats_endpoint(
    webinar_id: str,
    payload: SeatsChange,
    user: User = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
):
    """
    Change the seat count of a webinar.
    Only the organizer may do it, and the count can only grow (up to 1000).
    """
    command = ChangeSeatsCommand(user=user, webinar_id=webinar_id, seats=payload.seats)
    try:
        await container.change_seats.execute(command)
    except DomainError as e:
        return domain_error_response("change_seats", e)
    except Exception:
        return unexpected_error_response("change_seats")

    record_webinar_operation("change_seats", "success")
    return MessageResponse(message="Seats updated")
