from webinar_api.schemas.webinar import (
    WebinarCreate, WebinarCreated, SeatsChange, MessageResponse, ErrorResponse,
)

__all__ = [
    "WebinarCreate", "WebinarCreated", "SeatsChange", "MessageResponse", "ErrorResponse",
]
