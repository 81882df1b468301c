"""
Pydantic schemas for webinar request/response validation.
"""

from datetime import datetime, timezone
from pydantic import BaseModel, Field, field_validator


class WebinarCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    seats: int
    start_date: datetime = Field(..., alias="startDate")
    end_date: datetime = Field(..., alias="endDate")

    model_config = {"populate_by_name": True}

    @field_validator("start_date", "end_date")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class WebinarCreated(BaseModel):
    id: str


class SeatsChange(BaseModel):
    # Clients send the count as a string; lax mode parses "30" and 30 alike
    seats: int


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
