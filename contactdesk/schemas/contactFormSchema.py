from datetime import datetime, UTC
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ContactFormIn(BaseModel):
    """Raw contact form payload. Presence of the required fields is checked by the intake service."""
    name: Optional[str] = Field(None, description="Submitter's name")
    email: Optional[str] = Field(None, description="Submitter's email address")
    phone: Optional[str] = Field(None, description="Submitter's phone number")
    message: Optional[str] = Field(None, description="Free-form message")


class SubmissionCreate(BaseModel):
    """Validated fields handed to the submission store"""
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    message: str = ""


class StoredSubmission(BaseModel):
    """A persisted submission as returned by the store and the listing endpoint"""
    id: str
    name: str
    email: str
    phone: str
    message: str = ""
    created_at: datetime = Field(..., serialization_alias="createdAt")

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        """Timestamps are stored in UTC; a naive value read back from the driver is UTC too"""
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class SubmissionOutcome(BaseModel):
    """Result of one intake call"""
    submission_id: str
    # None when the email was handed to a background task
    notified: Optional[bool] = None
    notification_error: Optional[str] = None


class SubmissionResponse(BaseModel):
    message: str
    submissionId: str
    notificationSent: Optional[bool] = None
    details: Optional[str] = None


class ErrorResponse(BaseModel):
    message: str
    details: Optional[str] = None
    missingFields: Optional[List[str]] = None
