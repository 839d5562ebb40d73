from datetime import datetime, UTC
from typing import Optional
from beanie import Document, PydanticObjectId
from pydantic import Field, ConfigDict


def utc_now_ms() -> datetime:
    """Current UTC time truncated to the millisecond precision MongoDB stores"""
    now = datetime.now(UTC)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


class ContactFormSubmission(Document):
    """A contact form submission stored in MongoDB"""
    id: Optional[PydanticObjectId] = Field(None, alias="_id")
    name: str
    email: str
    phone: str
    # Older records may hold null
    message: Optional[str] = ""
    created_at: datetime = Field(default_factory=utc_now_ms)

    class Settings:
        name = "contact_form_submissions"
        indexes = [
            [("created_at", 1)],  # Listing order
        ]

    model_config = ConfigDict(populate_by_name=True)
