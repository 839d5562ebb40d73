"""
Error taxonomy for the contact form workflow.

Each error carries the HTTP status and the public message the API answers
with; the exception handlers in main.py do the translation.
"""
from typing import List, Optional


class ContactDeskError(Exception):
    """Base class for every error the intake and listing workflows raise"""
    kind = "ContactDeskError"
    status_code = 500
    public_message = "An error occurred"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ContactDeskError):
    """Client supplied incomplete data"""
    kind = "ValidationError"
    status_code = 400
    public_message = "Missing data for any required field"

    def __init__(self, message: str = public_message, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class PersistenceError(ContactDeskError):
    """The store is unavailable or rejected the write"""
    kind = "PersistenceError"
    public_message = "Submission failed due to server error"


class NotificationError(ContactDeskError):
    """The notification email could not be delivered"""
    kind = "NotificationError"
    public_message = "Notification email could not be sent"


class RetrievalError(ContactDeskError):
    """Stored submissions could not be read"""
    kind = "RetrievalError"
    public_message = "Failed to load submissions"
