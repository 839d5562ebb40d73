import logging
from typing import Optional

from fastapi import BackgroundTasks

from contactdesk.commonUtils.exceptions import ValidationError, PersistenceError, NotificationError
from contactdesk.schemas.contactFormSchema import (
    ContactFormIn, SubmissionCreate, StoredSubmission, SubmissionOutcome
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "email", "phone")


class IntakeService:
    """
    Validate -> persist -> notify for a single contact form submission.

    A notification failure never undoes or hides a successful write: in-band
    the outcome reports notified=False with the error, in background mode the
    failure is only logged.
    """

    def __init__(self, store, notifier, notify_in_background: bool = False):
        self.store = store
        self.notifier = notifier
        self.notify_in_background = notify_in_background

    @staticmethod
    def validate(form: ContactFormIn) -> SubmissionCreate:
        """Check the required fields are present and not blank"""
        missing = [
            field for field in REQUIRED_FIELDS
            if not (getattr(form, field) or "").strip()
        ]
        if missing:
            raise ValidationError(missing_fields=missing)

        return SubmissionCreate(
            name=form.name,
            email=form.email,
            phone=form.phone,
            message=form.message or "",
        )

    async def submit(
            self,
            form: ContactFormIn,
            background_tasks: Optional[BackgroundTasks] = None
    ) -> SubmissionOutcome:
        record = self.validate(form)

        # PersistenceError from the store propagates unchanged
        submission = await self.store.create(record)
        if submission is None or not submission.id:
            raise PersistenceError("Database create operation failed or returned an invalid ID.")

        logger.info(f"Form submission stored for {submission.email}. Id {submission.id}")
        outcome = SubmissionOutcome(submission_id=submission.id)

        if self.notify_in_background and background_tasks is not None:
            background_tasks.add_task(self._notify_quietly, submission)
            return outcome

        try:
            await self.notifier.notify(submission)
            outcome.notified = True
        except NotificationError as e:
            logger.warning(f"⚠️ Submission {submission.id} saved but notification failed: {e}")
            outcome.notified = False
            outcome.notification_error = str(e)

        return outcome

    async def _notify_quietly(self, submission: StoredSubmission):
        """Background dispatch; errors are logged since nobody is waiting on the result"""
        try:
            await self.notifier.notify(submission)
        except NotificationError as e:
            logger.error(f"Background notification for submission {submission.id} failed: {e}")
