from typing import List

from fastapi import APIRouter, BackgroundTasks, Depends

from contactdesk.crud.intakeService import IntakeService
from contactdesk.crud.listingService import ListingService
from contactdesk.dependencies.contactDependencies import get_intake_service, get_listing_service
from contactdesk.schemas.contactFormSchema import (
    ContactFormIn, StoredSubmission, SubmissionResponse, ErrorResponse
)

router = APIRouter()

error_responses = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


# Domain errors raised below are turned into JSON by the handlers in main.py
@router.post("/contactFormData", response_model=SubmissionResponse,
             response_model_exclude_none=True, responses=error_responses)
async def submit_contact_form(
        data: ContactFormIn,
        background_tasks: BackgroundTasks,
        intake: IntakeService = Depends(get_intake_service)
):
    """Store a contact form submission and notify the site owner"""
    outcome = await intake.submit(data, background_tasks)

    if outcome.notified is False:
        return SubmissionResponse(
            message="Form submitted successfully, but the notification email could not be sent",
            submissionId=outcome.submission_id,
            notificationSent=False,
            details=outcome.notification_error,
        )

    return SubmissionResponse(
        message="Form Submitted successfully",
        submissionId=outcome.submission_id,
        notificationSent=outcome.notified,
    )


@router.get("/contactFormData", response_model=List[StoredSubmission], responses={500: {"model": ErrorResponse}})
async def list_submissions(listing: ListingService = Depends(get_listing_service)):
    """All stored submissions, oldest first"""
    return await listing.list()
