from fastapi import Depends

from contactdesk.config.settings import Settings, settings
from contactdesk.crud.intakeService import IntakeService
from contactdesk.crud.listingService import ListingService
from contactdesk.crud.notificationService import ContactNotifier
from contactdesk.crud.submissionStore import SubmissionStore


def get_settings() -> Settings:
    return settings


def get_submission_store(config: Settings = Depends(get_settings)) -> SubmissionStore:
    return SubmissionStore(config)


def get_notifier(config: Settings = Depends(get_settings)) -> ContactNotifier:
    return ContactNotifier(config)


def get_intake_service(
        store: SubmissionStore = Depends(get_submission_store),
        notifier: ContactNotifier = Depends(get_notifier),
        config: Settings = Depends(get_settings)
) -> IntakeService:
    return IntakeService(store, notifier, notify_in_background=config.NOTIFY_IN_BACKGROUND)


def get_listing_service(store: SubmissionStore = Depends(get_submission_store)) -> ListingService:
    return ListingService(store)
