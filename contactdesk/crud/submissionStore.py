import logging
from typing import List

from pydantic import ValidationError
from pymongo.errors import PyMongoError

from contactdesk.config.database import startDB
from contactdesk.config.settings import Settings
from contactdesk.commonUtils.exceptions import PersistenceError
from contactdesk.models.contactSubmissionModel import ContactFormSubmission
from contactdesk.schemas.contactFormSchema import SubmissionCreate, StoredSubmission

logger = logging.getLogger(__name__)


def to_stored(doc: ContactFormSubmission) -> StoredSubmission:
    return StoredSubmission(
        id=str(doc.id),
        name=doc.name,
        email=doc.email,
        phone=doc.phone,
        message=doc.message or "",
        created_at=doc.created_at,
    )


class SubmissionStore:
    """MongoDB-backed persistence for contact form submissions"""

    def __init__(self, config: Settings):
        self.config = config

    async def create(self, record: SubmissionCreate) -> StoredSubmission:
        """Insert one submission; id and created_at are assigned here"""
        try:
            await startDB(self.config)
            doc = ContactFormSubmission(**record.model_dump())
            await doc.insert()
        except PyMongoError as e:
            logger.error(f"Failed to store submission for {record.email}: {e}")
            raise PersistenceError(f"Database create operation failed: {e}") from e

        if doc.id is None:
            raise PersistenceError(
                "Database create operation returned no record id. Check MongoDB permissions or connection string."
            )
        return to_stored(doc)

    async def list_all(self) -> List[StoredSubmission]:
        """Every stored submission, oldest first"""
        try:
            await startDB(self.config)
            docs = await (
                ContactFormSubmission.find_all()
                .sort(("created_at", 1), ("_id", 1))
                .to_list()
            )
            return [to_stored(doc) for doc in docs]
        except PyMongoError as e:
            logger.error(f"Failed to read submissions: {e}")
            raise PersistenceError(f"Database read operation failed: {e}") from e
        except ValidationError as e:
            logger.error(f"Stored submission does not match the schema: {e}")
            raise PersistenceError(f"Stored submission could not be read: {e}") from e
