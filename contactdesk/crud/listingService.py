from typing import List

from contactdesk.commonUtils.exceptions import PersistenceError, RetrievalError
from contactdesk.schemas.contactFormSchema import StoredSubmission


class ListingService:
    """Read path for stored submissions"""

    def __init__(self, store):
        self.store = store

    async def list(self) -> List[StoredSubmission]:
        """All submissions in the order the store returns them (oldest first)"""
        try:
            return await self.store.list_all()
        except PersistenceError as e:
            raise RetrievalError(e.message) from e
