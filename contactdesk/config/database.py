import asyncio
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from beanie import init_beanie
from contactdesk.models.contactSubmissionModel import ContactFormSubmission
from .settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)

# One client per live process, created on first use
_client: Optional[AsyncIOMotorClient] = None
_database: Optional[AsyncIOMotorDatabase] = None
_init_lock = asyncio.Lock()


async def startDB(config: Settings = default_settings, client=None) -> AsyncIOMotorDatabase:
    """
    Return the process-wide database handle, initialising Motor and Beanie on first call.

    Concurrent first callers wait on the lock so only one client is ever created.
    If initialisation fails nothing is cached and the next call tries again.
    """
    global _client, _database
    if _database is not None:
        return _database

    async with _init_lock:
        if _database is None:
            if client is None:
                client = AsyncIOMotorClient(
                    config.MONGO_URI,
                    uuidRepresentation="standard",
                    tz_aware=True,
                    serverSelectionTimeoutMS=config.MONGO_TIMEOUT_MS,
                )
            database = client[config.MONGO_DATABASE]

            await init_beanie(database=database, document_models=[ContactFormSubmission])

            _client, _database = client, database
            logger.info(f"Connected to MongoDB database '{config.MONGO_DATABASE}'")
    return _database


def closeDB():
    """Drop the cached handle and close the client (application shutdown)."""
    global _client, _database
    if _client is not None:
        _client.close()
    _client, _database = None, None
