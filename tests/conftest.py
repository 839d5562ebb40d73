"""Pytest configuration and shared fakes for contact desk tests."""

import os
from datetime import datetime, UTC
from itertools import count

# Settings are read once at import time, so the environment must be ready first.
os.environ.setdefault("MAIL_SERVER", "localhost")
os.environ.setdefault("MAIL_FROM", "mailer@example.com")
os.environ.setdefault("MAIL_TO", "owner@example.com")
os.environ.setdefault("MAIL_SUPPRESS_SEND", "true")
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")

import pytest
from fastapi.testclient import TestClient

from contactdesk.commonUtils.exceptions import NotificationError, PersistenceError
from contactdesk.config.settings import Settings
from contactdesk.dependencies.contactDependencies import get_notifier, get_settings, get_submission_store
from contactdesk.main import app
from contactdesk.schemas.contactFormSchema import StoredSubmission


class FakeStore:
    """In-memory stand-in for SubmissionStore."""

    def __init__(self, fail: bool = False):
        self.records = []
        self.fail = fail
        self._ids = count(1)

    async def create(self, record):
        if self.fail:
            raise PersistenceError("Connection refused: localhost:27017")
        stored = StoredSubmission(
            id=f"{next(self._ids):024x}",
            created_at=datetime.now(UTC),
            **record.model_dump(),
        )
        self.records.append(stored)
        return stored

    async def list_all(self):
        if self.fail:
            raise PersistenceError("Connection refused: localhost:27017")
        return list(self.records)


class FakeNotifier:
    """Records notified submissions instead of sending mail."""

    def __init__(self, fail: bool = False):
        self.sent = []
        self.fail = fail

    async def notify(self, submission):
        if self.fail:
            raise NotificationError("SMTP server unreachable")
        self.sent.append(submission)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        MAIL_SERVER="localhost",
        MAIL_FROM="mailer@example.com",
        MAIL_TO="owner@example.com",
        MAIL_SUPPRESS_SEND=True,
        MONGO_DATABASE="contact_desk_test",
    )


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def client(store, notifier, test_settings):
    """TestClient wired to the in-memory store and recording notifier."""
    app.dependency_overrides[get_submission_store] = lambda: store
    app.dependency_overrides[get_notifier] = lambda: notifier
    app.dependency_overrides[get_settings] = lambda: test_settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
