from datetime import datetime, UTC
from email.utils import parseaddr
from unittest.mock import AsyncMock, patch

import pytest
from fastapi_mail import FastMail

from contactdesk.commonUtils.exceptions import NotificationError
from contactdesk.crud.notificationService import ContactNotifier
from contactdesk.schemas.contactFormSchema import StoredSubmission


@pytest.fixture
def submission() -> StoredSubmission:
    return StoredSubmission(
        id="65f1c0ffee0000000000abcd",
        name="Jo",
        email="jo@x.com",
        phone="555",
        message="hi <b>there</b>",
        created_at=datetime(2024, 3, 13, 10, 30, tzinfo=UTC),
    )


def decoded_parts(message) -> dict:
    return {
        part.get_content_type(): part.get_payload(decode=True).decode(part.get_content_charset() or "utf-8")
        for part in message.walk()
        if part.get_content_maintype() == "text"
    }


async def test_notification_is_addressed_and_carries_submission(test_settings, submission):
    fm = FastMail(test_settings.mail_config)

    with fm.record_messages() as outbox:
        await ContactNotifier(test_settings).notify(submission)

    assert len(outbox) == 1
    message = outbox[0]
    assert parseaddr(message["To"])[1] == "owner@example.com"
    assert message["Subject"] == "New contact form submission from Jo"

    parts = decoded_parts(message)
    html = parts["text/html"]
    for value in ("Jo", "555", "jo@x.com", "65f1c0ffee0000000000abcd"):
        assert value in html
    # user text is escaped in the HTML body
    assert "hi &lt;b&gt;there&lt;/b&gt;" in html


async def test_plain_text_body_is_not_escaped(test_settings, submission):
    fm = FastMail(test_settings.mail_config)

    with fm.record_messages() as outbox:
        await ContactNotifier(test_settings).notify(submission)

    text = decoded_parts(outbox[0]).get("text/plain", "")
    assert "hi <b>there</b>" in text
    assert "Submission ID: 65f1c0ffee0000000000abcd" in text


async def test_transport_failure_raises_notification_error(test_settings, submission):
    failing = AsyncMock(side_effect=ConnectionRefusedError("SMTP server unreachable"))

    with patch("contactdesk.commonUtils.emailUtil.FastMail.send_message", failing):
        with pytest.raises(NotificationError) as excinfo:
            await ContactNotifier(test_settings).notify(submission)

    assert "SMTP server unreachable" in excinfo.value.message
    failing.assert_awaited_once()
