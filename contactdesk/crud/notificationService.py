from contactdesk.config.settings import Settings
from contactdesk.commonUtils.emailUtil import send_email
from contactdesk.commonUtils.email_renderer import get_email_renderer
from contactdesk.commonUtils.exceptions import NotificationError
from contactdesk.schemas.contactFormSchema import StoredSubmission


class ContactNotifier:
    """Emails the configured recipient about each new submission. Holds no state between calls."""

    def __init__(self, config: Settings):
        self.config = config

    async def notify(self, submission: StoredSubmission) -> None:
        try:
            html, text = get_email_renderer().contact_submission_email(submission)
            await send_email(
                self.config.mail_config,
                recipients=[self.config.MAIL_TO],
                subject=f"New contact form submission from {submission.name}",
                html=html,
                text=text,
            )
        except Exception as e:
            raise NotificationError(f"Failed to send notification for submission {submission.id}: {e}") from e
