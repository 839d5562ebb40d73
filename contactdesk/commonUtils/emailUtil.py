# contactdesk/commonUtils/emailUtil.py - Keep only the core email sending function

from typing import List, Optional

from fastapi_mail import ConnectionConfig, FastMail, MessageSchema
from fastapi_mail.schemas import MessageType, MultipartSubtypeEnum
import logging

logger = logging.getLogger(__name__)


async def send_email(conf: ConnectionConfig, recipients: List[str], subject: str,
                     html: str, text: Optional[str] = None):
    """
    Core email sending utility: HTML body with an optional plain-text alternative
    """
    logger.info(f"📧 Sending email to {recipients} | Subject: {subject}")
    try:
        msg = MessageSchema(
            subject=subject,
            recipients=recipients,
            body=html,
            subtype=MessageType.html,
            alternative_body=text,
            multipart_subtype=MultipartSubtypeEnum.alternative if text else MultipartSubtypeEnum.mixed,
        )
        fm = FastMail(conf)
        await fm.send_message(msg)
        logger.info(f"Email sent successfully to {recipients}")
    except Exception as e:
        logger.error(f"Failed to send email to {recipients}: {str(e)}")
        raise
