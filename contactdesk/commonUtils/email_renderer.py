"""
Email template renderer using Jinja2 for easy maintenance
"""
from pathlib import Path
from typing import Optional
from jinja2 import Environment, FileSystemLoader, select_autoescape
from datetime import datetime, UTC

from contactdesk.schemas.contactFormSchema import StoredSubmission

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates" / "emails"


class EmailRenderer:
    """Renders email templates using Jinja2"""

    def __init__(self, template_dir: Path = TEMPLATE_DIR):
        """
        Initialize email renderer

        Args:
            template_dir: Directory containing email template files
        """
        self.template_dir = Path(template_dir)

        self.env = Environment(
            loader=FileSystemLoader(self.template_dir),
            # Plain-text templates (.txt) are rendered without escaping
            autoescape=select_autoescape(['html', 'xml'])
        )

        self.brand_config = {
            'company_name': 'Contact Desk',
            'colors': {
                'indigo': '#4F46E5',
                'light_gray': '#F9FAFB',
                'dark_text': '#1F2937',
                'light_text': '#6B7280',
            },
            'year': datetime.now(UTC).year
        }

    def render(self, template_name: str, **context) -> str:
        """
        Render an email template with context

        Args:
            template_name: Name of template file (e.g., 'contact_submission.html')
            **context: Variables to pass to template

        Returns:
            Rendered string
        """
        template = self.env.get_template(template_name)

        # Merge brand config with user context
        full_context = {**self.brand_config, **context}

        return template.render(**full_context)

    def contact_submission_email(self, submission: StoredSubmission) -> tuple[str, str]:
        """Render the new-submission notification as (html, plain text)"""
        context = dict(
            submission_id=submission.id,
            name=submission.name,
            email=submission.email,
            phone=submission.phone,
            message=submission.message or '(no message)',
            submitted_at=submission.created_at.strftime('%B %d, %Y at %I:%M %p UTC'),
        )
        return (
            self.render('contact_submission.html', **context),
            self.render('contact_submission.txt', **context),
        )


# Singleton instance
_renderer: Optional[EmailRenderer] = None


def get_email_renderer() -> EmailRenderer:
    """Get or create email renderer instance"""
    global _renderer
    if _renderer is None:
        _renderer = EmailRenderer()
    return _renderer
