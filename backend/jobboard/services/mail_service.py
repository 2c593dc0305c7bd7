import html
import logging

import requests

from jobboard.config import settings

logger = logging.getLogger(__name__)


class DeliveryError(Exception):
    """The application e-mail could not be handed to the mail provider."""


def render_application_html(name: str, email: str, mobile: str,
                            qualifications: str, job_title: str) -> str:
    qualifications_html = html.escape(qualifications).replace("\n", "<br>")
    return (
        "<h2>New Job Application</h2>"
        f"<p><strong>Position:</strong> {html.escape(job_title)}</p>"
        f"<p><strong>Applicant Name:</strong> {html.escape(name)}</p>"
        f"<p><strong>Email:</strong> {html.escape(email)}</p>"
        f"<p><strong>Mobile:</strong> {html.escape(mobile)}</p>"
        "<h3>Qualifications:</h3>"
        f"<p>{qualifications_html}</p>"
    )


def send_application_email(name: str, email: str, mobile: str,
                           qualifications: str, job_title: str) -> None:
    """Forward one application to the agency inbox. Not queued or retried."""
    if settings.resend_api_key is None or not settings.admin_email:
        raise DeliveryError("Mail delivery is not configured")

    payload = {
        "from": settings.mail_from,
        "to": [settings.admin_email],
        "subject": f"New Job Application: {job_title}",
        "html": render_application_html(name, email, mobile, qualifications, job_title),
    }
    try:
        response = requests.post(
            settings.resend_api_url,
            json=payload,
            headers={"Authorization": f"Bearer {settings.resend_api_key.get_secret_value()}"},
            timeout=settings.mail_timeout_seconds,
        )
        response.raise_for_status()
    except requests.RequestException as exc:
        raise DeliveryError(f"Mail provider rejected the message: {exc}") from exc

    logger.info("Application for %r forwarded to agency inbox", job_title)
