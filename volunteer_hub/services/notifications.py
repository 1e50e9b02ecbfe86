import smtplib
from email.message import EmailMessage
from html import escape
from typing import Any, Callable, Dict, List, Optional

from ..core.config import Settings, settings
from ..core.errors import NotificationError
from ..core.logging import logger

Sender = Callable[[str, str, str], None]


class EmailService:
    def __init__(self, config: Optional[Settings] = None):
        config = config or settings
        self.host = config.email_host
        self.port = config.email_port
        self.user = config.email_user
        self.password = config.email_pass
        self._sender_override: Optional[Sender] = None

    @property
    def configured(self) -> bool:
        return bool(self.user) or self._sender_override is not None

    def set_sender_override(self, sender: Optional[Sender]) -> Optional[Sender]:
        """Temporarily override the send implementation (useful for captures/tests)."""
        previous = self._sender_override
        self._sender_override = sender
        return previous

    def send_email(self, to: str, subject: str, html: str) -> None:
        """Send one HTML email. Raises NotificationError on any failure."""
        if self._sender_override:
            try:
                self._sender_override(to, subject, html)
            except Exception as exc:
                raise NotificationError(f"Sender override failed for {to}: {exc}") from exc
            return

        message = EmailMessage()
        message["From"] = self.user
        message["To"] = to
        message["Subject"] = subject
        message.set_content("This message requires an HTML capable mail client.")
        message.add_alternative(html, subtype="html")

        try:
            with smtplib.SMTP(self.host, self.port, timeout=30) as smtp:
                smtp.starttls()
                if self.password:
                    smtp.login(self.user, self.password)
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            raise NotificationError(f"SMTP delivery to {to} failed: {exc}") from exc

        logger.info(f"Email sent to {to}: {subject}")

    def notify_signup(
        self,
        event: Dict[str, Any],
        volunteer: Dict[str, Any],
        volunteers: List[Dict[str, Any]],
    ) -> None:
        """Thank the volunteer and alert the organizer. Never raises."""
        if not self.configured:
            logger.warning("Email credentials not configured, skipping signup notifications")
            return

        event_name = event.get("name", "")
        organizer = _organizer(event)

        if volunteer.get("email") and isinstance(volunteer["email"], str):
            try:
                self.send_email(
                    volunteer["email"],
                    f"Thank you for volunteering - {event_name}",
                    render_thank_you(event, volunteer),
                )
            except NotificationError as exc:
                logger.error(f"Email sending failed: {exc}")

        if organizer.get("email") and isinstance(organizer["email"], str):
            roster = [v for v in volunteers if isinstance(v, dict) and v.get("eventId") == event.get("id")]
            try:
                self.send_email(
                    organizer["email"],
                    f"New Volunteer Signup - {event_name}",
                    render_organizer_alert(event, volunteer, roster),
                )
            except NotificationError as exc:
                logger.error(f"Organizer email failed: {exc}")


def _organizer(event: Dict[str, Any]) -> Dict[str, Any]:
    organizer = event.get("organizer")
    return organizer if isinstance(organizer, dict) else {}


def _e(value: Any) -> str:
    return escape("" if value is None else str(value))


def render_thank_you(event: Dict[str, Any], volunteer: Dict[str, Any]) -> str:
    organizer = _organizer(event)
    return f"""
<h2>Thank You for Volunteering!</h2>
<p>Dear {_e(volunteer.get('name'))},</p>
<p>Thank you for signing up to help with <strong>{_e(event.get('name'))}</strong>.</p>
<p><strong>Event Details:</strong></p>
<ul>
    <li><strong>Date:</strong> {_e(event.get('date'))}</li>
    <li><strong>Time:</strong> {_e(event.get('time'))}</li>
    <li><strong>Your Role:</strong> {_e(volunteer.get('task'))}</li>
</ul>
<p>We'll send you more details closer to the event date.</p>
<p>Questions? Contact {_e(organizer.get('name'))} at {_e(organizer.get('phone'))}</p>
<p>Thank you for your commitment to our club!</p>
"""


def render_organizer_alert(
    event: Dict[str, Any],
    volunteer: Dict[str, Any],
    roster: List[Dict[str, Any]],
) -> str:
    lines = "".join(
        f"<p>&bull; {_e(v.get('name'))} - {_e(v.get('task'))} ({_e(v.get('email'))})</p>"
        for v in roster
    )
    return f"""
<h2>New Volunteer Signup</h2>
<p><strong>Event:</strong> {_e(event.get('name'))}</p>
<p><strong>New Volunteer:</strong> {_e(volunteer.get('name'))} ({_e(volunteer.get('email'))})</p>
<p><strong>Role:</strong> {_e(volunteer.get('task'))}</p>
<p><strong>Phone:</strong> {_e(volunteer.get('phone') or 'Not provided')}</p>
<p><strong>Notes:</strong> {_e(volunteer.get('notes') or 'None')}</p>
<p><strong>Total Volunteers:</strong> {len(roster)}</p>
<hr>
<p><strong>Current Volunteer Roster:</strong></p>
{lines}
"""
