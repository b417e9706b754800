import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

from ...core.config import Settings, settings as default_settings
from ...exceptions import DeliveryFailure
from ...application.ports.notifier import Notifier

logger = logging.getLogger(__name__)


class SmtpNotifier(Notifier):
    def __init__(self, config: Optional[Settings] = None, smtp_factory=smtplib.SMTP):
        self.config = config or default_settings
        self._smtp_factory = smtp_factory

    def send(self, recipient: str, subject: str, html_body: str, text_body: str) -> None:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = self.config.mail_sender
        msg["To"] = recipient
        msg.attach(MIMEText(text_body, "plain"))
        msg.attach(MIMEText(html_body, "html"))

        try:
            with self._smtp_factory(self.config.SMTP_HOST, self.config.SMTP_PORT, timeout=self.config.SMTP_TIMEOUT_SECONDS) as server:
                if self.config.SMTP_USE_TLS:
                    server.starttls()
                if self.config.SMTP_USER:
                    server.login(self.config.SMTP_USER, self.config.SMTP_PASSWORD)
                server.sendmail(self.config.mail_sender, [recipient], msg.as_string())
        except (smtplib.SMTPException, OSError) as e:
            raise DeliveryFailure(recipient, str(e)) from e

        logger.debug(f"SMTP accepted message '{subject}' for {recipient}")
