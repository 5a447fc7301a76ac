"""
Email service for client notifications.
Renders templates and delivers over SMTP; when SMTP is not configured the
message is logged and kept in memory instead.
"""

import asyncio
import logging
import smtplib
from dataclasses import dataclass
from datetime import datetime
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Any, Dict, List, Optional, Tuple

from backoffice.config import Settings, settings as default_settings
from backoffice.domain.models.invoice import Invoice
from .template_loader import EmailTemplateLoader


logger = logging.getLogger(__name__)


@dataclass
class EmailMessage:
    """Email message data."""
    to: str
    subject: str
    template: str
    context: Dict[str, Any]


class EmailService:
    """Service for sending email notifications."""

    def __init__(self, config: Optional[Settings] = None, template_loader: Optional[EmailTemplateLoader] = None):
        config = config or default_settings
        self.smtp_host = config.smtp_host
        self.smtp_port = config.smtp_port
        self.smtp_user = config.smtp_user
        self.smtp_password = config.smtp_password
        self.from_name = config.email_from_name
        self.from_address = config.email_from_address
        self.template_loader = template_loader or EmailTemplateLoader()
        self.sent_emails: List[Dict[str, Any]] = []

    async def send_email(self, message: EmailMessage) -> Dict[str, Any]:
        """
        Send an email message.

        Returns:
            Result dictionary with success status and details
        """
        html_content, text_content = self._render(message)

        if not self._is_smtp_configured():
            logger.warning("SMTP not configured, email will be logged instead")
            return self._log_email(message, html_content)

        mime_message = self._create_mime_message(message, html_content, text_content)
        try:
            await asyncio.to_thread(self._send_via_smtp, mime_message, message.to)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send email to {message.to}: {str(e)}")
            return {
                "success": False,
                "error": str(e),
                "timestamp": datetime.now().isoformat()
            }

        logger.info(f"Email sent successfully to {message.to}: {message.subject}")
        return {
            "success": True,
            "recipients": [message.to],
            "timestamp": datetime.now().isoformat()
        }

    async def send_invoice_notification(
        self,
        client_email: str,
        client_name: str,
        project_name: str,
        invoice: Invoice
    ) -> Dict[str, Any]:
        """Send an invoice to a client."""
        message = EmailMessage(
            to=client_email,
            subject=f"Invoice {invoice.invoice_number} - {project_name}",
            template="invoice_sent",
            context={
                "client_name": client_name,
                "project_name": project_name,
                "invoice": invoice,
                "company_name": self.from_name
            }
        )
        return await self.send_email(message)

    def _render(self, message: EmailMessage) -> Tuple[str, str]:
        html_content = self.template_loader.render_template(f"{message.template}.html", message.context)
        if self.template_loader.template_exists(f"{message.template}.txt"):
            text_content = self.template_loader.render_template(f"{message.template}.txt", message.context)
        else:
            text_content = html_content
        return html_content, text_content

    def _create_mime_message(self, message: EmailMessage, html_content: str, text_content: str) -> MIMEMultipart:
        mime_msg = MIMEMultipart("alternative")
        mime_msg["Subject"] = message.subject
        mime_msg["From"] = f"{self.from_name} <{self.from_address}>"
        mime_msg["To"] = message.to
        mime_msg.attach(MIMEText(text_content, "plain", "utf-8"))
        mime_msg.attach(MIMEText(html_content, "html", "utf-8"))
        return mime_msg

    def _send_via_smtp(self, mime_message: MIMEMultipart, recipient: str) -> None:
        with smtplib.SMTP(self.smtp_host, self.smtp_port) as server:
            server.starttls()
            server.login(self.smtp_user, self.smtp_password)
            server.send_message(mime_message, to_addrs=[recipient])

    def _log_email(self, message: EmailMessage, html_content: str) -> Dict[str, Any]:
        """Log email instead of sending."""
        self.sent_emails.append({
            "timestamp": datetime.now().isoformat(),
            "to": message.to,
            "subject": message.subject,
            "template": message.template,
            "html_preview": html_content[:200] + "..." if len(html_content) > 200 else html_content,
        })
        logger.info(f"Email logged (SMTP not configured): {message.subject} to {message.to}")
        return {
            "success": True,
            "logged": True,
            "message": "Email logged successfully (SMTP not configured)",
            "timestamp": datetime.now().isoformat()
        }

    def _is_smtp_configured(self) -> bool:
        return all([self.smtp_host, self.smtp_user, self.smtp_password])

    def get_sent_emails(self) -> List[Dict[str, Any]]:
        """Emails logged while SMTP was not configured."""
        return self.sent_emails.copy()


_email_service: Optional[EmailService] = None


def get_email_service() -> EmailService:
    """Get singleton email service instance."""
    global _email_service
    if _email_service is None:
        _email_service = EmailService()
    return _email_service
