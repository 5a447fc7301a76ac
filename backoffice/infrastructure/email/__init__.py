"""
Email infrastructure.
Handles email templates and delivery.
"""

from .email_service import EmailService, EmailMessage, get_email_service
from .template_loader import EmailTemplateLoader

__all__ = [
    "EmailService",
    "EmailMessage",
    "get_email_service",
    "EmailTemplateLoader"
]
