"""
FastAPI dependencies shared by the routers.
The backing store is created once in the application lifespan and kept on
``app.state``.
"""

from fastapi import Depends, Request

from backoffice.domain.repositories.store import BackingStore
from backoffice.infrastructure.email.email_service import EmailService, get_email_service
from backoffice.infrastructure.events.event_setup import get_notification_handler
from backoffice.infrastructure.events.notification_handlers import NotificationLogHandler
from backoffice.infrastructure.repositories import (
    StoreProjectRepository, StoreProjectTypeRepository, StoreInvoiceRepository,
    StoreClientRepository, StoreCompanyRepository
)


def get_store(request: Request) -> BackingStore:
    """Store attached to the running application."""
    return request.app.state.store


def get_project_repository(store: BackingStore = Depends(get_store)) -> StoreProjectRepository:
    return StoreProjectRepository(store)


def get_project_type_repository(store: BackingStore = Depends(get_store)) -> StoreProjectTypeRepository:
    return StoreProjectTypeRepository(store)


def get_invoice_repository(store: BackingStore = Depends(get_store)) -> StoreInvoiceRepository:
    return StoreInvoiceRepository(store)


def get_client_repository(store: BackingStore = Depends(get_store)) -> StoreClientRepository:
    return StoreClientRepository(store)


def get_company_repository(store: BackingStore = Depends(get_store)) -> StoreCompanyRepository:
    return StoreCompanyRepository(store)


def get_email() -> EmailService:
    return get_email_service()


def get_notifications() -> NotificationLogHandler:
    return get_notification_handler()
