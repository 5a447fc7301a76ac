"""
Payment mapper for converting between Payment values and ``payments`` rows.
"""

import logging
from datetime import date
from typing import Iterable, List

from backoffice.domain.models.project import Payment, PaymentStatus
from backoffice.domain.models.value_objects import DEFAULT_CURRENCY
from backoffice.domain.repositories.store import Row
from .dates import to_calendar_date, parse_calendar_date


logger = logging.getLogger(__name__)


def encode_payment(payment: Payment, project_id: str) -> Row:
    """
    Row for one payment.
    The date is stored without its time of day; a missing date means today.
    """
    status = payment.status.value if isinstance(payment.status, PaymentStatus) else payment.status
    return {
        "project_id": project_id,
        "amount": payment.amount or 0,
        "payment_date": to_calendar_date(payment.date) or date.today().isoformat(),
        "payment_method": status or PaymentStatus.PENDING.value,
        "description": payment.description or "",
        "currency": payment.currency or DEFAULT_CURRENCY,
    }


def encode_payments(payments: Iterable[Payment], project_id: str) -> List[Row]:
    return [encode_payment(payment, project_id) for payment in payments]


def _payment_status(value) -> PaymentStatus:
    try:
        return PaymentStatus(value)
    except ValueError:
        logger.debug(f"Unknown payment method '{value}', treating as pending")
        return PaymentStatus.PENDING


def decode_payment(row: Row) -> Payment:
    return Payment(
        id=row.get("id"),
        amount=float(row.get("amount") or 0),
        date=parse_calendar_date(row.get("payment_date")),
        description=row.get("description"),
        status=_payment_status(row.get("payment_method")),
        currency=row.get("currency") or DEFAULT_CURRENCY
    )


def decode_payments(rows: Iterable[Row]) -> List[Payment]:
    """Payments of a project, most recent first."""
    payments = [decode_payment(row) for row in rows]
    payments.sort(key=lambda p: p.date or date.min, reverse=True)
    return payments
