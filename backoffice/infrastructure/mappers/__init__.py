"""
Infrastructure mappers module.
Contains mappers for converting between domain entities and store rows.
"""

from .project_mapper import ProjectMapper, UNKNOWN_CLIENT
from .invoice_mapper import InvoiceMapper
from .client_mapper import ClientMapper
from .credential_mapper import (
    MainKey, HostingKey, OtherKey, PlatformKey, DecodedCredentials,
    parse_platform, format_platform, encode_credentials, decode_credentials,
)
from .payment_mapper import encode_payment, encode_payments, decode_payment, decode_payments

__all__ = [
    "ProjectMapper",
    "UNKNOWN_CLIENT",
    "InvoiceMapper",
    "ClientMapper",
    "MainKey",
    "HostingKey",
    "OtherKey",
    "PlatformKey",
    "DecodedCredentials",
    "parse_platform",
    "format_platform",
    "encode_credentials",
    "decode_credentials",
    "encode_payment",
    "encode_payments",
    "decode_payment",
    "decode_payments",
]
