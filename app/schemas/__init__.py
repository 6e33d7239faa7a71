"""Pydantic schema package for API contracts."""

from app.schemas.common import ErrorEnvelope, HealthResponse
from app.schemas.invoices import (
    CompanySummary,
    DeletedEnvelope,
    InvoiceCreateRequest,
    InvoiceDetailEnvelope,
    InvoiceDetailResponse,
    InvoiceEnvelope,
    InvoiceListEnvelope,
    InvoicePaymentUpdateRequest,
    InvoiceResponse,
    InvoiceSummary,
)

__all__ = [
    "CompanySummary",
    "DeletedEnvelope",
    "ErrorEnvelope",
    "HealthResponse",
    "InvoiceCreateRequest",
    "InvoiceDetailEnvelope",
    "InvoiceDetailResponse",
    "InvoiceEnvelope",
    "InvoiceListEnvelope",
    "InvoicePaymentUpdateRequest",
    "InvoiceResponse",
    "InvoiceSummary",
]
