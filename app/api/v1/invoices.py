"""Invoice endpoints for API v1."""

from __future__ import annotations

import logging
from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.exceptions import ConstraintViolationError, NotFoundError
from app.database.db import get_db
from app.schemas.common import ErrorEnvelope
from app.schemas.invoices import (
    DeletedEnvelope,
    InvoiceCreateRequest,
    InvoiceDetailEnvelope,
    InvoiceEnvelope,
    InvoiceListEnvelope,
    InvoicePaymentUpdateRequest,
)
from app.services.invoice_service import InvoiceService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/invoices", tags=["invoices"])

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorEnvelope}}


def get_invoice_service(db: Session = Depends(get_db)) -> InvoiceService:
    return InvoiceService(db=db)


def map_service_error(exc: Exception) -> tuple[int, str]:
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND, str(exc)
    if isinstance(exc, ConstraintViolationError):
        return status.HTTP_409_CONFLICT, "Invoice violates a database constraint."
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error."


def _raise_http(exc: Exception) -> NoReturn:
    code, detail = map_service_error(exc)
    if code >= 500:
        logger.exception("invoice.request_failed", extra={"event": "invoice.request_failed"})
    raise HTTPException(status_code=code, detail=detail) from exc


@router.get("", response_model=InvoiceListEnvelope)
def list_invoices(service: InvoiceService = Depends(get_invoice_service)) -> InvoiceListEnvelope:
    try:
        return InvoiceListEnvelope(invoices=service.list_invoices())
    except Exception as exc:
        _raise_http(exc)


@router.get("/{invoice_id}", response_model=InvoiceDetailEnvelope, responses=NOT_FOUND_RESPONSE)
def get_invoice(
    invoice_id: int,
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceDetailEnvelope:
    try:
        return InvoiceDetailEnvelope(invoice=service.get_invoice_detail(invoice_id))
    except Exception as exc:
        _raise_http(exc)


@router.post(
    "",
    response_model=InvoiceEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_409_CONFLICT: {"model": ErrorEnvelope}},
)
def create_invoice(
    payload: InvoiceCreateRequest,
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceEnvelope:
    try:
        return InvoiceEnvelope(invoice=service.create_invoice(comp_code=payload.comp_code, amt=payload.amt))
    except Exception as exc:
        _raise_http(exc)


@router.put("/{invoice_id}", response_model=InvoiceEnvelope, responses=NOT_FOUND_RESPONSE)
def update_invoice(
    invoice_id: int,
    payload: InvoicePaymentUpdateRequest,
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceEnvelope:
    try:
        invoice = service.update_payment_status(invoice_id, amt=payload.amt, paid=payload.paid)
        return InvoiceEnvelope(invoice=invoice)
    except Exception as exc:
        _raise_http(exc)


@router.delete("/{invoice_id}", response_model=DeletedEnvelope, responses=NOT_FOUND_RESPONSE)
def delete_invoice(
    invoice_id: int,
    service: InvoiceService = Depends(get_invoice_service),
) -> DeletedEnvelope:
    try:
        service.delete_invoice(invoice_id)
    except Exception as exc:
        _raise_http(exc)
    return DeletedEnvelope()
