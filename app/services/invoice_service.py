"""Invoice service: persistence plus the paid/unpaid lifecycle rule."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import DatabaseError, NotFoundError
from app.models import Company, Invoice
from app.models.base import utcnow
from app.schemas.invoices import CompanySummary, InvoiceDetailResponse, InvoiceResponse, InvoiceSummary
from app.services.base_service import BaseService

logger = logging.getLogger(__name__)

# invoices.id is a 32-bit INTEGER column; nothing outside this range can exist.
MAX_INVOICE_ID = 2**31 - 1


def _check_invoice_id(invoice_id: int) -> None:
    if not 1 <= invoice_id <= MAX_INVOICE_ID:
        raise NotFoundError("invoice", invoice_id)


def compute_paid_date(
    currently_paid: bool,
    paid: bool,
    current_paid_date: datetime | None,
    now: datetime,
) -> datetime | None:
    """Return the ``paid_date`` an invoice should carry after an update.

    Unpaid -> paid stamps ``now``; any move to unpaid clears the date; an
    already paid invoice marked paid again keeps its original timestamp.
    """
    if not currently_paid and paid:
        return now
    if not paid:
        return None
    return current_paid_date


class InvoiceService(BaseService):
    """Service for invoice CRUD and payment status transitions."""

    def _utcnow(self) -> datetime:
        return utcnow()

    def list_invoices(self) -> list[InvoiceSummary]:
        try:
            rows = self.db.query(Invoice.id, Invoice.comp_code).order_by(Invoice.id.asc()).all()
        except SQLAlchemyError as exc:
            raise DatabaseError(str(exc)) from exc
        return [InvoiceSummary(id=row.id, comp_code=row.comp_code) for row in rows]

    def get_invoice_detail(self, invoice_id: int) -> InvoiceDetailResponse:
        _check_invoice_id(invoice_id)
        try:
            row = (
                self.db.query(Invoice, Company)
                .join(Company, Invoice.comp_code == Company.code)
                .filter(Invoice.id == invoice_id)
                .first()
            )
        except SQLAlchemyError as exc:
            raise DatabaseError(str(exc)) from exc
        if row is None:
            raise NotFoundError("invoice", invoice_id)

        invoice, company = row
        return InvoiceDetailResponse(
            id=invoice.id,
            amt=invoice.amt,
            paid=invoice.paid,
            add_date=invoice.add_date,
            paid_date=invoice.paid_date,
            company=CompanySummary.model_validate(company),
        )

    def create_invoice(self, comp_code: str, amt: float) -> InvoiceResponse:
        invoice = Invoice(
            comp_code=comp_code,
            amt=amt,
            paid=False,
            paid_date=None,
            add_date=self._utcnow(),
        )
        self.db.add(invoice)
        # An unknown comp_code fails the foreign key here as ConstraintViolationError.
        self.commit()
        self.db.refresh(invoice)

        logger.info(
            "invoice.created",
            extra={"event": "invoice.created", "invoice_id": invoice.id, "comp_code": comp_code},
        )
        return InvoiceResponse.model_validate(invoice)

    def update_payment_status(self, invoice_id: int, amt: float, paid: bool) -> InvoiceResponse:
        """Update amount and paid flag, deriving ``paid_date`` from the stored state.

        The row is read with ``SELECT ... FOR UPDATE`` so the read and the write
        share one transaction and concurrent updates of the same invoice queue
        behind each other.
        """
        _check_invoice_id(invoice_id)
        try:
            invoice = (
                self.db.query(Invoice)
                .filter(Invoice.id == invoice_id)
                .with_for_update()
                .populate_existing()
                .first()
            )
        except SQLAlchemyError as exc:
            self.rollback()
            raise DatabaseError(str(exc)) from exc
        if invoice is None:
            self.rollback()
            raise NotFoundError("invoice", invoice_id)

        was_paid = invoice.paid
        invoice.paid_date = compute_paid_date(
            currently_paid=was_paid,
            paid=paid,
            current_paid_date=invoice.paid_date,
            now=self._utcnow(),
        )
        invoice.amt = amt
        invoice.paid = paid
        self.commit()
        self.db.refresh(invoice)

        logger.info(
            "invoice.payment_status.updated",
            extra={
                "event": "invoice.payment_status.updated",
                "invoice_id": invoice_id,
                "was_paid": was_paid,
                "paid": paid,
            },
        )
        return InvoiceResponse.model_validate(invoice)

    def delete_invoice(self, invoice_id: int) -> None:
        _check_invoice_id(invoice_id)
        try:
            deleted = (
                self.db.query(Invoice)
                .filter(Invoice.id == invoice_id)
                .delete(synchronize_session="fetch")
            )
        except SQLAlchemyError as exc:
            self.rollback()
            raise DatabaseError(str(exc)) from exc
        if deleted == 0:
            self.rollback()
            raise NotFoundError("invoice", invoice_id)
        self.commit()

        logger.info("invoice.deleted", extra={"event": "invoice.deleted", "invoice_id": invoice_id})
