"""Invoice request/response schemas for API contracts."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Largest value a Numeric(12, 2) column holds.
MAX_AMOUNT = 9_999_999_999.99


def _as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive timestamps (SQLite drops the offset on read)."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class InvoiceCreateRequest(BaseModel):
    comp_code: str = Field(min_length=1, max_length=32)
    amt: float = Field(gt=0, le=MAX_AMOUNT, allow_inf_nan=False)


class InvoicePaymentUpdateRequest(BaseModel):
    amt: float = Field(gt=0, le=MAX_AMOUNT, allow_inf_nan=False)
    paid: bool


class CompanySummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    code: str
    name: str
    description: str | None = None


class InvoiceSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    comp_code: str


class InvoiceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    comp_code: str
    amt: float
    paid: bool
    add_date: datetime
    paid_date: datetime | None = None

    @field_validator("add_date", "paid_date")
    @classmethod
    def normalize_utc(cls, value: datetime | None) -> datetime | None:
        return _as_utc(value)


class InvoiceDetailResponse(BaseModel):
    """Invoice joined with the company it bills."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    amt: float
    paid: bool
    add_date: datetime
    paid_date: datetime | None = None
    company: CompanySummary

    @field_validator("add_date", "paid_date")
    @classmethod
    def normalize_utc(cls, value: datetime | None) -> datetime | None:
        return _as_utc(value)


class InvoiceListEnvelope(BaseModel):
    invoices: list[InvoiceSummary]


class InvoiceEnvelope(BaseModel):
    invoice: InvoiceResponse


class InvoiceDetailEnvelope(BaseModel):
    invoice: InvoiceDetailResponse


class DeletedEnvelope(BaseModel):
    status: str = "deleted"
