"""Invoice model module."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, CheckConstraint, DateTime, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, utcnow


class Invoice(Base):
    __tablename__ = "invoices"
    __table_args__ = (
        CheckConstraint("amt > 0", name="ck_invoices_amt_positive"),
        Index("idx_invoices_comp_code", "comp_code"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    comp_code: Mapped[str] = mapped_column(
        String(32),
        ForeignKey("companies.code", ondelete="CASCADE"),
        nullable=False,
    )
    amt: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=False)
    paid: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    add_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    paid_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    company = relationship("Company", back_populates="invoices")
