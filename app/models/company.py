"""Company model module.

Companies are managed by a separate resource; this service only reads the
``code``/``name``/``description`` projection when joining invoices.
"""

from __future__ import annotations

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base


class Company(Base):
    __tablename__ = "companies"

    code: Mapped[str] = mapped_column(String(32), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)

    invoices = relationship("Invoice", back_populates="company", passive_deletes=True)
