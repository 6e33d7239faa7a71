"""SQLAlchemy model package for the billing schema."""

from app.models.base import Base
from app.models.company import Company
from app.models.invoice import Invoice

__all__ = [
    "Base",
    "Company",
    "Invoice",
]
