"""Shared SQLAlchemy base for the billing schema."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


def utcnow() -> datetime:
    """Timezone-aware UTC timestamp helper."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Declarative base class for billing models."""
