"""Shared service base with robust session lifecycle behavior."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import ConstraintViolationError, DatabaseError


class BaseService:
    """Base class for services that operate on an injected SQLAlchemy session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def commit(self) -> None:
        """Commit current transaction and rollback on failure.

        Integrity failures surface as ``ConstraintViolationError``; any other
        SQLAlchemy failure becomes ``DatabaseError``.
        """
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise ConstraintViolationError(str(exc.orig)) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise DatabaseError(str(exc)) from exc

    def rollback(self) -> None:
        self.db.rollback()
