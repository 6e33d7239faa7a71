"""Startup checks run before the billing API serves requests."""

from __future__ import annotations

import logging

from app.core.config import get_config
from app.core.logging_config import configure_logging
from app.database.db import get_active_database_url, missing_tables, verify_database_connection

logger = logging.getLogger(__name__)

BILLING_TABLES = frozenset({"companies", "invoices"})


def validate_startup_config() -> None:
    """Check database reachability and that the billing schema is migrated.

    An unreachable database is fatal only when ``DB_CONNECTIVITY_REQUIRED`` is
    set. A reachable database without the billing tables is fatal always;
    run ``python -m app.database.init_db`` first.
    """
    config = get_config()
    database_url = get_active_database_url()
    scheme = database_url.split("://", 1)[0]

    if not verify_database_connection():
        if config.DB_CONNECTIVITY_REQUIRED:
            raise RuntimeError("Database connectivity check failed.")
        logger.warning(
            "startup.database.unreachable",
            extra={"event": "startup.database.unreachable", "database_url_scheme": scheme},
        )
    else:
        absent = missing_tables(set(BILLING_TABLES))
        if absent:
            raise RuntimeError(f"Billing schema is not migrated; missing tables: {', '.join(sorted(absent))}.")

    logger.info(
        "startup.config.validated",
        extra={
            "event": "startup.config.validated",
            "service": config.APP_NAME,
            "version": config.APP_VERSION,
            "env": config.ENV,
            "api_prefix": config.API_PREFIX,
            "database_url_scheme": scheme,
        },
    )


def bootstrap() -> None:
    """Initialize logging, then run the startup checks."""
    configure_logging()
    validate_startup_config()
