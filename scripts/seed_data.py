"""Seed sample companies and invoices into the configured database.

Run from the project root after ``python -m app.database.init_db``::

    python -m scripts.seed_data
"""

from datetime import datetime, timezone

from app.database.db import get_db_session
from app.models import Company, Invoice

COMPANIES = [
    {"code": "apple", "name": "Apple Computer", "description": "Maker of OSX."},
    {"code": "ibm", "name": "IBM", "description": "Big blue."},
]

INVOICES = [
    {"comp_code": "apple", "amt": 100, "paid": False, "paid_date": None},
    {"comp_code": "apple", "amt": 200, "paid": False, "paid_date": None},
    {"comp_code": "apple", "amt": 300, "paid": True, "paid_date": datetime(2018, 1, 1, tzinfo=timezone.utc)},
    {"comp_code": "ibm", "amt": 400, "paid": False, "paid_date": None},
]


def seed() -> None:
    with get_db_session() as db:
        if db.query(Company).filter(Company.code == "apple").first():
            print("Seed companies already exist.")
            return

        print("Seeding companies and invoices...")
        try:
            db.add_all(Company(**row) for row in COMPANIES)
            db.flush()
            db.add_all(Invoice(**row) for row in INVOICES)
            db.commit()
        except Exception:
            db.rollback()
            raise
        print(f"Seeded {len(COMPANIES)} companies and {len(INVOICES)} invoices.")


if __name__ == "__main__":
    seed()
