import os
import sys
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from loguru import logger
from sqlalchemy import text
from database.setup_db import SessionLocal, init_db
from database.models.company_settings import CompanySettings
from database.models.number_sequence import NumberSequence

TABLES = [
    "payments",
    "project_areas",
    "invoices",
    "estimates",
    "clients",
    "company_settings",
    "number_sequences",
]

def clear_all_data():
    db = SessionLocal()
    try:
        for table in TABLES:
            db.execute(text(f"DELETE FROM {table}"))
        db.commit()
        logger.info("All tables have been cleared.")
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to clear tables: {e}")
        raise
    finally:
        db.close()

def reset_number_sequences():
    db = SessionLocal()
    try:
        for sequence_type, prefix in (("estimate", "EST"), ("invoice", "INV")):
            db.add(NumberSequence(sequence_type=sequence_type, current_number=0, prefix=prefix))
        db.commit()
        logger.info("Number sequences reset to 0")
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to reset number sequences: {e}")
        raise
    finally:
        db.close()

def create_default_settings():
    db = SessionLocal()
    try:
        settings = CompanySettings(
            company_name="PaintPro Painting Co.",
            company_address="123 Main Street",
            company_phone="(555) 555-0100",
            company_email="office@example.com"
        )
        db.add(settings)
        db.commit()
        logger.info(f"Default company settings created with ID: {settings.id}")
        return settings.id
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to create default company settings: {e}")
        raise
    finally:
        db.close()

if __name__ == "__main__":
    init_db()
    clear_all_data()
    reset_number_sequences()
    create_default_settings()
