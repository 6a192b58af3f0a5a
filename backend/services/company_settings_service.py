import base64
from typing import Optional, Tuple
from sqlalchemy.orm import Session
from loguru import logger

from backend.errors import AppError
from backend.schemas import CompanySettingsIn
from database.models.company_settings import CompanySettings

MAX_LOGO_BYTES = 5 * 1024 * 1024

EMPTY_SETTINGS = {
    "company_name": "",
    "company_address": "",
    "company_phone": "",
    "company_email": "",
    "logo_url": ""
}

REQUIRED_FIELDS = ("company_name", "company_address", "company_phone", "company_email")


def get_settings(db: Session) -> Optional[CompanySettings]:
    """The singleton settings row, or None before the first save"""
    return db.query(CompanySettings).order_by(CompanySettings.id.desc()).first()


def _check_required(settings_data: CompanySettingsIn):
    if any(not (getattr(settings_data, name) or "").strip() for name in REQUIRED_FIELDS):
        raise AppError("All company fields are required", 400)


def _values(settings_data: CompanySettingsIn) -> dict:
    values = settings_data.model_dump(include=set(REQUIRED_FIELDS))
    values["logo_url"] = settings_data.logo_url or None
    return values


def create_settings(db: Session, settings_data: CompanySettingsIn) -> CompanySettings:
    _check_required(settings_data)
    settings = CompanySettings(**_values(settings_data))
    db.add(settings)
    db.commit()
    db.refresh(settings)
    logger.info(f"Created company settings for {settings.company_name}")
    return settings


def save_settings(db: Session, settings_data: CompanySettingsIn) -> Tuple[CompanySettings, bool]:
    """Update the existing row, or create it when none exists yet.

    Returns the row and whether it was created.
    """
    _check_required(settings_data)
    settings = get_settings(db)
    if settings is None:
        return create_settings(db, settings_data), True

    for name, value in _values(settings_data).items():
        setattr(settings, name, value)
    db.commit()
    db.refresh(settings)
    logger.info(f"Updated company settings for {settings.company_name}")
    return settings, False


def logo_data_url(content: bytes, content_type: Optional[str]) -> str:
    """Inline an uploaded image as a base64 data URL for storage in logo_url"""
    if not content:
        raise AppError("No file uploaded", 400)
    if not content_type or not content_type.startswith("image/"):
        raise AppError("Only image files are allowed", 400)
    if len(content) > MAX_LOGO_BYTES:
        raise AppError("File size too large. Maximum 5MB allowed.", 400)
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{content_type};base64,{encoded}"
