from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.orm import Session
from loguru import logger

from backend.responses import ok
from backend.schemas import CompanySettingsIn, CompanySettingsRead
from backend.services import company_settings_service
from database.setup_db import get_db

router = APIRouter()


def _read(settings) -> dict:
    return CompanySettingsRead.model_validate(settings).model_dump(mode="json")


@router.get("/company-settings")
async def get_company_settings(db: Session = Depends(get_db)):
    settings = company_settings_service.get_settings(db)
    if settings is None:
        return ok(dict(company_settings_service.EMPTY_SETTINGS))
    return ok(_read(settings))

@router.post("/company-settings", status_code=201)
async def create_company_settings(settings: CompanySettingsIn, db: Session = Depends(get_db)):
    created = company_settings_service.create_settings(db, settings)
    return ok(_read(created), "Company settings created successfully")

@router.put("/company-settings")
async def update_company_settings(settings: CompanySettingsIn, db: Session = Depends(get_db)):
    saved, created = company_settings_service.save_settings(db, settings)
    message = "Company settings created successfully" if created else "Company settings updated successfully"
    return ok(_read(saved), message)

@router.post("/upload-logo")
async def upload_logo(logo: UploadFile = File(...)):

    logger.info(f"Received logo: {logo.filename} ({logo.content_type})")

    content = await logo.read()
    url = company_settings_service.logo_data_url(content, logo.content_type)

    return {
        "success": True,
        "url": url,
        "message": "Logo uploaded successfully"
    }
