"""Form checks run before every submission.

Each validator returns a mapping of field name to message; an empty
mapping means the form may be sent.
"""
from typing import Dict, Mapping, Optional

from backend.schemas import EMAIL_PATTERN

ALLOWED_LOGO_TYPES = ("image/jpeg", "image/jpg", "image/png", "image/gif")
MAX_LOGO_BYTES = 5 * 1024 * 1024


def _get(form, name, default=None):
    if isinstance(form, Mapping):
        return form.get(name, default)
    return getattr(form, name, default)


def _blank(value) -> bool:
    return not str(value or "").strip()


def is_valid_email(value: Optional[str]) -> bool:
    return bool(value) and EMAIL_PATTERN.match(value) is not None


def validate_invoice(form) -> Dict[str, str]:
    """Line-item variant: title, at least one area, and a name for each area"""
    errors = {}
    if _blank(_get(form, "title")):
        errors["title"] = "Title is required"
    areas = _get(form, "project_areas") or ()
    if not areas:
        errors["project_areas"] = "At least one project area is required"
    for index, area in enumerate(areas):
        if _blank(_get(area, "area_name")):
            errors[f"area_{index}_name"] = "Area name is required"
    return errors


def validate_invoice_total(form) -> Dict[str, str]:
    """Manual-total variant: title plus a positive total_amount"""
    errors = {}
    if _blank(_get(form, "title")):
        errors["title"] = "Title is required"
    total = _get(form, "total_amount")
    try:
        positive = total is not None and float(total) > 0
    except (TypeError, ValueError):
        positive = False
    if not positive:
        errors["total_amount"] = "Total amount must be greater than 0"
    return errors


def validate_company_settings(form) -> Dict[str, str]:
    errors = {}

    if _blank(_get(form, "company_name")):
        errors["company_name"] = "Company name is required"

    email = str(_get(form, "company_email") or "")
    if _blank(email):
        errors["company_email"] = "Email is required"
    elif not is_valid_email(email):
        errors["company_email"] = "Please enter a valid email address"

    if _blank(_get(form, "company_phone")):
        errors["company_phone"] = "Phone number is required"

    if _blank(_get(form, "company_address")):
        errors["company_address"] = "Address is required"

    return errors


def validate_client(form) -> Dict[str, str]:
    errors = {}
    if _blank(_get(form, "name")):
        errors["name"] = "Client name is required"
    email = _get(form, "email")
    if not _blank(email) and not is_valid_email(email):
        errors["email"] = "Please enter a valid email address"
    return errors


def validate_logo(content_type: Optional[str], size: int) -> Dict[str, str]:
    if content_type not in ALLOWED_LOGO_TYPES:
        return {"logo": "Please upload a valid image file (JPG, PNG, or GIF)"}
    if size > MAX_LOGO_BYTES:
        return {"logo": "Image size must be less than 5MB"}
    return {}
