from typing import Dict, Optional, Tuple

from frontend.api_client import ApiClient, LogoUpload, SubmitResult
from frontend.validation import validate_company_settings, validate_logo


def submit_company_settings(
    settings,
    client: ApiClient,
    logo: Optional[LogoUpload] = None,
) -> Tuple[Dict[str, str], Optional[SubmitResult]]:
    """Validate the settings form (and logo), then save it.

    Returns the field errors and the save result; the result is None when
    validation stopped the submission before any request.
    """
    errors = validate_company_settings(settings)
    if logo is not None:
        errors.update(validate_logo(logo.content_type, logo.size))
    if errors:
        return errors, None

    result = client.save_company_settings(settings, logo=logo)
    if not result.ok:
        return {"submit": result.error}, result
    return {}, result
