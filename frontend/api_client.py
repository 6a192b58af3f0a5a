# frontend/api_client.py
"""Thin requests-based client for the PaintPro REST API.

Every call returns a SubmitResult instead of raising: HTTP failures and
``{"success": false}`` bodies carry the server's error text, network
problems carry a per-operation fallback message.
"""
import os
from typing import Any, List, Optional

import requests
from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from backend.schemas import (
    ClientRead,
    CompanySettingsIn,
    CompanySettingsRead,
    EstimateSummary,
    InvoiceDetail,
)

load_dotenv()

# FastAPI backend URL
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")

INVOICE_UPDATE_ERROR = "Failed to update invoice. Please try again."
SETTINGS_SAVE_ERROR = "Failed to save company settings. Please try again."
LOGO_UPLOAD_ERROR = "Failed to upload logo"


class SubmitResult(BaseModel):
    ok: bool
    data: Any = None
    error: Optional[str] = None
    raw: dict = Field(default_factory=dict)


class LogoUpload(BaseModel):
    filename: str
    content: bytes
    content_type: str

    @property
    def size(self) -> int:
        return len(self.content)


class EstimatePage(BaseModel):
    items: List[EstimateSummary] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 20
    total_pages: int = 0


def _payload(record) -> dict:
    if isinstance(record, BaseModel):
        return record.model_dump(mode="json")
    return dict(record)


class ApiClient:
    def __init__(self, base_url: str = API_BASE_URL, session: Optional[requests.Session] = None, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, fallback: str, **kwargs) -> SubmitResult:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            return SubmitResult(ok=False, error=fallback)

        try:
            body = response.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            body = {}

        if not response.ok or not body.get("success"):
            error = body.get("error") or fallback
            logger.warning(f"{method} {url} -> {response.status_code}: {error}")
            return SubmitResult(ok=False, error=error, raw=body)

        return SubmitResult(ok=True, data=body.get("data"), raw=body)

    def _parse(self, result: SubmitResult, model, fallback: str) -> SubmitResult:
        if not result.ok:
            return result
        try:
            return result.model_copy(update={"data": model.model_validate(result.data)})
        except ValidationError as e:
            logger.error(f"Unexpected {model.__name__} payload: {e}")
            return SubmitResult(ok=False, error=fallback, raw=result.raw)

    def health(self) -> SubmitResult:
        return self._request("GET", "/api/health", "Server is unreachable")

    def list_clients(self) -> SubmitResult:
        fallback = "Failed to fetch clients"
        result = self._request("GET", "/api/clients", fallback)
        if not result.ok:
            return result
        rows = (result.data or {}).get("data") or []
        try:
            clients = [ClientRead.model_validate(row) for row in rows]
        except ValidationError as e:
            logger.error(f"Unexpected client list payload: {e}")
            return SubmitResult(ok=False, error=fallback, raw=result.raw)
        return result.model_copy(update={"data": clients})

    def create_client(self, client) -> SubmitResult:
        fallback = "Failed to create client. Please try again."
        result = self._request("POST", "/api/clients", fallback, json=_payload(client))
        return self._parse(result, ClientRead, fallback)

    def search_estimates(self, query: str = "", page: int = 1, limit: int = 20) -> SubmitResult:
        """One page of estimates; rows that fail validation are dropped"""
        params = {"page": page, "limit": limit}
        if query:
            params["search"] = query
        result = self._request("GET", "/api/estimates", "Failed to search estimates", params=params)
        if not result.ok:
            return result

        body = result.data or {}
        items = []
        for row in body.get("data") or []:
            try:
                items.append(EstimateSummary.model_validate(row))
            except ValidationError as e:
                logger.warning(f"Skipping malformed estimate row {row!r}: {e}")
        estimate_page = EstimatePage(
            items=items,
            total=body.get("total", len(items)),
            page=body.get("page", page),
            limit=body.get("limit", limit),
            total_pages=body.get("totalPages", 0),
        )
        return result.model_copy(update={"data": estimate_page})

    def get_invoice(self, invoice_id: int) -> SubmitResult:
        fallback = "Failed to fetch invoice"
        return self._parse(self._request("GET", f"/api/invoices/{invoice_id}", fallback), InvoiceDetail, fallback)

    def update_invoice(self, invoice_id: int, record) -> SubmitResult:
        """PATCH the editable invoice fields; data is the server's canonical invoice"""
        result = self._request("PATCH", f"/api/invoices/{invoice_id}", INVOICE_UPDATE_ERROR, json=_payload(record))
        return self._parse(result, InvoiceDetail, INVOICE_UPDATE_ERROR)

    def get_company_settings(self) -> SubmitResult:
        fallback = "Failed to fetch company settings"
        return self._parse(self._request("GET", "/api/company-settings", fallback), CompanySettingsIn, fallback)

    def upload_logo(self, logo: LogoUpload) -> SubmitResult:
        files = {"logo": (logo.filename, logo.content, logo.content_type)}
        result = self._request("POST", "/api/upload-logo", LOGO_UPLOAD_ERROR, files=files)
        if not result.ok:
            error = result.error if result.error == LOGO_UPLOAD_ERROR else f"{LOGO_UPLOAD_ERROR}: {result.error}"
            return result.model_copy(update={"error": error})
        url = result.raw.get("url")
        if not url:
            return SubmitResult(ok=False, error=LOGO_UPLOAD_ERROR, raw=result.raw)
        return result.model_copy(update={"data": url})

    def save_company_settings(self, settings, logo: Optional[LogoUpload] = None) -> SubmitResult:
        """Create or update company settings.

        A new logo is uploaded first; if that step fails the settings
        request is not sent at all.
        """
        settings = CompanySettingsIn.model_validate(_payload(settings))
        logo_url = settings.logo_url

        if logo is not None:
            uploaded = self.upload_logo(logo)
            if not uploaded.ok:
                return uploaded
            logo_url = uploaded.data

        payload = settings.model_copy(update={"logo_url": logo_url}).model_dump(mode="json")
        method = "PUT" if settings.id else "POST"
        result = self._request(method, "/api/company-settings", SETTINGS_SAVE_ERROR, json=payload)
        return self._parse(result, CompanySettingsRead, SETTINGS_SAVE_ERROR)
