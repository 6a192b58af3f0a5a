from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from backend.responses import ok, paginated
from backend.schemas import (
    ConvertRequest,
    EstimateCreate,
    EstimateDetail,
    EstimateStatusUpdate,
    EstimateSummary,
    EstimateUpdate,
    InvoiceRead,
)
from backend.services import estimate_service
from database.setup_db import get_db

router = APIRouter()


def _detail(estimate) -> dict:
    return EstimateDetail.model_validate(estimate).model_dump(mode="json")


@router.get("/estimates")
async def list_estimates(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    search: str = "",
    status: Optional[str] = None,
    client_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    rows, total = estimate_service.list_estimates(db, page, limit, search.strip(), status, client_id)
    items = [EstimateSummary.model_validate(row).model_dump(mode="json") for row in rows]
    return ok(paginated(items, total, page, limit))

@router.get("/estimates/{estimate_id}")
async def get_estimate(estimate_id: int, db: Session = Depends(get_db)):
    return ok(_detail(estimate_service.get_estimate(db, estimate_id)))

@router.post("/estimates", status_code=201)
async def create_estimate(estimate: EstimateCreate, db: Session = Depends(get_db)):
    created = estimate_service.create_estimate(db, estimate)
    return ok(_detail(created), f"Estimate {created.estimate_number} created successfully")

@router.patch("/estimates/{estimate_id}")
async def update_estimate(estimate_id: int, changes: EstimateUpdate, db: Session = Depends(get_db)):
    updated = estimate_service.update_estimate(db, estimate_id, changes)
    return ok(_detail(updated), "Estimate updated successfully")

@router.patch("/estimates/{estimate_id}/status")
async def update_estimate_status(estimate_id: int, body: EstimateStatusUpdate, db: Session = Depends(get_db)):
    updated = estimate_service.update_estimate_status(db, estimate_id, body.status)
    return ok(_detail(updated), f"Estimate status updated to {body.status}")

@router.post("/estimates/{estimate_id}/convert", status_code=201)
async def convert_estimate(estimate_id: int, body: Optional[ConvertRequest] = None, db: Session = Depends(get_db)):
    invoice = estimate_service.convert_to_invoice(db, estimate_id, body or ConvertRequest())
    return ok(
        InvoiceRead.model_validate(invoice).model_dump(mode="json"),
        f"Invoice {invoice.invoice_number} created from estimate {invoice.estimate_number}"
    )
