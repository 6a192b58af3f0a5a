from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.responses import ok, paginated
from backend.schemas import (
    InvoiceDetail,
    InvoiceRead,
    InvoiceStatusUpdate,
    InvoiceUpdate,
    PaymentCreate,
    PaymentRead,
)
from backend.services import invoice_service
from database.setup_db import get_db

router = APIRouter()


def _detail(invoice) -> dict:
    return InvoiceDetail.model_validate(invoice).model_dump(mode="json")


@router.get("/invoices")
async def list_invoices(status: Optional[str] = None, client_id: Optional[int] = None, db: Session = Depends(get_db)):
    invoices = invoice_service.list_invoices(db, status, client_id)
    items = [InvoiceRead.model_validate(i).model_dump(mode="json") for i in invoices]
    return ok(paginated(items, len(items), 1, max(len(items), 100)))

@router.get("/invoices/{invoice_id}")
async def get_invoice(invoice_id: int, db: Session = Depends(get_db)):
    return ok(_detail(invoice_service.get_invoice(db, invoice_id)))

@router.patch("/invoices/{invoice_id}")
async def update_invoice(invoice_id: int, changes: InvoiceUpdate, db: Session = Depends(get_db)):
    updated = invoice_service.update_invoice(db, invoice_id, changes)
    return ok(_detail(updated), "Invoice updated successfully")

@router.patch("/invoices/{invoice_id}/status")
async def update_invoice_status(invoice_id: int, body: InvoiceStatusUpdate, db: Session = Depends(get_db)):
    updated = invoice_service.update_invoice_status(db, invoice_id, body.status)
    return ok(_detail(updated), f"Invoice status updated to {body.status}")

@router.post("/invoices/{invoice_id}/payments", status_code=201)
async def record_payment(invoice_id: int, payment: PaymentCreate, db: Session = Depends(get_db)):
    updated = invoice_service.record_payment(db, invoice_id, payment)
    return ok(_detail(updated), f"Payment of ${payment.amount:.2f} recorded successfully")

@router.get("/invoices/{invoice_id}/payments")
async def list_payments(invoice_id: int, db: Session = Depends(get_db)):
    payments = invoice_service.list_payments(db, invoice_id)
    return ok([PaymentRead.model_validate(p).model_dump(mode="json") for p in payments])

@router.delete("/payments/{payment_id}")
async def delete_payment(payment_id: int, db: Session = Depends(get_db)):
    updated = invoice_service.delete_payment(db, payment_id)
    return ok(_detail(updated), "Payment deleted successfully")
