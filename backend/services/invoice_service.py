from datetime import datetime, time
from typing import List, Optional
from sqlalchemy.orm import Session
from loguru import logger

from backend.errors import AppError
from backend.schemas import InvoiceUpdate, PaymentCreate
from backend.services.project_areas import build_project_areas
from backend.services.totals import compute_totals
from database.models.invoice import Invoice, Payment

SCALAR_FIELDS = ("description", "due_date", "payment_terms", "terms_and_notes")


def list_invoices(db: Session, status: Optional[str] = None, client_id: Optional[int] = None) -> List[Invoice]:
    query = db.query(Invoice)
    if status:
        query = query.filter(Invoice.status == status)
    if client_id:
        query = query.filter(Invoice.client_id == client_id)
    return query.order_by(Invoice.created_at.desc(), Invoice.id.desc()).all()


def get_invoice(db: Session, invoice_id: int) -> Invoice:
    invoice = db.get(Invoice, invoice_id)
    if invoice is None:
        raise AppError("Invoice not found", 404)
    return invoice


def update_invoice(db: Session, invoice_id: int, changes: InvoiceUpdate) -> Invoice:
    """Partial update of the editable invoice fields.

    When project areas are sent they replace the stored ones and the total
    is derived from them; otherwise a sent total_amount is taken as a
    manual override.
    """
    if not changes.title or not changes.title.strip():
        raise AppError("Title is required", 400)
    if changes.total_amount is not None and changes.total_amount <= 0:
        raise AppError("Total amount must be greater than 0", 400)
    if changes.project_areas is not None and not changes.project_areas:
        raise AppError("At least one project area is required", 400)

    invoice = get_invoice(db, invoice_id)
    invoice.title = changes.title.strip()

    sent = changes.model_fields_set
    for name in SCALAR_FIELDS:
        if name in sent:
            setattr(invoice, name, getattr(changes, name))
    if changes.payment_terms is None and "payment_terms" in sent:
        invoice.payment_terms = "Net 30"
    if changes.created_at is not None:
        invoice.created_at = datetime.combine(changes.created_at, time())

    if changes.project_areas is not None:
        invoice.project_areas = build_project_areas(changes.project_areas)
        invoice.total_amount = compute_totals(invoice.project_areas).total
    elif changes.total_amount is not None:
        invoice.total_amount = changes.total_amount

    db.commit()
    db.refresh(invoice)
    logger.info(f"Updated invoice {invoice.invoice_number} total={invoice.total_amount:.2f}")
    return invoice


def update_invoice_status(db: Session, invoice_id: int, status: str) -> Invoice:
    invoice = get_invoice(db, invoice_id)
    invoice.status = status
    db.commit()
    db.refresh(invoice)
    logger.info(f"Invoice {invoice.invoice_number} status -> {status}")
    return invoice


def record_payment(db: Session, invoice_id: int, payment_data: PaymentCreate) -> Invoice:
    invoice = get_invoice(db, invoice_id)

    outstanding = invoice.outstanding_amount
    if payment_data.amount > round(outstanding, 2):
        raise AppError(
            f"Payment amount (${payment_data.amount}) exceeds outstanding balance (${outstanding:.2f})",
            400
        )

    invoice.payments.append(Payment(**payment_data.model_dump()))
    invoice.paid_amount = (invoice.paid_amount or 0) + payment_data.amount
    if invoice.paid_amount >= invoice.total_amount:
        invoice.status = "paid"

    db.commit()
    db.refresh(invoice)
    logger.info(f"Recorded payment of {payment_data.amount:.2f} on invoice {invoice.invoice_number}")
    return invoice


def list_payments(db: Session, invoice_id: int) -> List[Payment]:
    return list(get_invoice(db, invoice_id).payments)


def delete_payment(db: Session, payment_id: int) -> Invoice:
    payment = db.get(Payment, payment_id)
    if payment is None:
        raise AppError("Payment not found", 404)

    invoice = payment.invoice
    invoice.paid_amount = (invoice.paid_amount or 0) - payment.amount
    if invoice.paid_amount < invoice.total_amount and invoice.status == "paid":
        invoice.status = "sent"
    db.delete(payment)

    db.commit()
    db.refresh(invoice)
    logger.info(f"Deleted payment {payment_id} from invoice {invoice.invoice_number}")
    return invoice
