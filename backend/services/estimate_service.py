from typing import List, Optional, Tuple
from sqlalchemy import or_
from sqlalchemy.orm import Session
from loguru import logger

from backend.errors import AppError
from backend.schemas import ConvertRequest, EstimateCreate, EstimateUpdate
from backend.services.numbering import next_estimate_number, next_invoice_number
from backend.services.project_areas import build_project_areas, copy_project_areas
from backend.services.totals import compute_totals, with_markup
from database.models.client import Client
from database.models.estimate import Estimate
from database.models.invoice import Invoice


def list_estimates(
    db: Session,
    page: int = 1,
    limit: int = 20,
    search: str = "",
    status: Optional[str] = None,
    client_id: Optional[int] = None,
) -> Tuple[List[Estimate], int]:
    """Page through estimates, newest first.

    `search` is a case-insensitive substring match on title, estimate
    number and client name.
    """
    query = db.query(Estimate).outerjoin(Client, Estimate.client_id == Client.id)

    if client_id:
        query = query.filter(Estimate.client_id == client_id)
    if status:
        query = query.filter(Estimate.status == status)
    if search:
        term = f"%{search}%"
        query = query.filter(or_(
            Estimate.title.ilike(term),
            Estimate.estimate_number.ilike(term),
            Client.name.ilike(term),
        ))

    total = query.count()
    rows = (
        query.order_by(Estimate.created_at.desc(), Estimate.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return rows, total


def get_estimate(db: Session, estimate_id: int) -> Estimate:
    estimate = db.get(Estimate, estimate_id)
    if estimate is None:
        raise AppError("Estimate not found", 404)
    return estimate


def _apply_totals(estimate: Estimate):
    totals = compute_totals(estimate.project_areas)
    estimate.labor_cost = totals.total_labor
    estimate.material_cost = totals.total_material
    estimate.total_amount = with_markup(totals, estimate.markup_percentage)


def create_estimate(db: Session, estimate_data: EstimateCreate) -> Estimate:
    if not estimate_data.title.strip():
        raise AppError("Estimate title is required", 400)
    if not estimate_data.project_areas:
        raise AppError("At least one project area is required", 400)
    if db.get(Client, estimate_data.client_id) is None:
        raise AppError("Client not found", 404)

    estimate = Estimate(
        estimate_number=next_estimate_number(db),
        client_id=estimate_data.client_id,
        title=estimate_data.title.strip(),
        description=estimate_data.description,
        markup_percentage=estimate_data.markup_percentage,
        valid_until=estimate_data.valid_until,
        terms_and_notes=estimate_data.terms_and_notes,
    )
    estimate.project_areas = build_project_areas(estimate_data.project_areas)
    _apply_totals(estimate)

    db.add(estimate)
    db.commit()
    db.refresh(estimate)
    logger.info(f"Created estimate {estimate.estimate_number} total={estimate.total_amount:.2f}")
    return estimate


def update_estimate(db: Session, estimate_id: int, changes: EstimateUpdate) -> Estimate:
    if not changes.title or not changes.title.strip():
        raise AppError("Title is required", 400)
    if changes.markup_percentage is not None and not 0 <= changes.markup_percentage <= 100:
        raise AppError("Markup percentage must be between 0 and 100", 400)
    if changes.project_areas is not None and not changes.project_areas:
        raise AppError("At least one project area is required", 400)

    estimate = get_estimate(db, estimate_id)
    fields = changes.model_dump(exclude_unset=True, exclude={"project_areas"})
    fields["title"] = changes.title.strip()
    if fields.get("markup_percentage") is None:
        fields.pop("markup_percentage", None)
    for name, value in fields.items():
        setattr(estimate, name, value)

    if changes.project_areas is not None:
        estimate.project_areas = build_project_areas(changes.project_areas)
    _apply_totals(estimate)

    db.commit()
    db.refresh(estimate)
    logger.info(f"Updated estimate {estimate.estimate_number} ({', '.join(fields) or 'areas'})")
    return estimate


def update_estimate_status(db: Session, estimate_id: int, status: str) -> Estimate:
    estimate = get_estimate(db, estimate_id)
    estimate.status = status
    db.commit()
    db.refresh(estimate)
    logger.info(f"Estimate {estimate.estimate_number} status -> {status}")
    return estimate


def convert_to_invoice(db: Session, estimate_id: int, request: ConvertRequest) -> Invoice:
    estimate = get_estimate(db, estimate_id)
    if estimate.status != "approved":
        raise AppError("Only approved estimates can be converted to invoices", 400)

    invoice = Invoice(
        invoice_number=next_invoice_number(db),
        estimate_id=estimate.id,
        client_id=estimate.client_id,
        title=estimate.title,
        description=estimate.description,
        total_amount=estimate.total_amount,
        due_date=request.due_date,
        payment_terms=request.payment_terms,
        terms_and_notes=estimate.terms_and_notes,
    )
    invoice.project_areas = copy_project_areas(estimate.project_areas)
    estimate.status = "converted"

    db.add(invoice)
    db.commit()
    db.refresh(invoice)
    logger.info(f"Invoice {invoice.invoice_number} created from estimate {estimate.estimate_number}")
    return invoice
