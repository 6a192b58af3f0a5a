import re
from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

AreaType = Literal["indoor", "outdoor"]
SurfaceType = Literal["drywall", "wood", "metal", "brick", "stucco", "concrete"]
PaymentTerms = Literal["Net 30", "Net 15", "Due on Receipt", "Net 60", "Custom"]
EstimateStatus = Literal["draft", "sent", "approved", "rejected", "converted"]
InvoiceStatus = Literal["draft", "sent", "paid", "overdue", "cancelled"]

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _blank_to_none(value):
    # HTML date inputs send "" when cleared
    if isinstance(value, str) and not value.strip():
        return None
    return value


class ProjectArea(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    area_name: str = Field(
        "", description="Room or surface name, e.g. 'Living Room'"
    )
    area_type: AreaType = Field(
        "indoor", description="Indoor or outdoor work"
    )
    surface_type: Optional[SurfaceType] = Field(
        "drywall", description="Surface material being painted"
    )
    square_footage: Optional[float] = Field(
        0, ge=0, description="Paintable area in square feet"
    )
    ceiling_height: Optional[float] = Field(
        8, ge=0, description="Ceiling height in feet"
    )
    prep_requirements: Optional[str] = ""
    paint_type: Optional[str] = "Latex"
    paint_brand: Optional[str] = "Benjamin Moore"
    paint_color: Optional[str] = ""
    finish_type: Optional[str] = "Eggshell"
    number_of_coats: int = Field(
        2, ge=1, le=10, description="Coats of paint to apply"
    )
    labor_cost: Optional[float] = Field(
        0, ge=0, description="Labor cost for this area"
    )
    material_cost: Optional[float] = Field(
        0, ge=0, description="Material cost for this area"
    )
    notes: Optional[str] = ""


# Clients

class ClientCreate(BaseModel):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    notes: Optional[str] = None


class ClientRead(ClientCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# Estimates

class EstimateCreate(BaseModel):
    client_id: int
    title: str
    description: Optional[str] = None
    valid_until: Optional[date] = None
    markup_percentage: float = Field(15, ge=0, le=100)
    terms_and_notes: Optional[str] = None
    project_areas: List[ProjectArea] = Field(default_factory=list)

    @field_validator("valid_until", mode="before")
    @classmethod
    def blank_dates(cls, value):
        return _blank_to_none(value)


class EstimateUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    valid_until: Optional[date] = None
    markup_percentage: Optional[float] = None
    terms_and_notes: Optional[str] = None
    project_areas: Optional[List[ProjectArea]] = None

    @field_validator("valid_until", mode="before")
    @classmethod
    def blank_dates(cls, value):
        return _blank_to_none(value)


class EstimateSummary(BaseModel):
    """One row of the estimate list / search results"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    estimate_number: str
    title: str
    status: EstimateStatus
    total_amount: float
    client_id: Optional[int] = None
    client_name: Optional[str] = None
    created_at: Optional[datetime] = None


class EstimateDetail(EstimateSummary):
    description: Optional[str] = None
    labor_cost: float = 0
    material_cost: float = 0
    markup_percentage: float = 0
    valid_until: Optional[date] = None
    terms_and_notes: Optional[str] = None
    updated_at: Optional[datetime] = None
    project_areas: List[ProjectArea] = Field(default_factory=list)


class EstimateStatusUpdate(BaseModel):
    status: EstimateStatus
    notes: Optional[str] = None


class ConvertRequest(BaseModel):
    due_date: Optional[date] = None
    payment_terms: PaymentTerms = "Net 30"

    @field_validator("due_date", mode="before")
    @classmethod
    def blank_dates(cls, value):
        return _blank_to_none(value)


# Invoices

class InvoiceUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    total_amount: Optional[float] = None
    due_date: Optional[date] = None
    payment_terms: Optional[PaymentTerms] = None
    terms_and_notes: Optional[str] = None
    created_at: Optional[date] = None
    project_areas: Optional[List[ProjectArea]] = None

    @field_validator("due_date", "created_at", mode="before")
    @classmethod
    def blank_dates(cls, value):
        return _blank_to_none(value)


class PaymentCreate(BaseModel):
    amount: float = Field(..., gt=0)
    payment_method: str = "Cash"
    payment_date: date
    reference_number: Optional[str] = None
    notes: Optional[str] = None


class PaymentRead(PaymentCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    invoice_id: int
    created_at: Optional[datetime] = None


class InvoiceRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    invoice_number: str
    estimate_id: Optional[int] = None
    estimate_number: Optional[str] = None
    client_id: Optional[int] = None
    client_name: Optional[str] = None
    title: str
    description: Optional[str] = None
    status: InvoiceStatus
    total_amount: float
    paid_amount: float = 0
    outstanding_amount: float = 0
    due_date: Optional[date] = None
    payment_terms: str = "Net 30"
    terms_and_notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class InvoiceDetail(InvoiceRead):
    project_areas: List[ProjectArea] = Field(default_factory=list)
    payments: List[PaymentRead] = Field(default_factory=list)


class InvoiceStatusUpdate(BaseModel):
    status: InvoiceStatus


# Company settings

class CompanySettingsIn(BaseModel):
    id: Optional[int] = None
    company_name: str = ""
    company_address: str = ""
    company_phone: str = ""
    company_email: str = ""
    logo_url: Optional[str] = ""


class CompanySettingsRead(CompanySettingsIn):
    model_config = ConfigDict(from_attributes=True)

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
