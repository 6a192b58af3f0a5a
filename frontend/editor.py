"""Invoice editor state.

The editor is an immutable EditorState plus a single ``reduce(state, action)``
function; every change, including the submission lifecycle
(idle -> submitting -> idle), goes through it.

Two editing modes exist. LINE_ITEMS sends the project areas and lets the
server derive total_amount from them. MANUAL_TOTAL sends an overridden
total_amount instead and shows the difference against the stored total.
"""
from enum import Enum
from typing import Any, Callable, Dict, NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from backend.schemas import InvoiceDetail, PaymentTerms, ProjectArea
from backend.services.totals import Adjustment, Totals, compute_totals, describe_adjustment
from frontend import line_items
from frontend.api_client import INVOICE_UPDATE_ERROR, ApiClient
from frontend.validation import validate_invoice, validate_invoice_total


class EditMode(str, Enum):
    LINE_ITEMS = "line_items"
    MANUAL_TOTAL = "manual_total"


class SubmitStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"


class InvoiceForm(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    description: str = ""
    due_date: str = ""
    payment_terms: PaymentTerms = "Net 30"
    terms_and_notes: str = ""
    created_at: str = ""
    total_amount: float = 0
    project_areas: Tuple[ProjectArea, ...] = ()

    @classmethod
    def from_invoice(cls, invoice) -> "InvoiceForm":
        if not isinstance(invoice, InvoiceDetail):
            invoice = InvoiceDetail.model_validate(invoice)
        return cls(
            title=invoice.title,
            description=invoice.description or "",
            due_date=invoice.due_date.isoformat() if invoice.due_date else "",
            payment_terms=invoice.payment_terms,
            terms_and_notes=invoice.terms_and_notes or "",
            created_at=invoice.created_at.date().isoformat() if invoice.created_at else "",
            total_amount=invoice.total_amount,
            project_areas=line_items.as_areas(invoice.project_areas),
        )

    def payload(self, mode: EditMode) -> dict:
        exclude = {"total_amount"} if mode == EditMode.LINE_ITEMS else {"project_areas"}
        return self.model_dump(mode="json", exclude=exclude)


class EditorState(BaseModel):
    model_config = ConfigDict(frozen=True)

    form: InvoiceForm
    mode: EditMode = EditMode.LINE_ITEMS
    original_total: float = 0
    errors: Dict[str, str] = {}
    status: SubmitStatus = SubmitStatus.IDLE
    outcome: Optional[str] = None  # "success" / "failed" after the last submission
    invoice: Optional[InvoiceDetail] = None


# Actions

class SetField(NamedTuple):
    name: str
    value: Any


class AddArea(NamedTuple):
    pass


class RemoveArea(NamedTuple):
    index: int


class UpdateArea(NamedTuple):
    index: int
    field: str
    value: Any


class ValidationFailed(NamedTuple):
    errors: Dict[str, str]


class SubmitStarted(NamedTuple):
    pass


class SubmitSucceeded(NamedTuple):
    invoice: InvoiceDetail


class SubmitFailed(NamedTuple):
    message: str


def new_editor(invoice, mode: EditMode = EditMode.LINE_ITEMS) -> EditorState:
    if not isinstance(invoice, InvoiceDetail):
        invoice = InvoiceDetail.model_validate(invoice)
    return EditorState(
        form=InvoiceForm.from_invoice(invoice),
        mode=mode,
        original_total=invoice.total_amount,
        invoice=invoice,
    )


def _with_form(state: EditorState, **changes) -> EditorState:
    return state.model_copy(update={"form": state.form.model_copy(update=changes)})


def reduce(state: EditorState, action) -> EditorState:
    if isinstance(action, SetField):
        if action.name not in InvoiceForm.model_fields or action.name == "project_areas":
            return state
        state = _with_form(state, **{action.name: action.value})
        if action.name in state.errors:
            errors = {k: v for k, v in state.errors.items() if k != action.name}
            state = state.model_copy(update={"errors": errors})
        return state

    if isinstance(action, AddArea):
        return _with_form(state, project_areas=line_items.add(state.form.project_areas))

    if isinstance(action, RemoveArea):
        return _with_form(state, project_areas=line_items.remove(state.form.project_areas, action.index))

    if isinstance(action, UpdateArea):
        areas = line_items.update(state.form.project_areas, action.index, action.field, action.value)
        return _with_form(state, project_areas=areas)

    if isinstance(action, ValidationFailed):
        return state.model_copy(update={"errors": dict(action.errors), "outcome": None})

    if isinstance(action, SubmitStarted):
        if state.status == SubmitStatus.SUBMITTING:
            return state
        return state.model_copy(update={"status": SubmitStatus.SUBMITTING, "errors": {}, "outcome": None})

    if isinstance(action, SubmitSucceeded):
        return state.model_copy(update={
            "form": InvoiceForm.from_invoice(action.invoice),
            "original_total": action.invoice.total_amount,
            "invoice": action.invoice,
            "errors": {},
            "status": SubmitStatus.IDLE,
            "outcome": "success",
        })

    if isinstance(action, SubmitFailed):
        return state.model_copy(update={
            "errors": {"submit": action.message},
            "status": SubmitStatus.IDLE,
            "outcome": "failed",
        })

    raise TypeError(f"Unknown editor action: {action!r}")


def validate(state: EditorState) -> Dict[str, str]:
    if state.mode == EditMode.MANUAL_TOTAL:
        return validate_invoice_total(state.form)
    return validate_invoice(state.form)


def totals(state: EditorState) -> Totals:
    return compute_totals(state.form.project_areas)


def adjustment(state: EditorState) -> Optional[Adjustment]:
    try:
        new_total = float(state.form.total_amount or 0)
    except (TypeError, ValueError):
        return None
    return describe_adjustment(state.original_total, new_total)


def submit(
    state: EditorState,
    client: ApiClient,
    invoice_id: int,
    on_change: Optional[Callable[[EditorState], None]] = None,
) -> EditorState:
    """Validate, then PATCH the invoice once. No retries.

    Validation errors stop before any request is made. On success the form
    is replaced by the invoice the server returns.
    """
    def step(current, action):
        current = reduce(current, action)
        if on_change is not None:
            on_change(current)
        return current

    errors = validate(state)
    if errors:
        return step(state, ValidationFailed(errors))

    state = step(state, SubmitStarted())
    result = client.update_invoice(invoice_id, state.form.payload(state.mode))
    if result.ok:
        return step(state, SubmitSucceeded(result.data))
    return step(state, SubmitFailed(result.error or INVOICE_UPDATE_ERROR))
