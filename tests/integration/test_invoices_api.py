import pytest

from tests.factories import area, create_invoice


def test_get_missing_invoice(api):
    response = api.get("/api/invoices/42")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Invoice not found"}


def test_patch_with_areas_derives_total(api):
    invoice = create_invoice(api)

    response = api.patch(f"/api/invoices/{invoice['id']}", json={
        "title": "Interior Painting",
        "due_date": "",
        "payment_terms": "Due on Receipt",
        "project_areas": [
            area(labor_cost=100, material_cost=50),
            area(area_name="Kitchen", labor_cost=200, material_cost=75),
        ],
    })

    data = response.json()["data"]
    assert response.status_code == 200
    assert data["total_amount"] == 425
    assert data["payment_terms"] == "Due on Receipt"
    assert data["due_date"] is None
    assert len(data["project_areas"]) == 2


def test_patch_manual_total_override(api):
    invoice = create_invoice(api)
    response = api.patch(f"/api/invoices/{invoice['id']}", json={"title": "Discounted", "total_amount": 400})
    data = response.json()["data"]
    assert data["total_amount"] == 400
    assert data["title"] == "Discounted"
    assert data["outstanding_amount"] == 400


@pytest.mark.parametrize("payload, error", [
    ({"title": "  "}, "Title is required"),
    ({"title": "Repaint", "total_amount": 0}, "Total amount must be greater than 0"),
    ({"title": "Repaint", "project_areas": []}, "At least one project area is required"),
])
def test_patch_rejections(api, payload, error):
    invoice = create_invoice(api)
    response = api.patch(f"/api/invoices/{invoice['id']}", json=payload)
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": error}


def test_payments_track_balance_and_status(api):
    invoice = create_invoice(api, markup_percentage=0)
    invoice_id = invoice["id"]
    assert invoice["total_amount"] == 425

    first = api.post(f"/api/invoices/{invoice_id}/payments", json={"amount": 125, "payment_date": "2026-10-01"})
    assert first.status_code == 201
    assert first.json()["data"]["paid_amount"] == 125
    assert first.json()["data"]["status"] == "draft"

    too_much = api.post(f"/api/invoices/{invoice_id}/payments", json={"amount": 500, "payment_date": "2026-10-02"})
    assert too_much.status_code == 400
    assert "exceeds outstanding balance ($300.00)" in too_much.json()["error"]

    rest = api.post(f"/api/invoices/{invoice_id}/payments", json={"amount": 300, "payment_date": "2026-10-03"})
    assert rest.json()["data"]["status"] == "paid"
    assert rest.json()["data"]["outstanding_amount"] == 0

    payments = api.get(f"/api/invoices/{invoice_id}/payments").json()["data"]
    assert [p["amount"] for p in payments] == [300, 125]

    deleted = api.delete(f"/api/payments/{payments[0]['id']}")
    assert deleted.json()["data"]["status"] == "sent"
    assert deleted.json()["data"]["paid_amount"] == 125


def test_payment_amount_must_be_positive(api):
    invoice = create_invoice(api)
    response = api.post(f"/api/invoices/{invoice['id']}/payments", json={"amount": -5, "payment_date": "2026-10-01"})
    assert response.status_code == 400
    assert response.json()["error"].startswith("amount")


def test_status_update_and_listing(api):
    invoice = create_invoice(api)
    api.patch(f"/api/invoices/{invoice['id']}/status", json={"status": "sent"})

    listing = api.get("/api/invoices", params={"status": "sent"}).json()["data"]
    assert [i["invoice_number"] for i in listing["data"]] == ["INV-0001"]
    assert api.get("/api/invoices", params={"status": "paid"}).json()["data"]["total"] == 0


def test_rejected_empty_areas_leave_invoice_untouched(api):
    invoice = create_invoice(api)
    api.patch(f"/api/invoices/{invoice['id']}", json={"title": "T", "project_areas": []})

    data = api.get(f"/api/invoices/{invoice['id']}").json()["data"]
    assert data["title"] == invoice["title"]
    assert data["total_amount"] == invoice["total_amount"]
    assert len(data["project_areas"]) == 2
