import pytest

from frontend.validation import (
    is_valid_email,
    validate_client,
    validate_company_settings,
    validate_invoice,
    validate_invoice_total,
    validate_logo,
)

VALID_SETTINGS = {
    "company_name": "PaintPro",
    "company_address": "1 Brush Lane",
    "company_phone": "555-0100",
    "company_email": "office@paintpro.co",
}


@pytest.mark.parametrize("title", ["", "   ", None])
def test_blank_title_is_reported(title):
    errors = validate_invoice({"title": title, "project_areas": [{"area_name": "Hall"}]})
    assert errors == {"title": "Title is required"}


def test_fully_populated_invoice_has_no_errors():
    form = {"title": "Repaint", "project_areas": [{"area_name": "Hall"}, {"area_name": "Kitchen"}]}
    assert validate_invoice(form) == {}


@pytest.mark.parametrize("areas", [[], None])
def test_invoice_needs_at_least_one_area(areas):
    errors = validate_invoice({"title": "Repaint", "project_areas": areas})
    assert errors == {"project_areas": "At least one project area is required"}


def test_every_unnamed_area_is_reported():
    form = {"title": "Repaint", "project_areas": [{"area_name": "Hall"}, {"area_name": " "}, {"area_name": ""}]}
    assert validate_invoice(form) == {
        "area_1_name": "Area name is required",
        "area_2_name": "Area name is required",
    }


@pytest.mark.parametrize("total", [0, -10, None, "abc"])
def test_manual_total_must_be_positive(total):
    errors = validate_invoice_total({"title": "Repaint", "total_amount": total})
    assert errors == {"total_amount": "Total amount must be greater than 0"}


def test_manual_total_accepts_positive_amount():
    assert validate_invoice_total({"title": "Repaint", "total_amount": "400"}) == {}


@pytest.mark.parametrize("email", ["a@b.co", "office@paint-pro.com"])
def test_email_pattern_accepts(email):
    assert is_valid_email(email)


@pytest.mark.parametrize("email", ["a@b", "@b.co", "a b@c.co", ""])
def test_email_pattern_rejects(email):
    assert not is_valid_email(email)


def test_company_settings_valid():
    assert validate_company_settings(VALID_SETTINGS) == {}


def test_company_settings_missing_fields():
    errors = validate_company_settings({"company_email": "nope"})
    assert errors == {
        "company_name": "Company name is required",
        "company_email": "Please enter a valid email address",
        "company_phone": "Phone number is required",
        "company_address": "Address is required",
    }


def test_company_settings_empty_email_is_required_error():
    errors = validate_company_settings(dict(VALID_SETTINGS, company_email=" "))
    assert errors == {"company_email": "Email is required"}


def test_client_email_optional_but_checked():
    assert validate_client({"name": "Jane"}) == {}
    assert validate_client({"name": "Jane", "email": "jane@"}) == {"email": "Please enter a valid email address"}
    assert validate_client({"name": ""}) == {"name": "Client name is required"}


def test_logo_rules():
    assert validate_logo("image/png", 1024) == {}
    assert validate_logo("image/jpg", 1024) == {}
    assert "logo" in validate_logo("image/webp", 1024)
    assert validate_logo("image/gif", 5 * 1024 * 1024 + 1) == {"logo": "Image size must be less than 5MB"}
