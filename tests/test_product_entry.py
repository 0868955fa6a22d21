import re
from decimal import Decimal
import pytest
from crud.product_entry import compute_total
from models.document import Document


@pytest.fixture
def post_entry(client, auth_headers, pdf_bytes):
    def _post(form, file=("nf-1001.pdf", pdf_bytes, "application/pdf"), headers=None):
        files = {"file": file} if file else None
        return client.post("/product-entry/", data=form, files=files, headers=headers or auth_headers)
    return _post


def test_create_entry(post_entry, entry_form, product, supplier, db):
    response = post_entry(entry_form)

    assert response.status_code == 201
    body = response.json()
    assert body["product_name"] == product["name"]
    assert body["supplier_name"] == supplier["name"]
    assert Decimal(body["quantity"]) == Decimal("2")
    assert Decimal(body["unit_value"]) == Decimal("10.5")
    assert Decimal(body["total_value"]) == Decimal("21.00")
    assert body["invoice_number"] == "NF-1001"
    assert body["batch"] == "L-7"
    assert body["category"] is None
    assert re.match(r"^[A-Z0-9]{6}$", body["entry_code"])

    document = db.query(Document).filter(Document.id == body["document_id"]).one()
    assert document.filename == "nf-1001.pdf"
    assert document.product_id == product["id"]


def test_submitted_total_is_kept_as_sent(post_entry, entry_form):
    body = post_entry({**entry_form, "total_value": "20.99"}).json()

    assert Decimal(body["total_value"]) == Decimal("20.99")


def test_missing_total_is_filled_in(post_entry, entry_form):
    form = dict(entry_form)
    del form["total_value"]

    body = post_entry(form).json()

    assert Decimal(body["total_value"]) == Decimal("21.00")


@pytest.mark.parametrize("quantity, unit_value, total", [
    ("2", "10.5", "21.00"),
    ("3", "0.33", "0.99"),
    ("0.5", "7", "3.50"),
    ("1250", "1.99", "2487.50"),
])
def test_compute_total(quantity, unit_value, total):
    assert compute_total(Decimal(quantity), Decimal(unit_value)) == Decimal(total)


@pytest.mark.parametrize("field, value", [("quantity", "0"), ("unit_value", "-1"), ("invoice_number", "")])
def test_invalid_fields_are_rejected(post_entry, entry_form, field, value):
    assert post_entry({**entry_form, field: value}).status_code == 422


def test_file_is_mandatory(post_entry, entry_form, db):
    response = post_entry(entry_form, file=None)

    assert response.status_code == 422
    assert db.query(Document).count() == 0


def test_non_pdf_attachment_is_rejected(post_entry, entry_form):
    response = post_entry(entry_form, file=("nf.txt", b"plain text", "text/plain"))

    assert response.status_code == 400


def test_pdf_name_with_text_content_type_is_rejected(post_entry, entry_form, db):
    response = post_entry(entry_form, file=("nf.pdf", b"plain text", "text/plain"))

    assert response.status_code == 400
    assert db.query(Document).count() == 0


def test_other_integrity_errors_are_not_reported_as_duplicates(post_entry, entry_form, db, monkeypatch):
    monkeypatch.setattr("crud.product_entry.generate_entry_id", lambda name: None)

    response = post_entry(entry_form)

    assert response.status_code == 500
    assert response.json()["detail"] != "Document already exists"
    assert db.query(Document).count() == 0


def test_unknown_product_or_supplier(post_entry, entry_form, db):
    assert post_entry({**entry_form, "product_id": "999"}).status_code == 404
    assert post_entry({**entry_form, "supplier_id": "999"}).status_code == 404
    assert db.query(Document).count() == 0


def test_reusing_an_attachment_name_is_rejected(post_entry, entry_form):
    assert post_entry(entry_form).status_code == 201

    response = post_entry({**entry_form, "invoice_number": "NF-1002"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Document already exists"


def test_entries_require_a_token(client, entry_form, pdf_bytes):
    assert client.get("/product-entry/").status_code == 401
    response = client.post("/product-entry/", data=entry_form, files={"file": ("nf.pdf", pdf_bytes, "application/pdf")})
    assert response.status_code == 401


def test_list_get_and_delete(client, auth_headers, post_entry, entry_form, pdf_bytes):
    older = post_entry({**entry_form, "entry_date": "2024-01-10T08:00:00"}).json()
    newer = post_entry({**entry_form, "invoice_number": "NF-2000"}, file=("nf-2000.pdf", pdf_bytes, "application/pdf")).json()

    listed = client.get("/product-entry/", headers=auth_headers).json()
    assert [e["id"] for e in listed] == [newer["id"], older["id"]]
    assert client.get(f"/product-entry/{older['id']}", headers=auth_headers).json() == older

    assert client.delete(f"/product-entry/{older['id']}", headers=auth_headers).json() == {"status": "success"}
    assert client.get(f"/product-entry/{older['id']}", headers=auth_headers).status_code == 404
    assert client.delete(f"/product-entry/{older['id']}", headers=auth_headers).status_code == 404


def test_deleting_the_attachment_keeps_the_entry(client, auth_headers, post_entry, entry_form):
    entry = post_entry(entry_form).json()

    client.delete(f"/documents/{entry['document_id']}", headers=auth_headers)

    assert client.get(f"/product-entry/{entry['id']}", headers=auth_headers).json()["document_id"] is None
