import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret"

import pytest
from fastapi.testclient import TestClient
from database import Base, SessionLocal, engine
from main import app

PDF_BYTES = b"%PDF-1.4\n1 0 obj << /Type /Catalog >> endobj\ntrailer << /Root 1 0 R >>\n%%EOF\n"

USER = {
    "name": "Maria Souza",
    "email": "maria@example.com",
    "password": "s3cret-pass",
    "cpf": "123.456.789-01",
}


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def pdf_bytes():
    return PDF_BYTES


@pytest.fixture
def user_payload():
    return dict(USER)


@pytest.fixture
def registered_user(client, user_payload):
    response = client.post("/users/", json=user_payload)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_headers(client, registered_user, user_payload):
    response = client.post("/auth/login", json={"email": user_payload["email"], "password": user_payload["password"]})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def product(client):
    return client.post("/products/", json={"name": "Parafuso Sextavado", "description": "M8"}).json()


@pytest.fixture
def supplier(client):
    return client.post("/suppliers/", json={"name": "Metalurgica Andrade", "phone": "11 5555-0000"}).json()


@pytest.fixture
def entry_form(product, supplier):
    return {
        "product_id": str(product["id"]),
        "supplier_id": str(supplier["id"]),
        "entry_date": "2024-05-02T09:30:00",
        "quantity": "2",
        "unit_value": "10.5",
        "total_value": "21.00",
        "invoice_number": "NF-1001",
        "batch": "L-7",
        "category": "",
        "observations": "",
    }
