import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.api.main import app

SAMPLE_FORM = Path(__file__).resolve().parent.parent / "data" / "forms" / "sample_form.json"


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def sample_form():
    return json.loads(SAMPLE_FORM.read_text(encoding="utf-8"))


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_sample_form(client, sample_form):
    response = client.post("/api/v1/scopes", json=sample_form)
    assert response.status_code == 200
    body = response.json()

    assert [s["type"] for s in body["scopes"]] == ["Identity", "Address", "Phone", "Email"]
    identity, address, phone, email = body["scopes"]

    assert identity["fields_type"] == "PersonalDetails"
    assert identity["documents"] == ["Passport", "IdentityCard"]
    assert identity["selfie_required"] is True
    assert identity["title"] == "Identity document"
    assert identity["ready"] == "Passport, Maria, Silva, 10.05.1988, Female, Brazil, Portugal, BR1234567"
    assert identity["is_ready"] is True

    assert address["documents"] == ["UtilityBill", "RentalAgreement"]
    assert address["selfie_required"] is False
    assert address["ready"] == "Utility bill, Rua Augusta 100, Lisboa, Portugal, 1100-053"

    assert phone["ready"] == "+351 912 345 678"
    assert email["ready"] == "maria.silva@example.com"

    assert body["warnings"] == ["API Error: value type Passport multiple times in request."]


def test_incomplete_scope(client):
    payload = {
        "request": ["PersonalDetails", "DriverLicense"],
        "values": {
            "PersonalDetails": {"fields": {"first_name": "Maria"}},
            "DriverLicense": {"fields": {"document_no": "DL1"}},
        },
    }
    response = client.post("/api/v1/scopes", json=payload)
    assert response.status_code == 200
    scope = response.json()["scopes"][0]
    assert scope["title"] == "Driver's license"
    assert scope["ready"] == ""
    assert scope["is_ready"] is False


def test_missing_value_is_422(client):
    payload = {"request": ["Phone"], "values": {}}
    response = client.post("/api/v1/scopes", json=payload)
    assert response.status_code == 422
    assert "Phone" in response.json()["detail"]


def test_unknown_category_is_422(client):
    response = client.post("/api/v1/scopes", json={"request": ["Bank"], "values": {}})
    assert response.status_code == 422
