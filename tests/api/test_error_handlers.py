"""Error Handlers — FastAPI adapter for HR record validation failures.

Tests:
    - RecordValidationError raised in a route becomes a 400 with every field in details
    - Body validation against a compiled create model uses the same error vocabulary
    - UnknownEntityError becomes a 404
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from hr_records.api.error_handlers import register_error_handlers
from hr_records.schemas.employee import EmployeeCreate
from hr_records.schemas.registry import validate_create_input
from tests.payloads import make_employee_payload, without


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    register_error_handlers(app)

    @app.post("/records/{entity}")
    async def create_record(entity: str, payload: dict):
        record = validate_create_input(entity, payload).unwrap()
        return {"keys": sorted(record.to_wire())}

    @app.post("/employees")
    async def create_employee(payload: EmployeeCreate):
        return {"fullName": payload.full_name}

    return TestClient(app)


def create_payload(**overrides) -> dict:
    payload = without(make_employee_payload(), "id", "createdAt", "updatedAt")
    payload.update(overrides)
    return payload


def test_valid_record_passes_through(client):
    response = client.post("/records/employee", json=create_payload())
    assert response.status_code == 200
    assert "officeEmail" in response.json()["keys"]


def test_record_validation_error_envelope(client):
    payload = without(create_payload(gender="Unknown"), "officeEmail")
    response = client.post("/records/employee", json=payload)
    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["context"] == {"entity": "employee", "operation": "create"}
    assert [(d["fieldPath"], d["errorKind"]) for d in error["details"]] == [
        ("officeEmail", "MissingRequiredField"),
        ("gender", "InvalidEnumValue"),
    ]


def test_unknown_entity_is_404(client):
    response = client.post("/records/payroll", json={})
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "UNKNOWN_ENTITY"


def test_request_body_errors_use_field_paths(client):
    response = client.post("/employees", json=without(create_payload(), "officeEmail"))
    assert response.status_code == 400
    details = response.json()["error"]["details"]
    assert details == [{
        "fieldPath": "officeEmail",
        "errorKind": "MissingRequiredField",
        "message": "'officeEmail' is required",
    }]


def test_request_body_date_error(client):
    response = client.post("/employees", json=create_payload(dateOfBirth="not-a-date"))
    assert response.status_code == 400
    assert response.json()["error"]["details"][0]["errorKind"] == "InvalidDate"


def test_request_body_accepts_valid_employee(client):
    response = client.post("/employees", json=create_payload())
    assert response.status_code == 200
    assert response.json() == {"fullName": create_payload()["fullName"]}


def test_malformed_json_is_a_record_level_error(client):
    response = client.post(
        "/employees",
        content=b'{"fullName": "Rafiq", "gender": ',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    details = response.json()["error"]["details"]
    assert len(details) == 1
    assert details[0]["fieldPath"] == ""
    assert details[0]["errorKind"] == "InvalidType"
