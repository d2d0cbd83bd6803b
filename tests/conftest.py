"""Root conftest — payload fixtures shared by every test module.

Invariants:
    - Fixtures return fresh dicts (wire names); tests mutate their own copy
"""

import pytest

from tests.payloads import (
    make_additional_payload,
    make_address_payload,
    make_contact_payload,
    make_employee_payload,
    without,
)


@pytest.fixture
def address_payload() -> dict:
    return make_address_payload()


@pytest.fixture
def contact_payload() -> dict:
    return make_contact_payload()


@pytest.fixture
def additional_payload() -> dict:
    return make_additional_payload()


@pytest.fixture
def employee_payload() -> dict:
    return make_employee_payload()


@pytest.fixture
def employee_create_payload() -> dict:
    return without(make_employee_payload(), "id", "createdAt", "updatedAt")
