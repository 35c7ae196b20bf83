"""Shared entity fixtures."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from medibook.model.appointment import Appointment
from medibook.model.bill import Bill
from medibook.model.fields import Address, Email, Name, Phone, Remark, Tag
from medibook.model.patient import Patient


@pytest.fixture
def make_patient():
    def _make(
        name: str = "Alice Pauline",
        phone: str = "94351253",
        email: str = "alice@example.com",
        address: str = "123, Jurong West Ave 6, #08-111",
        remark: str = "",
        tags: tuple[str, ...] = (),
    ) -> Patient:
        return Patient(
            Name(name),
            Phone(phone),
            Email(email),
            Address(address),
            Remark(remark),
            frozenset(Tag(t) for t in tags),
        )

    return _make


@pytest.fixture
def alice(make_patient) -> Patient:
    return make_patient(tags=("friends",))


@pytest.fixture
def bob(make_patient) -> Patient:
    return make_patient(
        name="Bob Choo",
        phone="22222222",
        email="bob@example.com",
        address="Block 123, Bobby Street 3",
        tags=("husband", "friends"),
    )


@pytest.fixture
def appointment() -> Appointment:
    return Appointment(Name("Alice Pauline"), datetime(2024, 5, 1, 10, 0), "Consultation")


@pytest.fixture
def bill() -> Bill:
    return Bill(Name("Alice Pauline"), Decimal("80.00"), date(2024, 5, 1), is_paid=True)
