"""Seed records for a fresh session."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from medibook.model.address_book import AddressBook
from medibook.model.appointment import Appointment
from medibook.model.bill import Bill
from medibook.model.fields import Address, Email, Name, Phone, Remark, Tag
from medibook.model.patient import Patient


def _tags(*names: str) -> frozenset[Tag]:
    return frozenset(Tag(n) for n in names)


def sample_patients() -> list[Patient]:
    return [
        Patient(Name("Alex Yeoh"), Phone("87438807"), Email("alexyeoh@example.com"),
                Address("Blk 30 Geylang Street 29, #06-40"), Remark("Allergic to penicillin"),
                _tags("diabetic")),
        Patient(Name("Bernice Yu"), Phone("99272758"), Email("berniceyu@example.com"),
                Address("Blk 30 Lorong 3 Serangoon Gardens, #07-18"), Remark(""),
                _tags("elderly", "diabetic")),
        Patient(Name("Charlotte Oliveiro"), Phone("93210283"), Email("charlotte@example.com"),
                Address("Blk 11 Ang Mo Kio Street 74, #11-04"), Remark("Prefers morning slots"),
                _tags("asthmatic")),
        Patient(Name("David Li"), Phone("91031282"), Email("lidavid@example.com"),
                Address("Blk 436 Serangoon Gardens Street 26, #16-43"), Remark(""),
                _tags("elderly")),
        Patient(Name("Irfan Ibrahim"), Phone("92492021"), Email("irfan@example.com"),
                Address("Blk 47 Tampines Street 20, #17-35"), Remark("Follow-up due"),
                _tags()),
    ]


def sample_appointments() -> list[Appointment]:
    return [
        Appointment(Name("Alex Yeoh"), datetime(2024, 3, 4, 9, 30), "Blood sugar review"),
        Appointment(Name("Bernice Yu"), datetime(2024, 3, 4, 11, 0), "Annual check-up"),
    ]


def sample_bills() -> list[Bill]:
    return [
        Bill(Name("Alex Yeoh"), Decimal("45.00"), date(2024, 3, 4), is_paid=True),
        Bill(Name("Bernice Yu"), Decimal("120.50"), date(2024, 3, 4)),
    ]


def sample_address_book() -> AddressBook:
    book = AddressBook()
    book.set_patients(sample_patients())
    book.set_appointments(sample_appointments())
    book.set_bills(sample_bills())
    return book
