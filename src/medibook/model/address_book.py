"""Address book aggregate: patients, appointments and bills.

The three collections are independent. An appointment or bill refers to a
patient by name only, and nothing here checks that the patient exists.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any, Protocol, runtime_checkable

from medibook.model.appointment import Appointment
from medibook.model.bill import Bill
from medibook.model.fields import Name
from medibook.model.patient import Patient
from medibook.model.unique_list import (
    UniqueAppointmentList,
    UniqueBillList,
    UniquePatientList,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class ReadOnlyAddressBook(Protocol):
    """Read-only snapshot of the three collections."""

    @property
    def patient_list(self) -> Sequence[Patient]: ...

    @property
    def appointment_list(self) -> Sequence[Appointment]: ...

    @property
    def bill_list(self) -> Sequence[Bill]: ...


class AddressBook:
    """Wraps all data at the address-book level. Duplicates are rejected by
    each collection's identity rule."""

    def __init__(self, to_be_copied: ReadOnlyAddressBook | None = None) -> None:
        self._patients = UniquePatientList()
        self._appointments = UniqueAppointmentList()
        self._bills = UniqueBillList()
        if to_be_copied is not None:
            self.reset_data(to_be_copied)

    # ── List overwrite operations ─────────────────────────────

    def set_patients(self, patients: Iterable[Patient]) -> None:
        self._patients.set_all(patients)

    def set_appointments(self, appointments: Iterable[Appointment]) -> None:
        self._appointments.set_all(appointments)

    def set_bills(self, bills: Iterable[Bill]) -> None:
        self._bills.set_all(bills)

    def reset_data(self, new_data: ReadOnlyAddressBook) -> None:
        """Replace all three collections with those of ``new_data``.

        Every collection is validated before any is replaced, so a duplicate in
        one of them leaves this book exactly as it was.
        """
        if new_data is None:
            raise TypeError("new_data must not be None")
        patients = self._patients.validated(new_data.patient_list)
        appointments = self._appointments.validated(new_data.appointment_list)
        bills = self._bills.validated(new_data.bill_list)

        self._patients.set_all(patients)
        self._appointments.set_all(appointments)
        self._bills.set_all(bills)
        logger.info("Address book reset: %s", self.summary())

    # ── Patient-level operations ──────────────────────────────

    def has_patient(self, patient: Patient | Name) -> bool:
        """True if a patient with the same identity exists.

        Accepts a bare ``Name`` so callers can check before building a Patient.
        """
        if patient is None:
            raise TypeError("patient must not be None")
        if isinstance(patient, Name):
            return self._patients.contains_name(patient)
        return self._patients.contains(patient)

    def add_patient(self, patient: Patient) -> None:
        self._patients.add(patient)

    def set_patient(self, target: Patient, edited: Patient) -> None:
        """Replace ``target`` with ``edited``.

        ``target`` must exist; ``edited`` must not clash with another patient.
        """
        self._patients.set_entity(target, edited)

    def remove_patient(self, key: Patient) -> None:
        self._patients.remove(key)

    # ── Appointment-level operations ──────────────────────────

    def has_appointment(self, appointment: Appointment) -> bool:
        return self._appointments.contains(appointment)

    def add_appointment(self, appointment: Appointment) -> None:
        self._appointments.add(appointment)

    def set_appointment(self, target: Appointment, edited: Appointment) -> None:
        self._appointments.set_entity(target, edited)

    def remove_appointment(self, key: Appointment) -> None:
        self._appointments.remove(key)

    # ── Bill-level operations ─────────────────────────────────

    def has_bill(self, bill: Bill) -> bool:
        return self._bills.contains(bill)

    def add_bill(self, bill: Bill) -> None:
        self._bills.add(bill)

    def set_bill(self, target: Bill, edited: Bill) -> None:
        self._bills.set_entity(target, edited)

    def remove_bill(self, key: Bill) -> None:
        self._bills.remove(key)

    def set_bill_as_paid(self, bill: Bill) -> None:
        self.set_bill(bill, bill.as_paid())

    def set_bill_as_unpaid(self, bill: Bill) -> None:
        self.set_bill(bill, bill.as_unpaid())

    # ── Sorting ──────────────────────────────────────────────

    def sort_patients(self, key: Callable[[Patient], Any], ascending: bool = True) -> None:
        self._patients.sort(key, ascending)

    def sort_appointments(self, key: Callable[[Appointment], Any], ascending: bool = True) -> None:
        self._appointments.sort(key, ascending)

    def sort_bills(self, key: Callable[[Bill], Any], ascending: bool = True) -> None:
        self._bills.sort(key, ascending)

    # ── Read-only views ──────────────────────────────────────

    @property
    def patient_list(self) -> Sequence[Patient]:
        return self._patients.as_unmodifiable_list()

    @property
    def appointment_list(self) -> Sequence[Appointment]:
        return self._appointments.as_unmodifiable_list()

    @property
    def bill_list(self) -> Sequence[Bill]:
        return self._bills.as_unmodifiable_list()

    # ── Util ─────────────────────────────────────────────────

    def summary(self) -> str:
        return (
            f"{len(self._patients)} patients; "
            f"{len(self._appointments)} appointments; "
            f"{len(self._bills)} bills"
        )

    def __str__(self) -> str:
        return self.summary()

    def __repr__(self) -> str:
        return f"AddressBook({self.summary()})"

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, AddressBook):
            return NotImplemented
        return (
            self._patients == other._patients
            and self._appointments == other._appointments
            and self._bills == other._bills
        )

    def __hash__(self) -> int:
        return hash(self._patients)
