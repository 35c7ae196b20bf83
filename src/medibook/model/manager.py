"""Model: the address book plus the patient view currently on display."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from typing import Any

from medibook.model.address_book import AddressBook, ReadOnlyAddressBook
from medibook.model.appointment import Appointment
from medibook.model.bill import Bill
from medibook.model.fields import Name
from medibook.model.patient import Patient
from medibook.model.predicates import show_all

logger = logging.getLogger(__name__)

PatientPredicate = Callable[[Patient], bool]


class FilteredList(Sequence):
    """Live filtered view: re-evaluates the predicate against the source on
    every access, so it always reflects the latest mutation."""

    def __init__(self, source: Sequence[Patient], predicate: PatientPredicate = show_all) -> None:
        self._source = source
        self.predicate = predicate

    def _matching(self) -> list[Patient]:
        return [p for p in self._source if self.predicate(p)]

    def __getitem__(self, index):
        return self._matching()[index]

    def __len__(self) -> int:
        return sum(1 for p in self._source if self.predicate(p))

    def __iter__(self) -> Iterator[Patient]:
        return (p for p in self._source if self.predicate(p))


class Model:
    """Owns the session's address book and the filtered patient list."""

    def __init__(self, address_book: ReadOnlyAddressBook | None = None) -> None:
        self.address_book = AddressBook(address_book)
        self._filtered_patients = FilteredList(self.address_book.patient_list)
        logger.debug("Model initialised with %s", self.address_book.summary())

    def set_address_book(self, address_book: ReadOnlyAddressBook) -> None:
        self.address_book.reset_data(address_book)

    # ── Patients ─────────────────────────────────────────────

    def has_patient(self, patient: Patient | Name) -> bool:
        return self.address_book.has_patient(patient)

    def add_patient(self, patient: Patient) -> None:
        self.address_book.add_patient(patient)
        self.update_filtered_patient_list(show_all)

    def set_patient(self, target: Patient, edited: Patient) -> None:
        self.address_book.set_patient(target, edited)

    def delete_patient(self, target: Patient) -> None:
        self.address_book.remove_patient(target)

    def sort_patients(self, key: Callable[[Patient], Any], ascending: bool = True) -> None:
        self.address_book.sort_patients(key, ascending)

    # ── Appointments & bills ─────────────────────────────────

    def add_appointment(self, appointment: Appointment) -> None:
        self.address_book.add_appointment(appointment)

    def add_bill(self, bill: Bill) -> None:
        self.address_book.add_bill(bill)

    def set_bill_as_unpaid(self, bill: Bill) -> None:
        self.address_book.set_bill_as_unpaid(bill)

    # ── Filtered patient list ────────────────────────────────

    @property
    def filtered_patient_list(self) -> Sequence[Patient]:
        return self._filtered_patients

    def update_filtered_patient_list(self, predicate: PatientPredicate) -> None:
        if predicate is None:
            raise TypeError("predicate must not be None")
        self._filtered_patients.predicate = predicate
