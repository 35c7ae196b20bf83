"""Tests for identity-enforcing entity lists."""

from __future__ import annotations

import dataclasses
from decimal import Decimal

import pytest

from medibook.model.bill import Bill
from medibook.model.exceptions import (
    DuplicateEntitiesError,
    DuplicateEntityError,
    EntityNotFoundError,
)
from medibook.model.fields import Name, Phone
from medibook.model.unique_list import UniqueAppointmentList, UniqueBillList, UniquePatientList


@pytest.fixture
def patients() -> UniquePatientList:
    return UniquePatientList()


class TestContainsAndAdd:
    def test_contains_empty(self, patients, alice):
        assert not patients.contains(alice)

    def test_contains_after_add(self, patients, alice):
        patients.add(alice)
        assert patients.contains(alice)
        assert alice in patients

    def test_contains_same_identity_different_fields(self, patients, alice):
        patients.add(alice)
        edited = dataclasses.replace(alice, phone=Phone("999"))
        assert edited != alice
        assert patients.contains(edited)

    def test_add_duplicate_identity_fails(self, patients, alice):
        patients.add(alice)
        other = dataclasses.replace(alice, name=Name("alice   PAULINE"), phone=Phone("999"))
        with pytest.raises(DuplicateEntityError):
            patients.add(other)
        assert list(patients) == [alice]

    def test_add_none_fails(self, patients):
        with pytest.raises(TypeError):
            patients.add(None)

    def test_in_with_other_type_is_false(self, patients, alice, appointment):
        patients.add(alice)
        assert (Name("Alice Pauline") in patients) is False
        assert (appointment in patients) is False
        assert (None in patients) is False

    def test_contains_name(self, patients, alice):
        patients.add(alice)
        assert patients.contains_name(Name("ALICE PAULINE"))
        assert not patients.contains_name(Name("Alice"))


class TestSetEntity:
    def test_target_missing(self, patients, alice):
        with pytest.raises(EntityNotFoundError):
            patients.set_entity(alice, alice)

    def test_replace_preserves_position(self, patients, alice, bob, make_patient):
        carl = make_patient(name="Carl Kurz")
        patients.set_all([alice, bob, carl])
        dan = make_patient(name="Dan Meier")
        patients.set_entity(bob, dan)
        assert list(patients) == [alice, dan, carl]

    def test_replace_with_same_identity_allowed(self, patients, alice):
        patients.add(alice)
        edited = dataclasses.replace(alice, phone=Phone("12345"))
        patients.set_entity(alice, edited)
        assert list(patients) == [edited]

    def test_replace_with_other_identity_fails(self, patients, alice, bob):
        patients.set_all([alice, bob])
        with pytest.raises(DuplicateEntityError):
            patients.set_entity(alice, dataclasses.replace(bob, phone=Phone("555")))
        assert list(patients) == [alice, bob]


class TestRemove:
    def test_remove_missing(self, patients, alice):
        with pytest.raises(EntityNotFoundError):
            patients.remove(alice)

    def test_remove_by_identity(self, patients, alice, bob):
        patients.set_all([alice, bob])
        patients.remove(dataclasses.replace(alice, phone=Phone("000")))
        assert list(patients) == [bob]


class TestSetAll:
    def test_replaces_contents(self, patients, alice, bob):
        patients.add(alice)
        patients.set_all([bob])
        assert list(patients) == [bob]

    def test_from_other_list(self, patients, alice, bob):
        other = UniquePatientList([alice, bob])
        patients.set_all(other)
        assert patients == other

    def test_duplicates_rejected_and_state_kept(self, patients, alice, bob):
        patients.add(bob)
        with pytest.raises(DuplicateEntitiesError):
            patients.set_all([alice, dataclasses.replace(alice, phone=Phone("321"))])
        assert list(patients) == [bob]


class TestSort:
    def test_ascending_and_descending(self, patients, make_patient):
        b = make_patient(name="Bea", phone="200")
        a = make_patient(name="Abe", phone="300")
        c = make_patient(name="Cid", phone="100")
        patients.set_all([b, a, c])

        patients.sort(lambda p: p.name.full_name)
        assert [p.name.full_name for p in patients] == ["Abe", "Bea", "Cid"]

        patients.sort(lambda p: p.name.full_name, ascending=False)
        assert [p.name.full_name for p in patients] == ["Cid", "Bea", "Abe"]

    def test_stable_for_equal_keys(self, patients, make_patient):
        first = make_patient(name="First", tags=("x",))
        second = make_patient(name="Second", tags=("x",))
        third = make_patient(name="Third")
        patients.set_all([first, second, third])

        patients.sort(lambda p: len(p.tags), ascending=False)
        assert list(patients) == [first, second, third]


class TestView:
    def test_view_is_live(self, patients, alice, bob):
        view = patients.as_unmodifiable_list()
        assert len(view) == 0
        patients.add(alice)
        patients.set_all([bob, alice])
        assert list(view) == [bob, alice]
        assert view[0] == bob

    def test_view_is_read_only(self, patients, alice):
        patients.add(alice)
        view = patients.as_unmodifiable_list()
        with pytest.raises(TypeError):
            view[0] = alice  # type: ignore[index]
        assert not hasattr(view, "append")


class TestEquality:
    def test_order_sensitive(self, alice, bob):
        assert UniquePatientList([alice, bob]) == UniquePatientList([alice, bob])
        assert UniquePatientList([alice, bob]) != UniquePatientList([bob, alice])

    def test_hash_follows_contents(self, alice, bob):
        assert hash(UniquePatientList([alice, bob])) == hash(UniquePatientList([alice, bob]))

    def test_full_equality_not_identity(self, alice):
        edited = dataclasses.replace(alice, phone=Phone("777"))
        assert UniquePatientList([alice]) != UniquePatientList([edited])

    def test_different_list_kinds_not_equal(self):
        assert UniquePatientList() != UniqueBillList()
        assert UniqueAppointmentList() != UniqueBillList()


class TestOtherEntities:
    def test_appointment_identity(self, appointment):
        appointments = UniqueAppointmentList([appointment])
        rescheduled_note = dataclasses.replace(appointment, description="Follow-up")
        with pytest.raises(DuplicateEntityError):
            appointments.add(rescheduled_note)
        later = dataclasses.replace(appointment, start=appointment.start.replace(hour=15))
        appointments.add(later)
        assert len(appointments) == 2

    def test_bill_identity_ignores_paid_flag(self, bill):
        bills = UniqueBillList([bill])
        assert bills.contains(bill.as_unpaid())
        with pytest.raises(DuplicateEntityError):
            bills.add(bill.as_unpaid())

    def test_float_amount_matches_decimal(self, bill):
        from_float = Bill(bill.patient_name, 0.1, bill.issued_on)
        from_decimal = Bill(bill.patient_name, Decimal("0.1"), bill.issued_on)
        assert from_float.amount == Decimal("0.1")
        assert from_float.is_same_bill(from_decimal)
        assert UniqueBillList([from_decimal]).contains(from_float)
