"""Appointment entity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from medibook.model.fields import Name


@dataclass(frozen=True)
class Appointment:
    """A booked slot for a patient.

    Identity is (patient name, start time): a patient cannot hold two bookings
    that start at the same moment. The patient is referenced by name only; the
    patient list is not consulted.
    """

    patient_name: Name
    start: datetime
    description: str = ""

    def is_same_appointment(self, other: Appointment | None) -> bool:
        if other is self:
            return True
        return (
            other is not None
            and self.patient_name.is_same(other.patient_name)
            and self.start == other.start
        )

    def __str__(self) -> str:
        text = f"{self.patient_name} @ {self.start:%Y-%m-%d %H:%M}"
        return f"{text}: {self.description}" if self.description else text
