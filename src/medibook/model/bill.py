"""Bill entity."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from medibook.model.fields import Name


@dataclass(frozen=True)
class Bill:
    """A charge against a patient.

    Identity is (patient name, amount, issue date); the paid flag is not part
    of it, so flipping it yields the same bill for uniqueness purposes.
    """

    patient_name: Name
    amount: Decimal
    issued_on: date
    is_paid: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if self.amount < 0:
            raise ValueError("Bill amount cannot be negative")

    def is_same_bill(self, other: Bill | None) -> bool:
        if other is self:
            return True
        return (
            other is not None
            and self.patient_name.is_same(other.patient_name)
            and self.amount == other.amount
            and self.issued_on == other.issued_on
        )

    def as_paid(self) -> Bill:
        return dataclasses.replace(self, is_paid=True)

    def as_unpaid(self) -> Bill:
        return dataclasses.replace(self, is_paid=False)

    def __str__(self) -> str:
        status = "paid" if self.is_paid else "unpaid"
        return f"{self.patient_name}: ${self.amount:.2f} on {self.issued_on.isoformat()} ({status})"
