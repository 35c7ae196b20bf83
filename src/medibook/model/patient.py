"""Patient entity."""

from __future__ import annotations

from dataclasses import dataclass, field

from medibook.model.fields import Address, Email, Name, Phone, Remark, Tag


@dataclass(frozen=True)
class Patient:
    """A patient record. Two patients with the same name are the same patient,
    whatever their other fields say; ``==`` still compares every field."""

    name: Name
    phone: Phone
    email: Email
    address: Address
    remark: Remark = field(default_factory=Remark)
    tags: frozenset[Tag] = frozenset()

    def __post_init__(self) -> None:
        # Accept any iterable of tags but always store a frozenset.
        object.__setattr__(self, "tags", frozenset(self.tags))

    def is_same_patient(self, other: Patient | None) -> bool:
        if other is self:
            return True
        return other is not None and self.name.is_same(other.name)

    def __str__(self) -> str:
        tags = "".join(str(t) for t in sorted(self.tags, key=lambda t: t.tag_name))
        return (
            f"{self.name}; Phone: {self.phone}; Email: {self.email}; "
            f"Address: {self.address}; Remark: {self.remark}; Tags: {tags}"
        )
