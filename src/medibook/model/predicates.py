"""Patient search predicate combining per-field filters with AND semantics."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from medibook.model.fields import Tag
from medibook.model.patient import Patient


@dataclass(frozen=True)
class PatientSearchPredicate:
    """Matches a patient when every supplied field filter matches.

    Text filters (name, email, address, remark) are case-insensitive substring
    tests; phone is a plain substring test; tags must all be present on the
    patient. A field left as ``None`` imposes no constraint.
    """

    name: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    remark: str | None = None
    tags: frozenset[Tag] | None = None

    def __post_init__(self) -> None:
        if self.tags is not None:
            object.__setattr__(self, "tags", frozenset(self.tags))

    def _field_tests(self) -> Iterator[Callable[[Patient], bool]]:
        if self.name is not None:
            yield _contains_ignore_case(self.name, lambda p: p.name.full_name)
        if self.phone is not None:
            phone = self.phone
            yield lambda p: phone in p.phone.value
        if self.email is not None:
            yield _contains_ignore_case(self.email, lambda p: p.email.value)
        if self.address is not None:
            yield _contains_ignore_case(self.address, lambda p: p.address.value)
        if self.remark is not None:
            yield _contains_ignore_case(self.remark, lambda p: p.remark.value)
        if self.tags is not None:
            tags = self.tags
            yield lambda p: p.tags >= tags

    def __call__(self, patient: Patient) -> bool:
        return all(test(patient) for test in self._field_tests())


def _contains_ignore_case(needle: str, attr: Callable[[Patient], str]) -> Callable[[Patient], bool]:
    folded = needle.casefold()
    return lambda p: folded in attr(p).casefold()


def show_all(patient: Patient) -> bool:
    return True
