"""Ordered collections that reject entities with a clashing identity.

Identity (``is_same``) is weaker than equality: two patients with the same
name but different phones are not equal, yet they are the same patient and
cannot both be stored. Lookups, replacement and removal go through identity;
list equality goes through ``==`` on the elements.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar, overload

from medibook.model.appointment import Appointment
from medibook.model.bill import Bill
from medibook.model.exceptions import (
    DuplicateEntitiesError,
    DuplicateEntityError,
    EntityNotFoundError,
)
from medibook.model.fields import Name
from medibook.model.patient import Patient

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ListView(Sequence, Generic[T]):
    """Read-only live view over a backing list.

    Holds a reference to the list rather than a copy, so every mutation of the
    owner is visible as soon as the mutating call returns.
    """

    def __init__(self, backing: list[T]) -> None:
        self._backing = backing

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index):
        return self._backing[index]

    def __len__(self) -> int:
        return len(self._backing)

    def __iter__(self) -> Iterator[T]:
        return iter(self._backing)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ListView):
            return self._backing == other._backing
        if isinstance(other, (list, tuple)):
            return self._backing == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ListView({self._backing!r})"


class UniqueEntityList(Generic[T]):
    """A list of entities where no two elements share an identity."""

    entity_type: type | None = None

    def __init__(self, is_same: Callable[[T, T], bool], items: Iterable[T] = ()) -> None:
        self._is_same = is_same
        self._items: list[T] = []
        self._view = ListView(self._items)
        self.set_all(items)

    # ── Queries ──────────────────────────────────────────────

    def contains(self, entity: T) -> bool:
        """True if a stored element has the same identity as ``entity``."""
        _require(entity)
        return any(self._is_same(existing, entity) for existing in self._items)

    def __contains__(self, entity: object) -> bool:
        if entity is None:
            return False
        if self.entity_type is not None and not isinstance(entity, self.entity_type):
            return False
        return self.contains(entity)  # type: ignore[arg-type]

    def _index_of(self, entity: T) -> int:
        for i, existing in enumerate(self._items):
            if self._is_same(existing, entity):
                return i
        return -1

    def as_unmodifiable_list(self) -> ListView[T]:
        return self._view

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    # ── Mutations ────────────────────────────────────────────

    def add(self, entity: T) -> None:
        """Append ``entity``. Raises DuplicateEntityError on an identity clash."""
        _require(entity)
        if self.contains(entity):
            raise DuplicateEntityError(entity)
        self._items.append(entity)
        logger.debug("Added %s", entity)

    def set_entity(self, target: T, edited: T) -> None:
        """Replace ``target`` with ``edited`` at the same position.

        ``edited`` may share an identity with ``target`` itself (an edit of the
        same record) but not with any other stored element.
        """
        _require(target)
        _require(edited)
        index = self._index_of(target)
        if index == -1:
            raise EntityNotFoundError(target)
        for i, existing in enumerate(self._items):
            if i != index and self._is_same(existing, edited):
                raise DuplicateEntityError(edited)
        self._items[index] = edited
        logger.debug("Replaced %s with %s", target, edited)

    def remove(self, entity: T) -> None:
        """Remove the first element with the same identity as ``entity``."""
        _require(entity)
        index = self._index_of(entity)
        if index == -1:
            raise EntityNotFoundError(entity)
        del self._items[index]
        logger.debug("Removed %s", entity)

    def set_all(self, items: Iterable[T] | UniqueEntityList[T]) -> None:
        """Replace the whole contents. Nothing changes if ``items`` has duplicates."""
        replacement = self.validated(items)
        # Slice-assign so the live view keeps pointing at the same list.
        self._items[:] = replacement

    def validated(self, items: Iterable[T] | UniqueEntityList[T]) -> list[T]:
        """Return ``items`` as a list, raising DuplicateEntitiesError on a clash."""
        replacement = list(items)
        for i, first in enumerate(replacement):
            _require(first)
            for second in replacement[i + 1 :]:
                if self._is_same(first, second):
                    raise DuplicateEntitiesError(first, second)
        return replacement

    def sort(self, key: Callable[[T], Any], ascending: bool = True) -> None:
        """Stable in-place sort. Equal keys keep their relative order either way."""
        self._items.sort(key=key, reverse=not ascending)

    # ── Value semantics ──────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, UniqueEntityList):
            return NotImplemented
        return type(self) is type(other) and self._items == other._items

    def __hash__(self) -> int:
        return hash(tuple(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


def _require(entity: object) -> None:
    if entity is None:
        raise TypeError("Entities must not be None")


class UniquePatientList(UniqueEntityList[Patient]):
    entity_type = Patient

    def __init__(self, items: Iterable[Patient] = ()) -> None:
        super().__init__(Patient.is_same_patient, items)

    def contains_name(self, name: Name) -> bool:
        """True if a stored patient has ``name`` as its identity key."""
        _require(name)
        return any(p.name.is_same(name) for p in self)


class UniqueAppointmentList(UniqueEntityList[Appointment]):
    entity_type = Appointment

    def __init__(self, items: Iterable[Appointment] = ()) -> None:
        super().__init__(Appointment.is_same_appointment, items)


class UniqueBillList(UniqueEntityList[Bill]):
    entity_type = Bill

    def __init__(self, items: Iterable[Bill] = ()) -> None:
        super().__init__(Bill.is_same_bill, items)
