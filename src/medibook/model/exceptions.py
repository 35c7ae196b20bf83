"""Errors raised by the entity store."""

from __future__ import annotations


class ModelError(Exception):
    """Base class for entity store errors."""


class DuplicateEntityError(ModelError):
    """An operation would store two entities with the same identity."""

    def __init__(self, entity: object | None = None) -> None:
        self.entity = entity
        super().__init__("Operation would result in duplicate entities")


class DuplicateEntitiesError(ModelError):
    """A bulk replacement contained two entities with the same identity."""

    def __init__(self, first: object | None = None, second: object | None = None) -> None:
        self.first = first
        self.second = second
        super().__init__("Provided list contains duplicate entities")


class EntityNotFoundError(ModelError):
    """The target entity is not in the list."""

    def __init__(self, entity: object | None = None) -> None:
        self.entity = entity
        super().__init__("Entity not found")
