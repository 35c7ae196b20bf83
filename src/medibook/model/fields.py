"""Validated value objects for patient attributes.

Each field carries its own validation rule (``is_valid``) and a user-facing
``CONSTRAINTS`` message. Constructing a field from invalid text raises
``ValueError``; the parser layer checks ``is_valid`` first so users see the
constraint message instead.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class Name:
    """A patient's full name."""

    full_name: str

    CONSTRAINTS = "Names should only contain alphanumeric characters and spaces, and it should not be blank"
    _PATTERN = re.compile(r"[^\W_](?:[^\W_]| )*")

    def __post_init__(self) -> None:
        if not self.is_valid(self.full_name):
            raise ValueError(self.CONSTRAINTS)

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return cls._PATTERN.fullmatch(text) is not None

    @property
    def key(self) -> str:
        """Identity key: whitespace-collapsed, case-folded."""
        return " ".join(self.full_name.split()).casefold()

    def is_same(self, other: Name) -> bool:
        return other is not None and self.key == other.key

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True)
class Phone:
    value: str

    CONSTRAINTS = "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    _PATTERN = re.compile(r"\d{3,}")

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise ValueError(self.CONSTRAINTS)

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return cls._PATTERN.fullmatch(text) is not None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Email:
    """An email address of the form ``local-part@domain``.

    The local part holds alphanumerics and ``+_.-`` but may not start or end
    with a special character. The domain is dot-separated labels of
    alphanumerics and hyphens; the last label is at least two characters.
    """

    value: str

    CONSTRAINTS = (
        "Emails should be of the format local-part@domain. The local-part should only contain "
        "alphanumeric characters and these special characters: +_.- and may not start or end "
        "with them. The domain name is made up of labels separated by periods, each label "
        "starting and ending with an alphanumeric character, and ending with a label at least "
        "2 characters long."
    )
    _PATTERN = re.compile(
        r"[^\W_]+(?:[+_.\-][^\W_]+)*"
        r"@"
        r"(?:[^\W_](?:(?:[^\W_]|-)*[^\W_])?\.)*[^\W_](?:[^\W_]|-)*[^\W_]"
    )

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise ValueError(self.CONSTRAINTS)

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return cls._PATTERN.fullmatch(text) is not None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Address:
    value: str

    CONSTRAINTS = "Addresses can take any values, and it should not be blank"

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise ValueError(self.CONSTRAINTS)

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return bool(text) and not text[0].isspace()

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Remark:
    """Free-text note about a patient. May be empty."""

    value: str = ""

    CONSTRAINTS = "Remarks can take any values"

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return text is not None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Tag:
    tag_name: str

    CONSTRAINTS = "Tag names should be alphanumeric"
    _PATTERN = re.compile(r"[^\W_]+")

    def __post_init__(self) -> None:
        if not self.is_valid(self.tag_name):
            raise ValueError(self.CONSTRAINTS)

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return cls._PATTERN.fullmatch(text) is not None

    def __str__(self) -> str:
        return f"[{self.tag_name}]"
