"""Parse raw text into validated field values.

Every parser trims its input first and raises FieldValidationError carrying
the field's constraint message when the trimmed text is rejected.
"""

from __future__ import annotations

from collections.abc import Iterable

from medibook.model.fields import Address, Email, Name, Phone, Remark, Tag
from medibook.parser.exceptions import FieldValidationError


def parse_name(text: str) -> Name:
    trimmed = text.strip()
    if not Name.is_valid(trimmed):
        raise FieldValidationError("name", Name.CONSTRAINTS)
    return Name(trimmed)


def parse_phone(text: str) -> Phone:
    trimmed = text.strip()
    if not Phone.is_valid(trimmed):
        raise FieldValidationError("phone", Phone.CONSTRAINTS)
    return Phone(trimmed)


def parse_email(text: str) -> Email:
    trimmed = text.strip()
    if not Email.is_valid(trimmed):
        raise FieldValidationError("email", Email.CONSTRAINTS)
    return Email(trimmed)


def parse_address(text: str) -> Address:
    trimmed = text.strip()
    if not Address.is_valid(trimmed):
        raise FieldValidationError("address", Address.CONSTRAINTS)
    return Address(trimmed)


def parse_remark(text: str) -> Remark:
    return Remark(text.strip())


def parse_tag(text: str) -> Tag:
    trimmed = text.strip()
    if not Tag.is_valid(trimmed):
        raise FieldValidationError("tag", Tag.CONSTRAINTS)
    return Tag(trimmed)


def parse_tags(values: Iterable[str]) -> frozenset[Tag]:
    return frozenset(parse_tag(v) for v in values)
