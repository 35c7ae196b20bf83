"""Argument prefixes understood by the command parsers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Prefix:
    text: str

    def __str__(self) -> str:
        return self.text


PREFIX_NAME = Prefix("n/")
PREFIX_PHONE = Prefix("p/")
PREFIX_EMAIL = Prefix("e/")
PREFIX_ADDRESS = Prefix("a/")
PREFIX_TAG = Prefix("t/")
PREFIX_REMARK = Prefix("r/")
