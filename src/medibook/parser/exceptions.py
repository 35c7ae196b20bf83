"""Errors raised while parsing user input."""

from __future__ import annotations

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n%s"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"


class ParseError(Exception):
    """User input does not conform to the expected format."""


class InvalidCommandFormatError(ParseError):
    """Arguments are malformed for the command. Carries the command's usage."""

    def __init__(self, usage: str) -> None:
        self.usage = usage
        super().__init__(MESSAGE_INVALID_COMMAND_FORMAT % usage)


class FieldValidationError(ParseError):
    """A field value failed its validation rule."""

    def __init__(self, field: str, constraints: str) -> None:
        self.field = field
        self.constraints = constraints
        super().__init__(constraints)
