"""Route a line of user input to the matching command parser."""

from __future__ import annotations

import re

from medibook.commands import Command, ExitCommand, FindPatientCommand, ListPatientsCommand
from medibook.parser.exceptions import (
    MESSAGE_UNKNOWN_COMMAND,
    InvalidCommandFormatError,
    ParseError,
)
from medibook.parser.find_patient import FindPatientCommandParser

_BASIC_COMMAND_FORMAT = re.compile(r"(?P<word>\S+)(?P<arguments>.*)", re.DOTALL)

HELP_USAGE = "\n".join(
    c.USAGE for c in (FindPatientCommand, ListPatientsCommand, ExitCommand)
)


class AddressBookParser:
    """Parses user input into a Command."""

    def parse_command(self, user_input: str) -> Command:
        match = _BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
        if match is None:
            raise InvalidCommandFormatError(HELP_USAGE)

        word = match.group("word").lower()
        arguments = match.group("arguments")

        if word == FindPatientCommand.WORD:
            return FindPatientCommandParser().parse(arguments)
        if word == ListPatientsCommand.WORD:
            return ListPatientsCommand()
        if word == ExitCommand.WORD:
            return ExitCommand()
        raise ParseError(MESSAGE_UNKNOWN_COMMAND)
