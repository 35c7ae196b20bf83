"""Executable commands and their results."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from medibook.model.predicates import PatientSearchPredicate, show_all

if TYPE_CHECKING:
    from medibook.model.manager import Model

logger = logging.getLogger(__name__)

MESSAGE_PATIENTS_LISTED = "{count} patients listed!"


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a command, shown to the user."""

    feedback: str
    exit: bool = False


@runtime_checkable
class Command(Protocol):
    """Protocol that all commands implement."""

    def execute(self, model: Model) -> CommandResult: ...


@dataclass(frozen=True)
class FindPatientCommand:
    """Show only the patients matching every given field filter."""

    predicate: PatientSearchPredicate

    WORD = "find"
    USAGE = (
        "find: Finds all patients whose fields contain the given values (case-insensitive) "
        "and who carry all the given tags, then displays them as a list.\n"
        "Parameters: [n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS] [r/REMARK] [t/TAG]...\n"
        "At least one parameter must be given.\n"
        "Example: find n/alex t/diabetic"
    )

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_patient_list(self.predicate)
        count = len(model.filtered_patient_list)
        logger.info("find matched %d patients", count)
        return CommandResult(MESSAGE_PATIENTS_LISTED.format(count=count))


@dataclass(frozen=True)
class ListPatientsCommand:
    WORD = "list"
    USAGE = "list: Lists all patients."

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_patient_list(show_all)
        return CommandResult("Listed all patients")


@dataclass(frozen=True)
class ExitCommand:
    WORD = "exit"
    USAGE = "exit: Exits the program."

    def execute(self, model: Model) -> CommandResult:
        return CommandResult("Exiting medibook as requested ...", exit=True)
