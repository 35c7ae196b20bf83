"""medibook logic hub.

Responsibilities:
1. Build the session model (optionally seeded with sample records)
2. Parse a line of user input into a Command
3. Execute it against the model and return the CommandResult

Parse and model errors propagate to the caller unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from medibook.commands import CommandResult
from medibook.config import MediBookConfig
from medibook.model.manager import Model
from medibook.model.patient import Patient
from medibook.model.sample_data import sample_address_book
from medibook.parser.dispatch import AddressBookParser

logger = logging.getLogger(__name__)


class MediBook:
    """Executes user commands against one in-memory model."""

    def __init__(self, config: MediBookConfig, model: Model | None = None) -> None:
        self.config = config
        if model is None:
            model = Model(sample_address_book() if config.load_sample_data else None)
        self.model = model
        self._parser = AddressBookParser()

    def execute(self, command_text: str) -> CommandResult:
        logger.info("[USER COMMAND] %s", command_text)
        command = self._parser.parse_command(command_text)
        result = command.execute(self.model)
        logger.debug("Result: %s", result.feedback)
        return result

    @property
    def filtered_patient_list(self) -> Sequence[Patient]:
        return self.model.filtered_patient_list
