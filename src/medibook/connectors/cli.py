"""Local CLI REPL connector."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from medibook.model.exceptions import ModelError
from medibook.parser.exceptions import ParseError

if TYPE_CHECKING:
    from medibook.commands import CommandResult
    from medibook.config import ReplConfig
    from medibook.core import MediBook

logger = logging.getLogger(__name__)


class CLIConnector:
    """Interactive REPL — reads commands from stdin, writes results to stdout."""

    def __init__(
        self,
        config: ReplConfig,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.config = config
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._running = False

    @property
    def name(self) -> str:
        return "cli"

    def start(self, app: MediBook) -> None:
        self._running = True
        self._print("medibook (type 'exit' or Ctrl+D to quit)")
        self._print("-" * 40)

        while self._running:
            line = self._read_input()
            if line is None or line.strip().lower() == "quit":
                self._print("Bye!")
                break

            text = line.strip()
            if not text:
                continue

            try:
                result = app.execute(text)
            except (ParseError, ModelError) as e:
                logger.warning("Rejected command %r: %s", text, e)
                self._print(str(e))
                continue

            self.reply(app, result)
            if result.exit:
                self.stop()

    def _read_input(self) -> str | None:
        self._stdout.write(self.config.prompt)
        self._stdout.flush()
        raw = self._stdin.readline()
        if not raw:
            return None
        return raw.rstrip("\n")

    def stop(self) -> None:
        self._running = False

    def reply(self, app: MediBook, result: CommandResult) -> None:
        self._print(result.feedback)
        if self.config.show_patients_after_command and not result.exit:
            for i, patient in enumerate(app.filtered_patient_list, start=1):
                self._print(f"  {i}. {patient}")

    def _print(self, text: str) -> None:
        print(text, file=self._stdout)
