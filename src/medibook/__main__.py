"""Entry point: python -m medibook

Starts the interactive REPL against an in-memory address book.
"""

from __future__ import annotations

import logging
import sys

from medibook.config import load_config


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _run_cli() -> None:
    """Interactive CLI REPL mode."""
    config = load_config()
    _setup_logging(config.log_level)

    from medibook.connectors.cli import CLIConnector
    from medibook.core import MediBook

    app = MediBook(config)
    cli = CLIConnector(config.repl)

    try:
        cli.start(app)
    except KeyboardInterrupt:
        pass


def main() -> None:
    cmd = sys.argv[1] if len(sys.argv) > 1 else "repl"

    if cmd == "repl":
        _run_cli()
    else:
        print("Usage: python -m medibook [repl]")
        print("  repl   — Interactive command REPL (default)")
        sys.exit(1)


if __name__ == "__main__":
    main()
