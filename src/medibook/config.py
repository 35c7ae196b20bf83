"""Configuration loading from environment variables and medibook.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

_CONFIG_FILENAME = "medibook.toml"


@dataclass
class ReplConfig:
    """Interactive REPL settings."""

    prompt: str = "> "
    show_patients_after_command: bool = True


@dataclass
class MediBookConfig:
    """Top-level medibook configuration."""

    repl: ReplConfig = field(default_factory=ReplConfig)
    load_sample_data: bool = True
    log_level: str = "INFO"


def _as_bool(value: bool | int | str) -> bool:
    if isinstance(value, (bool, int)):
        return bool(value)
    text = str(value).strip().lower()
    if text in ("1", "true", "yes", "on"):
        return True
    if text in ("0", "false", "no", "off", ""):
        return False
    raise ValueError(f"Not a boolean setting: {value!r}")


def load_config(config_path: Path | None = None) -> MediBookConfig:
    """Load configuration from environment variables and optional medibook.toml.

    Priority: environment variables > medibook.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        # Search current dir and ~/.medibook/
        for candidate in [
            Path.cwd() / _CONFIG_FILENAME,
            Path.home() / ".medibook" / _CONFIG_FILENAME,
        ]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    repl_data = file_data.get("repl", {})

    config = MediBookConfig(
        repl=ReplConfig(
            prompt=os.getenv("MEDIBOOK_PROMPT", repl_data.get("prompt", "> ")),
            show_patients_after_command=_as_bool(
                repl_data.get("show_patients_after_command", True)
            ),
        ),
        load_sample_data=_as_bool(
            os.getenv("MEDIBOOK_SAMPLE_DATA", file_data.get("load_sample_data", True))
        ),
        log_level=os.getenv("MEDIBOOK_LOG_LEVEL", file_data.get("log_level", "INFO")),
    )
    return config
