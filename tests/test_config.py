"""Tests for configuration loading."""

from pathlib import Path

import pytest

from medibook.config import load_config

_ENV_KEYS = ["MEDIBOOK_LOG_LEVEL", "MEDIBOOK_SAMPLE_DATA", "MEDIBOOK_PROMPT"]


@pytest.fixture(autouse=True)
def clean_env(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestConfig:
    def test_defaults(self):
        config = load_config()
        assert config.log_level == "INFO"
        assert config.load_sample_data is True
        assert config.repl.prompt == "> "
        assert config.repl.show_patients_after_command is True

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("MEDIBOOK_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("MEDIBOOK_SAMPLE_DATA", "no")

        config = load_config()
        assert config.log_level == "DEBUG"
        assert config.load_sample_data is False

    def test_toml_file(self, tmp_path: Path):
        toml_path = tmp_path / "custom.toml"
        toml_path.write_text("""
log_level = "WARNING"
load_sample_data = false

[repl]
prompt = "clinic> "
show_patients_after_command = false
""")
        config = load_config(toml_path)
        assert config.log_level == "WARNING"
        assert config.load_sample_data is False
        assert config.repl.prompt == "clinic> "
        assert config.repl.show_patients_after_command is False

    def test_discovered_in_cwd(self, tmp_path: Path):
        (tmp_path / "medibook.toml").write_text('log_level = "ERROR"\n')
        assert load_config().log_level == "ERROR"

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("MEDIBOOK_PROMPT", "$ ")

        toml_path = tmp_path / "medibook.toml"
        toml_path.write_text("""
[repl]
prompt = "clinic> "
""")
        config = load_config(toml_path)
        assert config.repl.prompt == "$ "  # env wins

    def test_toml_integer_flags(self, tmp_path: Path):
        toml_path = tmp_path / "medibook.toml"
        toml_path.write_text("""
load_sample_data = 0

[repl]
show_patients_after_command = 1
""")
        config = load_config(toml_path)
        assert config.load_sample_data is False
        assert config.repl.show_patients_after_command is True

    def test_toml_string_flags(self, tmp_path: Path):
        toml_path = tmp_path / "medibook.toml"
        toml_path.write_text("""
load_sample_data = "yes"

[repl]
show_patients_after_command = "false"
""")
        config = load_config(toml_path)
        assert config.load_sample_data is True
        assert config.repl.show_patients_after_command is False

    def test_unrecognised_flag_rejected(self, monkeypatch):
        monkeypatch.setenv("MEDIBOOK_SAMPLE_DATA", "maybe")
        with pytest.raises(ValueError, match="boolean"):
            load_config()
