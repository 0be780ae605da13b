"""
Tests for generator configuration loading.
"""

import json
from pathlib import Path

import pytest

from chuk_mcp_progression.config import GeneratorConfig, load_config
from chuk_mcp_progression.constants import DEFAULT_MODEL, DEFAULT_TIMEOUT
from chuk_mcp_progression.errors import ConfigurationError


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self) -> None:
        """No file and no environment gives defaults."""
        config = load_config(None)
        assert config.api_key is None
        assert config.model == DEFAULT_MODEL
        assert config.timeout == DEFAULT_TIMEOUT

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        """A path that does not exist is not an error."""
        config = load_config(tmp_path / "missing.yaml")
        assert config == GeneratorConfig()

    def test_yaml_file(self, tmp_path: Path) -> None:
        """Fields are read from YAML."""
        path = tmp_path / "config.yaml"
        path.write_text("api_key: sk-yaml\nmodel: gpt-4o\ntemperature: 0.3\ntimeout: 15\n")

        config = load_config(path)
        assert config.api_key == "sk-yaml"
        assert config.model == "gpt-4o"
        assert config.temperature == 0.3
        assert config.timeout == 15

    def test_json_file_with_api_key_alias(self, tmp_path: Path) -> None:
        """A config.json using apiKey loads too."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"apiKey": "sk-json"}))
        assert load_config(path).api_key == "sk-json"

    def test_empty_file(self, tmp_path: Path) -> None:
        """An empty file means defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == GeneratorConfig()

    def test_environment_overrides_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Environment values win over the file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"apiKey": "sk-file", "model": "file-model", "timeout": 5}))
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        monkeypatch.setenv("CHUK_PROGRESSION_MODEL", "env-model")
        monkeypatch.setenv("CHUK_PROGRESSION_BASE_URL", "http://localhost:11434/v1")

        config = load_config(path)
        assert config.api_key == "sk-env"
        assert config.model == "env-model"
        assert config.base_url == "http://localhost:11434/v1"
        assert config.timeout == 5

    def test_environment_without_file(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Prefixed numeric settings are read from the environment."""
        monkeypatch.setenv("CHUK_PROGRESSION_TIMEOUT", "12.5")
        assert load_config(None).timeout == 12.5

    def test_blank_environment_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Empty environment values do not override."""
        monkeypatch.setenv("CHUK_PROGRESSION_MODEL", "")
        assert load_config(None).model == DEFAULT_MODEL

    def test_non_mapping_file(self, tmp_path: Path) -> None:
        """A list at the top level is rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("- one\n- two\n")
        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            load_config(path)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Unparseable files are rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("model: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Cannot read config file"):
            load_config(path)

    def test_invalid_values(self, tmp_path: Path) -> None:
        """Out-of-range values are rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("timeout: -1\n")
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_config(path)

    def test_invalid_environment_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Bad values from the environment are rejected too."""
        monkeypatch.setenv("CHUK_PROGRESSION_TEMPERATURE", "hot")
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_config(None)
