"""Unit tests for configuration loading."""

import sys
import tomllib
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

import elevenlabs_tts.config as config
from elevenlabs_tts.config import generate_config, load_config, reset_config


class TestLoadConfig:
    """Test config file, env var and default precedence."""

    def test_defaults_without_config_file(self) -> None:
        """Test a missing config file yields built-in defaults."""
        cfg = load_config()

        assert cfg.api.base_url == "https://api.elevenlabs.io/v1"
        assert cfg.api.timeout == 30.0
        assert cfg.defaults.voice == "Rachel"
        assert cfg.defaults.model == "eleven_multilingual_v2"
        assert cfg.defaults.output_format == "mp3_44100_128"
        assert cfg.output.directory == "outputs"

    def test_generated_config_is_valid_toml(self) -> None:
        """Test generate_config writes a file load_config can read."""
        path = generate_config()

        assert path == config.CONFIG_PATH
        with open(path, "rb") as f:
            data = tomllib.load(f)
        assert data["defaults"]["voice"] == "Rachel"
        assert load_config().api.timeout == 30.0

    def test_config_file_values(self) -> None:
        """Test values from the config file are used."""
        config.CONFIG_DIR.mkdir(parents=True)
        config.CONFIG_PATH.write_text(
            '[api]\ntimeout = 5\n[defaults]\nvoice = "Adam"\n'
            '[output]\ndirectory = "audio"\n'
        )

        cfg = load_config()

        assert cfg.api.timeout == 5.0
        assert cfg.defaults.voice == "Adam"
        assert cfg.defaults.model == "eleven_multilingual_v2"
        assert cfg.output.directory == "audio"

    def test_env_vars_override_file(self, monkeypatch) -> None:
        """Test env vars win over the config file."""
        config.CONFIG_DIR.mkdir(parents=True)
        config.CONFIG_PATH.write_text('[defaults]\nvoice = "Adam"\n')
        monkeypatch.setenv("ELEVENLABS_TTS_VOICE", "Sarah")
        monkeypatch.setenv("ELEVENLABS_TIMEOUT", "2.5")
        monkeypatch.setenv("ELEVENLABS_BASE_URL", "http://localhost:9000/v1")

        cfg = load_config()

        assert cfg.defaults.voice == "Sarah"
        assert cfg.api.timeout == 2.5
        assert cfg.api.base_url == "http://localhost:9000/v1"

    def test_config_is_cached(self, monkeypatch) -> None:
        """Test load_config returns the cached object until reset."""
        first = load_config()
        monkeypatch.setenv("ELEVENLABS_TTS_VOICE", "Sarah")

        assert load_config() is first
        reset_config()
        assert load_config().defaults.voice == "Sarah"

    def test_invalid_toml_exits(self) -> None:
        """Test a broken config file exits with status 1."""
        config.CONFIG_DIR.mkdir(parents=True)
        config.CONFIG_PATH.write_text("[api\n")

        with pytest.raises(SystemExit) as exc_info:
            load_config()

        assert exc_info.value.code == 1

    def test_invalid_timeout_exits(self, monkeypatch) -> None:
        """Test a non-numeric timeout exits with status 1."""
        monkeypatch.setenv("ELEVENLABS_TIMEOUT", "soon")

        with pytest.raises(SystemExit):
            load_config()
