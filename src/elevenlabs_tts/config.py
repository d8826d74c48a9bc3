"""Configuration management for elevenlabs_tts.

Loads configuration from ~/.config/elevenlabs-tts/config.toml.
Priority chain: CLI flags / call arguments > env vars > config file > defaults.
"""

import os
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path

from .catalog import DEFAULT_MODEL, DEFAULT_OUTPUT_FORMAT
from .catalog.voices import RACHEL
from .tts.client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

CONFIG_DIR = Path.home() / ".config" / "elevenlabs-tts"
CONFIG_PATH = CONFIG_DIR / "config.toml"

DEFAULT_CONFIG = f"""\
# elevenlabs-tts configuration

[api]
# API root; override for testing or enterprise endpoints
base_url = "{DEFAULT_BASE_URL}"

# Request timeout in seconds
timeout = {DEFAULT_TIMEOUT}

[defaults]
# Voice used by the CLI when --voice is omitted (catalog name or raw voice id)
# List catalog voices with `elevenlabs-tts --list-voices`
voice = "{RACHEL.name}"

# Synthesis model id (`elevenlabs-tts --list-models`)
model = "{DEFAULT_MODEL.model_id}"

# Output format: codec_samplerate_bitrate, e.g. mp3_44100_128, pcm_24000
output_format = "{DEFAULT_OUTPUT_FORMAT}"

[output]
# Directory for audio files when --output is omitted
directory = "outputs"

# The API key is read from the environment, not this file:
#   ELEVENLABS_API_KEY
"""


@dataclass(frozen=True)
class APIConfig:
    """HTTP API configuration."""

    base_url: str
    timeout: float


@dataclass(frozen=True)
class DefaultsConfig:
    """Request defaults used by the CLI."""

    voice: str
    model: str
    output_format: str


@dataclass(frozen=True)
class OutputConfig:
    """Where audio files are written."""

    directory: str


@dataclass(frozen=True)
class TTSConfig:
    """Top-level elevenlabs_tts configuration."""

    api: APIConfig
    defaults: DefaultsConfig
    output: OutputConfig


_cached_config: TTSConfig | None = None


def generate_config() -> Path:
    """Generate default config file at ~/.config/elevenlabs-tts/config.toml."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    CONFIG_PATH.write_text(DEFAULT_CONFIG)
    return CONFIG_PATH


def reset_config() -> None:
    """Drop the cached configuration so the next load re-reads it."""
    global _cached_config
    _cached_config = None


def load_config() -> TTSConfig:
    """Load configuration from config file with env var overrides.

    A missing config file is not an error: built-in defaults apply.

    Returns:
        Loaded and validated TTSConfig.

    Raises:
        SystemExit: If the config file is unreadable or holds invalid values.
    """
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    data: dict = {}
    if CONFIG_PATH.exists():
        try:
            with open(CONFIG_PATH, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            print(f"Invalid config file {CONFIG_PATH}: {e}", file=sys.stderr)
            print("Fix it or delete it to regenerate.", file=sys.stderr)
            raise SystemExit(1) from e

    api = data.get("api", {})
    defaults = data.get("defaults", {})
    output = data.get("output", {})

    # Env vars override config file values
    timeout_str = os.getenv("ELEVENLABS_TIMEOUT", str(api.get("timeout", DEFAULT_TIMEOUT)))
    try:
        timeout = float(timeout_str)
    except ValueError:
        print(f"Invalid timeout value: {timeout_str!r}", file=sys.stderr)
        raise SystemExit(1) from None

    _cached_config = TTSConfig(
        api=APIConfig(
            base_url=os.getenv("ELEVENLABS_BASE_URL", api.get("base_url", DEFAULT_BASE_URL)),
            timeout=timeout,
        ),
        defaults=DefaultsConfig(
            voice=os.getenv("ELEVENLABS_TTS_VOICE", defaults.get("voice", RACHEL.name)),
            model=os.getenv(
                "ELEVENLABS_TTS_MODEL", defaults.get("model", DEFAULT_MODEL.model_id)
            ),
            output_format=os.getenv(
                "ELEVENLABS_TTS_OUTPUT_FORMAT",
                defaults.get("output_format", DEFAULT_OUTPUT_FORMAT),
            ),
        ),
        output=OutputConfig(
            directory=os.getenv(
                "ELEVENLABS_TTS_OUTPUT_DIR", output.get("directory", "outputs")
            ),
        ),
    )

    return _cached_config
