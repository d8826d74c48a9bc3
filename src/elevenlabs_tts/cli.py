"""Typer CLI definition for elevenlabs-tts."""

import asyncio
import logging
import sys
from pathlib import Path
from typing import NoReturn

import typer

from .api import synthesize
from .audio import default_output_path
from .catalog import ALL_MODELS, ALL_VOICES, StaticModel, StaticVoice, get_model, get_voice
from .config import CONFIG_PATH, generate_config, load_config
from .tts.errors import (
    TTSAPIError,
    TTSAuthError,
    TTSConfigError,
    TTSTransportError,
)
from .tts.models import VoiceSettings

app = typer.Typer(help="Convert text to speech with the ElevenLabs API")


def process_text_input(text: str | None) -> str:
    """Process text input and return the text to synthesize.

    Args:
        text: Optional text input from CLI argument

    Returns:
        The text to synthesize

    Raises:
        ValueError: If no text is provided
    """
    if text is None:
        raise ValueError("No text provided")

    return text


def resolve_voice(voice: str) -> StaticVoice | str:
    """Return the catalog voice named ``voice``, or ``voice`` as a raw id."""
    return get_voice(voice) or voice


def resolve_model(model: str) -> StaticModel | str:
    """Return the catalog model matching ``model``, or ``model`` as a raw id."""
    return get_model(model) or model


def build_voice_settings(
    stability: float | None,
    similarity: float | None,
    style: float | None,
    speaker_boost: bool | None,
    speed: float | None,
) -> VoiceSettings | None:
    """Collect voice tuning flags; None when no flag was given."""
    if all(
        value is None for value in (stability, similarity, style, speaker_boost, speed)
    ):
        return None
    return VoiceSettings(
        stability=stability,
        similarity_boost=similarity,
        style=style,
        use_speaker_boost=speaker_boost,
        speed=speed,
    )


def _fail(message: str, error: Exception, debug: bool, label: str) -> NoReturn:
    if debug:
        typer.echo(f"Debug - {label}: {error!r}", err=True)
    else:
        typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(1) from None


@app.command()
def speak(
    text: str | None = typer.Argument(None, help="Text to convert to speech"),
    file: Path | None = typer.Option(None, "-f", "--file", help="Read text from file"),
    output: Path | None = typer.Option(
        None, "-o", "--output", help="Audio file path (timestamped file if omitted)"
    ),
    voice: str | None = typer.Option(
        None, "-v", "--voice", help="Catalog voice name or voice ID (from config if omitted)"
    ),
    model: str | None = typer.Option(
        None, "-m", "--model", help="Model ID, e.g. eleven_turbo_v2_5 (from config if omitted)"
    ),
    output_format: str | None = typer.Option(
        None, "--format", help="Output format, e.g. mp3_44100_128 (from config if omitted)"
    ),
    language: str | None = typer.Option(
        None, "-l", "--language", help="ISO 639-1 language code to enforce pronunciation"
    ),
    seed: int | None = typer.Option(
        None, "--seed", help="Seed for best-effort deterministic output"
    ),
    stability: float | None = typer.Option(
        None, "--stability", help="Voice stability (0.0-1.0)"
    ),
    similarity: float | None = typer.Option(
        None, "--similarity", help="Similarity boost (0.0-1.0)"
    ),
    style: float | None = typer.Option(
        None, "--style", help="Style exaggeration (0.0-1.0)"
    ),
    speaker_boost: bool | None = typer.Option(
        None, "--speaker-boost/--no-speaker-boost", help="Boost similarity to the speaker"
    ),
    speed: float | None = typer.Option(None, "--speed", help="Speech speed (0.7-1.2)"),
    previous_text: str | None = typer.Option(
        None, "--previous-text", help="Text spoken before this clip"
    ),
    next_text: str | None = typer.Option(
        None, "--next-text", help="Text spoken after this clip"
    ),
    previous_request_ids: list[str] | None = typer.Option(
        None, "--previous-request-id", help="Request ID generated before this clip (repeatable)"
    ),
    next_request_ids: list[str] | None = typer.Option(
        None, "--next-request-id", help="Request ID generated after this clip (repeatable)"
    ),
    normalization: str | None = typer.Option(
        None, "--normalization", help="Text normalization: auto, on or off"
    ),
    language_normalization: bool | None = typer.Option(
        None,
        "--language-normalization/--no-language-normalization",
        help="Language-specific text normalization (slow, Japanese only)",
    ),
    list_voices: bool = typer.Option(
        False, "--list-voices", help="List catalog voices and exit"
    ),
    list_models: bool = typer.Option(
        False, "--list-models", help="List catalog models and exit"
    ),
    init_config: bool = typer.Option(
        False, "--init-config", help=f"Write a default config to {CONFIG_PATH} and exit"
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Show verbose error messages and request activity"
    ),
) -> None:
    """Convert text to speech with the ElevenLabs API."""
    # Configure logging for debug mode
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    if init_config:
        try:
            path = generate_config()
        except OSError as e:
            _fail(f"Failed to write config: {e}", e, debug, "Config write failed")
        typer.echo(f"Config written to {path}")
        raise typer.Exit(0)

    if list_voices:
        for static_voice in ALL_VOICES:
            typer.echo(
                f"{static_voice.name}: {static_voice.voice_id} ({static_voice.gender})"
            )
        raise typer.Exit(0)

    if list_models:
        for static_model in ALL_MODELS:
            typer.echo(f"{static_model.model_id}: {static_model.name}")
        raise typer.Exit(0)

    # Get text from argument, file, or stdin (in priority order)
    if text is None:
        if file:
            try:
                text = file.read_text()
            except FileNotFoundError as e:
                _fail(f"File not found: {file}", e, debug, "File not found")
            except PermissionError as e:
                _fail(
                    f"Permission denied reading file: {file}",
                    e,
                    debug,
                    "Permission denied",
                )
            except UnicodeDecodeError as e:
                _fail(f"Unable to decode file as text: {file}", e, debug, "Decode error")
        elif not sys.stdin.isatty():
            text = sys.stdin.read().strip()

    try:
        input_text = process_text_input(text)
    except ValueError as e:
        _fail(str(e), e, debug, "Text processing error")

    # Resolve config values for flags not provided
    config = load_config()
    fmt = output_format or config.defaults.output_format
    target = output or default_output_path(config.output.directory, fmt)

    try:
        asyncio.run(
            synthesize(
                input_text,
                voice=resolve_voice(voice or config.defaults.voice),
                model=resolve_model(model or config.defaults.model),
                output=target,
                voice_settings=build_voice_settings(
                    stability, similarity, style, speaker_boost, speed
                ),
                output_format=fmt,
                language_code=language,
                seed=seed,
                previous_text=previous_text,
                next_text=next_text,
                previous_request_ids=previous_request_ids or None,
                next_request_ids=next_request_ids or None,
                text_normalization=normalization,
                language_normalization=language_normalization,
                base_url=config.api.base_url,
                timeout=config.api.timeout,
            )
        )
    except TTSAuthError as e:
        _fail(str(e), e, debug, "Authentication error")
    except TTSConfigError as e:
        _fail(f"Invalid request: {e}", e, debug, "Configuration error")
    except TTSAPIError as e:
        _fail(str(e), e, debug, "TTS API error")
    except TTSTransportError as e:
        _fail(str(e), e, debug, "Transport error")
    except OSError as e:
        _fail(f"Failed to save audio file: {e}", e, debug, "File system error")
    except Exception as e:
        _fail("An unexpected error occurred", e, debug, "Unexpected error")

    typer.echo(f"Audio saved to {target}")
