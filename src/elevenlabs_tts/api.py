"""High-level API for elevenlabs_tts library usage."""

from collections.abc import Sequence
from pathlib import Path

import httpx

from .audio import save_audio
from .catalog import StaticModel, StaticVoice
from .tts.client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ElevenLabsClient
from .tts.models import TextNormalization, VoiceSettings


async def synthesize(
    text: str,
    voice: StaticVoice | str,
    model: StaticModel | str | None = None,
    output: str | Path | None = None,
    voice_settings: VoiceSettings | None = None,
    output_format: str | None = None,
    language_code: str | None = None,
    seed: int | None = None,
    previous_text: str | None = None,
    next_text: str | None = None,
    previous_request_ids: Sequence[str] | None = None,
    next_request_ids: Sequence[str] | None = None,
    text_normalization: TextNormalization | str | None = None,
    language_normalization: bool | None = None,
    api_key: str | None = None,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float | None = DEFAULT_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> bytes:
    """Synthesize speech from text in one call.

    Arguments left as None are not sent, so the service (or the builder's
    documented default) decides.

    Args:
        text: Text to speak
        voice: Catalog voice or raw voice id
        model: Catalog model or raw model id
        output: File path to save audio to (optional)
        voice_settings: Per-request voice tuning
        output_format: Output format token, e.g. "mp3_44100_128"
        language_code: Pronunciation hint (ISO 639-1)
        seed: Seed for best-effort deterministic sampling
        previous_text: Text spoken before this request
        next_text: Text spoken after this request
        previous_request_ids: Request ids generated before this one
        next_request_ids: Request ids generated after this one
        text_normalization: "auto", "on" or "off"
        language_normalization: Language-specific text normalization
        api_key: API key (defaults to ELEVENLABS_API_KEY)
        base_url: API root
        timeout: Request timeout in seconds
        transport: Optional httpx transport

    Returns:
        Audio bytes

    Raises:
        TTSAuthError: If API key is not configured
        TTSConfigError: If the request configuration is invalid
        TTSTransportError: If the request could not be sent
        TTSAPIError: If the API rejected the request
        OSError: If file save fails
    """
    client = ElevenLabsClient(
        api_key=api_key, base_url=base_url, timeout=timeout, transport=transport
    )
    builder = client.text_to_speech(text).set_voice(voice)

    if model is not None:
        builder.set_model(model)
    if voice_settings is not None:
        builder.set_voice_settings(voice_settings)
    if output_format is not None:
        builder.set_output_format(output_format)
    if language_code is not None:
        builder.set_language_code(language_code)
    if seed is not None:
        builder.set_seed(seed)
    if previous_text is not None:
        builder.set_previous_text(previous_text)
    if next_text is not None:
        builder.set_next_text(next_text)
    if previous_request_ids is not None:
        builder.set_previous_request_ids(previous_request_ids)
    if next_request_ids is not None:
        builder.set_next_request_ids(next_request_ids)
    if text_normalization is not None:
        builder.set_text_normalization(text_normalization)
    if language_normalization is not None:
        builder.set_language_normalization(language_normalization)

    audio = await builder.execute()

    if output is not None:
        save_audio(audio, output)

    return audio
