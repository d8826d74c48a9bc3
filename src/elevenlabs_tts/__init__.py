"""elevenlabs_tts - typed async client for the ElevenLabs text-to-speech API."""

from .catalog import StaticModel, StaticVoice
from .tts import (
    BuilderConsumedError,
    ElevenLabsClient,
    TextNormalization,
    TextToSpeechBuilder,
    TTSAPIError,
    TTSAuthError,
    TTSConfigError,
    TTSError,
    TTSTransportError,
    VoiceSettings,
)

__version__ = "0.1.0"
__all__ = [
    "BuilderConsumedError",
    "ElevenLabsClient",
    "StaticModel",
    "StaticVoice",
    "TTSAPIError",
    "TTSAuthError",
    "TTSConfigError",
    "TTSError",
    "TTSTransportError",
    "TextNormalization",
    "TextToSpeechBuilder",
    "VoiceSettings",
    "synthesize",
]


def __getattr__(name: str):  # type: ignore[no-untyped-def]
    if name == "synthesize":
        from .api import synthesize

        return synthesize
    raise AttributeError(f"module 'elevenlabs_tts' has no attribute {name!r}")
