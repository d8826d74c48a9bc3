"""TTS (Text-to-Speech) package for elevenlabs_tts.

This package builds, validates and sends ElevenLabs text-to-speech requests.
"""

from .builder import TextToSpeechBuilder
from .client import ElevenLabsClient
from .errors import (
    BuilderConsumedError,
    TTSAPIError,
    TTSAuthError,
    TTSConfigError,
    TTSError,
    TTSQuotaExceededError,
    TTSRateLimitError,
    TTSTransportError,
    TTSUnauthorizedError,
)
from .models import TextNormalization, TTSRequest, VoiceSettings

__all__ = [
    "BuilderConsumedError",
    "ElevenLabsClient",
    "TTSAPIError",
    "TTSAuthError",
    "TTSConfigError",
    "TTSError",
    "TTSQuotaExceededError",
    "TTSRateLimitError",
    "TTSRequest",
    "TTSTransportError",
    "TTSUnauthorizedError",
    "TextNormalization",
    "TextToSpeechBuilder",
    "VoiceSettings",
]
