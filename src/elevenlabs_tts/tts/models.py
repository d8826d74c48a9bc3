"""TTS data models with validation."""

import json
from urllib.parse import quote
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..catalog import StaticModel, StaticVoice
from .errors import TTSConfigError

# Closed intervals accepted by the service
UNIT_RANGE = (0.0, 1.0)
SPEED_RANGE = (0.7, 1.2)

SEED_MAX = 4294967295
MAX_REQUEST_IDS = 3

VoiceSelector = StaticVoice | str
ModelSelector = StaticModel | str


class TextNormalization(str, Enum):
    """How numbers and abbreviations are expanded to spoken form."""

    AUTO = "auto"
    ON = "on"
    OFF = "off"


@dataclass
class VoiceSettings:
    """Per-request voice tuning.

    Every field is optional; fields left as None are omitted from the
    request and the voice's stored settings apply.

    Args:
        stability: Voice stability (0.0-1.0)
        similarity_boost: Similarity to the original voice (0.0-1.0)
        style: Style exaggeration (0.0-1.0)
        use_speaker_boost: Whether to boost similarity to the original speaker
        speed: Speed multiplier (0.7-1.2), 1.0 is normal speed
    """

    stability: float | None = None
    similarity_boost: float | None = None
    style: float | None = None
    use_speaker_boost: bool | None = None
    speed: float | None = None

    def validate(self) -> None:
        """Check each bounded field against its range.

        Raises:
            TTSConfigError: For the first field outside its range
        """
        bounded = (
            ("stability", self.stability, UNIT_RANGE),
            ("similarity_boost", self.similarity_boost, UNIT_RANGE),
            ("style", self.style, UNIT_RANGE),
            ("speed", self.speed, SPEED_RANGE),
        )
        for name, value, (low, high) in bounded:
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TTSConfigError(
                    f"{name} must be a number, got {value!r}", field=name, value=value
                )
            if not low <= value <= high:
                raise TTSConfigError(
                    f"{name} must be between {low} and {high}, got {value}",
                    field=name,
                    value=value,
                )
        if self.use_speaker_boost is not None and not isinstance(
            self.use_speaker_boost, bool
        ):
            raise TTSConfigError(
                f"use_speaker_boost must be a bool, got {self.use_speaker_boost!r}",
                field="use_speaker_boost",
                value=self.use_speaker_boost,
            )

    def to_payload(self) -> dict[str, Any]:
        """Return the set fields as the ``voice_settings`` sub-document."""
        fields = (
            ("stability", self.stability),
            ("similarity_boost", self.similarity_boost),
            ("style", self.style),
            ("use_speaker_boost", self.use_speaker_boost),
            ("speed", self.speed),
        )
        return {key: value for key, value in fields if value is not None}


def resolve_voice_id(voice: VoiceSelector) -> str:
    """Map a catalog voice or a raw voice id to the wire identifier."""
    if isinstance(voice, StaticVoice):
        return voice.voice_id
    return voice


def resolve_model_id(model: ModelSelector) -> str:
    """Map a catalog model or a raw model id to the wire identifier."""
    if isinstance(model, StaticModel):
        return model.model_id
    return model


@dataclass(frozen=True)
class TTSRequest:
    """A validated text-to-speech request ready to be sent.

    ``voice_id`` routes the request (path segment) and ``output_format`` is
    a query parameter; every other field belongs to the JSON body.
    """

    text: str
    voice_id: str
    model_id: str
    output_format: str
    voice_settings: VoiceSettings | None = None
    language_code: str | None = None
    seed: int | None = None
    previous_text: str | None = None
    next_text: str | None = None
    previous_request_ids: tuple[str, ...] | None = None
    next_request_ids: tuple[str, ...] | None = None
    apply_text_normalization: TextNormalization | None = None
    apply_language_text_normalization: bool | None = None

    @property
    def path(self) -> str:
        # The voice id is one path segment, so "/", "?" and "#" are escaped
        return f"/text-to-speech/{quote(self.voice_id, safe='')}"

    @property
    def params(self) -> dict[str, str]:
        return {"output_format": self.output_format}

    def body(self) -> dict[str, Any]:
        """Build the JSON body, leaving out every field that was not set."""
        body: dict[str, Any] = {"text": self.text, "model_id": self.model_id}

        if self.voice_settings is not None:
            settings = self.voice_settings.to_payload()
            if settings:
                body["voice_settings"] = settings
        if self.language_code is not None:
            body["language_code"] = self.language_code
        if self.seed is not None:
            body["seed"] = self.seed
        if self.previous_text is not None:
            body["previous_text"] = self.previous_text
        if self.next_text is not None:
            body["next_text"] = self.next_text
        if self.previous_request_ids is not None:
            body["previous_request_ids"] = list(self.previous_request_ids)
        if self.next_request_ids is not None:
            body["next_request_ids"] = list(self.next_request_ids)
        if self.apply_text_normalization is not None:
            body["apply_text_normalization"] = self.apply_text_normalization.value
        if self.apply_language_text_normalization is not None:
            body["apply_language_text_normalization"] = (
                self.apply_language_text_normalization
            )

        return body

    def to_json(self) -> bytes:
        """Serialize the body to UTF-8 JSON bytes."""
        return json.dumps(self.body(), ensure_ascii=False).encode("utf-8")
