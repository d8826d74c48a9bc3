"""Fluent builder for text-to-speech requests."""

import re
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from ..catalog import DEFAULT_MODEL, DEFAULT_OUTPUT_FORMAT
from .errors import BuilderConsumedError, TTSConfigError
from .models import (
    MAX_REQUEST_IDS,
    SEED_MAX,
    ModelSelector,
    TextNormalization,
    TTSRequest,
    VoiceSelector,
    VoiceSettings,
    resolve_model_id,
    resolve_voice_id,
)

if TYPE_CHECKING:
    from .client import ElevenLabsClient

_LANGUAGE_CODE = re.compile(r"^[A-Za-z]{2,3}$")


class TextToSpeechBuilder:
    """Accumulates the configuration of a single text-to-speech request.

    Setters store one field each and return the builder so calls chain left
    to right; the last call for a field wins. Nothing is checked until
    ``build()`` or ``execute()``, so setters can be called in any order.

    A builder is single-use: once ``execute()`` has resolved (with audio or
    with an error) every further call raises BuilderConsumedError.

    Example:
        audio = await (
            client.text_to_speech("Hello, world!")
            .set_voice(voices.RACHEL)
            .set_model(models.ELEVEN_TURBO_V2_5)
            .set_voice_settings(VoiceSettings(stability=0.5))
            .execute()
        )
    """

    def __init__(self, client: "ElevenLabsClient", text: str) -> None:
        self._client = client
        self._consumed = False

        self._text = text
        self._voice: VoiceSelector | None = None
        self._model: ModelSelector | None = None
        self._voice_settings: VoiceSettings | None = None
        self._output_format: str | None = None
        self._language_code: str | None = None
        self._seed: int | None = None
        self._previous_text: str | None = None
        self._next_text: str | None = None
        self._previous_request_ids: list[str] | None = None
        self._next_request_ids: list[str] | None = None
        self._text_normalization: TextNormalization | str | None = None
        self._language_normalization: bool | None = None

    @property
    def consumed(self) -> bool:
        return self._consumed

    def _check_usable(self) -> None:
        if self._consumed:
            raise BuilderConsumedError(
                "This request builder has already been executed; "
                "create a new one with client.text_to_speech()"
            )

    def _store(self, attr: str, value: Any) -> "TextToSpeechBuilder":
        self._check_usable()
        setattr(self, attr, value)
        return self

    def set_text(self, text: str) -> "TextToSpeechBuilder":
        return self._store("_text", text)

    def set_voice(self, voice: VoiceSelector) -> "TextToSpeechBuilder":
        """Select a catalog voice or a raw voice id (e.g. a cloned voice)."""
        return self._store("_voice", voice)

    def set_model(self, model: ModelSelector) -> "TextToSpeechBuilder":
        """Select a catalog model or a raw model id."""
        return self._store("_model", model)

    def set_voice_settings(self, settings: VoiceSettings) -> "TextToSpeechBuilder":
        """Replace the voice settings wholesale; fields are not merged."""
        return self._store("_voice_settings", settings)

    def set_output_format(self, output_format: str) -> "TextToSpeechBuilder":
        return self._store("_output_format", output_format)

    def set_language_code(self, language_code: str) -> "TextToSpeechBuilder":
        """Bias pronunciation towards a language (ISO 639-1).

        The text is not translated.
        """
        return self._store("_language_code", language_code)

    def set_seed(self, seed: int) -> "TextToSpeechBuilder":
        return self._store("_seed", seed)

    def set_previous_text(self, previous_text: str) -> "TextToSpeechBuilder":
        return self._store("_previous_text", previous_text)

    def set_next_text(self, next_text: str) -> "TextToSpeechBuilder":
        return self._store("_next_text", next_text)

    def set_previous_request_ids(
        self, request_ids: Iterable[str]
    ) -> "TextToSpeechBuilder":
        return self._store("_previous_request_ids", list(request_ids))

    def set_next_request_ids(self, request_ids: Iterable[str]) -> "TextToSpeechBuilder":
        return self._store("_next_request_ids", list(request_ids))

    def set_text_normalization(
        self, mode: TextNormalization | str
    ) -> "TextToSpeechBuilder":
        return self._store("_text_normalization", mode)

    def set_language_normalization(self, enabled: bool) -> "TextToSpeechBuilder":
        return self._store("_language_normalization", enabled)

    def build(self) -> TTSRequest:
        """Validate the accumulated configuration and freeze it.

        Returns:
            The request that ``execute()`` would send

        Raises:
            TTSConfigError: If any field is missing or out of range
            BuilderConsumedError: If the builder was already executed
        """
        self._check_usable()

        text = self._text
        if not isinstance(text, str) or not text.strip():
            raise TTSConfigError("Text cannot be empty", field="text", value=text)

        if self._voice is None:
            raise TTSConfigError("A voice is required", field="voice")
        voice_id = resolve_voice_id(self._voice)
        if not isinstance(voice_id, str) or not voice_id.strip():
            raise TTSConfigError(
                "voice id cannot be empty", field="voice", value=voice_id
            )
        if voice_id.strip() in (".", ".."):
            raise TTSConfigError(
                f"voice id cannot be a dot segment, got {voice_id!r}",
                field="voice",
                value=voice_id,
            )

        model_id = resolve_model_id(
            self._model if self._model is not None else DEFAULT_MODEL
        )
        if not isinstance(model_id, str) or not model_id.strip():
            raise TTSConfigError(
                "model id cannot be empty", field="model_id", value=model_id
            )

        output_format = (
            self._output_format
            if self._output_format is not None
            else DEFAULT_OUTPUT_FORMAT
        )
        if not isinstance(output_format, str) or not output_format.strip():
            raise TTSConfigError(
                "output format cannot be empty",
                field="output_format",
                value=output_format,
            )

        if self._voice_settings is not None:
            self._voice_settings.validate()

        if self._language_code is not None and (
            not isinstance(self._language_code, str)
            or not _LANGUAGE_CODE.match(self._language_code)
        ):
            raise TTSConfigError(
                f"language_code must be a 2 or 3 letter code, got {self._language_code!r}",
                field="language_code",
                value=self._language_code,
            )

        if self._seed is not None and (
            isinstance(self._seed, bool)
            or not isinstance(self._seed, int)
            or not 0 <= self._seed <= SEED_MAX
        ):
            raise TTSConfigError(
                f"seed must be an integer between 0 and {SEED_MAX}, got {self._seed!r}",
                field="seed",
                value=self._seed,
            )

        for name, value in (
            ("previous_text", self._previous_text),
            ("next_text", self._next_text),
        ):
            if value is not None and not isinstance(value, str):
                raise TTSConfigError(
                    f"{name} must be a string, got {value!r}", field=name, value=value
                )

        previous_request_ids = _check_request_ids(
            "previous_request_ids", self._previous_request_ids
        )
        next_request_ids = _check_request_ids(
            "next_request_ids", self._next_request_ids
        )

        normalization = None
        if self._text_normalization is not None:
            try:
                normalization = TextNormalization(self._text_normalization)
            except ValueError:
                raise TTSConfigError(
                    "apply_text_normalization must be one of auto, on, off, "
                    f"got {self._text_normalization!r}",
                    field="apply_text_normalization",
                    value=self._text_normalization,
                ) from None

        if self._language_normalization is not None and not isinstance(
            self._language_normalization, bool
        ):
            raise TTSConfigError(
                "apply_language_text_normalization must be a bool, "
                f"got {self._language_normalization!r}",
                field="apply_language_text_normalization",
                value=self._language_normalization,
            )

        return TTSRequest(
            text=text,
            voice_id=voice_id,
            model_id=model_id,
            output_format=output_format,
            voice_settings=self._voice_settings,
            language_code=self._language_code,
            seed=self._seed,
            previous_text=self._previous_text,
            next_text=self._next_text,
            previous_request_ids=previous_request_ids,
            next_request_ids=next_request_ids,
            apply_text_normalization=normalization,
            apply_language_text_normalization=self._language_normalization,
        )

    async def execute(self) -> bytes:
        """Validate, serialize and send the request.

        No network call is made when validation fails. The builder is
        consumed either way.

        Returns:
            Raw audio bytes in the requested output format

        Raises:
            TTSConfigError: If the configuration is invalid
            TTSTransportError: If no HTTP response was received
            TTSAPIError: If the API answered with a non-2xx status or no audio
            BuilderConsumedError: If the builder was already executed
        """
        self._check_usable()
        try:
            request = self.build()
            return await self._client.execute_tts(request)
        finally:
            self._consumed = True


def _check_request_ids(
    name: str, request_ids: list[str] | None
) -> tuple[str, ...] | None:
    if request_ids is None:
        return None
    if len(request_ids) > MAX_REQUEST_IDS:
        raise TTSConfigError(
            f"{name} accepts at most {MAX_REQUEST_IDS} ids, got {len(request_ids)}",
            field=name,
            value=request_ids,
        )
    for request_id in request_ids:
        if not isinstance(request_id, str) or not request_id.strip():
            raise TTSConfigError(
                f"{name} must contain non-empty strings, got {request_id!r}",
                field=name,
                value=request_ids,
            )
    return tuple(request_ids)
