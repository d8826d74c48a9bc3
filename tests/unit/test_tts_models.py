"""Unit tests for TTS data models validation logic."""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from elevenlabs_tts.catalog import models, voices
from elevenlabs_tts.tts.errors import TTSConfigError
from elevenlabs_tts.tts.models import (
    TextNormalization,
    TTSRequest,
    VoiceSettings,
    resolve_model_id,
    resolve_voice_id,
)


class TestVoiceSettings:
    """Test VoiceSettings validation logic."""

    def test_default_voice_settings_are_unset(self) -> None:
        """Test creating VoiceSettings leaves every field unset."""
        settings = VoiceSettings()

        assert settings.stability is None
        assert settings.similarity_boost is None
        assert settings.style is None
        assert settings.use_speaker_boost is None
        assert settings.speed is None
        assert settings.to_payload() == {}

    def test_out_of_range_values_are_kept_until_validation(self) -> None:
        """Test construction never clamps or raises."""
        settings = VoiceSettings(stability=1.5)

        assert settings.stability == 1.5

    def test_boundary_values_pass(self) -> None:
        """Test closed interval boundaries are valid."""
        VoiceSettings(stability=0.0, similarity_boost=1.0, style=0.0, speed=0.7).validate()
        VoiceSettings(stability=1.0, similarity_boost=0.0, style=1.0, speed=1.2).validate()

    def test_integer_values_pass(self) -> None:
        """Test 0 and 1 given as ints are accepted."""
        VoiceSettings(stability=1, similarity_boost=0).validate()

    def test_stability_above_range_raises_error(self) -> None:
        """Test that stability above 1.0 raises TTSConfigError."""
        with pytest.raises(
            TTSConfigError, match="stability must be between 0.0 and 1.0, got 1.1"
        ) as exc_info:
            VoiceSettings(stability=1.1).validate()

        assert exc_info.value.field == "stability"
        assert exc_info.value.value == 1.1

    def test_speed_below_range_raises_error(self) -> None:
        """Test that speed below 0.7 raises TTSConfigError."""
        with pytest.raises(TTSConfigError, match="speed must be between 0.7 and 1.2"):
            VoiceSettings(speed=0.69).validate()

    def test_non_numeric_value_raises_error(self) -> None:
        """Test strings and bools are not accepted as numbers."""
        with pytest.raises(TTSConfigError, match="style must be a number"):
            VoiceSettings(style="high").validate()  # type: ignore[arg-type]
        with pytest.raises(TTSConfigError, match="stability must be a number"):
            VoiceSettings(stability=True).validate()

    def test_non_bool_speaker_boost_raises_error(self) -> None:
        """Test use_speaker_boost must be a real bool."""
        with pytest.raises(TTSConfigError, match="use_speaker_boost"):
            VoiceSettings(use_speaker_boost="yes").validate()  # type: ignore[arg-type]

    def test_payload_contains_only_set_fields(self) -> None:
        """Test to_payload omits unset fields, keeping False and 0.0."""
        settings = VoiceSettings(stability=0.0, use_speaker_boost=False)

        assert settings.to_payload() == {"stability": 0.0, "use_speaker_boost": False}


class TestSelectors:
    """Test catalog entry / raw id resolution."""

    def test_resolve_catalog_voice(self) -> None:
        assert resolve_voice_id(voices.RACHEL) == "21m00Tcm4TlvDq8ikWAM"

    def test_resolve_raw_voice(self) -> None:
        assert resolve_voice_id("custom") == "custom"

    def test_resolve_catalog_model(self) -> None:
        assert resolve_model_id(models.ELEVEN_V3) == "eleven_v3"

    def test_resolve_raw_model(self) -> None:
        assert resolve_model_id("eleven_next") == "eleven_next"


class TestTTSRequest:
    """Test TTSRequest serialization."""

    def test_body_key_order_is_stable(self) -> None:
        """Test body keys follow a fixed order regardless of construction."""
        request = TTSRequest(
            text="Hi",
            voice_id="v",
            model_id="m",
            output_format="mp3_44100_128",
            seed=7,
            language_code="de",
            apply_text_normalization=TextNormalization.AUTO,
        )

        assert list(request.body()) == [
            "text",
            "model_id",
            "language_code",
            "seed",
            "apply_text_normalization",
        ]

    def test_to_json_is_utf8_without_escaping(self) -> None:
        """Test non-ASCII text is sent as UTF-8."""
        request = TTSRequest(
            text="Grüße", voice_id="v", model_id="m", output_format="mp3_44100_128"
        )

        assert request.to_json() == '{"text": "Grüße", "model_id": "m"}'.encode()

    def test_no_nulls_in_body(self) -> None:
        """Test unset optional fields never serialize as null."""
        request = TTSRequest(
            text="Hi", voice_id="v", model_id="m", output_format="pcm_16000"
        )

        assert b"null" not in request.to_json()

    def test_path_escapes_voice_id_as_one_segment(self) -> None:
        """Test reserved URL characters in a raw voice id are percent-escaped."""
        request = TTSRequest(
            text="Hi", voice_id="a/b?c#d", model_id="m", output_format="pcm_16000"
        )

        assert request.path == "/text-to-speech/a%2Fb%3Fc%23d"
