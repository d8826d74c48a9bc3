"""Synthesis models known to the ElevenLabs API."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StaticModel:
    """A named synthesis model and its wire identifier."""

    model_id: str
    name: str

    @property
    def id(self) -> str:
        return self.model_id


ELEVEN_V3 = StaticModel("eleven_v3", "Eleven v3")
ELEVEN_FLASH_V2_5 = StaticModel("eleven_flash_v2_5", "Eleven Flash v2.5")
ELEVEN_FLASH_V2 = StaticModel("eleven_flash_v2", "Eleven Flash v2")
ELEVEN_TURBO_V2_5 = StaticModel("eleven_turbo_v2_5", "Eleven Turbo v2.5")
ELEVEN_TURBO_V2 = StaticModel("eleven_turbo_v2", "Eleven Turbo v2")
ELEVEN_MULTILINGUAL_V2 = StaticModel("eleven_multilingual_v2", "Eleven Multilingual v2")
ELEVEN_MULTILINGUAL_V1 = StaticModel("eleven_multilingual_v1", "Eleven Multilingual v1")
ELEVEN_MULTILINGUAL_STS_V2 = StaticModel(
    "eleven_multilingual_sts_v2", "Eleven Multilingual v2 (speech-to-speech)"
)
ELEVEN_ENGLISH_STS_V2 = StaticModel(
    "eleven_english_sts_v2", "Eleven English v2 (speech-to-speech)"
)
ELEVEN_MONOLINGUAL_V1 = StaticModel("eleven_monolingual_v1", "Eleven English v1")

ALL_MODELS: tuple[StaticModel, ...] = (
    ELEVEN_V3,
    ELEVEN_FLASH_V2_5,
    ELEVEN_FLASH_V2,
    ELEVEN_TURBO_V2_5,
    ELEVEN_TURBO_V2,
    ELEVEN_MULTILINGUAL_V2,
    ELEVEN_MULTILINGUAL_V1,
    ELEVEN_MULTILINGUAL_STS_V2,
    ELEVEN_ENGLISH_STS_V2,
    ELEVEN_MONOLINGUAL_V1,
)

# Used when a request does not select a model
DEFAULT_MODEL = ELEVEN_MULTILINGUAL_V2


def get_model(name_or_id: str) -> StaticModel | None:
    """Look up a model by wire identifier or display name (case-insensitive)."""
    key = name_or_id.strip().lower()
    for model in ALL_MODELS:
        if key in (model.model_id, model.name.lower()):
            return model
    return None
