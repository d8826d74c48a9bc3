"""Static catalogs of ElevenLabs voices, models and output formats.

These tables are plain lookup data. Identifiers that are not listed here can
still be passed to the request builder as free-form strings.
"""

from .formats import DEFAULT_OUTPUT_FORMAT, OUTPUT_FORMATS, file_extension
from .models import ALL_MODELS, DEFAULT_MODEL, StaticModel, get_model
from .voices import ALL_VOICES, StaticVoice, get_voice

__all__ = [
    "ALL_MODELS",
    "ALL_VOICES",
    "DEFAULT_MODEL",
    "DEFAULT_OUTPUT_FORMAT",
    "OUTPUT_FORMATS",
    "StaticModel",
    "StaticVoice",
    "file_extension",
    "get_model",
    "get_voice",
]
