"""Audio output package for elevenlabs_tts.

This package writes synthesized audio bytes to disk.
"""

from .storage import default_output_path, save_audio

__all__ = ["default_output_path", "save_audio"]
