"""Write synthesized audio to files."""

import time
from pathlib import Path

from ..catalog import file_extension


def default_output_path(directory: str | Path, output_format: str) -> Path:
    """Build a timestamped output path such as ``outputs/1718000000.mp3``.

    Args:
        directory: Directory the file goes into
        output_format: Output format token, used to pick the file suffix
    """
    return Path(directory) / f"{int(time.time())}{file_extension(output_format)}"


def save_audio(audio_data: bytes, filepath: str | Path) -> Path:
    """Save audio bytes to a file, creating parent directories.

    Args:
        audio_data: Audio data to save.
        filepath: Path where the audio file should be saved.

    Returns:
        The path written to.

    Raises:
        ValueError: If no audio data provided.
        OSError: If file cannot be written.
    """
    if not audio_data:
        raise ValueError("No audio data provided")

    filepath = Path(filepath)

    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        filepath.write_bytes(audio_data)
    except OSError as e:
        raise OSError(f"Failed to save audio to {filepath}: {e}") from e

    return filepath
