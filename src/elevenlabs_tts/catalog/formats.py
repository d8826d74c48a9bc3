"""Output format tokens accepted by the text-to-speech endpoint.

Tokens are formatted as codec_samplerate[_bitrate], e.g. ``mp3_22050_32``.
MP3 at 192kbps and PCM at 44.1kHz require paid tiers on the service side.
"""

OUTPUT_FORMATS: tuple[str, ...] = (
    "mp3_22050_32",
    "mp3_44100_32",
    "mp3_44100_64",
    "mp3_44100_96",
    "mp3_44100_128",
    "mp3_44100_192",
    "pcm_8000",
    "pcm_16000",
    "pcm_22050",
    "pcm_24000",
    "pcm_44100",
    "pcm_48000",
    "ulaw_8000",
    "alaw_8000",
    "opus_48000_32",
    "opus_48000_64",
    "opus_48000_96",
)

DEFAULT_OUTPUT_FORMAT = "mp3_44100_128"

_EXTENSIONS = {
    "mp3": ".mp3",
    "pcm": ".pcm",
    "ulaw": ".ulaw",
    "alaw": ".alaw",
    "opus": ".opus",
}


def file_extension(output_format: str) -> str:
    """Return the file suffix for an output format token.

    Unknown codecs fall back to ``.bin``.
    """
    codec = output_format.split("_", 1)[0].lower()
    return _EXTENSIONS.get(codec, ".bin")
