"""Synthesize with tuned voice settings and continuity hints."""

import asyncio
import os
import sys

from elevenlabs_tts import ElevenLabsClient, TextNormalization, VoiceSettings
from elevenlabs_tts.audio import default_output_path, save_audio
from elevenlabs_tts.catalog import models, voices


async def main() -> None:
    if not os.getenv("ELEVENLABS_API_KEY"):
        sys.exit("Please set ELEVENLABS_API_KEY environment variable")

    client = ElevenLabsClient()

    print(f"Converting text to speech with {voices.CHARLOTTE.name}...")
    prompt = (
        "Life feels lighter when you slow down, take a deep breath, "
        "and notice the small details around you."
    )
    audio = await (
        client.text_to_speech(prompt)
        .set_voice(voices.CHARLOTTE)
        .set_model(models.ELEVEN_V3)
        # v3 only accepts stability values of 0.0, 0.5 or 1.0
        .set_voice_settings(VoiceSettings(stability=1.0, similarity_boost=0.9))
        .set_output_format("mp3_44100_192")
        .set_next_text("Then carry that calm into the rest of your day.")
        .set_text_normalization(TextNormalization.AUTO)
        .set_seed(42)
        .execute()
    )
    print(f"Generated {len(audio)} bytes of audio")

    path = save_audio(audio, default_output_path("outputs", "mp3_44100_192"))
    print(f"Audio saved to {path}")


if __name__ == "__main__":
    asyncio.run(main())
