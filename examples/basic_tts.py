"""Synthesize a sentence with a catalog voice and save it under outputs/."""

import asyncio
import os
import sys

from elevenlabs_tts import ElevenLabsClient
from elevenlabs_tts.audio import default_output_path, save_audio
from elevenlabs_tts.catalog import models, voices


async def main() -> None:
    if not os.getenv("ELEVENLABS_API_KEY"):
        sys.exit("Please set ELEVENLABS_API_KEY environment variable")

    print("Creating ElevenLabs client...")
    client = ElevenLabsClient()

    print(f"Converting text to speech with {voices.ARNOLD.name}...")
    prompt = (
        "Happiness often hides in ordinary moments, waiting for you to pause, "
        "smile, and simply enjoy being present."
    )
    audio = await (
        client.text_to_speech(prompt)
        .set_voice(voices.ARNOLD)
        .set_model(models.ELEVEN_TURBO_V2_5)
        .execute()
    )
    print(f"Generated {len(audio)} bytes of audio")

    path = save_audio(audio, default_output_path("outputs", "mp3_44100_128"))
    print(f"Audio saved to {path}")


if __name__ == "__main__":
    asyncio.run(main())
