"""Pytest configuration and fixtures for elevenlabs_tts tests."""

import json
import sys
from collections.abc import Callable, Generator
from pathlib import Path

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture(autouse=True)
def isolate_config(monkeypatch, tmp_path: Path) -> Generator[Path]:
    """Point config loading at a per-test directory and clear env overrides."""
    import elevenlabs_tts.config as config

    config_dir = tmp_path / "config"
    monkeypatch.setattr(config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config, "CONFIG_PATH", config_dir / "config.toml")
    for name in (
        "ELEVENLABS_BASE_URL",
        "ELEVENLABS_TIMEOUT",
        "ELEVENLABS_TTS_VOICE",
        "ELEVENLABS_TTS_MODEL",
        "ELEVENLABS_TTS_OUTPUT_FORMAT",
        "ELEVENLABS_TTS_OUTPUT_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    config.reset_config()

    yield config_dir

    config.reset_config()


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def audio_transport() -> RecordingTransport:
    """Transport double answering every request with fake MP3 bytes."""
    return RecordingTransport(
        lambda request: httpx.Response(
            200, content=b"ID3fake-audio", headers={"content-type": "audio/mpeg"}
        )
    )


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    """Build a transport double answering with a fixed status and body."""

    def _make(
        status_code: int, content: bytes = b"", headers: dict | None = None
    ) -> RecordingTransport:
        return RecordingTransport(
            lambda request: httpx.Response(
                status_code, content=content, headers=headers or {}
            )
        )

    return _make
