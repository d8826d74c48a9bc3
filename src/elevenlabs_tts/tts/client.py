"""TTS client for the ElevenLabs text-to-speech HTTP API."""

import logging
import os

import httpx

from .builder import TextToSpeechBuilder
from .errors import (
    TTSAPIError,
    TTSAuthError,
    TTSQuotaExceededError,
    TTSRateLimitError,
    TTSTransportError,
    TTSUnauthorizedError,
)
from .models import TTSRequest

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.elevenlabs.io/v1"
DEFAULT_TIMEOUT = 30.0
API_KEY_HEADER = "xi-api-key"


class ElevenLabsClient:
    """Client for the ElevenLabs text-to-speech API.

    Each request opens its own httpx.AsyncClient, so one client instance can
    serve any number of concurrent requests without shared state.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | httpx.Timeout | None = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: ElevenLabs API key. If not provided, reads from
                    ELEVENLABS_API_KEY environment variable.
            base_url: API root, override for testing or enterprise endpoints
            timeout: Timeout handed to httpx (None disables it)
            transport: Optional httpx transport, e.g. httpx.MockTransport

        Raises:
            TTSAuthError: If API key is not provided.
        """
        self._api_key = api_key or os.getenv("ELEVENLABS_API_KEY")
        if not self._api_key:
            raise TTSAuthError(
                "ElevenLabs API key not found. Set ELEVENLABS_API_KEY environment "
                "variable or provide api_key parameter."
            )

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def text_to_speech(self, text: str) -> TextToSpeechBuilder:
        """Start building a text-to-speech request for ``text``."""
        return TextToSpeechBuilder(self, text)

    async def execute_tts(self, request: TTSRequest) -> bytes:
        """Send a validated request and return the audio bytes.

        Args:
            request: Request produced by TextToSpeechBuilder.build()

        Returns:
            Response body, unmodified

        Raises:
            TTSTransportError: If the request failed before a response arrived
            TTSAPIError: If the API answered with a non-2xx status or no audio
        """
        headers = {
            API_KEY_HEADER: self._api_key,
            "Content-Type": "application/json",
        }

        logger.debug(
            f"POST {request.path} model={request.model_id} "
            f"format={request.output_format} chars={len(request.text)}"
        )

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as http:
                response = await http.post(
                    request.path,
                    params=request.params,
                    headers=headers,
                    content=request.to_json(),
                )
        except httpx.TimeoutException as e:
            raise TTSTransportError(f"Request timed out: {e}", e) from e
        except httpx.TransportError as e:
            raise TTSTransportError(f"Request failed: {e}", e) from e

        if response.is_success:
            if not response.content:
                raise TTSAPIError(
                    "No audio data received from API", response.status_code, ""
                )
            logger.debug(
                f"Received {len(response.content)} bytes "
                f"({response.headers.get('content-type', 'unknown type')})"
            )
            return response.content

        raise _api_error(response)


def _api_error(response: httpx.Response) -> TTSAPIError:
    """Map a non-2xx response to the matching TTSAPIError subclass."""
    status = response.status_code
    body = response.text
    message = f"API error ({status}): {body}"

    if status == 401:
        return TTSUnauthorizedError(message, status, body)
    if status == 402:
        return TTSQuotaExceededError(message, status, body)
    if status == 429:
        return TTSRateLimitError(
            message, status, body, _retry_after(response.headers.get("retry-after"))
        )
    return TTSAPIError(message, status, body)


def _retry_after(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None
