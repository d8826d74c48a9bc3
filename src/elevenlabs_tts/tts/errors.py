"""Custom TTS exceptions."""

from typing import Any


class TTSError(Exception):
    """Base exception for TTS-related errors."""

    def __init__(
        self, message: str, original_error: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_error = original_error


class TTSConfigError(TTSError):
    """Exception raised when a request configuration is invalid.

    Always detected locally, before any network access. ``field`` names the
    offending parameter and ``value`` carries the rejected value.
    """

    def __init__(
        self, message: str, field: str | None = None, value: Any = None
    ) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class TTSAuthError(TTSError):
    """Exception raised when no API key is available to the client."""

    pass


class TTSTransportError(TTSError):
    """Exception raised when the request never got an HTTP response.

    This typically occurs when:
    - The connection is refused or DNS resolution fails
    - The request times out
    - The connection drops mid-response

    The underlying httpx exception is kept in ``original_error``.
    """

    pass


class TTSAPIError(TTSError):
    """Exception raised when the API answers with a non-2xx status.

    ``status_code`` and ``body`` are the remote status and response text,
    unchanged.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str = "",
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)
        self.status_code = status_code
        self.body = body


class TTSUnauthorizedError(TTSAPIError):
    """The API rejected the API key (401)."""

    pass


class TTSQuotaExceededError(TTSAPIError):
    """The account does not have enough credits for the request (402)."""

    pass


class TTSRateLimitError(TTSAPIError):
    """Too many requests (429).

    ``retry_after`` holds the Retry-After header in seconds when the
    service sent one.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str = "",
        retry_after: int | None = None,
    ) -> None:
        super().__init__(message, status_code, body)
        self.retry_after = retry_after


class BuilderConsumedError(RuntimeError):
    """A request builder was used again after ``execute``."""

    pass
