"""SDK exception hierarchy."""

from __future__ import annotations

import httpx

from otakugifs.status import StatusClass, classify_status


class OtakuGifsError(Exception):
    """Base class for every error raised by the SDK."""


class OtakuGifsNetworkError(OtakuGifsError):
    """Raised when a transport-level error occurs (connection refused, timeout, cancellation)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class OtakuGifsDecodeError(OtakuGifsError):
    """Raised when a successful response body does not have the expected shape."""


class OtakuGifsInvalidStateError(OtakuGifsError):
    """Raised when a request builder is executed before it is complete."""


class OtakuGifsHTTPError(OtakuGifsError):
    """Raised when the API returns a non-2xx response."""

    def __init__(
        self,
        status: int,
        reason: str = "",
        response: httpx.Response | None = None,
    ) -> None:
        self.status = status
        self.reason = reason
        self.response = response
        super().__init__(f"API request failed with status {status} ({reason})")

    @classmethod
    def from_response(cls, response: httpx.Response) -> OtakuGifsHTTPError:
        """Build the error matching the response's status class."""
        kind = _ERROR_CLASSES.get(classify_status(response.status_code), OtakuGifsUnclassifiedError)
        return kind(
            status=response.status_code,
            reason=response.reason_phrase,
            response=response,
        )

    @property
    def status_code(self) -> int:
        return self.status


class OtakuGifsClientError(OtakuGifsHTTPError):
    """4xx response."""


class OtakuGifsServerError(OtakuGifsHTTPError):
    """5xx response."""


class OtakuGifsUnclassifiedError(OtakuGifsHTTPError):
    """Non-success response outside the 4xx and 5xx ranges."""


_ERROR_CLASSES: dict[StatusClass, type[OtakuGifsHTTPError]] = {
    StatusClass.client_error: OtakuGifsClientError,
    StatusClass.server_error: OtakuGifsServerError,
}
